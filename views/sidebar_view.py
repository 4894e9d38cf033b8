import streamlit as st

from utils import session_manager


def render_sidebar():
    context = session_manager.get_app_context()
    with st.sidebar:
        st.markdown("### 🏫 Cek Sekolah")
        if context.identity:
            st.caption(f"Verifikator: **{context.identity}**")

        if st.button("🔄 Periksa ulang cookie", use_container_width=True):
            session_manager.reset_gate_check()
            st.rerun()

        if st.button("🚪 Ganti cookie", use_container_width=True):
            context.forget_credential()
            st.rerun()
