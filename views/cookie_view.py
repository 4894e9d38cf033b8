import asyncio

import streamlit as st

from use_cases.gate_models import MSG_INVALID_CREDENTIAL
from utils import session_manager


def render_cookie_prompt():
    """Blocking prompt shown while the gate is open. Replaces all other content."""
    context = session_manager.get_app_context()

    st.title("🔐 Masukkan PHPSESSID")
    with st.form("cookie_form", clear_on_submit=True):
        cookie = st.text_input("PHPSESSID", type="password")
        submitted = st.form_submit_button("Simpan")
        if submitted:
            if not cookie.strip():
                st.session_state.cookie_error = "Cookie tidak boleh kosong."
            else:
                with st.spinner("Memeriksa cookie..."):
                    gate_state = asyncio.run(context.credential_entered(cookie))
                if gate_state == "CLOSED":
                    st.session_state.cookie_error = None
                    st.rerun()
                st.session_state.cookie_error = MSG_INVALID_CREDENTIAL

    if st.session_state.cookie_error:
        st.error(st.session_state.cookie_error)
    st.caption("Cookie Hisense diperlukan untuk mengambil data.")
