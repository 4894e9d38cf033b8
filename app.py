import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

from use_cases import auth_flow, bootstrap
from utils import session_manager
from views import cookie_view, lookup_view, sidebar_view

# --- PAGE SETUP ---
st.set_page_config(page_title="Cek Sekolah", layout="wide", initial_sidebar_state="expanded")

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok"})
    st.stop()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.stop()

# --- GATE ---
context = session_manager.get_app_context()
gate_result = auth_flow.ensure_gate(context.gate)
if gate_result.status == "STOP":
    cookie_view.render_cookie_prompt()
    st.stop()

# === MAIN UI ===
sidebar_view.render_sidebar()
st.title("🏫 Cek Data Sekolah")
lookup_view.render_lookup()
