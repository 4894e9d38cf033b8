import streamlit as st

from use_cases.app_context import AppContext, AppContextNotInitializedError

"""
SESSION STATE CONTRACT

st.session_state keys (per browser session):

app_context: AppContext | None
    gate + query orchestrator for this session
    default: None
    owner: bootstrap

gate_checked: bool
    mount-time gate check already ran for this session
    default: False
    owner: bootstrap

cookie_error: str | None
    message shown under the cookie prompt after a rejected entry
    default: None
    owner: cookie_view
"""


def init_session_state():
    if 'app_context' not in st.session_state:
        st.session_state.app_context = None
    if 'gate_checked' not in st.session_state:
        st.session_state.gate_checked = False
    if 'cookie_error' not in st.session_state:
        st.session_state.cookie_error = None


def get_app_context() -> AppContext:
    context = st.session_state.get("app_context")
    if context is None:
        raise AppContextNotInitializedError(
            "get_app_context() called outside an initialized session; call bootstrap.run_startup() first"
        )
    return context


def reset_gate_check():
    st.session_state.gate_checked = False
