"""Application layer contracts for orchestrating high-level flows."""

from .app_context import AppContext, AppContextNotInitializedError, get_app_context, install_app_context, reset_app_context
from .auth_flow import AuthFlowResult, AuthFlowStatus, AuthGateController, ensure_gate
from .gate_models import ErrorCause, GateState, QueryResult, QueryState, RemoteQueryError
from .query_flow import QueryOrchestrator

__all__ = [
    "AppContext",
    "AppContextNotInitializedError",
    "AuthFlowResult",
    "AuthFlowStatus",
    "AuthGateController",
    "ErrorCause",
    "GateState",
    "QueryOrchestrator",
    "QueryResult",
    "QueryState",
    "RemoteQueryError",
    "ensure_gate",
    "get_app_context",
    "install_app_context",
    "reset_app_context",
]
