"""Shared application context handed to every view and script."""

from typing import Optional

from use_cases.auth_flow import AuthGateController, CredentialStore
from use_cases.gate_models import ErrorCause, QueryResult
from use_cases.query_flow import QueryOrchestrator


class AppContextNotInitializedError(RuntimeError):
    """Raised when the context is read before it has been installed."""


class AppContext:
    def __init__(self, store: CredentialStore, gate: AuthGateController, orchestrator: QueryOrchestrator):
        self.store = store
        self.gate = gate
        self.orchestrator = orchestrator

    @property
    def is_loading(self) -> bool:
        return self.orchestrator.state.is_loading

    @property
    def error_cause(self) -> Optional[ErrorCause]:
        return self.orchestrator.state.error

    @property
    def error(self) -> Optional[str]:
        cause = self.error_cause
        return cause.message if cause else None

    @property
    def result(self) -> Optional[QueryResult]:
        return self.orchestrator.state.result

    @property
    def query_key(self) -> str:
        return self.orchestrator.query_key

    def set_query_key(self, key: str) -> None:
        self.orchestrator.set_query_key(key)

    @property
    def show_gate(self) -> bool:
        return self.gate.show_prompt

    @property
    def identity(self) -> Optional[str]:
        return self.gate.identity

    async def submit(self):
        return await self.orchestrator.submit()

    async def check_gate(self):
        return await self.gate.check()

    async def credential_entered(self, token: str):
        return await self.gate.credential_entered(token)

    def forget_credential(self) -> None:
        self.store.clear()
        self.gate.open_gate("cookie removed by user")


_context: Optional[AppContext] = None


def install_app_context(context: AppContext) -> AppContext:
    global _context
    _context = context
    return context


def get_app_context() -> AppContext:
    if _context is None:
        raise AppContextNotInitializedError(
            "get_app_context() called before install_app_context(); run startup first"
        )
    return _context


def reset_app_context() -> None:
    global _context
    _context = None
