"""Authentication gate orchestration (application layer)."""

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Protocol

from use_cases.gate_models import GateState

log = logging.getLogger(__name__)

AuthFlowStatus = Literal["CONTINUE", "STOP"]


class CredentialStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class CredentialValidator(Protocol):
    async def validate(self, token: Optional[str]) -> Optional[str]: ...


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for auth flow orchestration."""

    status: AuthFlowStatus
    reason: str
    identity: Optional[str] = None


class AuthGateController:
    """Owns the OPEN/CLOSED gate in front of every data query.

    CLOSED holds only while the most recent validation (here or in the query
    orchestrator) succeeded. Nothing is cached between checks: every call
    goes back to the store and the remote verifier.
    """

    def __init__(self, store: CredentialStore, validator: CredentialValidator):
        self.store = store
        self.validator = validator
        self.gate: GateState = "OPEN"
        self.identity: Optional[str] = None
        self.checked = False

    @property
    def is_open(self) -> bool:
        return self.gate == "OPEN"

    @property
    def show_prompt(self) -> bool:
        return self.is_open

    def open_gate(self, reason: str) -> None:
        if self.gate != "OPEN" or self.identity is not None:
            log.warning(f"🔒 Gate opened: {reason}")
        self.gate = "OPEN"
        self.identity = None

    def record_identity(self, identity: str) -> None:
        if self.gate != "CLOSED" or self.identity != identity:
            log.info(f"🔓 Gate closed for verifier '{identity}'")
        self.gate = "CLOSED"
        self.identity = identity

    async def check(self) -> GateState:
        token = self.store.get()
        if not token:
            self.open_gate("no stored cookie")
        else:
            identity = await self.validator.validate(token)
            if identity:
                self.record_identity(identity)
            else:
                self.open_gate("stored cookie rejected")
        self.checked = True
        return self.gate

    async def credential_entered(self, token: str) -> GateState:
        """Persist a freshly entered cookie and re-run the full check."""
        token = (token or "").strip()
        if token:
            self.store.set(token)
        return await self.check()


def ensure_gate(controller: AuthGateController) -> AuthFlowResult:
    """Map the current gate state onto the CONTINUE/STOP control-flow contract."""
    if not controller.checked:
        return AuthFlowResult(status="STOP", reason="gate_not_checked")
    if controller.is_open:
        return AuthFlowResult(status="STOP", reason="auth_required")
    return AuthFlowResult(status="CONTINUE", reason="authenticated", identity=controller.identity)
