"""Startup orchestration: wire adapters and run the mount-time gate check."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import auth
from config import Settings, load_settings
from infrastructure.api.hisense_client import HisenseVerifierClient
from infrastructure.api.school_data_client import SchoolDataClient
from use_cases.app_context import AppContext
from use_cases.auth_flow import AuthGateController
from use_cases.query_flow import QueryOrchestrator
from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]


def build_app_context(settings: Optional[Settings] = None) -> AppContext:
    settings = settings or load_settings()
    store = auth.get_credential_repo(settings.credentials_db, settings.credential_key)
    validator = HisenseVerifierClient(
        settings.validate_url,
        identity_field=settings.identity_field,
        timeout=settings.http_timeout,
    )
    fetcher = SchoolDataClient(settings.school_data_url, timeout=settings.http_timeout)
    gate = AuthGateController(store, validator)
    orchestrator = QueryOrchestrator(store, validator, fetcher, gate)
    return AppContext(store, gate, orchestrator)


def run_startup(settings: Optional[Settings] = None) -> StartupResult:
    """Build the session's context once and run the gate check on first mount."""
    executed_steps = []

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    if session_manager.st.session_state.app_context is None:
        session_manager.st.session_state.app_context = build_app_context(settings)
        executed_steps.append("build_app_context")

    if not session_manager.st.session_state.gate_checked:
        context = session_manager.get_app_context()
        gate_state = asyncio.run(context.check_gate())
        session_manager.st.session_state.gate_checked = True
        executed_steps.append("check_gate")
        log.info(f"Mount-time gate check finished: {gate_state}")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
