"""Query orchestration: re-validate the cookie, then fetch school data."""

import asyncio
import logging
import time
from typing import Optional, Protocol

from use_cases.auth_flow import AuthGateController, CredentialStore, CredentialValidator
from use_cases.gate_models import (
    MSG_BUSY,
    MSG_EMPTY_KEY,
    MSG_INVALID_CREDENTIAL,
    MSG_NO_CREDENTIAL,
    MSG_UNKNOWN,
    QueryResult,
    QueryState,
    RemoteQueryError,
)

log = logging.getLogger(__name__)


class DataFetcher(Protocol):
    async def fetch(self, key: str, token: str) -> QueryResult: ...


class QueryOrchestrator:
    """Runs one query at a time and exposes its state to the UI.

    A submit() issued while another is still validating or fetching is
    refused with a BUSY failure; the in-flight call keeps the live state.
    """

    def __init__(
        self,
        store: CredentialStore,
        validator: CredentialValidator,
        fetcher: DataFetcher,
        gate: AuthGateController,
    ):
        self.store = store
        self.validator = validator
        self.fetcher = fetcher
        self.gate = gate
        self.state = QueryState.idle()
        self.query_key = ""
        self.attempts = 0
        self.last_duration_ms: Optional[float] = None

    def set_query_key(self, key: str) -> None:
        self.query_key = key

    async def submit(self, key: Optional[str] = None) -> QueryState:
        if self.state.is_loading:
            log.warning("Query refused: previous request still in flight")
            return QueryState.failed("BUSY", MSG_BUSY)

        if key is not None:
            self.query_key = key
        key = (self.query_key or "").strip()

        if not key:
            self.state = QueryState.failed("EMPTY_KEY", MSG_EMPTY_KEY)
            return self.state

        self.attempts += 1
        self.state = QueryState.validating()
        started = time.perf_counter()
        try:
            self.state = await self._run(key)
        except asyncio.CancelledError:
            self.state = QueryState.failed("UNKNOWN", MSG_UNKNOWN)
            raise
        except Exception as e:
            log.exception(f"❌ Unexpected failure while querying q={key}")
            self.state = QueryState.failed("UNKNOWN", str(e) or MSG_UNKNOWN)
        finally:
            if self.state.is_loading:
                self.state = QueryState.failed("UNKNOWN", MSG_UNKNOWN)
            self.last_duration_ms = (time.perf_counter() - started) * 1000

        log.info(f"Query q={key} settled as {self.state.status} in {self.last_duration_ms:.0f} ms")
        return self.state

    async def _run(self, key: str) -> QueryState:
        token = self.store.get()
        if not token:
            self.gate.open_gate("query attempted without a stored cookie")
            return QueryState.failed("NO_CREDENTIAL", MSG_NO_CREDENTIAL)

        # Validated again on purpose: the cookie may have expired since the gate check.
        identity = await self.validator.validate(token)
        if not identity:
            self.gate.open_gate("cookie rejected at query time")
            return QueryState.failed("INVALID_CREDENTIAL", MSG_INVALID_CREDENTIAL)
        self.gate.record_identity(identity)

        self.state = QueryState.fetching()
        try:
            result = await self.fetcher.fetch(key, token)
        except RemoteQueryError as e:
            return QueryState.failed("REMOTE_ERROR", e.detail)
        return QueryState.succeeded(result)
