import asyncio
import logging

import requests

from use_cases.gate_models import MSG_REMOTE_FALLBACK, QueryResult, RemoteQueryError

log = logging.getLogger(__name__)

DEFAULT_SCHOOL_DATA_URL = "https://owo-api-production.up.railway.app/"


def _extract_detail(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        return MSG_REMOTE_FALLBACK
    if not isinstance(body, dict):
        return MSG_REMOTE_FALLBACK
    detail = body.get("detail")
    if not detail:
        return MSG_REMOTE_FALLBACK
    return detail if isinstance(detail, str) else str(detail)


class SchoolDataClient:
    def __init__(self, endpoint: str = DEFAULT_SCHOOL_DATA_URL, timeout: float = 30):
        self.endpoint = endpoint
        self.timeout = timeout

    def fetch_sync(self, key: str, token: str) -> QueryResult:
        # Transport errors propagate; the orchestrator normalizes them.
        resp = requests.post(
            self.endpoint,
            json={"q": key, "cookie": token},
            timeout=self.timeout,
        )

        if not 200 <= resp.status_code < 300:
            detail = _extract_detail(resp)
            log.error(f"❌ School data API failed for q={key}: HTTP {resp.status_code} {detail}")
            raise RemoteQueryError(detail, status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            raise RemoteQueryError(MSG_REMOTE_FALLBACK, status_code=resp.status_code) from e
        if not isinstance(payload, dict):
            raise RemoteQueryError(MSG_REMOTE_FALLBACK, status_code=resp.status_code)

        log.info(f"✅ School data received for q={key} ({len(payload)} top-level keys)")
        return QueryResult(payload=payload)

    async def fetch(self, key: str, token: str) -> QueryResult:
        return await asyncio.to_thread(self.fetch_sync, key, token)
