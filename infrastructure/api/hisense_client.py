import asyncio
import logging
from typing import Optional

import requests

from infrastructure.observability import mask_token

log = logging.getLogger(__name__)


class HisenseVerifierClient:
    """Checks a Hisense session cookie against the remote verifier.

    Returns the verifier's display name, or None for any kind of rejection.
    Callers treat every rejection the same way, so the cause is only logged.
    """

    def __init__(self, validate_url: Optional[str], identity_field: str = "name", timeout: float = 10):
        self.validate_url = validate_url
        self.identity_field = identity_field
        self.timeout = timeout

    def validate_sync(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        if not self.validate_url:
            log.warning("⚠️ No verifier URL configured; rejecting cookie")
            return None

        try:
            resp = requests.post(
                self.validate_url,
                json={"cookie": token},
                timeout=self.timeout,
            )
        except Exception as e:
            log.warning(f"⚠️ Verifier unreachable for cookie {mask_token(token)}: {e}")
            return None

        if not 200 <= resp.status_code < 300:
            log.warning(f"⚠️ Verifier rejected cookie {mask_token(token)}: HTTP {resp.status_code}")
            return None

        try:
            body = resp.json()
        except ValueError:
            log.warning("⚠️ Verifier returned a non-JSON body")
            return None

        name = body.get(self.identity_field) if isinstance(body, dict) else None
        if not isinstance(name, str) or not name.strip():
            log.warning(f"⚠️ Verifier response has no usable '{self.identity_field}' field")
            return None

        return name.strip()

    async def validate(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        return await asyncio.to_thread(self.validate_sync, token)
