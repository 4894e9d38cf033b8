import pytest

from use_cases.auth_flow import AuthGateController
from use_cases.gate_models import QueryResult, RemoteQueryError
from use_cases.query_flow import QueryOrchestrator


class MemoryStore:
    def __init__(self, token=None):
        self.token = token

    def get(self):
        return self.token or None

    def set(self, token):
        self.token = token

    def clear(self):
        self.token = None


class FakeValidator:
    """Accepts tokens listed in `valid`, mapping each to a verifier name."""

    def __init__(self, valid=None):
        self.valid = dict(valid or {})
        self.calls = []

    async def validate(self, token):
        self.calls.append(token)
        if not token:
            return None
        return self.valid.get(token)


class FakeFetcher:
    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else {"datadik": {"name": "SDN 1"}, "hisense": {}}
        self.error = error
        self.calls = []

    async def fetch(self, key, token):
        self.calls.append((key, token))
        if self.error is not None:
            raise self.error
        return QueryResult(payload=self.payload)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def validator():
    return FakeValidator({"good-cookie": "Alice"})


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def gate(store, validator):
    return AuthGateController(store, validator)


@pytest.fixture
def orchestrator(store, validator, fetcher, gate):
    return QueryOrchestrator(store, validator, fetcher, gate)


@pytest.fixture
def remote_error():
    return RemoteQueryError("NPSN not found", status_code=400)
