"""Gate and query state DTOs shared across application layers."""

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional

GateState = Literal["OPEN", "CLOSED"]
QueryStatus = Literal["IDLE", "VALIDATING", "FETCHING", "SUCCEEDED", "FAILED"]
ErrorKind = Literal[
    "EMPTY_KEY",
    "NO_CREDENTIAL",
    "INVALID_CREDENTIAL",
    "REMOTE_ERROR",
    "BUSY",
    "UNKNOWN",
]

MSG_EMPTY_KEY = "NPSN tidak boleh kosong."
MSG_NO_CREDENTIAL = "Cookie Hisense tidak ditemukan."
MSG_INVALID_CREDENTIAL = "Cookie Hisense kadaluarsa atau tidak valid."
MSG_REMOTE_FALLBACK = "Gagal mengambil data dari API."
MSG_BUSY = "Permintaan sebelumnya masih diproses."
MSG_UNKNOWN = "An unknown error occurred."

GATE_FORCING_KINDS = frozenset({"NO_CREDENTIAL", "INVALID_CREDENTIAL"})


class RemoteQueryError(Exception):
    """Structured failure reported by the school data API."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


@dataclass(frozen=True)
class ErrorCause:
    kind: ErrorKind
    message: str

    @property
    def forces_gate(self) -> bool:
        return self.kind in GATE_FORCING_KINDS


@dataclass(frozen=True)
class QueryResult:
    """Opaque downstream payload. Schema checks belong to the consumer."""

    payload: Dict[str, Any] = field(default_factory=dict)
    schema_version: int = 1

    @property
    def datadik(self) -> Dict[str, Any]:
        section = self.payload.get("datadik")
        return section if isinstance(section, dict) else {}

    @property
    def hisense(self) -> Dict[str, Any]:
        section = self.payload.get("hisense")
        return section if isinstance(section, dict) else {}


@dataclass(frozen=True)
class QueryState:
    status: QueryStatus = "IDLE"
    result: Optional[QueryResult] = None
    error: Optional[ErrorCause] = None

    @property
    def is_loading(self) -> bool:
        return self.status in ("VALIDATING", "FETCHING")

    @property
    def is_settled(self) -> bool:
        return self.status in ("SUCCEEDED", "FAILED")

    @classmethod
    def idle(cls) -> "QueryState":
        return cls()

    @classmethod
    def validating(cls) -> "QueryState":
        return cls(status="VALIDATING")

    @classmethod
    def fetching(cls) -> "QueryState":
        return cls(status="FETCHING")

    @classmethod
    def succeeded(cls, result: QueryResult) -> "QueryState":
        return cls(status="SUCCEEDED", result=result)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> "QueryState":
        return cls(status="FAILED", error=ErrorCause(kind=kind, message=message))
