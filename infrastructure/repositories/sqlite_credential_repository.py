import sqlite3
import logging
from datetime import datetime, timezone
from typing import Optional

log = logging.getLogger(__name__)

DEFAULT_CREDENTIAL_KEY = "hisense_cookie"


class SQLiteCredentialRepository:
    """Durable single-slot storage for the Hisense session cookie.

    The token is opaque here: nothing is parsed or validated, the repository
    only persists whatever the credential-entry flow hands over.
    """

    def __init__(self, db_path: str, key: str = DEFAULT_CREDENTIAL_KEY):
        self.db_path = db_path
        self.key = key

    def _conn(self):
        return sqlite3.connect(self.db_path)

    def init_db(self):
        with self._conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS credentials (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

    def get(self) -> Optional[str]:
        with self._conn() as conn:
            row = conn.execute(
                "SELECT value FROM credentials WHERE key = ?", (self.key,)
            ).fetchone()
        if not row or not row[0]:
            return None
        return row[0]

    def set(self, token: str) -> None:
        now_iso = datetime.now(timezone.utc).isoformat()
        with self._conn() as conn:
            conn.execute(
                """
                INSERT INTO credentials (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (self.key, token, now_iso),
            )
        log.info(f"Stored credential '{self.key}' in {self.db_path}")

    def clear(self) -> None:
        with self._conn() as conn:
            conn.execute("DELETE FROM credentials WHERE key = ?", (self.key,))
        log.info(f"Cleared credential '{self.key}' from {self.db_path}")
