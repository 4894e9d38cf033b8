from infrastructure.repositories.sqlite_credential_repository import (
    DEFAULT_CREDENTIAL_KEY,
    SQLiteCredentialRepository,
)

CREDENTIALS_DB = "credentials.db"

_credential_repo = None


def get_credential_repo(db_path: str = CREDENTIALS_DB, key: str = DEFAULT_CREDENTIAL_KEY) -> SQLiteCredentialRepository:
    global _credential_repo
    if _credential_repo is None or _credential_repo.db_path != db_path or _credential_repo.key != key:
        _credential_repo = SQLiteCredentialRepository(db_path, key)
        _credential_repo.init_db()
    return _credential_repo
