import sqlite3
from datetime import datetime
from unittest.mock import patch

import pytest

from infrastructure.repositories.sqlite_credential_repository import SQLiteCredentialRepository


@pytest.fixture
def repo(tmp_path):
    repo = SQLiteCredentialRepository(str(tmp_path / "cred.db"))
    repo.init_db()
    return repo


def test_get_returns_none_when_empty(repo):
    assert repo.get() is None


def test_set_then_get(repo):
    repo.set("abc123")
    assert repo.get() == "abc123"


def test_set_overwrites_single_slot(repo):
    repo.set("first")
    repo.set("second")
    assert repo.get() == "second"


def test_token_survives_new_instance(repo):
    repo.set("persisted")
    assert SQLiteCredentialRepository(repo.db_path).get() == "persisted"


def test_clear_removes_token(repo):
    repo.set("abc123")
    repo.clear()
    assert repo.get() is None


def test_default_key_is_hisense_cookie(repo):
    assert repo.key == "hisense_cookie"


def test_get_does_not_rerun_schema_setup(repo):
    repo.set("abc123")
    with patch.object(repo, "init_db") as mock_init:
        assert repo.get() == "abc123"
    mock_init.assert_not_called()


def test_updated_at_is_timezone_aware(repo):
    repo.set("abc123")
    with sqlite3.connect(repo.db_path) as conn:
        updated_at = conn.execute("SELECT updated_at FROM credentials").fetchone()[0]
    assert datetime.fromisoformat(updated_at).tzinfo is not None
