"""Runtime settings resolved from Streamlit secrets, TOML files and the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import streamlit as st
import toml

DEFAULT_SCHOOL_DATA_URL = "https://owo-api-production.up.railway.app/"
DEFAULT_SECRETS_PATH = ".streamlit/secrets.toml"

log = logging.getLogger(__name__)


def get_secret(key):
    try:
        return st.secrets.get(key)
    except FileNotFoundError:
        return None


@dataclass(frozen=True)
class Settings:
    validate_url: Optional[str] = None
    identity_field: str = "name"
    school_data_url: str = DEFAULT_SCHOOL_DATA_URL
    credentials_db: str = "credentials.db"
    credential_key: str = "hisense_cookie"
    http_timeout: float = 15.0


def _settings_from(lookup) -> Settings:
    def pick(key: str, default: Any) -> Any:
        value = lookup(key)
        return default if value in (None, "") else value

    timeout_raw = pick("HTTP_TIMEOUT", Settings.http_timeout)
    try:
        http_timeout = float(timeout_raw)
    except (TypeError, ValueError):
        http_timeout = Settings.http_timeout

    settings = Settings(
        validate_url=pick("HISENSE_VALIDATE_URL", Settings.validate_url),
        identity_field=pick("HISENSE_IDENTITY_FIELD", Settings.identity_field),
        school_data_url=pick("SCHOOL_DATA_URL", Settings.school_data_url),
        credentials_db=pick("CREDENTIALS_DB", Settings.credentials_db),
        credential_key=pick("CREDENTIAL_KEY", Settings.credential_key),
        http_timeout=http_timeout,
    )
    if not settings.validate_url:
        log.warning("HISENSE_VALIDATE_URL is not set; every stored cookie will be rejected")
    return settings


def load_settings() -> Settings:
    """Settings for the Streamlit app: secrets.toml first, then env vars."""
    return _settings_from(lambda key: get_secret(key) or os.getenv(key))


def load_settings_from_toml(path: str = DEFAULT_SECRETS_PATH) -> Settings:
    """Settings for headless scripts that run outside of Streamlit."""
    data: Mapping[str, Any] = {}
    if os.path.exists(path):
        data = toml.load(path)
    return _settings_from(lambda key: data.get(key) or os.getenv(key))


def optional_setting(key: str, path: Optional[str] = None) -> Optional[str]:
    if path and os.path.exists(path):
        value = toml.load(path).get(key)
        if value:
            return value
    return os.getenv(key)
