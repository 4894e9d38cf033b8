import logging
from unittest.mock import patch

from infrastructure import observability


def test_mask_token():
    assert observability.mask_token("abcdef123456") == "abcd***"
    assert observability.mask_token(None) == "<none>"
    assert observability.mask_token("") == "<none>"


def test_scrubber_masks_cookie_keys_and_long_tokens():
    event = {
        "exception": {"values": [{"stacktrace": {"frames": [{"vars": {
            "cookie": "short",
            "key": "20101001",
            "header": "PHPSESSID=abc123; path=/",
            "blob": "x" * 40,
        }}]}}]},
        "request": {"data": {"q": "20101001", "cookie": "abc"}},
    }

    scrubbed = observability._scrub_sensitive_data(event, {})

    frame_vars = scrubbed["exception"]["values"][0]["stacktrace"]["frames"][0]["vars"]
    assert frame_vars["cookie"] == "[REDACTED]"
    assert frame_vars["key"] == "20101001"
    assert "abc123" not in frame_vars["header"]
    assert frame_vars["blob"] == "[REDACTED]"
    assert scrubbed["request"]["data"]["cookie"] == "[REDACTED]"
    assert scrubbed["request"]["data"]["q"] == "20101001"


def test_scrubber_survives_unexpected_event_shape():
    event = {"exception": {"values": None}}
    assert observability._scrub_sensitive_data(event, {}) is event


@patch("logging.basicConfig")
def test_setup_without_sentry_dsn(mock_basic_config, monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    observability.setup_observability()

    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING
