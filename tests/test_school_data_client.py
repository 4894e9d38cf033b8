import asyncio

import pytest
from unittest.mock import patch, MagicMock

from infrastructure.api.school_data_client import SchoolDataClient
from use_cases.gate_models import MSG_REMOTE_FALLBACK, RemoteQueryError


@pytest.fixture
def client():
    return SchoolDataClient("http://owo.test/", timeout=7)


def _response(status_code=200, body=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


@patch('requests.post')
def test_fetch_posts_key_and_cookie(mock_post, client):
    mock_post.return_value = _response(200, {"datadik": {"name": "SDN 1"}, "hisense": {"npsn": "20101001"}})

    result = client.fetch_sync("20101001", "cookie")

    mock_post.assert_called_once_with("http://owo.test/", json={"q": "20101001", "cookie": "cookie"}, timeout=7)
    assert result.datadik["name"] == "SDN 1"
    assert result.hisense["npsn"] == "20101001"


@patch('requests.post')
def test_fetch_error_uses_detail(mock_post, client):
    mock_post.return_value = _response(400, {"detail": "NPSN not found"})

    with pytest.raises(RemoteQueryError) as exc_info:
        client.fetch_sync("20101001", "cookie")

    assert exc_info.value.detail == "NPSN not found"
    assert exc_info.value.status_code == 400


@patch('requests.post')
def test_fetch_error_without_body_falls_back(mock_post, client):
    mock_post.return_value = _response(502, json_error=ValueError("empty body"))

    with pytest.raises(RemoteQueryError) as exc_info:
        client.fetch_sync("20101001", "cookie")

    assert exc_info.value.detail == MSG_REMOTE_FALLBACK


@patch('requests.post')
def test_fetch_error_without_detail_field_falls_back(mock_post, client):
    mock_post.return_value = _response(500, {"message": "boom"})

    with pytest.raises(RemoteQueryError) as exc_info:
        client.fetch_sync("20101001", "cookie")

    assert exc_info.value.detail == MSG_REMOTE_FALLBACK


@patch('requests.post')
def test_fetch_error_with_structured_detail_is_stringified(mock_post, client):
    mock_post.return_value = _response(422, {"detail": [{"msg": "field required"}]})

    with pytest.raises(RemoteQueryError) as exc_info:
        client.fetch_sync("20101001", "cookie")

    assert "field required" in exc_info.value.detail


@patch('requests.post')
def test_fetch_success_with_non_object_body(mock_post, client):
    mock_post.return_value = _response(200, ["not", "an", "object"])

    with pytest.raises(RemoteQueryError):
        client.fetch_sync("20101001", "cookie")


@patch('requests.post')
def test_transport_errors_propagate(mock_post, client):
    mock_post.side_effect = ConnectionError("Network Error")

    with pytest.raises(ConnectionError):
        asyncio.run(client.fetch("20101001", "cookie"))


@pytest.mark.parametrize("detail", [0, False, None, "", [], {}])
@patch('requests.post')
def test_fetch_error_with_falsy_detail_falls_back(mock_post, detail, client):
    mock_post.return_value = _response(400, {"detail": detail})

    with pytest.raises(RemoteQueryError) as exc_info:
        client.fetch_sync("20101001", "cookie")

    assert exc_info.value.detail == MSG_REMOTE_FALLBACK
