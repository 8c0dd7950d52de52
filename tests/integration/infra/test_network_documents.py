from __future__ import annotations

"""
Integration tests for remote document retrieval.

Validates HTTP communication, timeout enforcement, and handling of
malformed remote JSON resources.
"""

from unittest.mock import MagicMock, patch

import requests

from modelexplorer.infra.network import fetch_remote_document, is_remote_source


def test_fetch_remote_document_success() -> None:
    mock_data = {"id": "ctx", "documents": []}
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = mock_data
    mock_resp.content = b"fake-content"

    with patch("requests.get", return_value=mock_resp) as mock_get:
        result = fetch_remote_document("http://fake.url/model.json")

        assert result == mock_data
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert kwargs["timeout"] == 10
        assert "ModelExplorer" in kwargs["headers"]["User-Agent"]


def test_fetch_remote_document_timeout() -> None:
    with patch("requests.get", side_effect=requests.exceptions.Timeout):
        assert fetch_remote_document("http://slow.url") is None


def test_fetch_remote_document_http_error() -> None:
    mock_resp = MagicMock()
    mock_resp.status_code = 404
    mock_resp.raise_for_status.side_effect = requests.exceptions.HTTPError()

    with patch("requests.get", return_value=mock_resp):
        assert fetch_remote_document("http://missing.url") is None


def test_fetch_remote_document_rejects_non_object_root() -> None:
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = ["not", "an", "object"]

    with patch("requests.get", return_value=mock_resp):
        assert fetch_remote_document("http://broken.url") is None


def test_fetch_remote_document_invalid_json() -> None:
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.side_effect = ValueError("Expecting value")

    with patch("requests.get", return_value=mock_resp):
        assert fetch_remote_document("http://garbage.url") is None


def test_is_remote_source() -> None:
    assert is_remote_source("https://example.org/a.json") is True
    assert is_remote_source("HTTP://example.org/a.json") is True
    assert is_remote_source("/tmp/a.json") is False
    assert is_remote_source("") is False
