"""Tests for the HTTP list loader."""

from __future__ import annotations

import asyncio
import io
import json
from unittest.mock import MagicMock, patch
from urllib import error

import pytest

from jp_common.errors import ConfigurationError, OptionLoadError, ResponseShapeError
from jp_select.loaders import JsonListFetcher, http_loader

pytestmark = pytest.mark.unit_select


def _response(payload: object) -> MagicMock:
    resp = MagicMock()
    resp.read.return_value = json.dumps(payload).encode("utf-8")
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


def _http_error(code: int) -> error.HTTPError:
    return error.HTTPError("http://portal/api", code, "error", {}, io.BytesIO(b""))


def test_fetcher_rejects_non_http_url() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        JsonListFetcher(url="file:///etc/passwd")
    assert excinfo.value.context["url"] == "file:///etc/passwd"


def test_http_loader_rejects_url_without_host() -> None:
    with pytest.raises(ConfigurationError):
        http_loader("http://")


def test_fetcher_sends_bearer_token() -> None:
    fetcher = JsonListFetcher(url="https://portal.test/api/editors", token="t0k")
    with patch("jp_select.loaders.request.urlopen", return_value=_response({"data": [1]})) as urlopen:
        assert fetcher.fetch() == [1]
    req = urlopen.call_args.args[0]
    assert req.get_header("Authorization") == "Bearer t0k"
    assert req.get_header("Accept") == "application/json"


def test_fetcher_session_expired() -> None:
    fetcher = JsonListFetcher(url="https://portal.test/api/editors")
    with patch("jp_select.loaders.request.urlopen", side_effect=_http_error(401)):
        with pytest.raises(OptionLoadError, match="Session expired"):
            fetcher.fetch()


def test_fetcher_api_error_carries_status() -> None:
    fetcher = JsonListFetcher(url="https://portal.test/api/editors")
    with patch("jp_select.loaders.request.urlopen", side_effect=_http_error(500)):
        with pytest.raises(OptionLoadError) as excinfo:
            fetcher.fetch()
    assert str(excinfo.value) == "API error: 500"
    assert excinfo.value.status == 500


def test_fetcher_network_failure() -> None:
    fetcher = JsonListFetcher(url="https://portal.test/api/editors")
    with patch("jp_select.loaders.request.urlopen", side_effect=error.URLError("refused")):
        with pytest.raises(OptionLoadError, match="refused"):
            fetcher.fetch()


def test_fetcher_unexpected_shape() -> None:
    fetcher = JsonListFetcher(url="https://portal.test/api/editors")
    with patch("jp_select.loaders.request.urlopen", return_value=_response({"message": "ok"})):
        with pytest.raises(ResponseShapeError):
            fetcher.fetch()


def test_http_loader_maps_user_records() -> None:
    payload = {
        "users": [
            {"_id": "u1", "fullName": "Barbara Liskov", "email": "liskov@mit.edu"},
            {"_id": "u2"},
        ]
    }
    loader = http_loader("https://portal.test/api/reviewers")
    with patch("jp_select.loaders.request.urlopen", return_value=_response(payload)):
        options = asyncio.run(loader())
    assert [(o.id, o.label, o.secondary_text) for o in options] == [
        ("u1", "Barbara Liskov", "liskov@mit.edu")
    ]


def test_http_loader_wraps_shape_errors() -> None:
    loader = http_loader("https://portal.test/api/reviewers")
    with patch("jp_select.loaders.request.urlopen", return_value=_response("oops")):
        with pytest.raises(OptionLoadError) as excinfo:
            asyncio.run(loader())
    assert isinstance(excinfo.value.__cause__, ResponseShapeError)
