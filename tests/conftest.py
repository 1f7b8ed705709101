"""
Pytest configuration for the stream search tests
Provides common fixtures; no test talks to the real API
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from models.config import AppConfig


NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

ENV_VARS = (
    "CLIENT_ID",
    "TWITCH_CLIENT_ID",
    "CLIENT_SECRET",
    "TWITCH_CLIENT_SECRET",
    "IGNORE_LIST",
    "TWITCH_IGNORE",
    "HTTPS_PROXY",
    "https_proxy",
    "REQUEST_TIMEOUT",
    "GAME_ID",
)


def make_record(**overrides: Any) -> dict[str, Any]:
    """Raw stream record as the listing endpoint returns it."""
    record: dict[str, Any] = {
        "id": "123",
        "user_id": "456",
        "user_login": "somestreamer",
        "user_name": "SomeStreamer",
        "game_id": "1469308723",
        "type": "live",
        "title": "Writing a compiler in Rust",
        "viewer_count": 42,
        "started_at": "2024-01-01T10:30:00Z",
        "language": "en",
    }
    record.update(overrides)
    return record


def make_response(body: Any = None, status_code: int = 200, json_error: bool = False) -> Mock:
    """Mock of requests.Response carrying a JSON body."""
    resp = Mock()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    if json_error:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = body
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        resp.raise_for_status.return_value = None
    return resp


def make_page(records: list[dict[str, Any]], cursor: str | None = None) -> dict[str, Any]:
    """Listing response body with an optional pagination cursor."""
    pagination: dict[str, Any] = {}
    if cursor is not None:
        pagination["cursor"] = cursor
    return {"data": records, "pagination": pagination}


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def app_config() -> AppConfig:
    """Configuration with dummy credentials"""
    return AppConfig(client_id="test_client_id", client_secret="test_client_secret")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any of the variables the app reads"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fake_api() -> Callable[..., Callable[..., Mock]]:
    """Build a requests.request replacement serving a token and listing pages.

    The returned function records every call in its ``calls`` attribute.
    """

    def build(pages: list[Any], token_body: Any = None) -> Callable[..., Mock]:
        remaining = list(pages)
        calls: list[tuple[str, str, dict[str, Any]]] = []

        def request(method: str, url: str, **kwargs: Any) -> Mock:
            calls.append((method, url, kwargs))
            if method == "POST":
                body = token_body if token_body is not None else {"access_token": "tok123"}
                return make_response(body)
            page = remaining.pop(0)
            if isinstance(page, Mock):
                return page
            return make_response(page)

        request.calls = calls  # type: ignore[attr-defined]
        return request

    return build
