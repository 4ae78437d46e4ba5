"""Shared fixtures: settings and a scripted, network-free requests session."""

import json
from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock

import pytest

from shiphero.config import ShipHeroSettings

BASE_URL = "https://public-api.shiphero.com"
TOKEN_URL = f"{BASE_URL}/auth/token"
REFRESH_URL = f"{BASE_URL}/auth/refresh"
GRAPHQL_URL = f"{BASE_URL}/graphql"


def _make_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    if json_data is not None:
        response.json.return_value = json_data
        response.text = json.dumps(json_data)
    else:
        response.json.side_effect = ValueError("No JSON body")
        response.text = text or ""
    response.content = response.text.encode()
    return response


class Router:
    """Scripted replacement for ``Session.request``.

    Responses are queued per (method, url); the last one queued repeats.
    Queue an exception instance to have it raised instead. Each call records
    the decoded JSON body (numbers with a fraction as Decimal), or None.
    """

    def __init__(self, session: MagicMock):
        self.session = session
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.calls: list[dict[str, Any]] = []

    def add(self, method: str, url: str, *responses: Any) -> "Router":
        self.routes.setdefault((method, url), []).extend(responses)
        return self

    def __call__(self, method: str, url: str, **kwargs: Any) -> Any:
        data = kwargs.get("data")
        self.calls.append(
            {
                "method": method,
                "url": url,
                "kwargs": kwargs,
                "body": json.loads(data, parse_float=Decimal) if data is not None else None,
                "headers": dict(self.session.headers),
            }
        )
        queue = self.routes.get((method, url))
        if not queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item

    def calls_to(self, url: str) -> list[dict[str, Any]]:
        return [call for call in self.calls if call["url"] == url]


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    return _make_response


@pytest.fixture
def settings():
    """Settings with test credentials, isolated from any .env file."""
    return ShipHeroSettings(
        username="test@example.com",
        password="test-password",
        _env_file=None,
    )


@pytest.fixture
def session():
    """MagicMock session whose ``request`` is driven by a Router."""
    mock_session = MagicMock()
    mock_session.headers = {}
    mock_session.request.side_effect = Router(mock_session)
    return mock_session


@pytest.fixture
def router(session) -> Router:
    return session.request.side_effect


@pytest.fixture
def token_payload():
    return {
        "accessToken": "access-1",
        "refreshToken": "refresh-1",
        "expiresIn": 3600,
        "scope": "openid",
        "tokenType": "Bearer",
    }
