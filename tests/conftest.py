from __future__ import annotations

from http import HTTPStatus
import io
import json
from urllib.parse import urlencode

import pytest
from rich.console import Console


def search_body(total_count: int) -> str:
    return json.dumps(
        {
            "data": [],
            "pagination": {
                "index": 0,
                "pageSize": 50,
                "resultCount": 0,
                "totalCount": total_count,
            },
        }
    )


class FakeResponse:
    def __init__(self, status: int, body: str | bytes, url: str) -> None:
        self.status = status
        self.url = url
        self._body = body.encode() if isinstance(body, str) else body
        try:
            self.reason = HTTPStatus(status).phrase
        except ValueError:
            self.reason = None

    async def text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self._body.decode(encoding, errors)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc) -> bool:
        return False


class FakeSession:
    """Hands out canned (status, body) replies in order and records each request"""

    def __init__(self, replies: list[tuple[int, str | bytes]]) -> None:
        self.replies = list(replies)
        self.calls: list[dict] = []
        self.closed = False

    def get(self, url, params=None, headers=None) -> FakeResponse:
        self.calls.append({"url": url, "params": params, "headers": headers})
        status, body = self.replies.pop(0)
        return FakeResponse(status, body, f"{url}?{urlencode(params or [])}")

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc) -> bool:
        self.closed = True
        return False


@pytest.fixture
def console_output():
    """A plain (colourless) console and the buffer it writes to"""
    buffer = io.StringIO()
    console = Console(file=buffer, width=400, color_system=None, force_terminal=False)
    return console, buffer


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    monkeypatch.delenv("CF_API_KEY", raising=False)
