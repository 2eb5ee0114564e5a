from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import requests


@dataclass
class FakeResponse:
    status_code: int
    content: bytes = b""


@dataclass
class FakeSession:
    """Stands in for ``requests.Session``; records every POST."""

    response: FakeResponse | None = None
    exc: Exception | None = None
    calls: list[dict] = field(default_factory=list)

    def post(self, url, data=None, headers=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def make_session():
    def _make(status_code: int = 200, content: bytes = b"", exc: Exception | None = None) -> FakeSession:
        return FakeSession(response=FakeResponse(status_code, content), exc=exc)

    return _make


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
