from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.upstream import get_http_client


class FakeUpstream:
    """Stands in for the outside world and records every outbound request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(404)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    async def client(self):
        async with httpx.AsyncClient(transport=httpx.MockTransport(self._handle)) as client:
            yield client


@pytest.fixture
def upstream():
    fake = FakeUpstream()
    app.dependency_overrides[get_http_client] = fake.client
    yield fake
    app.dependency_overrides.pop(get_http_client, None)


@pytest.fixture
def client(upstream):
    return TestClient(app)


@pytest.fixture
def no_server_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")
