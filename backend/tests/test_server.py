import pytest

from app import server
from app.config import settings
from app.main import app


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


def test_run_skips_listener_on_serverless_host(monkeypatch, uvicorn_calls):
    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(settings, "vercel", "1")
    server.run()
    assert uvicorn_calls == []


def test_run_starts_listener_on_configured_port(monkeypatch, uvicorn_calls):
    monkeypatch.setattr(settings, "environment", "development")
    monkeypatch.setattr(settings, "vercel", None)
    monkeypatch.setattr(settings, "host", "127.0.0.1")
    monkeypatch.setattr(settings, "port", 4321)
    server.run()
    assert len(uvicorn_calls) == 1
    args, kwargs = uvicorn_calls[0]
    assert args == (app,)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4321
