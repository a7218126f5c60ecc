"""Tests for the run.py entry point and settings."""

import run
from devops_class_api.app.core.config import PORT, Settings


def test_port_is_fixed():
    assert PORT == 3000


def test_testing_flag():
    assert Settings(environment="test").testing
    assert Settings(environment="TEST").testing
    assert not Settings(environment="development").testing


def test_main_skips_server_in_test_mode(monkeypatch):
    called = []
    monkeypatch.setattr(run, "settings", Settings(environment="test"))
    monkeypatch.setattr(run.asyncio, "run", lambda coro: called.append(coro))
    assert run.main() is False
    assert called == []


def test_main_serves_outside_test_mode(monkeypatch):
    served = []

    async def fake_serve():
        served.append(True)

    monkeypatch.setattr(run, "settings", Settings(environment="production"))
    monkeypatch.setattr(run, "serve", fake_serve)
    assert run.main() is True
    assert served == [True]
