"""
Tests for app wiring: utility routes, request logging and env config.
"""

import logging

import pytest
from fastapi.testclient import TestClient

import main


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "simple signon api"}


def test_request_line_is_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="api.access")
    client.get("/api/user/3")

    lines = [r.getMessage() for r in caplog.records if r.name == "api.access"]
    assert len(lines) == 1
    assert lines[0].startswith("GET /api/user/3 200 ")


def test_faulted_request_is_still_logged(caplog):
    app = main.create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    caplog.set_level(logging.INFO, logger="api.access")
    response = TestClient(app, raise_server_exceptions=False).get("/boom")
    assert response.status_code == 500

    lines = [r.getMessage() for r in caplog.records if r.name == "api.access"]
    assert any(line.startswith("GET /boom 500 ") for line in lines)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("verbose", logging.INFO),
    ],
)
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert main.log_level() == expected


@pytest.mark.parametrize("raw, expected", [("", 4001), ("8080", 8080), ("http", 4001)])
def test_listen_port_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("PORT", raw)
    assert main.listen_port() == expected
