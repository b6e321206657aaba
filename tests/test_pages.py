from __future__ import annotations

from fastapi.testclient import TestClient

from scriptshell.core import config
from scriptshell.main import app


def test_login_page_renders() -> None:
    with TestClient(app) as client:
        r = client.get("/login")

    assert r.status_code == 200
    assert config.APP_NAME in r.text
    assert 'type="password"' in r.text
    assert "/static/js/bridge.js" in r.text


def test_main_page_renders_versions() -> None:
    with TestClient(app) as client:
        r = client.get("/")

    assert r.status_code == 200
    assert config.SHELL_VERSION in r.text
    assert "execute-script" in r.text


def test_bridge_script_is_served() -> None:
    with TestClient(app) as client:
        r = client.get("/static/js/bridge.js")

    assert r.status_code == 200
    assert "script-execution-error" in r.text


def test_no_api_docs() -> None:
    with TestClient(app) as client:
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404


def test_bridge_script_queues_sends_until_ready() -> None:
    with TestClient(app) as client:
        js = client.get("/static/js/bridge.js").text

    assert "pending.push([channel, payload])" in js
    assert "pending.splice(0).forEach" in js
