from __future__ import annotations

import logging
import sqlite3
import sys
from contextlib import asynccontextmanager

import pytest
from fastapi import FastAPI

from atuapj_api import main as api_main
from atuapj_api.config import DEFAULT_PORT, Settings, load_settings


def _preflight(client, origin):
    return client.options(
        "/member-payments",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )


def test_cors_allows_frontend_url_and_local_dev(make_client):
    client = make_client(frontend_url="https://x.example")

    for origin in ("https://x.example", "http://localhost:3000"):
        r = client.get("/health", headers={"Origin": origin})
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == origin
        assert r.headers["access-control-allow-credentials"] == "true"

        pre = _preflight(client, origin)
        assert pre.status_code == 200
        assert pre.headers["access-control-allow-origin"] == origin


def test_cors_rejects_unlisted_origin(make_client):
    client = make_client(frontend_url="https://x.example")

    r = client.get("/health", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in r.headers

    pre = _preflight(client, "https://evil.example")
    assert pre.status_code == 400
    assert "access-control-allow-origin" not in pre.headers


def test_cors_without_frontend_url_accepts_any_origin(make_client):
    client = make_client()

    for origin in ("https://qualquer.example", "http://127.0.0.1:5173"):
        r = client.get("/health", headers={"Origin": origin})
        assert r.headers["access-control-allow-origin"] == origin
        assert r.headers["access-control-allow-credentials"] == "true"
        assert _preflight(client, origin).status_code == 200


def test_cors_origins_deduplicates_local_dev():
    assert Settings(frontend_url="http://localhost:3000").cors_origins() == ["http://localhost:3000"]
    assert Settings().cors_origins() is None


def test_security_headers(client):
    r = client.get("/health")
    assert r.json() == {"ok": True}
    assert r.headers["x-content-type-options"] == "nosniff"
    assert r.headers["x-frame-options"] == "DENY"


def test_load_settings_reads_env(tmp_path):
    s = load_settings(
        {
            "FRONTEND_URL": "https://x.example",
            "PORT": "4000",
            "ATUAPJ_DB_PATH": str(tmp_path / "a.db"),
            "ATUAPJ_LOG_LEVEL": "debug",
        }
    )
    assert s.port == 4000
    assert s.host == "0.0.0.0"
    assert s.frontend_url == "https://x.example"
    assert s.log_level == "DEBUG"


def test_load_settings_defaults(tmp_path):
    s = load_settings({"ATUAPJ_DB_PATH": str(tmp_path / "a.db"), "PORT": "  "})
    assert s.port == DEFAULT_PORT == 3001
    assert s.frontend_url is None
    assert s.host == "0.0.0.0"


@pytest.mark.parametrize("raw", ["abc", "0", "70000"])
def test_load_settings_rejects_invalid_port(tmp_path, raw):
    with pytest.raises(ValueError):
        load_settings({"ATUAPJ_DB_PATH": str(tmp_path / "a.db"), "PORT": raw})


def test_run_binds_configured_port(monkeypatch, tmp_path):
    calls = {}

    def fake_run(server, sockets=None):
        calls.update(app=server.config.app, host=server.config.host, port=server.config.port)
        server.started = True

    monkeypatch.setenv("FRONTEND_URL", "https://x.example")
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setenv("ATUAPJ_DB_PATH", str(tmp_path / "run.db"))
    monkeypatch.setattr(api_main._Server, "run", fake_run)

    api_main.run()

    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 4000
    assert calls["app"].state.settings.frontend_url == "https://x.example"


def test_run_exits_with_status_1_when_construction_fails(monkeypatch, caplog, tmp_path):
    def boom(settings=None):
        raise RuntimeError("falhou ao montar")

    monkeypatch.setenv("ATUAPJ_DB_PATH", str(tmp_path / "run.db"))
    monkeypatch.setattr(api_main, "create_app", boom)

    with caplog.at_level(logging.ERROR, logger="atuapj.api"):
        with pytest.raises(SystemExit) as exc:
            api_main.run()

    assert exc.value.code == 1
    assert any(r.levelno == logging.ERROR and "Falha ao iniciar" in r.getMessage() for r in caplog.records)


def test_run_exits_with_status_1_on_invalid_port(monkeypatch, tmp_path):
    monkeypatch.setenv("ATUAPJ_DB_PATH", str(tmp_path / "run.db"))
    monkeypatch.setenv("PORT", "porta")
    monkeypatch.setattr(api_main, "_serve", lambda *a, **k: pytest.fail("não deveria subir"))

    with pytest.raises(SystemExit) as exc:
        api_main.run()

    assert exc.value.code == 1


def test_run_exits_with_status_1_when_database_cannot_open(monkeypatch, caplog, tmp_path):
    monkeypatch.setenv("ATUAPJ_DB_PATH", str(tmp_path / "sem_pasta" / "x.db"))
    monkeypatch.setattr(api_main, "_serve", lambda *a, **k: pytest.fail("não deveria subir"))

    with caplog.at_level(logging.ERROR, logger="atuapj.api"):
        with pytest.raises(SystemExit) as exc:
            api_main.run()

    assert exc.value.code == 1
    assert any("Falha ao iniciar" in r.getMessage() for r in caplog.records)


def test_run_exits_with_status_1_when_uvicorn_startup_fails(monkeypatch, caplog, tmp_path):
    @asynccontextmanager
    async def failing_lifespan(app):
        raise RuntimeError("startup quebrou")
        yield

    monkeypatch.setenv("ATUAPJ_DB_PATH", str(tmp_path / "run.db"))
    monkeypatch.setattr(api_main, "create_app", lambda settings=None: FastAPI(lifespan=failing_lifespan))

    with caplog.at_level(logging.ERROR, logger="atuapj.api"):
        with pytest.raises(SystemExit) as exc:
            api_main.run()

    assert exc.value.code == 1
    assert any(r.name == "atuapj.api" and r.levelno == logging.ERROR for r in caplog.records)


def test_run_maps_uvicorn_exit_code_to_1(monkeypatch, caplog, tmp_path):
    def port_in_use(app, settings):
        sys.exit(3)

    monkeypatch.setenv("ATUAPJ_DB_PATH", str(tmp_path / "run.db"))
    monkeypatch.setattr(api_main, "_serve", port_in_use)

    with caplog.at_level(logging.ERROR, logger="atuapj.api"):
        with pytest.raises(SystemExit) as exc:
            api_main.run()

    assert exc.value.code == 1
    assert any("uvicorn saiu com 3" in r.getMessage() for r in caplog.records)


def test_app_creates_tables_on_construction(settings):
    api_main.create_app(settings)
    conn = sqlite3.connect(settings.db_path)
    names = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    conn.close()
    assert {"member_payments", "member_project_hours_limits", "user_company_settings"} <= names
