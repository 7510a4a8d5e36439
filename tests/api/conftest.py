from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from atuapj_api.config import Settings
from atuapj_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(db_path=str(tmp_path / "api.db"))


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def make_client(tmp_path):
    """Cliente com FRONTEND_URL/porta customizados (testes de CORS)."""
    opened = []

    def _make(**overrides):
        cfg = Settings(db_path=str(tmp_path / "cors.db"), **overrides)
        c = TestClient(create_app(cfg))
        c.__enter__()
        opened.append(c)
        return c

    yield _make
    for c in opened:
        c.__exit__(None, None, None)
