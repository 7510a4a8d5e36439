from __future__ import annotations

import sqlite3

import pytest

from atuapj_api import repositories
from atuapj_api.repositories import (
    MemberPaymentRepository,
    MemberProjectHoursRepository,
    UserCompanySettingsRepository,
)


class BrokenConnection:
    def __init__(self):
        self.closed = False

    def execute(self, *args, **kwargs):
        raise sqlite3.OperationalError("database is locked")

    def commit(self):
        pass

    def close(self):
        self.closed = True


@pytest.fixture
def broken(monkeypatch):
    opened = []

    def connect():
        conn = BrokenConnection()
        opened.append(conn)
        return conn

    monkeypatch.setattr(repositories, "_connect", connect)
    return opened


@pytest.mark.parametrize(
    "call",
    [
        lambda: MemberPaymentRepository().list(user_id="u1"),
        lambda: MemberPaymentRepository().get("mp_1"),
        lambda: MemberPaymentRepository().delete("mp_1"),
        lambda: MemberProjectHoursRepository().list(),
        lambda: MemberProjectHoursRepository().get("mph_1"),
        lambda: MemberProjectHoursRepository().delete("mph_1"),
        lambda: UserCompanySettingsRepository().list(company_id="c1"),
        lambda: UserCompanySettingsRepository().get("ucs_1"),
        lambda: UserCompanySettingsRepository().delete("ucs_1"),
    ],
)
def test_connection_is_closed_when_sqlite_fails(broken, call):
    with pytest.raises(sqlite3.OperationalError):
        call()
    assert broken
    assert all(conn.closed for conn in broken)


class FailingWrites:
    def __init__(self, conn):
        self._conn = conn
        self.closed = False

    def execute(self, sql, params=()):
        if sql.lstrip().startswith("UPDATE"):
            raise sqlite3.OperationalError("disk I/O error")
        return self._conn.execute(sql, params)

    def commit(self):
        self._conn.commit()

    def close(self):
        self.closed = True
        self._conn.close()


def test_update_closes_connection_when_write_fails(client, monkeypatch):
    created = client.post(
        "/member-payments", json={"userId": "u1", "companyId": "c1", "valor": 1, "mes": "2026-02"}
    ).json()

    real_connect = repositories._connect
    opened = []

    def connect():
        conn = FailingWrites(real_connect())
        opened.append(conn)
        return conn

    monkeypatch.setattr(repositories, "_connect", connect)

    with pytest.raises(sqlite3.OperationalError):
        MemberPaymentRepository().update(created["id"], valor=2)
    assert len(opened) == 2
    assert all(conn.closed for conn in opened)
