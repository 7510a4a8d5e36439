from __future__ import annotations

import secrets
import sqlite3
from datetime import datetime, timezone
from typing import Optional


DB_PATH: Optional[str] = None


def configure(db_path: str) -> None:
    global DB_PATH
    DB_PATH = db_path


def _connect() -> sqlite3.Connection:
    if not DB_PATH:
        raise RuntimeError("Banco de dados não configurado (ATUAPJ_DB_PATH).")
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def new_id(prefix: str) -> str:
    return f"{prefix}_{secrets.token_hex(8)}"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def init_db() -> None:
    conn = _connect()
    cur = conn.cursor()
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS member_payments (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            company_id TEXT NOT NULL,
            valor REAL NOT NULL,
            mes TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            UNIQUE(user_id, company_id, mes)
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS member_project_hours_limits (
            id TEXT PRIMARY KEY,
            company_id TEXT NOT NULL,
            user_id TEXT NOT NULL,
            projeto_id TEXT NOT NULL,
            max_hours REAL NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            UNIQUE(user_id, projeto_id)
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS user_company_settings (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            company_id TEXT NOT NULL,
            horista INTEGER NOT NULL DEFAULT 0,
            limite_mensal_horas REAL,
            contato TEXT,
            cpf TEXT,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            UNIQUE(user_id, company_id)
        )
        """
    )
    cur.execute("CREATE INDEX IF NOT EXISTS ix_member_payments_company_mes ON member_payments(company_id, mes)")
    cur.execute("CREATE INDEX IF NOT EXISTS ix_hours_limits_company ON member_project_hours_limits(company_id)")
    conn.commit()
    conn.close()
