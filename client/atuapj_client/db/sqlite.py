from __future__ import annotations

import os
import sqlite3
from pathlib import Path


def _default_data_dir() -> Path:
    """Retorna um diretório gravável por usuário para armazenar dados locais."""
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home())
        return Path(base) / "atuapj_desktop"
    # Linux/macOS: respeita XDG se existir
    base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / "atuapj_desktop"


def get_db_path() -> str:
    """Permite override via env var, e por padrão usa AppData do usuário."""
    override = os.environ.get("ATUAPJ_CLIENT_DB_PATH")
    if override:
        return override

    data_dir = _default_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return str(data_dir / "app.db")


def _connect() -> sqlite3.Connection:
    conn = sqlite3.connect(get_db_path())
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    conn = _connect()
    cur = conn.cursor()
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS app_settings (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT NOT NULL DEFAULT (datetime('now'))
        )
        """
    )
    conn.commit()
    conn.close()
