from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv


DEV_FRONTEND_ORIGIN = "http://localhost:3000"
DEFAULT_PORT = 3001
DEFAULT_HOST = "0.0.0.0"


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home())
        return Path(base) / "atuapj"
    base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / "atuapj"


def _read_env_str(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = str(environ.get(name) or "").strip()
    return raw or None


def _read_port(environ: Mapping[str, str]) -> int:
    raw = _read_env_str(environ, "PORT")
    if raw is None:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError as exc:
        raise ValueError(f"PORT inválida: {raw!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"PORT fora do intervalo: {port}")
    return port


@dataclass(frozen=True)
class Settings:
    frontend_url: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    db_path: Optional[str] = None
    log_level: str = "INFO"

    def cors_origins(self) -> Optional[list[str]]:
        """Origens liberadas no CORS; None significa qualquer origem (modo dev)."""
        if not self.frontend_url:
            return None
        out: list[str] = []
        for origin in (self.frontend_url, DEV_FRONTEND_ORIGIN):
            if origin not in out:
                out.append(origin)
        return out


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    if environ is None:
        load_dotenv(override=False)
        environ = os.environ
    db_path = _read_env_str(environ, "ATUAPJ_DB_PATH")
    if db_path is None:
        data_dir = _default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        db_path = str(data_dir / "app.db")
    return Settings(
        frontend_url=_read_env_str(environ, "FRONTEND_URL"),
        port=_read_port(environ),
        host=_read_env_str(environ, "HOST") or DEFAULT_HOST,
        db_path=db_path,
        log_level=(_read_env_str(environ, "ATUAPJ_LOG_LEVEL") or "INFO").upper(),
    )
