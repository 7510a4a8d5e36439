from __future__ import annotations

import json
from dataclasses import fields, replace
from typing import Any, Dict

from atuapj_client.core.lists import FORMATOS_DATA
from atuapj_client.core.models import Configuracoes, now_iso

from .sqlite import _connect, init_db


class ConfiguracoesRepository:
    """Preferências do usuário guardadas como JSON em `app_settings`."""

    KEY = "configuracoes"
    _EDITABLE = {"nome_empresa", "horas_uteis_padrao", "fuso_horario", "formato_data", "tema"}
    # valida cada campo guardado; o que não passar volta ao padrão
    _CHECKS = {
        "tema": lambda v: isinstance(v, str),
        "nome_empresa": lambda v: isinstance(v, str),
        "horas_uteis_padrao": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0,
        "fuso_horario": lambda v: isinstance(v, str) and bool(v.strip()),
        "formato_data": lambda v: isinstance(v, str) and v in FORMATOS_DATA,
        "created_at": lambda v: isinstance(v, str),
        "updated_at": lambda v: isinstance(v, str),
    }

    def __init__(self):
        init_db()

    def _load_raw(self) -> Dict[str, Any]:
        conn = _connect()
        row = conn.execute("SELECT value FROM app_settings WHERE key = ?", (self.KEY,)).fetchone()
        conn.close()
        if not row:
            return {}
        try:
            parsed = json.loads(row["value"])
        except ValueError:
            return {}
        return parsed if isinstance(parsed, dict) else {}

    def _save(self, cfg: Configuracoes) -> None:
        conn = _connect()
        conn.execute(
            """
            INSERT INTO app_settings (key, value, updated_at) VALUES (?, ?, datetime('now'))
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (self.KEY, json.dumps(cfg.to_dict(), ensure_ascii=False)),
        )
        conn.commit()
        conn.close()

    def get(self) -> Configuracoes:
        raw = self._load_raw()
        default = Configuracoes.default()
        known = {f.name for f in fields(Configuracoes)}
        values = {k: v for k, v in raw.items() if k in self._CHECKS and self._CHECKS[k](v)}
        # tema escuro fixo
        values["tema"] = "escuro"
        cfg = replace(default, **values)
        if set(values) != known:
            # completa o registro com os campos que faltavam
            self._save(cfg)
        return cfg

    def update(self, **changes: Any) -> Configuracoes:
        unknown = set(changes) - self._EDITABLE
        if unknown:
            raise ValueError(f"Campos inválidos: {', '.join(sorted(unknown))}")
        if "formato_data" in changes and changes["formato_data"] not in FORMATOS_DATA:
            raise ValueError(f"Formato de data inválido: {changes['formato_data']}")
        if "horas_uteis_padrao" in changes and not self._CHECKS["horas_uteis_padrao"](changes["horas_uteis_padrao"]):
            raise ValueError("Horas úteis padrão deve ser um número maior que zero")
        changes.pop("tema", None)
        invalid = sorted(k for k, v in changes.items() if not self._CHECKS[k](v))
        if invalid:
            raise ValueError(f"Valores inválidos: {', '.join(invalid)}")
        cfg = replace(self.get(), **changes, updated_at=now_iso())
        self._save(cfg)
        return cfg
