"""Formatação de datas conforme as preferências do usuário.

A configuração (formato + fuso) é sempre passada explicitamente: quem exibe
datas recebe um `DateFormatter` montado a partir das `Configuracoes` da sessão.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from atuapj_client.core.lists import FORMATOS_DATA, FORMATO_PADRAO, FUSO_PADRAO
from atuapj_client.core.models import Configuracoes


DateInput = Union[str, date, datetime, None]

_DATE_ONLY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_FRACTION_RE = re.compile(r"\.(\d+)")
EMPTY = "-"


def _zone(fuso: Optional[str]) -> ZoneInfo:
    if not isinstance(fuso, str) or not fuso.strip():
        return ZoneInfo(FUSO_PADRAO)
    try:
        return ZoneInfo(fuso.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return ZoneInfo(FUSO_PADRAO)


def _render(d: date, formato: str) -> str:
    dia, mes, ano = f"{d.day:02d}", f"{d.month:02d}", f"{d.year:04d}"
    if formato == "MM/dd/yyyy":
        return f"{mes}/{dia}/{ano}"
    if formato == "yyyy-MM-dd":
        return f"{ano}-{mes}-{dia}"
    return f"{dia}/{mes}/{ano}"


def _parse_datetime(raw: str) -> Optional[datetime]:
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    # fromisoformat do 3.10 só aceita frações com 3 ou 6 dígitos
    raw = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), raw, count=1)
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def format_date_br(
    value: DateInput,
    formato: Optional[str] = FORMATO_PADRAO,
    fuso: Optional[str] = FUSO_PADRAO,
) -> str:
    """'2026-02-10' -> '10/02/2026'; vazio ou inválido -> '-'.

    Datas puras (YYYY-MM-DD) não sofrem conversão de fuso. Timestamps completos
    são levados para `fuso` antes de formatar; sem offset, são tratados como UTC.
    """
    if formato not in FORMATOS_DATA:
        formato = FORMATO_PADRAO
    if value is None:
        return EMPTY

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        return _render(value, formato)
    else:
        raw = str(value).strip()
        if not raw:
            return EMPTY
        match = _DATE_ONLY_RE.match(raw)
        if match:
            try:
                d = date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
            except ValueError:
                return EMPTY
            return _render(d, formato)
        parsed = _parse_datetime(raw)
        if parsed is None:
            return EMPTY
        dt = parsed

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        local = dt.astimezone(_zone(fuso))
    except (OverflowError, ValueError):
        return EMPTY
    return _render(local.date(), formato)


class DateFormatter:
    """Formatador ligado a um snapshot das configurações do usuário."""

    def __init__(self, configuracoes: Configuracoes):
        self.formato = configuracoes.formato_data
        self.fuso = configuracoes.fuso_horario

    def __call__(self, value: DateInput) -> str:
        return format_date_br(value, self.formato, self.fuso)


def date_formatter(configuracoes: Configuracoes) -> DateFormatter:
    return DateFormatter(configuracoes)
