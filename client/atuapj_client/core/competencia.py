from __future__ import annotations

from typing import Optional
import re


_MES_RE = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")
_LABEL_RE = re.compile(r"^(0[1-9]|1[0-2])/(\d{4})$")


def fmt_mes(mes: Optional[str]) -> str:
    """'2026-02' -> '02/2026'"""
    if not mes:
        return ""
    s = str(mes).strip()
    match = _MES_RE.match(s)
    if match:
        return f"{match.group(2)}/{match.group(1)}"
    return s


def parse_mes_label(label: str) -> Optional[str]:
    """'02/2026' -> '2026-02'; '(todos)' -> None"""
    if not label:
        return None
    s = str(label).strip()
    if s.lower() in {"(todos)", "todos", "todas"}:
        return None
    match = _LABEL_RE.match(s)
    if not match:
        return None
    return f"{match.group(2)}-{match.group(1)}"


def format_brl(valor: float) -> str:
    """1234.5 -> 'R$ 1.234,50'"""
    sign = "-" if valor < 0 else ""
    inteiro, _, centavos = f"{abs(valor):,.2f}".partition(".")
    return f"{sign}R$ {inteiro.replace(',', '.')},{centavos}"
