from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional

from atuapj_client.core.lists import FORMATO_PADRAO, FUSO_PADRAO


Tema = Literal["claro", "escuro", "sistema"]
FormatoData = Literal["dd/MM/yyyy", "MM/dd/yyyy", "yyyy-MM-dd"]


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(frozen=True)
class MemberPayment:
    id: str
    user_id: str
    company_id: str
    valor: float
    mes: str  # YYYY-MM
    created_at: str
    updated_at: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "MemberPayment":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            company_id=str(data["companyId"]),
            valor=float(data["valor"]),
            mes=str(data["mes"]),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
        )


@dataclass(frozen=True)
class MemberProjectHoursLimit:
    id: str
    company_id: str
    user_id: str
    projeto_id: str
    max_hours: float
    created_at: str
    updated_at: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "MemberProjectHoursLimit":
        return cls(
            id=str(data["id"]),
            company_id=str(data["companyId"]),
            user_id=str(data["userId"]),
            projeto_id=str(data["projetoId"]),
            max_hours=float(data["maxHours"]),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
        )


@dataclass(frozen=True)
class UserCompanySettings:
    id: str
    user_id: str
    company_id: str
    horista: bool
    created_at: str
    updated_at: str
    limite_mensal_horas: Optional[float] = None  # None quando não é horista
    contato: Optional[str] = None
    cpf: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "UserCompanySettings":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            company_id=str(data["companyId"]),
            horista=bool(data["horista"]),
            limite_mensal_horas=_opt_float(data.get("limiteMensalHoras")),
            contato=data.get("contato"),
            cpf=data.get("cpf"),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
        )


@dataclass(frozen=True)
class Configuracoes:
    """Preferências do usuário no app (tema fixo escuro)."""

    tema: Tema = "escuro"
    nome_empresa: str = ""
    horas_uteis_padrao: float = 8
    fuso_horario: str = FUSO_PADRAO
    formato_data: FormatoData = FORMATO_PADRAO  # type: ignore[assignment]
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def default(cls) -> "Configuracoes":
        now = now_iso()
        return cls(created_at=now, updated_at=now)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
