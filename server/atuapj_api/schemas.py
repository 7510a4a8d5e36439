from __future__ import annotations

import re
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


MES_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"

EntityId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]


class _OutModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _InModel(BaseModel):
    """Payload de entrada: campos não declarados são rejeitados, os declarados são convertidos."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        coerce_numbers_to_str=True,
    )


# --- Pagamentos de membros -------------------------------------------------


class MemberPaymentOut(_OutModel):
    id: str
    user_id: str
    company_id: str
    valor: float
    mes: str
    created_at: str
    updated_at: str


class MemberPaymentCreate(_InModel):
    user_id: EntityId
    company_id: EntityId
    valor: float = Field(ge=0, allow_inf_nan=False)
    mes: str = Field(pattern=MES_PATTERN)


class MemberPaymentUpsert(MemberPaymentCreate):
    pass


class MemberPaymentUpdate(_InModel):
    # mes identifica o fechamento e não muda depois de criado
    valor: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


# --- Teto de horas por membro/projeto --------------------------------------


class MemberProjectHoursLimitOut(_OutModel):
    id: str
    company_id: str
    user_id: str
    projeto_id: str
    max_hours: float
    created_at: str
    updated_at: str


class MemberProjectHoursLimitCreate(_InModel):
    company_id: EntityId
    user_id: EntityId
    projeto_id: EntityId
    max_hours: float = Field(gt=0, allow_inf_nan=False)


class MemberProjectHoursLimitUpdate(_InModel):
    max_hours: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


# --- Configuração do membro na empresa -------------------------------------


def _normalize_cpf(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    digits = re.sub(r"\D", "", value)
    if not digits:
        return None
    if len(digits) != 11:
        raise ValueError("CPF deve conter 11 dígitos")
    return digits


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value or None


Cpf = Annotated[Optional[str], AfterValidator(_normalize_cpf)]
Contato = Annotated[
    Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=120)]],
    AfterValidator(_blank_to_none),
]


class UserCompanySettingsOut(_OutModel):
    id: str
    user_id: str
    company_id: str
    horista: bool
    limite_mensal_horas: Optional[float] = None  # só faz sentido para horista
    contato: Optional[str] = None
    cpf: Optional[str] = None
    created_at: str
    updated_at: str


class UserCompanySettingsCreate(_InModel):
    user_id: EntityId
    company_id: EntityId
    horista: bool
    limite_mensal_horas: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    contato: Contato = None
    cpf: Cpf = None


class UserCompanySettingsUpdate(_InModel):
    horista: Optional[bool] = None
    limite_mensal_horas: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    contato: Contato = None
    cpf: Cpf = None
