from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from .repositories import (
    MemberPaymentRepository,
    MemberProjectHoursRepository,
    UserCompanySettingsRepository,
)
from .schemas import (
    MemberPaymentOut,
    MemberPaymentCreate,
    MemberPaymentUpsert,
    MemberPaymentUpdate,
    MemberProjectHoursLimitOut,
    MemberProjectHoursLimitCreate,
    MemberProjectHoursLimitUpdate,
    UserCompanySettingsOut,
    UserCompanySettingsCreate,
    UserCompanySettingsUpdate,
)


router = APIRouter()


@router.get("/health")
def health():
    return {"ok": True}


# --- /member-payments -------------------------------------------------------


@router.get("/member-payments", response_model=List[MemberPaymentOut], tags=["Pagamentos"])
def list_member_payments(
    user_id: Optional[str] = Query(None, alias="userId"),
    company_id: Optional[str] = Query(None, alias="companyId"),
    mes: Optional[str] = Query(None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$"),
):
    rows = MemberPaymentRepository().list(user_id=user_id, company_id=company_id, mes=mes)
    return [MemberPaymentOut(**r) for r in rows]


@router.post("/member-payments", response_model=MemberPaymentOut, status_code=201, tags=["Pagamentos"])
def create_member_payment(payload: MemberPaymentCreate):
    row = MemberPaymentRepository().create(**payload.model_dump())
    return MemberPaymentOut(**row)


@router.put("/member-payments/upsert", response_model=MemberPaymentOut, tags=["Pagamentos"])
def upsert_member_payment(payload: MemberPaymentUpsert):
    row = MemberPaymentRepository().create_or_update(**payload.model_dump())
    return MemberPaymentOut(**row)


@router.get("/member-payments/{payment_id}", response_model=MemberPaymentOut, tags=["Pagamentos"])
def get_member_payment(payment_id: str):
    row = MemberPaymentRepository().get(payment_id)
    if not row:
        raise HTTPException(status_code=404, detail="Pagamento não encontrado")
    return MemberPaymentOut(**row)


@router.patch("/member-payments/{payment_id}", response_model=MemberPaymentOut, tags=["Pagamentos"])
def update_member_payment(payment_id: str, payload: MemberPaymentUpdate):
    row = MemberPaymentRepository().update(payment_id, **payload.model_dump(exclude_unset=True))
    return MemberPaymentOut(**row)


@router.delete("/member-payments/{payment_id}", tags=["Pagamentos"])
def delete_member_payment(payment_id: str):
    MemberPaymentRepository().delete(payment_id)
    return {"ok": True}


# --- /member-project-hours --------------------------------------------------


@router.get("/member-project-hours", response_model=List[MemberProjectHoursLimitOut], tags=["Teto de horas"])
def list_hours_limits(
    company_id: Optional[str] = Query(None, alias="companyId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    projeto_id: Optional[str] = Query(None, alias="projetoId"),
):
    rows = MemberProjectHoursRepository().list(company_id=company_id, user_id=user_id, projeto_id=projeto_id)
    return [MemberProjectHoursLimitOut(**r) for r in rows]


@router.post(
    "/member-project-hours",
    response_model=MemberProjectHoursLimitOut,
    status_code=201,
    tags=["Teto de horas"],
)
def create_hours_limit(payload: MemberProjectHoursLimitCreate):
    row = MemberProjectHoursRepository().create(**payload.model_dump())
    return MemberProjectHoursLimitOut(**row)


@router.delete("/member-project-hours", tags=["Teto de horas"])
def delete_hours_limit_by_user_and_project(
    user_id: str = Query(..., alias="userId"),
    projeto_id: str = Query(..., alias="projetoId"),
):
    deleted = MemberProjectHoursRepository().delete_by_user_and_project(user_id, projeto_id)
    return {"ok": True, "deleted": deleted}


@router.get("/member-project-hours/{limit_id}", response_model=MemberProjectHoursLimitOut, tags=["Teto de horas"])
def get_hours_limit(limit_id: str):
    row = MemberProjectHoursRepository().get(limit_id)
    if not row:
        raise HTTPException(status_code=404, detail="Limite não encontrado")
    return MemberProjectHoursLimitOut(**row)


@router.patch("/member-project-hours/{limit_id}", response_model=MemberProjectHoursLimitOut, tags=["Teto de horas"])
def update_hours_limit(limit_id: str, payload: MemberProjectHoursLimitUpdate):
    row = MemberProjectHoursRepository().update(limit_id, **payload.model_dump(exclude_unset=True))
    return MemberProjectHoursLimitOut(**row)


@router.delete("/member-project-hours/{limit_id}", tags=["Teto de horas"])
def delete_hours_limit(limit_id: str):
    MemberProjectHoursRepository().delete(limit_id)
    return {"ok": True}


# --- /user-company-settings -------------------------------------------------


@router.get("/user-company-settings", response_model=List[UserCompanySettingsOut], tags=["Configuração do membro"])
def list_user_company_settings(
    company_id: Optional[str] = Query(None, alias="companyId"),
    user_id: Optional[str] = Query(None, alias="userId"),
):
    rows = UserCompanySettingsRepository().list(company_id=company_id, user_id=user_id)
    return [UserCompanySettingsOut(**r) for r in rows]


@router.post(
    "/user-company-settings",
    response_model=UserCompanySettingsOut,
    status_code=201,
    tags=["Configuração do membro"],
)
def create_user_company_settings(payload: UserCompanySettingsCreate):
    row = UserCompanySettingsRepository().create(**payload.model_dump())
    return UserCompanySettingsOut(**row)


@router.delete("/user-company-settings", tags=["Configuração do membro"])
def delete_user_company_settings_by_pair(
    user_id: str = Query(..., alias="userId"),
    company_id: str = Query(..., alias="companyId"),
):
    deleted = UserCompanySettingsRepository().delete_by_user_and_company(user_id, company_id)
    return {"ok": True, "deleted": deleted}


@router.get(
    "/user-company-settings/{settings_id}",
    response_model=UserCompanySettingsOut,
    tags=["Configuração do membro"],
)
def get_user_company_settings(settings_id: str):
    row = UserCompanySettingsRepository().get(settings_id)
    if not row:
        raise HTTPException(status_code=404, detail="Configuração não encontrada")
    return UserCompanySettingsOut(**row)


@router.patch(
    "/user-company-settings/{settings_id}",
    response_model=UserCompanySettingsOut,
    tags=["Configuração do membro"],
)
def update_user_company_settings(settings_id: str, payload: UserCompanySettingsUpdate):
    row = UserCompanySettingsRepository().update(settings_id, payload.model_dump(exclude_unset=True))
    return UserCompanySettingsOut(**row)


@router.delete("/user-company-settings/{settings_id}", tags=["Configuração do membro"])
def delete_user_company_settings(settings_id: str):
    UserCompanySettingsRepository().delete(settings_id)
    return {"ok": True}
