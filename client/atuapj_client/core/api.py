from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import httpx

from atuapj_client.core.models import MemberPayment, MemberProjectHoursLimit, UserCompanySettings


DEFAULT_API_URL = "http://localhost:3001"


class ApiError(Exception):
    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


def _clean(params: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


class ApiClient:
    """Cliente HTTP da API do AtuaPJ (um método por rota)."""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None, timeout: float = 15.0):
        self.base_url = (base_url or os.environ.get("ATUAPJ_API_URL") or DEFAULT_API_URL).rstrip("/")
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, *, params=None, json=None) -> Any:
        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            raise ApiError(0, f"Falha de conexão com {self.base_url}: {exc}") from exc
        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
            raise ApiError(response.status_code, detail)
        return response.json()

    # --- Pagamentos ---------------------------------------------------------

    def list_member_payments(
        self,
        *,
        user_id: Optional[str] = None,
        company_id: Optional[str] = None,
        mes: Optional[str] = None,
    ) -> List[MemberPayment]:
        params = _clean({"userId": user_id, "companyId": company_id, "mes": mes})
        rows = self._request("GET", "/member-payments", params=params)
        return [MemberPayment.from_api(r) for r in rows]

    def create_member_payment(self, *, user_id: str, company_id: str, valor: float, mes: str) -> MemberPayment:
        body = {"userId": user_id, "companyId": company_id, "valor": valor, "mes": mes}
        return MemberPayment.from_api(self._request("POST", "/member-payments", json=body))

    def upsert_member_payment(self, *, user_id: str, company_id: str, valor: float, mes: str) -> MemberPayment:
        body = {"userId": user_id, "companyId": company_id, "valor": valor, "mes": mes}
        return MemberPayment.from_api(self._request("PUT", "/member-payments/upsert", json=body))

    def update_member_payment(self, payment_id: str, *, valor: Optional[float] = None) -> MemberPayment:
        body = _clean({"valor": valor})
        return MemberPayment.from_api(self._request("PATCH", f"/member-payments/{payment_id}", json=body))

    def delete_member_payment(self, payment_id: str) -> None:
        self._request("DELETE", f"/member-payments/{payment_id}")

    # --- Teto de horas ------------------------------------------------------

    def list_hours_limits(
        self,
        *,
        company_id: Optional[str] = None,
        user_id: Optional[str] = None,
        projeto_id: Optional[str] = None,
    ) -> List[MemberProjectHoursLimit]:
        params = _clean({"companyId": company_id, "userId": user_id, "projetoId": projeto_id})
        rows = self._request("GET", "/member-project-hours", params=params)
        return [MemberProjectHoursLimit.from_api(r) for r in rows]

    def create_hours_limit(
        self, *, company_id: str, user_id: str, projeto_id: str, max_hours: float
    ) -> MemberProjectHoursLimit:
        body = {"companyId": company_id, "userId": user_id, "projetoId": projeto_id, "maxHours": max_hours}
        return MemberProjectHoursLimit.from_api(self._request("POST", "/member-project-hours", json=body))

    def update_hours_limit(self, limit_id: str, *, max_hours: Optional[float] = None) -> MemberProjectHoursLimit:
        body = _clean({"maxHours": max_hours})
        return MemberProjectHoursLimit.from_api(
            self._request("PATCH", f"/member-project-hours/{limit_id}", json=body)
        )

    def delete_hours_limit(self, limit_id: str) -> None:
        self._request("DELETE", f"/member-project-hours/{limit_id}")

    # --- Configuração do membro na empresa ----------------------------------

    def get_user_company_settings(self, user_id: str, company_id: str) -> Optional[UserCompanySettings]:
        rows = self._request(
            "GET", "/user-company-settings", params={"userId": user_id, "companyId": company_id}
        )
        return UserCompanySettings.from_api(rows[0]) if rows else None

    def create_user_company_settings(
        self,
        *,
        user_id: str,
        company_id: str,
        horista: bool,
        limite_mensal_horas: Optional[float] = None,
        contato: Optional[str] = None,
        cpf: Optional[str] = None,
    ) -> UserCompanySettings:
        body = _clean(
            {
                "userId": user_id,
                "companyId": company_id,
                "horista": horista,
                "limiteMensalHoras": limite_mensal_horas,
                "contato": contato,
                "cpf": cpf,
            }
        )
        return UserCompanySettings.from_api(self._request("POST", "/user-company-settings", json=body))

    def update_user_company_settings(self, settings_id: str, **changes: Any) -> UserCompanySettings:
        """Patch parcial; chaves em snake_case (horista, limite_mensal_horas, contato, cpf)."""
        names = {
            "horista": "horista",
            "limite_mensal_horas": "limiteMensalHoras",
            "contato": "contato",
            "cpf": "cpf",
        }
        unknown = set(changes) - set(names)
        if unknown:
            raise ValueError(f"Campos inválidos: {', '.join(sorted(unknown))}")
        body = {names[k]: v for k, v in changes.items()}
        return UserCompanySettings.from_api(
            self._request("PATCH", f"/user-company-settings/{settings_id}", json=body)
        )

    def delete_user_company_settings(self, settings_id: str) -> None:
        self._request("DELETE", f"/user-company-settings/{settings_id}")
