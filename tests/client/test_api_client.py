from __future__ import annotations

import json

import httpx
import pytest

from atuapj_client.core.api import ApiClient, ApiError


PAYMENT = {
    "id": "mp_1",
    "userId": "u1",
    "companyId": "c1",
    "valor": 1500,
    "mes": "2026-02",
    "createdAt": "2026-02-01T00:00:00.000Z",
    "updatedAt": "2026-02-05T00:00:00.000Z",
}


def _client(handler) -> ApiClient:
    http = httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(handler))
    return ApiClient(base_url="http://api.test", client=http)


def test_list_member_payments_sends_camel_case_filters():
    seen = {}

    def handler(request: httpx.Request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[PAYMENT])

    payments = _client(handler).list_member_payments(user_id="u1", company_id=None, mes="2026-02")

    assert seen == {"path": "/member-payments", "params": {"userId": "u1", "mes": "2026-02"}}
    assert payments[0].valor == 1500.0
    assert payments[0].updated_at == "2026-02-05T00:00:00.000Z"


def test_upsert_posts_body():
    def handler(request: httpx.Request):
        assert request.method == "PUT"
        assert request.url.path == "/member-payments/upsert"
        assert json.loads(request.content) == {"userId": "u1", "companyId": "c1", "valor": 10.0, "mes": "2026-02"}
        return httpx.Response(200, json={**PAYMENT, "valor": 10.0})

    assert _client(handler).upsert_member_payment(user_id="u1", company_id="c1", valor=10.0, mes="2026-02").valor == 10.0


def test_error_detail_is_exposed():
    def handler(request: httpx.Request):
        return httpx.Response(409, json={"detail": "Já existe"})

    with pytest.raises(ApiError) as exc:
        _client(handler).create_hours_limit(company_id="c1", user_id="u1", projeto_id="p1", max_hours=4)
    assert exc.value.status_code == 409
    assert exc.value.detail == "Já existe"


def test_connection_failure_is_status_zero():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("recusado", request=request)

    with pytest.raises(ApiError) as exc:
        _client(handler).list_member_payments(user_id="u1")
    assert exc.value.status_code == 0


def test_update_user_company_settings_maps_names():
    def handler(request: httpx.Request):
        body = json.loads(request.content)
        assert body == {"horista": False, "limiteMensalHoras": None}
        return httpx.Response(
            200,
            json={
                "id": "ucs_1",
                "userId": "u1",
                "companyId": "c1",
                "horista": False,
                "limiteMensalHoras": None,
                "contato": None,
                "cpf": None,
                "createdAt": "x",
                "updatedAt": "y",
            },
        )

    api = _client(handler)
    s = api.update_user_company_settings("ucs_1", horista=False, limite_mensal_horas=None)
    assert s.limite_mensal_horas is None

    with pytest.raises(ValueError):
        api.update_user_company_settings("ucs_1", valor_hora=10)


def test_get_user_company_settings_empty():
    assert _client(lambda r: httpx.Response(200, json=[])).get_user_company_settings("u1", "c1") is None
