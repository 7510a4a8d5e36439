from __future__ import annotations

from atuapj_api.schemas import MemberPaymentCreate, MemberPaymentOut


PAYMENT = {"userId": "u1", "companyId": "c1", "valor": 1500.0, "mes": "2026-02"}


def test_create_assigns_identity_and_timestamps(client):
    r = client.post("/member-payments", json=PAYMENT)
    assert r.status_code == 201
    body = r.json()
    assert body["id"].startswith("mp_")
    assert body["createdAt"].endswith("Z")
    assert body["createdAt"] == body["updatedAt"]


def test_create_then_read_back_matches_payload(client):
    created = client.post("/member-payments", json=PAYMENT).json()
    fetched = client.get(f"/member-payments/{created['id']}").json()

    assert fetched == created
    assert {k: v for k, v in fetched.items() if k not in ("id", "createdAt", "updatedAt")} == PAYMENT


def test_create_dto_serializes_and_parses_back():
    dto = MemberPaymentCreate.model_validate(PAYMENT)
    raw = dto.model_dump_json(by_alias=True)
    assert MemberPaymentCreate.model_validate_json(raw) == dto

    out = MemberPaymentOut(id="mp_1", created_at="2026-02-01T00:00:00.000Z", updated_at="2026-02-01T00:00:00.000Z", **dto.model_dump())
    again = MemberPaymentOut.model_validate_json(out.model_dump_json(by_alias=True))
    assert again.model_dump(exclude={"id", "created_at", "updated_at"}) == dto.model_dump()


def test_duplicate_month_conflicts(client):
    assert client.post("/member-payments", json=PAYMENT).status_code == 201
    r = client.post("/member-payments", json={**PAYMENT, "valor": 10})
    assert r.status_code == 409


def test_list_filters(client):
    client.post("/member-payments", json=PAYMENT)
    client.post("/member-payments", json={**PAYMENT, "mes": "2026-03"})
    client.post("/member-payments", json={**PAYMENT, "userId": "u2"})

    assert len(client.get("/member-payments").json()) == 3
    assert len(client.get("/member-payments", params={"userId": "u1"}).json()) == 2
    only = client.get("/member-payments", params={"userId": "u1", "mes": "2026-03"}).json()
    assert [p["mes"] for p in only] == ["2026-03"]


def test_patch_updates_valor_only(client):
    created = client.post("/member-payments", json=PAYMENT).json()
    r = client.patch(f"/member-payments/{created['id']}", json={"valor": 2000})
    assert r.status_code == 200
    body = r.json()
    assert body["valor"] == 2000.0
    assert body["mes"] == "2026-02"
    assert body["createdAt"] == created["createdAt"]


def test_patch_null_valor_keeps_current(client):
    created = client.post("/member-payments", json=PAYMENT).json()
    r = client.patch(f"/member-payments/{created['id']}", json={"valor": None})
    assert r.status_code == 200
    assert r.json()["valor"] == 1500.0


def test_upsert_creates_then_updates(client):
    first = client.put("/member-payments/upsert", json=PAYMENT)
    assert first.status_code == 200
    second = client.put("/member-payments/upsert", json={**PAYMENT, "valor": 99.9})
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["valor"] == 99.9
    assert len(client.get("/member-payments").json()) == 1


def test_missing_payment(client):
    assert client.get("/member-payments/mp_nada").status_code == 404
    assert client.patch("/member-payments/mp_nada", json={"valor": 1}).status_code == 404
    assert client.delete("/member-payments/mp_nada").status_code == 404


def test_delete(client):
    created = client.post("/member-payments", json=PAYMENT).json()
    r = client.delete(f"/member-payments/{created['id']}")
    assert r.json() == {"ok": True}
    assert client.get(f"/member-payments/{created['id']}").status_code == 404
