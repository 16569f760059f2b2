"""Librarian Routes — HTTP status codes and error envelopes for /api/v1/librarians.

Tests cover:
    - POST 201 with defaults; GET by id and tax id; PUT; DELETE 204 then 404
    - boundary shape errors → 400 VALIDATION_FAILED with details
    - domain rule errors → 400 INVALID_DATA / DUPLICATE_RECORD with field
    - update onto a taken tax id → 409 DATA_CONFLICT
    - PATCH deactivate/activate, /active, /search and /salary queries
"""

from decimal import Decimal

BASE = "/api/v1/librarians"


def _json(payload: dict) -> dict:
    return {
        key: str(value) if isinstance(value, Decimal) else value
        for key, value in payload.items()
    }


async def _create(client, librarian_payload, **overrides) -> dict:
    res = await client.post(BASE, json=_json(librarian_payload(**overrides)))
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_returns_201_with_defaults(client, librarian_payload):
    body = await _create(client, librarian_payload)

    assert body["id"] > 0
    assert body["active"] is True
    assert body["admission_date"] is not None
    assert Decimal(body["salary"]) == Decimal("3500")
    assert body["address"]["city"] == "Sao Paulo"
    assert body["address"]["street"] is None


async def test_get_by_id_and_tax_id(client, librarian_payload):
    created = await _create(client, librarian_payload)

    res = await client.get(f"{BASE}/{created['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Ana Souza"

    res = await client.get(f"{BASE}/tax-id/52998224725")
    assert res.json()["id"] == created["id"]


async def test_unknown_id_returns_404_envelope(client):
    res = await client.get(f"{BASE}/999")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["message"] == "Librarian not found with id: 999"
    assert error["path"] == f"{BASE}/999"


async def test_malformed_tax_id_is_validation_failed(client, librarian_payload):
    res = await client.post(BASE, json=_json(librarian_payload(tax_id="123")))

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_FAILED"
    assert any(d["field"].endswith("tax_id") for d in error["details"])


async def test_low_salary_is_invalid_data(client, librarian_payload):
    res = await client.post(BASE, json=_json(librarian_payload(salary="1000")))

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_DATA"
    assert error["field"] == "salary"
    assert (await client.get(BASE)).json() == []


async def test_explicit_null_active_is_invalid_data(client, librarian_payload):
    res = await client.post(BASE, json=_json(librarian_payload(active=None)))

    assert res.status_code == 400
    assert res.json()["error"]["field"] == "active"


async def test_duplicate_tax_id_is_rejected(client, librarian_payload):
    await _create(client, librarian_payload)

    res = await client.post(BASE, json=_json(librarian_payload(
        registration_number="2002", employee_code="EMP-002", email=None,
    )))

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_RECORD"


async def test_update_onto_taken_tax_id_is_conflict(client, librarian_payload):
    await _create(client, librarian_payload)
    second = await _create(
        client, librarian_payload, tax_id="39053344705",
        registration_number="2002", employee_code="EMP-002", email=None,
    )

    res = await client.put(f"{BASE}/{second['id']}", json=_json(librarian_payload(
        registration_number="2002", employee_code="EMP-002", email=None,
    )))

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DATA_CONFLICT"


async def test_put_replaces_librarian(client, librarian_payload):
    created = await _create(client, librarian_payload)

    res = await client.put(
        f"{BASE}/{created['id']}",
        json=_json(librarian_payload(name="Ana Maria Souza", shift="night")),
    )

    assert res.status_code == 200
    assert res.json()["id"] == created["id"]
    assert res.json()["shift"] == "night"


async def test_deactivate_and_activate(client, librarian_payload):
    created = await _create(client, librarian_payload)

    res = await client.patch(f"{BASE}/{created['id']}/deactivate")
    assert res.json()["active"] is False
    assert (await client.get(f"{BASE}/active")).json() == []

    res = await client.patch(f"{BASE}/{created['id']}/activate")
    assert res.json()["active"] is True
    assert len((await client.get(f"{BASE}/active")).json()) == 1


async def test_delete_returns_204_then_404(client, librarian_payload):
    created = await _create(client, librarian_payload)

    res = await client.delete(f"{BASE}/{created['id']}")
    assert res.status_code == 204

    assert (await client.get(f"{BASE}/{created['id']}")).status_code == 404


async def test_search_and_salary_queries(client, librarian_payload):
    await _create(client, librarian_payload)
    await _create(
        client, librarian_payload, name="Bruno Lima", tax_id="39053344705",
        registration_number="1002", employee_code="EMP-002", email=None,
        salary=Decimal("2000"), active=False,
    )

    res = await client.get(f"{BASE}/search", params={"name": "lima"})
    assert [l["name"] for l in res.json()] == ["Bruno Lima"]

    res = await client.get(f"{BASE}/search", params={"name": "a", "active": "true"})
    assert [l["name"] for l in res.json()] == ["Ana Souza"]

    res = await client.get(f"{BASE}/salary", params={"min": "1500", "max": "2000"})
    assert [l["name"] for l in res.json()] == ["Bruno Lima"]


async def test_inverted_salary_range_is_invalid_data(client):
    res = await client.get(f"{BASE}/salary", params={"min": "3000", "max": "1000"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_DATA"
