"""Librarian Service — create/update/delete, activation toggles and queries over SQLite.

Tests cover:
    - create persists, assigns an id, applies admission_date/active defaults
    - salary below the floor rejected and nothing persisted
    - duplicate tax id, registration number or email rejected on create
    - missing employee code is INVALID_DATA, not a storage conflict
    - update does not re-check duplicates: unique constraint surfaces as DataConflictError
    - deactivate then activate leaves the librarian active
    - name, salary range and name+active queries
    - NOT_FOUND on unknown id and tax id
"""

from datetime import date
from decimal import Decimal

import pytest

from library_api.core.errors import (
    DataConflictError,
    DuplicateRecordError,
    InvalidDataError,
    ResourceNotFoundError,
)


async def test_create_assigns_id_and_defaults(services, librarian_payload):
    librarian = await services.librarians.create(librarian_payload())

    assert librarian.id is not None
    assert librarian.active is True
    assert librarian.admission_date == date.today()
    found = await services.librarians.find_by_id(librarian.id)
    assert found.tax_id == "52998224725"
    assert found.address.city == "Sao Paulo"


async def test_create_strips_registration_number(services, librarian_payload):
    librarian = await services.librarians.create(
        librarian_payload(registration_number=" 1001 "),
    )
    assert librarian.registration_number == "1001"


async def test_salary_below_floor_is_rejected_and_not_persisted(
    services, librarian_payload,
):
    with pytest.raises(InvalidDataError) as exc:
        await services.librarians.create(librarian_payload(salary=Decimal("1000")))

    assert exc.value.field == "salary"
    assert await services.librarians.list_all() == []


async def test_duplicate_tax_id_is_rejected(services, librarian_payload):
    await services.librarians.create(librarian_payload())

    with pytest.raises(DuplicateRecordError) as exc:
        await services.librarians.create(librarian_payload(
            registration_number="2002", employee_code="EMP-002", email=None,
        ))

    assert exc.value.field == "tax_id"
    assert len(await services.librarians.list_all()) == 1


async def test_duplicate_registration_number_is_rejected(
    services, librarian_payload,
):
    await services.librarians.create(librarian_payload())

    with pytest.raises(DuplicateRecordError) as exc:
        await services.librarians.create(librarian_payload(
            tax_id="39053344705", employee_code="EMP-002", email=None,
        ))

    assert exc.value.field == "registration_number"


async def test_duplicate_email_is_rejected(services, librarian_payload):
    await services.librarians.create(librarian_payload())

    with pytest.raises(DuplicateRecordError) as exc:
        await services.librarians.create(librarian_payload(
            name="Bruno Lima", tax_id="39053344705",
            registration_number="2002", employee_code="EMP-002",
        ))

    assert exc.value.field == "email"
    assert len(await services.librarians.list_all()) == 1


async def test_missing_employee_code_is_invalid_and_not_persisted(
    services, librarian_payload,
):
    payload = librarian_payload()
    del payload["employee_code"]

    with pytest.raises(InvalidDataError) as exc:
        await services.librarians.create(payload)

    assert exc.value.field == "employee_code"
    assert await services.librarians.list_all() == []


async def test_update_replaces_fields_and_keeps_id(services, librarian_payload):
    created = await services.librarians.create(librarian_payload())

    updated = await services.librarians.update(
        created.id, librarian_payload(name="Ana Maria Souza", salary=Decimal("4000")),
    )

    assert updated.id == created.id
    found = await services.librarians.find_by_id(created.id)
    assert found.name == "Ana Maria Souza"
    assert found.salary == Decimal("4000")


async def test_update_with_taken_tax_id_is_a_conflict(services, librarian_payload):
    await services.librarians.create(librarian_payload())
    second = await services.librarians.create(librarian_payload(
        tax_id="39053344705", registration_number="2002",
        employee_code="EMP-002", email="bruno@biblioteca.com.br",
    ))

    with pytest.raises(DataConflictError):
        await services.librarians.update(second.id, librarian_payload(
            registration_number="2002", employee_code="EMP-002",
            email="bruno@biblioteca.com.br",
        ))

    found = await services.librarians.find_by_id(second.id)
    assert found.tax_id == "39053344705"


async def test_update_unknown_id_is_not_found(services, librarian_payload):
    with pytest.raises(ResourceNotFoundError):
        await services.librarians.update(999, librarian_payload())


async def test_deactivate_then_activate(services, librarian_payload):
    librarian = await services.librarians.create(librarian_payload())

    deactivated = await services.librarians.deactivate(librarian.id)
    assert deactivated.active is False
    assert await services.librarians.list_active() == []

    await services.librarians.activate(librarian.id)
    found = await services.librarians.find_by_id(librarian.id)
    assert found.active is True


async def test_delete_then_find_is_not_found(services, librarian_payload):
    librarian = await services.librarians.create(librarian_payload())

    await services.librarians.delete(librarian.id)

    with pytest.raises(ResourceNotFoundError):
        await services.librarians.find_by_id(librarian.id)


async def test_find_by_tax_id(services, librarian_payload):
    await services.librarians.create(librarian_payload())

    assert (await services.librarians.find_by_tax_id("52998224725")).name == "Ana Souza"
    with pytest.raises(ResourceNotFoundError) as exc:
        await services.librarians.find_by_tax_id("00000000000")
    assert "tax id" in exc.value.message


async def _create_three(services, librarian_payload):
    await services.librarians.create(librarian_payload())
    await services.librarians.create(librarian_payload(
        name="Bruno Lima", tax_id="39053344705", registration_number="1002",
        employee_code="EMP-002", email=None, salary=Decimal("2800.50"),
    ))
    await services.librarians.create(librarian_payload(
        name="Carla Dias", tax_id="11144477735", registration_number="1003",
        employee_code="EMP-003", email=None, salary=Decimal("1320.00"),
        active=False,
    ))


async def test_find_by_name_contains_is_case_insensitive(
    services, librarian_payload,
):
    await _create_three(services, librarian_payload)

    names = [l.name for l in await services.librarians.find_by_name_contains("LIMA")]
    assert names == ["Bruno Lima"]


async def test_find_by_salary_range_is_inclusive(services, librarian_payload):
    await _create_three(services, librarian_payload)

    found = await services.librarians.find_by_salary_range(
        Decimal("1320.00"), Decimal("2800.50"),
    )
    assert sorted(l.name for l in found) == ["Bruno Lima", "Carla Dias"]


async def test_find_by_salary_range_rejects_inverted_bounds(services):
    with pytest.raises(InvalidDataError):
        await services.librarians.find_by_salary_range(Decimal("5000"), Decimal("1000"))


async def test_find_by_name_and_active(services, librarian_payload):
    await _create_three(services, librarian_payload)

    inactive = await services.librarians.find_by_name_and_active("a", False)
    assert [l.name for l in inactive] == ["Carla Dias"]
