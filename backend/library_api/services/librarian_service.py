"""Librarian Service — intake, full update, soft disable and queries for library staff.

Invariants:
    - create rejects a tax_id, registration_number or email already present (DuplicateRecordError)
    - update keeps the id, re-validates, and does NOT re-check duplicates
    - deactivate/activate only flip the active flag
    - Every miss by id or tax id raises ResourceNotFoundError

Design Decisions:
    - Rules live in core/enforce_librarian.py (pure); this class only orchestrates
      rule → store and raises
    - Update-path duplicates are left to the table's unique constraints (DataConflictError)
"""

import logging
from datetime import date
from decimal import Decimal

from library_api.core.domain_types import EntityName, LibrarianId
from library_api.core.enforce_librarian import (
    MINIMUM_SALARY,
    apply_librarian_defaults,
    check_salary_range,
    validate_librarian,
)
from library_api.core.errors import DuplicateRecordError, ResourceNotFoundError
from library_api.core.repository_protocols import PersonStore
from library_api.models.librarian import LIBRARIAN_FIELDS, Librarian

logger = logging.getLogger(__name__)


class LibrarianService:
    """Domain operations on librarians."""

    def __init__(
        self, store: PersonStore[Librarian],
        minimum_salary: Decimal = MINIMUM_SALARY,
    ):
        self.store = store
        self.minimum_salary = minimum_salary

    # ─── CRUD ───────────────────────────────────────────────────

    async def create(self, data: dict) -> Librarian:
        """Validate, reject duplicates, persist. Returns the entity with its new id."""
        payload = self._validated(data)

        if await self.store.find_by_tax_id(payload["tax_id"]):
            raise DuplicateRecordError(
                EntityName.LIBRARIAN.value, "tax_id", payload["tax_id"],
            )
        if await self.store.find_by_registration_number(
            payload["registration_number"],
        ):
            raise DuplicateRecordError(
                EntityName.LIBRARIAN.value, "registration_number",
                payload["registration_number"],
            )
        if payload.get("email") and await self.store.find_by_email(
            payload["email"],
        ):
            raise DuplicateRecordError(
                EntityName.LIBRARIAN.value, "email", payload["email"],
            )

        librarian = Librarian()
        librarian.apply_fields(payload, LIBRARIAN_FIELDS)
        librarian = await self.store.save(librarian)
        logger.info(
            f"Librarian {librarian.id} created",
            extra={"entity": "librarian", "entity_id": librarian.id},
        )
        return librarian

    async def update(self, librarian_id: LibrarianId, data: dict) -> Librarian:
        """Full replace of an existing librarian."""
        existing = await self.find_by_id(librarian_id)
        payload = self._validated(data)

        existing.apply_fields(payload, LIBRARIAN_FIELDS)
        librarian = await self.store.save(existing)
        logger.info(
            f"Librarian {librarian_id} updated",
            extra={"entity": "librarian", "entity_id": librarian_id},
        )
        return librarian

    async def find_by_id(self, librarian_id: LibrarianId) -> Librarian:
        librarian = await self.store.get(librarian_id)
        if librarian is None:
            raise ResourceNotFoundError(
                EntityName.LIBRARIAN.value, librarian_id,
            )
        return librarian

    async def list_all(self) -> list[Librarian]:
        return await self.store.list()

    async def delete(self, librarian_id: LibrarianId) -> None:
        librarian = await self.find_by_id(librarian_id)
        await self.store.delete(librarian)
        logger.info(
            f"Librarian {librarian_id} deleted",
            extra={"entity": "librarian", "entity_id": librarian_id},
        )

    # ─── Status transitions ─────────────────────────────────────

    async def deactivate(self, librarian_id: LibrarianId) -> Librarian:
        return await self._set_active(librarian_id, False)

    async def activate(self, librarian_id: LibrarianId) -> Librarian:
        return await self._set_active(librarian_id, True)

    async def _set_active(
        self, librarian_id: LibrarianId, active: bool,
    ) -> Librarian:
        librarian = await self.find_by_id(librarian_id)
        librarian.active = active
        librarian = await self.store.save(librarian)
        logger.info(
            f"Librarian {librarian_id} {'activated' if active else 'deactivated'}",
            extra={"entity": "librarian", "entity_id": librarian_id},
        )
        return librarian

    # ─── Queries ────────────────────────────────────────────────

    async def find_by_tax_id(self, tax_id: str) -> Librarian:
        librarian = await self.store.find_by_tax_id(tax_id)
        if librarian is None:
            raise ResourceNotFoundError(
                EntityName.LIBRARIAN.value, tax_id, key="tax id",
            )
        return librarian

    async def list_active(self) -> list[Librarian]:
        return await self.store.list(Librarian.active.is_(True))

    async def find_by_name_contains(self, name: str) -> list[Librarian]:
        """Case-insensitive substring match on name."""
        return await self.store.list(
            Librarian.name.icontains(name, autoescape=True),
        )

    async def find_by_salary_range(
        self, minimum: Decimal, maximum: Decimal,
    ) -> list[Librarian]:
        """Inclusive salary range."""
        error = check_salary_range(minimum, maximum)
        if error:
            raise error
        return await self.store.list(Librarian.salary.between(minimum, maximum))

    async def find_by_name_and_active(
        self, name: str, active: bool,
    ) -> list[Librarian]:
        return await self.store.list(
            Librarian.name.icontains(name, autoescape=True),
            Librarian.active.is_(active),
        )

    # ─── Helpers ────────────────────────────────────────────────

    def _validated(self, data: dict) -> dict:
        """Defaults, then rules; raises the first InvalidDataError."""
        payload = apply_librarian_defaults(data, date.today())
        error = validate_librarian(payload, self.minimum_salary)
        if error:
            raise error
        payload["registration_number"] = str(payload["registration_number"]).strip()
        return payload
