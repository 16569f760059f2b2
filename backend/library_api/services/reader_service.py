"""Reader Service — intake, full update, tier/credit transitions and queries for library members.

Invariants:
    - create rejects a tax_id or email already present (DuplicateRecordError)
    - update keeps the id, re-validates, and does NOT re-check duplicates
    - update_loyalty_tier / update_credit_limit validate before touching the entity;
      on rejection nothing is persisted
    - delete removes the reader and every loan it owns

Design Decisions:
    - Existence is checked before the transition value (NOT_FOUND wins over INVALID_DATA)
"""

import logging
from datetime import date
from decimal import Decimal

from library_api.core.domain_types import EntityName, LoyaltyTier, ReaderId
from library_api.core.enforce_reader import (
    MAX_CREDIT_LIMIT,
    apply_reader_defaults,
    check_credit_limit,
    check_loyalty_tier,
    normalize_tier,
    validate_reader,
)
from library_api.core.errors import DuplicateRecordError, ResourceNotFoundError
from library_api.core.repository_protocols import PersonStore
from library_api.models.reader import READER_FIELDS, Reader

logger = logging.getLogger(__name__)


class ReaderService:
    """Domain operations on readers."""

    def __init__(
        self, store: PersonStore[Reader],
        max_credit_limit: Decimal = MAX_CREDIT_LIMIT,
    ):
        self.store = store
        self.max_credit_limit = max_credit_limit

    # ─── CRUD ───────────────────────────────────────────────────

    async def create(self, data: dict) -> Reader:
        payload = self._validated(data)

        if await self.store.find_by_tax_id(payload["tax_id"]):
            raise DuplicateRecordError(
                EntityName.READER.value, "tax_id", payload["tax_id"],
            )
        if payload.get("email") and await self.store.find_by_email(
            payload["email"],
        ):
            raise DuplicateRecordError(
                EntityName.READER.value, "email", payload["email"],
            )

        reader = Reader()
        reader.apply_fields(payload, READER_FIELDS)
        reader = await self.store.save(reader)
        logger.info(
            f"Reader {reader.id} created",
            extra={"entity": "reader", "entity_id": reader.id},
        )
        return reader

    async def update(self, reader_id: ReaderId, data: dict) -> Reader:
        existing = await self.find_by_id(reader_id)
        payload = self._validated(data)

        existing.apply_fields(payload, READER_FIELDS)
        reader = await self.store.save(existing)
        logger.info(
            f"Reader {reader_id} updated",
            extra={"entity": "reader", "entity_id": reader_id},
        )
        return reader

    async def find_by_id(self, reader_id: ReaderId) -> Reader:
        reader = await self.store.get(reader_id)
        if reader is None:
            raise ResourceNotFoundError(EntityName.READER.value, reader_id)
        return reader

    async def list_all(self) -> list[Reader]:
        return await self.store.list()

    async def delete(self, reader_id: ReaderId) -> None:
        """Delete the reader; its loans go with it."""
        reader = await self.find_by_id(reader_id)
        await self.store.delete(reader)
        logger.info(
            f"Reader {reader_id} deleted with its loans",
            extra={"entity": "reader", "entity_id": reader_id},
        )

    # ─── Transitions ────────────────────────────────────────────

    async def update_loyalty_tier(
        self, reader_id: ReaderId, tier: str | LoyaltyTier,
    ) -> Reader:
        reader = await self.find_by_id(reader_id)
        error = check_loyalty_tier(tier)
        if error:
            raise error

        reader.loyalty_tier = normalize_tier(tier)
        reader = await self.store.save(reader)
        logger.info(
            f"Reader {reader_id} loyalty tier set to {reader.loyalty_tier}",
            extra={"entity": "reader", "entity_id": reader_id},
        )
        return reader

    async def update_credit_limit(
        self, reader_id: ReaderId, limit: Decimal,
    ) -> Reader:
        reader = await self.find_by_id(reader_id)
        error = check_credit_limit(limit, self.max_credit_limit)
        if error:
            raise error

        reader.credit_limit = Decimal(str(limit))
        reader = await self.store.save(reader)
        logger.info(
            f"Reader {reader_id} credit limit set to {reader.credit_limit}",
            extra={"entity": "reader", "entity_id": reader_id},
        )
        return reader

    # ─── Queries ────────────────────────────────────────────────

    async def find_by_tax_id(self, tax_id: str) -> Reader:
        reader = await self.store.find_by_tax_id(tax_id)
        if reader is None:
            raise ResourceNotFoundError(
                EntityName.READER.value, tax_id, key="tax id",
            )
        return reader

    async def find_by_loyalty_tier(self, tier: str) -> list[Reader]:
        return await self.store.list(Reader.loyalty_tier == normalize_tier(tier))

    async def find_by_name_contains(self, name: str) -> list[Reader]:
        return await self.store.list(
            Reader.name.icontains(name, autoescape=True),
        )

    async def find_by_min_credit_limit(self, minimum: Decimal) -> list[Reader]:
        """Readers whose credit limit is at least `minimum`."""
        return await self.store.list(Reader.credit_limit >= minimum)

    async def find_active_since(self, since: date) -> list[Reader]:
        """Readers whose last reading happened strictly after `since`."""
        return await self.store.list(Reader.last_reading_date > since)

    async def find_by_loyalty_tier_and_min_credit(
        self, tier: str, minimum: Decimal,
    ) -> list[Reader]:
        """Tier match and credit limit strictly greater than `minimum`."""
        return await self.store.list(
            Reader.loyalty_tier == normalize_tier(tier),
            Reader.credit_limit > minimum,
        )

    # ─── Helpers ────────────────────────────────────────────────

    def _validated(self, data: dict) -> dict:
        payload = apply_reader_defaults(data, date.today())
        error = validate_reader(payload, self.max_credit_limit)
        if error:
            raise error
        payload["loyalty_tier"] = normalize_tier(payload["loyalty_tier"])
        return payload
