"""Loan Service — lending, returns, renewals and loan queries.

Invariants:
    - A loan is only persisted once its reader_id resolves through ReaderService
    - record_return is one-way; a second call raises and changes nothing
    - renew extends due_date by 1..max_renewal_days, outstanding loans only
    - list_overdue == outstanding AND due_date strictly before today

Design Decisions:
    - Depends on ReaderService (not on the reader store): NOT_FOUND for a missing
      reader comes from the reader's own lookup
    - "today" is always date.today(), the same clock Loan.overdue reads, so a loan
      listed as overdue also reports overdue=True
"""

import logging
from datetime import date
from library_api.core.domain_types import EntityName, LoanId, ReaderId
from library_api.core.enforce_loan import (
    DEFAULT_LOAN_DAYS,
    MAX_RENEWAL_DAYS,
    apply_loan_defaults,
    check_can_renew,
    check_can_return,
    check_renewal_fits,
    check_date_range,
    renewed_due_date,
    validate_loan,
)
from library_api.core.errors import ResourceNotFoundError
from library_api.core.repository_protocols import LoanStore
from library_api.models.loan import Loan
from library_api.services.reader_service import ReaderService

logger = logging.getLogger(__name__)


class LoanService:
    """Domain operations on loans."""

    def __init__(
        self,
        store: LoanStore[Loan],
        reader_service: ReaderService,
        loan_days: int = DEFAULT_LOAN_DAYS,
        max_renewal_days: int = MAX_RENEWAL_DAYS,
    ):
        self.store = store
        self.reader_service = reader_service
        self.loan_days = loan_days
        self.max_renewal_days = max_renewal_days

    # ─── CRUD ───────────────────────────────────────────────────

    async def create(self, data: dict) -> Loan:
        payload = await self._validated(data)

        loan = Loan()
        loan.apply_fields(payload)
        loan = await self.store.save(loan)
        logger.info(
            f"Loan {loan.id} created for reader {loan.reader_id}",
            extra={"entity": "loan", "entity_id": loan.id},
        )
        return loan

    async def update(self, loan_id: LoanId, data: dict) -> Loan:
        existing = await self.find_by_id(loan_id)
        payload = await self._validated(data)

        existing.apply_fields(payload)
        loan = await self.store.save(existing)
        logger.info(
            f"Loan {loan_id} updated",
            extra={"entity": "loan", "entity_id": loan_id},
        )
        return loan

    async def find_by_id(self, loan_id: LoanId) -> Loan:
        loan = await self.store.get(loan_id)
        if loan is None:
            raise ResourceNotFoundError(EntityName.LOAN.value, loan_id)
        return loan

    async def list_all(self) -> list[Loan]:
        return await self.store.list()

    async def delete(self, loan_id: LoanId) -> None:
        loan = await self.find_by_id(loan_id)
        await self.store.delete(loan)
        logger.info(
            f"Loan {loan_id} deleted",
            extra={"entity": "loan", "entity_id": loan_id},
        )

    # ─── Transitions ────────────────────────────────────────────

    async def record_return(self, loan_id: LoanId) -> Loan:
        loan = await self.find_by_id(loan_id)
        error = check_can_return(loan.returned)
        if error:
            raise error

        loan.returned = True
        loan.actual_return_date = date.today()
        loan = await self.store.save(loan)
        logger.info(
            f"Loan {loan_id} returned on {loan.actual_return_date}",
            extra={"entity": "loan", "entity_id": loan_id},
        )
        return loan

    async def renew(self, loan_id: LoanId, extra_days: int) -> Loan:
        loan = await self.find_by_id(loan_id)
        error = (
            check_can_renew(loan.returned, extra_days, self.max_renewal_days)
            or check_renewal_fits(loan.due_date, extra_days)
        )
        if error:
            raise error

        loan.due_date = renewed_due_date(loan.due_date, extra_days)
        loan = await self.store.save(loan)
        logger.info(
            f"Loan {loan_id} renewed until {loan.due_date}",
            extra={"entity": "loan", "entity_id": loan_id},
        )
        return loan

    # ─── Queries ────────────────────────────────────────────────

    async def find_by_reader(self, reader_id: ReaderId) -> list[Loan]:
        return await self.store.list_by_reader(reader_id)

    async def list_outstanding(self) -> list[Loan]:
        return await self.store.list(Loan.returned.is_(False))

    async def list_returned(self) -> list[Loan]:
        return await self.store.list(Loan.returned.is_(True))

    async def find_by_title_contains(self, title: str) -> list[Loan]:
        return await self.store.list(
            Loan.book_title.icontains(title, autoescape=True),
        )

    async def find_by_date_range(self, start: date, end: date) -> list[Loan]:
        """Loans whose loan_date falls within [start, end]."""
        error = check_date_range(start, end)
        if error:
            raise error
        return await self.store.list(Loan.loan_date.between(start, end))

    async def list_overdue(self) -> list[Loan]:
        return await self.store.list(
            Loan.due_date < date.today(), Loan.returned.is_(False),
        )

    async def find_by_reader_and_status(
        self, reader_id: ReaderId, returned: bool,
    ) -> list[Loan]:
        return await self.store.list(
            Loan.reader_id == reader_id, Loan.returned.is_(returned),
        )

    # ─── Helpers ────────────────────────────────────────────────

    async def _validated(self, data: dict) -> dict:
        """Defaults, structural rules, then reader resolution (NOT_FOUND if missing)."""
        payload = apply_loan_defaults(data, date.today(), self.loan_days)
        error = validate_loan(payload)
        if error:
            raise error
        reader = await self.reader_service.find_by_id(payload["reader_id"])
        payload["reader_id"] = reader.id
        return payload
