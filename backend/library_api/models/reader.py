"""Reader ORM — persists library members who borrow books.

Invariants:
    - registration_number non-nullable and unique; tax_id unique within this table
    - loyalty_tier stores a LoyaltyTier value (validated by the domain layer)
    - credit_limit stored as Numeric(12, 2) within [0, 10000]
    - Reader owns its loans: ORM cascade plus ON DELETE CASCADE on loans.reader_id

Design Decisions:
    - loans relationship exists for the delete cascade only; reader payloads never embed
      loans, they are fetched through the loan store by reader id
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.db.base import Base
from library_api.models.person import PERSON_FIELDS, PersonColumns


class Reader(PersonColumns, Base):
    """Reader entity — a library member; aggregate root of its loans."""
    __tablename__ = "readers"

    registration_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    registration_date: Mapped[date | None] = mapped_column(
        Date, nullable=True, default=date.today,
    )
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    loyalty_tier: Mapped[str] = mapped_column(String(20), nullable=False)
    credit_limit: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False,
    )
    last_reading_date: Mapped[date | None] = mapped_column(
        Date, nullable=True,
    )

    loans: Mapped[list["Loan"]] = relationship(
        "Loan", cascade="save-update, delete, delete-orphan",
        lazy="selectin",
    )


READER_FIELDS: tuple[str, ...] = PERSON_FIELDS + (
    "registration_number", "registration_date", "active", "loyalty_tier",
    "credit_limit", "last_reading_date",
)
