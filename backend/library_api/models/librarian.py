"""Librarian ORM — persists library staff members.

Invariants:
    - employee_code and registration_number are non-nullable and unique
    - tax_id unique within this table (PersonColumns)
    - active defaults to True; admission_date defaults to the creation day
    - salary stored as Numeric(12, 2); the floor is enforced by the domain layer

Design Decisions:
    - Soft disable via the active flag: deactivate/activate never delete rows
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.db.base import Base
from library_api.models.person import PERSON_FIELDS, PersonColumns


class Librarian(PersonColumns, Base):
    """Librarian entity — a staff member with an employment record."""
    __tablename__ = "librarians"

    employee_code: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    admission_date: Mapped[date | None] = mapped_column(
        Date, nullable=True, default=date.today,
    )
    shift: Mapped[str | None] = mapped_column(String(50), nullable=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    registration_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )


LIBRARIAN_FIELDS: tuple[str, ...] = PERSON_FIELDS + (
    "employee_code", "admission_date", "shift", "active", "salary",
    "registration_number",
)
