"""Librarian Schemas — request/response models for /librarians.

Invariants:
    - registration_number and employee_code are required and non-blank at the boundary
    - salary and active may arrive null; the domain rejects them with INVALID_DATA
    - admission_date and active omitted from the body are filled by the domain defaults

Design Decisions:
    - Same model for create and full update (PUT replaces every field)
"""

from datetime import date
from decimal import Decimal

from pydantic import Field

from library_api.schemas.person import PersonIn, PersonOut


class LibrarianIn(PersonIn):
    """Librarian create / full-update payload."""
    employee_code: str = Field(min_length=1, max_length=50)
    registration_number: str = Field(min_length=1, max_length=50)
    admission_date: date | None = None
    shift: str | None = Field(None, max_length=50)
    active: bool | None = None
    salary: Decimal | None = None


class LibrarianOut(PersonOut):
    """Librarian as returned by the API."""
    employee_code: str
    registration_number: str
    admission_date: date | None = None
    shift: str | None = None
    active: bool
    salary: Decimal
