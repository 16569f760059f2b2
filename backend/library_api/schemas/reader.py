"""Reader Schemas — request/response models for /readers.

Invariants:
    - registration_number is required and non-blank at the boundary
    - loyalty_tier is a free string here; membership in LoyaltyTier is a domain rule
    - credit_limit may arrive null; the domain rejects it with INVALID_DATA
    - Reader responses never embed loans (fetch them from /readers/{id}/loans)
"""

from datetime import date
from decimal import Decimal

from pydantic import Field

from library_api.schemas.person import PersonIn, PersonOut


class ReaderIn(PersonIn):
    """Reader create / full-update payload."""
    registration_number: str = Field(min_length=1, max_length=50)
    registration_date: date | None = None
    active: bool = True
    loyalty_tier: str | None = Field(None, max_length=20)
    credit_limit: Decimal | None = None
    last_reading_date: date | None = None


class ReaderOut(PersonOut):
    """Reader as returned by the API."""
    registration_number: str
    registration_date: date | None = None
    active: bool
    loyalty_tier: str
    credit_limit: Decimal
    last_reading_date: date | None = None
