"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - LibrarianId, ReaderId, LoanId wrap ints — the store assigns them, callers never do
    - All enumerated values encoded as Enums — no raw string matching in services
    - Address fields are all optional strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to the DB column without custom encoders
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

LibrarianId = NewType("LibrarianId", int)
ReaderId = NewType("ReaderId", int)
LoanId = NewType("LoanId", int)


# ─── Enums ───────────────────────────────────────────────────────

class LoyaltyTier(str, Enum):
    """Reader loyalty tiers, lowest to highest."""
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    DIAMOND = "DIAMOND"

    @classmethod
    def values(cls) -> list[str]:
        return [tier.value for tier in cls]


class EntityName(str, Enum):
    """Human-readable entity names used in error messages and logs."""
    LIBRARIAN = "Librarian"
    READER = "Reader"
    LOAN = "Loan"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class Address:
    """Postal address embedded in librarian and reader records."""
    postal_code: str | None = None
    street: str | None = None
    complement: str | None = None
    number: str | None = None
    district: str | None = None
    city: str | None = None
    state: str | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict | None) -> "Address":
        data = data or {}
        return cls(**{name: data.get(name) for name in cls.field_names()})
