"""Reader Rule Enforcement — validates reader payloads and the tier/credit transitions.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Loyalty tier must be one of LoyaltyTier values, on intake and on the dedicated transition
    - Credit limit must lie in [0, MAX_CREDIT_LIMIT] inclusive, on intake and on the transition
    - validate_reader chains all checks — first error wins

Design Decisions:
    - Tier kept as a raw string until validated: an unknown tier is a domain rejection
      (INVALID_DATA), not a boundary shape failure
"""

from datetime import date
from decimal import Decimal

from library_api.core.domain_types import LoyaltyTier
from library_api.core.enforce_person import validate_person
from library_api.core.errors import InvalidDataError


MAX_CREDIT_LIMIT: Decimal = Decimal("10000")


def apply_reader_defaults(data: dict, today: date) -> dict:
    """Fill absent registration_date/active. Explicit None is kept."""
    result = dict(data)
    result.setdefault("registration_date", today)
    result.setdefault("active", True)
    return result


def check_reader_registration_number(data: dict) -> InvalidDataError | None:
    value = data.get("registration_number")
    if value is None or not str(value).strip():
        return InvalidDataError(
            "Registration number is required", "registration_number",
        )
    return None


def check_loyalty_tier(tier: object) -> InvalidDataError | None:
    value = tier.value if isinstance(tier, LoyaltyTier) else tier
    if value is None or value not in LoyaltyTier.values():
        return InvalidDataError(
            "Invalid loyalty tier. Accepted values: "
            + ", ".join(LoyaltyTier.values()),
            "loyalty_tier",
        )
    return None


def check_credit_limit(
    limit: object, max_credit_limit: Decimal = MAX_CREDIT_LIMIT,
) -> InvalidDataError | None:
    if limit is None:
        return InvalidDataError("Credit limit is required", "credit_limit")
    amount = Decimal(str(limit))
    if amount < 0 or amount > max_credit_limit:
        return InvalidDataError(
            f"Credit limit must be between 0.00 and {max_credit_limit:.2f}",
            "credit_limit",
        )
    return None


def validate_reader(
    data: dict, max_credit_limit: Decimal = MAX_CREDIT_LIMIT,
) -> InvalidDataError | None:
    """Run every reader rule in order. First error wins."""
    return (
        validate_person(data)
        or check_reader_registration_number(data)
        or check_loyalty_tier(data.get("loyalty_tier"))
        or check_credit_limit(data.get("credit_limit"), max_credit_limit)
    )


def normalize_tier(tier: object) -> str:
    """Stored form of an already-validated tier."""
    return tier.value if isinstance(tier, LoyaltyTier) else str(tier)
