"""Librarian Rule Enforcement — validates librarian payloads before persistence.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects on the input
    - check_* return an InvalidDataError on violation, None on success
    - validate_librarian chains all checks — first error wins
    - MINIMUM_SALARY (1320.00) is the default floor; callers pass the configured one

Design Decisions:
    - Return errors (not raise): the service decides when to raise, tests assert on values
    - Payloads are plain dicts (model_dump or seed rows) so the same rules cover every caller
"""

import re
from datetime import date
from decimal import Decimal

from library_api.core.enforce_person import validate_person
from library_api.core.errors import InvalidDataError


MINIMUM_SALARY: Decimal = Decimal("1320.00")
REGISTRATION_NUMBER_PATTERN = re.compile(r"\d{4,}")


def apply_librarian_defaults(data: dict, today: date) -> dict:
    """Fill absent admission_date/active. Explicit None is kept for validation."""
    result = dict(data)
    result.setdefault("admission_date", today)
    result.setdefault("active", True)
    return result


def check_registration_number(data: dict) -> InvalidDataError | None:
    """Registration number: non-blank, digits only, at least 4 of them."""
    value = data.get("registration_number")
    if value is None or not str(value).strip():
        return InvalidDataError(
            "Registration number is required", "registration_number",
        )
    if not REGISTRATION_NUMBER_PATTERN.fullmatch(str(value).strip()):
        return InvalidDataError(
            "Registration number must contain at least 4 numeric digits",
            "registration_number",
        )
    return None


def check_employee_code(data: dict) -> InvalidDataError | None:
    value = data.get("employee_code")
    if value is None or not str(value).strip():
        return InvalidDataError("Employee code is required", "employee_code")
    return None


def check_salary(
    data: dict, minimum_salary: Decimal = MINIMUM_SALARY,
) -> InvalidDataError | None:
    salary = data.get("salary")
    if salary is None or Decimal(str(salary)) < minimum_salary:
        return InvalidDataError(
            f"Salary cannot be lower than the minimum wage ({minimum_salary:.2f})",
            "salary",
        )
    return None


def check_active_flag(data: dict) -> InvalidDataError | None:
    if data.get("active") is None:
        return InvalidDataError("Active status is required", "active")
    return None


def validate_librarian(
    data: dict, minimum_salary: Decimal = MINIMUM_SALARY,
) -> InvalidDataError | None:
    """Run every librarian rule in order. First error wins."""
    return (
        validate_person(data)
        or check_registration_number(data)
        or check_employee_code(data)
        or check_salary(data, minimum_salary)
        or check_active_flag(data)
    )


def check_salary_range(minimum: Decimal, maximum: Decimal) -> InvalidDataError | None:
    if minimum > maximum:
        return InvalidDataError(
            "Minimum salary cannot be greater than maximum salary", "min",
        )
    return None
