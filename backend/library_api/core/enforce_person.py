"""Person Rule Enforcement — rules shared by every person-shaped record (librarian, reader).

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - tax_id is exactly 11 digits; phone, when present, 10 or 11 digits
    - email, when present, has a local part, one @ and a dotted domain
    - validate_person chains all checks — first error wins

Design Decisions:
    - Same checks as the boundary schemas: seed rows and direct service callers
      never pass through Pydantic, so the domain repeats them
"""

import re

from library_api.core.errors import InvalidDataError


TAX_ID_PATTERN = re.compile(r"\d{11}")
PHONE_PATTERN = re.compile(r"\d{10,11}")
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def check_name(data: dict) -> InvalidDataError | None:
    name = data.get("name")
    if name is None or not str(name).strip():
        return InvalidDataError("Name is required", "name")
    return None


def check_tax_id(data: dict) -> InvalidDataError | None:
    tax_id = data.get("tax_id")
    if tax_id is None or not str(tax_id).strip():
        return InvalidDataError("Tax id is required", "tax_id")
    if not TAX_ID_PATTERN.fullmatch(str(tax_id)):
        return InvalidDataError("Tax id must contain exactly 11 digits", "tax_id")
    return None


def check_phone(data: dict) -> InvalidDataError | None:
    phone = data.get("phone")
    if phone and not PHONE_PATTERN.fullmatch(str(phone)):
        return InvalidDataError("Phone must contain 10 or 11 digits", "phone")
    return None


def check_email(data: dict) -> InvalidDataError | None:
    email = data.get("email")
    if email and not EMAIL_PATTERN.fullmatch(str(email)):
        return InvalidDataError("Invalid email", "email")
    return None


def validate_person(data: dict) -> InvalidDataError | None:
    """Shared person rules. First error wins."""
    return (
        check_name(data)
        or check_tax_id(data)
        or check_email(data)
        or check_phone(data)
    )
