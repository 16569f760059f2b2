"""Person Enforcement — tests for the rules shared by librarians and readers.

Tests cover:
    - name required and non-blank
    - tax_id required, exactly 11 digits
    - phone optional, 10 or 11 digits when present
    - email optional, well-formed when present
    - validate_person returns the first failing rule
"""

from library_api.core.enforce_person import (
    check_email,
    check_name,
    check_phone,
    check_tax_id,
    validate_person,
)


def _person(**overrides) -> dict:
    data = {
        "name": "Ana Souza",
        "tax_id": "52998224725",
        "email": "ana@biblioteca.com.br",
        "phone": "11987654321",
    }
    data.update(overrides)
    return data


# ─── name ────────────────────────────────────────────────────────

def test_check_name_accepts_non_blank():
    assert check_name(_person()) is None


def test_check_name_rejects_missing():
    error = check_name(_person(name=None))
    assert error is not None
    assert error.field == "name"


def test_check_name_rejects_whitespace():
    assert check_name(_person(name="   ")) is not None


# ─── tax_id ──────────────────────────────────────────────────────

def test_check_tax_id_rejects_missing():
    error = check_tax_id(_person(tax_id=None))
    assert error.message == "Tax id is required"


def test_check_tax_id_rejects_ten_digits():
    error = check_tax_id(_person(tax_id="5299822472"))
    assert error.field == "tax_id"
    assert error.code == "INVALID_DATA"


def test_check_tax_id_rejects_punctuation():
    assert check_tax_id(_person(tax_id="529.982.247-25")) is not None


# ─── phone / email ───────────────────────────────────────────────

def test_check_phone_is_optional():
    assert check_phone(_person(phone=None)) is None


def test_check_phone_accepts_ten_digits():
    assert check_phone(_person(phone="1132345678")) is None


def test_check_phone_rejects_twelve_digits():
    assert check_phone(_person(phone="119876543210")).field == "phone"


def test_check_email_is_optional():
    assert check_email(_person(email=None)) is None


def test_check_email_rejects_missing_domain_dot():
    assert check_email(_person(email="ana@library")).field == "email"


# ─── validate_person ─────────────────────────────────────────────

def test_validate_person_passes_valid_record():
    assert validate_person(_person()) is None


def test_validate_person_reports_first_failure():
    error = validate_person(_person(name="", tax_id="1"))
    assert error.field == "name"
