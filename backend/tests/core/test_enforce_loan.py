"""Loan Enforcement — tests for loan defaults, structure, return/renew and overdue.

Tests cover:
    - due_date defaults to loan_date + 14 only when absent
    - explicit None dates survive defaults and are rejected
    - due_date earlier than loan_date rejected
    - return is one-way; renew bounded to 1..30 days and outstanding loans
    - renewal and default due date never step past date.max
    - is_overdue is strict: yesterday overdue, today and tomorrow not
"""

from datetime import date, timedelta

from library_api.core.enforce_loan import (
    DEFAULT_LOAN_DAYS,
    MAX_RENEWAL_DAYS,
    apply_loan_defaults,
    check_can_renew,
    check_can_return,
    check_date_range,
    check_renewal_fits,
    is_overdue,
    renewed_due_date,
    validate_loan,
)

TODAY = date(2026, 10, 19)


def _loan(**overrides) -> dict:
    data = {"reader_id": 1, "book_title": "Dom Casmurro"}
    data.update(overrides)
    return data


# ─── defaults ────────────────────────────────────────────────────

def test_defaults_use_today_and_fourteen_days():
    result = apply_loan_defaults(_loan(), TODAY)
    assert result["loan_date"] == TODAY
    assert result["due_date"] == TODAY + timedelta(days=DEFAULT_LOAN_DAYS)
    assert result["returned"] is False


def test_due_date_follows_explicit_loan_date():
    result = apply_loan_defaults(_loan(loan_date=date(2026, 1, 1)), TODAY)
    assert result["due_date"] == date(2026, 1, 15)


def test_explicit_due_date_is_kept():
    result = apply_loan_defaults(_loan(due_date=date(2026, 11, 1)), TODAY)
    assert result["due_date"] == date(2026, 11, 1)


def test_explicit_null_due_date_is_rejected():
    result = apply_loan_defaults(_loan(due_date=None), TODAY)
    assert validate_loan(result).field == "due_date"


def test_explicit_null_loan_date_is_rejected():
    result = apply_loan_defaults(_loan(loan_date=None), TODAY)
    assert validate_loan(result).field == "loan_date"


def test_no_default_due_date_past_last_supported_date():
    result = apply_loan_defaults(_loan(loan_date=date.max), TODAY)
    assert "due_date" not in result
    assert validate_loan(result).field == "due_date"


# ─── validate_loan ───────────────────────────────────────────────

def test_valid_loan_passes():
    assert validate_loan(apply_loan_defaults(_loan(), TODAY)) is None


def test_blank_title_is_rejected():
    result = apply_loan_defaults(_loan(book_title=" "), TODAY)
    assert validate_loan(result).field == "book_title"


def test_due_before_loan_is_rejected():
    result = apply_loan_defaults(
        _loan(loan_date=TODAY, due_date=TODAY - timedelta(days=1)), TODAY,
    )
    assert validate_loan(result).field == "due_date"


def test_due_equal_to_loan_date_is_accepted():
    result = apply_loan_defaults(_loan(loan_date=TODAY, due_date=TODAY), TODAY)
    assert validate_loan(result) is None


def test_missing_reader_is_rejected():
    result = apply_loan_defaults(_loan(reader_id=None), TODAY)
    assert validate_loan(result).field == "reader_id"


# ─── return / renew ──────────────────────────────────────────────

def test_outstanding_loan_can_be_returned():
    assert check_can_return(False) is None


def test_returned_loan_cannot_be_returned_again():
    assert check_can_return(True).message == "This book has already been returned"


def test_renew_accepts_bounds():
    assert check_can_renew(False, 1) is None
    assert check_can_renew(False, MAX_RENEWAL_DAYS) is None


def test_renew_rejects_zero_and_thirty_one():
    assert check_can_renew(False, 0).field == "days"
    assert check_can_renew(False, MAX_RENEWAL_DAYS + 1).field == "days"


def test_renew_rejects_returned_loan():
    assert check_can_renew(True, 7).field == "returned"


def test_renewed_due_date_adds_days():
    assert renewed_due_date(date(2026, 10, 30), 7) == date(2026, 11, 6)


def test_renewal_past_last_supported_date_is_rejected():
    assert check_renewal_fits(date.max, 1).field == "days"
    assert check_renewal_fits(date.max - timedelta(days=3), 4).field == "days"


def test_renewal_up_to_last_supported_date_fits():
    assert check_renewal_fits(date(2026, 1, 1), 30) is None
    assert check_renewal_fits(date.max - timedelta(days=3), 3) is None


# ─── overdue ─────────────────────────────────────────────────────

def test_due_yesterday_is_overdue():
    assert is_overdue(TODAY - timedelta(days=1), False, TODAY) is True


def test_due_today_is_not_overdue():
    assert is_overdue(TODAY, False, TODAY) is False


def test_due_tomorrow_is_not_overdue():
    assert is_overdue(TODAY + timedelta(days=1), False, TODAY) is False


def test_returned_loan_is_never_overdue():
    assert is_overdue(TODAY - timedelta(days=30), True, TODAY) is False


def test_date_range_rejects_start_after_end():
    assert check_date_range(TODAY, TODAY - timedelta(days=1)).field == "start"
