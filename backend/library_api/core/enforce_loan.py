"""Loan Rule Enforcement — structural validation, due-date arithmetic and the overdue predicate.

Invariants:
    - All functions are PURE: `today` is always passed in, never read from the clock
    - due_date defaults to loan_date + DEFAULT_LOAN_DAYS, only when absent
    - due_date never precedes loan_date
    - A loan is outstanding iff returned is False; overdue iff outstanding AND due_date < today
    - Renewal extends by 1..MAX_RENEWAL_DAYS days and only for outstanding loans
    - A return is one-way: a returned loan can be neither returned nor renewed again

Design Decisions:
    - overdue is derived, never persisted
"""

from datetime import date, timedelta

from library_api.core.errors import InvalidDataError


DEFAULT_LOAN_DAYS: int = 14
MIN_RENEWAL_DAYS: int = 1
MAX_RENEWAL_DAYS: int = 30


def apply_loan_defaults(
    data: dict, today: date, loan_days: int = DEFAULT_LOAN_DAYS,
) -> dict:
    """Fill absent loan_date, due_date and returned.

    An explicit None for loan_date or due_date is kept so validation rejects it.
    No due_date is derived when loan_date + loan_days is past date.max.
    """
    result = dict(data)
    result.setdefault("loan_date", today)
    loan_date = result["loan_date"]
    if (
        "due_date" not in result and loan_date is not None
        and fits_after(loan_date, loan_days)
    ):
        result["due_date"] = loan_date + timedelta(days=loan_days)
    if result.get("returned") is None:
        result["returned"] = False
    return result


def validate_loan(data: dict) -> InvalidDataError | None:
    """Structural loan rules. First error wins."""
    title = data.get("book_title")
    if title is None or not str(title).strip():
        return InvalidDataError("Book title is required", "book_title")

    loan_date = data.get("loan_date")
    if loan_date is None:
        return InvalidDataError("Loan date is required", "loan_date")

    due_date = data.get("due_date")
    if due_date is None:
        return InvalidDataError("Due date is required", "due_date")

    if due_date < loan_date:
        return InvalidDataError(
            "Due date cannot be earlier than the loan date", "due_date",
        )

    if data.get("reader_id") is None:
        return InvalidDataError("Reader is required", "reader_id")
    return None


def check_can_return(returned: bool) -> InvalidDataError | None:
    if returned:
        return InvalidDataError(
            "This book has already been returned", "returned",
        )
    return None


def check_can_renew(
    returned: bool, extra_days: int, max_days: int = MAX_RENEWAL_DAYS,
) -> InvalidDataError | None:
    if returned:
        return InvalidDataError(
            "A returned loan cannot be renewed", "returned",
        )
    if extra_days < MIN_RENEWAL_DAYS or extra_days > max_days:
        return InvalidDataError(
            f"Extra days must be between {MIN_RENEWAL_DAYS} and {max_days}",
            "days",
        )
    return None


def fits_after(day: date, extra_days: int) -> bool:
    """True if day + extra_days is still a representable date."""
    return (date.max - day).days >= extra_days


def check_renewal_fits(due_date: date, extra_days: int) -> InvalidDataError | None:
    if not fits_after(due_date, extra_days):
        return InvalidDataError(
            "Renewed due date would be past the last supported date", "days",
        )
    return None


def renewed_due_date(due_date: date, extra_days: int) -> date:
    return due_date + timedelta(days=extra_days)


def is_overdue(due_date: date | None, returned: bool, today: date) -> bool:
    """Outstanding and strictly past the due date."""
    if returned or due_date is None:
        return False
    return due_date < today


def check_date_range(start: date, end: date) -> InvalidDataError | None:
    if start > end:
        return InvalidDataError(
            "Start date cannot be later than end date", "start",
        )
    return None
