"""Loan Schemas — request/response models for /loans.

Invariants:
    - book_title required and non-blank; reader_id required at the boundary
    - loan_date / due_date omitted from the body are defaulted by the domain
      (today, loan_date + 14 days); an explicit null is rejected by the domain
    - overdue is computed on read, never accepted as input
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class LoanIn(BaseModel):
    """Loan create / full-update payload."""
    reader_id: int
    book_title: str = Field(min_length=1, max_length=300)
    author: str | None = Field(None, max_length=200)
    isbn: str | None = Field(None, max_length=20)
    loan_date: date | None = None
    due_date: date | None = None
    actual_return_date: date | None = None
    returned: bool | None = None


class LoanOut(BaseModel):
    """Loan as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    reader_id: int
    book_title: str
    author: str | None = None
    isbn: str | None = None
    loan_date: date
    due_date: date
    actual_return_date: date | None = None
    returned: bool
    overdue: bool
