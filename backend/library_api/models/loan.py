"""Loan ORM — persists a book lent to a reader.

Invariants:
    - Always references exactly one Reader (reader_id FK, ON DELETE CASCADE)
    - due_date >= loan_date (enforced by the domain layer)
    - returned False and actual_return_date NULL together mean outstanding

Design Decisions:
    - Plain reader_id, no back-reference object: serializing a loan never pulls in the
      reader, serializing a reader never pulls in its loans
"""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.core.enforce_loan import is_overdue
from library_api.db.base import Base


class Loan(Base):
    """Loan entity — one book lent to one reader."""
    __tablename__ = "loans"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    reader_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("readers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    book_title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[str | None] = mapped_column(String(200), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    loan_date: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    actual_return_date: Mapped[date | None] = mapped_column(
        Date, nullable=True,
    )
    returned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    @property
    def overdue(self) -> bool:
        return is_overdue(self.due_date, self.returned, date.today())

    def apply_fields(self, data: dict) -> None:
        """Full replace of every payload column; absent keys become None."""
        for name in LOAN_FIELDS:
            setattr(self, name, data.get(name))


LOAN_FIELDS: tuple[str, ...] = (
    "reader_id", "book_title", "author", "isbn", "loan_date", "due_date",
    "actual_return_date", "returned",
)
