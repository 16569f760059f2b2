"""ORM Models — SQLAlchemy declarative models for librarians, readers and loans.

Invariants:
    - All models inherit from Base (db/base.py)
    - Reader owns its loans; deleting a reader deletes them

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from library_api.models.librarian import Librarian  # noqa: F401
from library_api.models.reader import Reader  # noqa: F401
from library_api.models.loan import Loan  # noqa: F401
