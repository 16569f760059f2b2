"""Initial schema — librarians, readers, loans.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _person_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("tax_id", sa.String(11), nullable=False, unique=True),
        sa.Column("email", sa.String(320), nullable=True, unique=True),
        sa.Column("phone", sa.String(11), nullable=True),
        sa.Column("postal_code", sa.String(20), nullable=True),
        sa.Column("street", sa.String(200), nullable=True),
        sa.Column("complement", sa.String(200), nullable=True),
        sa.Column("number", sa.String(20), nullable=True),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(50), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "librarians",
        *_person_columns(),
        sa.Column("employee_code", sa.String(50), nullable=False, unique=True),
        sa.Column("admission_date", sa.Date, nullable=True),
        sa.Column("shift", sa.String(50), nullable=True),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("salary", sa.Numeric(12, 2), nullable=False),
        sa.Column(
            "registration_number", sa.String(50), nullable=False, unique=True,
        ),
    )

    op.create_table(
        "readers",
        *_person_columns(),
        sa.Column(
            "registration_number", sa.String(50), nullable=False, unique=True,
        ),
        sa.Column("registration_date", sa.Date, nullable=True),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("loyalty_tier", sa.String(20), nullable=False),
        sa.Column("credit_limit", sa.Numeric(12, 2), nullable=False),
        sa.Column("last_reading_date", sa.Date, nullable=True),
    )

    op.create_table(
        "loans",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "reader_id", sa.Integer,
            sa.ForeignKey("readers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("book_title", sa.String(300), nullable=False),
        sa.Column("author", sa.String(200), nullable=True),
        sa.Column("isbn", sa.String(20), nullable=True),
        sa.Column("loan_date", sa.Date, nullable=False),
        sa.Column("due_date", sa.Date, nullable=False),
        sa.Column("actual_return_date", sa.Date, nullable=True),
        sa.Column("returned", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_loans_reader_id", "loans", ["reader_id"])


def downgrade() -> None:
    op.drop_index("ix_loans_reader_id", table_name="loans")
    op.drop_table("loans")
    op.drop_table("readers")
    op.drop_table("librarians")
