"""Seed Loader — bulk-loads sample records from `;`-delimited text files through the services.

Invariants:
    - Rows go through the same create() as any API caller: same rules, same duplicate checks
    - A row that fails to parse, fails validation or names an unknown reader is logged
      at WARNING and skipped; the rest of the file still loads
    - Files load in dependency order: librarians, readers, loans
    - Blank lines and lines starting with '#' are ignored; a missing file is skipped

Design Decisions:
    - Loans reference readers by tax id in the file; the loader resolves it to reader_id
    - Dates are ISO YYYY-MM-DD; empty or "null" means absent
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Awaitable, Callable, Iterator

from library_api.core.errors import LibraryError
from library_api.services.container import ServiceContainer

logger = logging.getLogger(__name__)

LIBRARIANS_FILE = "librarians.txt"
READERS_FILE = "readers.txt"
LOANS_FILE = "loans.txt"


@dataclass
class SeedReport:
    """Per-file counts of loaded and skipped rows."""
    loaded: dict[str, int] = field(default_factory=dict)
    skipped: dict[str, int] = field(default_factory=dict)


class SeedRowError(ValueError):
    """A row could not be turned into a payload."""


# ─── Row parsing (pure) ─────────────────────────────────────────

def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == "null":
        return None
    return value


def _column(columns: list[str], index: int) -> str | None:
    return _optional(columns[index]) if index < len(columns) else None


def _parse_date(value: str | None) -> date | None:
    value = _optional(value)
    return date.fromisoformat(value) if value else None


def _parse_decimal(value: str | None) -> Decimal | None:
    value = _optional(value)
    return Decimal(value) if value else None


def _parse_bool(value: str | None) -> bool:
    return (_optional(value) or "").lower() == "true"


def _address(columns: list[str], start: int) -> dict:
    names = (
        "postal_code", "street", "complement", "number",
        "district", "city", "state",
    )
    return {name: _column(columns, start + i) for i, name in enumerate(names)}


def _require_columns(columns: list[str], minimum: int) -> None:
    if len(columns) < minimum:
        raise SeedRowError(
            f"expected at least {minimum} columns, got {len(columns)}",
        )


def parse_librarian_row(columns: list[str]) -> dict:
    """name;email;tax_id;phone;registration_number;employee_code;postal_code;street;
    complement;number;district;city;state;state_name;salary;active[;shift]"""
    _require_columns(columns, 16)
    return {
        "name": _column(columns, 0),
        "email": _column(columns, 1),
        "tax_id": _column(columns, 2),
        "phone": _column(columns, 3),
        "registration_number": _column(columns, 4),
        "employee_code": _column(columns, 5),
        "address": _address(columns, 6),
        "salary": _parse_decimal(columns[14]),
        "active": _parse_bool(columns[15]),
        "shift": _column(columns, 16),
    }


def parse_reader_row(columns: list[str]) -> dict:
    """name;email;tax_id;phone;registration_number;loyalty_tier;credit_limit;
    last_reading_date;postal_code;street;complement;number;district;city;state"""
    _require_columns(columns, 8)
    return {
        "name": _column(columns, 0),
        "email": _column(columns, 1),
        "tax_id": _column(columns, 2),
        "phone": _column(columns, 3),
        "registration_number": _column(columns, 4),
        "loyalty_tier": _column(columns, 5),
        "credit_limit": _parse_decimal(columns[6]),
        "last_reading_date": _parse_date(columns[7]),
        "address": _address(columns, 8),
        "active": True,
    }


def parse_loan_row(columns: list[str]) -> tuple[str | None, dict]:
    """reader_tax_id;book_title;author;isbn;loan_date;due_date;actual_return_date;returned

    Returns (reader_tax_id, payload without reader_id).
    """
    _require_columns(columns, 8)
    payload = {
        "book_title": _column(columns, 1),
        "author": _column(columns, 2),
        "isbn": _column(columns, 3),
        "loan_date": _parse_date(columns[4]),
        "due_date": _parse_date(columns[5]),
        "actual_return_date": _parse_date(columns[6]),
        "returned": _parse_bool(columns[7]),
    }
    # absent dates fall back to the loan defaults
    for key in ("loan_date", "due_date"):
        if payload[key] is None:
            del payload[key]
    return _column(columns, 0), payload


def iter_rows(path: Path) -> Iterator[tuple[int, list[str]]]:
    """Yield (line_number, columns) for every data line."""
    with path.open(encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.rstrip("\n")
            if not line.strip() or line.startswith("#"):
                continue
            yield line_number, line.split(";")


# ─── Loading (shell) ────────────────────────────────────────────

async def _load_file(
    path: Path,
    create_row: Callable[[list[str]], Awaitable[object]],
    report: SeedReport,
) -> None:
    name = path.name
    report.loaded[name] = 0
    report.skipped[name] = 0
    if not path.is_file():
        logger.warning(f"Seed file {path} not found, skipping", extra={"file": name})
        return

    for line_number, columns in iter_rows(path):
        try:
            await create_row(columns)
        except (LibraryError, ValueError, InvalidOperation) as e:
            report.skipped[name] += 1
            message = e.message if isinstance(e, LibraryError) else str(e)
            logger.warning(
                f"Skipping {name}:{line_number}: {message}",
                extra={"file": name, "row": line_number},
            )
            continue
        report.loaded[name] += 1

    logger.info(
        f"Loaded {report.loaded[name]} row(s) from {name}, "
        f"skipped {report.skipped[name]}",
        extra={"file": name},
    )


async def load_seed_data(
    services: ServiceContainer, data_dir: str | Path,
) -> SeedReport:
    """Load librarians, readers and loans from `data_dir` in that order."""
    base = Path(data_dir)
    report = SeedReport()

    async def create_librarian(columns: list[str]) -> object:
        return await services.librarians.create(parse_librarian_row(columns))

    async def create_reader(columns: list[str]) -> object:
        return await services.readers.create(parse_reader_row(columns))

    async def create_loan(columns: list[str]) -> object:
        tax_id, payload = parse_loan_row(columns)
        if tax_id is None:
            raise SeedRowError("reader tax id is missing")
        reader = await services.readers.find_by_tax_id(tax_id)
        payload["reader_id"] = reader.id
        return await services.loans.create(payload)

    await _load_file(base / LIBRARIANS_FILE, create_librarian, report)
    await _load_file(base / READERS_FILE, create_reader, report)
    await _load_file(base / LOANS_FILE, create_loan, report)
    return report
