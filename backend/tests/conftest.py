"""Root conftest — shared test configuration."""

import os

# Tests never talk to a real PostgreSQL or load seed files on their own
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("SEED_DATA_DIR", None)
