"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Business thresholds default to the values the domain rules declare

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from library_api.core.enforce_librarian import MINIMUM_SALARY
from library_api.core.enforce_loan import DEFAULT_LOAN_DAYS, MAX_RENEWAL_DAYS
from library_api.core.enforce_reader import MAX_CREDIT_LIMIT


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://library:library@db:5432/library"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Business rules
    minimum_salary: Decimal = MINIMUM_SALARY
    max_credit_limit: Decimal = MAX_CREDIT_LIMIT
    default_loan_days: int = DEFAULT_LOAN_DAYS
    max_renewal_days: int = MAX_RENEWAL_DAYS

    # Seed data — directory with librarians.txt / readers.txt / loans.txt
    seed_data_dir: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
