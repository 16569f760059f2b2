"""Service Container — wires stores and domain services once per process.

Invariants:
    - build_container is called once (FastAPI lifespan) and the result reused by every request
    - Services receive their collaborators through __init__; nothing is looked up at call time
    - LoanService shares the same ReaderService instance exposed as container.readers

Design Decisions:
    - Plain dataclass over a DI framework: three services, one wiring function
"""

from dataclasses import dataclass

from library_api.config import Settings
from library_api.infrastructure.database import DatabaseSessionManager
from library_api.infrastructure.stores import LibrarianStore, LoanStore, ReaderStore
from library_api.services.librarian_service import LibrarianService
from library_api.services.loan_service import LoanService
from library_api.services.reader_service import ReaderService


@dataclass(frozen=True)
class ServiceContainer:
    librarians: LibrarianService
    readers: ReaderService
    loans: LoanService


def build_container(
    db_manager: DatabaseSessionManager, settings: Settings,
) -> ServiceContainer:
    """Assemble the service graph over one session manager."""
    readers = ReaderService(
        ReaderStore(db_manager), max_credit_limit=settings.max_credit_limit,
    )
    return ServiceContainer(
        librarians=LibrarianService(
            LibrarianStore(db_manager), minimum_salary=settings.minimum_salary,
        ),
        readers=readers,
        loans=LoanService(
            LoanStore(db_manager),
            readers,
            loan_days=settings.default_loan_days,
            max_renewal_days=settings.max_renewal_days,
        ),
    )
