"""Route Dependencies — hand the startup-built services to route handlers.

Invariants:
    - Services come from app.state.services (set once in the lifespan)
    - No service or store is constructed per request

Design Decisions:
    - One tiny dependency per service: route signatures name exactly what they use
"""

from fastapi import Request

from library_api.services.container import ServiceContainer
from library_api.services.librarian_service import LibrarianService
from library_api.services.loan_service import LoanService
from library_api.services.reader_service import ReaderService


def get_services(request: Request) -> ServiceContainer:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized")
    return services


def get_librarian_service(request: Request) -> LibrarianService:
    return get_services(request).librarians


def get_reader_service(request: Request) -> ReaderService:
    return get_services(request).readers


def get_loan_service(request: Request) -> LoanService:
    return get_services(request).loans
