"""Librarian Routes — CRUD, activation toggles and queries for library staff.

Invariants:
    - Payloads validated by Pydantic before reaching the handler (VALIDATION_FAILED)
    - Handlers only translate HTTP ↔ service calls; rules live in the service/core
    - Static paths declared before /{librarian_id} so they are not captured by it

Design Decisions:
    - model_dump(exclude_unset=True): an omitted field gets the domain default,
      an explicit null reaches the domain and is rejected there
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Response, status

from library_api.api.dependencies import get_librarian_service
from library_api.core.domain_types import LibrarianId
from library_api.schemas.librarian import LibrarianIn, LibrarianOut
from library_api.services.librarian_service import LibrarianService

router = APIRouter(prefix="/api/v1/librarians", tags=["librarians"])


@router.get("", response_model=list[LibrarianOut])
async def list_librarians(
    service: LibrarianService = Depends(get_librarian_service),
):
    """List every librarian."""
    return await service.list_all()


@router.get("/active", response_model=list[LibrarianOut])
async def list_active_librarians(
    service: LibrarianService = Depends(get_librarian_service),
):
    return await service.list_active()


@router.get("/search", response_model=list[LibrarianOut])
async def search_librarians(
    name: str = Query(..., min_length=1),
    active: bool | None = Query(None),
    service: LibrarianService = Depends(get_librarian_service),
):
    """Case-insensitive name search, optionally narrowed by active flag."""
    if active is None:
        return await service.find_by_name_contains(name)
    return await service.find_by_name_and_active(name, active)


@router.get("/salary", response_model=list[LibrarianOut])
async def librarians_by_salary(
    min_salary: Decimal = Query(..., alias="min"),
    max_salary: Decimal = Query(..., alias="max"),
    service: LibrarianService = Depends(get_librarian_service),
):
    return await service.find_by_salary_range(min_salary, max_salary)


@router.get("/tax-id/{tax_id}", response_model=LibrarianOut)
async def get_librarian_by_tax_id(
    tax_id: str, service: LibrarianService = Depends(get_librarian_service),
):
    return await service.find_by_tax_id(tax_id)


@router.get("/{librarian_id}", response_model=LibrarianOut)
async def get_librarian(
    librarian_id: int,
    service: LibrarianService = Depends(get_librarian_service),
):
    return await service.find_by_id(LibrarianId(librarian_id))


@router.post(
    "", response_model=LibrarianOut, status_code=status.HTTP_201_CREATED,
)
async def create_librarian(
    body: LibrarianIn,
    service: LibrarianService = Depends(get_librarian_service),
):
    """Register a new librarian."""
    return await service.create(body.model_dump(exclude_unset=True))


@router.put("/{librarian_id}", response_model=LibrarianOut)
async def update_librarian(
    librarian_id: int,
    body: LibrarianIn,
    service: LibrarianService = Depends(get_librarian_service),
):
    """Full replace of a librarian."""
    return await service.update(
        LibrarianId(librarian_id), body.model_dump(exclude_unset=True),
    )


@router.patch("/{librarian_id}/deactivate", response_model=LibrarianOut)
async def deactivate_librarian(
    librarian_id: int,
    service: LibrarianService = Depends(get_librarian_service),
):
    return await service.deactivate(LibrarianId(librarian_id))


@router.patch("/{librarian_id}/activate", response_model=LibrarianOut)
async def activate_librarian(
    librarian_id: int,
    service: LibrarianService = Depends(get_librarian_service),
):
    return await service.activate(LibrarianId(librarian_id))


@router.delete("/{librarian_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_librarian(
    librarian_id: int,
    service: LibrarianService = Depends(get_librarian_service),
):
    await service.delete(LibrarianId(librarian_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
