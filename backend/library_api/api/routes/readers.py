"""Reader Routes — CRUD, tier/credit transitions, queries and the reader's loans.

Invariants:
    - Payloads validated by Pydantic before reaching the handler (VALIDATION_FAILED)
    - Tier and credit values for the PATCH transitions arrive as query parameters and
      are checked by the domain (INVALID_DATA), not by the boundary
    - /{reader_id}/loans is the only way to see a reader's loans

Design Decisions:
    - Static paths declared before /{reader_id} so they are not captured by it
"""

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Response, status

from library_api.api.dependencies import get_loan_service, get_reader_service
from library_api.core.domain_types import ReaderId
from library_api.schemas.loan import LoanOut
from library_api.schemas.reader import ReaderIn, ReaderOut
from library_api.services.loan_service import LoanService
from library_api.services.reader_service import ReaderService

router = APIRouter(prefix="/api/v1/readers", tags=["readers"])


@router.get("", response_model=list[ReaderOut])
async def list_readers(service: ReaderService = Depends(get_reader_service)):
    """List every reader."""
    return await service.list_all()


@router.get("/search", response_model=list[ReaderOut])
async def search_readers(
    name: str = Query(..., min_length=1),
    service: ReaderService = Depends(get_reader_service),
):
    return await service.find_by_name_contains(name)


@router.get("/credit-limit", response_model=list[ReaderOut])
async def readers_by_min_credit(
    min_credit: Decimal = Query(..., alias="min"),
    service: ReaderService = Depends(get_reader_service),
):
    return await service.find_by_min_credit_limit(min_credit)


@router.get("/active-since", response_model=list[ReaderOut])
async def readers_active_since(
    since: date = Query(...),
    service: ReaderService = Depends(get_reader_service),
):
    """Readers whose last reading is after `since`."""
    return await service.find_active_since(since)


@router.get("/loyalty-tier/{tier}", response_model=list[ReaderOut])
async def readers_by_loyalty_tier(
    tier: str,
    min_credit: Decimal | None = Query(None),
    service: ReaderService = Depends(get_reader_service),
):
    """Readers in a tier; with min_credit, only those above that credit limit."""
    if min_credit is None:
        return await service.find_by_loyalty_tier(tier)
    return await service.find_by_loyalty_tier_and_min_credit(tier, min_credit)


@router.get("/tax-id/{tax_id}", response_model=ReaderOut)
async def get_reader_by_tax_id(
    tax_id: str, service: ReaderService = Depends(get_reader_service),
):
    return await service.find_by_tax_id(tax_id)


@router.get("/{reader_id}", response_model=ReaderOut)
async def get_reader(
    reader_id: int, service: ReaderService = Depends(get_reader_service),
):
    return await service.find_by_id(ReaderId(reader_id))


@router.get("/{reader_id}/loans", response_model=list[LoanOut])
async def get_reader_loans(
    reader_id: int,
    readers: ReaderService = Depends(get_reader_service),
    loans: LoanService = Depends(get_loan_service),
):
    """Loans owned by the reader (404 if the reader does not exist)."""
    reader = await readers.find_by_id(ReaderId(reader_id))
    return await loans.find_by_reader(ReaderId(reader.id))


@router.post("", response_model=ReaderOut, status_code=status.HTTP_201_CREATED)
async def create_reader(
    body: ReaderIn, service: ReaderService = Depends(get_reader_service),
):
    return await service.create(body.model_dump(exclude_unset=True))


@router.put("/{reader_id}", response_model=ReaderOut)
async def update_reader(
    reader_id: int,
    body: ReaderIn,
    service: ReaderService = Depends(get_reader_service),
):
    return await service.update(
        ReaderId(reader_id), body.model_dump(exclude_unset=True),
    )


@router.patch("/{reader_id}/loyalty-tier", response_model=ReaderOut)
async def update_reader_loyalty_tier(
    reader_id: int,
    tier: str = Query(...),
    service: ReaderService = Depends(get_reader_service),
):
    return await service.update_loyalty_tier(ReaderId(reader_id), tier)


@router.patch("/{reader_id}/credit-limit", response_model=ReaderOut)
async def update_reader_credit_limit(
    reader_id: int,
    limit: Decimal = Query(...),
    service: ReaderService = Depends(get_reader_service),
):
    return await service.update_credit_limit(ReaderId(reader_id), limit)


@router.delete("/{reader_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reader(
    reader_id: int, service: ReaderService = Depends(get_reader_service),
):
    """Delete a reader together with its loans."""
    await service.delete(ReaderId(reader_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
