"""Loan Routes — CRUD, return/renew transitions and loan queries.

Invariants:
    - Payloads validated by Pydantic before reaching the handler (VALIDATION_FAILED)
    - renew's day count is range-checked by the domain (INVALID_DATA), not the boundary
    - Static paths declared before /{loan_id} so they are not captured by it
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from library_api.api.dependencies import get_loan_service
from library_api.core.domain_types import LoanId, ReaderId
from library_api.schemas.loan import LoanIn, LoanOut
from library_api.services.loan_service import LoanService

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


@router.get("", response_model=list[LoanOut])
async def list_loans(service: LoanService = Depends(get_loan_service)):
    """List every loan."""
    return await service.list_all()


@router.get("/outstanding", response_model=list[LoanOut])
async def list_outstanding_loans(
    service: LoanService = Depends(get_loan_service),
):
    return await service.list_outstanding()


@router.get("/returned", response_model=list[LoanOut])
async def list_returned_loans(service: LoanService = Depends(get_loan_service)):
    return await service.list_returned()


@router.get("/overdue", response_model=list[LoanOut])
async def list_overdue_loans(service: LoanService = Depends(get_loan_service)):
    """Outstanding loans whose due date has passed."""
    return await service.list_overdue()


@router.get("/search", response_model=list[LoanOut])
async def search_loans(
    title: str = Query(..., min_length=1),
    service: LoanService = Depends(get_loan_service),
):
    return await service.find_by_title_contains(title)


@router.get("/period", response_model=list[LoanOut])
async def loans_in_period(
    start: date = Query(...),
    end: date = Query(...),
    service: LoanService = Depends(get_loan_service),
):
    """Loans made between start and end, inclusive."""
    return await service.find_by_date_range(start, end)


@router.get("/reader/{reader_id}", response_model=list[LoanOut])
async def loans_by_reader(
    reader_id: int,
    returned: bool | None = Query(None),
    service: LoanService = Depends(get_loan_service),
):
    if returned is None:
        return await service.find_by_reader(ReaderId(reader_id))
    return await service.find_by_reader_and_status(ReaderId(reader_id), returned)


@router.get("/{loan_id}", response_model=LoanOut)
async def get_loan(loan_id: int, service: LoanService = Depends(get_loan_service)):
    return await service.find_by_id(LoanId(loan_id))


@router.post("", response_model=LoanOut, status_code=status.HTTP_201_CREATED)
async def create_loan(
    body: LoanIn, service: LoanService = Depends(get_loan_service),
):
    """Lend a book to an existing reader."""
    return await service.create(body.model_dump(exclude_unset=True))


@router.put("/{loan_id}", response_model=LoanOut)
async def update_loan(
    loan_id: int,
    body: LoanIn,
    service: LoanService = Depends(get_loan_service),
):
    return await service.update(
        LoanId(loan_id), body.model_dump(exclude_unset=True),
    )


@router.patch("/{loan_id}/return", response_model=LoanOut)
async def return_loan(
    loan_id: int, service: LoanService = Depends(get_loan_service),
):
    return await service.record_return(LoanId(loan_id))


@router.patch("/{loan_id}/renew", response_model=LoanOut)
async def renew_loan(
    loan_id: int,
    days: int = Query(...),
    service: LoanService = Depends(get_loan_service),
):
    return await service.renew(LoanId(loan_id), days)


@router.delete("/{loan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_loan(
    loan_id: int, service: LoanService = Depends(get_loan_service),
):
    await service.delete(LoanId(loan_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
