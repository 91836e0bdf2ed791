from typing import Optional

from fastapi import APIRouter, Body, Depends

from payconnect.dependencies import get_checkout_service
from payconnect.schemas.transaction import (
    CancelRequest,
    ErrorResponse,
    MessageResponse,
    StatusData,
    StatusResponse,
)
from payconnect.services.checkout import CheckoutService

router = APIRouter()

ERROR_RESPONSES = {404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/check-status/{transaction_id}", response_model=StatusResponse, responses=ERROR_RESPONSES)
async def check_status(
    transaction_id: str,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Report the stored status of a transaction."""
    result = await service.check_status(transaction_id)
    return StatusResponse(data=StatusData(**result))


@router.post("/cancel-transaction/{transaction_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def cancel_transaction(
    transaction_id: str,
    request: Optional[CancelRequest] = Body(None),
    service: CheckoutService = Depends(get_checkout_service),
):
    """Mark a transaction Failed after the user cancels it."""
    reason = request.reason if request else None
    result = await service.cancel(transaction_id, reason=reason)
    return MessageResponse(**result)
