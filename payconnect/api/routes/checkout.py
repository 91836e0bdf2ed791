from fastapi import APIRouter, Depends

from payconnect.dependencies import get_checkout_service
from payconnect.schemas.checkout import StartCheckoutRequest, StartCheckoutResponse
from payconnect.schemas.transaction import ErrorResponse
from payconnect.services.checkout import CheckoutService

router = APIRouter()


@router.post(
    "/start-checkout",
    response_model=StartCheckoutResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def start_checkout(
    request: StartCheckoutRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Initiate a MoMo payment for a data bundle."""
    data = await service.start_checkout(request)
    return StartCheckoutResponse(data=data)
