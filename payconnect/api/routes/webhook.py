from fastapi import APIRouter, Depends

from payconnect.dependencies import get_checkout_service
from payconnect.schemas.transaction import ErrorResponse
from payconnect.schemas.webhook import PaymentWebhook, WebhookAck
from payconnect.services.checkout import CheckoutService

router = APIRouter()


@router.post(
    "/payment-webhook",
    response_model=WebhookAck,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def payment_webhook(
    payload: PaymentWebhook,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Payment-status callback from BulkClix.

    Unknown orders are acknowledged with 200 and ``ok: false`` so the
    gateway does not retry them.
    """
    result = await service.handle_webhook(payload)
    return WebhookAck(**result)
