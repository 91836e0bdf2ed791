from payconnect.schemas.checkout import (
    StartCheckoutRequest,
    StartCheckoutResponse,
    CheckoutData
)
from payconnect.schemas.webhook import PaymentWebhook, WebhookAck
from payconnect.schemas.transaction import (
    StatusData,
    StatusResponse,
    CancelRequest,
    MessageResponse,
    ErrorResponse
)

__all__ = [
    "StartCheckoutRequest", "StartCheckoutResponse", "CheckoutData",
    "PaymentWebhook", "WebhookAck",
    "StatusData", "StatusResponse", "CancelRequest", "MessageResponse", "ErrorResponse"
]
