from typing import Optional, Union
from pydantic import BaseModel, ConfigDict


class PaymentWebhook(BaseModel):
    """Payment-status callback posted by BulkClix.

    Unknown keys are kept so the full callback can be stored for audit.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    amount: Optional[Union[float, str]] = None
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    phone_number: Optional[str] = None


class WebhookAck(BaseModel):
    ok: bool
    message: Optional[str] = None
    error: Optional[str] = None
