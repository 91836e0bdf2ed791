from typing import Optional

EXPRESS_TAG = "(Express)"
EXPRESS_TIMEFRAME = "5 to 30 minutes"
NORMAL_TIMEFRAME = "30 minutes to 4 hours"


def delivery_timeframe(data_plan: Optional[str]) -> str:
    if data_plan and EXPRESS_TAG in data_plan:
        return EXPRESS_TIMEFRAME
    return NORMAL_TIMEFRAME


def compose_confirmation_sms(
    data_plan: Optional[str],
    recipient: Optional[str],
    order_id: str,
    support_contact: str,
) -> str:
    """Build the purchase confirmation text sent after a successful payment."""
    return (
        f"Your data purchase of {data_plan} for {recipient} has been processed "
        f"and will be delivered in {delivery_timeframe(data_plan)}. "
        f"Order ID: {order_id}. For support, WhatsApp: {support_contact}"
    )
