from payconnect.utils.amount import parse_amount
from payconnect.utils.order_id import generate_order_id
from payconnect.utils.sms import compose_confirmation_sms, delivery_timeframe

__all__ = ["parse_amount", "generate_order_id", "compose_confirmation_sms", "delivery_timeframe"]
