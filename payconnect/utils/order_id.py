import secrets

ORDER_ID_PREFIX = "T"
ORDER_ID_SPACE = 10**15


def generate_order_id() -> str:
    """Generate an order id of the form ``T<digits>``."""
    return f"{ORDER_ID_PREFIX}{secrets.randbelow(ORDER_ID_SPACE)}"
