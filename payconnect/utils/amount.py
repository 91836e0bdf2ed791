import math
from typing import Any

from payconnect.exceptions import ValidationError


def parse_amount(value: Any) -> float:
    """Parse a request amount, accepting numbers and numeric strings."""
    if isinstance(value, bool):
        raise ValidationError("Invalid amount value")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid amount value")
    if not math.isfinite(amount):
        raise ValidationError("Invalid amount value")
    return amount
