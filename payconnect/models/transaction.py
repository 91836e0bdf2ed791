from dataclasses import dataclass
from typing import Any, Optional


class TransactionStatus:
    INITIATED = "Initiated"
    PENDING = "Pending"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# Column names of the transactions table (Baserow user field names)
ORDER_ID = "Order ID"
CUSTOMER_PHONE = "Customer Phone"
CUSTOMER_EMAIL = "Customer Email"
RECIPIENT = "Data Recipient Number"
DATA_PLAN = "Data Plan"
AMOUNT = "Amount"
STATUS = "Status"
GATEWAY_RESPONSE = "BulkClix Response"
NOTIFICATION_RESPONSE = "Hubtel Response"
NOTIFICATION_SENT = "Hubtel Sent"
NOTES = "Notes"


def parse_status(value: Any) -> str:
    """Normalize a Status cell to a plain string.

    Text fields come back as strings, single-select fields as
    ``{"id": ..., "value": ..., "color": ...}``.
    """
    if isinstance(value, dict):
        value = value.get("value")
    if value is None or value == "":
        return TransactionStatus.UNKNOWN
    return str(value)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class TransactionRecord:
    row_id: int
    order_id: str
    status: str
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    recipient: Optional[str] = None
    data_plan: Optional[str] = None
    amount: Optional[float] = None
    gateway_response: Optional[str] = None
    notification_response: Optional[str] = None
    notification_sent: bool = False
    notes: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "TransactionRecord":
        return cls(
            row_id=row["id"],
            order_id=row.get(ORDER_ID) or "",
            status=parse_status(row.get(STATUS)),
            customer_phone=row.get(CUSTOMER_PHONE),
            customer_email=row.get(CUSTOMER_EMAIL),
            recipient=row.get(RECIPIENT),
            data_plan=row.get(DATA_PLAN),
            amount=_optional_float(row.get(AMOUNT)),
            gateway_response=row.get(GATEWAY_RESPONSE),
            notification_response=row.get(NOTIFICATION_RESPONSE),
            notification_sent=bool(row.get(NOTIFICATION_SENT)),
            notes=row.get(NOTES),
        )
