from payconnect.models.transaction import TransactionRecord, TransactionStatus, parse_status

__all__ = ["TransactionRecord", "TransactionStatus", "parse_status"]
