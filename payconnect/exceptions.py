class PayConnectError(Exception):
    """Base error. Rendered as ``{"ok": false, "error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PayConnectError):
    """Missing or malformed request fields."""

    status_code = 400


class GatewayError(PayConnectError):
    """Payment processor unreachable or answered with an error."""


class GatewayProtocolError(GatewayError):
    """Payment processor answered with an unexpected shape."""


class NotFoundError(PayConnectError):
    status_code = 404


class InternalError(PayConnectError):
    """Failure of a downstream dependency other than the payment processor."""


class RecordStoreError(InternalError):
    pass


class NotificationError(InternalError):
    pass
