"""
Transaction lifecycle coordination.

Drives the payment gateway, the record store and the SMS gateway for the
four request handlers. Status moves from Initiated to Pending (or the raw
gateway status) on webhook delivery, and to Failed on cancellation.
"""
import json
import logging
from typing import Any, Optional

from payconnect.config import Settings
from payconnect.exceptions import (
    GatewayProtocolError,
    NotFoundError,
    RecordStoreError,
    ValidationError,
)
from payconnect.models import transaction as fields
from payconnect.models.transaction import TransactionRecord, TransactionStatus
from payconnect.schemas.checkout import StartCheckoutRequest
from payconnect.schemas.webhook import PaymentWebhook
from payconnect.services.baserow import BaserowClient
from payconnect.services.bulkclix import BulkClixClient
from payconnect.services.hubtel import HubtelClient
from payconnect.utils import compose_confirmation_sms, generate_order_id, parse_amount

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return value == 0


def derive_order_status(gateway_status: str) -> str:
    """Map a webhook status to the stored status."""
    if gateway_status.lower() == "success":
        return TransactionStatus.PENDING
    return gateway_status


class CheckoutService:
    def __init__(
        self,
        settings: Settings,
        gateway: BulkClixClient,
        store: BaserowClient,
        notifier: HubtelClient,
    ):
        self.settings = settings
        self.gateway = gateway
        self.store = store
        self.notifier = notifier

    async def start_checkout(self, request: StartCheckoutRequest) -> dict:
        """Initiate a payment and record it as Initiated."""
        required = (request.phone, request.recipient, request.dataPlan, request.amount, request.network)
        if any(_is_blank(value) for value in required):
            raise ValidationError("Missing required fields")

        amount = parse_amount(request.amount)
        network = request.network.strip().upper()
        supported = {n.upper() for n in self.settings.SUPPORTED_NETWORKS}
        if network not in supported:
            raise ValidationError(f"Unsupported network: {request.network}")

        order_id = generate_order_id()
        response = await self.gateway.initiate_payment(
            amount=amount,
            phone=request.phone,
            network=network,
            order_id=order_id,
        )

        data = response.get("data") if isinstance(response, dict) else None
        if not isinstance(data, dict) or not data.get("transaction_id"):
            logger.error("bulkclix_unexpected_response", extra={"order_id": order_id, "body": response})
            raise GatewayProtocolError("Failed to initiate BulkClix payment")

        try:
            await self.store.create_row({
                fields.ORDER_ID: order_id,
                fields.CUSTOMER_PHONE: request.phone,
                fields.CUSTOMER_EMAIL: request.email,
                fields.RECIPIENT: request.recipient,
                fields.DATA_PLAN: request.dataPlan,
                fields.AMOUNT: amount,
                fields.STATUS: TransactionStatus.INITIATED,
                fields.GATEWAY_RESPONSE: json.dumps({"initiation": response}),
            })
        except RecordStoreError as e:
            # The payment prompt is already on the customer's phone.
            logger.error("record_create_failed", extra={"order_id": order_id, "error_message": e.message})

        logger.info("checkout_initiated", extra={"order_id": order_id, "gateway_id": data["transaction_id"]})
        return {
            "transaction_id": order_id,
            "amount": amount,
            "phone": request.phone,
            "status": TransactionStatus.INITIATED,
        }

    async def handle_webhook(self, payload: PaymentWebhook) -> dict:
        """Apply a payment-status callback and confirm successful payments by SMS.

        Returns the response envelope. An unknown order yields ``ok: False``
        and is still acknowledged so the gateway stops retrying.
        """
        required = (payload.transaction_id, payload.phone_number, payload.amount, payload.status)
        if any(_is_blank(value) for value in required):
            raise ValidationError("Missing payment data")

        record = await self.store.find_by_order_id(payload.transaction_id)
        if record is None:
            logger.error("webhook_record_not_found", extra={"order_id": payload.transaction_id})
            return {"ok": False, "error": "Record not found. Webhook acknowledged."}

        amount = parse_amount(payload.amount)

        order_status = derive_order_status(payload.status)
        already_notified = record.notification_sent

        await self.store.update_row(record.row_id, {
            fields.AMOUNT: amount,
            fields.STATUS: order_status,
            fields.GATEWAY_RESPONSE: payload.model_dump_json(exclude_unset=True),
        })
        logger.info(
            "webhook_status_applied",
            extra={"order_id": record.order_id, "previous_status": record.status, "status": order_status},
        )

        if order_status == TransactionStatus.PENDING:
            if self.settings.SMS_ONCE_PER_ORDER and already_notified:
                logger.info("sms_already_sent", extra={"order_id": record.order_id})
            else:
                await self._send_confirmation(record, payload.phone_number)

        return {"ok": True, "message": "Payment received & record updated"}

    async def _send_confirmation(self, record: TransactionRecord, phone: str) -> None:
        content = compose_confirmation_sms(
            data_plan=record.data_plan,
            recipient=record.recipient,
            order_id=record.order_id,
            support_contact=self.settings.SUPPORT_WHATSAPP,
        )
        sms_response = await self.notifier.send_sms(to=phone, content=content)
        await self.store.update_row(record.row_id, {
            fields.NOTIFICATION_RESPONSE: json.dumps(sms_response),
            fields.NOTIFICATION_SENT: True,
        })

    async def check_status(self, order_id: str) -> dict:
        record = await self.store.find_by_order_id(order_id)
        if record is None:
            raise NotFoundError("Transaction record not found.")
        return {"status": record.status, "transaction_id": order_id}

    async def cancel(self, order_id: str, reason: Optional[str] = None) -> dict:
        """Mark a transaction Failed at the user's request, whatever its current status."""
        record = await self.store.find_by_order_id(order_id)
        if record is None:
            logger.warning("cancel_record_not_found", extra={"order_id": order_id})
            raise NotFoundError("Transaction record not found to cancel.")

        update: dict[str, Any] = {fields.STATUS: TransactionStatus.FAILED}
        if reason:
            update[fields.NOTES] = reason
        await self.store.update_row(record.row_id, update)

        logger.info("transaction_cancelled", extra={"order_id": order_id, "previous_status": record.status})
        return {"ok": True, "message": "Transaction status successfully updated to Failed."}
