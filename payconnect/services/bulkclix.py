"""Client for the BulkClix mobile-money payment API."""
import logging
from typing import Any

import httpx

from payconnect.config import Settings
from payconnect.exceptions import GatewayError

logger = logging.getLogger(__name__)


class BulkClixClient:
    """Initiates MoMo payments and queries their status."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client
        self.base_url = settings.BULKCLIX_BASE_URL.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.settings.BULKCLIX_API_KEY,
            "Accept": "application/json",
        }

    async def initiate_payment(
        self,
        amount: float,
        phone: str,
        network: str,
        order_id: str,
    ) -> dict[str, Any]:
        """Start a payment prompt on the customer's phone.

        Returns the decoded response body. BulkClix reports the accepted
        payment under ``data`` with its own ``transaction_id``.
        """
        payload = {
            "amount": amount,
            "phone_number": phone,
            "network": network,
            "transaction_id": order_id,
            "callback_url": self.settings.PAYMENT_CALLBACK_URL,
            "reference": self.settings.PAYMENT_REFERENCE,
        }
        logger.info(
            "bulkclix_initiate_request",
            extra={"order_id": order_id, "network": network},
        )
        return await self._request(
            "POST",
            f"{self.base_url}/momopay",
            event="bulkclix_initiate",
            json=payload,
            timeout=self.settings.BULKCLIX_TIMEOUT_SECONDS,
        )

    async def check_status(self, transaction_id: str) -> dict[str, Any]:
        """Fetch the processor's raw status payload for a transaction."""
        return await self._request(
            "GET",
            f"{self.base_url}/checkstatus/{transaction_id}",
            event="bulkclix_check_status",
        )

    async def _request(self, method: str, url: str, event: str, **kwargs) -> dict[str, Any]:
        try:
            response = await self.client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{event}_transport_error", extra={"error_message": str(e)})
            raise GatewayError(f"BulkClix API error: {e}") from e

        if response.status_code >= 400:
            message = _extract_error_message(response)
            logger.warning(
                f"{event}_http_error",
                extra={"status_code": response.status_code, "error_message": message},
            )
            raise GatewayError(f"BulkClix API error: {message}")

        try:
            return response.json()
        except ValueError as e:
            raise GatewayError("BulkClix API error: response is not valid JSON") from e


def _extract_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status code {response.status_code}"
