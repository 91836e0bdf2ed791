"""Client for the Hubtel SMS gateway."""
import logging
from typing import Any

import httpx

from payconnect.config import Settings
from payconnect.exceptions import NotificationError

logger = logging.getLogger(__name__)


class HubtelClient:
    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def send_sms(self, to: str, content: str) -> dict[str, Any]:
        """Send one SMS. Returns Hubtel's delivery-attempt metadata."""
        params = {
            "clientsecret": self.settings.HUBTEL_CLIENT_SECRET,
            "clientid": self.settings.HUBTEL_CLIENT_ID,
            "from": self.settings.SMS_SENDER_ID,
            "to": to,
            "content": content,
        }
        try:
            response = await self.client.get(self.settings.HUBTEL_SMS_URL, params=params)
        except httpx.HTTPError as e:
            logger.error("hubtel_transport_error", extra={"to": to, "error_message": str(e)})
            raise NotificationError(f"Hubtel SMS request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning(
                "hubtel_http_error",
                extra={"to": to, "status_code": response.status_code, "body": response.text},
            )
            raise NotificationError(f"Hubtel SMS request failed with status code {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            data = response.text
        if not isinstance(data, dict):
            data = {"raw": data}

        logger.info("hubtel_sms_sent", extra={"to": to, "message_id": data.get("messageId")})
        return data
