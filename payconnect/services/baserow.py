"""Client for the Baserow table holding transaction records."""
import logging
from typing import Any, Optional

import httpx

from payconnect.config import Settings
from payconnect.exceptions import RecordStoreError
from payconnect.models.transaction import ORDER_ID, TransactionRecord

logger = logging.getLogger(__name__)


class BaserowClient:
    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client
        self.rows_url = (
            f"{settings.BASEROW_HOST_URL.rstrip('/')}"
            f"/api/database/rows/table/{settings.BASEROW_TABLE_ID}/"
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Token {self.settings.BASEROW_API_KEY}",
            "Content-Type": "application/json",
        }

    async def create_row(self, fields: dict[str, Any]) -> TransactionRecord:
        row = await self._request("POST", self.rows_url, json=fields)
        return TransactionRecord.from_row(row)

    async def find_by_order_id(self, order_id: str) -> Optional[TransactionRecord]:
        """Return the first row whose Order ID equals ``order_id``."""
        params = {f"filter__{ORDER_ID}__equal": order_id}
        body = await self._request("GET", self.rows_url, params=params)
        results = body.get("results") or []
        if not results:
            return None
        return TransactionRecord.from_row(results[0])

    async def update_row(self, row_id: int, fields: dict[str, Any]) -> TransactionRecord:
        row = await self._request("PATCH", f"{self.rows_url}{row_id}/", json=fields)
        return TransactionRecord.from_row(row)

    async def _request(self, method: str, url: str, params: Optional[dict] = None, **kwargs) -> dict:
        query = {"user_field_names": "true", **(params or {})}
        try:
            response = await self.client.request(
                method, url, params=query, headers=self._headers(), **kwargs
            )
        except httpx.HTTPError as e:
            logger.error("baserow_transport_error", extra={"method": method, "error_message": str(e)})
            raise RecordStoreError(f"Baserow request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning(
                "baserow_http_error",
                extra={"method": method, "status_code": response.status_code, "body": response.text},
            )
            raise RecordStoreError(f"Baserow request failed with status code {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise RecordStoreError("Baserow returned a non-JSON body") from e
