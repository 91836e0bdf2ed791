import itertools

import pytest

from payconnect.config import Settings
from payconnect.exceptions import GatewayError, RecordStoreError
from payconnect.models.transaction import ORDER_ID, TransactionRecord
from payconnect.services.checkout import CheckoutService


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_settings(**overrides) -> Settings:
    values = {
        "BULKCLIX_API_KEY": "bulkclix-key",
        "BASEROW_HOST_URL": "https://baserow.test",
        "BASEROW_API_KEY": "baserow-token",
        "BASEROW_TABLE_ID": "42",
        "HUBTEL_CLIENT_ID": "hubtel-id",
        "HUBTEL_CLIENT_SECRET": "hubtel-secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeGateway:
    def __init__(self, error: Exception = None, response: dict = None):
        self.error = error
        self.response = response
        self.calls = []

    async def initiate_payment(self, amount, phone, network, order_id):
        self.calls.append({"amount": amount, "phone": phone, "network": network, "order_id": order_id})
        if self.error:
            raise self.error
        if self.response is not None:
            return self.response
        return {
            "message": "Payment initiated",
            "data": {
                "transaction_id": f"BCX-{order_id}",
                "amount": amount,
                "phone_number": phone,
            },
        }


class FakeStore:
    """In-memory stand-in for the Baserow table, returning raw rows through the real parser."""

    def __init__(self, fail_create: bool = False, fail_update: bool = False):
        self.rows: dict[int, dict] = {}
        self.fail_create = fail_create
        self.fail_update = fail_update
        self.updates = []
        self._ids = itertools.count(1)

    def add_row(self, **fields) -> int:
        row_id = next(self._ids)
        self.rows[row_id] = {"id": row_id, **fields}
        return row_id

    def row_for(self, order_id: str) -> dict:
        return next(row for row in self.rows.values() if row.get(ORDER_ID) == order_id)

    async def create_row(self, fields):
        if self.fail_create:
            raise RecordStoreError("Baserow request failed with status code 503")
        row_id = self.add_row(**fields)
        return TransactionRecord.from_row(self.rows[row_id])

    async def find_by_order_id(self, order_id):
        for row in self.rows.values():
            if row.get(ORDER_ID) == order_id:
                return TransactionRecord.from_row(row)
        return None

    async def update_row(self, row_id, fields):
        if self.fail_update:
            raise RecordStoreError("Baserow request failed with status code 500")
        self.updates.append((row_id, dict(fields)))
        self.rows[row_id].update(fields)
        return TransactionRecord.from_row(self.rows[row_id])


class FakeNotifier:
    def __init__(self, error: Exception = None):
        self.error = error
        self.sent = []

    async def send_sms(self, to, content):
        if self.error:
            raise self.error
        self.sent.append({"to": to, "content": content})
        return {"messageId": f"msg-{len(self.sent)}", "status": 0}


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def service(gateway, store, notifier):
    return CheckoutService(make_settings(), gateway, store, notifier)


@pytest.fixture
def unreachable_gateway():
    return FakeGateway(error=GatewayError("BulkClix API error: timeout of 10000ms exceeded"))
