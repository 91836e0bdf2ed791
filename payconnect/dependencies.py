from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends

from payconnect.config import Settings, settings
from payconnect.services import BaserowClient, BulkClixClient, CheckoutService, HubtelClient


def get_settings() -> Settings:
    return settings


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    # Only payment initiation is time-bounded; it passes its own timeout.
    async with httpx.AsyncClient(timeout=None) as client:
        yield client


def get_checkout_service(
    config: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> CheckoutService:
    return CheckoutService(
        settings=config,
        gateway=BulkClixClient(config, client),
        store=BaserowClient(config, client),
        notifier=HubtelClient(config, client),
    )
