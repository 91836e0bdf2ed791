from payconnect.services.baserow import BaserowClient
from payconnect.services.bulkclix import BulkClixClient
from payconnect.services.checkout import CheckoutService
from payconnect.services.hubtel import HubtelClient

__all__ = ["BaserowClient", "BulkClixClient", "CheckoutService", "HubtelClient"]
