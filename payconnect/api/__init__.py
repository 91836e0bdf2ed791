from fastapi import APIRouter

from payconnect.api.routes import checkout, webhook, transactions

api_router = APIRouter()

api_router.include_router(checkout.router, tags=["Checkout"])
api_router.include_router(webhook.router, tags=["Webhooks"])
api_router.include_router(transactions.router, tags=["Transactions"])
