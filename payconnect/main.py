import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from payconnect.api import api_router
from payconnect.config import settings
from payconnect.exceptions import PayConnectError
from payconnect.log import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info("startup", extra={"port": settings.PORT, **settings.loaded_flags()})
    yield


app = FastAPI(
    title="PayConnect",
    description="Relays data-bundle checkouts to BulkClix, records them in Baserow and confirms them by SMS",
    version="2.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(api_router, prefix="/api")


@app.exception_handler(PayConnectError)
async def payconnect_error_handler(request: Request, exc: PayConnectError):
    return JSONResponse(status_code=exc.status_code, content={"ok": False, "error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"ok": False, "error": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"ok": False, "error": "Internal server error"})


@app.get("/")
async def root():
    return {
        "name": "PayConnect",
        "version": "2.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.get("/test")
async def test_route():
    """Liveness check that also reports which credentials are configured."""
    return {
        "ok": True,
        "message": "PAYCONNECT backend is live",
        "env": settings.loaded_flags(),
    }


def run() -> None:
    import uvicorn

    uvicorn.run("payconnect.main:app", host="0.0.0.0", port=settings.PORT)
