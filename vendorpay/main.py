"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vendorpay.api.router import api_router
from vendorpay.config import Settings, settings as default_settings
from vendorpay.core.exceptions import AppException
from vendorpay.core.middleware import RequestLoggingMiddleware
from vendorpay.gateways.base import LedgerClient
from vendorpay.gateways.solana import SolanaGateway
from vendorpay.services.payment_service import ConfirmationPolicy, PaymentService
from vendorpay.services.vendor_registry import VendorRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    settings: Settings = app.state.settings
    owned_ledger: LedgerClient | None = None

    # Startup
    if app.state.ledger is None:
        owned_ledger = SolanaGateway(settings=settings)
        app.state.ledger = owned_ledger
        logger.info(f"Using Solana RPC at {settings.solana_rpc_url}")

    app.state.payment_service = PaymentService(
        registry=app.state.registry,
        ledger=app.state.ledger,
        policy=ConfirmationPolicy.from_settings(settings),
    )

    yield

    # Shutdown
    if owned_ledger is not None:
        await owned_ledger.close()
        app.state.ledger = None


def create_application(
    settings: Settings | None = None,
    registry: VendorRegistry | None = None,
    ledger: LedgerClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    A ledger passed in is used as-is and left open at shutdown; otherwise a
    Solana JSON-RPC client is created for the lifetime of the app.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Vendor whitelist and payment gateway",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else VendorRegistry()
    app.state.ledger = ledger

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Render application exceptions as ``{"error": ...}``."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report invalid bodies without echoing their input back."""
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Collapse anything unexpected into a generic 500."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal error"},
        )

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_application()
