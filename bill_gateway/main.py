"""
Bill Gateway - Application Factory

Wires the Alipay bill client, signature endpoint, middleware and
metrics into a FastAPI application.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response

from bill_gateway import __version__
from bill_gateway.core.metrics import get_metrics, get_metrics_content_type
from bill_gateway.domain.entities import AlipayCredentials
from bill_gateway.domain.interfaces import AlipayBillClient
from bill_gateway.infrastructure.clients import HttpAlipayBillClient
from bill_gateway.presentation.api import api_router
from bill_gateway.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown."""
    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        bill_client_configured=app.state.bill_client is not None,
    )

    yield

    logger.info("application_stopped")


def create_app(
    credentials: AlipayCredentials | None = None,
    bill_client: AlipayBillClient | None = None,
) -> FastAPI:
    """
    Build the gateway application.

    The bill client is created once here from ``credentials`` (unless
    one is supplied) and shared read-only by every request.

    Raises:
        ConfigurationError: If the credential keys cannot be loaded
    """
    if bill_client is None and credentials is not None:
        bill_client = HttpAlipayBillClient(credentials)

    app = FastAPI(
        title="Bill Gateway",
        description="Alipay Balance & Account Log Service",
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.bill_client = bill_client

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    error_handler_middleware(app)

    app.include_router(api_router)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=get_metrics(),
            media_type=get_metrics_content_type(),
        )

    return app
