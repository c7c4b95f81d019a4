"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
import structlog

from bill_gateway.domain.exceptions import ConfigurationError
from bill_gateway.presentation.responses import GatewayJSONResponse
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Bill queries and signing recover from their own failures, so these
    handlers only see wiring problems and genuinely unexpected errors.
    """

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request,
        exc: ConfigurationError,
    ) -> GatewayJSONResponse:
        """Handle requests that arrive before credentials are wired."""
        logger.error("gateway_not_configured", message=exc.message)
        return GatewayJSONResponse(
            status_code=503,
            content={
                "error": exc.code,
                "message": exc.message,
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> GatewayJSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return GatewayJSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
