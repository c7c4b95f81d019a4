"""Webhook signature endpoint."""

from typing import Annotated, Dict
from urllib.parse import unquote_plus

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from bill_gateway.application.services import SignatureService
from bill_gateway.core.dependencies import get_signature_service
from bill_gateway.core.metrics import record_signature
from bill_gateway.presentation.responses import GatewayJSONResponse, error_response
from bill_gateway.presentation.schemas import ErrorResponseSchema, SignResponseSchema

logger = structlog.get_logger(__name__)

MISSING_SECRET_MESSAGE = "missing secret parameter"
METHOD_NOT_ALLOWED_MESSAGE = "only POST is supported"

sign_router = APIRouter()


def parse_form_data(form_data: str) -> Dict[str, str]:
    """
    Parse an application/x-www-form-urlencoded body.

    Pairs without "=" or that fail to decode are dropped.
    """
    params: Dict[str, str] = {}
    if not form_data:
        return params

    for pair in form_data.split("&"):
        key_value = pair.split("=", 1)
        if len(key_value) != 2:
            continue
        try:
            key = unquote_plus(key_value[0], errors="strict")
            value = unquote_plus(key_value[1], errors="strict")
        except UnicodeDecodeError:
            continue
        params[key] = value

    return params


@sign_router.post(
    "/sign",
    response_model=SignResponseSchema,
    summary="Generate Webhook Signature",
    description="""
    Sign the current timestamp with the submitted `secret` using
    HMAC-SHA256. The body must be form encoded: `secret=<value>`.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing secret"},
        500: {"model": ErrorResponseSchema, "description": "Signature generation failed"},
    },
)
async def create_signature(
    request: Request,
    signature_service: Annotated[SignatureService, Depends(get_signature_service)],
) -> Response:
    try:
        body = (await request.body()).decode("utf-8", errors="replace")
        secret = parse_form_data(body).get("secret")

        if not secret:
            record_signature("rejected")
            logger.info("signature_rejected", reason="missing_secret")
            return error_response(400, MISSING_SECRET_MESSAGE)

        result = signature_service.sign(secret)
    except Exception as e:
        record_signature("error")
        logger.exception("signature_failed", error=str(e), error_type=type(e).__name__)
        return error_response(500, f"signature generation failed: {e}")

    record_signature("signed")
    return GatewayJSONResponse(content=result.to_dict())


async def sign_method_not_allowed(request: Request) -> Response:
    response = error_response(405, METHOD_NOT_ALLOWED_MESSAGE)
    response.headers["Allow"] = "POST"
    return response


# Registered after the POST route, so it only sees the remaining methods
sign_router.add_route("/sign", sign_method_not_allowed, include_in_schema=False)
