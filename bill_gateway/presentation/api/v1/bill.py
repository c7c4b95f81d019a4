"""Alipay bill query endpoints."""

from typing import Annotated, Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from bill_gateway.core.dependencies import get_bill_client
from bill_gateway.domain.interfaces import AlipayBillClient
from bill_gateway.presentation.responses import envelope_response
from bill_gateway.presentation.schemas import BalanceResponseSchema, QueryFailureSchema

# Methods documented in the schema; any other method reaches the same
# handlers through the catch-all routes at the bottom of this module
QUERY_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]

bill_router = APIRouter()


@bill_router.api_route(
    "/balance",
    methods=QUERY_METHODS,
    response_class=Response,
    summary="Query Alipay Balance",
    description="""
    Query the available, frozen and total balance of the configured
    partner account. Upstream failures are reported with
    `success: false` and HTTP 200.
    """,
    responses={
        200: {
            "model": Union[BalanceResponseSchema, QueryFailureSchema],
            "description": "Balance or failure envelope",
        },
    },
)
async def get_balance(
    bill_client: Annotated[AlipayBillClient, Depends(get_bill_client)],
) -> Response:
    result = await bill_client.query_balance()
    return envelope_response(result)


@bill_router.api_route(
    "/accountlog",
    methods=QUERY_METHODS,
    response_class=Response,
    summary="Query Alipay Account Log",
    description="""
    Query the first 20 account log entries of the last 7 days.

    On success the raw Alipay response body is returned unchanged, or
    `null` when Alipay returned no detail list. Failures use the same
    envelope as /balance.
    """,
    responses={
        200: {
            "model": QueryFailureSchema,
            "description": "Raw Alipay body, null, or failure envelope",
        },
    },
)
async def get_account_log(
    bill_client: Annotated[AlipayBillClient, Depends(get_bill_client)],
) -> Response:
    result = await bill_client.query_account_log()
    return envelope_response(result)


async def get_balance_any_method(request: Request) -> Response:
    return await get_balance(get_bill_client(request))


async def get_account_log_any_method(request: Request) -> Response:
    return await get_account_log(get_bill_client(request))


bill_router.add_route("/balance", get_balance_any_method, include_in_schema=False)
bill_router.add_route("/accountlog", get_account_log_any_method, include_in_schema=False)
