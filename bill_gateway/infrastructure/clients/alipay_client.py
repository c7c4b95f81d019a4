"""HTTP implementation of AlipayBillClient."""

from datetime import datetime, timedelta
from typing import Callable

import structlog

from bill_gateway.core.config import settings
from bill_gateway.core.metrics import record_upstream_call, track_upstream_latency
from bill_gateway.domain.entities import (
    AccountLogSuccess,
    AlipayCredentials,
    BalanceSuccess,
    QueryFailure,
    QueryResult,
)
from bill_gateway.domain.interfaces import AlipayBillClient
from .openapi import AlipayOpenAPIClient, OpenAPIResponse, TIMESTAMP_FORMAT

logger = structlog.get_logger(__name__)

BALANCE_QUERY_METHOD = "alipay.data.bill.balance.query"
ACCOUNT_LOG_QUERY_METHOD = "alipay.data.bill.accountlog.query"

ACCOUNT_LOG_LOOKBACK = timedelta(days=7)
ACCOUNT_LOG_PAGE_NO = "1"
ACCOUNT_LOG_PAGE_SIZE = "20"


class HttpAlipayBillClient(AlipayBillClient):
    """
    Alipay bill query facade.

    Builds the biz content for each query, sends exactly one signed
    OpenAPI call and folds the outcome into a QueryResult. Nothing is
    cached or retried; every exception is returned as a failure.
    """

    def __init__(
        self,
        credentials: AlipayCredentials,
        openapi_client: AlipayOpenAPIClient | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._bill_user_id = credentials.bill_user_id
        self._clock = clock
        self._openapi = openapi_client or AlipayOpenAPIClient(
            credentials,
            timeout=settings.alipay_api_timeout,
            verify_response=settings.verify_response_signature,
        )

    async def query_balance(self) -> QueryResult:
        biz_content = {
            "bill_user_id": self._bill_user_id,
            "biz_type": "trade",
        }

        response = await self._call(BALANCE_QUERY_METHOD, biz_content)
        if isinstance(response, QueryFailure):
            return response

        return BalanceSuccess(
            available_amount=response.payload.get("available_amount"),
            freeze_amount=response.payload.get("freeze_amount"),
            total_amount=response.payload.get("total_amount"),
        )

    async def query_account_log(self) -> QueryResult:
        end_time = self._clock()
        start_time = end_time - ACCOUNT_LOG_LOOKBACK
        biz_content = {
            "start_time": start_time.strftime(TIMESTAMP_FORMAT),
            "end_time": end_time.strftime(TIMESTAMP_FORMAT),
            "page_no": ACCOUNT_LOG_PAGE_NO,
            "page_size": ACCOUNT_LOG_PAGE_SIZE,
        }

        response = await self._call(ACCOUNT_LOG_QUERY_METHOD, biz_content)
        if isinstance(response, QueryFailure):
            return response

        if response.payload.get("detail_list") is None:
            return AccountLogSuccess(raw_body="null")
        return AccountLogSuccess(raw_body=response.body)

    async def _call(self, method: str, biz_content: dict) -> OpenAPIResponse | QueryFailure:
        """Send one call; upstream business errors and exceptions become QueryFailure."""
        try:
            with track_upstream_latency(method):
                response = await self._openapi.execute(method, biz_content)
        except Exception as e:
            record_upstream_call(method, "exception")
            logger.error(
                "alipay_call_exception",
                method=method,
                error=str(e),
                error_type=type(e).__name__,
            )
            return QueryFailure.from_exception(e)

        if not response.is_success:
            record_upstream_call(method, "failure")
            logger.warning(
                "alipay_call_failed",
                method=method,
                code=response.code,
                sub_code=response.sub_code,
                sub_msg=response.sub_msg,
            )
            return QueryFailure(
                code=response.code,
                message=response.msg,
                sub_code=response.sub_code,
                sub_message=response.sub_msg,
            )

        record_upstream_call(method, "success")
        logger.info("alipay_call_succeeded", method=method)
        return response
