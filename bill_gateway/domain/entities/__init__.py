"""Domain Entities - Core business objects."""

from .credentials import AlipayCredentials, DEFAULT_GATEWAY_URL
from .query_result import (
    AccountLogSuccess,
    BalanceSuccess,
    EXCEPTION_CODE,
    QueryFailure,
    QueryResult,
)
from .signature import SignatureResult

__all__ = [
    "AlipayCredentials",
    "DEFAULT_GATEWAY_URL",
    "AccountLogSuccess",
    "BalanceSuccess",
    "EXCEPTION_CODE",
    "QueryFailure",
    "QueryResult",
    "SignatureResult",
]
