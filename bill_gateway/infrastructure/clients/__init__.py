"""External API client implementations."""

from .alipay_client import HttpAlipayBillClient
from .openapi import AlipayOpenAPIClient, OpenAPIResponse

__all__ = [
    "HttpAlipayBillClient",
    "AlipayOpenAPIClient",
    "OpenAPIResponse",
]
