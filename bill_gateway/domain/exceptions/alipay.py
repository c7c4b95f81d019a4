"""Alipay OpenAPI-related exceptions."""

from .base import DomainException


class AlipayAPIException(DomainException):
    """Raised when an OpenAPI call cannot be signed, sent or verified."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="ALIPAY_API_ERROR",
        )
        self.status_code = status_code
