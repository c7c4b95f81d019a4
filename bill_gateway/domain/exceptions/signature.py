"""HMAC signature exceptions."""

from .base import DomainException


class SignatureException(DomainException):
    """Raised when an HMAC signature cannot be produced."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="SIGNATURE_ERROR",
        )
