"""Dependency injection for FastAPI."""

from fastapi import Request

from bill_gateway.application.services import SignatureService
from bill_gateway.domain.exceptions import ConfigurationError
from bill_gateway.domain.interfaces import AlipayBillClient


# External client dependencies
def get_bill_client(request: Request) -> AlipayBillClient:
    """Get the process-wide AlipayBillClient built at startup."""
    bill_client = getattr(request.app.state, "bill_client", None)
    if bill_client is None:
        raise ConfigurationError("Alipay bill client is not configured")
    return bill_client


# Service dependencies
def get_signature_service() -> SignatureService:
    """Get a SignatureService instance."""
    return SignatureService()
