"""Credential snapshot loaded from alipay.properties."""

from dataclasses import dataclass, field

DEFAULT_GATEWAY_URL = "https://openapi.alipay.com/gateway.do"


@dataclass(frozen=True)
class AlipayCredentials:
    """
    Immutable Alipay credential set.

    Built once at startup and handed to every component that needs it.

    Attributes:
        bill_user_id: Partner account ID (2088...) the bills belong to
        app_id: OpenAPI application ID
        app_private_key: Application RSA private key (PEM or bare base64)
        alipay_public_key: Alipay platform public key for response verification
        gateway_url: OpenAPI gateway endpoint
    """

    bill_user_id: str
    app_id: str
    app_private_key: str = field(repr=False)
    alipay_public_key: str = field(repr=False)
    gateway_url: str = DEFAULT_GATEWAY_URL

    def missing_fields(self) -> list[str]:
        """Return the property keys whose values are empty."""
        required = {
            "bill_user_id": self.bill_user_id,
            "app_id": self.app_id,
            "app_private_key": self.app_private_key,
            "alipay_public_key": self.alipay_public_key,
        }
        return [key for key, value in required.items() if not value]
