"""
Webhook signature service.

Produces the timestamp/sign pair expected by robot webhooks that
authenticate callers with HMAC-SHA256 over ``"<timestamp>\\n<secret>"``.
"""

import base64
import hashlib
import hmac
import time
from typing import Callable
from urllib.parse import quote_plus

from bill_gateway.domain.entities import SignatureResult
from bill_gateway.domain.exceptions import SignatureException


def current_time_millis() -> int:
    return time.time_ns() // 1_000_000


def compute_signature(secret: str, timestamp: int) -> str:
    """
    Sign ``timestamp`` with ``secret``.

    Returns:
        URL-encoded base64 of HMAC-SHA256(key=secret, msg="<timestamp>\\n<secret>")
    """
    if not secret:
        raise SignatureException("secret must not be empty")

    string_to_sign = f"{timestamp}\n{secret}"
    try:
        digest = hmac.new(
            secret.encode("utf-8"),
            string_to_sign.encode("utf-8"),
            hashlib.sha256,
        ).digest()
    except ValueError as e:
        raise SignatureException(f"HmacSHA256 unavailable: {e}") from e

    return quote_plus(base64.b64encode(digest).decode("ascii"))


class SignatureService:
    """Generates and checks webhook signatures against the wall clock."""

    def __init__(self, clock: Callable[[], int] = current_time_millis):
        self._clock = clock

    def sign(self, secret: str | None) -> SignatureResult:
        """
        Sign the current time with ``secret``.

        Raises:
            SignatureException: If the secret is missing or empty
        """
        if not secret:
            raise SignatureException("missing secret parameter")

        timestamp = self._clock()
        return SignatureResult(
            timestamp=timestamp,
            sign=compute_signature(secret, timestamp),
        )

    def verify(self, secret: str, timestamp: int, sign: str) -> bool:
        """Check a signature the way the receiving webhook does."""
        if not secret or not sign:
            return False
        expected = compute_signature(secret, timestamp)
        return hmac.compare_digest(expected, sign)
