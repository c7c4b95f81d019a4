"""HMAC signature result."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SignatureResult:
    """Timestamp and URL-encoded base64 HMAC-SHA256 signature."""

    timestamp: int
    sign: str

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "sign": self.sign}
