"""Application services (use cases)."""

from .signature_service import SignatureService, compute_signature

__all__ = [
    "SignatureService",
    "compute_signature",
]
