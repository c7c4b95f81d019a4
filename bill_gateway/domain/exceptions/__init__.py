"""Domain Exceptions - Configuration, signing and upstream errors."""

from .base import DomainException
from .configuration import ConfigurationError, TemplateGeneratedError
from .signature import SignatureException
from .alipay import AlipayAPIException

__all__ = [
    "DomainException",
    "ConfigurationError",
    "TemplateGeneratedError",
    "SignatureException",
    "AlipayAPIException",
]
