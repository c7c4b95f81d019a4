"""Credential configuration exceptions."""

from .base import DomainException


class ConfigurationError(DomainException):
    """Raised when alipay.properties cannot be found, read or validated."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
        )


class TemplateGeneratedError(ConfigurationError):
    """Raised after a template alipay.properties was written for the operator."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Template configuration written to {path}; fill it in and restart",
        )
        self.code = "CONFIGURATION_TEMPLATE_GENERATED"
        self.path = path
