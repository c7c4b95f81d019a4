"""Pydantic schemas for API response documentation."""

from .bill import BalanceResponseSchema, QueryFailureSchema
from .sign import SignResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "BalanceResponseSchema",
    "QueryFailureSchema",
    "SignResponseSchema",
    "ErrorResponseSchema",
]
