"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Error body returned for client and protocol errors."""

    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["missing secret parameter"],
    )
