"""Signature Pydantic schemas."""

from pydantic import BaseModel, Field


class SignResponseSchema(BaseModel):
    """Schema for a successful POST /sign response."""

    timestamp: int = Field(
        ...,
        description="Signing time in epoch milliseconds",
        examples=[1700000000000],
    )
    sign: str = Field(
        ...,
        description="URL-encoded base64 HMAC-SHA256 signature",
        examples=["tFZ1%2BnI0k8q3b7gG1o0c7v7l%2FJx0iZ7u6m8yX8VZk2A%3D"],
    )
