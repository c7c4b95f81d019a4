"""Bill query Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class BalanceResponseSchema(BaseModel):
    """Schema for a successful GET /balance response."""

    success: bool = Field(True, examples=[True])
    availableAmount: Optional[str] = Field(
        None,
        description="Available balance in CNY",
        examples=["1024.00"],
    )
    freezeAmount: Optional[str] = Field(
        None,
        description="Frozen balance in CNY",
        examples=["0.00"],
    )
    totalAmount: Optional[str] = Field(
        None,
        description="Total balance in CNY",
        examples=["1024.00"],
    )


class QueryFailureSchema(BaseModel):
    """
    Schema for a failed bill query.

    Upstream failures carry Alipay's code fields verbatim. Transport
    and signing errors use errorCode "EXCEPTION" without sub codes.
    """

    success: bool = Field(False, examples=[False])
    errorCode: Optional[str] = Field(None, examples=["40004"])
    errorMsg: Optional[str] = Field(None, examples=["Business Failed"])
    subErrorCode: Optional[str] = Field(None, examples=["isv.insufficient-isv-permissions"])
    subErrorMsg: Optional[str] = Field(None, examples=["Insufficient Permissions"])
