"""Result types returned by the Alipay bill client."""

from dataclasses import dataclass
from typing import Optional, Union

EXCEPTION_CODE = "EXCEPTION"


@dataclass(frozen=True)
class BalanceSuccess:
    """Account balance reported by alipay.data.bill.balance.query."""

    available_amount: Optional[str]
    freeze_amount: Optional[str]
    total_amount: Optional[str]

    def to_dict(self) -> dict:
        return {
            "success": True,
            "availableAmount": self.available_amount,
            "freezeAmount": self.freeze_amount,
            "totalAmount": self.total_amount,
        }


@dataclass(frozen=True)
class AccountLogSuccess:
    """
    Account log response passed through untouched.

    ``raw_body`` is the upstream HTTP body, or the literal "null"
    when Alipay returned no detail list.
    """

    raw_body: str


@dataclass(frozen=True)
class QueryFailure:
    """
    A failed bill query.

    Either the upstream business error fields verbatim, or
    ``code == EXCEPTION_CODE`` with the exception text as message.
    """

    code: Optional[str]
    message: Optional[str]
    sub_code: Optional[str] = None
    sub_message: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "QueryFailure":
        return cls(code=EXCEPTION_CODE, message=str(exc) or type(exc).__name__)

    @property
    def is_exception(self) -> bool:
        return self.code == EXCEPTION_CODE

    def to_dict(self) -> dict:
        data = {
            "success": False,
            "errorCode": self.code,
            "errorMsg": self.message,
        }
        if not self.is_exception:
            data["subErrorCode"] = self.sub_code
            data["subErrorMsg"] = self.sub_message
        return data


QueryResult = Union[BalanceSuccess, AccountLogSuccess, QueryFailure]
