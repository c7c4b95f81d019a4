"""External client interfaces."""

from abc import ABC, abstractmethod

from bill_gateway.domain.entities import QueryResult


class AlipayBillClient(ABC):
    """
    Abstract client for Alipay bill queries.

    Implementations never raise: every failure, including transport
    and signing errors, is returned as a ``QueryFailure``.
    """

    @abstractmethod
    async def query_balance(self) -> QueryResult:
        """
        Query the partner account balance.

        Returns:
            BalanceSuccess with available, frozen and total amounts,
            or QueryFailure
        """
        ...

    @abstractmethod
    async def query_account_log(self) -> QueryResult:
        """
        Query the account log for the last 7 days (first page, 20 rows).

        Returns:
            AccountLogSuccess carrying the raw upstream body, or QueryFailure
        """
        ...
