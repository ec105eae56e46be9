"""Balance and balance history operations."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripekit import endpoints
from stripekit.models import Balance, BalanceTransaction, BalanceTransactionList
from stripekit.routes.base import RouteGroup, require_non_empty


@dataclass(frozen=True, slots=True)
class BalanceRoutes(RouteGroup):
    async def retrieve(self) -> Balance:
        """Current balance of the account (or of the connected account in ``Stripe-Account``)."""
        return await self._get(endpoints.balance(), Balance)

    async def retrieve_transaction(self, id: str) -> BalanceTransaction:
        transaction_id = require_non_empty(id, "id")
        return await self._get(endpoints.balance_transaction(transaction_id), BalanceTransaction)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> BalanceTransactionList:
        """Balance history, most recent first."""
        return await self._get(endpoints.balance_history(), BalanceTransactionList, filter)
