"""Top-up operations: add funds to the account balance."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripekit import endpoints
from stripekit.models import Currency, TopUp, TopUpList
from stripekit.routes.base import RouteGroup, require_non_empty

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TopUpRoutes(RouteGroup):
    async def create(
        self,
        *,
        amount: int,
        currency: Currency | str,
        description: str | None = None,
        metadata: Mapping[str, str] | None = None,
        source: str | None = None,
        statement_descriptor: str | None = None,
        transfer_group: str | None = None,
    ) -> TopUp:
        """Top up the balance of the account."""
        params = {
            "amount": amount,
            "currency": currency,
            "description": description,
            "metadata": metadata,
            "source": source,
            "statement_descriptor": statement_descriptor,
            "transfer_group": transfer_group,
        }
        logger.debug("Creating top-up", extra={"amount": amount})
        return await self._post(endpoints.topups(), TopUp, params)

    async def retrieve(self, id: str) -> TopUp:
        topup_id = require_non_empty(id, "id")
        return await self._get(endpoints.topup(topup_id), TopUp)

    async def update(
        self,
        topup: str,
        *,
        description: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> TopUp:
        """Update the description or metadata; other top-up fields are immutable."""
        topup_id = require_non_empty(topup, "topup")
        params = {"description": description, "metadata": metadata}
        return await self._post(endpoints.topup(topup_id), TopUp, params)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> TopUpList:
        return await self._get(endpoints.topups(), TopUpList, filter)

    async def cancel(self, topup: str) -> TopUp:
        """Cancel a pending top-up."""
        topup_id = require_non_empty(topup, "topup")
        logger.debug("Cancelling top-up", extra={"topup": topup_id})
        return await self._post(endpoints.topup_cancel(topup_id), TopUp)
