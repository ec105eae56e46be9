"""Payment source operations."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripekit import endpoints
from stripekit.models import Currency, Source, SourceFlow, SourceType, SourceUsage
from stripekit.routes.base import RouteGroup, require_non_empty

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceRoutes(RouteGroup):
    async def create(
        self,
        *,
        type: SourceType | str,
        amount: int | None = None,
        currency: Currency | str | None = None,
        flow: SourceFlow | str | None = None,
        mandate: Mapping[str, Any] | None = None,
        metadata: Mapping[str, str] | None = None,
        owner: Mapping[str, Any] | None = None,
        receiver: Mapping[str, Any] | None = None,
        redirect: Mapping[str, Any] | None = None,
        statement_descriptor: str | None = None,
        token: str | None = None,
        usage: SourceUsage | str | None = None,
    ) -> Source:
        params = {
            "type": type,
            "amount": amount,
            "currency": currency,
            "flow": flow,
            "mandate": mandate,
            "metadata": metadata,
            "owner": owner,
            "receiver": receiver,
            "redirect": redirect,
            "statement_descriptor": statement_descriptor,
            "token": token,
            "usage": usage,
        }
        logger.debug("Creating source", extra={"source_type": str(getattr(type, "value", type))})
        return await self._post(endpoints.sources(), Source, params)

    async def retrieve(self, source: str) -> Source:
        source_id = require_non_empty(source, "source")
        return await self._get(endpoints.source(source_id), Source)

    async def update(
        self,
        source: str,
        *,
        mandate: Mapping[str, Any] | None = None,
        metadata: Mapping[str, str] | None = None,
        owner: Mapping[str, Any] | None = None,
    ) -> Source:
        source_id = require_non_empty(source, "source")
        params = {"mandate": mandate, "metadata": metadata, "owner": owner}
        return await self._post(endpoints.source(source_id), Source, params)

    async def attach(self, source: str, customer: str) -> Source:
        """Attach a reusable source to a customer."""
        source_id = require_non_empty(source, "source")
        customer_id = require_non_empty(customer, "customer")
        logger.debug("Attaching source", extra={"source": source_id, "customer": customer_id})
        return await self._post(
            endpoints.customer_sources(customer_id), Source, {"source": source_id}
        )

    async def detach(self, id: str, customer: str) -> Source:
        source_id = require_non_empty(id, "id")
        customer_id = require_non_empty(customer, "customer")
        logger.debug("Detaching source", extra={"source": source_id, "customer": customer_id})
        return await self._delete(endpoints.customer_source(customer_id, source_id), Source)
