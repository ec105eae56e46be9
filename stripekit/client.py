"""
Client facade that owns the API handler and exposes every route group.

The handler is built once and shared read-only by all route groups.
"""

import logging
from types import TracebackType

import httpx

from stripekit.handler import StripeAPIHandler
from stripekit.routes import (
    AuthorizationRoutes,
    BalanceRoutes,
    LocationRoutes,
    PersonRoutes,
    SourceRoutes,
    TopUpRoutes,
)
from stripekit.settings import Settings

logger = logging.getLogger(__name__)


class StripeClient:
    """Entry point for API calls; use as an async context manager or call :meth:`aclose`."""

    def __init__(self, handler: StripeAPIHandler) -> None:
        self._handler = handler
        self.authorizations = AuthorizationRoutes(handler)
        self.balance = BalanceRoutes(handler)
        self.locations = LocationRoutes(handler)
        self.persons = PersonRoutes(handler)
        self.sources = SourceRoutes(handler)
        self.topups = TopUpRoutes(handler)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "StripeClient":
        """Factory that builds the client from Settings."""
        logger.debug(
            "Creating API client",
            extra={"base_url": settings.api_base_url, "api_version": settings.api_version},
        )
        return cls(StripeAPIHandler.from_settings(settings, transport=transport))

    @property
    def handler(self) -> StripeAPIHandler:
        return self._handler

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._handler.aclose()

    async def __aenter__(self) -> "StripeClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
