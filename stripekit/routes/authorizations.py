"""Issuing authorization operations."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripekit import endpoints
from stripekit.models import Authorization, AuthorizationList
from stripekit.routes.base import RouteGroup, require_non_empty

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthorizationRoutes(RouteGroup):
    async def retrieve(self, authorization: str) -> Authorization:
        authorization_id = require_non_empty(authorization, "authorization")
        return await self._get(endpoints.authorization(authorization_id), Authorization)

    async def update(
        self,
        authorization: str,
        *,
        metadata: Mapping[str, str] | None = None,
    ) -> Authorization:
        authorization_id = require_non_empty(authorization, "authorization")
        params = {"metadata": metadata}
        return await self._post(endpoints.authorization(authorization_id), Authorization, params)

    async def approve(
        self,
        authorization: str,
        *,
        held_amount: int | None = None,
    ) -> Authorization:
        """
        Approve a pending authorization.

        ``held_amount`` holds less than the requested amount when the
        authorization allows it.
        """
        authorization_id = require_non_empty(authorization, "authorization")
        logger.debug("Approving authorization", extra={"authorization": authorization_id})
        params = {"held_amount": held_amount}
        return await self._post(
            endpoints.authorization_approve(authorization_id), Authorization, params
        )

    async def decline(self, authorization: str) -> Authorization:
        authorization_id = require_non_empty(authorization, "authorization")
        logger.debug("Declining authorization", extra={"authorization": authorization_id})
        return await self._post(endpoints.authorization_decline(authorization_id), Authorization)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> AuthorizationList:
        return await self._get(endpoints.authorizations(), AuthorizationList, filter)
