"""Terminal location operations."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripekit import endpoints
from stripekit.models import DeletedObject, Location, LocationList
from stripekit.routes.base import RouteGroup, require_non_empty


@dataclass(frozen=True, slots=True)
class LocationRoutes(RouteGroup):
    async def create(self, *, address: Mapping[str, Any], display_name: str) -> Location:
        params = {"address": address, "display_name": display_name}
        return await self._post(endpoints.locations(), Location, params)

    async def retrieve(self, location: str) -> Location:
        location_id = require_non_empty(location, "location")
        return await self._get(endpoints.location(location_id), Location)

    async def update(
        self,
        location: str,
        *,
        address: Mapping[str, Any] | None = None,
        display_name: str | None = None,
    ) -> Location:
        location_id = require_non_empty(location, "location")
        params = {"address": address, "display_name": display_name}
        return await self._post(endpoints.location(location_id), Location, params)

    async def delete(self, location: str) -> DeletedObject:
        location_id = require_non_empty(location, "location")
        return await self._delete(endpoints.location(location_id), DeletedObject)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> LocationList:
        return await self._get(endpoints.locations(), LocationList, filter)
