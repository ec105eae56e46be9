"""Shared plumbing for resource route groups."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Self, TypeVar

from stripekit.encoding import ConfigValue
from stripekit.handler import StripeAPIHandler
from stripekit.request_spec import RequestSpec

T = TypeVar("T")

Params = Mapping[str, ConfigValue]


def require_non_empty(value: str, field_name: str) -> str:
    """Normalize and validate identifier arguments."""
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{field_name} must be a non-empty string.")
    return cleaned


@dataclass(frozen=True, slots=True)
class RouteGroup:
    """
    Base for a resource's operations.

    ``headers`` are per-group overrides (``Idempotency-Key``,
    ``Stripe-Account``) applied over the handler's base headers.
    """

    _handler: StripeAPIHandler
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def with_headers(self, headers: Mapping[str, str]) -> Self:
        """Return a copy of this group with ``headers`` merged into its overrides."""
        return replace(self, headers={**self.headers, **headers})

    async def _get(self, path: str, result_type: type[T], params: Params | None = None) -> T:
        spec = RequestSpec.for_read(path, params, headers=self.headers)
        return await self._handler.execute(spec, result_type)

    async def _post(self, path: str, result_type: type[T], params: Params | None = None) -> T:
        spec = RequestSpec.for_write(path, params, headers=self.headers)
        return await self._handler.execute(spec, result_type)

    async def _delete(self, path: str, result_type: type[T]) -> T:
        spec = RequestSpec.for_delete(path, headers=self.headers)
        return await self._handler.execute(spec, result_type)
