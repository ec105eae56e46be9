"""
Shared dispatch for every API call.

Route groups describe a call as a :class:`~stripekit.request_spec.RequestSpec`
and hand it to :class:`StripeAPIHandler`, which performs the HTTP exchange,
maps failures onto :mod:`stripekit.errors` and decodes successful responses
into the requested result type.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from stripekit.errors import (
    APIErrorEnvelope,
    StripeError,
    TransportError,
    TransportTimeoutError,
    UnexpectedResponseError,
    map_api_error,
    truncate_snippet,
)
from stripekit.http_client import create_stripe_http_client
from stripekit.request_spec import HttpMethod, RequestSpec
from stripekit.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

USER_AGENT = "stripekit-python/0.1.0"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_base_headers(settings: Settings) -> dict[str, str]:
    """Headers sent with every request unless a call overrides them."""
    headers = {
        "Authorization": f"Bearer {settings.api_key}",
        "Stripe-Version": settings.api_version,
        "User-Agent": USER_AGENT,
        "Content-Type": FORM_CONTENT_TYPE,
    }
    if settings.stripe_account:
        headers["Stripe-Account"] = settings.stripe_account
    return headers


@lru_cache(maxsize=None)
def _adapter_for(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


@dataclass(frozen=True, slots=True)
class StripeAPIHandler:
    """Sends requests through a shared AsyncClient with read-only base headers."""

    _client: httpx.AsyncClient
    _base_headers: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "_base_headers", MappingProxyType(dict(self._base_headers)))

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "StripeAPIHandler":
        """Factory that builds the handler and its transport from Settings."""
        return cls(
            create_stripe_http_client(settings, transport=transport),
            build_base_headers(settings),
        )

    @property
    def base_headers(self) -> Mapping[str, str]:
        return self._base_headers

    def merge_headers(self, overrides: Mapping[str, str] | None = None) -> httpx.Headers:
        """Base headers with ``overrides`` applied; override values win."""
        merged = httpx.Headers(dict(self._base_headers))
        if overrides:
            merged.update(overrides)
        return merged

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def send(
        self,
        method: HttpMethod,
        path: str,
        result_type: type[T],
        *,
        query: str | None = None,
        body: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> T:
        """Send pre-encoded query/body to ``path`` and decode into ``result_type``."""
        spec = RequestSpec(method, path, query=query, body=body, headers=headers or {})
        return await self.execute(spec, result_type, timeout=timeout)

    async def execute(
        self,
        spec: RequestSpec,
        result_type: type[T],
        *,
        timeout: float | None = None,
    ) -> T:
        """
        Perform the exchange described by ``spec``.

        Raises :class:`TransportError` when no response arrived, an
        :class:`~stripekit.errors.APIError` subclass for decodable error
        responses and :class:`UnexpectedResponseError` for anything that does
        not match the expected schema. Nothing is retried here.
        """
        method, path = spec.method, spec.path

        def _transport_error(
            error_class: type[TransportError],
            message: str,
            *,
            exc: Exception,
        ) -> TransportError:
            logger.error(
                message,
                extra={"method": method, "path": path},
                exc_info=exc,
            )
            return error_class(message)

        request_kwargs: dict[str, Any] = {"headers": self.merge_headers(spec.headers)}
        if spec.body is not None:
            request_kwargs["content"] = spec.body
        if timeout is not None:
            request_kwargs["timeout"] = timeout

        logger.debug("Sending API request", extra={"method": method, "path": path})
        try:
            response = await self._client.request(method, spec.url, **request_kwargs)
        except httpx.TimeoutException as exc:
            raise _transport_error(
                TransportTimeoutError,
                f"API request timed out ({method} {path}).",
                exc=exc,
            ) from exc
        except httpx.RequestError as exc:
            raise _transport_error(
                TransportError,
                f"API request failed ({method} {path}): {exc!s}",
                exc=exc,
            ) from exc

        if not response.is_success:
            raise self._error_from_response(method, path, response)

        try:
            return _adapter_for(result_type).validate_json(response.content)
        except ValidationError as exc:
            snippet = truncate_snippet(response.text)
            logger.error(
                "API response did not match the expected schema",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "result_type": getattr(result_type, "__name__", repr(result_type)),
                },
            )
            raise UnexpectedResponseError(
                f"API response ({response.status_code}) during {method} {path} "
                f"could not be decoded: {exc.error_count()} validation error(s).",
                status_code=response.status_code,
                body=snippet,
            ) from exc

    @staticmethod
    def _error_from_response(method: str, path: str, response: httpx.Response) -> StripeError:
        snippet = truncate_snippet(response.text)
        logger.warning(
            "API responded with error",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "content": snippet,
            },
        )
        try:
            envelope = APIErrorEnvelope.model_validate_json(response.content)
        except ValidationError:
            logger.error(
                "API error response could not be decoded",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            return UnexpectedResponseError(
                f"Undecodable API error ({response.status_code}) during {method} {path}: "
                f"{snippet or 'no body provided.'}",
                status_code=response.status_code,
                body=snippet,
            )
        return map_api_error(response.status_code, envelope.error, headers=response.headers)
