"""
Asynchronous typed client for the payments API.

Route groups build nested parameters, :mod:`stripekit.encoding` flattens them
into bracket-notation form data and :class:`~stripekit.handler.StripeAPIHandler`
sends the request and decodes the response.
"""

from stripekit.client import StripeClient
from stripekit.encoding import ConfigValue, encode_parameters, flatten_parameters
from stripekit.errors import (
    APIError,
    APIServerError,
    AuthenticationError,
    CardError,
    IdempotencyError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    StripeError,
    TransportError,
    TransportTimeoutError,
    UnexpectedResponseError,
    map_api_error,
)
from stripekit.handler import StripeAPIHandler
from stripekit.request_spec import RequestSpec
from stripekit.settings import Settings

__all__ = [
    "APIError",
    "APIServerError",
    "AuthenticationError",
    "CardError",
    "ConfigValue",
    "IdempotencyError",
    "InvalidRequestError",
    "PermissionDeniedError",
    "RateLimitError",
    "RequestSpec",
    "Settings",
    "StripeAPIHandler",
    "StripeClient",
    "StripeError",
    "TransportError",
    "TransportTimeoutError",
    "UnexpectedResponseError",
    "encode_parameters",
    "flatten_parameters",
    "map_api_error",
]
