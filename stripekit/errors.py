"""
Typed errors raised by the API handler.

Every failed call surfaces exactly one :class:`StripeError`:

* :class:`TransportError` when the HTTP exchange itself failed,
* :class:`APIError` (or a subclass) when the API rejected the request with a
  well-formed error body,
* :class:`UnexpectedResponseError` when a response could not be decoded.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

SNIPPET_LIMIT = 512


def truncate_snippet(text: str) -> str:
    snippet = text.strip()
    if len(snippet) > SNIPPET_LIMIT:
        snippet = f"{snippet[:SNIPPET_LIMIT]}..."
    return snippet


class APIErrorBody(BaseModel):
    """The ``error`` object of an API error response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str
    message: str | None = None
    code: str | None = None
    param: str | None = None
    decline_code: str | None = None
    doc_url: str | None = None


class APIErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    error: APIErrorBody


class StripeError(RuntimeError):
    """Base class for every failure surfaced by the client."""


class TransportError(StripeError):
    """The request never produced an HTTP response (connection, TLS, timeout)."""


class TransportTimeoutError(TransportError):
    """The transport gave up waiting for the remote service."""


class UnexpectedResponseError(StripeError):
    """A response body did not match the schema the client expected."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class APIError(StripeError):
    """A request rejected by the API, carrying the remote error details."""

    def __init__(
        self,
        message: str | None,
        *,
        status_code: int,
        error_type: str,
        code: str | None = None,
        param: str | None = None,
        decline_code: str | None = None,
        doc_url: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message or f"API error ({status_code}): {error_type}")
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.param = param
        self.decline_code = decline_code
        self.doc_url = doc_url
        self.request_id = request_id

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"error_type={self.error_type!r}, code={self.code!r}, "
            f"param={self.param!r}, message={self.message!r})"
        )


class CardError(APIError):
    """The card could not be charged."""


class InvalidRequestError(APIError):
    """The request had invalid parameters or referenced a missing object."""


class IdempotencyError(APIError):
    """An idempotency key was reused with different parameters."""


class AuthenticationError(APIError):
    """The API key was missing or invalid."""


class PermissionDeniedError(APIError):
    """The API key lacks permission for the requested resource."""


class RateLimitError(APIError):
    """Too many requests hit the API too quickly."""


class APIServerError(APIError):
    """The API failed on its side."""


_ERRORS_BY_TYPE: dict[str, type[APIError]] = {
    "card_error": CardError,
    "idempotency_error": IdempotencyError,
}

_ERRORS_BY_STATUS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    403: PermissionDeniedError,
    429: RateLimitError,
}


def _resolve_error_class(status_code: int, error_type: str) -> type[APIError]:
    if error_type in _ERRORS_BY_TYPE:
        return _ERRORS_BY_TYPE[error_type]
    if status_code in _ERRORS_BY_STATUS:
        return _ERRORS_BY_STATUS[status_code]
    if error_type == "invalid_request_error":
        return InvalidRequestError
    if error_type == "api_error" or status_code >= 500:
        return APIServerError
    return APIError


def map_api_error(
    status_code: int,
    error: APIErrorBody,
    *,
    headers: Mapping[str, str] | None = None,
) -> APIError:
    """Build the typed error for a non-2xx response with a decoded error body."""
    error_class = _resolve_error_class(status_code, error.type)
    request_id = headers.get("request-id") if headers is not None else None
    return error_class(
        error.message,
        status_code=status_code,
        error_type=error.type,
        code=error.code,
        param=error.param,
        decline_code=error.decline_code,
        doc_url=error.doc_url,
        request_id=request_id,
    )
