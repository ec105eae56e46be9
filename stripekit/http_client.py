"""HTTP transport factory for the payments API."""

import httpx

from stripekit.settings import Settings


def create_stripe_http_client(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the AsyncClient every API call goes through.

    Connection pooling, TLS and proxies are left to httpx; ``transport`` lets
    tests swap in ``httpx.MockTransport``.
    """
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        transport=transport,
    )
