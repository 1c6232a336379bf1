"""
HTTP client utilities with retry.
"""

import logging
from typing import Optional, Dict

import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

logger = logging.getLogger(__name__)

USER_AGENT = "TravelAssistant/1.0"


def create_async_client(
    timeout: float = 30.0,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an async HTTP client with common settings."""
    default_headers = {"User-Agent": USER_AGENT}
    if headers:
        default_headers.update(headers)

    return httpx.AsyncClient(
        timeout=timeout,
        headers=default_headers,
        transport=transport,
        follow_redirects=True,
    )


def with_retry(
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0,
):
    """
    Decorator for retrying HTTP operations with exponential backoff.

    Only transport errors are retried; HTTP error responses are returned.

    Usage:
        @with_retry(max_attempts=3)
        async def post_message(client, payload):
            return await client.post(url, json=payload)
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=min_wait, max=max_wait),
        retry=retry_if_exception_type((httpx.TransportError,)),
        reraise=True,
    )


__all__ = [
    "create_async_client",
    "with_retry",
]
