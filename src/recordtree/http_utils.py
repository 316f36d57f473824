"""HTTP utilities for calling the record tree API with retry logic."""

from __future__ import annotations

import asyncio
from typing import Any, Final

import httpx

from recordtree.config import (
    RECORDTREE_CLIENT_BACKOFF_S,
    RECORDTREE_CLIENT_MAX_RETRIES,
)
from recordtree.exceptions import FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})


async def request_with_retries(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    json: Any = None,
    retry_status_codes: frozenset[int] = RETRY_STATUS_CODES,
    max_retries: int | None = None,
) -> httpx.Response:
    """Send a request, retrying transient failures with exponential backoff.

    Args:
        client: The client used to send the request.
        method: HTTP method name.
        url: Absolute URL or a path relative to the client's base URL.
        json: Optional JSON body.
        retry_status_codes: Status codes treated as transient. Responses with
            any other status are returned to the caller as-is.
        max_retries: Overrides the configured retry count. Pass 0 for
            requests that must not be repeated.

    Returns:
        The last response received.

    Raises:
        FetchError: If every attempt failed at the transport level or with a
            retryable status.
    """
    last_exc: Exception | None = None
    retries = RECORDTREE_CLIENT_MAX_RETRIES if max_retries is None else max_retries

    for attempt in range(retries + 1):
        try:
            response = await client.request(method, url, json=json)
            if response.status_code not in retry_status_codes:
                return response
            last_exc = FetchError(f"HTTP {response.status_code} from {method} {url}")
        except httpx.RequestError as exc:
            last_exc = exc

        if attempt < retries:
            backoff = RECORDTREE_CLIENT_BACKOFF_S * (2**attempt)
            await asyncio.sleep(backoff)

    raise FetchError(f"Failed to {method} {url}: {last_exc}")
