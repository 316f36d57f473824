"""Async client for the record tree HTTP API."""

from __future__ import annotations

from typing import Any

import httpx

from recordtree.address import AddressLike, normalize_address, require_address
from recordtree.config import RECORDTREE_CLIENT_TIMEOUT_S, RECORDTREE_USER_AGENT
from recordtree.exceptions import AddressRequiredError, DeleteFailedError, FetchError
from recordtree.http_utils import request_with_retries
from recordtree.schemas import Record, parse_tree
from recordtree.utils.logging_config import get_logger

logger = get_logger(__name__)

DATA_ENDPOINT = "/api/data"
DELETE_ENDPOINT = "/api/delete"


class RecordTreeClient:
    """Read and delete records through a running server.

    Use as an async context manager, or pass an existing ``httpx.AsyncClient``
    whose lifetime the caller manages.
    """

    def __init__(self, base_url: str, *, client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(RECORDTREE_CLIENT_TIMEOUT_S),
            headers={"User-Agent": RECORDTREE_USER_AGENT},
        )

    async def __aenter__(self) -> RecordTreeClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_tree(self) -> list[Record]:
        """Return the addressed tree served by ``GET /api/data``."""
        response = await request_with_retries(self._client, "GET", DATA_ENDPOINT)
        if response.is_error:
            raise FetchError(f"Server error: {response.status_code}")
        return parse_tree(response.json())

    async def delete(self, address: AddressLike) -> list[Record]:
        """Delete the record at ``address`` and return the re-addressed tree.

        Raises:
            AddressRequiredError: If ``address`` is empty.
            DeleteFailedError: If the server rejected or failed the delete.
        """
        segments = list(require_address(address))
        # Sent once: after a delete lands, the same address names the next sibling.
        response = await request_with_retries(
            self._client,
            "POST",
            DELETE_ENDPOINT,
            json={"path": segments},
            retry_status_codes=frozenset(),
            max_retries=0,
        )
        payload = _json_or_none(response)
        if response.is_error or not payload or not payload.get("success"):
            error = (payload or {}).get("error") or f"Delete failed: {response.status_code}"
            logger.warning("Delete rejected", extra={"address": segments, "status": response.status_code})
            raise DeleteFailedError(error)
        return parse_tree(payload.get("data", []))

    async def delete_record(self, record: Record) -> list[Record]:
        """Delete ``record`` using the address it was served with.

        Section-header rows are refused without contacting the server.
        """
        if not record.is_deletable:
            raise ValueError(f"Record {record.record_id!r} is a section header and cannot be deleted")
        if not record.address:
            raise AddressRequiredError
        return await self.delete(normalize_address(record.address))


def _json_or_none(response: httpx.Response) -> dict[str, Any] | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
