"""Read and delete operations over a stored record tree."""

from __future__ import annotations

import asyncio

from recordtree.address import AddressLike, canonical_address, require_address
from recordtree.exceptions import StorageReadError, StorageWriteError
from recordtree.paths import assign_addresses, strip_addresses
from recordtree.pruning import prune_record
from recordtree.schemas import Record, dump_tree
from recordtree.storage import RecordStore
from recordtree.utils.logging_config import get_logger

logger = get_logger(__name__)


class RecordTreeService:
    """Compose storage, address assignment and pruning.

    Deletes run as one load, prune, save cycle under a lock so two requests in
    the same process cannot overwrite each other's result.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self._lock = asyncio.Lock()

    async def _load_addressed(self) -> list[Record]:
        try:
            records = await self.store.load()
        except StorageReadError as exc:
            # Unreadable storage is served as an empty tree.
            logger.error("Failed to load record tree", extra={"error": str(exc)})
            records = []
        return assign_addresses(records)

    async def read_tree(self) -> list[Record]:
        """Return the stored tree with addresses assigned."""
        return await self._load_addressed()

    async def delete_record(self, address: AddressLike | None) -> list[Record]:
        """Delete the record at ``address`` and its subtree.

        Returns:
            The saved tree, re-addressed so later siblings are renumbered. When
            nothing lives at ``address`` the loaded tree is returned and the
            store is not written.

        Raises:
            AddressRequiredError: If ``address`` is missing or empty.
            StorageWriteError: If the pruned tree could not be saved.
        """
        target = require_address(address)
        async with self._lock:
            current = await self._load_addressed()
            pruned = strip_addresses(prune_record(current, target))
            if dump_tree(pruned) == dump_tree(strip_addresses(current)):
                logger.info("No record at address", extra={"address": canonical_address(target)})
                return current
            try:
                await self.store.save(pruned)
            except StorageWriteError as exc:
                logger.error(
                    "Failed to save record tree",
                    extra={"address": canonical_address(target), "error": str(exc)},
                )
                raise
        logger.info("Deleted record", extra={"address": canonical_address(target)})
        return assign_addresses(pruned)
