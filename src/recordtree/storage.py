"""Storage collaborators for persisted record trees.

Persisted documents never contain addresses; they are stripped on save and
derived again on every load.
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from recordtree.exceptions import StorageReadError, StorageWriteError
from recordtree.paths import strip_addresses
from recordtree.schemas import Record, dump_tree, parse_tree
from recordtree.utils.logging_config import get_logger

logger = get_logger(__name__)


@runtime_checkable
class RecordStore(Protocol):
    """Load/save contract for the backing store."""

    async def load(self) -> list[Record]:
        """Return the persisted tree without addresses."""
        ...

    async def save(self, records: list[Record]) -> None:
        """Replace the persisted tree with ``records``."""
        ...


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool."""
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def replace_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write ``content`` to a sibling temp file and move it over ``path``."""

    def _replace() -> None:
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            tmp_path.write_text(content, encoding=encoding)
            os.replace(tmp_path, path)
        finally:
            tmp_path.unlink(missing_ok=True)

    await asyncio.to_thread(_replace)


class JsonFileStore:
    """Whole-document JSON file store.

    Args:
        path: Location of the JSON document. A missing file reads as an empty
            tree and is created on first save.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    async def load(self) -> list[Record]:
        if not self.path.exists():
            logger.info("Data file not found, starting empty", extra={"path": str(self.path)})
            return []
        try:
            raw = await read_text_async(self.path)
            return parse_tree(json.loads(raw))
        except (OSError, ValueError, ValidationError) as exc:
            raise StorageReadError(f"Failed to read {self.path}: {exc}") from exc

    async def save(self, records: list[Record]) -> None:
        payload = json.dumps(dump_tree(strip_addresses(records)), indent=2, ensure_ascii=False)
        try:
            await replace_text_async(self.path, payload)
        except OSError as exc:
            raise StorageWriteError(f"Failed to write {self.path}: {exc}") from exc
        logger.debug("Saved record tree", extra={"path": str(self.path), "records": len(records)})


class MemoryStore:
    """In-process store holding a serialized copy of the tree."""

    def __init__(self, records: list[Record] | None = None) -> None:
        self._document = dump_tree(strip_addresses(records or []))

    async def load(self) -> list[Record]:
        return parse_tree(self._document)

    async def save(self, records: list[Record]) -> None:
        self._document = dump_tree(strip_addresses(records))
