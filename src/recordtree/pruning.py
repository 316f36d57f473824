"""Address-based removal of records from a tree."""

from __future__ import annotations

from typing import Sequence

from recordtree.address import AddressLike, canonical_address, require_address
from recordtree.schemas import Record, Section


def prune_record(records: Sequence[Record], target: AddressLike | None) -> list[Record]:
    """Remove the record addressed by ``target`` together with its subtree.

    ``records`` must already carry addresses (see
    :func:`recordtree.paths.assign_addresses`). Matching is by canonical address
    only, and every surviving branch is searched, so duplicate ``ID`` values in
    different sections never collide. An unknown target leaves the tree
    unchanged.

    Raises:
        AddressRequiredError: If ``target`` is missing or empty.
    """
    target_key = canonical_address(require_address(target))

    def _prune(nodes: Sequence[Record]) -> list[Record]:
        result: list[Record] = []
        for node in nodes:
            node_key = canonical_address(node.address) if node.address else ""
            if node_key == target_key:
                continue
            if node.sections is not None:
                node = node.model_copy(
                    update={
                        "sections": {
                            name: Section(records=_prune(section.records)) for name, section in node.sections.items()
                        }
                    }
                )
            result.append(node)
        return result

    return _prune(records)
