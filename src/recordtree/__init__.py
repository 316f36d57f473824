"""recordtree: address and prune hierarchical record trees."""

from recordtree.address import (
    ADDRESS_SEPARATOR,
    addresses_equal,
    canonical_address,
    normalize_address,
    require_address,
)
from recordtree.exceptions import (
    AddressRequiredError,
    DeleteFailedError,
    FetchError,
    RecordTreeError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from recordtree.paths import assign_addresses, strip_addresses, walk_records
from recordtree.pruning import prune_record
from recordtree.schemas import Record, RecordTree, Section, dump_tree, parse_tree
from recordtree.service import RecordTreeService
from recordtree.storage import JsonFileStore, MemoryStore, RecordStore

__all__ = [
    "ADDRESS_SEPARATOR",
    "AddressRequiredError",
    "DeleteFailedError",
    "FetchError",
    "JsonFileStore",
    "MemoryStore",
    "Record",
    "RecordStore",
    "RecordTree",
    "RecordTreeError",
    "RecordTreeService",
    "Section",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "addresses_equal",
    "assign_addresses",
    "canonical_address",
    "dump_tree",
    "normalize_address",
    "parse_tree",
    "prune_record",
    "require_address",
    "strip_addresses",
    "walk_records",
]
