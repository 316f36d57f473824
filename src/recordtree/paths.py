"""Positional address assignment for record trees."""

from __future__ import annotations

from typing import Iterator, Sequence

from recordtree.schemas import Record, Section


def assign_addresses(records: Sequence[Record], base: Sequence[str] = ()) -> list[Record]:
    """Return a copy of ``records`` with every record's address filled in.

    A record at position ``i`` gets ``base + [i]``. Each section is entered with
    the section name appended, so a nested record's address reads
    ``[i, section, j, ...]`` from the root down. The input is not modified.
    """
    addressed: list[Record] = []
    for index, record in enumerate(records):
        address = [*base, str(index)]
        update: dict[str, object] = {"address": address}
        if record.sections is not None:
            update["sections"] = {
                name: Section(records=assign_addresses(section.records, [*address, name]))
                for name, section in record.sections.items()
            }
        addressed.append(record.model_copy(update=update))
    return addressed


def strip_addresses(records: Sequence[Record]) -> list[Record]:
    """Return a copy of ``records`` with all addresses removed."""
    stripped: list[Record] = []
    for record in records:
        update: dict[str, object] = {"address": None}
        if record.sections is not None:
            update["sections"] = {
                name: Section(records=strip_addresses(section.records)) for name, section in record.sections.items()
            }
        stripped.append(record.model_copy(update=update))
    return stripped


def walk_records(records: Sequence[Record]) -> Iterator[Record]:
    """Yield every record depth-first in document order."""
    for record in records:
        yield record
        for section in (record.sections or {}).values():
            yield from walk_records(section.records)
