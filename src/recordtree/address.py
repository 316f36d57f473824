"""Address canonicalization and comparison."""

from __future__ import annotations

from typing import Final, Sequence, Union

from recordtree.exceptions import AddressRequiredError

ADDRESS_SEPARATOR: Final[str] = "."

Segment = Union[int, str]
AddressLike = Union[str, Sequence[Segment]]


def normalize_address(value: AddressLike) -> tuple[str, ...]:
    """Return an address as a tuple of string segments.

    Index segments may be given as ints and are rendered in decimal. A plain
    string is treated as the dot-joined canonical form.
    """
    if isinstance(value, str):
        return tuple(value.split(ADDRESS_SEPARATOR)) if value else ()
    return tuple(str(segment) for segment in value)


def canonical_address(value: AddressLike) -> str:
    """Render an address in its canonical dot-joined form."""
    return ADDRESS_SEPARATOR.join(normalize_address(value))


def addresses_equal(left: AddressLike, right: AddressLike) -> bool:
    """Compare two addresses by canonical form."""
    return canonical_address(left) == canonical_address(right)


def require_address(value: AddressLike | None) -> tuple[str, ...]:
    """Normalize a delete target, rejecting missing or empty addresses."""
    if value is None:
        raise AddressRequiredError
    segments = normalize_address(value)
    if not segments or not any(segments):
        raise AddressRequiredError
    return segments
