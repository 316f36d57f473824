"""Tests for address canonicalization."""

from __future__ import annotations

import pytest

from recordtree.address import (
    ADDRESS_SEPARATOR,
    addresses_equal,
    canonical_address,
    normalize_address,
    require_address,
)
from recordtree.exceptions import AddressRequiredError


class TestNormalizeAddress:
    """Tests for normalize_address function."""

    def test_list_of_strings(self) -> None:
        """Keeps string segments as they are."""
        assert normalize_address(["1", "x", "0"]) == ("1", "x", "0")

    def test_integer_segments_become_decimal_strings(self) -> None:
        """Renders index segments in decimal."""
        assert normalize_address([1, "x", 10]) == ("1", "x", "10")

    def test_dotted_string(self) -> None:
        """Splits the canonical form on the separator."""
        assert normalize_address("1.x.0") == ("1", "x", "0")

    def test_empty_string(self) -> None:
        """An empty string is an empty address."""
        assert normalize_address("") == ()


class TestCanonicalAddress:
    """Tests for canonical_address and addresses_equal."""

    def test_separator_is_dot(self) -> None:
        """The wire separator is a dot."""
        assert ADDRESS_SEPARATOR == "."

    def test_joins_segments(self) -> None:
        """Joins segments with the separator."""
        assert canonical_address(["1", "children", "0"]) == "1.children.0"

    def test_mixed_int_and_str_forms_compare_equal(self) -> None:
        """Independently built addresses for the same position are equal."""
        assert addresses_equal([1, "x", 0], "1.x.0")
        assert addresses_equal(("1", "x", "0"), ["1", "x", "0"])

    def test_different_positions_are_not_equal(self) -> None:
        """Sibling positions differ."""
        assert not addresses_equal(["1"], ["10"])
        assert not addresses_equal(["1", "x", "0"], ["1", "y", "0"])


class TestRequireAddress:
    """Tests for require_address function."""

    @pytest.mark.parametrize("value", [None, "", [], ()])
    def test_rejects_missing_addresses(self, value: object) -> None:
        """Missing or empty targets raise AddressRequiredError."""
        with pytest.raises(AddressRequiredError, match="address is required"):
            require_address(value)  # type: ignore[arg-type]

    def test_error_is_a_value_error(self) -> None:
        """Callers catching ValueError also see missing addresses."""
        with pytest.raises(ValueError):
            require_address(None)

    def test_returns_normalized_segments(self) -> None:
        """Valid targets are normalized."""
        assert require_address([2, "items", 1]) == ("2", "items", "1")
