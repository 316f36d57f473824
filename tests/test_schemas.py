"""Tests for record tree models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordtree.schemas import Record, Section, dump_tree, parse_tree


class TestRecord:
    """Tests for the Record model."""

    def test_parses_wire_keys(self) -> None:
        """Reads data, children and __path."""
        record = Record.model_validate(
            {"data": {"ID": "a"}, "children": {"x": {"records": []}}, "__path": ["0"]}
        )

        assert record.fields == {"ID": "a"}
        assert record.sections == {"x": Section(records=[])}
        assert record.address == ["0"]

    def test_accepts_attribute_names(self) -> None:
        """Python attribute names work as well as wire keys."""
        record = Record(fields={"ID": "a"}, address=["3"])

        assert dump_tree([record]) == [{"data": {"ID": "a"}, "__path": ["3"]}]

    def test_section_order_preserved(self) -> None:
        """Section insertion order survives parsing and dumping."""
        document = [{"data": {"ID": "a"}, "children": {"z": {"records": []}, "a": {"records": []}}}]

        assert list(dump_tree(parse_tree(document))[0]["children"]) == ["z", "a"]

    def test_record_id(self) -> None:
        """record_id renders the ID field as a string."""
        assert Record(fields={"ID": 7}).record_id == "7"
        assert Record(fields={"Name": "x"}).record_id is None

    @pytest.mark.parametrize(
        ("record_id", "deletable"),
        [("a", True), ("__section__children", False), ("x__section__", True), (None, True)],
    )
    def test_is_deletable(self, record_id: str | None, deletable: bool) -> None:
        """Only IDs starting with the reserved prefix are protected."""
        fields = {} if record_id is None else {"ID": record_id}

        assert Record(fields=fields).is_deletable is deletable


class TestParseTree:
    """Tests for parse_tree and dump_tree."""

    def test_rejects_non_list(self) -> None:
        """The root must be a list."""
        with pytest.raises(ValidationError):
            parse_tree({"data": {}})

    def test_missing_records_key_is_empty_section(self) -> None:
        """A section without records parses as empty."""
        tree = parse_tree([{"data": {"ID": "a"}, "children": {"x": {}}}])

        assert tree[0].sections is not None
        assert tree[0].sections["x"].records == []

    def test_dump_omits_absent_keys(self, scenario_document: list[dict]) -> None:
        """Leaves have no children key and unaddressed records no __path."""
        assert dump_tree(parse_tree(scenario_document)) == scenario_document

    def test_null_records_is_empty_section(self) -> None:
        """A section whose records entry is null parses as empty."""
        tree = parse_tree([{"data": {"ID": "a"}, "children": {"x": {"records": None}}}])

        assert tree[0].sections is not None
        assert tree[0].sections["x"].records == []

    def test_unknown_keys_round_trip(self) -> None:
        """Keys beside data, children and records are kept, including nulls."""
        document = [
            {
                "data": {"ID": "a"},
                "meta": 1,
                "note": None,
                "children": {"x": {"records": [{"data": {"ID": "b"}, "tag": "t"}], "label": "X"}},
            }
        ]

        assert dump_tree(parse_tree(document)) == document
