"""Test setup for recordtree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordtree.schemas import Record, parse_tree  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (exercise the full HTTP stack)",
    )


@pytest.fixture
def scenario_document() -> list[dict]:
    """Two root records; the second owns one nested record in section ``x``."""
    return [
        {"data": {"ID": "a"}},
        {"data": {"ID": "b"}, "children": {"x": {"records": [{"data": {"ID": "c"}}]}}},
    ]


@pytest.fixture
def scenario_tree(scenario_document: list[dict]) -> list[Record]:
    """Parsed form of ``scenario_document``."""
    return parse_tree(scenario_document)


@pytest.fixture
def nested_document() -> list[dict]:
    """Three root records with several sections and a duplicated ID."""
    return [
        {"data": {"ID": "1", "Name": "Alpha"}},
        {
            "data": {"ID": "2", "Name": "Beta"},
            "children": {
                "children": {
                    "records": [
                        {"data": {"ID": "2.1", "Name": "Beta one"}},
                        {
                            "data": {"ID": "2.2", "Name": "Beta two"},
                            "children": {"notes": {"records": [{"data": {"ID": "dup"}}]}},
                        },
                    ]
                },
                "owners": {"records": [{"data": {"ID": "dup"}}]},
            },
        },
        {
            "data": {"ID": "3", "Name": "Gamma"},
            "children": {
                "__section__empty": {"records": []},
                "items": {"records": [{"data": {"ID": "__section__header"}}, {"data": {"ID": "dup"}}]},
            },
        },
    ]


@pytest.fixture
def nested_tree(nested_document: list[dict]) -> list[Record]:
    """Parsed form of ``nested_document``."""
    return parse_tree(nested_document)
