"""Shared schemas for recordtree."""

from recordtree.schemas.records import Record, RecordTree, Section, dump_tree, parse_tree

__all__ = ["Record", "RecordTree", "Section", "dump_tree", "parse_tree"]
