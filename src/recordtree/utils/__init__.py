"""Utility helpers for recordtree."""
