"""Helpers for searching, grouping, folding, mapping, sorting, modifying and randomising lists."""

__version__ = "0.1.0"

__all__ = [
    "comparable",
    "core",
    "folds",
    "iterate",
    "mapping",
    "modify",
    "numeric",
    "ordered",
    "randomize",
]