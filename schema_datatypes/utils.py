"""
Utility functions for the data type model.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

V = TypeVar("V")


def qualified_name(namespace: str, name: str) -> str:
    """Join a namespace and a type name into an importable identifier.

    Examples:
        ("model", "Pet") -> "model.Pet"
        ("java.time", "LocalDate") -> "java.time.LocalDate"
        ("", "Pet") -> "Pet"
    """
    if not namespace:
        return name
    return f"{namespace}.{name}"


def merge_properties(mappings: Iterable[Mapping[str, V]]) -> dict[str, V]:
    """Merge ordered mappings, keeping first-seen key order.

    A key seen for the first time is appended. A key that is already
    present gets the later value, but it keeps its original position.

    Examples:
        [{"x": 1, "y": 2}, {"y": 3, "z": 4}] -> {"x": 1, "y": 3, "z": 4}

    Args:
        mappings: Mappings in precedence order (later wins)

    Returns:
        A new dict with the merged entries
    """
    merged: dict[str, V] = {}
    for mapping in mappings:
        # dict assignment keeps the position of an existing key
        for key, value in mapping.items():
            merged[key] = value
    return merged
