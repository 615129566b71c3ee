"""Descriptive metadata attached to a data type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Documentation:
    """Summary and description text for doc comments."""

    summary: str | None = None
    description: str | None = None
