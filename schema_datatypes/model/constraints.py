"""
Schema constraints attached to a data type.

The validation keywords are carried through unchanged for the emitter;
only ``required`` is interpreted by the model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DataTypeConstraints:
    """Validation and required-property metadata of a schema."""

    default: Any = None
    nullable: bool = False

    # String constraints
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: str | None = None

    # Numeric constraints
    minimum: float | None = None
    exclusive_minimum: float | None = None
    maximum: float | None = None
    exclusive_maximum: float | None = None

    # Array constraints
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool = False

    enum: tuple[Any, ...] | None = None

    # Names of required properties (object schemas)
    required: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "required", tuple(self.required))
        if self.enum is not None:
            object.__setattr__(self, "enum", tuple(self.enum))

    def is_required(self, prop: str) -> bool:
        """Check whether the property is listed as required."""
        return prop in self.required
