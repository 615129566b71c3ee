"""
Fallback data type for schemas that could not be mapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .datatype import DataType, DataTypeBase

# Namespace of unresolved types; never a real generated or library namespace
UNRESOLVED_NAMESPACE = "io.openapiprocessor.leaked"


@dataclass(frozen=True, eq=False)
class NoDataType(DataTypeBase):
    """A schema the resolver could not map to any known shape.

    The import of an unresolved type is still reported, so it shows up as
    a broken import in generated code instead of disappearing.
    """

    name: str
    namespace: ClassVar[str] = UNRESOLVED_NAMESPACE

    @property
    def imports(self) -> frozenset[str]:
        return frozenset({self.qualified_name})


def is_unresolved(datatype: DataType) -> bool:
    """Check whether a data type stands in for an unresolved schema."""
    return datatype.namespace == UNRESOLVED_NAMESPACE
