"""
Object data type with named properties.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..errors import DataTypeError
from .datatype import DataType, DataTypeBase


@dataclass(frozen=True, eq=False)
class ModelDataType(DataTypeBase):
    """An object schema, emitted as a standalone named type.

    Attributes:
        name: Type name
        namespace: Package of the generated type
        properties: Property name -> data type, in declaration order
    """

    name: str
    namespace: str
    properties: Mapping[str, DataType] = field(default_factory=dict)

    def __post_init__(self):
        for prop, datatype in self.properties.items():
            if datatype is None:
                raise DataTypeError(f"Property '{prop}' of {self.name} has no data type")
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def imports(self) -> frozenset[str]:
        return frozenset({self.qualified_name})

    def is_required(self, prop: str) -> bool:
        return self.constraints.is_required(prop) if self.constraints is not None else False

    def for_each(self, visitor: Callable[[str, DataType], None]) -> None:
        for prop, datatype in self.properties.items():
            visitor(prop, datatype)
