"""
Primitive data types.

Each primitive maps a schema type/format to a fixed target type. Types in
a built-in namespace need no import; library-mapped types need exactly
one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .datatype import DataTypeBase

# Namespaces whose types are available without an import
BUILTIN_NAMESPACES = frozenset({"java.lang"})


@dataclass(frozen=True, eq=False)
class PrimitiveDataType(DataTypeBase):
    """Base for primitives. Subclasses set ``name`` and ``namespace``."""

    name: ClassVar[str]
    namespace: ClassVar[str]

    @property
    def imports(self) -> frozenset[str]:
        if self.namespace in BUILTIN_NAMESPACES:
            return frozenset()
        return frozenset({self.qualified_name})


@dataclass(frozen=True, eq=False)
class LongDataType(PrimitiveDataType):
    """OpenAPI type 'integer' with format 'int64'."""

    name: ClassVar[str] = "Long"
    namespace: ClassVar[str] = "java.lang"


@dataclass(frozen=True, eq=False)
class IntegerDataType(PrimitiveDataType):
    """OpenAPI type 'integer' (format 'int32' or none)."""

    name: ClassVar[str] = "Integer"
    namespace: ClassVar[str] = "java.lang"


@dataclass(frozen=True, eq=False)
class StringDataType(PrimitiveDataType):
    name: ClassVar[str] = "String"
    namespace: ClassVar[str] = "java.lang"


@dataclass(frozen=True, eq=False)
class BooleanDataType(PrimitiveDataType):
    name: ClassVar[str] = "Boolean"
    namespace: ClassVar[str] = "java.lang"


@dataclass(frozen=True, eq=False)
class FloatDataType(PrimitiveDataType):
    """OpenAPI type 'number' with format 'float'."""

    name: ClassVar[str] = "Float"
    namespace: ClassVar[str] = "java.lang"


@dataclass(frozen=True, eq=False)
class DoubleDataType(PrimitiveDataType):
    """OpenAPI type 'number' with format 'double' or none."""

    name: ClassVar[str] = "Double"
    namespace: ClassVar[str] = "java.lang"


@dataclass(frozen=True, eq=False)
class LocalDateDataType(PrimitiveDataType):
    """OpenAPI type 'string' with format 'date'."""

    name: ClassVar[str] = "LocalDate"
    namespace: ClassVar[str] = "java.time"


@dataclass(frozen=True, eq=False)
class OffsetDateTimeDataType(PrimitiveDataType):
    """OpenAPI type 'string' with format 'date-time'."""

    name: ClassVar[str] = "OffsetDateTime"
    namespace: ClassVar[str] = "java.time"


@dataclass(frozen=True, eq=False)
class UUIDDataType(PrimitiveDataType):
    """OpenAPI type 'string' with format 'uuid'."""

    name: ClassVar[str] = "UUID"
    namespace: ClassVar[str] = "java.util"


# Schema reference name -> primitive class
PRIMITIVE_DATATYPES: dict[str, type[PrimitiveDataType]] = {
    cls.name: cls
    for cls in (
        LongDataType,
        IntegerDataType,
        StringDataType,
        BooleanDataType,
        FloatDataType,
        DoubleDataType,
        LocalDateDataType,
        OffsetDateTimeDataType,
        UUIDDataType,
    )
}
