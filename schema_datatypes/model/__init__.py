"""
Data type model.

Contains the data type capability contracts and all type variants.
"""

from __future__ import annotations

from .composed_datatype import ComposedObjectDataType, CompositionKind
from .constraints import DataTypeConstraints
from .datatype import DataType, DataTypeBase, ObjectDataType
from .documentation import Documentation
from .model_datatype import ModelDataType
from .no_datatype import UNRESOLVED_NAMESPACE, NoDataType, is_unresolved
from .primitives import (
    BUILTIN_NAMESPACES,
    PRIMITIVE_DATATYPES,
    BooleanDataType,
    DoubleDataType,
    FloatDataType,
    IntegerDataType,
    LocalDateDataType,
    LongDataType,
    OffsetDateTimeDataType,
    PrimitiveDataType,
    StringDataType,
    UUIDDataType,
)

__all__ = [
    "DataType",
    "ObjectDataType",
    "DataTypeBase",
    "DataTypeConstraints",
    "Documentation",
    "ModelDataType",
    "ComposedObjectDataType",
    "CompositionKind",
    "NoDataType",
    "UNRESOLVED_NAMESPACE",
    "is_unresolved",
    "PrimitiveDataType",
    "BUILTIN_NAMESPACES",
    "PRIMITIVE_DATATYPES",
    "LongDataType",
    "IntegerDataType",
    "StringDataType",
    "BooleanDataType",
    "FloatDataType",
    "DoubleDataType",
    "LocalDateDataType",
    "OffsetDateTimeDataType",
    "UUIDDataType",
]
