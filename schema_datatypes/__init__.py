"""Schema data types

The type model layer of a schema-to-source code generator: objects,
composed schemas, primitives and unresolved types behind one data type
contract that a source emitter can query.
"""

__version__ = "1.0.0"

from .config import DataTypeConfig
from .errors import CircularReferenceError, DataTypeError, TypeGraphError
from .loader import TypeGraphLoader
from .model import (
    ComposedObjectDataType,
    CompositionKind,
    DataType,
    DataTypeConstraints,
    Documentation,
    ModelDataType,
    NoDataType,
    ObjectDataType,
)

__all__ = [
    "DataType",
    "ObjectDataType",
    "DataTypeConstraints",
    "Documentation",
    "ModelDataType",
    "ComposedObjectDataType",
    "CompositionKind",
    "NoDataType",
    "TypeGraphLoader",
    "DataTypeConfig",
    "DataTypeError",
    "TypeGraphError",
    "CircularReferenceError",
]
