"""
Type graph loader.

Builds data type instances from a JSON type graph document:

    {
      "types": {
        "Base": {"type": "object", "namespace": "model", "properties": {"id": "Long"}},
        "Pet": {"type": "allOf", "namespace": "model", "items": ["Base", "Name"]}
      }
    }

References are plain type names. A name resolves to a declared type first,
then to a primitive; anything else becomes a ``NoDataType``. Every name
resolves to one shared instance, and constituents are fully built before
the type that composes them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import CircularReferenceError, TypeGraphError
from .logging import get_logger
from .model import (
    PRIMITIVE_DATATYPES,
    ComposedObjectDataType,
    CompositionKind,
    DataType,
    DataTypeConstraints,
    Documentation,
    ModelDataType,
    NoDataType,
)

logger = get_logger(__name__)

# JSON Schema keyword -> DataTypeConstraints field
CONSTRAINT_KEYS = {
    "default": "default",
    "nullable": "nullable",
    "minLength": "min_length",
    "maxLength": "max_length",
    "pattern": "pattern",
    "format": "format",
    "minimum": "minimum",
    "exclusiveMinimum": "exclusive_minimum",
    "maximum": "maximum",
    "exclusiveMaximum": "exclusive_maximum",
    "minItems": "min_items",
    "maxItems": "max_items",
    "uniqueItems": "unique_items",
    "enum": "enum",
    "required": "required",
}

OBJECT_TYPE = "object"
COMPOSITION_TYPES = {kind.value for kind in CompositionKind}


class TypeGraphLoader:
    """Resolves a type graph document into data types."""

    def __init__(self, document: dict[str, Any]):
        """
        Initialize the loader.

        Args:
            document: Parsed type graph document

        Raises:
            TypeGraphError: If the document has no "types" mapping
        """
        definitions = document.get("types") if isinstance(document, dict) else None
        if not isinstance(definitions, dict):
            raise TypeGraphError('Type graph document must contain a "types" mapping')

        self.definitions: dict[str, Any] = definitions
        self._resolved: dict[str, DataType] = {}
        self._resolving: list[str] = []

    @staticmethod
    def from_file(path: str | Path) -> TypeGraphLoader:
        """Create a loader from a JSON file."""
        with open(path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise TypeGraphError(f"Invalid JSON in {path}: {e}", cause=e) from e
        return TypeGraphLoader(document)

    def load(self) -> dict[str, DataType]:
        """
        Resolve every declared type.

        Returns:
            Declared type name -> data type, in declaration order

        Raises:
            TypeGraphError: If a definition is malformed
            CircularReferenceError: If definitions reference each other in a cycle
        """
        types = {name: self.resolve(name) for name in self.definitions}
        logger.debug("Type graph loaded", types=len(types), resolved=len(self._resolved))
        return types

    def resolve(self, ref: str) -> DataType:
        """Resolve a type name to its (shared) data type."""
        if not isinstance(ref, str):
            raise TypeGraphError(f"Type reference must be a string, got {type(ref).__name__}")

        if ref in self._resolved:
            return self._resolved[ref]

        if ref in self._resolving:
            raise CircularReferenceError(self._resolving[self._resolving.index(ref) :] + [ref])

        if ref in self.definitions:
            self._resolving.append(ref)
            try:
                datatype = self._build(ref, self.definitions[ref])
            finally:
                self._resolving.pop()
        elif ref in PRIMITIVE_DATATYPES:
            datatype = PRIMITIVE_DATATYPES[ref]()
        else:
            logger.warning("Unresolved type reference", ref=ref, referenced_from=self._current())
            datatype = NoDataType(ref)

        self._resolved[ref] = datatype
        return datatype

    def _current(self) -> str | None:
        return self._resolving[-1] if self._resolving else None

    def _build(self, name: str, definition: Any) -> DataType:
        if not isinstance(definition, dict):
            raise TypeGraphError(f"Definition of {name} must be a mapping")

        type_name = definition.get("type", OBJECT_TYPE)
        namespace = definition.get("namespace", "")
        if not isinstance(namespace, str):
            raise TypeGraphError(f"Namespace of {name} must be a string")

        deprecated = definition.get("deprecated", False)
        if not isinstance(deprecated, bool):
            raise TypeGraphError(f"Deprecated flag of {name} must be a boolean, got {deprecated!r}")

        common = {
            "constraints": self._constraints(name, definition),
            "deprecated": deprecated,
            "documentation": self._documentation(definition),
        }

        if type_name == OBJECT_TYPE:
            properties = definition.get("properties", {})
            if not isinstance(properties, dict):
                raise TypeGraphError(f"Properties of {name} must be a mapping")
            logger.debug("Building object type", type=name, properties=len(properties))
            return ModelDataType(
                name,
                namespace,
                {prop: self.resolve(ref) for prop, ref in properties.items()},
                **common,
            )

        if type_name in COMPOSITION_TYPES:
            items = definition.get("items", [])
            if not isinstance(items, list):
                raise TypeGraphError(f"Items of {name} must be a list")
            logger.debug("Building composed type", type=name, kind=type_name, items=len(items))
            return ComposedObjectDataType(
                name,
                namespace,
                type_name,
                [self.resolve(ref) for ref in items],
                **common,
            )

        raise TypeGraphError(f"Unknown type '{type_name}' for {name}")

    @staticmethod
    def _constraints(name: str, definition: dict[str, Any]) -> DataTypeConstraints | None:
        values = {field: definition[key] for key, field in CONSTRAINT_KEYS.items() if key in definition}
        if not values:
            return None

        required = values.get("required", [])
        if not isinstance(required, list) or not all(isinstance(prop, str) for prop in required):
            raise TypeGraphError(f"Required properties of {name} must be a list of names, got {required!r}")

        if "enum" in values and not isinstance(values["enum"], list):
            raise TypeGraphError(f"Enum of {name} must be a list, got {values['enum']!r}")

        return DataTypeConstraints(**values)

    @staticmethod
    def _documentation(definition: dict[str, Any]) -> Documentation | None:
        summary = definition.get("summary")
        description = definition.get("description")
        if summary is None and description is None:
            return None
        return Documentation(summary=summary, description=description)
