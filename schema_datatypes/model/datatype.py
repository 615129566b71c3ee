"""
Capability contracts shared by all data type variants.

``DataType`` and ``ObjectDataType`` are runtime-checkable protocols: a
variant has the object capability when it provides ordered properties,
not because of where it sits in a class hierarchy. ``DataTypeBase``
stores the optional attributes every concrete variant carries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .. import utils
from .constraints import DataTypeConstraints
from .documentation import Documentation


@runtime_checkable
class DataType(Protocol):
    """What an emitter can ask of any data type."""

    @property
    def name(self) -> str: ...

    @property
    def namespace(self) -> str: ...

    @property
    def imports(self) -> frozenset[str]: ...

    @property
    def deprecated(self) -> bool: ...

    @property
    def constraints(self) -> DataTypeConstraints | None: ...

    @property
    def documentation(self) -> Documentation | None: ...


@runtime_checkable
class ObjectDataType(DataType, Protocol):
    """A data type with named, ordered properties."""

    @property
    def properties(self) -> Mapping[str, DataType]: ...

    def is_required(self, prop: str) -> bool: ...

    def for_each(self, visitor: Callable[[str, DataType], None]) -> None: ...


@dataclass(frozen=True, eq=False)
class DataTypeBase(ABC):
    """Storage for the optional attributes of a data type.

    Subclasses provide ``name``, ``namespace`` and ``imports``. Instances
    are immutable and compare by identity, since the same instance may be
    shared by several places in a type graph.
    """

    constraints: DataTypeConstraints | None = field(default=None, kw_only=True)
    deprecated: bool = field(default=False, kw_only=True)
    documentation: Documentation | None = field(default=None, kw_only=True)

    @property
    def qualified_name(self) -> str:
        """The ``namespace.name`` identifier of this type."""
        return utils.qualified_name(self.namespace, self.name)

    @property
    @abstractmethod
    def imports(self) -> frozenset[str]:
        """Identifiers the emitter must import to reference this type."""
