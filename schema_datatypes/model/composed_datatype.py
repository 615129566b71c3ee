"""
Composed schema data type (allOf, oneOf, anyOf).

An ``allOf`` composition is flattened into a single object type: the
properties of its object-shaped constituents are merged in declaration
order, and a later constituent overrides the data type of a property an
earlier one already declared, without moving it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from ..errors import DataTypeError
from ..logging import get_logger
from ..utils import merge_properties
from .datatype import DataType, DataTypeBase, ObjectDataType

logger = get_logger(__name__)


class CompositionKind(str, Enum):
    """Schema combinator of a composed type."""

    ALL_OF = "allOf"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"

    @staticmethod
    def parse(value: CompositionKind | str) -> CompositionKind:
        """Convert a combinator keyword to a kind."""
        try:
            return CompositionKind(value)
        except ValueError as e:
            raise DataTypeError(f"Unknown composition kind: {value!r}", cause=e) from e


@dataclass(frozen=True, eq=False)
class ComposedObjectDataType(DataTypeBase):
    """OpenAPI composed schema type.

    Only ``allOf`` compositions are flattened. ``oneOf``/``anyOf``
    compositions still satisfy the data type contract but report no
    properties.

    Attributes:
        name: Type name of the composed type
        namespace: Package of the composed type
        kind: The combinator
        constituents: The composed data types, in declaration order. They are
            shared with the rest of the type graph and never copied.
    """

    name: str
    namespace: str
    kind: CompositionKind = CompositionKind.ALL_OF
    constituents: Sequence[DataType] = ()

    def __post_init__(self):
        object.__setattr__(self, "kind", CompositionKind.parse(self.kind))
        object.__setattr__(self, "constituents", tuple(self.constituents))

        for index, constituent in enumerate(self.constituents):
            if constituent is None:
                raise DataTypeError(f"Constituent {index} of {self.name} is missing")

        if not self.is_flattened:
            logger.warning(
                "Composition is not flattened, properties will be empty",
                type=self.qualified_name,
                kind=self.kind.value,
            )

    @property
    def is_flattened(self) -> bool:
        """Whether the constituents' properties are merged into this type."""
        return self.kind is CompositionKind.ALL_OF

    @property
    def object_constituents(self) -> tuple[ObjectDataType, ...]:
        """Constituents with the object capability, in declaration order."""
        return tuple(c for c in self.constituents if isinstance(c, ObjectDataType))

    @property
    def properties(self) -> Mapping[str, DataType]:
        if not self.is_flattened:
            return MappingProxyType({})
        return MappingProxyType(merge_properties(c.properties for c in self.object_constituents))

    @property
    def referenced_imports(self) -> frozenset[str]:
        """Imports of the object constituents.

        Primitives are built-in or library types and unresolved types are
        already flagged, so neither contributes here.
        """
        imports: set[str] = set()
        for constituent in self.object_constituents:
            imports.update(constituent.imports)
        return frozenset(imports)

    @property
    def imports(self) -> frozenset[str]:
        return self.referenced_imports | {self.qualified_name}

    def is_required(self, prop: str) -> bool:
        # required-ness belongs to the composed type, never to a constituent
        return self.constraints.is_required(prop) if self.constraints is not None else False

    def for_each(self, visitor: Callable[[str, DataType], None]) -> None:
        for prop, datatype in self.properties.items():
            visitor(prop, datatype)
