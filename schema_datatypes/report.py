"""
Text report of a data type graph.

Walks the graph read-only through the data type capabilities, the same
way a source emitter would, and renders it with a jinja2 template.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2

from .config import DataTypeConfig
from .model import ComposedObjectDataType, DataType, ObjectDataType, is_unresolved

CURRENT_DIR = Path(__file__).parent.resolve().absolute()


def describe_kind(datatype: DataType) -> str:
    """Short label for the kind of a data type."""
    if is_unresolved(datatype):
        return "unresolved"
    if isinstance(datatype, ComposedObjectDataType):
        return datatype.kind.value
    if isinstance(datatype, ObjectDataType):
        return "object"
    return "primitive"


def _type_info(name: str, datatype: DataType) -> dict[str, Any]:
    info = {
        "key": name,
        "name": datatype.name,
        "namespace": datatype.namespace,
        "kind": describe_kind(datatype),
        "imports": sorted(datatype.imports),
        "deprecated": datatype.deprecated,
        "documentation": datatype.documentation,
        "properties": [],
        "limitation": None,
    }

    if isinstance(datatype, ObjectDataType):

        def add_property(prop: str, prop_type: DataType) -> None:
            info["properties"].append(
                {
                    "name": prop,
                    "type": prop_type.name,
                    "required": datatype.is_required(prop),
                    "unresolved": is_unresolved(prop_type),
                }
            )

        datatype.for_each(add_property)

    if isinstance(datatype, ComposedObjectDataType) and not datatype.is_flattened:
        info["limitation"] = f"{datatype.kind.value} compositions are not flattened"

    return info


def find_unresolved(types: Mapping[str, DataType]) -> list[str]:
    """Names of unresolved types reachable as declared types or properties."""
    unresolved: dict[str, None] = {}
    for datatype in types.values():
        if is_unresolved(datatype):
            unresolved[datatype.name] = None
        if isinstance(datatype, ObjectDataType):
            for prop_type in datatype.properties.values():
                if is_unresolved(prop_type):
                    unresolved[prop_type.name] = None
        if isinstance(datatype, ComposedObjectDataType):
            for constituent in datatype.constituents:
                if is_unresolved(constituent):
                    unresolved[constituent.name] = None
    return list(unresolved)


def render_report(types: Mapping[str, DataType], config: DataTypeConfig | None = None) -> str:
    """
    Render a report of the given data types.

    Args:
        types: Type name -> data type, in the order to report them
        config: Report options (defaults to DataTypeConfig())

    Returns:
        The rendered report
    """
    if config is None:
        config = DataTypeConfig()

    jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
    with open(CURRENT_DIR / "templates" / "report.txt.jinja2", encoding="utf-8") as f:
        template = jinja_env.from_string(f.read())

    return template.render(
        types=[_type_info(name, datatype) for name, datatype in types.items()],
        unresolved=find_unresolved(types),
        show_imports=config.show_imports,
        show_documentation=config.show_documentation,
    )
