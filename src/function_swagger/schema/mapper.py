"""Map Python types to Swagger schema fragments."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

from .models import Schema
from .types import Byte, Float32, Int32, Int64, is_structured, strip_type

if TYPE_CHECKING:
    from .registry import DefinitionRegistry

# (type, format) per primitive type
PRIMITIVE_FORMATS: dict[Any, tuple[str, str | None]] = {
    bool: ("boolean", None),
    Int32: ("integer", "int32"),
    Int64: ("integer", "int64"),
    int: ("integer", "int32"),
    Float32: ("number", "float"),
    float: ("number", "double"),
    str: ("string", None),
    Byte: ("string", "byte"),
    bytes: ("string", "byte"),
    datetime.datetime: ("string", "date"),
    datetime.date: ("string", "date"),
}


def primitive_schema(tp: Any) -> Schema:
    """Inline schema for a primitive-like type; unknown kinds become strings."""
    tp, _ = strip_type(tp)
    type_, format_ = PRIMITIVE_FORMATS.get(tp, ("string", None))
    return Schema(type=type_, format=format_)


def map_type(tp: Any, registry: DefinitionRegistry | None = None) -> Schema:
    """Map a type to an inline schema or a ``$ref`` into the registry.

    Without a registry, structured types fall back to a string schema.
    """
    tp, _ = strip_type(tp)
    if is_structured(tp):
        if registry is None:
            return Schema(type="string")
        return registry.ref_for(tp)
    return primitive_schema(tp)
