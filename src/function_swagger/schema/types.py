"""Python type introspection used by the schema mapper.

Python has a single ``int`` and a single ``float``; the ``NewType`` aliases
below let handler authors pick the wire width explicitly.
"""

import dataclasses
import types
import typing
from enum import Enum
from typing import Annotated, Any, ClassVar, NewType, Union, get_args, get_origin

from pydantic import BaseModel

from function_swagger.functions.decorators import Required, has_marker

Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Float32 = NewType("Float32", float)
Byte = NewType("Byte", int)

NoneType = type(None)


class FieldDescriptor(BaseModel):
    """A public instance field of a structured type."""

    name: str
    annotation: Any
    required: bool = False


def strip_type(tp: Any) -> tuple[Any, tuple]:
    """Remove ``Annotated`` and ``Optional`` wrappers.

    Returns the bare type and the collected ``Annotated`` metadata.
    """
    metadata: tuple = ()
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            metadata += tp.__metadata__
            tp = get_args(tp)[0]
        elif origin is Union or origin is types.UnionType:
            args = [a for a in get_args(tp) if a is not NoneType]
            if len(args) != 1:
                return tp, metadata
            tp = args[0]
        else:
            return tp, metadata


def is_structured(tp: Any) -> bool:
    """Whether a type is described as an object definition rather than inline."""
    if tp is Any or get_origin(tp) is not None or not isinstance(tp, type):
        return False
    if issubclass(tp, Enum):
        return False
    if dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel):
        return True
    if tp.__module__ == "builtins":
        return False
    return bool(getattr(tp, "__annotations__", None))


def fields_of(tp: type) -> list[FieldDescriptor]:
    """List the public instance fields of a structured type, in declaration order."""
    if issubclass(tp, BaseModel):
        # pydantic has already split Annotated metadata off into FieldInfo.metadata
        return [
            FieldDescriptor(
                name=name,
                annotation=strip_type(field.annotation)[0],
                required=has_marker(tuple(field.metadata), Required),
            )
            for name, field in tp.model_fields.items()
        ]

    hints = typing.get_type_hints(tp, include_extras=True)
    if dataclasses.is_dataclass(tp):
        names = [f.name for f in dataclasses.fields(tp)]
    else:
        names = list(hints)

    fields = []
    for name in names:
        hint = hints.get(name, Any)
        if name.startswith("_") or hint is ClassVar or get_origin(hint) is ClassVar:
            continue
        annotation, metadata = strip_type(hint)
        fields.append(
            FieldDescriptor(name=name, annotation=annotation, required=has_marker(metadata, Required))
        )
    return fields
