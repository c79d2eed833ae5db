"""Classify handler parameters into path, query and body parameters."""

import logging
import re
from typing import Any

from function_swagger.functions.base import HandlerDescriptor, ParameterDescriptor
from function_swagger.http import HttpRequest
from function_swagger.schema.mapper import map_type
from function_swagger.schema.models import Parameter, Schema
from function_swagger.schema.registry import DefinitionRegistry
from function_swagger.schema.types import fields_of, is_structured

logger = logging.getLogger(__name__)

# {id}, {id:int}, {id?}, {*rest}
PLACEHOLDER_RE = re.compile(r"\{\*{0,2}([^{}:?=*]+)")

INJECTED_TYPES = (HttpRequest, logging.Logger, logging.LoggerAdapter)


def route_placeholders(route: str) -> set[str]:
    """Names of the ``{placeholder}`` segments in a route template."""
    return {name.strip() for name in PLACEHOLDER_RE.findall(route)}


def is_injected(tp: Any) -> bool:
    """Whether the runtime supplies this parameter type itself."""
    return isinstance(tp, type) and issubclass(tp, INJECTED_TYPES)


def bind_parameters(
    handler: HandlerDescriptor, route: str, registry: DefinitionRegistry
) -> list[Parameter]:
    """Describe a handler's inputs in declaration order."""
    placeholders = route_placeholders(route)
    parameters: list[Parameter] = []

    for param in handler.parameters:
        if is_injected(param.annotation):
            continue

        if param.name in placeholders:
            parameters.append(_simple_parameter(param.name, "path", True, map_type(param.annotation)))
        elif param.from_query and not is_structured(param.annotation):
            parameters.append(
                _simple_parameter(param.name, "query", param.required, map_type(param.annotation, registry))
            )
        elif param.from_query:
            parameters.extend(flatten_query(param.annotation, param.name, registry))
        else:
            parameters.append(_body_parameter(param, registry))

    return parameters


def flatten_query(
    tp: type,
    prefix: str,
    registry: DefinitionRegistry,
    visiting: frozenset[type] = frozenset(),
) -> list[Parameter]:
    """Expand a structured query parameter into one dotted query parameter per leaf.

    A field whose type is already being expanded higher up is skipped.
    """
    visiting = visiting | {tp}
    parameters: list[Parameter] = []
    for field in fields_of(tp):
        name = f"{prefix}.{field.name}"
        if is_structured(field.annotation):
            if field.annotation in visiting:
                logger.debug("Not expanding %s: %s is already being expanded", name, field.annotation.__name__)
                continue
            parameters.extend(flatten_query(field.annotation, name, registry, visiting))
        else:
            parameters.append(
                _simple_parameter(name, "query", field.required, map_type(field.annotation, registry))
            )
    return parameters


def _simple_parameter(name: str, location: str, required: bool, schema: Schema) -> Parameter:
    return Parameter(
        name=name,
        in_=location,
        required=required,
        type=schema.type,
        format=schema.format,
    )


def _body_parameter(param: ParameterDescriptor, registry: DefinitionRegistry) -> Parameter:
    return Parameter(
        name=param.name,
        in_="body",
        required=True,
        schema_=map_type(param.annotation, registry),
    )
