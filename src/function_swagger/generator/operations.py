"""Assemble the operations of a single handler."""

import re

from function_swagger.config import SwaggerSettings
from function_swagger.functions.base import HandlerDescriptor
from function_swagger.schema.models import Operation
from function_swagger.schema.registry import DefinitionRegistry

from .binder import bind_parameters
from .responses import resolve_responses

WORD_RE = re.compile(r"[^\W\d_]+")
JSON_MEDIA_TYPE = "application/json"
SECURITY_SCHEME = "apikeyQuery"


def build_route(handler: HandlerDescriptor, settings: SwaggerSettings) -> str:
    """Route prefix followed by the trigger route, or the function name when blank."""
    template = handler.trigger.route if handler.trigger else None
    if template and template.strip():
        return settings.route_prefix + template.strip().lstrip("/")
    return settings.route_prefix + handler.name


def handler_methods(handler: HandlerDescriptor, settings: SwaggerSettings) -> list[str]:
    methods = handler.trigger.methods if handler.trigger else None
    if not methods:
        return list(settings.default_methods)
    return [m.lower() for m in methods]


def operation_summary(handler: HandlerDescriptor, settings: SwaggerSettings) -> str:
    if handler.display_name and handler.display_name.strip():
        return handler.display_name[: settings.summary_max_length]
    return f"Run {handler.name}"


def operation_description(handler: HandlerDescriptor) -> str:
    if handler.description and handler.description.strip():
        return handler.description
    return f"This function will run {handler.name}"


def title_case(text: str) -> str:
    """Capitalize each word, leaving all-caps words (acronyms) untouched."""
    return WORD_RE.sub(lambda m: m.group(0) if m.group(0).isupper() else m.group(0).capitalize(), text)


def operation_id(handler_name: str, method: str) -> str:
    return title_case(handler_name) + title_case(method)


def build_operations(
    handler: HandlerDescriptor, registry: DefinitionRegistry, settings: SwaggerSettings
) -> tuple[str, dict[str, Operation]]:
    """Return the handler's route and one operation per verb."""
    route = build_route(handler, settings)
    parameters = bind_parameters(handler, route, registry)
    responses = resolve_responses(handler, registry)
    summary = operation_summary(handler, settings)
    description = operation_description(handler)

    operations = {}
    for method in handler_methods(handler, settings):
        # Only the query key scheme: importers reject operations offering two api keys.
        operations[method] = Operation(
            operation_id=operation_id(handler.name, method),
            produces=[JSON_MEDIA_TYPE],
            consumes=[JSON_MEDIA_TYPE],
            parameters=parameters,
            summary=summary,
            description=description,
            responses=responses,
            security=[{SECURITY_SCHEME: []}],
        )
    return route, operations
