"""Resolve the success response of a handler."""

import inspect
from typing import Any, get_args, get_origin

from function_swagger.functions.base import HandlerDescriptor
from function_swagger.http import HttpResponse
from function_swagger.schema.mapper import map_type
from function_swagger.schema.models import Response
from function_swagger.schema.registry import DefinitionRegistry
from function_swagger.schema.types import NoneType, strip_type

SUCCESS_STATUS = "200"


def response_payload_type(handler: HandlerDescriptor) -> Any:
    """The type of the success payload, or ``None`` when there is no body."""
    tp, _ = strip_type(handler.return_type)
    if get_origin(tp) is not None:
        args = get_args(tp)
        if len(args) == 1:
            tp, _ = strip_type(args[0])

    if tp is HttpResponse:
        tp = handler.response_type if handler.has_response_type else None

    if tp is NoneType or tp is inspect.Signature.empty:
        return None
    return tp


def resolve_responses(handler: HandlerDescriptor, registry: DefinitionRegistry) -> dict[str, Response]:
    tp = response_payload_type(handler)
    if tp is None:
        return {SUCCESS_STATUS: Response(description="OK")}
    return {SUCCESS_STATUS: Response(description="OK", schema_=map_type(tp, registry))}
