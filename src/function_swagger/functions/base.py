"""Descriptors for function handlers.

Providers convert whatever metadata mechanism they read into these models;
the document generator only ever works on descriptors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class HttpTrigger(BaseModel):
    """HTTP binding of a function: its route template and allowed verbs."""

    model_config = ConfigDict(frozen=True)

    route: str | None = None  # blank -> function name
    methods: list[str] | None = None  # None or empty -> every default verb


class ParameterDescriptor(BaseModel):
    """A single declared input of a handler."""

    model_config = ConfigDict(frozen=True)

    name: str
    annotation: Any
    from_query: bool = False
    required: bool = False


class HandlerDescriptor(BaseModel):
    """A function exposed as one or more API operations."""

    model_config = ConfigDict(frozen=True)

    name: str
    trigger: HttpTrigger | None
    parameters: list[ParameterDescriptor] = []
    return_type: Any = None
    display_name: str | None = None
    description: str | None = None
    has_response_type: bool = False
    response_type: Any = None
    module: str = ""


class FunctionMetadata(BaseModel):
    """Metadata accumulated on a function object by the decorators."""

    name: str | None = None
    trigger: HttpTrigger | None = None
    display_name: str | None = None
    description: str | None = None
    has_response_type: bool = False
    response_type: Any = None
