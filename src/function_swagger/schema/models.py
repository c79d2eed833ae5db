"""Typed Swagger 2.0 document tree.

Field aliases carry the wire names; dump with ``by_alias=True`` and
``exclude_none=True`` to get the document as published.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SwaggerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Schema(SwaggerModel):
    """Inline primitive schema, ``$ref`` pointer, or object definition."""

    ref: str | None = Field(default=None, alias="$ref")
    type: str | None = None
    format: str | None = None
    properties: dict[str, Schema] | None = None


class Parameter(SwaggerModel):
    name: str
    in_: str = Field(alias="in")  # path / query / body
    required: bool
    type: str | None = None
    format: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")


class Response(SwaggerModel):
    description: str
    schema_: Schema | None = Field(default=None, alias="schema")


class Operation(SwaggerModel):
    operation_id: str = Field(alias="operationId")
    produces: list[str] = ["application/json"]
    consumes: list[str] = ["application/json"]
    parameters: list[Parameter] = []
    summary: str
    description: str
    responses: dict[str, Response]
    security: list[dict[str, list[str]]] = []


class Info(SwaggerModel):
    title: str
    version: str


class SecurityScheme(SwaggerModel):
    type: str
    name: str
    in_: str = Field(alias="in")


class SwaggerDocument(SwaggerModel):
    """Root of a generated document."""

    swagger: str = "2.0"
    info: Info
    host: str
    base_path: str = Field(default="/", alias="basePath")
    schemes: list[str]
    definitions: dict[str, Schema] = {}
    paths: dict[str, dict[str, Operation]] = {}
    security_definitions: dict[str, SecurityScheme] = Field(
        default_factory=dict, alias="securityDefinitions"
    )
