"""Render documents to JSON or YAML."""

import yaml

from function_swagger.schema.models import SwaggerDocument

FORMATS = ("json", "yaml")


def render_document(document: SwaggerDocument, fmt: str = "json") -> str:
    if fmt == "json":
        return document.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(document.to_dict(), sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unknown output format: {fmt}")
