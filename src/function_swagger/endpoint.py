"""The reserved ``Swagger`` function serving the generated document."""

import json
import logging
from typing import Callable

from function_swagger.config import SwaggerSettings
from function_swagger.errors import DocumentGenerationError
from function_swagger.functions.decorators import function_name, http_trigger, response_type
from function_swagger.functions.provider import HandlerMetadataProvider
from function_swagger.generator.document import generate_document
from function_swagger.generator.output import render_document
from function_swagger.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

JSON_MIMETYPE = "application/json"


def create_swagger_function(
    provider: HandlerMetadataProvider, settings: SwaggerSettings | None = None
) -> Callable[[HttpRequest], HttpResponse]:
    """Create the GET function that documents every other function of ``provider``.

    Assign the result to a module-level name in the function app so the host
    registers it; the generator always leaves it out of the document.
    """
    settings = settings or SwaggerSettings()

    @function_name(settings.swagger_function_name)
    @http_trigger(methods=["get"])
    @response_type(None)
    def swagger(req: HttpRequest) -> HttpResponse:
        try:
            document = generate_document(provider, req.authority, settings)
        except DocumentGenerationError as exc:
            logger.exception("Swagger document generation failed")
            return HttpResponse(
                status_code=500,
                body=json.dumps({"error": str(exc)}),
                mimetype=JSON_MIMETYPE,
            )
        return HttpResponse(status_code=200, body=render_document(document, "json"), mimetype=JSON_MIMETYPE)

    return swagger
