"""Build a complete Swagger document from a handler inventory."""

import logging

from function_swagger.config import SwaggerSettings
from function_swagger.errors import DocumentGenerationError, FunctionSwaggerError, RouteConflictError
from function_swagger.functions.base import HandlerDescriptor
from function_swagger.functions.provider import HandlerMetadataProvider
from function_swagger.schema.models import Info, Operation, SecurityScheme, SwaggerDocument
from function_swagger.schema.registry import DefinitionRegistry

from .operations import SECURITY_SCHEME, build_operations

logger = logging.getLogger(__name__)

LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "::1"}


def host_name(host: str) -> str:
    """Strip the port from a host authority."""
    if host.startswith("["):
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host


def schemes_for(host: str) -> list[str]:
    return ["http"] if host_name(host).lower() in LOOPBACK_HOSTS else ["https"]


class DocumentBuilder:
    """Walks a provider's handlers and assembles their document.

    Each ``build`` call works on its own registry and path table.
    """

    def __init__(self, provider: HandlerMetadataProvider, settings: SwaggerSettings | None = None):
        self.provider = provider
        self.settings = settings or SwaggerSettings()

    def _handlers(self) -> list[HandlerDescriptor]:
        try:
            return list(self.provider.handlers())
        except FunctionSwaggerError:
            raise
        except Exception as exc:
            raise DocumentGenerationError(
                f"Failed to list functions of {self.provider.namespace}: {exc}"
            ) from exc

    def build(self, host: str) -> SwaggerDocument:
        registry = DefinitionRegistry()
        paths: dict[str, dict[str, Operation]] = {}
        owners: dict[tuple[str, str], str] = {}

        for handler in self._handlers():
            if handler.name == self.settings.swagger_function_name:
                continue
            if handler.trigger is None:
                logger.debug("Skipping %s: no HTTP trigger", handler.name)
                continue

            try:
                route, operations = build_operations(handler, registry, self.settings)
            except FunctionSwaggerError:
                raise
            except Exception as exc:
                raise DocumentGenerationError(
                    f"Failed to describe function {handler.name}: {exc}", handler=handler.name
                ) from exc

            path = paths.setdefault(route, {})
            for method, operation in operations.items():
                existing = owners.get((route, method))
                if existing is not None:
                    raise RouteConflictError(route, method, handler.name, existing)
                owners[(route, method)] = handler.name
                path[method] = operation

        logger.info("Generated %d paths and %d definitions for %s", len(paths), len(registry), host)
        return SwaggerDocument(
            info=Info(title=self.settings.title or self.provider.namespace, version=self.settings.version),
            host=host,
            base_path=self.settings.base_path,
            schemes=schemes_for(host),
            definitions=registry.definitions,
            paths=paths,
            security_definitions={
                SECURITY_SCHEME: SecurityScheme(type="apiKey", name=self.settings.api_key_name, in_="query"),
            },
        )


def generate_document(
    provider: HandlerMetadataProvider, host: str, settings: SwaggerSettings | None = None
) -> SwaggerDocument:
    """Build a document for ``provider`` as served from ``host``."""
    return DocumentBuilder(provider, settings).build(host)
