"""Handler metadata providers.

A provider enumerates candidate handlers as ``HandlerDescriptor`` objects. The
bundled ``ModuleHandlerProvider`` reads functions declared with the decorators
in ``function_swagger.functions.decorators``.
"""

import importlib
import inspect
import logging
import sys
import typing
from abc import ABC, abstractmethod
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Iterator

from function_swagger.errors import DocumentGenerationError, HandlerLoadError
from function_swagger.schema.types import strip_type

from .base import HandlerDescriptor, ParameterDescriptor
from .decorators import FromQuery, Required, get_metadata, has_marker

logger = logging.getLogger(__name__)


class HandlerMetadataProvider(ABC):
    """Source of handler descriptors for one handler inventory."""

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Name of the inventory, used as the document title."""

    @abstractmethod
    def handlers(self) -> Iterator[HandlerDescriptor]:
        """Yield every function registered with a name."""


class StaticHandlerProvider(HandlerMetadataProvider):
    """Provider over an explicit list of descriptors."""

    def __init__(self, handlers: list[HandlerDescriptor], namespace: str = "functions"):
        self._handlers = list(handlers)
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def handlers(self) -> Iterator[HandlerDescriptor]:
        yield from self._handlers


class ModuleHandlerProvider(HandlerMetadataProvider):
    """Provider scanning module globals and class attributes for decorated functions."""

    def __init__(self, modules: list[ModuleType]):
        self.modules = list(modules)

    @property
    def namespace(self) -> str:
        if not self.modules:
            return ""
        first = self.modules[0]
        return first.__package__ or first.__name__

    def handlers(self) -> Iterator[HandlerDescriptor]:
        seen: set[int] = set()
        for module in self.modules:
            for fn in _iter_functions(module):
                if id(fn) in seen:
                    continue
                seen.add(id(fn))
                try:
                    handler = describe_function(fn)
                except Exception as exc:
                    name = get_metadata(fn).name
                    raise DocumentGenerationError(
                        f"Failed to describe function {name}: {exc}", handler=name
                    ) from exc
                yield handler


def _is_registered(fn: Any) -> bool:
    if not callable(fn):
        return False
    meta = get_metadata(fn)
    return meta is not None and bool(meta.name)


def _iter_functions(module: ModuleType) -> Iterator[Callable[..., Any]]:
    """Yield functions registered with ``@function_name``; partially decorated helpers are not handlers."""
    for value in vars(module).values():
        if inspect.isclass(value) and value.__module__ == module.__name__:
            for attr in vars(value).values():
                fn = attr.__func__ if isinstance(attr, (staticmethod, classmethod)) else attr
                if _is_registered(fn):
                    yield fn
        elif _is_registered(value):
            yield value


def describe_function(fn: Callable[..., Any]) -> HandlerDescriptor:
    """Build a descriptor from a decorated function's signature and metadata."""
    meta = get_metadata(fn)
    if meta is None or not meta.name:
        raise ValueError(f"{fn!r} is not registered with @function_name")

    hints = typing.get_type_hints(fn, include_extras=True)
    parameters = []
    for param in inspect.signature(fn).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        annotation, markers = strip_type(hints.get(param.name, str))
        parameters.append(
            ParameterDescriptor(
                name=param.name,
                annotation=annotation,
                from_query=has_marker(markers, FromQuery),
                required=has_marker(markers, Required),
            )
        )

    return HandlerDescriptor(
        name=meta.name,
        trigger=meta.trigger,
        parameters=parameters,
        return_type=hints.get("return"),
        display_name=meta.display_name,
        description=meta.description,
        has_response_type=meta.has_response_type,
        response_type=meta.response_type,
        module=getattr(fn, "__module__", "") or "",
    )


def load_modules(names: list[str], app_dir: Path | None = None) -> list[ModuleType]:
    """Import handler modules by dotted name, optionally from an extra directory."""
    if app_dir is not None and str(app_dir) not in sys.path:
        sys.path.insert(0, str(app_dir))

    modules = []
    for name in names:
        try:
            modules.append(importlib.import_module(name))
        except Exception as exc:
            raise HandlerLoadError(f"Cannot import handler module {name!r}: {exc}") from exc
        logger.debug("Loaded handler module %s", name)
    return modules
