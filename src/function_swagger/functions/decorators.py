"""Decorators and annotation markers used to declare function handlers.

Example::

    @function_name("GetItem")
    @http_trigger(route="item/{id}", methods=["get"])
    @display(name="Fetch an item")
    def get_item(req: HttpRequest, id: int) -> Item: ...

Decorators can be stacked in any order; each one records its part on the
function's ``__function_metadata__`` attribute.
"""

from typing import Any, Callable, TypeVar

from .base import FunctionMetadata, HttpTrigger

METADATA_ATTR = "__function_metadata__"

F = TypeVar("F", bound=Callable[..., Any])


class FromQuery:
    """Annotated marker binding a parameter to the query string.

    ``Annotated[int, FromQuery]`` and ``Annotated[int, FromQuery()]`` are
    equivalent.
    """


class Required:
    """Annotated marker flagging a query parameter or field as required."""


def has_marker(metadata: tuple, marker: type) -> bool:
    """Whether an Annotated metadata tuple carries a marker class or instance."""
    return any(m is marker or isinstance(m, marker) for m in metadata)


def get_metadata(fn: Callable[..., Any]) -> FunctionMetadata | None:
    return getattr(fn, METADATA_ATTR, None)


def _metadata_for(fn: Callable[..., Any]) -> FunctionMetadata:
    meta = get_metadata(fn)
    if meta is None:
        meta = FunctionMetadata()
        setattr(fn, METADATA_ATTR, meta)
    return meta


def function_name(name: str) -> Callable[[F], F]:
    """Register a function under the given name."""

    def deco(fn: F) -> F:
        _metadata_for(fn).name = name
        return fn

    return deco


def http_trigger(route: str | None = None, methods: list[str] | None = None) -> Callable[[F], F]:
    """Bind a function to HTTP requests on a route template and verbs."""

    def deco(fn: F) -> F:
        _metadata_for(fn).trigger = HttpTrigger(
            route=route,
            methods=[m.lower() for m in methods] if methods else None,
        )
        return fn

    return deco


def display(name: str | None = None, description: str | None = None) -> Callable[[F], F]:
    """Attach a human-readable title and description."""

    def deco(fn: F) -> F:
        meta = _metadata_for(fn)
        meta.display_name = name
        meta.description = description
        return fn

    return deco


def response_type(tp: Any) -> Callable[[F], F]:
    """Declare the real success payload of a function returning ``HttpResponse``.

    ``response_type(None)`` declares an empty response.
    """

    def deco(fn: F) -> F:
        meta = _metadata_for(fn)
        meta.has_response_type = True
        meta.response_type = tp
        return fn

    return deco
