"""Exceptions raised while loading functions and generating documents."""


class FunctionSwaggerError(Exception):
    """Base class for all function-swagger errors."""


class HandlerLoadError(FunctionSwaggerError):
    """A module holding function handlers could not be imported."""


class DocumentGenerationError(FunctionSwaggerError):
    """Generating the Swagger document failed as a whole."""

    def __init__(self, message: str, handler: str | None = None):
        super().__init__(message)
        self.handler = handler


class RouteConflictError(DocumentGenerationError):
    """Two handlers declare the same route and verb."""

    def __init__(self, route: str, method: str, handler: str, existing: str):
        super().__init__(
            f"{handler} declares {method.upper()} {route}, already declared by {existing}",
            handler=handler,
        )
        self.route = route
        self.method = method
        self.existing = existing
