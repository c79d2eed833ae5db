"""Registered functions next to helpers carrying only some decorators."""

from function_swagger.functions.decorators import display, function_name, http_trigger, response_type
from function_swagger.http import HttpRequest, HttpResponse


@function_name("Good")
@http_trigger(route="good", methods=["get"])
def good(req: HttpRequest) -> str:
    return "good"


@display(name="Formats a greeting")
def helper(name: str) -> str:
    return f"hello {name}"


@http_trigger(route="orphan")
def orphan(req: HttpRequest) -> str:
    return "orphan"


@response_type(None)
def envelope(req: HttpRequest) -> HttpResponse:
    return HttpResponse()
