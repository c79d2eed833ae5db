"""CLI entry point for function-swagger."""

import logging
from pathlib import Path

import click

from function_swagger.config import SwaggerSettings
from function_swagger.errors import FunctionSwaggerError
from function_swagger.functions.provider import ModuleHandlerProvider, load_modules
from function_swagger.generator.document import generate_document
from function_swagger.generator.output import FORMATS, render_document


def _load_provider(modules: tuple[str, ...], app_dir: Path | None) -> ModuleHandlerProvider:
    try:
        return ModuleHandlerProvider(load_modules(list(modules), app_dir))
    except FunctionSwaggerError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Function Swagger: describe decorated HTTP functions as a Swagger 2.0 document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("modules", nargs=-1, required=True)
@click.option("--app-dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=None, help="Directory to import handler modules from.")
@click.option("--host", default="localhost", envvar="FUNCTION_SWAGGER_HOST", show_default=True, help="Host authority the API is served from.")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Output file; prints to stdout when omitted.")
@click.option("--format", "fmt", default="json", type=click.Choice(FORMATS), help="Document format.")
@click.option("--title", default=None, envvar="FUNCTION_SWAGGER_TITLE", help="Document title; defaults to the module namespace.")
@click.option("--route-prefix", default="/api/", envvar="FUNCTION_SWAGGER_ROUTE_PREFIX", show_default=True, help="Prefix of every route.")
def generate(modules: tuple[str, ...], app_dir: Path | None, host: str, output: Path | None, fmt: str, title: str | None, route_prefix: str):
    """Generate the Swagger document for the functions in MODULES."""
    provider = _load_provider(modules, app_dir)
    settings = SwaggerSettings(title=title, route_prefix=route_prefix)

    try:
        document = generate_document(provider, host, settings)
    except FunctionSwaggerError as e:
        raise click.ClickException(str(e))

    text = render_document(document, fmt)
    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Described {len(document.paths)} routes in {output}", err=True)


@main.command()
@click.argument("modules", nargs=-1, required=True)
@click.option("--app-dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=None, help="Directory to import handler modules from.")
@click.option("--route-prefix", default="/api/", envvar="FUNCTION_SWAGGER_ROUTE_PREFIX", show_default=True, help="Prefix of every route.")
def routes(modules: tuple[str, ...], app_dir: Path | None, route_prefix: str):
    """List the operations described for the functions in MODULES."""
    provider = _load_provider(modules, app_dir)
    try:
        document = generate_document(provider, "localhost", SwaggerSettings(route_prefix=route_prefix))
    except FunctionSwaggerError as e:
        raise click.ClickException(str(e))

    for route, operations in document.paths.items():
        for method, operation in operations.items():
            click.echo(f"{method.upper():8} {route}  {operation.operation_id}")
