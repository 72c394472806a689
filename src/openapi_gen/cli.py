"""CLI entry point for openapi-gen."""

import fnmatch
from pathlib import Path

import click

from openapi_gen.enrich.classifier import enrich_routes
from openapi_gen.errors import OpenApiGenError
from openapi_gen.generator.document import generate_document
from openapi_gen.generator.validator import validate_document
from openapi_gen.models import EnrichedRoute
from openapi_gen.output import detect_output_format, format_statistics, render_document, write_document
from openapi_gen.parser.routes import parse_routes_file

DEFAULT_ROUTES = Path("server") / "routes.ts"
DEFAULT_OUTPUT = Path("docs") / "openapi.json"


def _load_routes(routes_path: Path) -> list[EnrichedRoute]:
    """Extract and classify all routes in the source file."""
    return enrich_routes(parse_routes_file(routes_path))


def _filter_endpoints(routes: list[EnrichedRoute], filters: tuple[str, ...]) -> list[EnrichedRoute]:
    """Keep routes matching any filter: "METHOD /path/glob" or "/path/glob"."""
    if not filters:
        return routes

    result = []
    for route in routes:
        for f in filters:
            parts = f.strip().split(None, 1)
            if len(parts) == 2:
                method, pattern = parts[0].upper(), parts[1]
                if route.method == method and fnmatch.fnmatch(route.path, pattern):
                    result.append(route)
                    break
            elif fnmatch.fnmatch(route.path, parts[0]):
                result.append(route)
                break
    return result


@click.group()
def main():
    """openapi-gen — build an OpenAPI 3.0 document from Express route registrations."""
    pass


@main.command()
@click.argument("routes_path", required=False, default=DEFAULT_ROUTES, envvar="OPENAPI_GEN_ROUTES", type=click.Path(path_type=Path))
@click.option("-o", "--output", default=DEFAULT_OUTPUT, envvar="OPENAPI_GEN_OUTPUT", type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto: by file extension).")
@click.option("--check", is_flag=True, help="Only verify that the output file is up to date.")
@click.option("--top", default=10, show_default=True, type=click.IntRange(min=0), help="Number of categories listed in the statistics.")
def generate(routes_path: Path, output: Path, fmt: str, check: bool, top: int):
    """Scan ROUTES_PATH and write the OpenAPI document."""
    if fmt == "auto":
        fmt = detect_output_format(output)

    try:
        click.echo(f"Reading {routes_path}...")
        routes = _load_routes(routes_path)
        click.echo(f"Found {len(routes)} API endpoints.")
        if not routes:
            click.echo("Warning: no route registrations matched; writing an empty document.", err=True)

        click.echo("Generating OpenAPI specification...")
        doc = generate_document(routes)
        for location, message in validate_document(doc).items():
            click.echo(f"Warning: {location}: {message}", err=True)

        if check:
            current = output.read_text(encoding="utf-8") if output.exists() else None
            if current != render_document(doc, fmt):
                click.echo(f"{output} is out of date. Run 'openapi-gen generate' to update it.", err=True)
                raise SystemExit(1)
            click.echo(f"{output} is up to date.")
            return

        write_document(doc, output, fmt)
    except OpenApiGenError as e:
        click.echo(f"Error generating OpenAPI spec: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"OpenAPI spec generated: {output}")
    click.echo("")
    click.echo(format_statistics(routes, doc, output, top=top))


@main.command()
@click.argument("routes_path", required=False, default=DEFAULT_ROUTES, envvar="OPENAPI_GEN_ROUTES", type=click.Path(path_type=Path))
@click.option("--filter", "filters", multiple=True, help='Only list matching routes, e.g. "GET /api/customers/*" or "/api/leads*".')
def routes(routes_path: Path, filters: tuple[str, ...]):
    """List the route registrations found in ROUTES_PATH."""
    try:
        found = _load_routes(routes_path)
    except OpenApiGenError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    selected = _filter_endpoints(found, filters)
    for route in selected:
        auth = " [auth]" if route.requires_auth else ""
        click.echo(f"{route.method:<6} {route.path}{auth}  ({route.tag})")
    click.echo(f"{len(selected)} of {len(found)} endpoints.")
