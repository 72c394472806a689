"""OpenAPI document synthesizer.

Turns enriched routes into an OpenAPI 3.0 document: one operation per
(normalized path, method) pair plus the static info and component sections.
"""

import re

from openapi_gen.generator.schemas import (
    OPENAPI_VERSION,
    SECURITY_SCHEME_NAME,
    default_responses,
    static_sections,
)
from openapi_gen.models import EnrichedRoute, Operation, Parameter, RequestBody

PATH_PARAM_PATTERN = re.compile(r":([a-zA-Z0-9_]+)")
OPERATION_ID_UNSAFE = re.compile(r"[/:-]")

BODY_METHODS = ("POST", "PUT", "PATCH")


def normalize_path(path: str) -> str:
    """Rewrite ``:name`` placeholders to OpenAPI ``{name}`` form."""
    return PATH_PARAM_PATTERN.sub(r"{\1}", path)


def operation_id(method: str, path: str) -> str:
    """Derive an operation id, e.g. ``get__api_customers__id``."""
    return f"{method.lower()}_{OPERATION_ID_UNSAFE.sub('_', path)}"


def build_operation(route: EnrichedRoute) -> Operation:
    """Build the operation object for a single enriched route."""
    operation = Operation(
        summary=route.summary,
        operation_id=operation_id(route.method, route.path),
        tags=[route.tag],
        responses=default_responses(),
    )

    if route.requires_auth:
        operation.security = [{SECURITY_SCHEME_NAME: []}]

    if route.path_params:
        operation.parameters = [
            Parameter(name=p.name, description=p.description) for p in route.path_params
        ]

    if route.method in BODY_METHODS:
        operation.request_body = RequestBody(
            content={
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {},
                        "description": f"Request body for {route.summary.lower()}",
                    }
                }
            }
        )

    return operation


def _group_by_path(routes: list[EnrichedRoute]) -> dict[str, dict[str, Operation]]:
    """Group operations by normalized path. A repeated (path, method) keeps the last route."""
    paths: dict[str, dict[str, Operation]] = {}
    for route in routes:
        methods = paths.setdefault(normalize_path(route.path), {})
        methods[route.method.lower()] = build_operation(route)
    return paths


def _dedupe_operation_ids(paths: dict[str, dict[str, Operation]]) -> None:
    """Suffix ids that collide after sanitising (``/a-b`` and ``/a_b``)."""
    seen: dict[str, int] = {}
    for methods in paths.values():
        for operation in methods.values():
            base = operation.operation_id
            count = seen.get(base, 0) + 1
            seen[base] = count
            if count > 1:
                candidate = f"{base}_{count}"
                while candidate in seen:
                    count += 1
                    candidate = f"{base}_{count}"
                seen[base] = count
                seen[candidate] = 1
                operation.operation_id = candidate


def collect_tags(routes: list[EnrichedRoute]) -> list[dict]:
    """Return the distinct tags, sorted, as OpenAPI tag objects."""
    return [{"name": name} for name in sorted({r.tag for r in routes})]


def generate_document(routes: list[EnrichedRoute]) -> dict:
    """Assemble the complete OpenAPI document for the given routes."""
    paths = _group_by_path(routes)
    _dedupe_operation_ids(paths)

    static = static_sections()
    return {
        "openapi": OPENAPI_VERSION,
        "info": static["info"],
        "servers": static["servers"],
        "tags": collect_tags(routes),
        "paths": {
            path: {method: op.to_dict() for method, op in methods.items()}
            for path, methods in paths.items()
        },
        "components": static["components"],
    }
