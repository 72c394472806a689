"""Route extractor for Express-style registration source files.

Finds call sites of the form::

    app.get("/api/customers/:id", requireAuth, async (req, res) => { ... })

and converts them into RawRoute models. Registrations that do not have this
shape (named handlers, router composition, computed paths) are skipped
without error.
"""

import re
from pathlib import Path

from openapi_gen.errors import InputNotFoundError
from openapi_gen.models import RawRoute
from openapi_gen.parser.tokenizer import split_middleware

_VERB_CALL = r"app\.(?:get|post|put|delete|patch)\("

# The middleware span may not run into the next registration.
ROUTE_PATTERN = re.compile(
    r"app\.(?P<method>get|post|put|delete|patch)\(\s*"
    r"(?P<quote>[\"'`])(?P<path>/[^\"'`$]*)(?P=quote)\s*,"
    r"(?P<middleware>(?:(?!" + _VERB_CALL + r")[\s\S])*?)"
    r"(?:async\s*)?\(\s*req[^)]*\)\s*=>"
)


def extract_routes(text: str) -> list[RawRoute]:
    """Extract all route registrations from source text, in source order."""
    routes = []
    for match in ROUTE_PATTERN.finditer(text):
        routes.append(
            RawRoute(
                method=match.group("method").upper(),
                path=match.group("path"),
                middleware=split_middleware(match.group("middleware")),
            )
        )
    return routes


def parse_routes_file(file_path: Path) -> list[RawRoute]:
    """Read a route source file as UTF-8 and extract its routes."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputNotFoundError(f"Cannot read routes file {file_path}: {e}") from e
    return extract_routes(text)
