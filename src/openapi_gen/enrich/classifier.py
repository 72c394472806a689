"""Route classifier — derives tag, summary, path parameters and auth flag.

Every function here is a pure function of the route's method, path and
middleware chain.
"""

import re
from types import MappingProxyType

from openapi_gen.models import EnrichedRoute, PathParam, RawRoute

API_PREFIX_PATTERN = re.compile(r"^/api/([^/]+)")
PATH_PARAM_PATTERN = re.compile(r":([a-zA-Z0-9_]+)")

DEFAULT_TAG = "General"

TAG_LABELS = MappingProxyType({
    "auth": "Authentication",
    "customers": "Customers",
    "leads": "Leads",
    "contacts": "Contacts",
    "companies": "Companies",
    "opportunities": "Opportunities",
    "pipeline": "Pipeline",
    "tasks": "Tasks",
    "inventory": "Inventory",
    "transactions": "Transactions",
    "activities": "Activities",
    "communications": "Communications",
    "voice": "Voice & Calling",
    "sms": "SMS",
    "email": "Email",
    "calendar": "Calendar",
    "analytics": "Analytics",
    "settings": "Settings",
    "organization": "Organization",
    "users": "Users",
    "webhooks": "Webhooks",
    "integrations": "Integrations",
    "ai": "AI Features",
    "notifications": "Notifications",
    "browse-ai-data-sources": "Job Site Prospecting",
    "xlsx-data-sources": "XLSX Data Sources",
    "service-areas": "Service Areas",
    "snowflake": "Snowflake Integration",
})

AUTH_MIDDLEWARE_MARKERS = ("requireAuth", "requireAdmin", "requireSuperAdmin")

ACTIONS = {
    "POST": "Create",
    "PUT": "Update",
    "PATCH": "Update",
    "DELETE": "Delete",
}


def extract_tag(path: str) -> str:
    """Map the first segment after ``/api/`` to a documentation category."""
    match = API_PREFIX_PATTERN.match(path)
    if not match:
        return DEFAULT_TAG
    segment = match.group(1)
    return TAG_LABELS.get(segment) or segment[:1].upper() + segment[1:]


def generate_summary(method: str, path: str) -> str:
    """Build a short summary such as ``List Customers`` or ``Get Customers``."""
    segments = [s for s in path.split("/") if s]
    resources = [s for s in segments if not s.startswith(":")]
    resource = resources[-1] if resources else "resource"

    if method == "GET":
        action = "Get" if segments and segments[-1].startswith(":") else "List"
    else:
        action = ACTIONS.get(method, method)

    resource_name = " ".join(w[:1].upper() + w[1:] for w in resource.split("-"))
    return f"{action} {resource_name}"


def extract_path_parameters(path: str) -> list[PathParam]:
    """Return one descriptor per ``:name`` placeholder, left to right."""
    return [
        PathParam(name=name, description=f"{name[:1].upper() + name[1:]} identifier")
        for name in PATH_PARAM_PATTERN.findall(path)
    ]


def requires_auth(middleware: list[str]) -> bool:
    # Name test only; aliased auth middleware is not detected.
    return any(marker in m for m in middleware for marker in AUTH_MIDDLEWARE_MARKERS)


def enrich_route(route: RawRoute) -> EnrichedRoute:
    """Attach tag, summary, path parameters and auth flag to a raw route."""
    return EnrichedRoute(
        method=route.method,
        path=route.path,
        middleware=list(route.middleware),
        tag=extract_tag(route.path),
        summary=generate_summary(route.method, route.path),
        path_params=extract_path_parameters(route.path),
        requires_auth=requires_auth(route.middleware),
    )


def enrich_routes(routes: list[RawRoute]) -> list[EnrichedRoute]:
    return [enrich_route(r) for r in routes]
