"""Static sections of every generated document.

These fragments are authored by hand rather than derived from the scanned
routes. Callers get deep copies so the module-level constants never change.
"""

import copy

OPENAPI_VERSION = "3.0.0"

INFO_DESCRIPTION = """AI-powered CRM API for equipment rental businesses. Quinn streamlines customer management, 
sales pipeline tracking, inventory management, and communication workflows with intelligent 
automation and insights.

## Authentication

Quinn uses session-based authentication with HTTP-only cookies. To authenticate:

1. Call `POST /api/auth/login` with email and password
2. Receive a session cookie (`sessionId`)
3. Include this cookie in all subsequent requests

## Multi-Tenant Architecture

All API endpoints are scoped to your organization. When authenticated, your requests 
automatically access only your organization's data.

## Rate Limiting

API endpoints are rate-limited to prevent abuse. Standard limits:
- Authentication endpoints: 10 requests/minute
- Read operations: 100 requests/minute  
- Write operations: 50 requests/minute

## Webhooks

Quinn supports webhooks for real-time integrations:
- Twilio (voice/SMS): `/api/webhooks/twilio/*`
- Gmail: `/api/webhooks/gmail/pubsub`
- Outlook: `/api/webhooks/outlook/email`
- Vapi (voice agent): `/api/webhooks/vapi`
- Aircall: `/api/webhooks/aircall`

All webhooks require signature validation for security."""

INFO = {
    "title": "Quinn CRM API",
    "version": "1.0.0",
    "description": INFO_DESCRIPTION,
    "contact": {"name": "Quinn Support", "email": "support@quinn.app"},
    "license": {"name": "Proprietary"},
}

SERVERS = [
    {"url": "https://your-quinn-instance.replit.app", "description": "Production server"},
    {"url": "http://localhost:5000", "description": "Development server"},
]

SECURITY_SCHEME_NAME = "cookieAuth"

SECURITY_SCHEMES = {
    SECURITY_SCHEME_NAME: {
        "type": "apiKey",
        "in": "cookie",
        "name": "sessionId",
        "description": "Session cookie obtained via /api/auth/login",
    }
}

_UUID = {"type": "string", "format": "uuid"}
_NULLABLE_UUID = {"type": "string", "format": "uuid", "nullable": True}
_NULLABLE_STRING = {"type": "string", "nullable": True}

SCHEMAS = {
    "Error": {
        "type": "object",
        "properties": {
            "error": {"type": "string", "description": "Error message"},
        },
        "required": ["error"],
    },
    "PaginationMeta": {
        "type": "object",
        "properties": {
            "currentPage": {"type": "integer"},
            "totalPages": {"type": "integer"},
            "totalItems": {"type": "integer"},
            "pageSize": {"type": "integer"},
            "hasNextPage": {"type": "boolean"},
            "hasPreviousPage": {"type": "boolean"},
        },
    },
    "Customer": {
        "type": "object",
        "properties": {
            "id": _UUID,
            "organizationId": _UUID,
            "customerName": {"type": "string"},
            "email": {"type": "string", "format": "email", "nullable": True},
            "phone": _NULLABLE_STRING,
            "address1": _NULLABLE_STRING,
            "city": _NULLABLE_STRING,
            "state": _NULLABLE_STRING,
            "zipCode": _NULLABLE_STRING,
            "companyId": _NULLABLE_UUID,
            "ownerId": _NULLABLE_UUID,
            "lifetimeOrders": {"type": "number", "description": "Total lifetime transaction value"},
        },
    },
    "Lead": {
        "type": "object",
        "properties": {
            "id": _UUID,
            "organizationId": _UUID,
            "leadName": {"type": "string"},
            "email": {"type": "string", "format": "email", "nullable": True},
            "phone": _NULLABLE_STRING,
            "companyName": _NULLABLE_STRING,
            "status": {
                "type": "string",
                "enum": ["new", "contacted", "qualified", "negotiation", "converted", "lost"],
            },
            "assignedTo": _NULLABLE_UUID,
            "aiScore": {
                "type": "integer",
                "minimum": 0,
                "maximum": 7,
                "description": "AI-generated lead quality score (0-7)",
            },
        },
    },
    "Opportunity": {
        "type": "object",
        "properties": {
            "id": _UUID,
            "organizationId": _UUID,
            "customerId": _NULLABLE_UUID,
            "contactId": _NULLABLE_UUID,
            "stageId": _UUID,
            "estimatedValue": {"type": "number"},
            "probability": {"type": "integer", "minimum": 0, "maximum": 100},
            "expectedCloseDate": {"type": "string", "format": "date", "nullable": True},
            "isArchived": {"type": "boolean"},
        },
    },
    "Task": {
        "type": "object",
        "properties": {
            "id": _UUID,
            "organizationId": _UUID,
            "title": {"type": "string"},
            "description": _NULLABLE_STRING,
            "assignedTo": _NULLABLE_UUID,
            "customerId": _NULLABLE_UUID,
            "leadId": _NULLABLE_UUID,
            "contactId": _NULLABLE_UUID,
            "dueDate": {"type": "string", "format": "date-time", "nullable": True},
            "priority": {"type": "string", "enum": ["low", "medium", "high"]},
            "status": {"type": "string", "enum": ["pending", "completed"]},
            "isAiGenerated": {"type": "boolean", "description": "True if task was created by AI"},
        },
    },
}

RESPONSES = {
    "200": {
        "description": "Successful response",
        "content": {"application/json": {"schema": {"type": "object"}}},
    },
    "400": {"description": "Bad request"},
    "401": {"description": "Unauthorized"},
    "404": {"description": "Not found"},
    "500": {"description": "Internal server error"},
}


def static_sections() -> dict:
    """Return fresh copies of the info, servers and components sections."""
    return {
        "info": copy.deepcopy(INFO),
        "servers": copy.deepcopy(SERVERS),
        "components": {
            "securitySchemes": copy.deepcopy(SECURITY_SCHEMES),
            "schemas": copy.deepcopy(SCHEMAS),
        },
    }


def default_responses() -> dict:
    return copy.deepcopy(RESPONSES)
