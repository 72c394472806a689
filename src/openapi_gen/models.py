"""Data models shared by the extraction, enrichment and synthesis stages.

Route records are immutable pydantic models. Operation models mirror the
OpenAPI 3.0 operation object and dump with camelCase aliases.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class RawRoute(BaseModel):
    """One route registration as found in the source text."""

    model_config = ConfigDict(frozen=True)

    method: str  # GET / POST / PUT / PATCH / DELETE
    path: str  # /api/customers/:id
    middleware: list[str] = []

    @field_validator("method")
    @classmethod
    def _check_method(cls, value: str) -> str:
        value = value.upper()
        if value not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method: {value}")
        return value

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"route path must start with '/': {value!r}")
        return value


class PathParam(BaseModel):
    """A `:name` placeholder found in a route path."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class EnrichedRoute(RawRoute):
    """A raw route plus the fields derived from it by the classifier."""

    tag: str
    summary: str
    path_params: list[PathParam] = []
    requires_auth: bool = False


class Parameter(BaseModel):
    name: str
    location: str = Field("path", serialization_alias="in")
    required: bool = True
    schema_: dict = Field(default_factory=lambda: {"type": "string"}, serialization_alias="schema")
    description: str = ""


class RequestBody(BaseModel):
    required: bool = True
    content: dict


class Operation(BaseModel):
    """An OpenAPI operation object for one (path, method) pair."""

    summary: str
    operation_id: str = Field(serialization_alias="operationId")
    tags: list[str]
    security: list[dict] | None = None
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = Field(None, serialization_alias="requestBody")
    responses: dict

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
