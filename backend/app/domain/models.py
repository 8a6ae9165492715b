"""Domain schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SERVICE_NAME = "Unnamed Service"
DEFAULT_SERVICE_URL = "#"


class Service(BaseModel):
    """Canonical service record as stored by the writer.

    Unrecognized fields are kept as extras and dumped after the five
    canonical fields.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: str = DEFAULT_SERVICE_NAME
    url: str = DEFAULT_SERVICE_URL
    description: str = ""
    icon: str | None = None
    tags: list[Any] = Field(default_factory=list)


class ServiceCreateRequest(BaseModel):
    """Body of ``POST /api/services``.

    Everything is optional here so missing ``name``/``url`` are reported as
    400 by the writer instead of a schema 422.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    url: Any = None
    description: Any = None
    icon: Any = None
    tags: Any = None


class ServiceCreatedResponse(BaseModel):
    message: str
    service: Service


class AggregatedView(BaseModel):
    # Services stay plain dicts: scanned documents are loosely typed.
    services: list[dict[Any, Any]] = Field(default_factory=list)
    groups: list[dict[Any, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
