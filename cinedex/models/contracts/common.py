"""
Common response models.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for contracts exchanged in camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    message: str
    details: dict[str, Any] | None = None


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = "healthy"
    version: str = "1.0.0"


class IdResponse(BaseModel):
    """Response of create and update workflows."""

    id: str


class DataResponse(BaseModel, Generic[T]):
    """Unpaginated list response."""

    data: list[T] = Field(default_factory=list)
