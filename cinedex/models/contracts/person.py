"""
Actor and director contracts (API request/response schemas).
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, HttpUrl, StringConstraints

from cinedex.models.contracts.common import CamelModel

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class PersonCreate(BaseModel):
    """Actor/director creation request model."""

    name: PersonName
    photo: HttpUrl


class PersonUpdate(BaseModel):
    """Actor/director update request model. Omitted fields are left unchanged."""

    id: UUID
    name: PersonName | None = None
    photo: HttpUrl | None = None


class PersonPublic(CamelModel):
    """Actor/director public response model."""

    id: str
    name: str
    photo: str | None = None
    created_at: datetime
    updated_at: datetime


class CreditedPerson(CamelModel):
    """Person credited on a movie, as embedded in movie listings."""

    id: str
    name: str
    photo: str | None = None

