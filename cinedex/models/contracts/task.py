"""
Task manager contracts (API request/response schemas).
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, StringConstraints

from cinedex.models.contracts.common import CamelModel

NonEmpty = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]


class CategoryCreate(BaseModel):
    """Category creation request model."""

    name: NonEmpty


class TaskCreate(CamelModel):
    """Task creation request model."""

    title: NonEmpty
    description: Trimmed
    category_id: UUID


class TaskUpdate(TaskCreate):
    """Task replacement request model (all fields required)."""

    id: UUID


class TaskPublic(CamelModel):
    """Task public response model."""

    id: str
    title: str
    description: str
    category_id: str
    category_name: str | None = None
    created_at: datetime
    updated_at: datetime
