"""
Actor and Director Repositories

Provides database operations for the people credited on movies.
"""

from cinedex.models.orm.person import Actor, Director
from cinedex.repositories.base import BaseRepository

PERSON_SORT_FIELDS = {
    "name": "name",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


class ActorRepository(BaseRepository[Actor]):
    """Repository for Actor model operations."""

    model = Actor

    SORT_FIELDS = PERSON_SORT_FIELDS


class DirectorRepository(BaseRepository[Director]):
    """Repository for Director model operations."""

    model = Director

    SORT_FIELDS = PERSON_SORT_FIELDS
