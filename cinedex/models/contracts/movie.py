"""
Movie contracts (API request/response schemas).
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import Field, HttpUrl, StringConstraints

from cinedex.models.contracts.common import CamelModel
from cinedex.models.contracts.person import CreditedPerson

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]


class MovieCreate(CamelModel):
    """Movie creation request model."""

    title: Title
    description: str | None = None
    poster: HttpUrl | None = None
    release_date: datetime | None = None


class MovieActorLink(CamelModel):
    """Attach an actor to a movie."""

    actor_id: UUID


class MovieDirectorLink(CamelModel):
    """Attach a director to a movie."""

    director_id: UUID


class MovieMusicCreate(CamelModel):
    """Soundtrack entry creation request model."""

    title: Title
    url: HttpUrl


class MovieTrailerSet(CamelModel):
    """Set or replace the trailer of a movie."""

    url: HttpUrl


class MoviePublic(CamelModel):
    """Movie public response model."""

    id: str
    title: str
    description: str | None = None
    poster: str | None = None
    release_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class MovieWithCast(MoviePublic):
    """Movie with its credited actors and directors."""

    actors: list[CreditedPerson] = Field(default_factory=list)
    directors: list[CreditedPerson] = Field(default_factory=list)


class MovieMusicPublic(CamelModel):
    id: str
    title: str
    url: str


class MovieDetail(MovieWithCast):
    """Single movie with every related record."""

    music: list[MovieMusicPublic] = Field(default_factory=list)
    trailer_url: str | None = None
