"""Pydantic contracts (API request/response schemas)."""

from cinedex.models.contracts.common import (
    CamelModel,
    DataResponse,
    ErrorResponse,
    HealthResponse,
    IdResponse,
)
from cinedex.models.contracts.movie import (
    MovieActorLink,
    MovieCreate,
    MovieDetail,
    MovieDirectorLink,
    MovieMusicCreate,
    MovieMusicPublic,
    MoviePublic,
    MovieTrailerSet,
    MovieWithCast,
)
from cinedex.models.contracts.pagination import PaginatedRecords, PaginationMeta
from cinedex.models.contracts.person import (
    CreditedPerson,
    PersonCreate,
    PersonPublic,
    PersonUpdate,
)
from cinedex.models.contracts.task import (
    CategoryCreate,
    TaskCreate,
    TaskPublic,
    TaskUpdate,
)

__all__ = [
    # Common
    "CamelModel",
    "DataResponse",
    "ErrorResponse",
    "HealthResponse",
    "IdResponse",
    # Pagination
    "PaginatedRecords",
    "PaginationMeta",
    # People
    "CreditedPerson",
    "PersonCreate",
    "PersonPublic",
    "PersonUpdate",
    # Movies
    "MovieActorLink",
    "MovieCreate",
    "MovieDetail",
    "MovieDirectorLink",
    "MovieMusicCreate",
    "MovieMusicPublic",
    "MoviePublic",
    "MovieTrailerSet",
    "MovieWithCast",
    # Task manager
    "CategoryCreate",
    "TaskCreate",
    "TaskPublic",
    "TaskUpdate",
]
