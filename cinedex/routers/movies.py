"""
Movies Router

Provides listing, creation and credit endpoints for movies.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from cinedex.config import get_settings
from cinedex.core.database import DbSession
from cinedex.core.ordering import order_from_query
from cinedex.models.contracts.common import DataResponse, IdResponse
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
from cinedex.models.contracts.person import CreditedPerson
from cinedex.models.orm.movie import Movie
from cinedex.repositories.movie import MovieRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


def _to_public(movie: Movie) -> MoviePublic:
    """Convert Movie ORM model to public response."""
    return MoviePublic(
        id=str(movie.id),
        title=movie.title,
        description=movie.description,
        poster=movie.poster,
        release_date=movie.release_date,
        created_at=movie.created_at,
        updated_at=movie.updated_at,
    )


def _to_with_cast(movie: Movie) -> MovieWithCast:
    """Convert Movie ORM model, with credits loaded, to a listing entry."""
    return MovieWithCast(
        **_to_public(movie).model_dump(),
        actors=[
            CreditedPerson(id=str(link.actor.id), name=link.actor.name, photo=link.actor.photo)
            for link in movie.actor_links
            if link.actor is not None
        ],
        directors=[
            CreditedPerson(
                id=str(link.director.id), name=link.director.name, photo=link.director.photo
            )
            for link in movie.director_links
            if link.director is not None
        ],
    )


async def _require_movie(repo: MovieRepository, movie_id: UUID) -> Movie:
    movie = await repo.get_by_id(movie_id)
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie not found",
        )
    return movie


@router.get("", response_model=DataResponse[MoviePublic])
async def list_movies(
    db: DbSession,
    limit: int | None = Query(None, ge=1, description="Maximum results"),
    offset: int | None = Query(None, ge=0, description="Number of results to skip"),
    order_by: str | None = Query(
        None, alias="orderBy", min_length=1, description="Sort fields, e.g. title,-releaseDate"
    ),
) -> DataResponse[MoviePublic]:
    """
    List movies with plain limit/offset.

    Args:
        db: Database session
        limit: Maximum number of results
        offset: Number of results to skip
        order_by: Comma separated sort fields, ``-`` prefix for descending

    Returns:
        Movies under ``data``
    """
    order = order_from_query(
        order_by,
        MovieRepository.SORT_FIELDS,
        entity="movies",
        strict=get_settings().strict_ordering,
    )
    movies = await MovieRepository(db).list_entities(order=order, limit=limit, offset=offset)
    return DataResponse[MoviePublic](data=[_to_public(movie) for movie in movies])


@router.get("/catalog", response_model=PaginatedRecords[MovieWithCast])
async def list_movie_catalog(
    db: DbSession,
    page_size: int | None = Query(None, alias="pageSize", ge=1, le=100, description="Movies per page"),
    page_no: int | None = Query(None, alias="pageNo", ge=1, description="Page number (1-indexed)"),
    order_by: str | None = Query(
        None, alias="orderBy", min_length=1, description="Sort fields, e.g. -releaseDate,title"
    ),
) -> PaginatedRecords[MovieWithCast]:
    """
    List movies with their actors and directors, one page at a time.

    Pages are cut over movies, not over joined credit rows, so every movie on
    a page carries its full cast.
    """
    settings = get_settings()
    order = order_from_query(
        order_by, MovieRepository.SORT_FIELDS, entity="movies", strict=settings.strict_ordering
    )
    movies, meta = await MovieRepository(db).get_page(
        page_size=page_size or settings.default_page_size,
        page_no=page_no or 1,
        order=order,
    )
    return PaginatedRecords[MovieWithCast](
        meta=PaginationMeta.from_metadata(meta),
        records=[_to_with_cast(movie) for movie in movies],
    )


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_movie(movie_data: MovieCreate, db: DbSession) -> IdResponse:
    """
    Create a movie.

    Args:
        movie_data: Movie creation data
        db: Database session

    Returns:
        Id of the created movie
    """
    movie = await MovieRepository(db).save_entity(
        title=movie_data.title,
        description=movie_data.description,
        poster=str(movie_data.poster) if movie_data.poster else None,
        release_date=movie_data.release_date,
    )
    logger.info(f"Movie created: {movie.title}", extra={"movie_id": str(movie.id)})
    return IdResponse(id=str(movie.id))


@router.get("/{movie_id}", response_model=MovieDetail)
async def get_movie(movie_id: UUID, db: DbSession) -> MovieDetail:
    """
    Get a movie with its credits, soundtrack and trailer.

    Raises:
        HTTPException: If movie not found
    """
    movie = await MovieRepository(db).get_detail(movie_id)
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie not found",
        )

    return MovieDetail(
        **_to_with_cast(movie).model_dump(),
        music=[
            MovieMusicPublic(id=str(track.id), title=track.title, url=track.url)
            for track in movie.music
        ],
        trailer_url=movie.trailer.url if movie.trailer else None,
    )


@router.post(
    "/{movie_id}/actors", response_model=IdResponse, status_code=status.HTTP_201_CREATED
)
async def add_movie_actor(movie_id: UUID, link_data: MovieActorLink, db: DbSession) -> IdResponse:
    """Credit an actor on a movie."""
    repo = MovieRepository(db)
    await _require_movie(repo, movie_id)
    link = await repo.add_actor(movie_id, link_data.actor_id)
    logger.info(
        "Actor credited on movie",
        extra={"movie_id": str(movie_id), "actor_id": str(link_data.actor_id)},
    )
    return IdResponse(id=str(link.id))


@router.post(
    "/{movie_id}/directors", response_model=IdResponse, status_code=status.HTTP_201_CREATED
)
async def add_movie_director(
    movie_id: UUID, link_data: MovieDirectorLink, db: DbSession
) -> IdResponse:
    """Credit a director on a movie."""
    repo = MovieRepository(db)
    await _require_movie(repo, movie_id)
    link = await repo.add_director(movie_id, link_data.director_id)
    logger.info(
        "Director credited on movie",
        extra={"movie_id": str(movie_id), "director_id": str(link_data.director_id)},
    )
    return IdResponse(id=str(link.id))


@router.post(
    "/{movie_id}/music", response_model=IdResponse, status_code=status.HTTP_201_CREATED
)
async def add_movie_music(
    movie_id: UUID, music_data: MovieMusicCreate, db: DbSession
) -> IdResponse:
    """Add a soundtrack entry to a movie."""
    repo = MovieRepository(db)
    await _require_movie(repo, movie_id)
    music = await repo.add_music(movie_id, music_data.title, str(music_data.url))
    return IdResponse(id=str(music.id))


@router.put("/{movie_id}/trailer", response_model=IdResponse)
async def set_movie_trailer(
    movie_id: UUID, trailer_data: MovieTrailerSet, db: DbSession
) -> IdResponse:
    """Set or replace the trailer of a movie."""
    repo = MovieRepository(db)
    await _require_movie(repo, movie_id)
    trailer = await repo.set_trailer(movie_id, str(trailer_data.url))
    return IdResponse(id=str(trailer.id))
