"""
Movie Repository

Provides database operations for Movie and its link tables.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from cinedex.core.query import QueryBuilder
from cinedex.models.orm.movie import (
    Movie,
    MovieActor,
    MovieDirector,
    MovieMusic,
    MovieTrailer,
)
from cinedex.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie model operations."""

    model = Movie

    SORT_FIELDS = {
        "title": "title",
        "releaseDate": "release_date",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    def list_query(self) -> QueryBuilder[Movie]:
        """Movies joined to their actors and directors (two one-to-many joins)."""
        return (
            self.query()
            .join(Movie.actor_links, MovieActor.actor)
            .join(Movie.director_links, MovieDirector.director)
        )

    async def get_detail(self, movie_id: UUID) -> Movie | None:
        """
        Get a movie with every relation loaded.

        Args:
            movie_id: Movie UUID

        Returns:
            Movie or None if not found
        """
        result = await self.session.execute(
            select(Movie)
            .where(Movie.id == movie_id)
            .options(
                selectinload(Movie.actor_links).selectinload(MovieActor.actor),
                selectinload(Movie.director_links).selectinload(MovieDirector.director),
                selectinload(Movie.music),
                selectinload(Movie.trailer),
            )
        )
        return result.scalar_one_or_none()

    async def add_actor(self, movie_id: UUID, actor_id: UUID) -> MovieActor:
        """Credit an actor on a movie."""
        link = MovieActor(movie_id=movie_id, actor_id=actor_id)
        self.session.add(link)
        await self.session.flush()
        return link

    async def add_director(self, movie_id: UUID, director_id: UUID) -> MovieDirector:
        """Credit a director on a movie."""
        link = MovieDirector(movie_id=movie_id, director_id=director_id)
        self.session.add(link)
        await self.session.flush()
        return link

    async def add_music(self, movie_id: UUID, title: str, url: str) -> MovieMusic:
        """Add a soundtrack entry to a movie."""
        music = MovieMusic(movie_id=movie_id, title=title, url=url)
        self.session.add(music)
        await self.session.flush()
        return music

    async def set_trailer(self, movie_id: UUID, url: str) -> MovieTrailer:
        """
        Set the trailer of a movie, replacing any existing one.

        Args:
            movie_id: Movie UUID
            url: Trailer URL

        Returns:
            The created or updated trailer
        """
        result = await self.session.execute(
            select(MovieTrailer).where(MovieTrailer.movie_id == movie_id)
        )
        trailer = result.scalar_one_or_none()
        if trailer is None:
            trailer = MovieTrailer(movie_id=movie_id, url=url)
            self.session.add(trailer)
        else:
            trailer.url = url
        await self.session.flush()
        return trailer
