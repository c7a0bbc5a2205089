"""
Movie ORM models.

A movie owns its soundtrack entries and an optional trailer; actors and
directors are attached through link tables so one person can appear in many
movies.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinedex.models.orm.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinedex.models.orm.person import Actor, Director


class Movie(TimestampMixin, Base):
    """Movie database table."""

    __tablename__ = "movies"

    title: Mapped[str] = mapped_column(String(500))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    poster: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    release_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # Relationships
    actor_links: Mapped[list["MovieActor"]] = relationship(
        back_populates="movie", cascade="all, delete-orphan"
    )
    director_links: Mapped[list["MovieDirector"]] = relationship(
        back_populates="movie", cascade="all, delete-orphan"
    )
    music: Mapped[list["MovieMusic"]] = relationship(
        back_populates="movie", cascade="all, delete-orphan"
    )
    trailer: Mapped["MovieTrailer | None"] = relationship(
        back_populates="movie", cascade="all, delete-orphan", uselist=False
    )

    __table_args__ = (
        Index("ix_movies_title", "title"),
        Index("ix_movies_release_date", "release_date"),
    )


class MovieActor(TimestampMixin, Base):
    """Link between a movie and one of its actors."""

    __tablename__ = "movie_actors"

    actor_id: Mapped[UUID] = mapped_column(
        ForeignKey("actors.id", ondelete="CASCADE", name="fk_movie_actors_actor_id")
    )
    movie_id: Mapped[UUID] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"))

    actor: Mapped["Actor"] = relationship(back_populates="movie_links")
    movie: Mapped["Movie"] = relationship(back_populates="actor_links")

    __table_args__ = (
        UniqueConstraint("movie_id", "actor_id", name="uq_movie_actors_movie_actor"),
        Index("ix_movie_actors_actor_id", "actor_id"),
    )


class MovieDirector(TimestampMixin, Base):
    """Link between a movie and one of its directors."""

    __tablename__ = "movie_directors"

    director_id: Mapped[UUID] = mapped_column(
        ForeignKey("directors.id", ondelete="CASCADE", name="fk_movie_directors_director_id")
    )
    movie_id: Mapped[UUID] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"))

    director: Mapped["Director"] = relationship(back_populates="movie_links")
    movie: Mapped["Movie"] = relationship(back_populates="director_links")

    __table_args__ = (
        UniqueConstraint("movie_id", "director_id", name="uq_movie_directors_movie_director"),
        Index("ix_movie_directors_director_id", "director_id"),
    )


class MovieMusic(TimestampMixin, Base):
    """Soundtrack entry of a movie."""

    __tablename__ = "movie_music"

    title: Mapped[str] = mapped_column(String(500))
    url: Mapped[str] = mapped_column(String(2048))
    movie_id: Mapped[UUID] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"))

    movie: Mapped["Movie"] = relationship(back_populates="music")

    __table_args__ = (Index("ix_movie_music_movie_id", "movie_id"),)


class MovieTrailer(TimestampMixin, Base):
    """Trailer of a movie (at most one per movie)."""

    __tablename__ = "movie_trailers"

    url: Mapped[str] = mapped_column(String(2048))
    movie_id: Mapped[UUID] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"), unique=True
    )

    movie: Mapped["Movie"] = relationship(back_populates="trailer")
