"""
Actor and Director ORM models.

Both are people credited on movies; they share the same columns but live in
separate tables linked to movies through their own link tables.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinedex.models.orm.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinedex.models.orm.movie import MovieActor, MovieDirector


class Actor(TimestampMixin, Base):
    """Actor database table."""

    __tablename__ = "actors"

    name: Mapped[str] = mapped_column(String(255))
    photo: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    movie_links: Mapped[list["MovieActor"]] = relationship(back_populates="actor")

    __table_args__ = (Index("ix_actors_name", "name"),)


class Director(TimestampMixin, Base):
    """Director database table."""

    __tablename__ = "directors"

    name: Mapped[str] = mapped_column(String(255))
    photo: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    movie_links: Mapped[list["MovieDirector"]] = relationship(back_populates="director")

    __table_args__ = (Index("ix_directors_name", "name"),)
