"""SQLAlchemy ORM Models for Cinedex.

Pure database models using SQLAlchemy 2.0 declarative style.
These models define the database schema and relationships.
"""

from cinedex.models.orm.base import Base
from cinedex.models.orm.movie import (
    Movie,
    MovieActor,
    MovieDirector,
    MovieMusic,
    MovieTrailer,
)
from cinedex.models.orm.person import Actor, Director
from cinedex.models.orm.task import Category, Task

__all__ = [
    # Base
    "Base",
    # People
    "Actor",
    "Director",
    # Movies
    "Movie",
    "MovieActor",
    "MovieDirector",
    "MovieMusic",
    "MovieTrailer",
    # Task manager
    "Category",
    "Task",
]
