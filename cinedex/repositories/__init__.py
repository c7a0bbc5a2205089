"""Data access repositories."""

from cinedex.repositories.movie import MovieRepository
from cinedex.repositories.person import ActorRepository, DirectorRepository
from cinedex.repositories.task import CategoryRepository, TaskRepository

__all__ = [
    "ActorRepository",
    "CategoryRepository",
    "DirectorRepository",
    "MovieRepository",
    "TaskRepository",
]
