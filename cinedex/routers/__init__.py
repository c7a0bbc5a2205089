"""API routers."""

from cinedex.routers.actors import router as actors_router
from cinedex.routers.directors import router as directors_router
from cinedex.routers.health import router as health_router
from cinedex.routers.movies import router as movies_router
from cinedex.routers.tasks import categories_router
from cinedex.routers.tasks import router as tasks_router

__all__ = [
    "health_router",
    "movies_router",
    "actors_router",
    "directors_router",
    "categories_router",
    "tasks_router",
]
