"""
Cinedex API - FastAPI Application

Main entry point for the FastAPI application.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from cinedex import __version__
from cinedex.config import get_settings
from cinedex.core.database import close_db, init_db
from cinedex.models.contracts.common import ErrorResponse
from cinedex.routers import (
    actors_router,
    categories_router,
    directors_router,
    health_router,
    movies_router,
    tasks_router,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Opens the database connection pool on startup and disposes it on shutdown.
    """
    settings = get_settings()

    logger.info("Starting Cinedex API...")
    await init_db()
    logger.info("Database connection established")
    logger.info(f"Cinedex API started in {settings.environment} mode")

    yield

    logger.info("Shutting down Cinedex API...")
    await close_db()
    logger.info("Cinedex API shutdown complete")


# Constraint names mapped to the conflict message returned to clients
CONSTRAINT_MESSAGES = {
    "uq_movie_actors_movie_actor": "Actor is already credited on this movie",
    "uq_movie_directors_movie_director": "Director is already credited on this movie",
    "fk_movie_actors_actor_id": "Actor not found",
    "fk_movie_directors_director_id": "Director not found",
    "fk_tasks_category_id": "Category not found",
}


def describe_integrity_error(detail: str) -> str:
    """Client-facing message for a constraint violation reported by the database."""
    for constraint, message in CONSTRAINT_MESSAGES.items():
        if constraint in detail:
            return message

    lowered = detail.lower()
    if "unique" in lowered or "duplicate" in lowered:
        return "Resource already exists"
    if "foreign key" in lowered:
        return "Referenced resource not found"
    return "Database constraint violation"


def _field_errors(errors: Sequence[dict[str, Any]]) -> dict[str, str]:
    return {".".join(str(loc) for loc in e["loc"]): e["msg"] for e in errors}


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and database errors to ErrorResponse bodies."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Invalid query parameters or request bodies -> 422."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="validation_error",
                message="Validation failed",
                details={"fields": _field_errors(exc.errors())},
            ).model_dump(),
        )

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_handler(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        """Pydantic model validation errors -> 422."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="validation_error",
                message="Validation failed",
                details={"fields": _field_errors(exc.errors())},
            ).model_dump(),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        """Database constraint violations -> 409."""
        detail = str(exc.orig) if exc.orig else str(exc)
        message = describe_integrity_error(detail)

        logger.warning(f"IntegrityError: {detail}")
        return JSONResponse(
            status_code=409,
            content=ErrorResponse(error="conflict", message=message).model_dump(),
        )

    @app.exception_handler(NoResultFound)
    async def no_result_handler(request: Request, exc: NoResultFound) -> JSONResponse:
        """Query returned no results -> 404."""
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error="not_found", message="Resource not found").model_dump(),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """ValueError, including bad sort fields and page arguments -> 422."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(error="validation_error", message=str(exc)).model_dump(),
        )

    @app.exception_handler(OperationalError)
    async def operational_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
        """Database connection issues -> 503."""
        logger.error(f"Database operational error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(
                error="service_unavailable",
                message="Service temporarily unavailable",
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions -> 500."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_error",
                message="An unexpected error occurred",
            ).model_dump(),
        )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Cinedex API",
        description="Movie catalogue and task manager API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(movies_router)
    app.include_router(actors_router)
    app.include_router(directors_router)
    app.include_router(categories_router)
    app.include_router(tasks_router)

    @app.get("/")
    async def root():
        return {
            "name": "Cinedex API",
            "version": __version__,
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cinedex.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
