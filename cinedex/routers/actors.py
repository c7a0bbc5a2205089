"""
Actors Router

Provides create, update and paginated list endpoints for actors.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from cinedex.config import get_settings
from cinedex.core.database import DbSession
from cinedex.core.ordering import order_from_query
from cinedex.models.contracts.common import IdResponse
from cinedex.models.contracts.pagination import PaginatedRecords, PaginationMeta
from cinedex.models.contracts.person import PersonCreate, PersonPublic, PersonUpdate
from cinedex.models.orm.person import Actor, Director
from cinedex.repositories.person import ActorRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/actors", tags=["actors"])


def person_to_public(person: Actor | Director) -> PersonPublic:
    """Convert Actor or Director ORM model to public response."""
    return PersonPublic(
        id=str(person.id),
        name=person.name,
        photo=person.photo,
        created_at=person.created_at,
        updated_at=person.updated_at,
    )


@router.get("", response_model=PaginatedRecords[PersonPublic])
async def list_actors(
    db: DbSession,
    page_size: int | None = Query(None, alias="pageSize", ge=1, le=100, description="Actors per page"),
    page_no: int | None = Query(None, alias="pageNo", ge=1, description="Page number (1-indexed)"),
    order_by: str | None = Query(None, alias="orderBy", min_length=1, description="Sort fields"),
) -> PaginatedRecords[PersonPublic]:
    """
    List actors one page at a time.

    Args:
        db: Database session
        page_size: Actors per page (defaults to the configured page size)
        page_no: Page number, defaults to 1
        order_by: Comma separated sort fields, ``-`` prefix for descending

    Returns:
        Page metadata and the actors on the page
    """
    settings = get_settings()
    order = order_from_query(
        order_by, ActorRepository.SORT_FIELDS, entity="actors", strict=settings.strict_ordering
    )
    actors, meta = await ActorRepository(db).get_page(
        page_size=page_size or settings.default_page_size,
        page_no=page_no or 1,
        order=order,
    )
    return PaginatedRecords[PersonPublic](
        meta=PaginationMeta.from_metadata(meta),
        records=[person_to_public(actor) for actor in actors],
    )


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_actor(actor_data: PersonCreate, db: DbSession) -> IdResponse:
    """
    Create an actor.

    Args:
        actor_data: Actor creation data
        db: Database session

    Returns:
        Id of the created actor
    """
    actor = await ActorRepository(db).save_entity(
        name=actor_data.name,
        photo=str(actor_data.photo),
    )
    logger.info(f"Actor created: {actor.name}", extra={"actor_id": str(actor.id)})
    return IdResponse(id=str(actor.id))


@router.patch("", response_model=IdResponse)
async def update_actor(actor_data: PersonUpdate, db: DbSession) -> IdResponse:
    """
    Update the supplied fields of an actor.

    Raises:
        HTTPException: If actor not found
    """
    found = await ActorRepository(db).patch_entity(
        actor_data.id,
        {
            "name": actor_data.name,
            "photo": str(actor_data.photo) if actor_data.photo else None,
        },
    )
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Actor not found",
        )

    logger.info("Actor updated", extra={"actor_id": str(actor_data.id)})
    return IdResponse(id=str(actor_data.id))
