"""
Directors Router

Provides create, update and paginated list endpoints for directors.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from cinedex.config import get_settings
from cinedex.core.database import DbSession
from cinedex.core.ordering import order_from_query
from cinedex.models.contracts.common import IdResponse
from cinedex.models.contracts.pagination import PaginatedRecords, PaginationMeta
from cinedex.models.contracts.person import PersonCreate, PersonPublic, PersonUpdate
from cinedex.repositories.person import DirectorRepository
from cinedex.routers.actors import person_to_public

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/directors", tags=["directors"])


@router.get("", response_model=PaginatedRecords[PersonPublic])
async def list_directors(
    db: DbSession,
    page_size: int | None = Query(None, alias="pageSize", ge=1, le=100, description="Directors per page"),
    page_no: int | None = Query(None, alias="pageNo", ge=1, description="Page number (1-indexed)"),
    order_by: str | None = Query(None, alias="orderBy", min_length=1, description="Sort fields"),
) -> PaginatedRecords[PersonPublic]:
    """List directors one page at a time."""
    settings = get_settings()
    order = order_from_query(
        order_by, DirectorRepository.SORT_FIELDS, entity="directors", strict=settings.strict_ordering
    )
    directors, meta = await DirectorRepository(db).get_page(
        page_size=page_size or settings.default_page_size,
        page_no=page_no or 1,
        order=order,
    )
    return PaginatedRecords[PersonPublic](
        meta=PaginationMeta.from_metadata(meta),
        records=[person_to_public(director) for director in directors],
    )


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_director(director_data: PersonCreate, db: DbSession) -> IdResponse:
    """Create a director."""
    director = await DirectorRepository(db).save_entity(
        name=director_data.name,
        photo=str(director_data.photo),
    )
    logger.info(f"Director created: {director.name}", extra={"director_id": str(director.id)})
    return IdResponse(id=str(director.id))


@router.patch("", response_model=IdResponse)
async def update_director(director_data: PersonUpdate, db: DbSession) -> IdResponse:
    """Update the supplied fields of a director."""
    found = await DirectorRepository(db).patch_entity(
        director_data.id,
        {
            "name": director_data.name,
            "photo": str(director_data.photo) if director_data.photo else None,
        },
    )
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Director not found",
        )

    logger.info("Director updated", extra={"director_id": str(director_data.id)})
    return IdResponse(id=str(director_data.id))
