"""
Base Repository

Provides common database operations for all repositories.
Uses SQLAlchemy async session for all operations.
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cinedex.core.ordering import OrderSpec, apply_order
from cinedex.core.pagination import PaginationMetadata, deferred_join_pagination
from cinedex.core.query import QueryBuilder
from cinedex.models.orm.base import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """
    Base repository with common CRUD operations.

    Subclasses set ``model`` and may set ``SORT_FIELDS``, the public field
    names accepted in ``orderBy`` mapped to ORM attribute names.
    """

    model: type[ModelT]

    SORT_FIELDS: ClassVar[dict[str, str]] = {}

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def query(self) -> QueryBuilder[ModelT]:
        """Start a query builder over this repository's entity."""
        return QueryBuilder(self.session, self.model, fields=self.SORT_FIELDS)

    def list_query(self) -> QueryBuilder[ModelT]:
        """Query used by paginated listings; override to add joins."""
        return self.query()

    async def get_by_id(self, id: UUID) -> ModelT | None:
        """
        Get entity by ID.

        Args:
            id: Entity UUID

        Returns:
            Entity or None if not found
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def create(self, entity: ModelT) -> ModelT:
        """
        Create a new entity.

        Args:
            entity: Entity to create

        Returns:
            Created entity with generated ID
        """
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def save_entity(self, **values: Any) -> ModelT:
        """Build an entity from column values and insert it."""
        return await self.create(self.model(**values))

    async def patch_entity(self, id: UUID, values: dict[str, Any]) -> bool:
        """
        Update the given columns of one entity, skipping ``None`` values.

        Args:
            id: Entity UUID
            values: Column values; ``None`` means "leave unchanged"

        Returns:
            True if the entity exists, False otherwise
        """
        changes = {key: value for key, value in values.items() if value is not None}
        if not changes:
            return await self.get_by_id(id) is not None

        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .values(**changes)
        )
        return result.rowcount > 0

    async def list_entities(
        self,
        *,
        order: OrderSpec | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ModelT]:
        """
        List entities with plain limit/offset.

        Only safe for queries without one-to-many joins; use get_page otherwise.
        """
        builder = self.query()
        if limit:
            builder.limit(limit)
        if offset:
            builder.offset(offset)
        if order:
            apply_order(builder, order)
        return await builder.execute()

    async def get_page(
        self,
        *,
        page_size: int,
        page_no: int,
        order: OrderSpec | None = None,
    ) -> tuple[list[ModelT], PaginationMetadata]:
        """
        Get one page of entities using deferred-join pagination.

        Args:
            page_size: Entities per page
            page_no: 1-indexed page number
            order: Optional sort specification

        Returns:
            Tuple of (entities on the page, page metadata)
        """
        builder = self.list_query()
        if order:
            apply_order(builder, order)

        count = await builder.get_count()
        metadata_for = deferred_join_pagination(
            builder, page_size=page_size, page_no=page_no, count=count
        )
        records = await builder.execute()
        logger.debug(
            f"Fetched page {page_no} of {self.model.__tablename__}",
            extra={"page_size": page_size, "total_count": count, "returned": len(records)},
        )
        return records, metadata_for(records)
