"""
Query Builder

Chainable wrapper around a SQLAlchemy ``select()`` for one root entity.
Ordering fields arrive as strings from the API, so they are resolved against
the entity's mapped columns here; anything that does not resolve raises
InvalidFieldError while the query is being built.
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, distinct, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, contains_eager
from sqlalchemy.sql.elements import ColumnElement

from cinedex.core.exceptions import InvalidFieldError
from cinedex.core.ordering import OrderDirection
from cinedex.models.orm.base import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class QueryBuilder(Generic[ModelT]):
    """
    Builds and runs a SELECT for ``model``.

    Args:
        session: Async session used by get_count() and execute()
        model: Root ORM entity
        fields: Optional map of public field names to ORM attribute names,
            e.g. ``{"releaseDate": "release_date"}``
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[ModelT],
        *,
        fields: Mapping[str, str] | None = None,
    ):
        self.session = session
        self.model = model
        self.fields = dict(fields or {})
        self._criteria: list[ColumnElement[bool]] = []
        self._joins: list[tuple[InstrumentedAttribute, ...]] = []
        self._order: list[ColumnElement[Any]] = []
        self._limit: int | None = None
        self._offset: int | None = None
        self._window: tuple[int, int] | None = None

    @property
    def alias(self) -> str:
        return self.model.__tablename__

    def where(self, *criteria: ColumnElement[bool]) -> "QueryBuilder[ModelT]":
        self._criteria.extend(criteria)
        return self

    def join(self, *path: InstrumentedAttribute) -> "QueryBuilder[ModelT]":
        """
        LEFT OUTER JOIN a relationship path and load it from the joined rows.

        ``path`` is a chain of relationship attributes starting at the root
        entity, e.g. ``join(Movie.actor_links, MovieActor.actor)``.
        """
        if not path:
            raise ValueError("join() needs at least one relationship")
        self._joins.append(path)
        return self

    def resolve(self, field: str) -> InstrumentedAttribute:
        """
        Map a public field name to a column attribute of the root entity.

        Accepts the public name, the ORM attribute name, or either prefixed
        with the table name (``movies.title``).

        Raises:
            InvalidFieldError: If the field is empty or not a mapped column
        """
        name = field
        prefix, dot, rest = field.partition(".")
        if dot:
            if prefix != self.alias:
                raise InvalidFieldError(field, self.alias)
            name = rest

        attr_name = self.fields.get(name, name)
        if not attr_name or attr_name not in inspect(self.model).column_attrs:
            raise InvalidFieldError(field, self.alias)
        return getattr(self.model, attr_name)

    def order_by(
        self, field: str, direction: OrderDirection | str = OrderDirection.ASC
    ) -> "QueryBuilder[ModelT]":
        """Append an ORDER BY term; earlier terms keep precedence."""
        column = self.resolve(field)
        if OrderDirection(direction) is OrderDirection.DESC:
            self._order.append(column.desc())
        else:
            self._order.append(column.asc())
        return self

    def limit(self, n: int) -> "QueryBuilder[ModelT]":
        self._limit = n
        return self

    def offset(self, n: int) -> "QueryBuilder[ModelT]":
        self._offset = n
        return self

    def window(self, offset: int, limit: int) -> "QueryBuilder[ModelT]":
        """
        Restrict the query to one window of entity ids.

        The ids are chosen by an unjoined subquery that carries the same
        filters and ordering, so joins in the outer query cannot shift the
        page boundaries.
        """
        self._window = (offset, limit)
        return self

    def _primary_key(self) -> InstrumentedAttribute:
        (pk,) = inspect(self.model).primary_key
        return getattr(self.model, pk.key)

    def _id_window(self) -> Select:
        offset, limit = self._window  # type: ignore[misc]
        pk = self._primary_key()
        return (
            select(pk)
            .where(*self._criteria)
            .order_by(*self._order, pk.asc())
            .offset(offset)
            .limit(limit)
            .correlate(None)
        )

    @property
    def statement(self) -> Select:
        """The composed SELECT."""
        stmt = select(self.model).where(*self._criteria)

        for path in self._joins:
            loader = None
            for relationship in path:
                stmt = stmt.outerjoin(relationship)
                loader = (
                    contains_eager(relationship)
                    if loader is None
                    else loader.contains_eager(relationship)
                )
            stmt = stmt.options(loader)

        order = list(self._order)
        if self._window is not None:
            pk = self._primary_key()
            stmt = stmt.where(pk.in_(self._id_window()))
            order.append(pk.asc())

        if order:
            stmt = stmt.order_by(*order)
        if self._limit is not None:
            stmt = stmt.limit(self._limit)
        if self._offset is not None:
            stmt = stmt.offset(self._offset)
        return stmt

    @property
    def count_statement(self) -> Select:
        """``count(DISTINCT pk)`` over the filtered, unjoined entity set."""
        return (
            select(func.count(distinct(self._primary_key())))
            .select_from(self.model)
            .where(*self._criteria)
        )

    async def get_count(self) -> int:
        result = await self.session.execute(self.count_statement)
        return result.scalar_one()

    async def execute(self) -> list[ModelT]:
        """Run the query and return unique entities in order."""
        stmt = self.statement
        logger.debug("Executing %s query: %s", self.alias, stmt)
        result = await self.session.execute(stmt)
        return list(result.unique().scalars().all())
