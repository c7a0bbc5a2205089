"""
Order specification parsing.

Turns a compact sort string such as ``"title,-releaseDate"`` into an ordered
list of clauses and applies them to a query builder. The first clause is the
primary sort key; each later clause only breaks ties left by the ones before.
"""

from collections.abc import Collection, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar

from cinedex.core.exceptions import InvalidFieldError

DESCENDING_MARKER = "-"
SEPARATOR = ","


class OrderDirection(str, Enum):
    """Sort direction of a single clause."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class OrderClause:
    """One ``ORDER BY`` term."""

    field: str
    direction: OrderDirection = OrderDirection.ASC


@dataclass(frozen=True)
class OrderSpec:
    """Ordered, immutable sequence of order clauses."""

    clauses: tuple[OrderClause, ...] = ()

    def __iter__(self) -> Iterator[OrderClause]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __bool__(self) -> bool:
        return bool(self.clauses)

    @property
    def fields(self) -> list[str]:
        return [clause.field for clause in self.clauses]

    def validate(self, allowed: Collection[str], entity: str | None = None) -> "OrderSpec":
        """
        Check every clause against the sortable fields of an entity.

        Args:
            allowed: Field names the target entity accepts
            entity: Entity name used in the error message

        Returns:
            self, so the call can be chained

        Raises:
            InvalidFieldError: For the first clause whose field is not allowed
        """
        for clause in self.clauses:
            if clause.field not in allowed:
                raise InvalidFieldError(clause.field, entity)
        return self


class SupportsOrderBy(Protocol):
    def order_by(self, field: str, direction: OrderDirection) -> "SupportsOrderBy": ...


BuilderT = TypeVar("BuilderT", bound=SupportsOrderBy)


def parse_token(token: str) -> OrderClause:
    """Parse one token; a leading ``-`` selects descending order."""
    if token.startswith(DESCENDING_MARKER):
        return OrderClause(token[len(DESCENDING_MARKER):], OrderDirection.DESC)
    return OrderClause(token, OrderDirection.ASC)


def parse_order(raw: str) -> OrderSpec:
    """
    Parse a comma separated sort string.

    Tokens are taken as-is (no trimming). Empty tokens produce clauses with an
    empty field name; rejecting those is left to the query builder or to
    :meth:`OrderSpec.validate`.

    Example:
        >>> parse_order("title,-releaseDate").fields
        ['title', 'releaseDate']
    """
    return OrderSpec(tuple(parse_token(token) for token in raw.split(SEPARATOR)))


def apply_order(builder: BuilderT, spec: OrderSpec) -> BuilderT:
    """Add each clause to ``builder`` in order, without replacing earlier ones."""
    for clause in spec:
        builder.order_by(clause.field, clause.direction)
    return builder


def order_from_query(
    raw: str | None,
    allowed: Collection[str],
    *,
    entity: str | None = None,
    strict: bool = True,
) -> OrderSpec | None:
    """
    Parse an optional ``orderBy`` query value.

    Returns None when no value was supplied. With ``strict`` the parsed spec
    is checked against ``allowed`` so bad fields fail before any query runs.
    """
    if raw is None:
        return None
    spec = parse_order(raw)
    if strict:
        spec.validate(allowed, entity)
    return spec
