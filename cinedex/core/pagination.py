"""
Deferred-join pagination.

A query that joins a one-to-many relation returns one row per match, so a
plain LIMIT/OFFSET on it cuts pages in the middle of an entity and makes row
counts meaningless. Here the page window is computed over entities: the
caller counts distinct entities up front, the window selects entity ids, and
the join is applied only to the ids inside the window. Page metadata is
derived from entity counts alone.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from cinedex.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class PaginationRequest:
    """Validated page request. ``total_count`` counts entities, not joined rows."""

    page_size: int
    page_no: int
    total_count: int

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise InvalidArgumentError("page_size", self.page_size, ">= 1")
        if self.page_no <= 0:
            raise InvalidArgumentError("page_no", self.page_no, ">= 1")
        if self.total_count < 0:
            raise InvalidArgumentError("total_count", self.total_count, ">= 0")


@dataclass(frozen=True)
class PageWindow:
    """Half-open range ``[offset, offset + limit)`` over entity ids."""

    offset: int
    limit: int

    @property
    def stop(self) -> int:
        return self.offset + self.limit


@dataclass(frozen=True)
class PaginationMetadata:
    page_size: int
    page_no: int
    total_count: int
    total_pages: int
    has_next: bool
    has_prev: bool


MetadataFn = Callable[[Sequence[Any]], PaginationMetadata]


class SupportsWindow(Protocol):
    def window(self, offset: int, limit: int) -> Any: ...


def total_pages(total_count: int, page_size: int) -> int:
    """Ceiling division; zero entities means zero pages."""
    return -(-total_count // page_size)


def paginate(request: PaginationRequest) -> tuple[PageWindow, MetadataFn]:
    """
    Compute the page window and a metadata factory for a request.

    No clamping is done: a page past the last one gives a window that selects
    nothing and metadata with ``has_next`` False.

    Returns:
        Tuple of (window, function turning the fetched records into metadata)
    """
    window = PageWindow(
        offset=(request.page_no - 1) * request.page_size,
        limit=request.page_size,
    )
    pages = total_pages(request.total_count, request.page_size)
    metadata = PaginationMetadata(
        page_size=request.page_size,
        page_no=request.page_no,
        total_count=request.total_count,
        total_pages=pages,
        has_next=request.page_no < pages,
        has_prev=request.page_no > 1,
    )

    def metadata_for(records: Sequence[Any]) -> PaginationMetadata:
        # Records may hold joined children; the counts above are per entity.
        return metadata

    return window, metadata_for


def deferred_join_pagination(
    builder: SupportsWindow,
    *,
    page_size: int,
    page_no: int,
    count: int,
) -> MetadataFn:
    """
    Restrict ``builder`` to one page of entity ids and return the metadata factory.

    Args:
        builder: Query builder exposing ``window(offset, limit)``
        page_size: Entities per page
        page_no: 1-indexed page number
        count: Distinct entity count from the unjoined query

    Raises:
        InvalidArgumentError: If page_size or page_no is not positive
    """
    window, metadata_for = paginate(
        PaginationRequest(page_size=page_size, page_no=page_no, total_count=count)
    )
    builder.window(window.offset, window.limit)
    return metadata_for
