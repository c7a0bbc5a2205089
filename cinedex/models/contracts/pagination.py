"""
Pagination contracts for API responses.

Provides the page metadata model and the generic paginated records envelope.
"""

from dataclasses import asdict
from typing import Generic, TypeVar

from pydantic import Field

from cinedex.core.pagination import PaginationMetadata
from cinedex.models.contracts.common import CamelModel

T = TypeVar("T")


class PaginationMeta(CamelModel):
    """
    Page metadata, computed from entity counts.

    Serialized as ``pageSize``, ``pageNo``, ``totalCount``, ``totalPages``,
    ``hasNext`` and ``hasPrev``.
    """

    page_size: int = Field(..., ge=1, description="Maximum entities per page")
    page_no: int = Field(..., ge=1, description="Current page number (1-indexed)")
    total_count: int = Field(..., ge=0, description="Total number of entities")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
    has_next: bool = Field(..., description="Whether a later page exists")
    has_prev: bool = Field(..., description="Whether an earlier page exists")

    @classmethod
    def from_metadata(cls, metadata: PaginationMetadata) -> "PaginationMeta":
        return cls(**asdict(metadata))


class PaginatedRecords(CamelModel, Generic[T]):
    """Paginated list response."""

    meta: PaginationMeta
    records: list[T]
