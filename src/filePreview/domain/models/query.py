from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from filePreview.config import DEFAULT_PAGE_SIZE

from .core import SortDirection, SortField


@dataclass(frozen=True)
class GalleryQuery:
    """Request descriptor built by the controller for the next fetch."""

    parent_id: str
    conditions: Optional[List[str]] = None
    page_size: int = DEFAULT_PAGE_SIZE
    offset: int = 0
    sort_field: SortField = SortField.CREATED_DATE
    sort_direction: SortDirection = SortDirection.DESC
    document_ids: List[str] = field(default_factory=list)

    def at_offset(self, offset: int) -> GalleryQuery:
        return replace(self, offset=offset)

    def with_ids(self, document_ids: List[str]) -> GalleryQuery:
        return replace(self, document_ids=list(document_ids))

    def with_conditions(self, conditions: Optional[List[str]]) -> GalleryQuery:
        return replace(self, conditions=None if conditions is None else list(conditions))

    def sorted_by(self, sort_field: SortField, sort_direction: SortDirection) -> GalleryQuery:
        return replace(self, sort_field=sort_field, sort_direction=sort_direction)
