from abc import ABC, abstractmethod
from typing import List, Optional

from filePreview.application.dtos import InitialFetchResult
from filePreview.domain.models.core import AttachmentRecord, SortDirection, SortField


class IAttachmentQueryService(ABC):
    """Remote query service that owns the attachments of a parent record."""

    @abstractmethod
    def initial_fetch(
        self,
        parent_id: str,
        conditions: Optional[List[str]],
        page_size: int,
        sort_field: SortField,
        sort_direction: SortDirection,
    ) -> InitialFetchResult:
        """Return the first page, the total count and the media base URL."""
        pass

    @abstractmethod
    def fetch_by_ids(self, parent_id: str, ids: List[str]) -> List[AttachmentRecord]:
        """Return the attachments of *parent_id* whose ids are in *ids*."""
        pass

    @abstractmethod
    def paged_fetch(
        self,
        parent_id: str,
        conditions: Optional[List[str]],
        page_size: int,
        offset: int,
        sort_field: SortField,
        sort_direction: SortDirection,
    ) -> List[AttachmentRecord]:
        """Return the window ``[offset, offset + page_size)``."""
        pass
