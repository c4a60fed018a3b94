"""In-memory implementation of the attachment query contract.

Serves attachment records from a list held in memory, applying the same
size-bucket conditions, sort order and offset windows a remote service
would. The CLI and the test-suite drive the gallery through it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from filePreview.application.dtos import InitialFetchResult
from filePreview.application.interfaces import IAttachmentQueryService
from filePreview.domain.models.core import AttachmentRecord, SortDirection, SortField
from filePreview.errors import FixtureLoadError, UnknownFilterError
from filePreview.utils.jsonio import read_json

LOGGER = logging.getLogger(__name__)

_KB = 1024
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

SIZE_BUCKETS: Dict[str, Callable[[int], bool]] = {
    "gt100KB": lambda size: size >= 100 * _KB,
    "lt100KBgt10KB": lambda size: 10 * _KB < size < 100 * _KB,
    "lt10KB": lambda size: size <= 10 * _KB,
}


def matches_conditions(record: AttachmentRecord, conditions: Optional[List[str]]) -> bool:
    """Return whether *record* falls in any of the named size buckets.

    A missing condition list places no restriction; an empty one matches
    nothing.
    """
    if conditions is None:
        return True
    size = record.content_size or 0
    for condition in conditions:
        predicate = SIZE_BUCKETS.get(condition)
        if predicate is None:
            raise UnknownFilterError(condition)
        if predicate(size):
            return True
    return False


def _sort_key(sort_field: SortField):
    if sort_field is SortField.TITLE:
        return lambda record: (record.title or "").casefold()
    if sort_field is SortField.SIZE:
        return lambda record: record.content_size or 0
    return lambda record: _aware(record.created_date)


def _aware(value: Optional[datetime]) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class InMemoryAttachmentQueryService(IAttachmentQueryService):
    """Query service over a fixed set of attachments grouped by parent id."""

    def __init__(
        self,
        attachments: Optional[Dict[str, Iterable[AttachmentRecord]]] = None,
        media_base_url: str = "",
    ) -> None:
        self._attachments: Dict[str, List[AttachmentRecord]] = {
            parent: list(records) for parent, records in (attachments or {}).items()
        }
        self.media_base_url = media_base_url

    @classmethod
    def from_fixture(cls, path: Path) -> InMemoryAttachmentQueryService:
        """Load ``{"media_base_url": ..., "attachments": {parent: [row, ...]}}``."""
        try:
            payload = read_json(path)
            attachments = {
                str(parent): [AttachmentRecord.from_mapping(row) for row in rows]
                for parent, rows in payload.get("attachments", {}).items()
            }
        except (OSError, ValueError, AttributeError, TypeError) as exc:
            raise FixtureLoadError(f"{path}: {exc}") from exc
        LOGGER.debug("Loaded fixture %s with %d parent records", path, len(attachments))
        return cls(attachments, media_base_url=payload.get("media_base_url", ""))

    def add(self, parent_id: str, record: AttachmentRecord) -> None:
        self._attachments.setdefault(parent_id, []).append(record)

    def parent_ids(self) -> List[str]:
        return list(self._attachments)

    # -- IAttachmentQueryService ----------------------------------------------

    def initial_fetch(self, parent_id, conditions, page_size, sort_field, sort_direction):
        matching = self._select(parent_id, conditions, sort_field, sort_direction)
        return InitialFetchResult(
            records=matching[:page_size],
            total_count=len(matching),
            media_base_url=self.media_base_url,
        )

    def fetch_by_ids(self, parent_id, ids):
        wanted = set(ids)
        return [r for r in self._attachments.get(parent_id, []) if r.id in wanted]

    def paged_fetch(self, parent_id, conditions, page_size, offset, sort_field, sort_direction):
        matching = self._select(parent_id, conditions, sort_field, sort_direction)
        return matching[offset:offset + page_size]

    # -- internal ---------------------------------------------------------------

    def _select(self, parent_id, conditions, sort_field, sort_direction) -> List[AttachmentRecord]:
        records = [
            r for r in self._attachments.get(parent_id, [])
            if matches_conditions(r, conditions)
        ]
        records.sort(
            key=_sort_key(SortField(sort_field)),
            reverse=SortDirection(sort_direction) is SortDirection.DESC,
        )
        return records
