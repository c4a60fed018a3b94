from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class SortField(str, Enum):
    """Closed set of sortable columns, valued by their query-service names."""

    CREATED_DATE = "ContentDocument.CreatedDate"
    TITLE = "ContentDocument.Title"
    SIZE = "ContentDocument.ContentSize"

    @classmethod
    def parse(cls, value: str) -> SortField:
        """Accept either the wire name or a short alias (``createdDate``, ``title``, ``size``)."""
        for member in cls:
            if value in (member.value, member.alias):
                return member
        raise ValueError(value)

    @property
    def alias(self) -> str:
        return _SORT_ALIASES[self]


_SORT_ALIASES = {
    SortField.CREATED_DATE: "createdDate",
    SortField.TITLE: "title",
    SortField.SIZE: "size",
}


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class AttachmentRecord:
    """A file attachment as returned by the query service.

    ``file_type`` and ``content_size`` may be missing on malformed rows; the
    attribute deriver degrades instead of failing.
    """

    id: str
    title: str = ""
    created_date: Optional[datetime] = None
    content_size: Optional[int] = None
    file_type: Optional[str] = None
    latest_version_id: str = ""

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> AttachmentRecord:
        """Build a record from a query-service row.

        Accepts both the flat snake_case form and the nested link form where
        the document fields live under ``ContentDocument``.
        """
        document = row.get("ContentDocument")
        if isinstance(document, Mapping):
            created = document.get("CreatedDate")
            return cls(
                id=str(row.get("ContentDocumentId") or document.get("Id") or ""),
                title=_coerce_text(document.get("Title")) or "",
                created_date=_coerce_datetime(created),
                content_size=_coerce_size(document.get("ContentSize")),
                file_type=_coerce_text(document.get("FileType")),
                latest_version_id=_coerce_text(document.get("LatestPublishedVersionId")) or "",
            )
        return cls(
            id=str(row.get("id") or ""),
            title=_coerce_text(row.get("title")) or "",
            created_date=_coerce_datetime(row.get("created_date")),
            content_size=_coerce_size(row.get("content_size")),
            file_type=_coerce_text(row.get("file_type")),
            latest_version_id=_coerce_text(row.get("latest_version_id")) or "",
        )


@dataclass(frozen=True)
class DisplayAttachment:
    """An :class:`AttachmentRecord` plus the attributes the view renders."""

    record: AttachmentRecord
    icon: str
    formatted_size: str
    thumbnail_url: str

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def title(self) -> str:
        return self.record.title

    @property
    def created_date(self) -> Optional[datetime]:
        return self.record.created_date

    @property
    def content_size(self) -> Optional[int]:
        return self.record.content_size

    @property
    def file_type(self) -> Optional[str]:
        return self.record.file_type


def _coerce_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _coerce_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _coerce_size(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
