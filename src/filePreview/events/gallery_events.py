from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass(frozen=True, kw_only=True)
class GalleryEvent:
    """Something that happened to the attachment list of one parent record.

    ``parent_id`` is empty when the publisher does not know the record, in
    which case every gallery treats the event as its own.
    """
    parent_id: str = ""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, kw_only=True)
class UploadFinishedEvent(GalleryEvent):
    """Published by the upload widget once new files are stored."""
    document_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class GalleryReplacedEvent(GalleryEvent):
    item_count: int = 0
    total_count: int = 0


@dataclass(frozen=True, kw_only=True)
class PageAppendedEvent(GalleryEvent):
    item_count: int = 0
    offset: int = 0


@dataclass(frozen=True, kw_only=True)
class AttachmentsInsertedEvent(GalleryEvent):
    document_ids: list[str] = field(default_factory=list)
