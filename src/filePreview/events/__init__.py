from .bus import Event, EventBus, Subscription
from .gallery_events import (
    AttachmentsInsertedEvent,
    GalleryEvent,
    GalleryReplacedEvent,
    PageAppendedEvent,
    UploadFinishedEvent,
)

__all__ = [
    "AttachmentsInsertedEvent",
    "Event",
    "EventBus",
    "GalleryEvent",
    "GalleryReplacedEvent",
    "PageAppendedEvent",
    "Subscription",
    "UploadFinishedEvent",
]
