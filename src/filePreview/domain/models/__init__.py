from .core import AttachmentRecord, DisplayAttachment, SortDirection, SortField
from .query import GalleryQuery

__all__ = [
    "AttachmentRecord",
    "DisplayAttachment",
    "GalleryQuery",
    "SortDirection",
    "SortField",
]
