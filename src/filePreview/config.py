"""Default configuration values for filePreview."""

from __future__ import annotations

from typing import Final

# Number of attachments requested by the initial fetch and by every
# "load more" page when the host page does not configure one.
DEFAULT_PAGE_SIZE: Final[int] = 3

# The "more" affordance on first load is driven by a fixed threshold that
# matches the always-three-visible card layout, independent of the page size.
MORE_AFFORDANCE_THRESHOLD: Final[int] = 3

DEFAULT_SIZE_DECIMALS: Final[int] = 2
SIZE_UNITS: Final[tuple[str, ...]] = (
    "Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB",
)

# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------

ICON_PREFIX: Final[str] = "doctype:"
DEFAULT_ICON: Final[str] = "doctype:attachment"
IMAGE_ICON: Final[str] = "doctype:image"
IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset({"png", "jpg", "gif"})
SUPPORTED_ICON_EXTENSIONS: Final[frozenset[str]] = frozenset({
    "ai", "attachment", "audio", "box_notes", "csv", "eps", "excel", "exe",
    "flash", "folder", "gdoc", "gdocs", "gform", "gpres", "gsheet", "html",
    "image", "keynote", "library_folder", "link", "mp4", "overlay", "pack",
    "pages", "pdf", "ppt", "psd", "quip_doc", "quip_sheet", "quip_slide",
    "rtf", "slide", "stypi", "txt", "unknown", "video", "visio", "webex",
    "word", "xml", "zip",
})

SORT_ICON_ASCENDING: Final[str] = "utility:arrowup"
SORT_ICON_DESCENDING: Final[str] = "utility:arrowdown"

# ---------------------------------------------------------------------------
# Thumbnails
# ---------------------------------------------------------------------------

THUMBNAIL_RENDITION: Final[str] = "THUMB120BY90"
THUMBNAIL_PATH_TEMPLATE: Final[str] = (
    "/sfc/servlet.shepherd/version/renditionDownload"
    "?rendition={rendition}&versionId={version_id}"
)

# ---------------------------------------------------------------------------
# Size-bucket filters, in declaration order: (id, label).
# ---------------------------------------------------------------------------

SIZE_FILTERS: Final[tuple[tuple[str, str], ...]] = (
    ("gt100KB", ">= 100 KB"),
    ("lt100KBgt10KB", "< 100 KB and > 10 KB"),
    ("lt10KB", "<= 10 KB"),
)

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

TITLE_TEMPLATE: Final[str] = "Files ({count})"
ROSTER_SEPARATOR: Final[str] = ","
PREVIEW_PAGE_NAME: Final[str] = "filePreview"
RELATED_LIST_RELATIONSHIP: Final[str] = "AttachedContentDocuments"
GENERIC_ERROR_TITLE: Final[str] = ""
GENERIC_ERROR_MESSAGE: Final[str] = "Error"
