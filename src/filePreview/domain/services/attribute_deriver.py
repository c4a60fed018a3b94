"""Derive the display attributes of an attachment.

Every function here is pure: the same record and base URL always produce the
same :class:`DisplayAttachment`, and no input makes them raise.
"""

from __future__ import annotations

import math
from typing import Optional

from filePreview.config import (
    DEFAULT_ICON,
    DEFAULT_SIZE_DECIMALS,
    ICON_PREFIX,
    IMAGE_EXTENSIONS,
    IMAGE_ICON,
    SIZE_UNITS,
    SUPPORTED_ICON_EXTENSIONS,
    THUMBNAIL_PATH_TEMPLATE,
    THUMBNAIL_RENDITION,
)
from filePreview.domain.models.core import AttachmentRecord, DisplayAttachment

_BASE = 1024


def format_bytes(size: Optional[int], decimals: int = DEFAULT_SIZE_DECIMALS) -> str:
    """Return *size* as a base-1024 human string such as ``"1.5 KB"``.

    Trailing zeros are stripped, so 1024 bytes renders as ``"1 KB"``. Zero,
    missing and negative sizes render as ``"0 Bytes"``.
    """

    if not size or size < 0:
        return f"0 {SIZE_UNITS[0]}"
    if decimals < 0:
        decimals = DEFAULT_SIZE_DECIMALS
    index = min(unit_index(size), len(SIZE_UNITS) - 1)
    text = f"{round(size / _BASE ** index, decimals):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"


def unit_index(size: int) -> int:
    """Return ``floor(log1024(size))`` for a positive *size*, computed exactly."""

    index = int(math.log(size, _BASE))
    # Correct floating point drift around exact powers of 1024.
    while _BASE ** (index + 1) <= size:
        index += 1
    while index > 0 and _BASE ** index > size:
        index -= 1
    return index


def icon_for_file_type(file_type: Optional[str]) -> str:
    if not isinstance(file_type, str) or not file_type:
        return DEFAULT_ICON
    normalised = file_type.strip().lower()
    if normalised in IMAGE_EXTENSIONS:
        return IMAGE_ICON
    if normalised in SUPPORTED_ICON_EXTENSIONS:
        return ICON_PREFIX + normalised
    return DEFAULT_ICON


def thumbnail_url(base_url: str, latest_version_id: str) -> str:
    return (base_url or "").rstrip("/") + THUMBNAIL_PATH_TEMPLATE.format(
        rendition=THUMBNAIL_RENDITION,
        version_id=latest_version_id or "",
    )


def derive(
    record: AttachmentRecord,
    base_url: str,
    decimals: int = DEFAULT_SIZE_DECIMALS,
) -> DisplayAttachment:
    """Attach icon, formatted size and thumbnail URL to *record*."""

    return DisplayAttachment(
        record=record,
        icon=icon_for_file_type(record.file_type),
        formatted_size=format_bytes(record.content_size, decimals),
        thumbnail_url=thumbnail_url(base_url, record.latest_version_id),
    )


class AttributeDeriver:
    """Binds the media base URL and precision of one gallery to :func:`derive`."""

    def __init__(self, base_url: str = "", decimals: int = DEFAULT_SIZE_DECIMALS) -> None:
        self.base_url = base_url
        self.decimals = decimals

    def derive(self, record: AttachmentRecord) -> DisplayAttachment:
        return derive(record, self.base_url, self.decimals)

    def derive_all(self, records) -> list[DisplayAttachment]:
        return [self.derive(record) for record in records]
