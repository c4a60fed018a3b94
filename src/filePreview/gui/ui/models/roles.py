"""Role definitions exposed by the attachment list model."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from PySide6.QtCore import Qt


class Roles(IntEnum):
    """Custom roles exposed to QML or widgets."""

    ATTACHMENT_ID = Qt.UserRole + 1
    TITLE = Qt.UserRole + 2
    ICON = Qt.UserRole + 3
    FORMATTED_SIZE = Qt.UserRole + 4
    THUMBNAIL_URL = Qt.UserRole + 5
    CREATED_DATE = Qt.UserRole + 6
    FILE_TYPE = Qt.UserRole + 7
    THUMBNAIL_LOADED = Qt.UserRole + 8


def role_names(base: Dict[int, bytes] | None = None) -> Dict[int, bytes]:
    """Return a mapping of Qt role numbers to byte names."""

    mapping: Dict[int, bytes] = {} if base is None else dict(base)
    mapping.update(
        {
            Roles.ATTACHMENT_ID: b"attachmentId",
            Roles.TITLE: b"title",
            Roles.ICON: b"icon",
            Roles.FORMATTED_SIZE: b"formattedSize",
            Roles.THUMBNAIL_URL: b"thumbnailUrl",
            Roles.CREATED_DATE: b"createdDate",
            Roles.FILE_TYPE: b"fileType",
            Roles.THUMBNAIL_LOADED: b"thumbnailLoaded",
        }
    )
    return mapping
