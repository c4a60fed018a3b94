"""Expose Qt models used by the GUI."""

from .attachment_list_model import AttachmentListModel
from .roles import Roles

__all__ = [
    "AttachmentListModel",
    "Roles",
]
