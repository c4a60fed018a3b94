from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt, Signal, Slot

from filePreview.application.services.gallery_state import GalleryState
from filePreview.domain.models.core import DisplayAttachment
from filePreview.gui.ui.models.roles import Roles, role_names
from filePreview.gui.viewmodels.gallery_viewmodel import GalleryViewModel

_LOGGER = logging.getLogger(__name__)


class AttachmentListModel(QAbstractListModel):
    """
    Qt list model over the attachments of a :class:`GalleryViewModel`.
    Rows mirror the committed gallery state; every commit resets the model.
    """

    titleChanged = Signal(str)
    busyChanged = Signal(bool)

    def __init__(self, view_model: GalleryViewModel, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._vm = view_model
        self._items: tuple[DisplayAttachment, ...] = view_model.attachments
        self._loaded = view_model.loaded_thumbnails.value

        self._vm.state_changed.connect(self._on_state_changed)
        self._vm.loaded_thumbnails.changed.connect(self._on_thumbnails_changed)
        self._vm.busy.changed.connect(lambda new, _old: self.busyChanged.emit(bool(new)))
        self._vm.title.changed.connect(lambda new, _old: self.titleChanged.emit(str(new)))

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return role_names(super().roleNames())

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._items):
            return None

        item = self._items[index.row()]
        role_int = int(role)

        if role_int == Qt.ItemDataRole.DisplayRole:
            return item.title
        if role_int == Qt.ItemDataRole.ToolTipRole:
            return f"{item.title} ({item.formatted_size})"
        if role_int == Roles.ATTACHMENT_ID:
            return item.id
        if role_int == Roles.TITLE:
            return item.title
        if role_int == Roles.ICON:
            return item.icon
        if role_int == Roles.FORMATTED_SIZE:
            return item.formatted_size
        if role_int == Roles.THUMBNAIL_URL:
            return item.thumbnail_url
        if role_int == Roles.CREATED_DATE:
            return item.created_date
        if role_int == Roles.FILE_TYPE:
            return item.file_type
        if role_int == Roles.THUMBNAIL_LOADED:
            return item.id in self._loaded
        return None

    @Slot(str)
    def openPreview(self, attachment_id: str) -> None:
        self._vm.open_preview(attachment_id)

    @Slot()
    def loadMore(self) -> None:
        self._vm.load_more()

    @Slot(str)
    def toggleFilter(self, filter_id: str) -> None:
        self._vm.toggle_filter(filter_id)

    @Slot(str)
    def selectSort(self, field: str) -> None:
        self._vm.select_sort(field)

    @Slot(str)
    def thumbnailLoaded(self, attachment_id: str) -> None:
        self._vm.mark_thumbnail_loaded(attachment_id)

    def _on_state_changed(self, state: GalleryState) -> None:
        if state.items == self._items:
            return
        _LOGGER.debug("Resetting attachment model: %d -> %d rows", len(self._items), len(state.items))
        self.beginResetModel()
        self._items = state.items
        self.endResetModel()

    def _on_thumbnails_changed(self, loaded, _old) -> None:
        self._loaded = loaded
        if not self._items:
            return
        self.dataChanged.emit(
            self.index(0, 0),
            self.index(len(self._items) - 1, 0),
            [int(Roles.THUMBNAIL_LOADED)],
        )
