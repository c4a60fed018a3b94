"""NavigationService: hand-off point to pages outside the gallery.

Pure Python, no Qt dependency. The host application connects
:attr:`page_changed` to whatever actually opens the page; the gallery only
describes where it wants to go.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from filePreview.application.dtos import PreviewRequest
from filePreview.config import PREVIEW_PAGE_NAME, RELATED_LIST_RELATIONSHIP
from filePreview.gui.viewmodels.signal import Signal

NAMED_PAGE = "standard__namedPage"
RELATIONSHIP_PAGE = "standard__recordRelationshipPage"


@dataclass(frozen=True)
class PageReference:
    type: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    state: Dict[str, Any] = field(default_factory=dict)


class NavigationService:
    """Records navigation requests and broadcasts them."""

    def __init__(self) -> None:
        self.page_changed = Signal()  # emits (reference: PageReference)
        self._history: list[PageReference] = []

    def navigate_to(self, reference: PageReference) -> None:
        self._history.append(reference)
        self.page_changed.emit(reference)

    def open_preview(self, request: PreviewRequest) -> PageReference:
        """Open the file preview page positioned on the selected attachment."""
        reference = PageReference(
            type=NAMED_PAGE,
            attributes={"pageName": PREVIEW_PAGE_NAME},
            state=request.as_state(),
        )
        self.navigate_to(reference)
        return reference

    def open_related_list(self, record_id: str, object_api_name: Optional[str] = None) -> PageReference:
        """Open the full attachment related list of *record_id*."""
        attributes: Dict[str, Any] = {
            "recordId": record_id,
            "relationshipApiName": RELATED_LIST_RELATIONSHIP,
            "actionName": "view",
        }
        if object_api_name:
            attributes["objectApiName"] = object_api_name
        reference = PageReference(type=RELATIONSHIP_PAGE, attributes=attributes)
        self.navigate_to(reference)
        return reference

    def go_back(self) -> bool:
        """Go back one step. Returns ``True`` if navigation occurred."""
        if len(self._history) > 1:
            self._history.pop()
            self.page_changed.emit(self._history[-1])
            return True
        return False

    @property
    def current(self) -> PageReference | None:
        if self._history:
            return self._history[-1]
        return None
