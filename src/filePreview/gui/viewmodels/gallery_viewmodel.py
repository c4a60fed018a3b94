"""GalleryViewModel: drives the attachment gallery of one parent record.

Pure Python, no Qt dependency. User intents (mount, filter toggle, sort
selection, load more, upload finished) become query-service jobs handed to a
:class:`FetchRunner`. Each job is stamped with a generation number; only the
response carrying the latest generation is committed, so a slow response to
a superseded request can never overwrite newer state.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Union

from filePreview.application.dtos import InitialFetchResult, PreviewRequest
from filePreview.application.interfaces import IAttachmentQueryService
from filePreview.application.services import gallery_state as transitions
from filePreview.application.services.gallery_state import GalleryState
from filePreview.config import DEFAULT_PAGE_SIZE, DEFAULT_SIZE_DECIMALS
from filePreview.domain.models.core import DisplayAttachment, SortField
from filePreview.domain.models.query import GalleryQuery
from filePreview.domain.services.attribute_deriver import AttributeDeriver
from filePreview.domain.services.filter_set import FilterSet
from filePreview.domain.services.sort_spec import SortSpec
from filePreview.errors import FetchFailure
from filePreview.errors.handler import ErrorHandler, ErrorSeverity
from filePreview.events.bus import EventBus
from filePreview.events.gallery_events import (
    AttachmentsInsertedEvent,
    GalleryReplacedEvent,
    PageAppendedEvent,
    UploadFinishedEvent,
)
from filePreview.gui.services.navigation_service import NavigationService
from filePreview.gui.viewmodels.base import BaseViewModel
from filePreview.gui.viewmodels.fetch_runner import FetchRunner, ImmediateFetchRunner
from filePreview.gui.viewmodels.signal import ObservableProperty, Signal

LOGGER = logging.getLogger(__name__)


class GalleryViewModel(BaseViewModel):
    """Owns the :class:`GalleryState` of one gallery and every change to it."""

    def __init__(
        self,
        parent_id: str,
        query_service: IAttachmentQueryService,
        event_bus: EventBus,
        *,
        runner: Optional[FetchRunner] = None,
        error_handler: Optional[ErrorHandler] = None,
        navigation: Optional[NavigationService] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        size_decimals: int = DEFAULT_SIZE_DECIMALS,
        filter_set: Optional[FilterSet] = None,
        sort_spec: Optional[SortSpec] = None,
        object_api_name: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.parent_id = parent_id
        self._service = query_service
        self._events = event_bus
        self._runner = runner or ImmediateFetchRunner()
        self._navigation = navigation
        self._object_api_name = object_api_name
        self.page_size = page_size
        self.filters = filter_set or FilterSet()
        self.sort = sort_spec or SortSpec()
        self._deriver = AttributeDeriver(decimals=size_decimals)
        self._generation = 0
        self._held_uploads: List[str] = []

        # Observable properties
        self.state = ObservableProperty(GalleryState())
        self.title = ObservableProperty(self.state.value.title)
        self.busy = ObservableProperty(False)
        self.sort_icon = ObservableProperty(self.sort.icon)
        self.loaded_thumbnails = ObservableProperty(frozenset())

        # Signals
        self.state_changed = Signal()  # emits (state: GalleryState)
        self.notification_requested = Signal()  # emits (notification: Notification)

        if error_handler is None:
            error_handler = ErrorHandler(LOGGER, event_bus)
            error_handler.register_ui_callback(self.notification_requested.emit)
        self._errors = error_handler

        self.subscribe_event(event_bus, UploadFinishedEvent, self._on_upload_finished)

    # -- read access --------------------------------------------------------

    @property
    def attachments(self) -> tuple[DisplayAttachment, ...]:
        return self.state.value.items

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def media_base_url(self) -> str:
        return self._deriver.base_url

    def current_query(self) -> GalleryQuery:
        """Describe the fetch the current filters, sort and cursor would issue."""
        return GalleryQuery(
            parent_id=self.parent_id,
            conditions=self.filters.conditions(),
            page_size=self.page_size,
            offset=self.state.value.offset,
            sort_field=self.sort.field,
            sort_direction=self.sort.direction,
        )

    # -- user intents -------------------------------------------------------

    def mount(self) -> None:
        """Issue the initial fetch; also used after every filter or sort change."""
        query = self.current_query().at_offset(0)
        if query.conditions is None:
            LOGGER.debug("No active filters for %s; clearing without a fetch", self.parent_id)
            self._generation += 1
            self._commit(transitions.replace_all(self.state.value, [], 0, self.page_size))
            self._events.publish(GalleryReplacedEvent(parent_id=self.parent_id))
            self._flush_held_uploads()
            return

        def job() -> InitialFetchResult:
            return self._service.initial_fetch(
                query.parent_id,
                query.conditions,
                query.page_size,
                query.sort_field,
                query.sort_direction,
            )

        self._issue("initial", query, job, self._apply_initial)

    reload = mount

    def toggle_filter(self, filter_id: str) -> List[str]:
        active = self.filters.toggle(filter_id)
        self.mount()
        return active

    def select_sort(self, field: Union[SortField, str]):
        selection = self.sort.select(field)
        self.sort_icon.value = self.sort.icon
        self.mount()
        return selection

    def load_more(self) -> bool:
        """Fetch the next page. Returns ``False`` when nothing was issued."""
        state = self.state.value
        if state.busy or not state.more_available:
            LOGGER.debug(
                "Ignoring load more (busy=%s, more=%s)", state.busy, state.more_available,
            )
            return False
        query = self.current_query()
        if query.conditions is None:
            return False

        def job():
            return self._service.paged_fetch(
                query.parent_id,
                query.conditions,
                query.page_size,
                query.offset,
                query.sort_field,
                query.sort_direction,
            )

        self._issue("page", query, job, self._apply_page)
        return True

    def handle_upload_finished(self, document_ids: List[str]) -> None:
        """Resolve freshly uploaded ids and insert them at the head."""
        ids = [str(doc_id) for doc_id in document_ids if doc_id]
        if not ids:
            return
        if self.state.value.busy:
            LOGGER.debug("Holding %d uploaded ids until the running fetch settles", len(ids))
            self._held_uploads.extend(ids)
            return
        query = self.current_query().with_ids(ids)

        def job():
            return self._service.fetch_by_ids(query.parent_id, query.document_ids)

        self._issue("by_ids", query, job, self._apply_uploaded)

    def open_preview(self, attachment_id: str) -> PreviewRequest:
        request = PreviewRequest(
            selected_record_id=attachment_id,
            record_ids=self.state.value.roster_string(),
        )
        if self._navigation is not None:
            self._navigation.open_preview(request)
        return request

    def open_related_list(self) -> None:
        if self._navigation is not None:
            self._navigation.open_related_list(self.parent_id, self._object_api_name)

    def mark_thumbnail_loaded(self, attachment_id: str) -> None:
        """Record that the rendition for *attachment_id* finished loading."""
        if self.state.value.index_of(attachment_id) < 0:
            return
        self.loaded_thumbnails.value = self.loaded_thumbnails.value | {attachment_id}

    def dispose(self) -> None:
        # Outstanding responses must not touch a torn-down view.
        self._generation += 1
        self._held_uploads.clear()
        super().dispose()

    # -- fetch plumbing -----------------------------------------------------

    def _issue(
        self,
        kind: str,
        query: GalleryQuery,
        job: Callable[[], Any],
        apply: Callable[[Any], None],
    ) -> None:
        self._generation += 1
        token = self._generation
        LOGGER.debug("Issuing %s fetch #%d: %s", kind, token, query)
        self._commit(transitions.begin_fetch(self.state.value))
        self._runner.submit(
            job,
            lambda result: self._on_resolved(token, kind, apply, result),
            lambda exc: self._on_failed(token, kind, exc),
        )

    def _on_resolved(self, token: int, kind: str, apply: Callable[[Any], None], result: Any) -> None:
        if token != self._generation:
            LOGGER.info("Discarding stale %s response #%d (latest is #%d)", kind, token, self._generation)
            return
        try:
            apply(result)
        except Exception as exc:
            LOGGER.exception("Could not apply %s response #%d", kind, token)
            self._on_failed(token, kind, exc)
            return
        self._flush_held_uploads()

    def _on_failed(self, token: int, kind: str, exc: Exception) -> None:
        if token != self._generation:
            LOGGER.info("Discarding stale %s failure #%d: %s", kind, token, exc)
            return
        failure = exc if isinstance(exc, FetchFailure) else FetchFailure(f"{kind} fetch failed: {exc}")
        if failure is not exc:
            failure.__cause__ = exc
        self._commit(transitions.fetch_failed(self.state.value))
        self._errors.handle(
            failure,
            ErrorSeverity.ERROR,
            {"parent_id": self.parent_id, "fetch": kind},
        )
        self._flush_held_uploads()

    def _flush_held_uploads(self) -> None:
        if self._held_uploads and not self.state.value.busy:
            held, self._held_uploads = self._held_uploads, []
            self.handle_upload_finished(held)

    # -- committing transitions ---------------------------------------------

    def _apply_initial(self, result: InitialFetchResult) -> None:
        self._deriver.base_url = result.media_base_url or ""
        items = self._deriver.derive_all(result.records)
        self.loaded_thumbnails.value = frozenset()
        self._commit(
            transitions.replace_all(self.state.value, items, result.total_count, self.page_size)
        )
        self._events.publish(GalleryReplacedEvent(
            parent_id=self.parent_id,
            item_count=len(items),
            total_count=result.total_count,
        ))

    def _apply_page(self, records) -> None:
        items = self._deriver.derive_all(records)
        self._commit(transitions.append(self.state.value, items, self.page_size))
        self._events.publish(PageAppendedEvent(
            parent_id=self.parent_id,
            item_count=len(items),
            offset=self.state.value.offset,
        ))

    def _apply_uploaded(self, records) -> None:
        items = self._deriver.derive_all(records)
        self._commit(transitions.prepend(self.state.value, items))
        self._events.publish(AttachmentsInsertedEvent(
            parent_id=self.parent_id,
            document_ids=[item.id for item in items],
        ))

    def _commit(self, new_state: GalleryState) -> None:
        if new_state == self.state.value:
            return
        self.state.value = new_state
        self.busy.value = new_state.busy
        self.title.value = new_state.title
        self.state_changed.emit(new_state)

    # -- EventBus handlers --------------------------------------------------

    def _on_upload_finished(self, event: UploadFinishedEvent) -> None:
        if event.parent_id and event.parent_id != self.parent_id:
            return
        self.handle_upload_finished(list(event.document_ids))
