"""Immutable gallery state and the pure transitions that move it.

Every transition takes a :class:`GalleryState` and returns a new one; nothing
here performs I/O or knows about the query service. The controller owns the
single current instance and swaps it as fetches resolve.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from filePreview.config import (
    MORE_AFFORDANCE_THRESHOLD,
    ROSTER_SEPARATOR,
    TITLE_TEMPLATE,
)
from filePreview.domain.models.core import DisplayAttachment

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GalleryState:
    """Snapshot of the attachment list shown by one gallery.

    ``offset`` counts the paged records fetched so far; items inserted after
    an upload are tracked separately in ``inserted_count`` because they sit
    outside the paged window.
    """

    items: Tuple[DisplayAttachment, ...] = ()
    offset: int = 0
    total_count: int = 0
    more_available: bool = False
    roster: Tuple[str, ...] = ()
    busy: bool = False
    inserted_count: int = 0

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def has_unfetched(self) -> bool:
        return self.offset + self.inserted_count < self.total_count

    @property
    def title(self) -> str:
        # Counts what the server has handed out, not the "more" affordance,
        # which on first load follows a fixed threshold.
        if self.more_available and self.has_unfetched:
            shown = min(len(self.items), self.offset + self.inserted_count)
            return TITLE_TEMPLATE.format(count=f"{shown}+")
        return TITLE_TEMPLATE.format(count=len(self.items))

    def roster_string(self) -> str:
        """Serialise the roster for the preview navigator."""
        return ROSTER_SEPARATOR.join(self.roster)

    def index_of(self, attachment_id: str) -> int:
        try:
            return self.roster.index(attachment_id)
        except ValueError:
            return -1


def begin_fetch(state: GalleryState) -> GalleryState:
    return replace(state, busy=True)


def fetch_failed(state: GalleryState) -> GalleryState:
    return replace(state, busy=False)


def replace_all(
    state: GalleryState,
    records: Iterable[DisplayAttachment],
    total_count: int,
    default_page_size: Optional[int] = None,
) -> GalleryState:
    """Discard the current list and start over from *records*."""
    items = _unique(records, ())
    total_count = max(int(total_count), 0)
    if default_page_size is not None:
        offset = min(default_page_size, total_count)
    else:
        offset = min(len(items), total_count)
    return GalleryState(
        items=items,
        offset=offset,
        total_count=total_count,
        more_available=total_count > MORE_AFFORDANCE_THRESHOLD,
        roster=tuple(item.id for item in items),
        busy=False,
        inserted_count=0,
    )


def append(
    state: GalleryState,
    records: Iterable[DisplayAttachment],
    page_size: Optional[int] = None,
) -> GalleryState:
    """Add a "load more" page at the tail and advance the cursor.

    With *page_size* given, a page shorter than requested ends paging even
    when the cursor is still below ``total_count``: uploads counted into the
    total may sit outside the active filters and never come back in a page.
    """
    received = tuple(records)
    added = _unique(received, state.roster)
    offset = min(state.offset + len(received), state.total_count)
    more = offset < state.total_count
    if page_size is not None and len(received) < page_size:
        more = False
    return replace(
        state,
        items=state.items + added,
        roster=state.roster + tuple(item.id for item in added),
        offset=offset,
        more_available=more,
        busy=False,
    )


def prepend(state: GalleryState, records: Iterable[DisplayAttachment]) -> GalleryState:
    """Insert freshly uploaded attachments at the head, in received order.

    The pagination cursor is left alone: these items are additions outside
    the paged window.
    """
    added = _unique(records, state.roster)
    return replace(
        state,
        items=added + state.items,
        roster=tuple(item.id for item in added) + state.roster,
        total_count=state.total_count + len(added),
        inserted_count=state.inserted_count + len(added),
        busy=False,
    )


def recompute_counters(state: GalleryState) -> GalleryState:
    more = state.offset < state.total_count
    if more == state.more_available:
        return state
    return replace(state, more_available=more)


def _unique(
    records: Iterable[DisplayAttachment],
    known: Tuple[str, ...],
) -> Tuple[DisplayAttachment, ...]:
    seen = set(known)
    kept = []
    for record in records:
        if record.id in seen:
            LOGGER.warning("Dropping duplicate attachment %s", record.id)
            continue
        seen.add(record.id)
        kept.append(record)
    return tuple(kept)
