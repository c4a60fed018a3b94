"""Size-bucket filters and the condition list they produce."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from filePreview.config import SIZE_FILTERS
from filePreview.errors import UnknownFilterError

LOGGER = logging.getLogger(__name__)


class EmptyFilterPolicy(str, Enum):
    """What a fetch should mean once every filter has been switched off."""

    PASS_THROUGH = "pass_through"
    SHOW_ALL = "show_all"
    SHOW_NONE = "show_none"


@dataclass
class SizeFilter:
    id: str
    label: str
    checked: bool = True


class FilterSet:
    """Ordered set of named size-bucket filters.

    Active ids are always reported in declaration order, never in the order
    the user toggled them.
    """

    def __init__(
        self,
        filters: Optional[Iterable[SizeFilter]] = None,
        empty_policy: EmptyFilterPolicy = EmptyFilterPolicy.PASS_THROUGH,
    ) -> None:
        if filters is None:
            filters = [SizeFilter(id=fid, label=label) for fid, label in SIZE_FILTERS]
        self._filters: List[SizeFilter] = list(filters)
        self.empty_policy = EmptyFilterPolicy(empty_policy)

    @property
    def filters(self) -> Sequence[SizeFilter]:
        return tuple(self._filters)

    def active_ids(self) -> List[str]:
        return [f.id for f in self._filters if f.checked]

    def toggle(self, filter_id: str) -> List[str]:
        """Flip *filter_id* and return the ids that are now active."""
        for f in self._filters:
            if f.id == filter_id:
                f.checked = not f.checked
                break
        else:
            raise UnknownFilterError(filter_id)
        active = self.active_ids()
        LOGGER.debug("Filter %s toggled; active filters: %s", filter_id, active)
        return active

    @property
    def is_empty(self) -> bool:
        return not any(f.checked for f in self._filters)

    def conditions(self) -> Optional[List[str]]:
        """Return the condition list for the next fetch.

        ``None`` means nothing should be fetched at all, which only happens
        when every filter is off under :attr:`EmptyFilterPolicy.SHOW_NONE`.
        """
        active = self.active_ids()
        if active:
            return active
        if self.empty_policy is EmptyFilterPolicy.SHOW_ALL:
            return [f.id for f in self._filters]
        if self.empty_policy is EmptyFilterPolicy.SHOW_NONE:
            return None
        return []
