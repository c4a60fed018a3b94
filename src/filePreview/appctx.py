"""Application-wide context helpers: wire a gallery from its collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .events.bus import EventBus
from .gui.services.navigation_service import NavigationService

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .application.interfaces import IAttachmentQueryService
    from .errors.handler import ErrorHandler
    from .gui.viewmodels.fetch_runner import FetchRunner
    from .gui.viewmodels.gallery_viewmodel import GalleryViewModel
    from .settings.manager import SettingsManager

LOGGER = logging.getLogger(__name__)


def _create_settings_manager() -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager()
    manager.load()
    return manager


@dataclass
class AppContext:
    """Collaborators shared by every gallery on a page."""

    settings: "SettingsManager" = field(default_factory=_create_settings_manager)
    event_bus: EventBus = field(default_factory=EventBus)
    navigation: NavigationService = field(default_factory=NavigationService)
    error_handler: Optional["ErrorHandler"] = None

    def build_gallery(
        self,
        parent_id: str,
        query_service: "IAttachmentQueryService",
        runner: Optional["FetchRunner"] = None,
    ) -> "GalleryViewModel":
        """Create a gallery view model configured from the settings file."""

        from .domain.models.core import SortDirection, SortField
        from .domain.services.filter_set import EmptyFilterPolicy, FilterSet
        from .domain.services.sort_spec import SortSpec
        from .gui.viewmodels.gallery_viewmodel import GalleryViewModel

        gallery = self.settings.get("gallery", {})
        sort = SortSpec(
            SortField.parse(gallery["default_sort_field"]),
            SortDirection(gallery["default_sort_direction"]),
        )
        filters = FilterSet(empty_policy=EmptyFilterPolicy(gallery["empty_filter_policy"]))
        LOGGER.debug("Building gallery for %s with %s", parent_id, sort)
        return GalleryViewModel(
            parent_id,
            query_service,
            self.event_bus,
            runner=runner,
            error_handler=self.error_handler,
            navigation=self.navigation,
            page_size=gallery["page_size"],
            size_decimals=gallery["size_decimals"],
            filter_set=filters,
            sort_spec=sort,
            object_api_name=gallery.get("object_api_name"),
        )
