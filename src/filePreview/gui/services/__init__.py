"""Pure-Python GUI services."""

from .navigation_service import NavigationService, PageReference

__all__ = ["NavigationService", "PageReference"]
