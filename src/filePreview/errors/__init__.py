"""Custom exception hierarchy for filePreview."""

from __future__ import annotations


class FilePreviewError(Exception):
    """Base class for all custom errors raised by filePreview."""


# --- 3-layer hierarchy ---

class DomainError(FilePreviewError):
    """Base class for domain-level errors."""


class InfrastructureError(FilePreviewError):
    """Base class for infrastructure-level errors."""


class ApplicationError(FilePreviewError):
    """Base class for application-level errors."""


# --- Domain errors ---

class UnknownFilterError(DomainError):
    """Raised when a toggle names a filter that was never declared."""


class UnknownSortFieldError(DomainError):
    """Raised when a sort selection names a field outside the enumeration."""


# --- Infrastructure errors ---

class FetchFailure(InfrastructureError):
    """Raised when the query service rejects or times out a fetch."""


class FixtureLoadError(InfrastructureError):
    """Raised when an attachment fixture file cannot be parsed."""


# --- Settings ---

class SettingsError(FilePreviewError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
