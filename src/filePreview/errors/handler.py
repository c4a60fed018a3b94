import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from filePreview.application.dtos import Notification
from filePreview.config import GENERIC_ERROR_MESSAGE, GENERIC_ERROR_TITLE
from filePreview.events.bus import Event, EventBus


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    """Log an error, publish it on the bus and surface a toast when it matters.

    The notification carries no detail from the exception; the
    full error only reaches the log and the bus.
    """

    def __init__(self, logger: logging.Logger, event_bus: EventBus):
        self._logger = logger
        self._events = event_bus
        self._ui_callback: Optional[Callable[[Notification], None]] = None

    def register_ui_callback(self, callback: Callable[[Notification], None]):
        self._ui_callback = callback

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method("%s: %s", error.__class__.__name__, error, extra={"context": context or {}})

        self._events.publish(ErrorOccurredEvent(
            error=error,
            severity=severity,
            context=context or {},
        ))

        if self._ui_callback and severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            self._ui_callback(Notification(
                title=GENERIC_ERROR_TITLE,
                message=GENERIC_ERROR_MESSAGE,
                severity=severity.value,
            ))
