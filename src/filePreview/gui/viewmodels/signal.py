"""Observer primitives for the view models, usable without Qt.

``Signal`` carries observer callbacks and ``ObservableProperty`` wraps a
single value for data-binding in ViewModels.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Tuple

_logger = logging.getLogger(__name__)


class Signal:
    """Qt-flavoured ``connect``/``emit`` over plain callables.

    The handler tuple is replaced on every connect or disconnect, so an emit
    iterates a stable snapshot even when a handler rewires the signal. A
    handler that raises is logged and skipped; the rest still run.
    """

    def __init__(self) -> None:
        self._handlers: Tuple[Callable, ...] = ()
        self._lock = threading.Lock()

    def connect(self, handler: Callable) -> Callable:
        with self._lock:
            if handler not in self._handlers:
                self._handlers = self._handlers + (handler,)
        return handler

    def disconnect(self, handler: Callable) -> None:
        with self._lock:
            if handler not in self._handlers:
                raise ValueError(f"{handler!r} is not connected")
            self._handlers = tuple(h for h in self._handlers if h is not handler)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        for handler in self._handlers:
            try:
                handler(*args, **kwargs)
            except Exception:
                _logger.exception("Handler %r raised during emit", handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """A value that announces ``changed(new, old)`` when it really changes.

    Equality decides whether a change happened, so assigning an equal value
    is silent.
    """

    __slots__ = ("_value", "changed")

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        old_value = self._value
        if old_value == new_value:
            return
        self._value = new_value
        self.changed.emit(new_value, old_value)

    def __repr__(self) -> str:
        return f"ObservableProperty({self._value!r})"
