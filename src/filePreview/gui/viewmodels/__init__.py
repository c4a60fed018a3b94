from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .fetch_runner import FetchRunner, ImmediateFetchRunner

__all__ = [
    "BaseViewModel",
    "FetchRunner",
    "ImmediateFetchRunner",
    "ObservableProperty",
    "Signal",
]
