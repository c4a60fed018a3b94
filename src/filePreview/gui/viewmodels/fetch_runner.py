"""Strategies deciding where a query-service call runs.

The gallery view model never calls the query service directly; it hands a
zero-argument job to a runner together with success and failure callbacks.
Runners must invoke exactly one of the callbacks, on the thread that owns the
view model.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

_logger = logging.getLogger(__name__)

Job = Callable[[], Any]
SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[Exception], None]


class FetchRunner(Protocol):
    def submit(self, job: Job, on_success: SuccessCallback, on_failure: FailureCallback) -> None: ...


class ImmediateFetchRunner:
    """Run every job inline, before ``submit`` returns."""

    def submit(self, job: Job, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        try:
            result = job()
        except Exception as exc:
            _logger.debug("Inline fetch failed: %s", exc)
            on_failure(exc)
            return
        on_success(result)
