"""Run query-service jobs on ``QThreadPool`` and report back on the GUI thread."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from filePreview.gui.viewmodels.fetch_runner import FailureCallback, Job, SuccessCallback

_logger = logging.getLogger(__name__)


class _FetchSignals(QObject):
    succeeded = Signal(object)
    failed = Signal(object)


class _FetchWorker(QRunnable):
    def __init__(self, job: Job) -> None:
        super().__init__()
        self._job = job
        self.signals = _FetchSignals()

    def run(self) -> None:
        try:
            result = self._job()
        except Exception as exc:
            _logger.warning("[FETCH-WORKER] Query failed: %s", exc)
            self.signals.failed.emit(exc)
            return
        self.signals.succeeded.emit(result)


class _Receiver(QObject):
    """Lives on the GUI thread so queued signal deliveries land there."""

    def __init__(self, on_success: SuccessCallback, on_failure: FailureCallback, owner: QtFetchRunner) -> None:
        super().__init__()
        self._on_success = on_success
        self._on_failure = on_failure
        self._owner = owner

    @Slot(object)
    def succeeded(self, result: object) -> None:
        self._owner._release(self)
        self._on_success(result)

    @Slot(object)
    def failed(self, exc: object) -> None:
        self._owner._release(self)
        self._on_failure(exc)


class QtFetchRunner:
    """:class:`FetchRunner` backed by a Qt thread pool.

    Construct it on the GUI thread; callbacks are delivered there through
    queued signal connections.
    """

    def __init__(self, pool: Optional[QThreadPool] = None) -> None:
        self._pool = pool or QThreadPool.globalInstance()
        self._receivers: set[_Receiver] = set()

    def submit(self, job: Job, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        receiver = _Receiver(on_success, on_failure, self)
        self._receivers.add(receiver)
        worker = _FetchWorker(job)
        worker.signals.succeeded.connect(receiver.succeeded)
        worker.signals.failed.connect(receiver.failed)
        self._pool.start(worker)

    @property
    def pending(self) -> int:
        return len(self._receivers)

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)

    def _release(self, receiver: _Receiver) -> None:
        self._receivers.discard(receiver)
