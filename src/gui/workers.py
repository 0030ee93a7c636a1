"""Background workers that keep storage calls off the GUI thread."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

logger = logging.getLogger(__name__)


class StorageWorker(QThread):
    """Runs one storage callable and reports the outcome with its job id."""

    completed = pyqtSignal(int, object)  # job_id, result
    error = pyqtSignal(int, object)  # job_id, exception

    def __init__(self, job_id: int, task: Callable[[], Any], parent: Optional[QObject] = None):
        super().__init__(parent)
        self.job_id = job_id
        self._task = task

    def run(self):
        try:
            result = self._task()
        except Exception as exc:
            self.error.emit(self.job_id, exc)
            return
        self.completed.emit(self.job_id, result)


class QtTaskRunner(QObject):
    """Submits storage calls to worker threads.

    The runner lives on the GUI thread, so the queued ``completed`` and
    ``error`` signals invoke the callbacks there.
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._callbacks: Dict[int, Tuple[Callable[[Any], None], Callable[[Exception], None]]] = {}
        self._next_job_id = 0

    def submit(
        self,
        task: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        self._next_job_id += 1
        job_id = self._next_job_id
        self._callbacks[job_id] = (on_success, on_error)

        # Parented to the runner so the thread outlives the Python reference
        worker = StorageWorker(job_id, task, parent=self)
        worker.completed.connect(self._on_completed)
        worker.error.connect(self._on_error)
        worker.finished.connect(worker.deleteLater)
        worker.start()

    def pending_jobs(self) -> int:
        return len(self._callbacks)

    @pyqtSlot(int, object)
    def _on_completed(self, job_id: int, result: Any) -> None:
        callbacks = self._callbacks.pop(job_id, None)
        if callbacks is None:
            return
        on_success, _ = callbacks
        on_success(result)

    @pyqtSlot(int, object)
    def _on_error(self, job_id: int, error: Exception) -> None:
        callbacks = self._callbacks.pop(job_id, None)
        if callbacks is None:
            logger.warning("Error for unknown job %s: %s", job_id, error)
            return
        _, on_error = callbacks
        on_error(error)

    def shutdown(self, timeout_ms: int = 5000) -> None:
        """Block until running workers finish; pending callbacks are dropped."""
        self._callbacks.clear()
        for worker in self.findChildren(StorageWorker):
            worker.wait(timeout_ms)
