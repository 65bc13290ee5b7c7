"""Fire-and-forget audit hand-off. A daemon worker drains a bounded queue into the real sink."""

import logging
import queue
import threading
from typing import Optional

from catalog.application.ports import AuditSink
from catalog.domain.models.audit import AuditRecord

_STOP = object()


class AuditDispatcher:
    """
    Implements the AuditSink protocol for the interceptor: append() only enqueues and
    returns, so a slow or failing sink never adds latency or failures to the caller.
    Queue overflow drops the record with a warning. Sink failures are logged and dropped.
    """

    def __init__(
        self,
        sink: AuditSink,
        max_queued: int = 1000,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._sink = sink
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=max_queued)
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._worker: threading.Thread | None = None
        self._closed = False
        self._dropped = 0

    @property
    def dropped_count(self) -> int:
        with self._lock:
            return self._dropped

    @property
    def is_closed(self) -> bool:
        return self._closed

    def _start_worker(self) -> None:
        # caller holds self._lock and has checked _closed
        if self._worker is None or not self._worker.is_alive():
            self._worker = threading.Thread(
                target=self._run_worker,
                name="audit-dispatcher",
                daemon=True,
            )
            self._worker.start()

    def _run_worker(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                try:
                    self._sink.append(item)
                except Exception as e:
                    self._logger.error(
                        "audit_dispatch_failed",
                        extra={"error": str(e), "error_type": type(e).__name__},
                    )
                    # Do not re-raise: audit failure never reaches the caller.
            finally:
                self._queue.task_done()

    def append(self, record: AuditRecord) -> None:
        """Enqueue without blocking. Never raises."""
        with self._lock:
            closed = self._closed
            queued = False
            if not closed:
                self._start_worker()
                try:
                    self._queue.put_nowait(record)
                    queued = True
                except queue.Full:
                    self._dropped += 1
        if closed:
            self._logger.warning("audit_dispatcher_closed", extra={"action": record.action.value})
        elif not queued:
            self._logger.warning(
                "audit_queue_full",
                extra={"action": record.action.value, "actor": record.actor},
            )

    def flush(self) -> None:
        """Block until every enqueued record has been handed to the sink."""
        if self._worker is None:
            return
        self._queue.join()

    def close(self, timeout: float | None = 5.0) -> None:
        """
        Drain, then stop the worker. Further appends are dropped. Appends and close
        share the lock, so nothing is enqueued behind the stop marker.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            worker = self._worker
        if worker is not None and worker.is_alive():
            self._queue.put(_STOP)
            worker.join(timeout)
