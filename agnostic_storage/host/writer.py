"""
Background write queue for host stores: one daemon thread drains queued write callables.
Callers return as soon as a write is queued; flush() blocks until the queue is empty.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_STOP = object()


class BackgroundWriter:
    """
    Single-threaded, FIFO write queue.

    Writes run in submission order. A failing write is logged and kept; the
    next flush() re-raises it so host I/O errors are not lost silently.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._error: Optional[BaseException] = None
        self._error_lock = threading.Lock()
        self._thread = threading.Thread(target=self._run, name=f"{name}-writer", daemon=True)
        self._closed = False
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, write: Callable[[], None]) -> None:
        if self._closed:
            raise RuntimeError(f"{self._name} writer is closed")
        self._queue.put(write)

    def flush(self) -> None:
        """Block until every queued write has run; re-raise the first failure, if any."""
        self._queue.join()
        with self._error_lock:
            err, self._error = self._error, None
        if err is not None:
            raise err

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._thread.join()
        with self._error_lock:
            err, self._error = self._error, None
        if err is not None:
            raise err

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                item()
            except Exception as exc:
                logger.warning("Background write failed on %s: %s", self._name, exc)
                with self._error_lock:
                    if self._error is None:
                        self._error = exc
            finally:
                self._queue.task_done()
