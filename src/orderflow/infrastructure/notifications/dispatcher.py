"""Queue-backed event dispatcher (the notification channel).

``publish()`` only enqueues, so the engine never waits on observers.  A
single background thread drains the queue and hands each event to every
subscriber registered at that moment.  There is no backlog for late
subscribers and no retry: a subscriber that raises is logged and
skipped, the others still get the event.
"""

from __future__ import annotations

import itertools
import logging
import queue
import threading
from typing import Any, Callable

from orderflow.domain.model.events import Event
from orderflow.domain.notification import EventPublisher

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, dict[str, Any]], None]

_STOP = object()


class QueueEventDispatcher(EventPublisher):

    def __init__(self, maxsize: int = 1000) -> None:
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=maxsize)
        self._subscribers: dict[int, Subscriber] = {}
        self._lock = threading.Lock()
        self._tokens = itertools.count(1)
        self._thread: threading.Thread | None = None

    # --- EventPublisher interface ---------------------------------------------

    def publish(self, event: Event) -> None:
        try:
            self._queue.put_nowait(event)
        except queue.Full:
            logger.warning("event queue full, dropping event", extra={"event": event.name})

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> int:
        with self._lock:
            token = next(self._tokens)
            self._subscribers[token] = callback
        return token

    def unsubscribe(self, token: int) -> None:
        with self._lock:
            self._subscribers.pop(token, None)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    # --- Lifecycle ------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._thread = threading.Thread(
            target=self._run, name="orderflow-events", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float = 5.0) -> None:
        if not self.running:
            return
        self._queue.put(_STOP)
        assert self._thread is not None
        self._thread.join(timeout)
        self._thread = None

    def flush(self) -> None:
        """Block until every event queued so far has been delivered.

        Without a running worker the pending events are delivered on the
        calling thread.
        """
        if self.running:
            self._queue.join()
            return
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return
            try:
                if item is not _STOP:
                    self._deliver(item)
            finally:
                self._queue.task_done()

    # --- Internal helpers -----------------------------------------------------

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._deliver(item)
            finally:
                self._queue.task_done()

    def _deliver(self, event: Event) -> None:
        with self._lock:
            subscribers = list(self._subscribers.values())
        payload = event.payload()
        for callback in subscribers:
            try:
                callback(event.name, payload)
            except Exception:
                logger.exception("event subscriber failed", extra={"event": event.name})
