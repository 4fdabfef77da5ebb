"""DOM event handlers, event objects and the event locking environment."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from typing import Any, Callable

from .datahash import _hash_words, compute_hash

__all__ = ["DOMEvent", "DOMEventHandler", "DOM_EVENT_STUB", "EventEnv"]


@dataclass
class DOMEventHandler:
    """A method call performed to handle an event."""

    receiver_and_method_hash: int = 0
    method: Callable[..., Any] | None = None
    args: list[Any] = field(default_factory=list)

    def hash(self) -> int:
        """Hash of the receiver/method identity and the arguments; 0 when empty."""
        if self.method is None and not self.args:
            return 0
        words = [self.receiver_and_method_hash]
        words.extend(compute_hash(a) for a in self.args)
        return _hash_words(words)


class EventEnv:
    """Read/write lock shared by rendering and event handlers.

    Rendering holds the read lock; handlers that modify data hold the write
    lock.  ``unlock_render`` additionally posts a render request, without
    blocking, to the queue given at construction.
    """

    def __init__(self, render_requests: queue.Queue | None = None) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0
        self._render_requests = render_requests

    def lock(self) -> None:
        """Acquire the write lock."""
        with self._cond:
            self._writers_waiting += 1
            try:
                self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def unlock_only(self) -> None:
        """Release the write lock."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("unlock of unlocked EventEnv")
            self._writer = False
            self._cond.notify_all()

    def unlock_render(self) -> None:
        """Release the write lock and request a re-render."""
        self.unlock_only()
        self._request_render()

    def rlock(self) -> None:
        """Acquire a read lock."""
        with self._cond:
            self._cond.wait_for(
                lambda: not self._writer and self._writers_waiting == 0
            )
            self._readers += 1

    def runlock(self) -> None:
        """Release a read lock."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("read unlock of unlocked EventEnv")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def _request_render(self) -> None:
        if self._render_requests is None:
            return
        try:
            self._render_requests.put_nowait(True)
        except queue.Full:
            pass


class DOMEvent:
    """An event originating in the browser, wrapping the raw event object."""

    def __init__(
        self,
        *,
        js_event: Any = None,
        js_event_this: Any = None,
        event_env: EventEnv | None = None,
    ) -> None:
        self._js_event = js_event
        self._js_event_this = js_event_this
        self._event_env = event_env
        self.default_prevented = False

    def js_event(self) -> Any:
        """The raw event object, or None outside a browser."""
        return self._js_event

    def js_event_this(self) -> Any:
        """The element the event was attached to, or None outside a browser."""
        return self._js_event_this

    def request_render(self) -> None:
        """Ask the environment to re-render as soon as possible."""
        if self._event_env is not None:
            self._event_env._request_render()

    def prevent_default(self) -> None:
        """Mark the event's default action as prevented."""
        self.default_prevented = True

    def event_env(self) -> EventEnv | None:
        """The locking environment for this event, if any."""
        return self._event_env


DOM_EVENT_STUB = DOMEvent()
"""Placeholder argument meaning "substitute the actual incoming event"."""