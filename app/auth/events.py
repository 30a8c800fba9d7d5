"""
In-process session change notifications.

Login and logout publish a SessionEvent. Views that want to react (the
browser event stream) subscribe while they are active and must release the
subscription when they go away; a released listener is never called again.
"""
import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Literal

logger = logging.getLogger(__name__)

SessionEventKind = Literal["SIGNED_IN", "SIGNED_OUT"]


@dataclass(frozen=True)
class SessionEvent:
    kind: SessionEventKind
    user_id: uuid.UUID


Listener = Callable[[SessionEvent], None]


class Subscription:
    def __init__(self, bus: "SessionBus", key: int):
        self._bus = bus
        self._key = key
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._bus._remove(self._key)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()


class SessionBus:
    def __init__(self):
        self._lock = threading.Lock()
        self._listeners: Dict[int, Listener] = {}
        self._next_key = 0

    def subscribe(self, listener: Listener) -> Subscription:
        with self._lock:
            key = self._next_key
            self._next_key += 1
            self._listeners[key] = listener
        return Subscription(self, key)

    def _remove(self, key: int) -> None:
        with self._lock:
            self._listeners.pop(key, None)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def publish(self, event: SessionEvent) -> None:
        # Snapshot so listeners can unsubscribe while being notified
        with self._lock:
            snapshot = list(self._listeners.items())
        for key, listener in snapshot:
            with self._lock:
                if key not in self._listeners:
                    continue
            try:
                listener(event)
            except Exception:
                logger.exception("Session listener failed for %s", event.kind)


session_bus = SessionBus()
