"""Theme event bus.

Synchronous publish/subscribe used by the theme store to announce registry
and activation changes. Handlers run in subscription order on the caller's
thread; a failing handler is recorded and logged and never interrupts the
publish cycle or the store operation that triggered it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "ThemeEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

_logger = logging.getLogger(__name__)


class ThemeEvent(str, Enum):
    THEME_CHANGED = "theme_changed"  # payload: {"theme_id", "requested_id", "fallback"}
    THEME_REGISTERED = "theme_registered"  # payload: {"theme_id", "builtin"}
    THEME_IMPORTED = "theme_imported"  # payload: {"theme_id"}
    THEME_DELETED = "theme_deleted"  # payload: {"theme_id"}


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | ThemeEvent) -> str:
    return name.value if isinstance(name, ThemeEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers are invoked while the lock is NOT held (snapshot first) so a
    handler can subscribe or unsubscribe without deadlock.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    # Subscription management ------------------------------------------
    def subscribe(
        self, name: str | ThemeEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = _key(name)
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                self._subs[sub.event] = [s for s in bucket if s is not sub]
                if not self._subs[sub.event]:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Publishing --------------------------------------------------------
    def publish(self, name: str | ThemeEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        done: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                self._errors.append((evt, exc))
                _logger.warning("handler for %s failed: %s", key, exc)
            else:
                if sub.once:
                    done.append(sub)
        for sub in done:
            self.unsubscribe(sub)
        return evt

    # Introspection -----------------------------------------------------
    def subscriber_count(self, name: str | ThemeEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    def list_events(self) -> list[str]:
        with self._lock:
            return list(self._subs.keys())

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
