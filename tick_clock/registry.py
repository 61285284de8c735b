"""Keyed event registry with per-step snapshot dispatch."""
from __future__ import annotations

import logging
import threading
from typing import Iterator

from tick_clock.events import Event, OneShot, Periodic, Recurring
from tick_clock.types import Action, DispatchError, ErrorHandler

logger = logging.getLogger(__name__)


class EventRegistry:
    """Maps keys to events and runs one dispatch step at a time.

    Registering an existing key replaces the previous event. All mutation and
    dispatch happen under ``lock``, which is re-entrant so callbacks may
    register and unregister while a step is running.
    """

    def __init__(self, on_error: ErrorHandler | None = None) -> None:
        self._events: dict[str, Event] = {}
        self._on_error = on_error
        self.lock = threading.RLock()

    # --- Registration ---

    def register(self, event: Event) -> None:
        with self.lock:
            self._events[event.key] = event
        logger.debug("registered %s event %r", type(event).__name__, event.key)

    def register_recurring(self, key: str, action: Action) -> None:
        self.register(Recurring(key=key, action=action))

    def register_once(self, key: str, action: Action) -> None:
        self.register(OneShot(key=key, action=action))

    def register_periodic(
        self, key: str, interval: int, action: Action, fire_immediately: bool = False
    ) -> None:
        """Register ``action`` to fire every ``interval`` dispatch steps.

        Raises InvalidIntervalError if ``interval`` is not an int >= 1.
        """
        self.register(
            Periodic(
                key=key,
                action=action,
                interval=interval,
                fire_immediately=fire_immediately,
            )
        )

    def unregister(self, key: str) -> Action | None:
        """Remove the event under ``key`` and return its action, or None."""
        with self.lock:
            event = self._events.pop(key, None)
        if event is None:
            return None
        logger.debug("unregistered event %r", key)
        return event.action

    def clear(self) -> None:
        with self.lock:
            self._events.clear()

    # --- Queries ---

    def get(self, key: str) -> Event | None:
        with self.lock:
            return self._events.get(key)

    def keys(self) -> list[str]:
        with self.lock:
            return list(self._events)

    def __contains__(self, key: object) -> bool:
        with self.lock:
            return key in self._events

    def __len__(self) -> int:
        with self.lock:
            return len(self._events)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # --- Dispatch ---

    def dispatch(self) -> None:
        """Run one dispatch step over the entries present when it begins.

        Entries added during the step wait for the next one. An entry removed
        or replaced earlier in the step is skipped. A failure raised by the
        ``on_error`` handler itself is collected into the DispatchError.
        """
        failures: list[tuple[str, Exception]] = []
        with self.lock:
            snapshot = list(self._events.items())
            for key, event in snapshot:
                if self._events.get(key) is not event:
                    continue
                try:
                    event.execute()
                except Exception as exc:
                    if self._on_error is None:
                        failures.append((key, exc))
                    else:
                        self._report(key, exc, failures)
                finally:
                    if event.expired and self._events.get(key) is event:
                        del self._events[key]
        if failures:
            raise DispatchError(failures)

    def _report(
        self, key: str, exc: Exception, failures: list[tuple[str, Exception]]
    ) -> None:
        try:
            self._on_error(key, exc)
        except Exception as handler_exc:
            failures.append((key, handler_exc))
