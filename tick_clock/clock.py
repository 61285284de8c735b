"""GameClock - background ticker, lifecycle and interval changes."""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable

from tick_clock.config import ClockConfig
from tick_clock.registry import EventRegistry
from tick_clock.types import Action, ErrorHandler, InvalidIntervalError

logger = logging.getLogger(__name__)


def _check_interval(interval: float) -> float:
    if isinstance(interval, bool) or not isinstance(interval, (int, float)):
        raise InvalidIntervalError(interval, f"tick interval must be a number, got {interval!r}")
    if not math.isfinite(interval) or interval <= 0:
        raise InvalidIntervalError(interval, f"tick interval must be positive and finite, got {interval!r}")
    return float(interval)


class _Ticker:
    """One armed timer. Calls ``on_fire(self)`` every ``interval`` seconds."""

    def __init__(
        self,
        interval: float,
        on_fire: Callable[[_Ticker], None],
        name: str,
        daemon: bool,
    ) -> None:
        self._interval = interval
        self._on_fire = on_fire
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=daemon)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._cancelled.set()

    def _run(self) -> None:
        wait = self._interval
        while not self._cancelled.wait(wait):
            start = time.monotonic()
            self._on_fire(self)
            elapsed = time.monotonic() - start
            wait = max(0.0, self._interval - elapsed)


class GameClock:
    """Fires a dispatch step on its registry every ``tick_interval`` seconds.

    The clock can also be driven by hand with ``tick()`` / ``run(n)``, which
    is how hosts with their own frame loop (and the tests) use it.
    """

    def __init__(
        self,
        config: ClockConfig | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._config = config if config is not None else ClockConfig()
        self._tick_interval = _check_interval(self._config.tick_interval)
        self._pending_interval: float | None = None
        self._ticker: _Ticker | None = None
        self._tick_number = 0
        self._registry = EventRegistry(on_error=on_error)

    @property
    def config(self) -> ClockConfig:
        return self._config

    @property
    def registry(self) -> EventRegistry:
        return self._registry

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @property
    def pending_interval(self) -> float | None:
        """Interval waiting for the next dispatch step, if any."""
        return self._pending_interval

    @property
    def is_running(self) -> bool:
        return self._ticker is not None

    @property
    def tick_number(self) -> int:
        return self._tick_number

    # --- Lifecycle ---

    def start(self) -> None:
        with self._registry.lock:
            if self._ticker is not None:
                self._ticker.cancel()
            self._ticker = _Ticker(
                self._tick_interval,
                self._on_fire,
                name=self._config.thread_name,
                daemon=self._config.daemon,
            )
            self._ticker.start()
        logger.debug("clock started at %.3fs per tick", self._tick_interval)

    def stop(self) -> None:
        with self._registry.lock:
            if self._ticker is None:
                return
            self._ticker.cancel()
            self._ticker = None
            if self._pending_interval is not None:
                self._tick_interval = self._pending_interval
                self._pending_interval = None
        logger.debug("clock stopped at tick %d", self._tick_number)

    def change_interval(self, interval: float, apply_after_next_tick: bool = True) -> None:
        """Change the tick interval.

        While running, the change waits for the end of the next dispatch step
        unless ``apply_after_next_tick`` is False, in which case the timer is
        restarted right away and the current period is cut short.
        """
        interval = _check_interval(interval)
        with self._registry.lock:
            if self._ticker is None:
                self._tick_interval = interval
                logger.debug("tick interval set to %.3fs", interval)
            elif apply_after_next_tick:
                self._pending_interval = interval
                logger.debug("tick interval change to %.3fs deferred to next tick", interval)
            else:
                self._pending_interval = None
                self._restart(interval)

    def _restart(self, interval: float) -> None:
        self.stop()
        self._tick_interval = interval
        self.start()

    def __enter__(self) -> GameClock:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # --- Dispatch ---

    def tick(self) -> None:
        """Run one dispatch step on the calling thread.

        Raises DispatchError if callbacks failed and no error handler is set.
        """
        with self._registry.lock:
            self._tick_number += 1
            try:
                self._registry.dispatch()
            finally:
                self._apply_pending_interval()

    def run(self, n: int) -> None:
        for _ in range(n):
            self.tick()

    def _apply_pending_interval(self) -> None:
        interval = self._pending_interval
        if interval is None:
            return
        self._pending_interval = None
        if self._ticker is None:
            self._tick_interval = interval
        else:
            self._restart(interval)

    def _on_fire(self, ticker: _Ticker) -> None:
        with self._registry.lock:
            if ticker.cancelled:
                return
            try:
                self.tick()
            except Exception:
                logger.exception("dispatch step %d failed", self._tick_number)

    # --- Registration ---

    def register_recurring(self, key: str, action: Action) -> None:
        self._registry.register_recurring(key, action)

    def register_once(self, key: str, action: Action) -> None:
        self._registry.register_once(key, action)

    def register_periodic(
        self, key: str, interval: int, action: Action, fire_immediately: bool = False
    ) -> None:
        self._registry.register_periodic(key, interval, action, fire_immediately)

    def unregister(self, key: str) -> Action | None:
        return self._registry.unregister(key)

    def is_registered(self, key: str) -> bool:
        return key in self._registry
