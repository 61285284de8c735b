"""Clock configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TICK_INTERVAL = 0.6


@dataclass(frozen=True)
class ClockConfig:
    """Immutable configuration for a GameClock.

    Attributes:
        tick_interval: Seconds between dispatch steps when the clock starts.
        thread_name: Name given to the background ticker thread.
        daemon: Whether the ticker thread is a daemon thread.
    """

    tick_interval: float = DEFAULT_TICK_INTERVAL
    thread_name: str = "tick-clock"
    daemon: bool = True
