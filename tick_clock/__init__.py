"""tick-clock - A tick-driven event scheduler for games and other real-time loops."""

from tick_clock.clock import GameClock
from tick_clock.config import DEFAULT_TICK_INTERVAL, ClockConfig
from tick_clock.events import Event, OneShot, Periodic, Recurring
from tick_clock.registry import EventRegistry
from tick_clock.types import DispatchError, InvalidIntervalError
from tick_clock.units import days, hours, milliseconds, minutes, seconds, to_seconds

__all__ = [
    "GameClock",
    "ClockConfig",
    "DEFAULT_TICK_INTERVAL",
    "EventRegistry",
    "Event",
    "Recurring",
    "OneShot",
    "Periodic",
    "DispatchError",
    "InvalidIntervalError",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "to_seconds",
]
