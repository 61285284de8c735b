"""Time-unit helpers. Everything converts to seconds."""
from __future__ import annotations

SECONDS_PER_UNIT: dict[str, float] = {
    "millisecond": 0.001,
    "second": 1.0,
    "minute": 60.0,
    "hour": 3600.0,
    "day": 86400.0,
}


def milliseconds(value: float) -> float:
    return value / 1000


def seconds(value: float) -> float:
    return float(value)


def minutes(value: float) -> float:
    return value * 60


def hours(value: float) -> float:
    return value * 3600


def days(value: float) -> float:
    return value * 3600 * 24


ms = millisecond = milliseconds
second = seconds
minute = minutes
hour = hours
day = days


def to_seconds(value: float, unit: str) -> float:
    """Convert ``value`` expressed in ``unit`` to seconds.

    ``unit`` is one of the SECONDS_PER_UNIT names; a trailing "s" is accepted
    ("minutes"), as is "ms".
    """
    name = unit.lower()
    if name == "ms":
        name = "millisecond"
    elif name.endswith("s") and name[:-1] in SECONDS_PER_UNIT:
        name = name[:-1]
    try:
        factor = SECONDS_PER_UNIT[name]
    except KeyError:
        raise ValueError(
            f"Unknown time unit {unit!r}, expected one of {sorted(SECONDS_PER_UNIT)}"
        ) from None
    return value * factor
