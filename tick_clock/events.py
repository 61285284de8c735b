"""Event variants: Recurring, OneShot and Periodic."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_clock.types import Action, InvalidIntervalError


@dataclass
class Event:
    """Base event. Subclasses decide when ``action`` runs."""

    key: str
    action: Action

    @property
    def expired(self) -> bool:
        """True once the event should leave the registry."""
        return False

    def execute(self) -> None:
        raise NotImplementedError


@dataclass
class Recurring(Event):
    """Runs its action on every dispatch step."""

    def execute(self) -> None:
        self.action()


@dataclass
class OneShot(Event):
    """Runs its action once. Expired from the moment it starts firing."""

    fired: bool = field(default=False, init=False)

    @property
    def expired(self) -> bool:
        return self.fired

    def execute(self) -> None:
        if self.fired:
            return
        self.fired = True
        self.action()


@dataclass
class Periodic(Event):
    """Runs its action every ``interval`` dispatch steps.

    ``elapsed`` counts steps since the last firing. With ``fire_immediately``
    it starts at ``interval - 1`` so the first step fires.
    """

    interval: int = 1
    fire_immediately: bool = False
    elapsed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise InvalidIntervalError(
                self.interval, f"interval must be an int, got {self.interval!r}"
            )
        if self.interval < 1:
            raise InvalidIntervalError(
                self.interval, f"interval must be >= 1, got {self.interval}"
            )
        if self.fire_immediately:
            self.elapsed = self.interval - 1

    def execute(self) -> None:
        self.elapsed += 1
        if self.elapsed >= self.interval:
            self.elapsed = 0
            self.action()
