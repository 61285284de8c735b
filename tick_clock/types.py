"""Shared type aliases and exceptions for the tick clock."""

from __future__ import annotations

from typing import Callable

Action = Callable[[], object]
ErrorHandler = Callable[[str, Exception], None]


class InvalidIntervalError(ValueError):
    """Raised for a non-positive tick interval or periodic interval."""

    def __init__(self, interval: object, message: str) -> None:
        self.interval = interval
        super().__init__(message)


class DispatchError(Exception):
    """Raised after a dispatch step in which one or more callbacks failed.

    Every event in the step still ran; ``failures`` holds the ``(key, exc)``
    pairs in the order they occurred.
    """

    def __init__(self, failures: list[tuple[str, Exception]]) -> None:
        self.failures = failures
        keys = ", ".join(repr(key) for key, _ in failures)
        super().__init__(f"{len(failures)} event(s) failed during dispatch: {keys}")
