"""Tests that run the real background ticker with short intervals."""

import threading
import time

from tick_clock import ClockConfig, GameClock

_FAST = ClockConfig(tick_interval=0.01, thread_name="tick-clock-test")


def _wait_until(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_ticker_dispatches_recurring_events():
    clock = GameClock(_FAST)
    done = threading.Event()
    calls = []

    def action():
        calls.append(threading.current_thread().name)
        if len(calls) >= 3:
            done.set()

    clock.register_recurring("r", action)
    clock.start()
    try:
        assert done.wait(2.0)
    finally:
        clock.stop()

    assert all(name == "tick-clock-test" for name in calls)


def test_no_dispatch_after_stop():
    clock = GameClock(_FAST)
    calls = []
    clock.register_recurring("r", lambda: calls.append(1))
    clock.start()
    assert _wait_until(lambda: len(calls) >= 2)

    clock.stop()
    count = len(calls)
    time.sleep(0.1)
    assert len(calls) == count


def test_once_from_ticker_fires_once():
    clock = GameClock(_FAST)
    calls = []
    clock.register_once("intro", lambda: calls.append(1))
    clock.start()
    try:
        assert _wait_until(lambda: clock.tick_number >= 4)
    finally:
        clock.stop()

    assert calls == [1]
    assert not clock.is_registered("intro")


def test_deferred_change_from_ticker_thread():
    clock = GameClock(_FAST)
    clock.start()
    try:
        clock.change_interval(0.02)
        assert _wait_until(lambda: clock.tick_interval == 0.02)
        assert clock.is_running
        ticks = clock.tick_number
        assert _wait_until(lambda: clock.tick_number > ticks + 2)
    finally:
        clock.stop()


def test_immediate_change_from_inside_callback():
    clock = GameClock(_FAST)
    clock.register_once(
        "speed-down", lambda: clock.change_interval(0.02, apply_after_next_tick=False)
    )
    clock.start()
    try:
        assert _wait_until(lambda: clock.tick_interval == 0.02)
        ticks = clock.tick_number
        assert _wait_until(lambda: clock.tick_number > ticks + 2)
    finally:
        clock.stop()


def test_ticker_survives_failing_callback(caplog):
    clock = GameClock(_FAST)
    calls = []

    def boom():
        raise RuntimeError("boom")

    clock.register_recurring("bad", boom)
    clock.register_recurring("good", lambda: calls.append(1))
    with caplog.at_level("ERROR", logger="tick_clock.clock"):
        clock.start()
        try:
            assert _wait_until(lambda: len(calls) >= 3)
        finally:
            clock.stop()

    assert "dispatch step" in caplog.text
