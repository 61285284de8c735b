"""Heartbeat -- a game clock driving three kinds of events.

Demonstrates:
- Creating a GameClock with a custom tick interval
- Recurring, one-shot and periodic events
- Speeding the clock up from inside a callback (deferred interval change)
- Stopping the clock from a callback

Run: python -m examples.heartbeat
"""

import threading

from tick_clock import ClockConfig, GameClock
from tick_clock.units import milliseconds


def main() -> None:
    print("=== Heartbeat ===\n")

    clock = GameClock(ClockConfig(tick_interval=milliseconds(200)))
    finished = threading.Event()

    # Runs on every tick.
    clock.register_recurring(
        "heartbeat", lambda: print(f"  tick {clock.tick_number}  ({clock.tick_interval:.2f}s)")
    )

    # Runs on the very first tick, then removes itself.
    clock.register_once("intro", lambda: print("  intro: the game begins"))

    # Every third tick, tighten the pace. The change lands after the tick.
    def speed_up() -> None:
        new_interval = max(milliseconds(50), clock.tick_interval / 2)
        print(f"  speed-up: next interval {new_interval:.2f}s")
        clock.change_interval(new_interval)

    clock.register_periodic("speed-up", 3, speed_up)

    # End the demo on tick 12.
    def game_over() -> None:
        if clock.tick_number >= 12:
            print("  game over")
            clock.stop()
            finished.set()

    clock.register_recurring("game-over", game_over)

    clock.start()
    finished.wait(timeout=10.0)
    clock.stop()

    print(f"\nDone. Clock stopped at tick {clock.tick_number}.")


if __name__ == "__main__":
    main()
