"""Manual loop -- driving the clock from your own frame loop.

Demonstrates:
- Calling tick() from a host loop instead of the background ticker
- Registering and unregistering events mid-run
- Handling callback failures with an on_error handler

Run: python -m examples.manual_loop
"""

from tick_clock import GameClock


def main() -> None:
    print("=== Manual loop ===\n")

    errors: list[str] = []
    clock = GameClock(on_error=lambda key, exc: errors.append(f"{key}: {exc}"))

    spawned = {"count": 0}

    def spawn_wave() -> None:
        spawned["count"] += 1
        print(f"  [tick {clock.tick_number}] wave {spawned['count']} spawned")
        if spawned["count"] == 3:
            clock.unregister("waves")

    def flaky() -> None:
        raise RuntimeError("sensor offline")

    clock.register_periodic("waves", 2, spawn_wave, fire_immediately=True)
    clock.register_once("flaky", flaky)

    for _frame in range(8):
        clock.tick()

    print(f"\n  waves spawned: {spawned['count']}")
    print(f"  errors: {errors}")


if __name__ == "__main__":
    main()
