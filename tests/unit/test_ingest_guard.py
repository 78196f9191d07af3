from __future__ import annotations

import threading
import time

from src.app.services.ingest_guard import NoopIngestGuard, PerVehicleLockGuard


def test_noop_guard_is_reentrant() -> None:
    guard = NoopIngestGuard()
    with guard.hold("V1"):
        with guard.hold("V1"):
            pass


def test_per_vehicle_guard_serializes_same_vehicle() -> None:
    guard = PerVehicleLockGuard()
    events: list[str] = []
    entered = threading.Event()

    def first() -> None:
        with guard.hold("V1"):
            entered.set()
            time.sleep(0.05)
            events.append("first-done")

    def second() -> None:
        entered.wait()
        with guard.hold("V1"):
            events.append("second")

    threads = [threading.Thread(target=first), threading.Thread(target=second)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=2)

    assert events == ["first-done", "second"]
    assert guard.active_keys() == 0


def test_per_vehicle_guard_does_not_block_other_vehicles() -> None:
    guard = PerVehicleLockGuard()
    with guard.hold("V1"):
        done = threading.Event()

        def other() -> None:
            with guard.hold("V2"):
                done.set()

        t = threading.Thread(target=other)
        t.start()
        assert done.wait(timeout=1)
        t.join(timeout=1)
        assert guard.active_keys() == 1

    assert guard.active_keys() == 0


def test_per_vehicle_guard_releases_on_error() -> None:
    guard = PerVehicleLockGuard()
    try:
        with guard.hold("V1"):
            raise ValueError("boom")
    except ValueError:
        pass

    assert guard.active_keys() == 0
    with guard.hold("V1"):
        pass
