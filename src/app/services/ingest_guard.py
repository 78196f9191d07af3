from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Iterator


class IngestGuard(ABC):
    """Serializes the read-previous/compute/write cycle of an ingest.

    The tracker works without one: concurrent pings for the same vehicle can
    then derive speed and heading from a reading that was already replaced.
    """

    @abstractmethod
    def hold(self, vehicle_id: str) -> ContextManager[None]:
        raise NotImplementedError


class NoopIngestGuard(IngestGuard):
    def hold(self, vehicle_id: str) -> ContextManager[None]:
        return nullcontext()


@dataclass(slots=True)
class PerVehicleLockGuard(IngestGuard):
    """One in-process mutex per vehicle id.

    Only protects writers inside a single process; multi-node deployments
    still race through the shared store.
    """

    _guard: threading.Lock = field(default_factory=threading.Lock, init=False)
    _locks: dict[str, tuple[threading.Lock, int]] = field(
        default_factory=dict, init=False
    )

    @contextmanager
    def hold(self, vehicle_id: str) -> Iterator[None]:
        with self._guard:
            lock, users = self._locks.get(vehicle_id, (None, 0))
            if lock is None:
                lock = threading.Lock()
            self._locks[vehicle_id] = (lock, users + 1)

        try:
            with lock:
                yield
        finally:
            with self._guard:
                _, users = self._locks[vehicle_id]
                if users <= 1:
                    del self._locks[vehicle_id]
                else:
                    self._locks[vehicle_id] = (lock, users - 1)

    def active_keys(self) -> int:
        with self._guard:
            return len(self._locks)
