from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Mapping

from src.adapters.persistence.subscribers import ListenerRegistry
from src.app.ports.output import ILocationStore, LocationListener
from src.domain.models import LocationReading


@dataclass(slots=True)
class InMemoryLocationStore(ILocationStore):
    """Process-local store for tests and single-node deployments."""

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)
    _readings: dict[str, LocationReading] = field(default_factory=dict, init=False)
    _listeners: ListenerRegistry = field(default_factory=ListenerRegistry, init=False)

    def put(self, vehicle_id: str, reading: LocationReading) -> None:
        with self._lock:
            self._readings[vehicle_id] = reading
        self._listeners.notify(vehicle_id, reading)

    def get(self, vehicle_id: str) -> LocationReading | None:
        with self._lock:
            return self._readings.get(vehicle_id)

    def get_all(self) -> Mapping[str, LocationReading]:
        with self._lock:
            return dict(self._readings)

    def remove(self, vehicle_id: str) -> None:
        with self._lock:
            existed = self._readings.pop(vehicle_id, None) is not None
        if existed:
            self._listeners.notify(vehicle_id, None)

    def subscribe(self, listener: LocationListener) -> Callable[[], None]:
        return self._listeners.add(listener)
