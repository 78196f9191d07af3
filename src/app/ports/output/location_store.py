from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Mapping

from src.domain.models import LocationReading

# Called with (vehicle_id, reading); reading is None after a removal.
LocationListener = Callable[[str, LocationReading | None], None]


class ILocationStore(ABC):
    """Real-time key-value port holding the latest reading per vehicle.

    Writes are last-write-wins per vehicle id. Implementations raise
    `StorageUnavailable` when the backend cannot be reached in time.
    """

    @abstractmethod
    def put(self, vehicle_id: str, reading: LocationReading) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, vehicle_id: str) -> LocationReading | None:
        raise NotImplementedError

    @abstractmethod
    def get_all(self) -> Mapping[str, LocationReading]:
        raise NotImplementedError

    @abstractmethod
    def remove(self, vehicle_id: str) -> None:
        """Delete the reading for a vehicle. Removing an absent key is a no-op."""

    @abstractmethod
    def subscribe(self, listener: LocationListener) -> Callable[[], None]:
        """Register a change listener and return a callable that unregisters it."""
