from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Vehicle


class IVehicleRepository(ABC):
    """Document-store port for bus records."""

    @abstractmethod
    def get(self, vehicle_id: str) -> Vehicle | None:
        raise NotImplementedError

    def get_many(self, vehicle_ids: tuple[str, ...]) -> dict[str, Vehicle]:
        """Resolve several ids at once; unknown ids are left out of the result."""

        out: dict[str, Vehicle] = {}
        for vid in vehicle_ids:
            vehicle = self.get(vid)
            if vehicle is not None:
                out[vid] = vehicle
        return out
