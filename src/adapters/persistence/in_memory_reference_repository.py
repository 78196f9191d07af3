from __future__ import annotations

from dataclasses import dataclass, field

from src.app.ports.output import IRouteRepository, IStopRepository, IVehicleRepository
from src.domain.models import Route, Stop, Vehicle


@dataclass(slots=True)
class InMemoryRouteRepository(IRouteRepository):
    routes: tuple[Route, ...] = ()
    _by_id: dict[str, Route] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {r.id: r for r in self.routes}

    def get(self, route_id: str) -> Route | None:
        return self._by_id.get(route_id)

    def list_active(self) -> tuple[Route, ...]:
        return tuple(r for r in self.routes if r.is_active)


@dataclass(slots=True)
class InMemoryStopRepository(IStopRepository):
    stops: tuple[Stop, ...] = ()
    _by_id: dict[str, Stop] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {s.id: s for s in self.stops}

    def get(self, stop_id: str) -> Stop | None:
        return self._by_id.get(stop_id)

    def list_all(self) -> tuple[Stop, ...]:
        return self.stops


@dataclass(slots=True)
class InMemoryVehicleRepository(IVehicleRepository):
    vehicles: tuple[Vehicle, ...] = ()
    _by_id: dict[str, Vehicle] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {v.id: v for v in self.vehicles}

    def get(self, vehicle_id: str) -> Vehicle | None:
        return self._by_id.get(vehicle_id)
