from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from src.app.ports.output import ILocationStore, IVehicleRepository
from src.app.services.ingest_guard import IngestGuard, NoopIngestGuard
from src.domain.algorithms.freshness import DEFAULT_POLICY, FreshnessPolicy
from src.domain.algorithms.geo_utils import (
    haversine_distance_m,
    initial_bearing_deg,
    normalize_heading,
)
from src.domain.exceptions import InvalidReading
from src.domain.models import Coordinate, LocationReading, TrackedLocation

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # Devices without a zone are assumed to report UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _check_non_negative(name: str, value: float | None) -> float | None:
    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise InvalidReading(f"Invalid {name}: {value}")
    return value


@dataclass(slots=True)
class LiveLocationTracker:
    """Turns raw GPS pings into stored, motion-annotated readings.

    - Speed/heading are derived from the previous reading unless the device
      reported them.
    - Point queries always return the latest reading; freshness is attached
      as metadata and never used to hide it.
    """

    location_store: ILocationStore
    vehicle_repository: IVehicleRepository | None = None
    freshness_policy: FreshnessPolicy = DEFAULT_POLICY
    ingest_guard: IngestGuard = field(default_factory=NoopIngestGuard)
    clock: Callable[[], datetime] = utcnow

    def ingest(
        self,
        *,
        vehicle_id: str,
        latitude: float,
        longitude: float,
        captured_at: datetime | None = None,
        reported_speed: float | None = None,
        reported_heading: float | None = None,
        accuracy: float | None = None,
        route_id: str | None = None,
    ) -> LocationReading:
        vehicle_id = (vehicle_id or "").strip()
        if not vehicle_id:
            raise InvalidReading("vehicle_id is required")

        coordinate = Coordinate(latitude=float(latitude), longitude=float(longitude))
        speed = _check_non_negative("speed", reported_speed)
        accuracy = _check_non_negative("accuracy", accuracy)
        if reported_heading is not None and not math.isfinite(float(reported_heading)):
            raise InvalidReading(f"Invalid heading: {reported_heading}")

        now = self.clock()
        captured_at = as_utc(captured_at) if captured_at is not None else now

        with self.ingest_guard.hold(vehicle_id):
            previous = self.location_store.get(vehicle_id)

            derived_speed: float | None = None
            derived_heading: float | None = None
            if previous is not None:
                elapsed_s = (captured_at - previous.captured_at).total_seconds()
                if elapsed_s > 0:
                    dist_m = haversine_distance_m(previous.coordinate, coordinate)
                    derived_speed = dist_m / elapsed_s * 3.6
                    derived_heading = initial_bearing_deg(
                        previous.coordinate, coordinate
                    )

            if speed is None:
                speed = derived_speed if derived_speed is not None else 0.0

            if reported_heading is not None:
                heading = normalize_heading(float(reported_heading))
            elif derived_heading is not None:
                heading = derived_heading
            else:
                heading = 0.0

            if route_id is None:
                route_id = self._fallback_route_id(vehicle_id, previous)

            reading = LocationReading(
                vehicle_id=vehicle_id,
                route_id=route_id,
                coordinate=coordinate,
                speed_kmh=speed,
                heading_deg=heading,
                accuracy_m=accuracy,
                captured_at=captured_at,
                recorded_at=now,
            )
            self.location_store.put(vehicle_id, reading)

        logger.debug(
            "Location ingested",
            extra={
                "vehicle_id": vehicle_id,
                "route_id": route_id,
                "speed_kmh": round(reading.speed_kmh, 2),
            },
        )
        return reading

    def _fallback_route_id(
        self, vehicle_id: str, previous: LocationReading | None
    ) -> str | None:
        if previous is not None and previous.route_id:
            return previous.route_id
        if self.vehicle_repository is None:
            return None
        vehicle = self.vehicle_repository.get(vehicle_id)
        return vehicle.assigned_route_id if vehicle is not None else None

    def annotate(
        self, reading: LocationReading, *, now: datetime | None = None
    ) -> TrackedLocation:
        now = now or self.clock()
        age_s = self.freshness_policy.age_s(reading.captured_at, now)
        return TrackedLocation(
            reading=reading,
            age_s=age_s,
            freshness=self.freshness_policy.classify(age_s),
        )

    def get_current(self, vehicle_id: str) -> TrackedLocation | None:
        reading = self.location_store.get(vehicle_id)
        if reading is None:
            return None
        return self.annotate(reading)

    def list_current(self) -> tuple[TrackedLocation, ...]:
        now = self.clock()
        return tuple(
            self.annotate(r, now=now) for r in self.location_store.get_all().values()
        )

    def stop_tracking(self, vehicle_id: str) -> None:
        self.location_store.remove(vehicle_id)
        logger.info("Location tracking stopped", extra={"vehicle_id": vehicle_id})
