from __future__ import annotations

from src.adapters.api.schemas.common import BusSummarySchema
from src.adapters.api.schemas.location import LiveLocationSchema, LocationReadingSchema
from src.domain.models import LocationReading, TrackedLocation, Vehicle


def reading_to_schema(reading: LocationReading) -> LocationReadingSchema:
    return LocationReadingSchema(
        vehicle_id=reading.vehicle_id,
        route_id=reading.route_id,
        latitude=reading.coordinate.latitude,
        longitude=reading.coordinate.longitude,
        speed_kmh=reading.speed_kmh,
        heading_deg=reading.heading_deg,
        accuracy_m=reading.accuracy_m,
        captured_at=reading.captured_at,
        recorded_at=reading.recorded_at,
    )


def tracked_to_schema(tracked: TrackedLocation) -> LiveLocationSchema:
    return LiveLocationSchema(
        location=reading_to_schema(tracked.reading),
        freshness=tracked.freshness.value,
        is_recent=tracked.is_recent,
        is_stale=tracked.is_stale,
        age_seconds=round(tracked.age_s, 1),
        last_update_minutes=round(tracked.age_s / 60.0),
    )


def bus_to_schema(vehicle: Vehicle | None) -> BusSummarySchema | None:
    if vehicle is None:
        return None
    return BusSummarySchema(
        bus_id=vehicle.id,
        bus_number=vehicle.bus_number,
        license_plate=vehicle.license_plate,
        name=vehicle.name,
    )
