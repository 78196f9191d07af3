from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.adapters.api.schemas.common import BusSummarySchema

FreshnessLiteral = Literal["recent", "active", "stale"]


class LocationUpdateRequestSchema(BaseModel):
    """Driver-app ping. Accepts the legacy camelCase field names."""

    model_config = ConfigDict(populate_by_name=True)

    vehicle_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("vehicleId", "busId", "vehicle_id"),
    )
    route_id: str | None = Field(
        default=None, validation_alias=AliasChoices("routeId", "route_id")
    )
    latitude: float
    longitude: float
    speed: float | None = None
    heading: float | None = None
    accuracy: float | None = None
    timestamp: datetime | None = None


class LocationReadingSchema(BaseModel):
    vehicle_id: str
    route_id: str | None = None
    latitude: float
    longitude: float
    speed_kmh: float
    heading_deg: float
    accuracy_m: float | None = None
    captured_at: datetime
    recorded_at: datetime


class LiveLocationSchema(BaseModel):
    location: LocationReadingSchema
    freshness: FreshnessLiteral
    is_recent: bool
    is_stale: bool
    age_seconds: float
    last_update_minutes: int


class RouteBusSchema(BaseModel):
    vehicle_id: str
    assigned: bool
    bus: BusSummarySchema | None = None
    live: LiveLocationSchema | None = None
    freshness: FreshnessLiteral | None = None


class RouteActiveBusesSchema(BaseModel):
    route_id: str
    route_name: str | None = None
    buses: list[RouteBusSchema]
    count: int
    live_count: int


class AreaBusSchema(BaseModel):
    live: LiveLocationSchema
    bus: BusSummarySchema | None = None
    distance_km: float | None = None


class AreaActiveBusesSchema(BaseModel):
    latitude: float | None = None
    longitude: float | None = None
    radius_km: float | None = None
    buses: list[AreaBusSchema]
    count: int


class TrackingStatsSchema(BaseModel):
    total_tracked_buses: int
    currently_active_buses: int
    inactive_buses: int
    by_freshness: dict[FreshnessLiteral, int]
    last_updated: datetime
