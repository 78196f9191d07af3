from __future__ import annotations

from pydantic import BaseModel

from src.adapters.api.schemas.common import CoordinateSchema


class StopSchema(BaseModel):
    id: str
    name: str
    coordinate: CoordinateSchema
    address: str = ""
    city: str | None = None
    amenities: list[str] = []


class NearbyStopSchema(BaseModel):
    stop: StopSchema
    distance_km: float


class NearbyStopsResponseSchema(BaseModel):
    location: CoordinateSchema
    radius_km: float
    stops: list[NearbyStopSchema]
    count: int


class StopSearchResponseSchema(BaseModel):
    query: str
    stops: list[StopSchema]
    count: int
