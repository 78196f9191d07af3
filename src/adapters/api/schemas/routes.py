from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.adapters.api.schemas.common import BusSummarySchema, CoordinateSchema


class RouteSchema(BaseModel):
    id: str
    name: str
    route_number: str | None = None
    from_location: str
    to_location: str
    start_location: str | None = None
    end_location: str | None = None
    start_coordinate: CoordinateSchema | None = None
    end_coordinate: CoordinateSchema | None = None
    distance_km: float
    estimated_minutes: int
    assigned_vehicle_ids: list[str] = []
    is_active: bool


class MatchedRouteSchema(BaseModel):
    route: RouteSchema
    buses: list[BusSummarySchema] = []


class RouteSearchResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from")
    to: str
    routes: list[MatchedRouteSchema]
    count: int
