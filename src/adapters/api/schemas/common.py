from __future__ import annotations

from pydantic import BaseModel


class CoordinateSchema(BaseModel):
    latitude: float
    longitude: float


class BusSummarySchema(BaseModel):
    bus_id: str
    bus_number: str
    license_plate: str | None = None
    name: str | None = None
