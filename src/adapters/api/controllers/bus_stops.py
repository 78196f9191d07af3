from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_stop_finder
from src.adapters.api.schemas.bus_stops import (
    NearbyStopSchema,
    NearbyStopsResponseSchema,
    StopSchema,
    StopSearchResponseSchema,
)
from src.adapters.api.schemas.common import CoordinateSchema
from src.app.services.stop_proximity_service import StopProximityFinder
from src.domain.models import Coordinate, Stop

router = APIRouter(prefix="/bus-stops", tags=["bus-stops"])


def _stop_to_schema(stop: Stop) -> StopSchema:
    return StopSchema(
        id=stop.id,
        name=stop.name,
        coordinate=CoordinateSchema(
            latitude=stop.coordinate.latitude, longitude=stop.coordinate.longitude
        ),
        address=stop.address,
        city=stop.city,
        amenities=list(stop.amenities),
    )


@router.get("/nearby", response_model=NearbyStopsResponseSchema)
def get_nearby_stops(
    latitude: float = Query(...),
    longitude: float = Query(...),
    radius: float = Query(default=5.0),
    finder: StopProximityFinder = Depends(get_stop_finder),
) -> NearbyStopsResponseSchema:
    center = Coordinate(latitude=latitude, longitude=longitude)
    found = finder.nearby(center=center, radius_km=radius)
    return NearbyStopsResponseSchema(
        location=CoordinateSchema(latitude=latitude, longitude=longitude),
        radius_km=radius,
        stops=[
            NearbyStopSchema(
                stop=_stop_to_schema(n.stop), distance_km=round(n.distance_km, 3)
            )
            for n in found
        ],
        count=len(found),
    )


@router.get("/search", response_model=StopSearchResponseSchema)
def search_stops(
    query: str = Query(..., min_length=1),
    finder: StopProximityFinder = Depends(get_stop_finder),
) -> StopSearchResponseSchema:
    found = finder.search(query)
    return StopSearchResponseSchema(
        query=query, stops=[_stop_to_schema(s) for s in found], count=len(found)
    )
