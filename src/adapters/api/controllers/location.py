from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from src.adapters.api.controllers.presenters import (
    bus_to_schema,
    reading_to_schema,
    tracked_to_schema,
)
from src.adapters.api.dependencies import (
    get_fleet_overview,
    get_route_matcher,
    get_tracker,
)
from src.adapters.api.schemas.location import (
    AreaActiveBusesSchema,
    AreaBusSchema,
    LiveLocationSchema,
    LocationReadingSchema,
    LocationUpdateRequestSchema,
    RouteActiveBusesSchema,
    RouteBusSchema,
    TrackingStatsSchema,
)
from src.app.services.fleet_overview_service import FleetOverviewService
from src.app.services.live_location_service import LiveLocationTracker
from src.app.services.route_matcher_service import RouteMatcher
from src.domain.models import Coordinate

router = APIRouter(prefix="/location", tags=["location"])


@router.post("/update", response_model=LocationReadingSchema)
def update_location(
    req: LocationUpdateRequestSchema,
    tracker: LiveLocationTracker = Depends(get_tracker),
) -> LocationReadingSchema:
    reading = tracker.ingest(
        vehicle_id=req.vehicle_id,
        latitude=req.latitude,
        longitude=req.longitude,
        captured_at=req.timestamp,
        reported_speed=req.speed,
        reported_heading=req.heading,
        accuracy=req.accuracy,
        route_id=req.route_id,
    )
    return reading_to_schema(reading)


@router.get("/live/{vehicle_id}", response_model=LiveLocationSchema)
def get_live_location(
    vehicle_id: str,
    tracker: LiveLocationTracker = Depends(get_tracker),
) -> LiveLocationSchema:
    tracked = tracker.get_current(vehicle_id)
    if tracked is None:
        raise HTTPException(
            status_code=404, detail="Live location not found for this bus"
        )
    return tracked_to_schema(tracked)


@router.delete("/live/{vehicle_id}", status_code=204)
def stop_tracking(
    vehicle_id: str,
    tracker: LiveLocationTracker = Depends(get_tracker),
) -> Response:
    tracker.stop_tracking(vehicle_id)
    return Response(status_code=204)


@router.get("/route/{route_id}/active", response_model=RouteActiveBusesSchema)
def get_route_active_buses(
    route_id: str,
    live_only: bool = Query(default=False),
    matcher: RouteMatcher = Depends(get_route_matcher),
) -> RouteActiveBusesSchema:
    statuses = matcher.buses_for_route(route_id)
    if live_only:
        statuses = tuple(s for s in statuses if s.is_live)

    route = matcher.route_repository.get(route_id)
    buses = [
        RouteBusSchema(
            vehicle_id=s.vehicle_id,
            assigned=s.assigned,
            bus=bus_to_schema(s.vehicle),
            live=tracked_to_schema(s.location) if s.location is not None else None,
            freshness=s.freshness.value if s.freshness is not None else None,
        )
        for s in statuses
    ]
    return RouteActiveBusesSchema(
        route_id=route_id,
        route_name=route.name if route is not None else None,
        buses=buses,
        count=len(buses),
        live_count=sum(1 for s in statuses if s.is_live),
    )


@router.get("/area/active", response_model=AreaActiveBusesSchema)
def get_area_active_buses(
    latitude: float | None = Query(default=None),
    longitude: float | None = Query(default=None),
    radius: float = Query(default=10.0),
    service: FleetOverviewService = Depends(get_fleet_overview),
) -> AreaActiveBusesSchema:
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=400, detail="Latitude and longitude must be given together"
        )

    center = None
    if latitude is not None and longitude is not None:
        center = Coordinate(latitude=latitude, longitude=longitude)

    found = service.active_in_area(center=center, radius_km=radius)
    return AreaActiveBusesSchema(
        latitude=latitude,
        longitude=longitude,
        radius_km=radius if center is not None else None,
        buses=[
            AreaBusSchema(
                live=tracked_to_schema(a.location),
                bus=bus_to_schema(a.vehicle),
                distance_km=a.distance_km,
            )
            for a in found
        ],
        count=len(found),
    )


@router.get("/stats", response_model=TrackingStatsSchema)
def get_tracking_stats(
    service: FleetOverviewService = Depends(get_fleet_overview),
) -> TrackingStatsSchema:
    stats = service.stats()
    return TrackingStatsSchema(
        total_tracked_buses=stats.total_tracked,
        currently_active_buses=stats.active,
        inactive_buses=stats.inactive,
        by_freshness={f.value: n for f, n in stats.by_freshness.items()},
        last_updated=stats.generated_at,
    )
