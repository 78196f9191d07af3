from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.controllers.presenters import bus_to_schema
from src.adapters.api.dependencies import get_route_matcher
from src.adapters.api.schemas.common import BusSummarySchema, CoordinateSchema
from src.adapters.api.schemas.routes import (
    MatchedRouteSchema,
    RouteSchema,
    RouteSearchResponseSchema,
)
from src.app.services.route_matcher_service import RouteMatcher
from src.domain.models import Coordinate, Route

router = APIRouter(prefix="/routes", tags=["routes"])


def _coordinate(c: Coordinate | None) -> CoordinateSchema | None:
    if c is None:
        return None
    return CoordinateSchema(latitude=c.latitude, longitude=c.longitude)


def _route_to_schema(route: Route) -> RouteSchema:
    return RouteSchema(
        id=route.id,
        name=route.name,
        route_number=route.route_number,
        from_location=route.from_location,
        to_location=route.to_location,
        start_location=route.start_location,
        end_location=route.end_location,
        start_coordinate=_coordinate(route.start_coordinate),
        end_coordinate=_coordinate(route.end_coordinate),
        distance_km=route.distance_km,
        estimated_minutes=route.estimated_minutes,
        assigned_vehicle_ids=list(route.assigned_vehicle_ids),
        is_active=route.is_active,
    )


@router.get("/search", response_model=RouteSearchResponseSchema)
def search_routes(
    from_: str = Query(..., alias="from", min_length=1),
    to: str = Query(..., min_length=1),
    matcher: RouteMatcher = Depends(get_route_matcher),
) -> RouteSearchResponseSchema:
    matches = matcher.find_routes_between(from_, to)
    routes = [
        MatchedRouteSchema(
            route=_route_to_schema(m.route),
            buses=[
                b for b in (bus_to_schema(v) for v in m.vehicles) if b is not None
            ],
        )
        for m in matches
    ]
    return RouteSearchResponseSchema(
        from_=from_, to=to, routes=routes, count=len(routes)
    )
