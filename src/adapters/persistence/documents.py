"""Decoding of route/stop/bus documents into domain models.

Stored documents come from several generations of admin tooling, so field
names vary (`routeName` vs `name`, `startLocation` vs `fromLocation`,
`coordinates.latitude` vs `lat`). Both camelCase and snake_case keys are
accepted.
"""

from __future__ import annotations

from typing import Any, Mapping

from src.domain.models import Coordinate, Route, Stop, Vehicle


def _first(doc: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = doc.get(key)
        if value is not None and value != "":
            return value
    return None


def _str(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on", "active"}
    return bool(value)


def _str_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value if v)


def coordinate_from_doc(raw: Any) -> Coordinate | None:
    if not isinstance(raw, Mapping):
        return None
    lat = _first(raw, "latitude", "lat")
    lon = _first(raw, "longitude", "lng", "lon")
    if lat is None or lon is None:
        return None
    return Coordinate(latitude=float(lat), longitude=float(lon))


def coordinate_to_doc(coordinate: Coordinate | None) -> dict[str, float] | None:
    if coordinate is None:
        return None
    return {"latitude": coordinate.latitude, "longitude": coordinate.longitude}


def route_from_doc(doc: Mapping[str, Any]) -> Route:
    route_id = _str(_first(doc, "id", "routeId", "route_id"))
    start_location = _str(_first(doc, "startLocation", "start_location")) or None
    end_location = _str(_first(doc, "endLocation", "end_location")) or None
    # Older documents only carry the start/end names.
    from_location = _str(_first(doc, "fromLocation", "from_location")) or (
        start_location or ""
    )
    to_location = _str(_first(doc, "toLocation", "to_location")) or (end_location or "")

    assigned = _str_tuple(
        _first(doc, "assignedBusIds", "assigned_vehicle_ids", "assignedBuses")
    )
    if not assigned:
        # Older seed data kept a single bus on the route document.
        assigned = _str_tuple(_first(doc, "busId", "bus_id"))

    is_active = doc.get("isActive", doc.get("is_active"))
    if is_active is None:
        is_active = _str(doc.get("status") or "active").lower() == "active"

    return Route(
        id=route_id,
        name=_str(_first(doc, "name", "routeName", "route_name"))
        or f"{from_location} to {to_location}",
        from_location=from_location,
        to_location=to_location,
        start_location=start_location,
        end_location=end_location,
        start_coordinate=coordinate_from_doc(
            _first(doc, "startCoordinates", "start_coordinate", "fromCoordinates")
        ),
        end_coordinate=coordinate_from_doc(
            _first(doc, "endCoordinates", "end_coordinate", "toCoordinates")
        ),
        distance_km=float(_first(doc, "distance_km", "totalDistance", "distance") or 0),
        estimated_minutes=int(
            _first(doc, "estimated_minutes", "estimatedDuration") or 0
        ),
        assigned_vehicle_ids=assigned,
        is_active=_bool(is_active),
        route_number=_first(doc, "routeNumber", "route_number"),
    )


def route_to_doc(route: Route) -> dict[str, Any]:
    return {
        "id": route.id,
        "name": route.name,
        "from_location": route.from_location,
        "to_location": route.to_location,
        "start_location": route.start_location,
        "end_location": route.end_location,
        "start_coordinate": coordinate_to_doc(route.start_coordinate),
        "end_coordinate": coordinate_to_doc(route.end_coordinate),
        "distance_km": route.distance_km,
        "estimated_minutes": route.estimated_minutes,
        "assigned_vehicle_ids": list(route.assigned_vehicle_ids),
        "is_active": route.is_active,
        "route_number": route.route_number,
    }


def stop_from_doc(doc: Mapping[str, Any]) -> Stop:
    coordinate = coordinate_from_doc(
        _first(doc, "coordinate", "coordinates", "location")
    ) or coordinate_from_doc(doc)
    if coordinate is None:
        raise ValueError(f"Stop {doc.get('id')!r} has no coordinates")

    return Stop(
        id=_str(_first(doc, "id", "stopId", "stop_id")),
        name=_str(_first(doc, "name", "stopName", "stop_name")),
        coordinate=coordinate,
        address=_str(doc.get("address")),
        city=_first(doc, "city"),
        amenities=_str_tuple(doc.get("amenities")),
    )


def stop_to_doc(stop: Stop) -> dict[str, Any]:
    return {
        "id": stop.id,
        "name": stop.name,
        "coordinate": coordinate_to_doc(stop.coordinate),
        "address": stop.address,
        "city": stop.city,
        "amenities": list(stop.amenities),
    }


def vehicle_from_doc(doc: Mapping[str, Any]) -> Vehicle:
    vehicle_id = _str(_first(doc, "id", "busId", "bus_id"))
    drivers = _str_tuple(_first(doc, "assignedDriverIds", "driver_ids"))
    if not drivers:
        drivers = _str_tuple(_first(doc, "driverId", "driver_id"))

    return Vehicle(
        id=vehicle_id,
        bus_number=_str(_first(doc, "bus_number", "busNumber", "busId")) or vehicle_id,
        license_plate=_first(
            doc, "license_plate", "licensePlate", "vehicleNumber", "registrationNumber"
        ),
        name=_first(doc, "name", "busName"),
        capacity=int(_first(doc, "capacity") or 0),
        status=_str(_first(doc, "status", "currentStatus") or "inactive"),
        assigned_route_id=_first(
            doc, "assigned_route_id", "assignedRouteId", "currentRouteId", "routeId"
        ),
        driver_ids=drivers,
    )


def vehicle_to_doc(vehicle: Vehicle) -> dict[str, Any]:
    return {
        "id": vehicle.id,
        "bus_number": vehicle.bus_number,
        "license_plate": vehicle.license_plate,
        "name": vehicle.name,
        "capacity": vehicle.capacity,
        "status": vehicle.status,
        "assigned_route_id": vehicle.assigned_route_id,
        "driver_ids": list(vehicle.driver_ids),
    }
