from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from src.adapters.aws import dynamodb_client
from src.adapters.persistence import (
    DynamoDbLocationStore,
    DynamoDbRouteRepository,
    DynamoDbStopRepository,
    DynamoDbVehicleRepository,
)
from src.app.services.live_location_service import LiveLocationTracker
from src.domain.models import Coordinate, LocationReading, Route, Stop, Vehicle


def _ensure_table(name: str, key: str) -> None:
    ddb = dynamodb_client()

    existing = ddb.list_tables().get("TableNames", [])
    if name in existing:
        return

    ddb.create_table(
        TableName=name,
        BillingMode="PAY_PER_REQUEST",
        AttributeDefinitions=[{"AttributeName": key, "AttributeType": "S"}],
        KeySchema=[{"AttributeName": key, "KeyType": "HASH"}],
    )
    waiter = ddb.get_waiter("table_exists")
    waiter.wait(TableName=name)


@pytest.mark.integration
def test_dynamodb_location_store_put_get_remove(require_localstack: str) -> None:
    table = f"bustrack-test-live-{uuid4().hex[:8]}"
    _ensure_table(table, "vehicle_id")

    store = DynamoDbLocationStore(table_name=table, ttl_s=600)
    now = datetime.now(timezone.utc).replace(microsecond=0)
    reading = LocationReading(
        vehicle_id="bus-1",
        route_id="route-1",
        coordinate=Coordinate(21.2514, 81.6296),
        speed_kmh=18.0,
        heading_deg=45.0,
        accuracy_m=5.0,
        captured_at=now,
        recorded_at=now,
    )

    store.put("bus-1", reading)
    store.put(
        "bus-2",
        LocationReading(
            vehicle_id="bus-2",
            coordinate=Coordinate(21.25, 81.63),
            captured_at=now,
            recorded_at=now,
        ),
    )

    assert store.get("bus-1") == reading
    assert set(store.get_all()) == {"bus-1", "bus-2"}

    store.remove("bus-1")
    store.remove("bus-1")
    assert store.get("bus-1") is None


@pytest.mark.integration
def test_tracker_derives_motion_through_dynamodb(require_localstack: str) -> None:
    table = f"bustrack-test-live-{uuid4().hex[:8]}"
    _ensure_table(table, "vehicle_id")

    store = DynamoDbLocationStore(table_name=table)
    tracker = LiveLocationTracker(location_store=store)
    t0 = datetime(2025, 9, 1, 8, 0, tzinfo=timezone.utc)

    tracker.ingest(
        vehicle_id="bus-9", latitude=21.2514, longitude=81.6296, captured_at=t0
    )
    second = tracker.ingest(
        vehicle_id="bus-9",
        latitude=21.2514,
        longitude=81.6392,
        captured_at=t0.replace(minute=1),
    )

    assert second.speed_kmh == pytest.approx(59.7, abs=1.0)
    assert second.heading_deg == pytest.approx(90.0, abs=0.1)


@pytest.mark.integration
def test_dynamodb_reference_repositories(require_localstack: str) -> None:
    suffix = uuid4().hex[:8]
    routes = DynamoDbRouteRepository(table_name=f"bustrack-test-routes-{suffix}")
    stops = DynamoDbStopRepository(table_name=f"bustrack-test-stops-{suffix}")
    vehicles = DynamoDbVehicleRepository(table_name=f"bustrack-test-buses-{suffix}")
    for repo in (routes, stops, vehicles):
        assert repo.table_name is not None
        _ensure_table(repo.table_name, "id")

    routes.save(
        Route(
            id="r1",
            name="Railway Station to Magneto Mall",
            from_location="Raipur Railway Station",
            to_location="Magneto Mall",
            assigned_vehicle_ids=("b1", "b2"),
        )
    )
    routes.save(
        Route(
            id="r2",
            name="Old route",
            from_location="Pandri",
            to_location="Telibandha",
            is_active=False,
        )
    )
    stops.save(
        Stop(id="s1", name="Gandhi Chowk", coordinate=Coordinate(21.2541, 81.6296))
    )
    vehicles.save(Vehicle(id="b1", bus_number="CG04-1001", assigned_route_id="r1"))
    vehicles.save(Vehicle(id="b2", bus_number="CG04-1002", assigned_route_id="r1"))

    assert [r.id for r in routes.list_active()] == ["r1"]
    r2 = routes.get("r2")
    assert r2 is not None and not r2.is_active
    assert routes.get("missing") is None

    found = stops.list_all()
    assert [s.name for s in found] == ["Gandhi Chowk"]

    many = vehicles.get_many(("b1", "b2", "ghost"))
    assert set(many) == {"b1", "b2"}
    assert many["b2"].bus_number == "CG04-1002"
