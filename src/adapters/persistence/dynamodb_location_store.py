from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Mapping

from src.adapters.aws import DynamoDBClient, dynamodb_client, storage_errors
from src.adapters.persistence.subscribers import ListenerRegistry
from src.app.ports.output import ILocationStore, LocationListener
from src.domain.models import Coordinate, LocationReading


def reading_to_item(reading: LocationReading, *, ttl_s: int) -> dict[str, Any]:
    item: dict[str, Any] = {
        "vehicle_id": {"S": reading.vehicle_id},
        "latitude": {"N": repr(reading.coordinate.latitude)},
        "longitude": {"N": repr(reading.coordinate.longitude)},
        "speed_kmh": {"N": repr(float(reading.speed_kmh))},
        "heading_deg": {"N": repr(float(reading.heading_deg))},
        "captured_at": {"S": reading.captured_at.isoformat()},
        "recorded_at": {"S": reading.recorded_at.isoformat()},
        "ttl": {"N": str(int(reading.recorded_at.timestamp()) + int(ttl_s))},
    }
    if reading.route_id:
        item["route_id"] = {"S": reading.route_id}
    if reading.accuracy_m is not None:
        item["accuracy_m"] = {"N": repr(float(reading.accuracy_m))}
    return item


def item_to_reading(item: Mapping[str, Any]) -> LocationReading:
    accuracy = item.get("accuracy_m", {}).get("N")
    return LocationReading(
        vehicle_id=item["vehicle_id"]["S"],
        route_id=item.get("route_id", {}).get("S"),
        coordinate=Coordinate(
            latitude=float(item["latitude"]["N"]),
            longitude=float(item["longitude"]["N"]),
        ),
        speed_kmh=float(item.get("speed_kmh", {}).get("N", "0")),
        heading_deg=float(item.get("heading_deg", {}).get("N", "0")),
        accuracy_m=float(accuracy) if accuracy is not None else None,
        captured_at=datetime.fromisoformat(item["captured_at"]["S"]),
        recorded_at=datetime.fromisoformat(item["recorded_at"]["S"]),
    )


@dataclass(slots=True)
class DynamoDbLocationStore(ILocationStore):
    """Latest reading per vehicle, one DynamoDB item per vehicle id.

    Items carry a `ttl` attribute so abandoned vehicles eventually expire
    when TTL is enabled on the table. Expiry is lazy, so freshness is
    always judged by the reader from `captured_at`.

    Change listeners only see writes made through this instance.

    Env vars:
      - DDB_LOCATIONS_TABLE (default: bustrack-live-locations)
      - LOCATION_TTL_S (default: 86400)
      - ENDPOINT_URL, AWS_REGION, AWS_TIMEOUT_S
    """

    table_name: str | None = None
    ttl_s: int | None = None
    client: DynamoDBClient | None = None
    _listeners: ListenerRegistry = field(default_factory=ListenerRegistry, init=False)

    def _table(self) -> str:
        return (
            self.table_name
            or os.getenv("DDB_LOCATIONS_TABLE")
            or "bustrack-live-locations"
        )

    def _ttl_s(self) -> int:
        if self.ttl_s is not None:
            return self.ttl_s
        return int(os.getenv("LOCATION_TTL_S", "86400"))

    def _ddb(self) -> DynamoDBClient:
        if self.client is None:
            self.client = dynamodb_client()
        return self.client

    def put(self, vehicle_id: str, reading: LocationReading) -> None:
        item = reading_to_item(reading, ttl_s=self._ttl_s())
        item["vehicle_id"] = {"S": vehicle_id}
        with storage_errors("put_item"):
            self._ddb().put_item(TableName=self._table(), Item=item)
        self._listeners.notify(vehicle_id, reading)

    def get(self, vehicle_id: str) -> LocationReading | None:
        with storage_errors("get_item"):
            resp = self._ddb().get_item(
                TableName=self._table(),
                Key={"vehicle_id": {"S": vehicle_id}},
                ConsistentRead=True,
            )
        item = resp.get("Item")
        if not item:
            return None
        return item_to_reading(item)

    def get_all(self) -> Mapping[str, LocationReading]:
        out: dict[str, LocationReading] = {}
        with storage_errors("scan"):
            paginator = self._ddb().get_paginator("scan")
            for page in paginator.paginate(TableName=self._table()):
                for item in page.get("Items", []) or []:
                    reading = item_to_reading(item)
                    out[reading.vehicle_id] = reading
        return out

    def remove(self, vehicle_id: str) -> None:
        with storage_errors("delete_item"):
            resp = self._ddb().delete_item(
                TableName=self._table(),
                Key={"vehicle_id": {"S": vehicle_id}},
                ReturnValues="ALL_OLD",
            )
        if resp.get("Attributes"):
            self._listeners.notify(vehicle_id, None)

    def subscribe(self, listener: LocationListener) -> Callable[[], None]:
        return self._listeners.add(listener)
