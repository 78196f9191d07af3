from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

from src.adapters.aws import DynamoDBClient, dynamodb_client, storage_errors
from src.adapters.persistence.documents import (
    route_from_doc,
    route_to_doc,
    stop_from_doc,
    stop_to_doc,
    vehicle_from_doc,
    vehicle_to_doc,
)
from src.app.ports.output import IRouteRepository, IStopRepository, IVehicleRepository
from src.domain.models import Route, Stop, Vehicle

T = TypeVar("T")

# DynamoDB BatchGetItem limit.
_BATCH_GET_MAX_KEYS = 100


def document_item(doc: Mapping[str, Any], **extra: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "id": {"S": str(doc["id"])},
        "doc": {"S": json.dumps(dict(doc))},
    }
    item.update(extra)
    return item


@dataclass(slots=True)
class _DynamoDbDocuments:
    """Documents stored as `{id: S, doc: S(json)}` items."""

    table_name: str
    client: DynamoDBClient | None = None

    def _ddb(self) -> DynamoDBClient:
        if self.client is None:
            self.client = dynamodb_client()
        return self.client

    def get(self, doc_id: str, decode: Callable[[dict[str, Any]], T]) -> T | None:
        with storage_errors("get_item"):
            resp = self._ddb().get_item(
                TableName=self.table_name, Key={"id": {"S": doc_id}}
            )
        item = resp.get("Item")
        if not item:
            return None
        return decode(json.loads(item["doc"]["S"]))

    def scan(
        self, decode: Callable[[dict[str, Any]], T], **scan_kwargs: Any
    ) -> tuple[T, ...]:
        out: list[T] = []
        with storage_errors("scan"):
            paginator = self._ddb().get_paginator("scan")
            for page in paginator.paginate(TableName=self.table_name, **scan_kwargs):
                for item in page.get("Items", []) or []:
                    out.append(decode(json.loads(item["doc"]["S"])))
        return tuple(out)

    def batch_get(
        self, doc_ids: tuple[str, ...], decode: Callable[[dict[str, Any]], T]
    ) -> list[T]:
        unique = list(dict.fromkeys(doc_ids))
        out: list[T] = []
        for start in range(0, len(unique), _BATCH_GET_MAX_KEYS):
            chunk = unique[start : start + _BATCH_GET_MAX_KEYS]
            request: dict[str, Any] = {
                self.table_name: {"Keys": [{"id": {"S": i}} for i in chunk]}
            }
            while request:
                with storage_errors("batch_get_item"):
                    resp = self._ddb().batch_get_item(RequestItems=request)
                for item in resp.get("Responses", {}).get(self.table_name, []):
                    out.append(decode(json.loads(item["doc"]["S"])))
                request = resp.get("UnprocessedKeys") or {}
        return out

    def put(self, item: dict[str, Any]) -> None:
        with storage_errors("put_item"):
            self._ddb().put_item(TableName=self.table_name, Item=item)


@dataclass(slots=True)
class DynamoDbRouteRepository(IRouteRepository):
    """Env vars: DDB_ROUTES_TABLE (default: bustrack-routes)."""

    table_name: str | None = None
    client: DynamoDBClient | None = None

    def _docs(self) -> _DynamoDbDocuments:
        table = self.table_name or os.getenv("DDB_ROUTES_TABLE") or "bustrack-routes"
        if self.client is None:
            self.client = dynamodb_client()
        return _DynamoDbDocuments(table_name=table, client=self.client)

    def get(self, route_id: str) -> Route | None:
        return self._docs().get(route_id, route_from_doc)

    def list_active(self) -> tuple[Route, ...]:
        return self._docs().scan(
            route_from_doc,
            FilterExpression="#active = :t",
            ExpressionAttributeNames={"#active": "is_active"},
            ExpressionAttributeValues={":t": {"BOOL": True}},
        )

    def save(self, route: Route) -> None:
        self._docs().put(
            document_item(route_to_doc(route), is_active={"BOOL": route.is_active})
        )


@dataclass(slots=True)
class DynamoDbStopRepository(IStopRepository):
    """Env vars: DDB_STOPS_TABLE (default: bustrack-bus-stops)."""

    table_name: str | None = None
    client: DynamoDBClient | None = None

    def _docs(self) -> _DynamoDbDocuments:
        table = self.table_name or os.getenv("DDB_STOPS_TABLE") or "bustrack-bus-stops"
        if self.client is None:
            self.client = dynamodb_client()
        return _DynamoDbDocuments(table_name=table, client=self.client)

    def get(self, stop_id: str) -> Stop | None:
        return self._docs().get(stop_id, stop_from_doc)

    def list_all(self) -> tuple[Stop, ...]:
        return self._docs().scan(stop_from_doc)

    def save(self, stop: Stop) -> None:
        self._docs().put(document_item(stop_to_doc(stop)))


@dataclass(slots=True)
class DynamoDbVehicleRepository(IVehicleRepository):
    """Env vars: DDB_VEHICLES_TABLE (default: bustrack-buses)."""

    table_name: str | None = None
    client: DynamoDBClient | None = None

    def _docs(self) -> _DynamoDbDocuments:
        table = self.table_name or os.getenv("DDB_VEHICLES_TABLE") or "bustrack-buses"
        if self.client is None:
            self.client = dynamodb_client()
        return _DynamoDbDocuments(table_name=table, client=self.client)

    def get(self, vehicle_id: str) -> Vehicle | None:
        return self._docs().get(vehicle_id, vehicle_from_doc)

    def get_many(self, vehicle_ids: tuple[str, ...]) -> dict[str, Vehicle]:
        if not vehicle_ids:
            return {}
        return {v.id: v for v in self._docs().batch_get(vehicle_ids, vehicle_from_doc)}

    def save(self, vehicle: Vehicle) -> None:
        self._docs().put(document_item(vehicle_to_doc(vehicle)))
