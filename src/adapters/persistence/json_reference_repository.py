from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, TypeVar

from src.adapters.persistence.documents import (
    route_from_doc,
    stop_from_doc,
    vehicle_from_doc,
)
from src.adapters.persistence.in_memory_reference_repository import (
    InMemoryRouteRepository,
    InMemoryStopRepository,
    InMemoryVehicleRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ReferenceData:
    routes: InMemoryRouteRepository
    stops: InMemoryStopRepository
    vehicles: InMemoryVehicleRepository


def _load_docs(path: Path, decode: Callable[[dict[str, Any]], T]) -> tuple[T, ...]:
    if not path.exists():
        logger.warning("Reference file missing", extra={"path": str(path)})
        return ()

    with path.open("r", encoding="utf-8") as fp:
        raw = json.load(fp)

    # Accept either a list of documents or an id -> document mapping
    # (the shape of a collection export).
    if isinstance(raw, dict):
        docs = [
            {"id": key, **value} if isinstance(value, Mapping) else value
            for key, value in raw.items()
        ]
    else:
        docs = list(raw)

    out: list[T] = []
    for doc in docs:
        if not isinstance(doc, Mapping):
            logger.warning(
                "Skipping malformed document",
                extra={"path": str(path), "error": f"not an object: {doc!r}"},
            )
            continue
        try:
            out.append(decode(doc))
        except (TypeError, ValueError) as exc:
            logger.warning(
                "Skipping malformed document",
                extra={"path": str(path), "id": doc.get("id"), "error": str(exc)},
            )
    return tuple(out)


def load_reference_data(base_path: str | Path | None = None) -> ReferenceData:
    """Load routes.json, stops.json and buses.json from a directory.

    Env vars:
      - REFERENCE_DATA_PATH: directory holding the JSON files (default data/reference)
    """

    base = Path(base_path or os.getenv("REFERENCE_DATA_PATH") or "data/reference")

    return ReferenceData(
        routes=InMemoryRouteRepository(
            _load_docs(base / "routes.json", route_from_doc)
        ),
        stops=InMemoryStopRepository(_load_docs(base / "stops.json", stop_from_doc)),
        vehicles=InMemoryVehicleRepository(
            _load_docs(base / "buses.json", vehicle_from_doc)
        ),
    )
