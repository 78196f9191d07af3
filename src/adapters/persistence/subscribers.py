from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable

from src.app.ports.output import LocationListener
from src.domain.models import LocationReading

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ListenerRegistry:
    """Fan-out of store changes to in-process listeners.

    A failing listener is logged and skipped; it never fails the write.
    """

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)
    _listeners: list[LocationListener] = field(default_factory=list, init=False)

    def add(self, listener: LocationListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def notify(self, vehicle_id: str, reading: LocationReading | None) -> None:
        with self._lock:
            listeners = tuple(self._listeners)
        for listener in listeners:
            try:
                listener(vehicle_id, reading)
            except Exception:
                logger.exception(
                    "Location listener failed", extra={"vehicle_id": vehicle_id}
                )
