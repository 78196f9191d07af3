from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Stop


class IStopRepository(ABC):
    """Document-store port for bus stop reference data."""

    @abstractmethod
    def get(self, stop_id: str) -> Stop | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> tuple[Stop, ...]:
        raise NotImplementedError
