from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Route


class IRouteRepository(ABC):
    """Document-store port for route reference data."""

    @abstractmethod
    def get(self, route_id: str) -> Route | None:
        raise NotImplementedError

    @abstractmethod
    def list_active(self) -> tuple[Route, ...]:
        """Active routes in the store's natural iteration order."""
