from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint


class IGeocoder(ABC):
    """Port for forward and reverse geocoding."""

    @abstractmethod
    async def forward(self, query: str) -> GeoPoint | None:
        """Best single match for free text, or None."""

    @abstractmethod
    async def reverse(self, point: GeoPoint) -> str:
        """Human-readable address for a coordinate."""
