from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint


class IApproxLocationProvider(ABC):
    """Port for coarse (IP-based) location lookups."""

    name: str

    @abstractmethod
    async def locate(self) -> GeoPoint:
        """Return the caller's approximate position or raise."""
