from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IApproxLocationProvider, IGeocoder
from src.domain.exceptions import LocationUnavailable
from src.domain.models import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocationService:
    """Best-effort geocoding and coarse location, with defined fallbacks."""

    geocoder: IGeocoder | None = None
    providers: tuple[IApproxLocationProvider, ...] = ()

    async def describe(self, point: GeoPoint) -> str:
        """Address for a point, or its coordinates when geocoding fails."""

        if self.geocoder is not None:
            try:
                label = await self.geocoder.reverse(point)
                if label:
                    return label
            except Exception as exc:
                logger.warning("Reverse geocoding failed: %s", exc)
        return point.format()

    async def geocode(self, query: str) -> GeoPoint | None:
        if self.geocoder is None or not query.strip():
            return None
        try:
            return await self.geocoder.forward(query)
        except Exception as exc:
            logger.warning("Forward geocoding failed: %s", exc)
            return None

    async def approximate(self) -> tuple[GeoPoint, str]:
        """First provider that answers wins; returns (point, provider name)."""

        last_exc: Exception | None = None
        for provider in self.providers:
            try:
                return await provider.locate(), provider.name
            except Exception as exc:
                logger.info("Location provider %s failed: %s", provider.name, exc)
                last_exc = exc

        raise LocationUnavailable(
            "Unable to determine location. Please tap the map to set pickup."
        ) from last_exc
