from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from src.adapters.config import env_float
from src.app.ports.output import IApproxLocationProvider
from src.domain.exceptions import CollaboratorUnavailable
from src.domain.models import GeoPoint


@dataclass(slots=True)
class _JsonLocationProvider(IApproxLocationProvider):
    """Shared GET-and-parse logic for the IP geolocation services.

    Env vars:
      - IP_LOCATION_TIMEOUT_S: request timeout (default 8)
    """

    name: str
    url: str
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        if self.timeout_s is None:
            self.timeout_s = env_float("IP_LOCATION_TIMEOUT_S", 8.0)

    async def locate(self) -> GeoPoint:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise CollaboratorUnavailable(f"{self.name} failed: {exc}") from exc

        point = self._parse(data) if isinstance(data, dict) else None
        if point is None:
            raise CollaboratorUnavailable(f"{self.name} returned no lat/lon")
        return point

    @abstractmethod
    def _parse(self, data: dict[str, Any]) -> GeoPoint | None:
        """Coordinates from the service payload, or None when it has none."""


@dataclass(slots=True)
class IpApiProvider(_JsonLocationProvider):
    name: str = "ipapi"
    url: str = "https://ipapi.co/json/"

    def _parse(self, data: dict[str, Any]) -> GeoPoint | None:
        lat, lng = data.get("latitude"), data.get("longitude")
        if not lat or not lng:
            return None
        return GeoPoint(lat=float(lat), lng=float(lng))


@dataclass(slots=True)
class GeolocationDbProvider(_JsonLocationProvider):
    name: str = "geolocation-db"
    url: str = "https://geolocation-db.com/json/"

    def _parse(self, data: dict[str, Any]) -> GeoPoint | None:
        lat, lng = data.get("latitude"), data.get("longitude")
        # This service reports "Not found" strings instead of numbers.
        if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
            return None
        if not lat or not lng:
            return None
        return GeoPoint(lat=float(lat), lng=float(lng))


@dataclass(slots=True)
class IpInfoProvider(_JsonLocationProvider):
    name: str = "ipinfo"
    url: str = "https://ipinfo.io/json"

    def _parse(self, data: dict[str, Any]) -> GeoPoint | None:
        loc = data.get("loc")
        if not isinstance(loc, str) or "," not in loc:
            return None
        try:
            lat_raw, lng_raw = loc.split(",", 1)
            return GeoPoint(lat=float(lat_raw), lng=float(lng_raw))
        except ValueError:
            return None


def default_location_providers() -> tuple[IApproxLocationProvider, ...]:
    return (IpApiProvider(), GeolocationDbProvider(), IpInfoProvider())
