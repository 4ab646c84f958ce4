from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import httpx

from src.adapters.config import env_float
from src.app.ports.output import IGeocoder
from src.domain.exceptions import CollaboratorUnavailable
from src.domain.models import GeoPoint

DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org"


@dataclass(slots=True)
class NominatimGeocoder(IGeocoder):
    """OpenStreetMap Nominatim geocoder.

    Env vars:
      - NOMINATIM_URL: base URL (default https://nominatim.openstreetmap.org)
      - GEOCODER_TIMEOUT_S: request timeout (default 10)
      - GEOCODER_USER_AGENT: Nominatim's usage policy requires one
    """

    base_url: str | None = None
    timeout_s: float | None = None
    user_agent: str | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("NOMINATIM_URL") or DEFAULT_NOMINATIM_URL
        if self.timeout_s is None:
            self.timeout_s = env_float("GEOCODER_TIMEOUT_S", 10.0)
        if self.user_agent is None:
            self.user_agent = os.getenv("GEOCODER_USER_AGENT") or "ambulance-booking-demo"

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.user_agent or ""}

    async def _get(self, path: str, params: dict[str, Any]) -> httpx.Response:
        url = (self.base_url or DEFAULT_NOMINATIM_URL).rstrip("/") + path
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                return await client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as exc:
            raise CollaboratorUnavailable(f"Nominatim request failed: {exc}") from exc

    async def forward(self, query: str) -> GeoPoint | None:
        resp = await self._get("/search", {"format": "jsonv2", "q": query, "limit": 1})
        if not resp.is_success:
            return None

        data = resp.json()
        if not isinstance(data, list) or not data:
            return None
        try:
            return GeoPoint(lat=float(data[0]["lat"]), lng=float(data[0]["lon"]))
        except (KeyError, TypeError, ValueError):
            return None

    async def reverse(self, point: GeoPoint) -> str:
        resp = await self._get(
            "/reverse", {"format": "jsonv2", "lat": point.lat, "lon": point.lng}
        )
        if not resp.is_success:
            raise CollaboratorUnavailable(
                f"Reverse geocoding failed with HTTP {resp.status_code}"
            )

        data = resp.json()
        name = data.get("display_name") if isinstance(data, dict) else None
        return name or point.format()
