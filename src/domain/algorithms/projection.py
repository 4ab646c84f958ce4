from __future__ import annotations

import math
from dataclasses import dataclass

from src.domain.models import GeoPoint, TileRef

TILE_SIZE_PX = 256


@dataclass(frozen=True, slots=True)
class WebMercatorProjection:
    """Spherical Mercator projection into the pixel space of a tile pyramid.

    World space at a given zoom is ``tile_size * 2**zoom`` pixels square, with
    the origin in the north-west corner (standard slippy-map convention).
    Latitudes near the poles are not supported.
    """

    zoom: int
    tile_size: int = TILE_SIZE_PX

    @property
    def world_size(self) -> float:
        return float(self.tile_size * 2**self.zoom)

    def lng_to_x(self, lng: float) -> float:
        return (lng + 180.0) / 360.0 * self.world_size

    def lat_to_y(self, lat: float) -> float:
        lat_rad = math.radians(lat)
        merc = math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad))
        return (1.0 - merc / math.pi) / 2.0 * self.world_size

    def x_to_lng(self, x: float) -> float:
        return x / self.world_size * 360.0 - 180.0

    def y_to_lat(self, y: float) -> float:
        n = math.pi - 2.0 * math.pi * (y / self.world_size)
        return math.degrees(math.atan(math.sinh(n)))

    def project(self, point: GeoPoint) -> tuple[float, float]:
        return self.lng_to_x(point.lng), self.lat_to_y(point.lat)

    def unproject(self, x: float, y: float) -> GeoPoint:
        return GeoPoint(lat=self.y_to_lat(y), lng=self.x_to_lng(x))

    def tile_for_pixel(self, x: float, y: float) -> TileRef:
        return TileRef(
            zoom=self.zoom,
            x=math.floor(x / self.tile_size),
            y=math.floor(y / self.tile_size),
        )
