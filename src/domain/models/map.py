from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class TileRef:
    zoom: int
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class TilePlacement:
    tile: TileRef
    url: str
    left_px: float
    top_px: float
    size_px: int


@dataclass(frozen=True, slots=True)
class MapMarker:
    id: str
    position: GeoPoint
    label: str
    left_px: float = 0.0
    top_px: float = 0.0
