from __future__ import annotations

from dataclasses import dataclass, field, replace

from src.domain.algorithms.projection import TILE_SIZE_PX, WebMercatorProjection
from src.domain.models import GeoPoint, MapMarker, TilePlacement

DEFAULT_TILE_URL_TEMPLATE = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"


@dataclass(slots=True)
class TileMapRenderer:
    """Slippy-map viewport without a mapping library.

    Keeps a center, a fixed zoom and a set of point markers, and lays out the
    3x3 block of tiles around the center tile. Pixel positions are relative
    to the container's top-left corner; ``origin_px`` is where that corner
    sits on screen (used to turn click coordinates back into lat/lng).
    """

    center: GeoPoint
    zoom: int = 14
    width_px: float = 768.0
    height_px: float = 512.0
    origin_px: tuple[float, float] = (0.0, 0.0)
    tile_size: int = TILE_SIZE_PX
    tile_url_template: str = DEFAULT_TILE_URL_TEMPLATE
    marker_half_size_px: float = 8.0

    projection: WebMercatorProjection = field(init=False)
    tiles: tuple[TilePlacement, ...] = field(default=(), init=False)
    markers: dict[str, MapMarker] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.projection = WebMercatorProjection(zoom=self.zoom, tile_size=self.tile_size)
        self._layout_tiles()

    def set_center(self, point: GeoPoint) -> None:
        self.center = point
        self._layout_tiles()
        self._reposition_markers()

    def resize(
        self,
        width_px: float,
        height_px: float,
        *,
        origin_px: tuple[float, float] | None = None,
    ) -> None:
        self.width_px = float(width_px)
        self.height_px = float(height_px)
        if origin_px is not None:
            self.origin_px = origin_px
        self._layout_tiles()
        self._reposition_markers()

    def add_marker(
        self, marker_id: str, point: GeoPoint, label: str | None = None
    ) -> MapMarker:
        marker = self._placed(MapMarker(id=marker_id, position=point, label=label or marker_id))
        self.markers[marker_id] = marker
        return marker

    def update_marker(self, marker_id: str, point: GeoPoint) -> bool:
        marker = self.markers.get(marker_id)
        if marker is None:
            return False
        self.markers[marker_id] = self._placed(replace(marker, position=point))
        return True

    def project_to_screen(self, point: GeoPoint) -> tuple[float, float]:
        """Pixel offset of a point from the container center."""

        px, py = self.projection.project(point)
        cx, cy = self.projection.project(self.center)
        return px - cx, py - cy

    def screen_to_geo(self, client_x: float, client_y: float) -> GeoPoint:
        cx, cy = self.projection.project(self.center)
        left, top = self.origin_px
        x = cx + (client_x - left - self.width_px / 2.0)
        y = cy + (client_y - top - self.height_px / 2.0)
        return self.projection.unproject(x, y)

    def _layout_tiles(self) -> None:
        size = self.tile_size
        cx, cy = self.projection.project(self.center)
        center_tile = self.projection.tile_for_pixel(cx, cy)

        placements: list[TilePlacement] = []
        for i in range(3):
            for j in range(3):
                tile = replace(center_tile, x=center_tile.x - 1 + i, y=center_tile.y - 1 + j)
                placements.append(
                    TilePlacement(
                        tile=tile,
                        url=self.tile_url_template.format(z=tile.zoom, x=tile.x, y=tile.y),
                        left_px=(i - 1) * size + self.width_px / 2.0 - (cx % size),
                        top_px=(j - 1) * size + self.height_px / 2.0 - (cy % size),
                        size_px=size,
                    )
                )
        self.tiles = tuple(placements)

    def _reposition_markers(self) -> None:
        for marker_id, marker in self.markers.items():
            self.markers[marker_id] = self._placed(marker)

    def _placed(self, marker: MapMarker) -> MapMarker:
        dx, dy = self.project_to_screen(marker.position)
        return replace(
            marker,
            left_px=self.width_px / 2.0 + dx - self.marker_half_size_px,
            top_px=self.height_px / 2.0 + dy - self.marker_half_size_px,
        )
