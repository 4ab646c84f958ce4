from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Facility:
    name: str
    category: str
    area: str
    position: GeoPoint
    aliases: tuple[str, ...] = ()
    popularity: int = 0

    def searchable_strings(self) -> tuple[str, ...]:
        return (self.name, self.area, *self.aliases)


@dataclass(frozen=True, slots=True)
class FacilitySuggestion:
    facility: Facility
    distance_km: float | None = None
