from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IFacilityRepository
from src.domain.algorithms.facility_ranking import (
    MAX_SUGGESTIONS,
    find_by_name,
    find_mentioned,
    suggest_facilities,
)
from src.domain.models import Facility, FacilitySuggestion, GeoPoint

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FacilityCatalog:
    """Destination facilities, loaded once with a bundled fallback.

    The active dataset is whatever the repository returned, unless it failed
    or came back empty, in which case it is exactly ``fallback``.
    """

    fallback: tuple[Facility, ...]
    repository: IFacilityRepository | None = None

    _facilities: tuple[Facility, ...] | None = field(
        default=None, init=False, repr=False
    )

    @property
    def loaded(self) -> bool:
        return self._facilities is not None

    @property
    def facilities(self) -> tuple[Facility, ...]:
        if self._facilities is None:
            return self.fallback
        return self._facilities

    async def load(self) -> tuple[Facility, ...]:
        facilities: tuple[Facility, ...] = ()
        if self.repository is not None:
            try:
                facilities = await self.repository.load_facilities()
            except Exception as exc:
                logger.warning(
                    "Facility source unavailable, using bundled list: %s", exc
                )
                facilities = ()

        if not facilities:
            facilities = self.fallback

        self._facilities = tuple(facilities)
        return self._facilities

    async def ensure_loaded(self) -> tuple[Facility, ...]:
        if self._facilities is None:
            return await self.load()
        return self._facilities

    def suggest(
        self,
        query: str,
        *,
        pickup: GeoPoint | None = None,
        limit: int = MAX_SUGGESTIONS,
    ) -> list[FacilitySuggestion]:
        return suggest_facilities(self.facilities, query, pickup=pickup, limit=limit)

    def get(self, name: str) -> Facility | None:
        return find_by_name(self.facilities, name)

    def mentioned_in(self, text: str) -> Facility | None:
        return find_mentioned(self.facilities, text)
