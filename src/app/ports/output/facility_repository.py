from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Facility


class IFacilityRepository(ABC):
    """Port for loading the destination facility dataset."""

    @abstractmethod
    async def load_facilities(self) -> tuple[Facility, ...]:
        """Return every facility; raise on any transport or format failure."""
