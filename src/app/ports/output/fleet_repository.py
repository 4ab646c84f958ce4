from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Vehicle


class IFleetRepository(ABC):
    """Port for the vehicle roster available for quoting."""

    @abstractmethod
    def list_vehicles(self) -> tuple[Vehicle, ...]:
        raise NotImplementedError
