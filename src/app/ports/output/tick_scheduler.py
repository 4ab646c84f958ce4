from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class ITickHandle(ABC):
    """Cancellation token for a periodic callback."""

    @abstractmethod
    def cancel(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def active(self) -> bool:
        raise NotImplementedError


class ITickScheduler(ABC):
    """Port for the host clock that drives periodic simulation ticks."""

    @abstractmethod
    def schedule_every(
        self, period_s: float, callback: Callable[[], None]
    ) -> ITickHandle:
        raise NotImplementedError
