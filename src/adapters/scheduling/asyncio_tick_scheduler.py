from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from src.app.ports.output import ITickHandle, ITickScheduler

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AsyncioTickHandle(ITickHandle):
    task: asyncio.Task[None]

    def cancel(self) -> None:
        self.task.cancel()

    @property
    def active(self) -> bool:
        return not self.task.done() and not self.task.cancelling()


class AsyncioTickScheduler(ITickScheduler):
    """Runs a callback every ``period_s`` on the running event loop."""

    def schedule_every(
        self, period_s: float, callback: Callable[[], None]
    ) -> ITickHandle:
        async def _run() -> None:
            while True:
                await asyncio.sleep(period_s)
                try:
                    callback()
                except Exception:
                    logger.exception("Tick callback failed")

        task = asyncio.get_running_loop().create_task(_run())
        return AsyncioTickHandle(task=task)
