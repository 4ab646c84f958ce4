from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from src.app.ports.output import ITickHandle, ITickScheduler
from src.domain.algorithms.geo_utils import haversine_distance_km, interpolate_linear
from src.domain.algorithms.pricing import estimate_eta_minutes
from src.domain.exceptions import InvalidTripPath, TripAutoTicking
from src.domain.models import GeoPoint, TripProgress, TripSegment, TripStatus

DEFAULT_TICK_PERIOD_S = 1.5


def _build_segments(path: Sequence[GeoPoint]) -> tuple[TripSegment, ...]:
    return tuple(
        TripSegment(origin=a, destination=b, distance_km=haversine_distance_km(a, b))
        for a, b in zip(path, path[1:])
    )


def _remaining_km(
    segments: tuple[TripSegment, ...], index: int, fraction: float
) -> float:
    remaining = (1.0 - fraction) * segments[index].distance_km
    for seg in segments[index + 1 :]:
        remaining += seg.distance_km
    return remaining


@dataclass(slots=True)
class TripSimulator:
    """Moves a simulated vehicle along a waypoint path, one tick at a time.

    The simulator never reads a clock. A host advances it either by calling
    ``tick()`` / ``advance(elapsed_s)`` directly or by handing it an
    ``ITickScheduler`` that calls ``tick()`` every ``tick_period_s``.

    Only one run is live at a time: ``start()`` cancels the previous timer
    before scheduling a new one.
    """

    tick_period_s: float = DEFAULT_TICK_PERIOD_S
    scheduler: ITickScheduler | None = None
    on_tick: Callable[[TripProgress], None] | None = None

    status: TripStatus = TripStatus.IDLE
    segments: tuple[TripSegment, ...] = ()
    segment_index: int = 0
    progress_m: float = 0.0
    speed_kmph: float = 0.0
    last_progress: TripProgress | None = None

    _handle: ITickHandle | None = field(default=None, init=False, repr=False)
    _pending_s: float = field(default=0.0, init=False, repr=False)

    @property
    def speed_mps(self) -> float:
        return self.speed_kmph * 1000.0 / 3600.0

    @property
    def running(self) -> bool:
        return self.status is TripStatus.RUNNING

    @property
    def has_active_timer(self) -> bool:
        return self._handle is not None and self._handle.active

    def start(self, path: Sequence[GeoPoint], speed_kmph: float) -> TripProgress:
        points = tuple(path)
        if len(points) < 2:
            raise InvalidTripPath(
                f"Trip path needs at least 2 waypoints, got {len(points)}"
            )

        self._stop_timer()

        self.segments = _build_segments(points)
        self.segment_index = 0
        self.progress_m = 0.0
        self.speed_kmph = float(speed_kmph)
        self.status = TripStatus.RUNNING
        self._pending_s = 0.0

        remaining = _remaining_km(self.segments, 0, 0.0)
        self.last_progress = TripProgress(
            status=self.status,
            position=points[0],
            segment_index=0,
            progress_m=0.0,
            fraction=0.0,
            remaining_km=remaining,
            eta_minutes=estimate_eta_minutes(remaining, self.speed_kmph),
        )

        if self.scheduler is not None:
            self._handle = self.scheduler.schedule_every(self.tick_period_s, self.tick)

        return self.last_progress

    def tick(self) -> TripProgress | None:
        """Advance by exactly one tick period. No-op unless running."""

        if self.status is not TripStatus.RUNNING:
            return None

        index = self.segment_index
        seg = self.segments[index]
        seg_m = seg.distance_m

        self.progress_m += self.speed_mps * self.tick_period_s
        if seg_m <= 0.0:
            fraction = 1.0
            self.progress_m = 0.0
        else:
            fraction = min(self.progress_m / seg_m, 1.0)
            self.progress_m = min(self.progress_m, seg_m)

        position = interpolate_linear(seg.origin, seg.destination, fraction)
        remaining = _remaining_km(self.segments, index, fraction)
        progress_m = self.progress_m

        if fraction >= 1.0:
            if index + 1 < len(self.segments):
                self.segment_index = index + 1
                self.progress_m = 0.0
            else:
                self.status = TripStatus.COMPLETED
                self._stop_timer()

        progress = TripProgress(
            status=self.status,
            position=position,
            segment_index=index,
            progress_m=progress_m,
            fraction=fraction,
            remaining_km=remaining,
            eta_minutes=estimate_eta_minutes(remaining, self.speed_kmph),
        )
        self.last_progress = progress
        if self.on_tick is not None:
            self.on_tick(progress)
        return progress

    def advance(self, elapsed_s: float) -> list[TripProgress]:
        """Run every whole tick that fits in ``elapsed_s`` (remainder carried)."""

        if self.status is not TripStatus.RUNNING:
            return []
        if self.has_active_timer:
            raise TripAutoTicking("Trip is already advanced by its tick scheduler")

        self._pending_s += max(0.0, float(elapsed_s))
        out: list[TripProgress] = []
        while self._pending_s >= self.tick_period_s and self.running:
            self._pending_s -= self.tick_period_s
            progress = self.tick()
            if progress is not None:
                out.append(progress)
        return out

    def cancel(self) -> None:
        self._stop_timer()
        if self.status is TripStatus.RUNNING:
            self.status = TripStatus.CANCELLED

    def _stop_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
