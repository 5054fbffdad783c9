"""Runtime monitoring for simulated cars: stuck and crash detection, frame statistics."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field

from racecar.checkpoint import Vec2

COLLISION_RADIUS = 15.0
EDGE_STRIDE = 3

STUCK_CHECK_INTERVAL = 10
STUCK_DISTANCE = 5.0
STUCK_TIMEOUT = 3.0

INITIAL_FPS = 60.0
FPS_WINDOW = 1.0


def _near_any(position: Vec2, edge: Sequence[Vec2]) -> bool:
    return any((position - point).length() < COLLISION_RADIUS for point in edge[::EDGE_STRIDE])


def is_crashed(position: Vec2, inner_edge: Sequence[Vec2], outer_edge: Sequence[Vec2]) -> bool:
    """Whether the position is within the collision radius of a sampled edge point.

    Only every third edge point is examined.
    """
    return _near_any(position, inner_edge) or _near_any(position, outer_edge)


@dataclass
class _Track:
    last_position: Vec2
    stuck_time: float = 0.0


class StuckDetector:
    """Flags cars that have barely moved for several seconds.

    The frame counter is shared by every car: a check is made only on every
    tenth call, whichever car it is for. The first check for a car records
    its position; later checks accumulate the frame time while the car has
    moved less than the stuck distance since the previous check.
    """

    def __init__(
        self,
        interval: int = STUCK_CHECK_INTERVAL,
        min_distance: float = STUCK_DISTANCE,
        timeout: float = STUCK_TIMEOUT,
    ) -> None:
        if interval < 1:
            raise ValueError("interval must be at least 1")
        self.interval = interval
        self.min_distance = min_distance
        self.timeout = timeout
        self.frame_counter = 0
        self._cars: dict[Hashable, _Track] = {}

    def __contains__(self, car_key: Hashable) -> bool:
        return car_key in self._cars

    def stuck_time(self, car_key: Hashable) -> float:
        """Seconds the car has been counted as stationary, or zero if unknown."""
        track = self._cars.get(car_key)
        return track.stuck_time if track is not None else 0.0

    def check(self, car_key: Hashable, position: Vec2, delta_time: float) -> bool:
        """Record one frame for the car; return True when it has just been found stuck."""
        self.frame_counter += 1
        if self.frame_counter % self.interval != 0:
            return False

        track = self._cars.get(car_key)
        if track is None:
            self._cars[car_key] = _Track(position)
            return False

        if (position - track.last_position).length() < self.min_distance:
            track.stuck_time += delta_time
            if track.stuck_time > self.timeout:
                track.stuck_time = 0.0
                track.last_position = position
                return True
        else:
            track.stuck_time = 0.0

        track.last_position = position
        return False

    def forget(self, car_key: Hashable) -> None:
        """Drop everything known about the car."""
        self._cars.pop(car_key, None)


@dataclass
class PerformanceStats:
    """Frames-per-second measured over windows of at least one second."""

    window_start: float = 0.0
    fps: float = INITIAL_FPS
    frame_count: int = field(default=0)

    def tick(self, now: float) -> float:
        """Count a frame at time ``now`` (seconds); return the current FPS figure."""
        self.frame_count += 1
        elapsed = now - self.window_start
        if elapsed >= FPS_WINDOW:
            self.fps = self.frame_count / elapsed
            self.frame_count = 0
            self.window_start = now
        return self.fps

    def text(self, delta_time: float) -> str:
        """The on-screen FPS and frame-time lines."""
        return f"FPS: {int(self.fps)}\nFrame: {int(delta_time * 1000.0)}ms"