"""Lap progress tracking over an ordered sequence of checkpoints."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from racecar.checkpoint import FINAL_CHECKPOINT, Checkpoint, Vec2

_PI = 3.14159
_WIDTH_FACTOR = 8.0
_LOOK_AHEAD = 3
_LOOK_BEHIND = 2
_SAMPLE_SPACING = 10.0
_MAX_SAMPLES = 10


@dataclass(frozen=True)
class SegmentData:
    """A track segment a checkpoint is built from: centre, size and rotation in degrees."""

    position: Vec2
    size: Vec2
    rotation: float = 0.0
    segment_index: int = 0


@dataclass
class CarProgress:
    """How far one car has come around the lap."""

    hit_checkpoints: int = 0
    lap_completed: bool = False
    last_position: Vec2 = field(default_factory=Vec2)

    def clear(self) -> None:
        self.hit_checkpoints = 0
        self.lap_completed = False
        self.last_position = Vec2()


def checkpoint_corners(segment: SegmentData) -> list[Vec2]:
    """The four corners of a segment's gate, widened for fast-moving cars."""
    angle = segment.rotation * _PI / 180.0
    cos_rot = math.cos(angle)
    sin_rot = math.sin(angle)
    half_w = segment.size.x * _WIDTH_FACTOR / 2.0
    half_h = segment.size.y / 2.0
    offsets = (
        Vec2(-half_w * cos_rot - half_h * sin_rot, -half_w * sin_rot + half_h * cos_rot),
        Vec2(half_w * cos_rot - half_h * sin_rot, half_w * sin_rot + half_h * cos_rot),
        Vec2(half_w * cos_rot + half_h * sin_rot, half_w * sin_rot - half_h * cos_rot),
        Vec2(-half_w * cos_rot + half_h * sin_rot, -half_w * sin_rot - half_h * cos_rot),
    )
    return [segment.position + offset for offset in offsets]


def _touches(checkpoint: Checkpoint, previous: Vec2, current: Vec2) -> bool:
    return checkpoint.intersects_segment(previous, current) or checkpoint.contains_point(current)


class CheckpointHandler:
    """Tracks which checkpoints have been passed, for one car or for many."""

    def __init__(self) -> None:
        self.checkpoints: list[Checkpoint] = []
        self.final_checkpoint: Checkpoint | None = None
        self.hit_checkpoints = 0
        self.lap_completed = False
        self.car_progress: list[CarProgress] = [CarProgress()]

    @property
    def total_checkpoints(self) -> int:
        return len(self.checkpoints)

    @property
    def max_cars(self) -> int:
        return len(self.car_progress)

    def initialize_checkpoints(self, segments: Iterable[SegmentData]) -> None:
        """Build one checkpoint per segment; the first also becomes the finish line."""
        self.checkpoints = []
        self.final_checkpoint = None
        self.hit_checkpoints = 0
        self.lap_completed = False
        for number, segment in enumerate(segments):
            corners = checkpoint_corners(segment)
            self.checkpoints.append(Checkpoint(corners, number))
            if number == 0:
                self.final_checkpoint = Checkpoint(corners, FINAL_CHECKPOINT)

    def _ahead(self, start: int) -> list[Checkpoint]:
        return self.checkpoints[start : start + _LOOK_AHEAD]

    def check_position_with_line(self, previous: Vec2, current: Vec2) -> None:
        """Advance the single-car progress for a move from previous to current."""
        advanced = False
        for offset, checkpoint in enumerate(self._ahead(self.hit_checkpoints)):
            if not checkpoint.is_hit and _touches(checkpoint, previous, current):
                checkpoint.mark_hit()
                self.hit_checkpoints += offset + 1
                advanced = True
                break

        if not advanced and self.hit_checkpoints > 0:
            for back in range(1, _LOOK_BEHIND + 1):
                index = self.hit_checkpoints - back
                if index < 0:
                    break
                checkpoint = self.checkpoints[index]
                if not checkpoint.is_hit and _touches(checkpoint, previous, current):
                    checkpoint.mark_hit()
                    break

        final = self.final_checkpoint
        if (
            final is not None
            and self.hit_checkpoints == self.total_checkpoints
            and not self.lap_completed
            and _touches(final, previous, current)
        ):
            final.mark_hit()
            self.lap_completed = True

    def _reset_checkpoints(self) -> None:
        for checkpoint in self.checkpoints:
            checkpoint.reset()
        if self.final_checkpoint is not None:
            self.final_checkpoint.reset()

    def reset_all_checkpoints(self) -> None:
        """Clear every checkpoint and the single-car progress."""
        self._reset_checkpoints()
        self.hit_checkpoints = 0
        self.lap_completed = False

    def visible_checkpoints(self) -> list[Checkpoint]:
        """The checkpoints worth drawing: the next one, and the finish once all are passed."""
        visible = []
        if self.hit_checkpoints < self.total_checkpoints:
            visible.append(self.checkpoints[self.hit_checkpoints])
        if self.final_checkpoint is not None and self.hit_checkpoints == self.total_checkpoints:
            visible.append(self.final_checkpoint)
        return visible

    def counter_text(self) -> str:
        """The on-screen checkpoint counter."""
        return f"Checkpoints: {self.hit_checkpoints}/{self.total_checkpoints}"

    def set_max_cars(self, max_cars: int) -> None:
        """Resize the per-car progress list, keeping existing entries."""
        if max_cars < 0:
            raise ValueError("max_cars must not be negative")
        kept = self.car_progress[:max_cars]
        self.car_progress = kept + [CarProgress() for _ in range(max_cars - len(kept))]

    def _progress(self, car_id: int) -> CarProgress | None:
        if 0 <= car_id < self.max_cars:
            return self.car_progress[car_id]
        return None

    def _check_final(self, progress: CarProgress, hit: bool) -> None:
        final = self.final_checkpoint
        if (
            final is not None
            and progress.hit_checkpoints == self.total_checkpoints
            and not progress.lap_completed
            and hit
        ):
            final.mark_hit()
            progress.lap_completed = True

    def check_car_position(self, car_id: int, position: Vec2) -> None:
        """Advance one car's progress from its current position alone."""
        progress = self._progress(car_id)
        if progress is None:
            return
        progress.last_position = position
        for offset, checkpoint in enumerate(self._ahead(progress.hit_checkpoints)):
            if not checkpoint.is_hit and checkpoint.contains_point(position):
                checkpoint.mark_hit()
                progress.hit_checkpoints += offset + 1
                break
        final = self.final_checkpoint
        self._check_final(progress, final is not None and final.contains_point(position))

    def check_car_position_with_line(self, car_id: int, previous: Vec2, current: Vec2) -> None:
        """Advance one car's progress by sampling points along its move."""
        progress = self._progress(car_id)
        if progress is None:
            return
        progress.last_position = current

        distance = (current - previous).length()
        samples = min(max(1, int(distance / _SAMPLE_SPACING)), _MAX_SAMPLES)
        for sample in range(samples + 1):
            if progress.hit_checkpoints >= self.total_checkpoints:
                break
            point = previous + (current - previous) * (sample / samples)
            checkpoint = self.checkpoints[progress.hit_checkpoints]
            if checkpoint.contains_point(point):
                checkpoint.mark_hit()
                progress.hit_checkpoints += 1
                break

        final = self.final_checkpoint
        self._check_final(progress, final is not None and _touches(final, previous, current))

    def car_hit_checkpoints(self, car_id: int) -> int:
        progress = self._progress(car_id)
        return progress.hit_checkpoints if progress is not None else 0

    def car_lap_completed(self, car_id: int) -> bool:
        progress = self._progress(car_id)
        return progress.lap_completed if progress is not None else False

    def progress_for_car(self, car_id: int) -> float:
        """Fraction of checkpoints the car has passed."""
        progress = self._progress(car_id)
        if progress is None or self.total_checkpoints == 0:
            return 0.0
        return progress.hit_checkpoints / self.total_checkpoints

    def reset_car_progress(self, car_id: int) -> None:
        progress = self._progress(car_id)
        if progress is not None:
            progress.clear()

    def reset_all_car_progress(self) -> None:
        """Clear every car's progress and every checkpoint."""
        for progress in self.car_progress:
            progress.clear()
        self._reset_checkpoints()