"""Generation bookkeeping for the learning simulation: time limits and reports."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_TIME_STEPS = ((25, 5.0), (50, 10.0), (75, 15.0))
_FINAL_TIME_LIMIT = 20.0


@dataclass(frozen=True)
class CarResult:
    """How one car did in a generation."""

    fitness: float
    checkpoints: int
    time_alive: float

    @property
    def speed(self) -> float:
        """Checkpoints passed per second alive, or zero for a car that never lived."""
        return self.checkpoints / self.time_alive if self.time_alive > 0.0 else 0.0

    @property
    def alive(self) -> bool:
        return self.time_alive > 0.0


def max_generation_time(generation: int) -> float:
    """Seconds a generation may run; later generations get longer."""
    for limit, seconds in _TIME_STEPS:
        if generation < limit:
            return seconds
    return _FINAL_TIME_LIMIT


def best_result(results: Sequence[CarResult]) -> CarResult | None:
    """The first result with the highest fitness, or None when there are none."""
    if not results:
        return None
    return max(results, key=lambda result: result.fitness)


def _best_line(best: CarResult) -> str:
    return (
        f"Best Car - Checkpoints: {best.checkpoints}, "
        f"Time Alive: {best.time_alive:.1f}s, "
        f"Speed: {best.speed:.2f} checkpoints/s"
    )


def _car_line(index: int, result: CarResult) -> str:
    return (
        f"Car {index}: Fitness={result.fitness:.0f}, "
        f"Checkpoints={result.checkpoints}, "
        f"Time={result.time_alive:.1f}s, "
        f"Speed={result.speed:.2f} c/s, "
        f"Alive={'Yes' if result.alive else 'No'}"
    )


def fitness_report(results: Sequence[CarResult]) -> str:
    """The end-of-generation summary: the best car, then every car in order."""
    lines = []
    best = best_result(results)
    if best is not None:
        lines.append(_best_line(best))
    lines.append("")
    lines.append("=== ALL CARS FITNESS ===")
    lines.extend(_car_line(index, result) for index, result in enumerate(results))
    return "\n".join(lines)


def stats_text(
    enabled: bool,
    paused: bool,
    generation: int,
    best_fitness: float,
    species_count: int,
    generation_time: float,
    active_cars: int,
) -> str:
    """The on-screen statistics panel for the learning simulation."""
    return (
        "=== AI LEARNING SIMULATION ===\n"
        f"Status: {'ACTIVE' if enabled else 'STOPPED'}\n"
        f"Paused: {'YES' if paused else 'NO'}\n"
        f"Generation: {generation}\n"
        f"Best Fitness: {int(best_fitness)}\n"
        f"Species Count: {species_count}\n"
        f"Generation Time: {int(generation_time)}/20s\n"
        f"Active Cars: {active_cars}\n"
    )