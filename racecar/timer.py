"""Lap timer: elapsed-time tracking and its MM:SS.mmm display."""

from __future__ import annotations

import time
from collections.abc import Callable

from racecar.checkpoint import Rgba

ZERO_TIME = "00:00.000"

_GREEN: Rgba = (0, 255, 0, 255)
_BLUE: Rgba = (0, 0, 255, 255)
_CYAN: Rgba = (0, 255, 255, 255)
_MAGENTA: Rgba = (255, 0, 255, 255)
_YELLOW: Rgba = (255, 255, 0, 255)
_RED: Rgba = (255, 0, 0, 255)
_WHITE: Rgba = (255, 255, 255, 255)

_DIGIT_COLORS: tuple[Rgba, ...] = (
    _GREEN,
    _BLUE,
    _CYAN,
    _MAGENTA,
    _YELLOW,
    _RED,
    _WHITE,
    _GREEN,
    _BLUE,
    _CYAN,
)


def format_time(seconds: float) -> str:
    """Format a duration in seconds as MM:SS.mmm, truncating fractions."""
    whole = int(seconds)
    minutes, secs = divmod(whole, 60)
    milliseconds = int((seconds - whole) * 1000)
    return f"{minutes:02d}:{secs:02d}.{milliseconds:03d}"


def digit_colors(time_string: str) -> list[Rgba]:
    """Colours for the fallback display: one RGBA block per character."""
    colors = []
    for char in time_string:
        if char == ":":
            colors.append(_YELLOW)
        elif char == ".":
            colors.append(_RED)
        elif "0" <= char <= "9":
            colors.append(_DIGIT_COLORS[ord(char) - ord("0")])
        else:
            colors.append(_WHITE)
    return colors


class LapTimer:
    """A start-once stopwatch for a lap.

    The timer starts only the first time ``start`` is called after a reset;
    ``update`` refreshes the elapsed time while it is running.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._origin = clock()
        self.running = False
        self.started = False
        self.elapsed_time = 0.0
        self.time_string = ZERO_TIME

    def __repr__(self) -> str:
        return (
            f"LapTimer(running={self.running}, started={self.started}, "
            f"elapsed_time={self.elapsed_time!r})"
        )

    def start(self) -> None:
        """Start timing, unless the timer has already been started."""
        if not self.started:
            self.started = True
            self.running = True
            self._origin = self._clock()

    def stop(self) -> None:
        """Freeze the elapsed time."""
        self.running = False

    def reset(self) -> None:
        """Return to the unstarted state with zero elapsed time."""
        self.running = False
        self.started = False
        self.elapsed_time = 0.0
        self._origin = self._clock()
        self.time_string = ZERO_TIME

    def update(self) -> None:
        """Refresh the elapsed time and its text while running."""
        if not self.running:
            return
        elapsed = self._clock() - self._origin
        if elapsed != self.elapsed_time:
            self.elapsed_time = elapsed
            self.time_string = format_time(elapsed)