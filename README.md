# racecar

The rendering-free core of a race car simulation in which a population of
AI-driven cars learns to drive round a track. Everything here is plain state
and geometry; drawing is left to the caller, who gets colours, text and
positions back instead.

## Modules

- `racecar.checkpoint`
  - `Vec2`: an immutable 2D vector with `+`, `-`, unary `-`, `*` and `/` by a
    scalar, and `length()`.
  - `Rect`: an axis-aligned rectangle (`left`, `top`, `width`, `height`) with
    `contains(point)` (half-open).
  - `segments_intersect(a1, a2, b1, b2)`: segment crossing test; parallel
    segments never intersect.
  - `Checkpoint(corners, number)`: a four-cornered gate. `contains_point`,
    `intersects_segment`, `mark_hit`, `reset`, `center`, `bounds` and
    `colors` (fill and outline RGBA). A checkpoint given anything other than
    four corners is inert. Number `-1` (`FINAL_CHECKPOINT`) is the finish line.
- `racecar.checkpoint_handler`
  - `SegmentData`: a track segment's centre, size, rotation (degrees) and index.
  - `checkpoint_corners(segment)`: the gate corners for a segment, widened
    eightfold across the track.
  - `CheckpointHandler`: builds one checkpoint per segment with
    `initialize_checkpoints` (the first segment also becomes the finish line)
    and tracks progress.
    - Single car: `check_position_with_line`, `hit_checkpoints`,
      `lap_completed`, `reset_all_checkpoints`, `visible_checkpoints`,
      `counter_text`.
    - Many cars: `set_max_cars`, `check_car_position`,
      `check_car_position_with_line`, `car_hit_checkpoints`,
      `car_lap_completed`, `progress_for_car`, `reset_car_progress`,
      `reset_all_car_progress`. Out-of-range car ids are ignored and report
      zero progress. Per-car state is held in `CarProgress`.
- `racecar.timer`
  - `LapTimer`: a start-once stopwatch with `start`, `stop`, `reset` and
    `update`, exposing `elapsed_time` and `time_string`. The clock function
    can be injected (defaults to `time.monotonic`).
  - `format_time(seconds)`: `MM:SS.mmm`, truncating fractions.
  - `digit_colors(time_string)`: one RGBA colour per character for a
    block-style fallback display.
- `racecar.ui`
  - `Color`, `MouseButton`.
  - `Button`: a rectangle that fires its `on_click` callback on a left press
    followed by a left release inside it. `press`, `release` (returns whether
    a click completed), `update` (hover and fill colour), `set_position`,
    `set_size`, `set_enabled`, `set_colors`.
  - `UIManager`: after `initialize()`, holds Start, Pause and Save buttons
    with `ButtonLabel`s; Pause and Save start disabled. Callbacks and enabled
    state are set with `set_start_callback`, `set_stop_callback`,
    `set_save_callback`, `set_start_enabled`, `set_stop_enabled`,
    `set_save_enabled`.
- `racecar.generation`
  - `CarResult(fitness, checkpoints, time_alive)` with `speed` and `alive`.
  - `max_generation_time(generation)`: 5 s below generation 25, 10 s below
    50, 15 s below 75, then 20 s.
  - `best_result(results)`, `fitness_report(results)` and
    `stats_text(...)` for the statistics overlay.
- `racecar.monitoring`
  - `is_crashed(position, inner_edge, outer_edge)`: within 15 units of any
    third edge point.
  - `StuckDetector`: `check(car_key, position, delta_time)` flags a car that
    has moved less than 5 units between checks for more than 3 s; checks run
    on every tenth call. `forget(car_key)` drops a car.
  - `PerformanceStats`: `tick(now)` measures frames per second over windows
    of at least one second; `text(delta_time)` gives the overlay lines.

## Example

```python
from racecar.checkpoint import Vec2
from racecar.checkpoint_handler import CheckpointHandler, SegmentData
from racecar.timer import format_time

handler = CheckpointHandler()
handler.initialize_checkpoints([
    SegmentData(position=Vec2(100, 100), size=Vec2(10, 20), rotation=0.0),
    SegmentData(position=Vec2(300, 100), size=Vec2(10, 20), rotation=0.0),
])
handler.check_position_with_line(Vec2(90, 100), Vec2(110, 100))
print(handler.counter_text())  # Checkpoints: 1/2

print(format_time(75.25))  # 01:15.250
```

## What this package does not do

It opens no window and draws nothing, and has no command to start a game.
It does not build a track, simulate car physics or ray sensors, or contain
the neural networks and population that drive and evolve the cars; the
caller supplies track segments, edge points, car positions and fitness
results.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```