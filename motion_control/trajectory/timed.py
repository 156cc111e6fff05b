"""Open-loop trajectory that runs for a fixed amount of time."""

from __future__ import annotations

import math
import time
from collections.abc import Callable

from motion_control.geometry import Position, Translation
from motion_control.geometry.angles import require_finite

from .base import Trajectory, require_position, validate_speed


class TimedTrajectory(Trajectory):
    """Move along a robot-relative ``translation`` until ``duration_s`` passes.

    The marker sits ``speed`` ahead of the robot in the direction of the
    translation's ``(vx, vy)`` and its heading is offset by
    ``vz * turn_multiplier``. A translation with no ``vx``/``vy`` only turns.

    The clock starts on the first query rather than on construction, so a
    trajectory queued behind others keeps its full duration.
    """

    def __init__(
        self,
        translation: Translation,
        duration_s: float,
        speed: float,
        turn_multiplier: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not isinstance(translation, Translation):
            raise ValueError(
                f"TimedTrajectory.translation must be a Translation; received {type(translation).__name__}."
            )
        require_finite("TimedTrajectory", duration_s=duration_s, turn_multiplier=turn_multiplier)
        if duration_s < 0.0:
            raise ValueError(f"TimedTrajectory.duration_s must be non-negative; received {duration_s!r}.")
        self._translation = translation
        self._duration_s = float(duration_s)
        self._speed = validate_speed("TimedTrajectory", speed)
        self._turn_multiplier = float(turn_multiplier)
        self._clock = clock
        self._started_at: float | None = None

    @property
    def translation(self) -> Translation:
        return self._translation

    @property
    def duration_s(self) -> float:
        return self._duration_s

    def elapsed_s(self) -> float:
        now = self._clock()
        if self._started_at is None:
            self._started_at = now
        return now - self._started_at

    def next_marker(self, current: Position) -> Position:
        require_position("TimedTrajectory", "current", current)
        self.elapsed_s()
        heading = current.heading_rad + self._translation.vz * self._turn_multiplier
        vx, vy = self._translation.vx, self._translation.vy
        if vx == 0.0 and vy == 0.0:
            return current.with_heading(heading)
        direction = current.heading_rad + math.atan2(vy, vx)
        return current.in_direction(self._speed, direction).with_heading(heading)

    def is_done(self, current: Position) -> bool:
        require_position("TimedTrajectory", "current", current)
        return self.elapsed_s() >= self._duration_s

    def speed(self, current: Position) -> float:
        return self._speed

    def __repr__(self) -> str:
        return f"TimedTrajectory(translation={self._translation}, duration_s={self._duration_s})"
