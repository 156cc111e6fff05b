from __future__ import annotations

from motion_control.geometry import Position

from .base import Trajectory, require_position, validate_speed

# Distance from the endpoint at which a fast trajectory counts as arrived.
FAST_TRAJECTORY_THRESHOLD = 0.05


class FastTrajectory(Trajectory):
    """Aim at ``end`` at a constant speed with no tolerance refinement.

    Completion is reached when the robot is within
    :data:`FAST_TRAJECTORY_THRESHOLD` of ``end`` or has covered at least the
    start-to-end span along both axes. Heading is never checked and the
    speed is never ramped down.
    """

    def __init__(self, start: Position, end: Position, speed: float) -> None:
        self._start = require_position("FastTrajectory", "start", start)
        self._end = require_position("FastTrajectory", "end", end)
        self._speed = validate_speed("FastTrajectory", speed)

    @property
    def start(self) -> Position:
        return self._start

    @property
    def end(self) -> Position:
        return self._end

    def next_marker(self, current: Position) -> Position:
        return self._end

    def is_done(self, current: Position) -> bool:
        require_position("FastTrajectory", "current", current)
        if current.is_near(self._end, FAST_TRAJECTORY_THRESHOLD):
            return True
        travelled_x = abs(current.x - self._start.x)
        travelled_y = abs(current.y - self._start.y)
        span_x = abs(self._end.x - self._start.x)
        span_y = abs(self._end.y - self._start.y)
        return travelled_x >= span_x and travelled_y >= span_y

    def speed(self, current: Position) -> float:
        return self._speed

    def __repr__(self) -> str:
        return f"FastTrajectory(start={self._start}, end={self._end}, speed={self._speed})"
