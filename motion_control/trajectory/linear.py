from __future__ import annotations

from motion_control.geometry import Position

from .base import Trajectory, require_position, validate_speed, validate_tolerance


class LinearTrajectory(Trajectory):
    """Drive straight at a fixed target until within both tolerances.

    Once the robot is inside the positional and angular tolerances the
    reported speed drops to zero so no residual command is issued after
    arrival.
    """

    def __init__(
        self,
        target: Position,
        speed: float,
        tolerance: float,
        angle_tolerance_rad: float,
    ) -> None:
        self._target = require_position("LinearTrajectory", "target", target)
        self._speed = validate_speed("LinearTrajectory", speed)
        self._tolerance = validate_tolerance("LinearTrajectory", "tolerance", tolerance)
        self._angle_tolerance = validate_tolerance(
            "LinearTrajectory", "angle_tolerance_rad", angle_tolerance_rad
        )

    @property
    def target(self) -> Position:
        return self._target

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def angle_tolerance_rad(self) -> float:
        return self._angle_tolerance

    def next_marker(self, current: Position) -> Position:
        return self._target

    def is_done(self, current: Position) -> bool:
        require_position("LinearTrajectory", "current", current)
        return current.is_near(self._target, self._tolerance) and current.is_heading_close(
            self._target, self._angle_tolerance
        )

    def speed(self, current: Position) -> float:
        return self._speed * (0.0 if self.is_done(current) else 1.0)

    def __repr__(self) -> str:
        return (
            f"LinearTrajectory(target={self._target}, speed={self._speed}, "
            f"tolerance={self._tolerance}, angle_tolerance_rad={self._angle_tolerance})"
        )
