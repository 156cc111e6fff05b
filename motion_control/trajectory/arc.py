from __future__ import annotations

import math

from motion_control.geometry import PointXY, Position
from motion_control.geometry.angles import require_finite

from .base import Trajectory, require_position, validate_speed, validate_tolerance


class ArcTrajectory(Trajectory):
    """Circle ``center`` by chasing a marker ``angle_step_rad`` ahead on the arc.

    Positive steps travel counter-clockwise. The marker always carries
    ``heading_rad``. Without ``end_angle_rad`` the arc never completes and has
    to be cleared; with it, the trajectory is done once the robot is within
    ``tolerance`` of the point at that angle on the circle.
    """

    def __init__(
        self,
        center: PointXY,
        radius: float,
        speed: float,
        angle_step_rad: float,
        heading_rad: float,
        end_angle_rad: float | None = None,
        tolerance: float = 0.1,
    ) -> None:
        if not isinstance(center, PointXY):
            raise ValueError(f"ArcTrajectory.center must be a PointXY; received {type(center).__name__}.")
        require_finite("ArcTrajectory", radius=radius, angle_step_rad=angle_step_rad, heading_rad=heading_rad)
        if radius <= 0.0:
            raise ValueError(f"ArcTrajectory.radius must be positive; received {radius!r}.")
        if angle_step_rad == 0.0:
            raise ValueError("ArcTrajectory.angle_step_rad must be non-zero.")
        self._center = center
        self._radius = float(radius)
        self._speed = validate_speed("ArcTrajectory", speed)
        self._step = float(angle_step_rad)
        self._heading = float(heading_rad)
        self._tolerance = validate_tolerance("ArcTrajectory", "tolerance", tolerance)
        self._end: PointXY | None = None
        if end_angle_rad is not None:
            require_finite("ArcTrajectory", end_angle_rad=end_angle_rad)
            self._end = self._on_circle(end_angle_rad)

    @property
    def end_point(self) -> PointXY | None:
        return self._end

    def _on_circle(self, angle_rad: float) -> PointXY:
        return PointXY(
            self._center.x + self._radius * math.cos(angle_rad),
            self._center.y + self._radius * math.sin(angle_rad),
        )

    def next_marker(self, current: Position) -> Position:
        require_position("ArcTrajectory", "current", current)
        angle = self._center.angle_to(current.point) + self._step
        return self._on_circle(angle).with_heading(self._heading)

    def is_done(self, current: Position) -> bool:
        require_position("ArcTrajectory", "current", current)
        return self._end is not None and current.is_near(self._end, self._tolerance)

    def speed(self, current: Position) -> float:
        return self._speed

    def __repr__(self) -> str:
        return f"ArcTrajectory(center={self._center}, radius={self._radius}, step={self._step})"
