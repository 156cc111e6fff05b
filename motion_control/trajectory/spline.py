"""Spline trajectories that chase a lookahead point along y(x)."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Sequence

from motion_control.geometry import PointXY, Position
from motion_control.geometry.angles import fix_angle, is_close

from .base import Trajectory, require_position, validate_speed, validate_tolerance
from .curves import AngleCurve, Curve, InterpolationMode, build_curve


def _coordinates(owner: str, points: Sequence[PointXY | Position]) -> tuple[list[float], list[float]]:
    if points is None or len(points) < 2:
        raise ValueError(f"{owner} needs at least two control points.")
    for index, point in enumerate(points):
        if not isinstance(point, (PointXY, Position)):
            raise ValueError(
                f"{owner} control point {index} must be a PointXY or Position; "
                f"received {type(point).__name__}."
            )
    return [p.x for p in points], [p.y for p in points]


def _directed_step(owner: str, step: float, start_x: float, end_x: float) -> float:
    step = float(step)
    if step == 0.0 or not math.isfinite(step):
        raise ValueError(f"{owner}.step must be a non-zero finite value; received {step!r}.")
    decreasing = start_x > end_x
    if (decreasing and step > 0.0) or (not decreasing and step < 0.0):
        step = -step
    return step


class _LookaheadSpline(Trajectory):
    """Shared lookahead/completion logic for the spline variants."""

    _name = "SplineTrajectory"

    def __init__(
        self,
        points: Sequence[PointXY | Position],
        step: float,
        tolerance: float,
        angle_tolerance_rad: float,
        interpolation: InterpolationMode,
    ) -> None:
        xs, ys = _coordinates(self._name, points)
        self._path: Curve = build_curve(xs, ys, interpolation)
        self._end = PointXY(xs[-1], ys[-1])
        self._min_x = min(xs[0], xs[-1])
        self._max_x = max(xs[0], xs[-1])
        self._step = _directed_step(self._name, step, xs[0], xs[-1])
        self._tolerance = validate_tolerance(self._name, "tolerance", tolerance)
        self._angle_tolerance = validate_tolerance(
            self._name, "angle_tolerance_rad", angle_tolerance_rad
        )
        self.interpolation = interpolation

    @property
    def step(self) -> float:
        return self._step

    @property
    def end_point(self) -> PointXY:
        return self._end

    def _clamp_x(self, x: float) -> float:
        return min(max(x, self._min_x), self._max_x)

    @abstractmethod
    def _heading_at(self, x: float) -> float: ...

    @abstractmethod
    def _end_heading(self) -> float: ...

    def next_marker(self, current: Position) -> Position:
        require_position(self._name, "current", current)
        x = self._clamp_x(current.x + self._step)
        return Position(x, self._path(x), self._heading_at(x))

    def is_done(self, current: Position) -> bool:
        require_position(self._name, "current", current)
        return current.is_near(self._end, self._tolerance) and is_close(
            current.heading_rad, self._end_heading(), self._angle_tolerance
        )


class SplineTrajectory(_LookaheadSpline):
    """Follow a single y(x) curve at a fixed heading and constant speed."""

    _name = "SplineTrajectory"

    def __init__(
        self,
        points: Sequence[PointXY | Position],
        heading_rad: float,
        speed: float,
        step: float,
        tolerance: float,
        angle_tolerance_rad: float = math.radians(5.0),
        interpolation: InterpolationMode = InterpolationMode.MONOTONE,
    ) -> None:
        super().__init__(points, step, tolerance, angle_tolerance_rad, interpolation)
        if heading_rad is None or not math.isfinite(heading_rad):
            raise ValueError(f"SplineTrajectory.heading_rad must be finite; received {heading_rad!r}.")
        self._heading = fix_angle(heading_rad)
        self._speed = validate_speed(self._name, speed)

    def _heading_at(self, x: float) -> float:
        return self._heading

    def _end_heading(self) -> float:
        return self._heading

    def speed(self, current: Position) -> float:
        return self._speed

    def __repr__(self) -> str:
        return (
            f"SplineTrajectory(end={self._end}, heading_rad={self._heading:.3f}, "
            f"speed={self._speed}, step={self._step})"
        )


class AdvancedSplineTrajectory(_LookaheadSpline):
    """Spline with interpolated heading and speed as well as position.

    ``points`` supply x, y and the heading at each control point. ``speeds``
    is either one value used everywhere or one value per control point.
    """

    _name = "AdvancedSplineTrajectory"

    def __init__(
        self,
        points: Sequence[Position],
        speeds: float | Sequence[float],
        step: float,
        tolerance: float,
        angle_tolerance_rad: float = math.radians(5.0),
        interpolation: InterpolationMode = InterpolationMode.MONOTONE,
    ) -> None:
        super().__init__(points, step, tolerance, angle_tolerance_rad, interpolation)
        for index, point in enumerate(points):
            if not isinstance(point, Position):
                raise ValueError(
                    f"AdvancedSplineTrajectory control point {index} must be a Position; "
                    f"received {type(point).__name__}."
                )
        xs = [p.x for p in points]
        if isinstance(speeds, (int, float)):
            speeds = [float(speeds)] * len(points)
        speeds = [float(s) for s in speeds]
        if len(speeds) != len(points):
            raise ValueError(
                f"AdvancedSplineTrajectory needs one speed per control point; "
                f"received {len(speeds)} speeds for {len(points)} points."
            )
        for speed in speeds:
            validate_speed(self._name, speed)
        self._headings = AngleCurve(xs, [p.heading_rad for p in points], interpolation)
        self._speeds = build_curve(xs, speeds, interpolation)

    def _heading_at(self, x: float) -> float:
        return self._headings(x)

    def _end_heading(self) -> float:
        return self._headings.end_heading_rad

    def speed(self, current: Position) -> float:
        require_position(self._name, "current", current)
        speed = self._speeds(self._clamp_x(current.x))
        if not math.isfinite(speed) or speed < 0.0 or speed > 1.0:
            raise ValueError(
                f"AdvancedSplineTrajectory produced an invalid speed {speed!r}; "
                "check the speed control points."
            )
        return speed

    def __repr__(self) -> str:
        return (
            f"AdvancedSplineTrajectory(end={self._end}, step={self._step}, "
            f"interpolation={self.interpolation.value})"
        )
