from __future__ import annotations

import math
from typing import Sequence

from motion_control.geometry import Position

from .base import require_position, validate_speed
from .curves import Curve, InterpolationMode, build_curve
from .linear import LinearTrajectory


class SpeedRampTrajectory(LinearTrajectory):
    """Linear trajectory whose speed follows a curve over the robot's x.

    ``speed_points`` is a sequence of ``(x, speed)`` pairs. Speed is zero
    once the target has been reached, as with :class:`LinearTrajectory`.
    """

    def __init__(
        self,
        target: Position,
        tolerance: float,
        angle_tolerance_rad: float,
        speed_points: Sequence[tuple[float, float]],
        interpolation: InterpolationMode = InterpolationMode.MONOTONE,
    ) -> None:
        pairs = [(float(x), float(s)) for x, s in speed_points]
        if len(pairs) < 2:
            raise ValueError("SpeedRampTrajectory needs at least two (x, speed) points.")
        for _, speed in pairs:
            validate_speed("SpeedRampTrajectory", speed)
        super().__init__(target, max(s for _, s in pairs), tolerance, angle_tolerance_rad)
        self._curve: Curve = build_curve([x for x, _ in pairs], [s for _, s in pairs], interpolation)

    def speed(self, current: Position) -> float:
        require_position("SpeedRampTrajectory", "current", current)
        if self.is_done(current):
            return 0.0
        speed = self._curve(current.x)
        if not math.isfinite(speed) or speed < 0.0 or speed > 1.0:
            raise ValueError(f"SpeedRampTrajectory produced an invalid speed {speed!r}.")
        return speed
