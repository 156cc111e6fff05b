from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Self

import numpy as np

from .angles import fix_angle, is_close, minimum_delta, require_finite


@dataclass(frozen=True)
class PointXY:
    x: float
    y: float

    def __post_init__(self) -> None:
        require_finite("PointXY", x=self.x, y=self.y)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def distance_to(self, other: PointXY) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def angle_to(self, other: PointXY) -> float:
        """Bearing from this point to ``other`` in [0, 2*pi)."""
        return fix_angle(math.atan2(other.y - self.y, other.x - self.x))

    def is_near(self, other: PointXY, tolerance: float) -> bool:
        return self.distance_to(other) <= tolerance

    def with_heading(self, heading_rad: float) -> Position:
        return Position(self.x, self.y, heading_rad)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class Position:
    """Field-relative pose reported by odometry.

    ``heading_rad`` is normalized into [0, 2*pi) on construction so that equal
    poses compare equal regardless of how many turns were accumulated.
    """

    x: float
    y: float
    heading_rad: float = 0.0

    def __post_init__(self) -> None:
        require_finite("Position", x=self.x, y=self.y, heading_rad=self.heading_rad)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "heading_rad", fix_angle(self.heading_rad))

    @classmethod
    def from_degrees(cls, x: float, y: float, heading_deg: float) -> Self:
        return cls(x, y, math.radians(heading_deg))

    @property
    def point(self) -> PointXY:
        return PointXY(self.x, self.y)

    @property
    def heading_deg(self) -> float:
        return math.degrees(self.heading_rad)

    def distance_to(self, other: Position | PointXY) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def angle_to(self, other: Position | PointXY) -> float:
        return self.point.angle_to(PointXY(other.x, other.y))

    def is_near(self, other: Position | PointXY, tolerance: float) -> bool:
        return self.distance_to(other) <= tolerance

    def heading_delta_to(self, other: Position) -> float:
        return minimum_delta(self.heading_rad, other.heading_rad)

    def is_heading_close(self, other: Position, tolerance_rad: float) -> bool:
        return is_close(self.heading_rad, other.heading_rad, tolerance_rad)

    def with_heading(self, heading_rad: float) -> Position:
        return Position(self.x, self.y, heading_rad)

    def in_direction(self, distance: float, angle_rad: float) -> Position:
        return Position(
            self.x + distance * math.cos(angle_rad),
            self.y + distance * math.sin(angle_rad),
            self.heading_rad,
        )

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.heading_rad], dtype=float)

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.heading_deg:.1f} deg)"
