from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from .angles import fix_angle, require_finite


@dataclass(frozen=True)
class Translation:
    """Robot-relative velocity intent.

    ``vx`` is forward, ``vy`` is left strafe and ``vz`` is counter-clockwise
    rotation. Components are unit-less and conventionally within [-1, 1].
    """

    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0

    ZERO: ClassVar[Translation]

    def __post_init__(self) -> None:
        require_finite("Translation", vx=self.vx, vy=self.vy, vz=self.vz)
        object.__setattr__(self, "vx", float(self.vx))
        object.__setattr__(self, "vy", float(self.vy))
        object.__setattr__(self, "vz", float(self.vz))

    @property
    def magnitude(self) -> float:
        return math.hypot(self.vx, self.vy)

    @property
    def angle(self) -> float:
        """Direction of the (vx, vy) component in [0, 2*pi); zero for no motion."""
        if self.vx == 0.0 and self.vy == 0.0:
            return 0.0
        return fix_angle(math.atan2(self.vy, self.vx))

    def is_zero(self) -> bool:
        return self.vx == 0.0 and self.vy == 0.0 and self.vz == 0.0

    def rotate(self, angle_rad: float) -> Translation:
        """Rotate the (vx, vy) component counter-clockwise by ``angle_rad``."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return Translation(
            self.vx * cos_a - self.vy * sin_a,
            self.vx * sin_a + self.vy * cos_a,
            self.vz,
        )

    def to_relative(self, heading_rad: float) -> Translation:
        """Convert a field-relative translation into the robot frame."""
        return self.rotate(-heading_rad)

    def to_absolute(self, heading_rad: float) -> Translation:
        return self.rotate(heading_rad)

    def with_vz(self, vz: float) -> Translation:
        return Translation(self.vx, self.vy, vz)

    def multiply(self, scalar: float) -> Translation:
        return Translation(self.vx * scalar, self.vy * scalar, self.vz * scalar)

    def as_array(self) -> np.ndarray:
        return np.array([self.vx, self.vy, self.vz], dtype=float)

    def __str__(self) -> str:
        return f"Translation(vx={self.vx:.3f}, vy={self.vy:.3f}, vz={self.vz:.3f})"


Translation.ZERO = Translation(0.0, 0.0, 0.0)
