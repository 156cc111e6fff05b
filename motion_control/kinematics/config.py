from __future__ import annotations

import math
from dataclasses import dataclass, field

from motion_control.geometry import PointXY


@dataclass(frozen=True)
class TankConfig:
    """Differential drivetrain constants.

    ``turn_coefficient`` scales ``vz`` into the left/right power split;
    ``track_width`` is only used when reconstructing a translation from wheel
    powers.
    """

    turn_coefficient: float = 1.0
    track_width: float = 1.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.turn_coefficient) or self.turn_coefficient <= 0.0:
            raise ValueError("TankConfig.turn_coefficient must be positive and finite.")
        if not math.isfinite(self.track_width) or self.track_width <= 0.0:
            raise ValueError("TankConfig.track_width must be positive and finite.")


@dataclass(frozen=True)
class MecanumConfig:
    min_magnitude: float = 0.0
    max_magnitude: float = 1.0
    turn_magnitude: float = 1.0
    angle_offset_rad: float = 0.0

    def __post_init__(self) -> None:
        for name in ("min_magnitude", "max_magnitude", "turn_magnitude", "angle_offset_rad"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"MecanumConfig.{name} must be finite.")
        if self.min_magnitude < 0.0:
            raise ValueError("MecanumConfig.min_magnitude must be non-negative.")
        if not 0.0 < self.max_magnitude <= 1.0:
            raise ValueError("MecanumConfig.max_magnitude must be within (0, 1].")
        if self.min_magnitude > self.max_magnitude:
            raise ValueError("MecanumConfig.min_magnitude must not exceed max_magnitude.")


def _default_module_offsets() -> tuple[PointXY, PointXY, PointXY, PointXY]:
    # Front-right, front-left, back-right, back-left on a unit square.
    return (
        PointXY(0.5, -0.5),
        PointXY(0.5, 0.5),
        PointXY(-0.5, -0.5),
        PointXY(-0.5, 0.5),
    )


@dataclass(frozen=True)
class SwerveConfig:
    """Swerve drivetrain constants.

    ``module_offsets`` are the (forward, left) positions of the front-right,
    front-left, back-right and back-left modules relative to the center of
    rotation.
    """

    module_offsets: tuple[PointXY, PointXY, PointXY, PointXY] = field(
        default_factory=_default_module_offsets
    )
    turn_coefficient: float = 1.0
    speed_coefficient: float = 1.0
    optimize: bool = False

    def __post_init__(self) -> None:
        offsets = tuple(self.module_offsets)
        if len(offsets) != 4:
            raise ValueError(
                f"SwerveConfig.module_offsets must contain four modules; received {len(offsets)}."
            )
        if not all(isinstance(offset, PointXY) for offset in offsets):
            raise ValueError("SwerveConfig.module_offsets must contain PointXY values.")
        object.__setattr__(self, "module_offsets", offsets)
        if not math.isfinite(self.turn_coefficient):
            raise ValueError("SwerveConfig.turn_coefficient must be finite.")
        if not math.isfinite(self.speed_coefficient) or self.speed_coefficient <= 0.0:
            raise ValueError("SwerveConfig.speed_coefficient must be positive and finite.")
