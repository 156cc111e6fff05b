from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class TankState:
    left: float
    right: float


@dataclass(frozen=True)
class MecanumState:
    fr: float
    fl: float
    br: float
    bl: float

    @classmethod
    def from_array(cls, powers: np.ndarray) -> MecanumState:
        fr, fl, br, bl = (float(p) for p in powers)
        return cls(fr=fr, fl=fl, br=br, bl=bl)

    def as_array(self) -> np.ndarray:
        return np.array([self.fr, self.fl, self.br, self.bl], dtype=float)

    @property
    def max_power(self) -> float:
        return float(np.max(np.abs(self.as_array())))

    def normalize_under_one(self) -> MecanumState:
        """Divide every wheel by max(1, max |power|), preserving direction."""
        powers = self.as_array()
        return MecanumState.from_array(powers / max(1.0, self.max_power))

    def scale(self, factor: float) -> MecanumState:
        return MecanumState.from_array(self.as_array() * factor)


@dataclass(frozen=True)
class SwerveModuleState:
    """Command for one swerve module.

    ``turn`` is the steering power from the module's heading controller,
    ``drive`` the wheel power and ``heading_rad`` the heading the module is
    being steered towards.
    """

    turn: float
    drive: float
    heading_rad: float


@dataclass(frozen=True)
class SwerveState:
    fr: SwerveModuleState
    fl: SwerveModuleState
    br: SwerveModuleState
    bl: SwerveModuleState

    def __iter__(self) -> Iterator[SwerveModuleState]:
        return iter((self.fr, self.fl, self.br, self.bl))
