from __future__ import annotations

import math
from abc import ABC, abstractmethod

from motion_control.geometry import Position


class Trajectory(ABC):
    """Strategy producing the next marker, a speed and a completion predicate.

    Geometric implementations are immutable once constructed and may be
    queried on every tick. Timed and task trajectories start their clock on
    the first query, so an instance should be followed only once.
    """

    @abstractmethod
    def next_marker(self, current: Position) -> Position: ...

    @abstractmethod
    def is_done(self, current: Position) -> bool: ...

    @abstractmethod
    def speed(self, current: Position) -> float: ...


def require_position(owner: str, name: str, value: object) -> Position:
    if value is None:
        raise ValueError(f"{owner}.{name} must not be None.")
    if not isinstance(value, Position):
        raise ValueError(f"{owner}.{name} must be a Position; received {type(value).__name__}.")
    return value


def validate_speed(owner: str, speed: float) -> float:
    speed = float(speed)
    if not math.isfinite(speed) or speed < 0.0 or speed > 1.0:
        raise ValueError(f"{owner}.speed must be within [0, 1]; received {speed!r}.")
    return speed


def validate_tolerance(owner: str, name: str, tolerance: float) -> float:
    tolerance = float(tolerance)
    if not math.isfinite(tolerance) or tolerance < 0.0:
        raise ValueError(f"{owner}.{name} must be a non-negative finite value; received {tolerance!r}.")
    return tolerance
