from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def wrap_angle(angle_rad: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    wrapped = math.remainder(float(angle_rad), TWO_PI)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


def fix_angle(angle_rad: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    fixed = math.fmod(float(angle_rad), TWO_PI)
    if fixed < 0.0:
        fixed += TWO_PI
    if fixed >= TWO_PI:
        fixed = 0.0
    return fixed


def minimum_delta(current_rad: float, target_rad: float) -> float:
    """Signed smallest rotation taking ``current_rad`` onto ``target_rad``.

    Positive values are counter-clockwise. Equal angles (including angles
    that differ by whole turns) return exactly zero.
    """
    delta = float(target_rad) - float(current_rad)
    if delta == 0.0:
        return 0.0
    return wrap_angle(delta)


def is_close(a_rad: float, b_rad: float, tolerance_rad: float) -> bool:
    return abs(minimum_delta(a_rad, b_rad)) <= tolerance_rad


def require_finite(owner: str, **values: float) -> None:
    for name, value in values.items():
        if value is None:
            raise ValueError(f"{owner}.{name} must not be None.")
        if not math.isfinite(float(value)):
            raise ValueError(f"{owner}.{name} must be finite; received {value!r}.")
