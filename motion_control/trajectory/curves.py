"""One-dimensional interpolating curves used by the spline trajectories."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

import numpy as np
from scipy.interpolate import Akima1DInterpolator, CubicSpline, PchipInterpolator

from motion_control.geometry.angles import fix_angle


class InterpolationMode(Enum):
    MONOTONE = "monotone"
    CUBIC = "cubic"
    AKIMA = "akima"
    LINEAR = "linear"


class Curve(Protocol):
    @property
    def start_x(self) -> float: ...

    @property
    def end_x(self) -> float: ...

    @property
    def end_y(self) -> float: ...

    def __call__(self, x: float) -> float: ...


class InterpolatedCurve:
    """y(x) through a set of control points.

    Control point x values must be strictly increasing or strictly
    decreasing; ``start_x``/``end_x`` keep the caller's ordering so the curve
    knows which way it is travelled. Evaluation clamps x to the control
    point span instead of extrapolating.
    """

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        mode: InterpolationMode = InterpolationMode.MONOTONE,
    ) -> None:
        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        if xs.ndim != 1 or xs.shape != ys.shape:
            raise ValueError(
                f"Curve control points must be matching 1-D sequences; received shapes {xs.shape} and {ys.shape}."
            )
        if xs.size < 2:
            raise ValueError("Curves need at least two control points.")
        if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
            raise ValueError("Curve control points must be finite.")

        steps = np.diff(xs)
        if np.all(steps > 0.0):
            order = slice(None)
        elif np.all(steps < 0.0):
            order = slice(None, None, -1)
        else:
            raise ValueError(
                f"Curve x values must be strictly increasing or strictly decreasing; received {xs.tolist()}."
            )

        self.mode = mode
        self._start = (float(xs[0]), float(ys[0]))
        self._end = (float(xs[-1]), float(ys[-1]))
        self._x = xs[order]
        self._y = ys[order]
        self._interpolator = _build_interpolator(self._x, self._y, mode)

    @property
    def start_x(self) -> float:
        return self._start[0]

    @property
    def start_y(self) -> float:
        return self._start[1]

    @property
    def end_x(self) -> float:
        return self._end[0]

    @property
    def end_y(self) -> float:
        return self._end[1]

    @property
    def min_x(self) -> float:
        return float(self._x[0])

    @property
    def max_x(self) -> float:
        return float(self._x[-1])

    def __call__(self, x: float) -> float:
        clamped = min(max(float(x), self.min_x), self.max_x)
        return float(self._interpolator(clamped))


class ConstantCurve:
    """Zero-slope curve substituted when every control value is identical."""

    def __init__(self, value: float, start_x: float = 0.0, end_x: float = 0.0) -> None:
        self.value = float(value)
        self._start_x = float(start_x)
        self._end_x = float(end_x)

    @property
    def start_x(self) -> float:
        return self._start_x

    @property
    def end_x(self) -> float:
        return self._end_x

    @property
    def end_y(self) -> float:
        return self.value

    def __call__(self, x: float) -> float:
        return self.value


class AngleCurve:
    """Heading(x) curve.

    Headings are unwrapped before interpolation so that a transition such as
    350 deg -> 10 deg sweeps through 0 deg rather than back through 180 deg.
    """

    def __init__(
        self,
        x: Sequence[float],
        headings_rad: Sequence[float],
        mode: InterpolationMode = InterpolationMode.MONOTONE,
    ) -> None:
        headings = np.asarray(headings_rad, dtype=float)
        if not np.all(np.isfinite(headings)):
            raise ValueError("AngleCurve headings must be finite.")
        unwrapped = np.unwrap(headings)
        if np.allclose(unwrapped, unwrapped[0]):
            self._curve: Curve = ConstantCurve(float(unwrapped[0]), x[0], x[-1])
        else:
            self._curve = InterpolatedCurve(x, unwrapped, mode)

    @property
    def end_heading_rad(self) -> float:
        return fix_angle(self._curve.end_y)

    def __call__(self, x: float) -> float:
        return fix_angle(self._curve(x))


def build_curve(
    x: Sequence[float],
    y: Sequence[float],
    mode: InterpolationMode = InterpolationMode.MONOTONE,
) -> Curve:
    """Build a curve through the control points, collapsing constant data."""
    values = np.asarray(y, dtype=float)
    if values.size >= 1 and np.all(values == values[0]):
        return ConstantCurve(float(values[0]), x[0], x[-1])
    return InterpolatedCurve(x, y, mode)


def _build_interpolator(x: np.ndarray, y: np.ndarray, mode: InterpolationMode):
    if mode is InterpolationMode.LINEAR or x.size == 2:
        return lambda value: np.interp(value, x, y)
    if mode is InterpolationMode.MONOTONE:
        return PchipInterpolator(x, y, extrapolate=False)
    if mode is InterpolationMode.CUBIC:
        return CubicSpline(x, y, bc_type="natural", extrapolate=False)
    if mode is InterpolationMode.AKIMA:
        return Akima1DInterpolator(x, y)
    raise ValueError(f"Unsupported interpolation mode: {mode!r}")
