from __future__ import annotations

import math
from abc import ABC, abstractmethod

from motion_control.geometry.angles import minimum_delta


def _validate_bounds(owner: str, min_output: float, max_output: float) -> None:
    if math.isnan(min_output) or math.isnan(max_output):
        raise ValueError(f"{owner} output bounds must not be NaN.")
    if min_output > max_output:
        raise ValueError(
            f"{owner} min_output ({min_output}) must not exceed max_output ({max_output})."
        )


def clip(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


class Controller(ABC):
    """Feedback law mapping a measured value onto a corrective output.

    Instances carry state (target, bounds, and for some laws an accumulator),
    so each one belongs to exactly one follower or kinematics module.
    """

    def __init__(
        self,
        min_output: float = -math.inf,
        max_output: float = math.inf,
    ) -> None:
        min_output = float(min_output)
        max_output = float(max_output)
        _validate_bounds(type(self).__name__, min_output, max_output)
        self._min = min_output
        self._max = max_output
        self._target = 0.0

    @property
    def target(self) -> float:
        return self._target

    @target.setter
    def target(self, target: float) -> None:
        target = float(target)
        if not math.isfinite(target):
            raise ValueError(f"{type(self).__name__} target must be finite; received {target!r}.")
        self._target = target

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    def set_bounds(self, min_output: float, max_output: float) -> None:
        min_output = float(min_output)
        max_output = float(max_output)
        _validate_bounds(type(self).__name__, min_output, max_output)
        self._min = min_output
        self._max = max_output

    def reset(self) -> None:
        """Clear internal memory. Stateless laws have nothing to clear."""

    def calculate(self, value: float, target: float | None = None) -> float:
        if target is not None:
            self.target = target
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{type(self).__name__} received a non-finite value: {value!r}.")
        return clip(self._compute(value), self._min, self._max)

    @abstractmethod
    def _compute(self, value: float) -> float: ...


class ProportionalController(Controller):
    def __init__(
        self,
        gain: float,
        min_output: float = -math.inf,
        max_output: float = math.inf,
    ) -> None:
        super().__init__(min_output, max_output)
        if not math.isfinite(gain):
            raise ValueError("ProportionalController gain must be finite.")
        self.gain = float(gain)

    def _compute(self, value: float) -> float:
        return (self._target - value) * self.gain


class BangBangController(Controller):
    """Emit one of two fixed outputs depending on the sign of the error."""

    def __init__(
        self,
        output_when_positive: float,
        output_when_negative: float,
        min_output: float = -math.inf,
        max_output: float = math.inf,
    ) -> None:
        super().__init__(min_output, max_output)
        if not (math.isfinite(output_when_positive) and math.isfinite(output_when_negative)):
            raise ValueError("BangBangController outputs must be finite.")
        self.output_when_positive = float(output_when_positive)
        self.output_when_negative = float(output_when_negative)

    def _compute(self, value: float) -> float:
        error = self._target - value
        if error == 0.0:
            return 0.0
        if error > 0.0:
            return self.output_when_positive
        return self.output_when_negative


class AngleDeltaController(Controller):
    """Scale the minimal signed angular delta from ``value`` to the target.

    Both the measured value and the target are headings in radians; the
    delta accounts for wraparound so 350 deg -> 10 deg is +20 deg.
    """

    def __init__(
        self,
        gain: float,
        min_output: float = -math.inf,
        max_output: float = math.inf,
    ) -> None:
        super().__init__(min_output, max_output)
        if not math.isfinite(gain):
            raise ValueError("AngleDeltaController gain must be finite.")
        self.gain = float(gain)

    @classmethod
    def inverted(
        cls,
        gain: float,
        min_output: float = -math.inf,
        max_output: float = math.inf,
    ) -> AngleDeltaController:
        """Controller for drivetrains whose physical turn direction is reversed."""
        return cls(-gain, min_output, max_output)

    def _compute(self, value: float) -> float:
        return minimum_delta(value, self._target) * self.gain
