from __future__ import annotations

import math
from dataclasses import dataclass

from .controllers import Controller


@dataclass(frozen=True)
class PIDGains:
    """Gains for :class:`PIDController`.

    ``integrator_limit`` bounds the magnitude of the accumulated error; use
    ``math.inf`` to leave it unbounded.
    """

    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    kf: float = 0.0
    integrator_limit: float = math.inf

    def __post_init__(self) -> None:
        for name in ("kp", "ki", "kd", "kf"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"PIDGains.{name} must be finite; received {value!r}.")
        if math.isnan(self.integrator_limit) or self.integrator_limit <= 0.0:
            raise ValueError("PIDGains.integrator_limit must be positive.")


class PIDController(Controller):
    """Discrete PID law evaluated once per tick.

    The derivative term acts on the measurement rather than the error, so a
    target change does not produce a derivative kick.
    """

    def __init__(
        self,
        gains: PIDGains,
        min_output: float = -math.inf,
        max_output: float = math.inf,
    ) -> None:
        super().__init__(min_output, max_output)
        self.gains = gains
        self._integrator = 0.0
        self._last_value: float | None = None

    @property
    def integrator(self) -> float:
        return self._integrator

    def reset(self) -> None:
        self._integrator = 0.0
        self._last_value = None

    def _compute(self, value: float) -> float:
        gains = self.gains
        error = self._target - value

        limit = gains.integrator_limit
        self._integrator = max(-limit, min(limit, self._integrator + error))

        if self._last_value is None:
            self._last_value = value
        derivative = value - self._last_value
        self._last_value = value

        return (
            gains.kp * error
            + gains.ki * self._integrator
            - gains.kd * derivative
            + gains.kf * self._target
        )
