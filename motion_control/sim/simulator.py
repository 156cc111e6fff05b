from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from motion_control.drive import Drive
from motion_control.follower import TickOutcome
from motion_control.geometry import Position, Translation

from .config import SimulatorConfig

logger = logging.getLogger(__name__)


class Steppable(Protocol):
    def step(self) -> TickOutcome: ...


@dataclass
class SimulationStep:
    time_s: float
    position: Position
    translation: Translation
    outcome: TickOutcome


class Simulator:
    """First-order kinematic plant acting as both drive and odometry.

    ``set_translation`` records the robot-relative intent and ``step``
    integrates it into the pose. An optional ``drive`` receives every
    translation as well, so real kinematics and motors can be exercised;
    ``response`` maps the commanded translation onto the motion the robot
    actually performs (e.g. a tank drive cannot strafe).
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        drive: Drive | None = None,
        response: Callable[[Translation], Translation] | None = None,
    ) -> None:
        self._config = config or SimulatorConfig()
        self.dt = float(self._config.dt)
        self.drive = drive
        self.response = response
        self.position = self._config.initial_position
        self.translation = Translation.ZERO
        self.time_s = 0.0
        self.command_count = 0

    def reset(self, position: Position | None = None, time_s: float = 0.0) -> None:
        self.position = position if position is not None else self._config.initial_position
        self.translation = Translation.ZERO
        self.time_s = float(time_s)
        self.command_count = 0

    def get_position(self) -> Position:
        return self.position

    def get_translation(self) -> Translation:
        return self.translation

    def set_translation(self, translation: Translation) -> None:
        if self.drive is not None:
            self.drive.set_translation(translation)
        self.translation = translation
        self.command_count += 1

    def step(self, dt: float | None = None) -> Position:
        dt = float(dt if dt is not None else self.dt)
        if dt <= 0.0:
            raise ValueError("dt must be positive")

        motion = self.response(self.translation) if self.response is not None else self.translation
        vx, vy, vz = np.clip(motion.as_array(), -1.0, 1.0)
        heading = self.position.heading_rad
        cos_h = math.cos(heading)
        sin_h = math.sin(heading)

        # Robot-frame intent to field-frame displacement.
        dx = (vx * cos_h - vy * sin_h) * self._config.max_speed * dt
        dy = (vx * sin_h + vy * cos_h) * self._config.max_speed * dt
        dz = vz * self._config.max_turn_rate_rad_s * dt

        self.position = Position(self.position.x + dx, self.position.y + dy, heading + dz)
        self.time_s += dt
        return self.position

    def run(
        self,
        target: Steppable,
        final_time_s: float,
        progress_callback: Callable[[SimulationStep], None] | None = None,
        stop_when_idle: bool = True,
    ) -> list[SimulationStep]:
        """Alternate ``target.step()`` and plant integration until ``final_time_s``.

        ``target`` is anything with a ``step() -> TickOutcome`` method, such as
        an :class:`~motion_control.execution.ExecutorManager` or a
        :class:`~motion_control.pathfinder.Pathfinder`.
        """
        steps = int(np.ceil((final_time_s - self.time_s) / self.dt))
        history: list[SimulationStep] = []
        for _ in range(max(0, steps)):
            outcome = target.step()
            self.step(self.dt)
            record = SimulationStep(
                time_s=self.time_s,
                position=self.position,
                translation=self.translation,
                outcome=outcome,
            )
            history.append(record)
            if progress_callback is not None:
                progress_callback(record)
            if stop_when_idle and outcome is not TickOutcome.CONTINUE:
                break
        logger.info(
            "Simulation ended at t=%.2f s, pose %s after %d ticks", self.time_s, self.position, len(history)
        )
        return history


class SimulatedMotor:
    """Motor stand-in that records every power it is given."""

    def __init__(self, name: str = "motor") -> None:
        self.name = name
        self.power = 0.0
        self.history: list[float] = []

    def set_power(self, power: float) -> None:
        self.power = float(power)
        self.history.append(self.power)

    def get_power(self) -> float:
        return self.power

    def __repr__(self) -> str:
        return f"SimulatedMotor({self.name!r}, power={self.power:.3f})"
