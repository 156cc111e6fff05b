"""Top-level convenience wrapper around the follower queue."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from motion_control.control import Controller, ProportionalController
from motion_control.drive import Drive, Odometry
from motion_control.execution import ExecutorManager, FollowerGroup
from motion_control.follower import FollowerGenerator, TickOutcome, generic_follower_generator
from motion_control.geometry import Position, Translation
from motion_control.trajectory import (
    AdvancedSplineTrajectory,
    InterpolationMode,
    LinearTrajectory,
    Trajectory,
    linear_trajectories,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathfinderConfig:
    """Defaults applied to trajectories built by :class:`Pathfinder`.

    ``turn_gain`` is the proportional gain of each follower's heading
    controller; its output is limited to [-1, 1].
    """

    speed: float = 0.5
    tolerance: float = 0.5
    angle_tolerance_rad: float = math.radians(5.0)
    turn_gain: float = 1.0
    spline_step: float = 0.5
    interpolation: InterpolationMode = InterpolationMode.MONOTONE

    def __post_init__(self) -> None:
        for name in ("speed", "tolerance", "angle_tolerance_rad", "turn_gain", "spline_step"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"PathfinderConfig.{name} must be finite.")
        if not 0.0 <= self.speed <= 1.0:
            raise ValueError("PathfinderConfig.speed must be within [0, 1].")
        if self.tolerance < 0.0 or self.angle_tolerance_rad < 0.0:
            raise ValueError("PathfinderConfig tolerances must be non-negative.")
        if self.spline_step <= 0.0:
            raise ValueError("PathfinderConfig.spline_step must be positive.")
        if not isinstance(self.interpolation, InterpolationMode):
            raise ValueError(
                f"PathfinderConfig.interpolation must be an InterpolationMode; received {self.interpolation!r}."
            )

    def turn_controller(self) -> Controller:
        return ProportionalController(self.turn_gain, -1.0, 1.0)


class Pathfinder:
    def __init__(
        self,
        drive: Drive,
        odometry: Odometry,
        config: PathfinderConfig | None = None,
        follower_generator: FollowerGenerator | None = None,
    ) -> None:
        self.drive = drive
        self.odometry = odometry
        self.config = config or PathfinderConfig()
        self.follower_generator = follower_generator or generic_follower_generator(
            self.config.turn_controller
        )
        self.manager = ExecutorManager(drive)

    def go_to(self, target: Position) -> Pathfinder:
        cfg = self.config
        return self.follow_trajectory(
            LinearTrajectory(target, cfg.speed, cfg.tolerance, cfg.angle_tolerance_rad)
        )

    def follow_trajectory(self, trajectory: Trajectory) -> Pathfinder:
        follower = self.follower_generator(trajectory, self.drive, self.odometry)
        self.manager.add_executor(FollowerGroup([follower]))
        return self

    def follow_trajectories(self, trajectories: Iterable[Trajectory]) -> Pathfinder:
        for trajectory in trajectories:
            self.follow_trajectory(trajectory)
        return self

    def follow_waypoints(self, waypoints: Iterable[Position]) -> Pathfinder:
        cfg = self.config
        return self.follow_trajectories(
            linear_trajectories(waypoints, cfg.speed, cfg.tolerance, cfg.angle_tolerance_rad)
        )

    def spline_to(self, *points: Position) -> Pathfinder:
        """Queue a spline from the current pose through ``points``."""
        if not points:
            raise ValueError("spline_to needs at least one point.")
        cfg = self.config
        trajectory = AdvancedSplineTrajectory(
            [self.get_position(), *points],
            cfg.speed,
            cfg.spline_step,
            cfg.tolerance,
            cfg.angle_tolerance_rad,
            cfg.interpolation,
        )
        return self.follow_trajectory(trajectory)

    def tick(self) -> bool:
        return self.manager.tick()

    def step(self) -> TickOutcome:
        return self.manager.step()

    def tick_until(
        self,
        timeout_s: float = math.inf,
        should_continue: Callable[[Pathfinder], bool] | None = None,
        on_tick: Callable[[Pathfinder], None] | None = None,
    ) -> TickOutcome:
        """Step until the queue drains, an error occurs or a bound is hit.

        Motion is halted with :meth:`clear` if the timeout expires or
        ``should_continue`` returns False while followers are still queued.
        """
        deadline = time.monotonic() + timeout_s
        outcome = TickOutcome.DONE if self.manager.is_inactive() else TickOutcome.CONTINUE
        while self.manager.is_active():
            if time.monotonic() > deadline:
                logger.warning("tick_until timed out after %.3f s", timeout_s)
                self.clear()
                break
            if should_continue is not None and not should_continue(self):
                self.clear()
                break
            outcome = self.step()
            if on_tick is not None:
                on_tick(self)
            if outcome is TickOutcome.ERROR:
                break
        return outcome

    def clear(self) -> None:
        self.manager.clear_executors()

    def is_active(self) -> bool:
        return self.manager.is_active()

    def get_position(self) -> Position | None:
        return self.odometry.get_position()

    def get_translation(self) -> Translation:
        return self.drive.get_translation()
