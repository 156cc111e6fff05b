"""Trajectories that hold the robot still instead of moving it."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable

from motion_control.geometry import Position

from .base import Trajectory, require_position

logger = logging.getLogger(__name__)


class EmptyTrajectory(Trajectory):
    """Done on the first check; a follower running it only sends the halt."""

    def next_marker(self, current: Position) -> Position:
        return require_position("EmptyTrajectory", "current", current)

    def is_done(self, current: Position) -> bool:
        return True

    def speed(self, current: Position) -> float:
        return 0.0

    def __repr__(self) -> str:
        return "EmptyTrajectory()"


class TaskTrajectory(Trajectory):
    """Hold position until ``is_finished`` reports that a task is complete.

    ``initial`` runs on the first completion check and ``during`` on every
    check. ``is_finished`` is not trusted before ``min_time_s`` has elapsed,
    and once ``max_time_s`` has elapsed the task counts as finished whatever
    it reports. ``on_finish`` runs once, on the check that first reports
    completion; later checks keep returning True.
    """

    def __init__(
        self,
        is_finished: Callable[[], bool],
        initial: Callable[[], None] | None = None,
        during: Callable[[], None] | None = None,
        on_finish: Callable[[], None] | None = None,
        min_time_s: float = 0.0,
        max_time_s: float = math.inf,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not callable(is_finished):
            raise ValueError("TaskTrajectory.is_finished must be callable.")
        for name, hook in (("initial", initial), ("during", during), ("on_finish", on_finish)):
            if hook is not None and not callable(hook):
                raise ValueError(f"TaskTrajectory.{name} must be callable or None.")
        min_time_s = float(min_time_s)
        max_time_s = float(max_time_s)
        if not math.isfinite(min_time_s) or min_time_s < 0.0:
            raise ValueError(f"TaskTrajectory.min_time_s must be a non-negative finite value; received {min_time_s!r}.")
        if math.isnan(max_time_s) or max_time_s < min_time_s:
            raise ValueError(
                f"TaskTrajectory.max_time_s must be at least min_time_s ({min_time_s}); received {max_time_s!r}."
            )
        self._is_finished = is_finished
        self._initial = initial
        self._during = during
        self._on_finish = on_finish
        self._min_time_s = min_time_s
        self._max_time_s = max_time_s
        self._clock = clock
        self._started_at: float | None = None
        self._finished = False

    def next_marker(self, current: Position) -> Position:
        return require_position("TaskTrajectory", "current", current)

    def is_done(self, current: Position) -> bool:
        require_position("TaskTrajectory", "current", current)
        if self._finished:
            return True
        if self._started_at is None:
            self._started_at = self._clock()
            if self._initial is not None:
                self._initial()
        if self._during is not None:
            self._during()

        elapsed = self._clock() - self._started_at
        done = bool(self._is_finished())
        if elapsed < self._min_time_s:
            done = False
        if elapsed >= self._max_time_s:
            if not done:
                logger.debug("Task trajectory hit max_time_s=%.3f", self._max_time_s)
            done = True

        if done:
            self._finished = True
            if self._on_finish is not None:
                self._on_finish()
        return done

    def speed(self, current: Position) -> float:
        return 0.0

    def __repr__(self) -> str:
        return f"TaskTrajectory(min_time_s={self._min_time_s}, max_time_s={self._max_time_s})"
