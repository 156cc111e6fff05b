from __future__ import annotations

import logging
import math
from enum import Enum

from motion_control.control import Controller
from motion_control.drive import Drive, Odometry
from motion_control.geometry import Position, Translation
from motion_control.geometry.angles import minimum_delta
from motion_control.trajectory import Trajectory

from .errors import FollowerError, FollowerException

logger = logging.getLogger(__name__)


class FollowerState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"


class TickOutcome(Enum):
    CONTINUE = "continue"
    DONE = "done"
    ERROR = "error"


def relative_translation(
    current: Position,
    marker: Position,
    speed: float,
    turn: float,
) -> Translation:
    """Robot-relative translation that moves from ``current`` towards ``marker``.

    The field bearing to the marker is rotated into the robot frame and given
    a magnitude of ``speed``; ``turn`` becomes ``vz``. When the two points
    coincide there is no bearing, so only the turn is returned.

    Raises:
        FollowerException: if any component is not finite.
    """
    if current.x == marker.x and current.y == marker.y:
        vx, vy = 0.0, 0.0
    else:
        bearing = math.atan2(marker.y - current.y, marker.x - current.x) - current.heading_rad
        vx = speed * math.cos(bearing)
        vy = speed * math.sin(bearing)

    if not (math.isfinite(vx) and math.isfinite(vy) and math.isfinite(turn)):
        raise FollowerException(
            FollowerError.NON_FINITE_TRANSLATION,
            f"Computed a non-finite translation ({vx}, {vy}, {turn}) "
            f"from {current} towards {marker}.",
        )
    return Translation(vx, vy, turn)


class Follower:
    """Binds one trajectory to a drive/odometry pair and a turn controller.

    ``tick`` reads the pose, asks the trajectory for a marker and speed and
    forwards a relative translation to the drive. On the first tick where the
    trajectory reports completion a single zero translation is sent and the
    follower becomes :attr:`FollowerState.DONE` for good.

    The turn controller is fed the negated heading error with a target of
    zero, so a plain proportional law yields ``gain * error``.
    """

    def __init__(
        self,
        trajectory: Trajectory,
        drive: Drive,
        odometry: Odometry,
        turn_controller: Controller,
    ) -> None:
        if trajectory is None:
            raise ValueError("Follower.trajectory must not be None.")
        if drive is None:
            raise ValueError("Follower.drive must not be None.")
        if odometry is None:
            raise ValueError("Follower.odometry must not be None.")
        if turn_controller is None:
            raise ValueError("Follower.turn_controller must not be None.")
        self.trajectory = trajectory
        self.drive = drive
        self.odometry = odometry
        self.turn_controller = turn_controller
        self.turn_controller.target = 0.0
        self._state = FollowerState.PENDING
        self.last_translation: Translation | None = None
        self.last_marker: Position | None = None

    @property
    def state(self) -> FollowerState:
        return self._state

    @property
    def is_done(self) -> bool:
        return self._state is FollowerState.DONE

    def tick(self) -> TickOutcome:
        if self._state is FollowerState.DONE:
            return TickOutcome.DONE
        self._state = FollowerState.RUNNING

        current = self._read_position()
        if self.trajectory.is_done(current):
            self.drive.set_translation(Translation.ZERO)
            self.last_translation = Translation.ZERO
            self._state = FollowerState.DONE
            logger.debug("Trajectory %r finished at %s", self.trajectory, current)
            return TickOutcome.DONE

        marker = self.trajectory.next_marker(current)
        speed = self.trajectory.speed(current)
        if speed is None or not math.isfinite(speed) or speed < 0.0:
            raise FollowerException(
                FollowerError.INVALID_SPEED,
                f"Trajectory {self.trajectory!r} returned an invalid speed: {speed!r}.",
            )
        turn = self.turn_controller.calculate(-minimum_delta(current.heading_rad, marker.heading_rad))
        translation = relative_translation(current, marker, speed, turn)

        self.drive.set_translation(translation)
        self.last_marker = marker
        self.last_translation = translation
        logger.debug("pose %s marker %s -> %s", current, marker, translation)
        return TickOutcome.CONTINUE

    def _read_position(self) -> Position:
        position = self.odometry.get_position()
        if not isinstance(position, Position):
            raise FollowerException(
                FollowerError.INVALID_POSITION,
                f"Odometry returned an invalid position: {position!r}.",
            )
        return position

    def __repr__(self) -> str:
        return f"Follower({self.trajectory!r}, state={self._state.value})"
