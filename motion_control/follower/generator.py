from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from motion_control.control import Controller
from motion_control.drive import Drive, Odometry
from motion_control.trajectory import Trajectory

from .follower import Follower


class FollowerGenerator(Protocol):
    def __call__(self, trajectory: Trajectory, drive: Drive, odometry: Odometry) -> Follower: ...


def generic_follower_generator(
    turn_controller_factory: Callable[[], Controller],
) -> FollowerGenerator:
    """Generator building one :class:`Follower` per trajectory.

    A fresh turn controller is created for every follower so that no two
    followers share controller state.
    """

    def generate(trajectory: Trajectory, drive: Drive, odometry: Odometry) -> Follower:
        return Follower(trajectory, drive, odometry, turn_controller_factory())

    return generate
