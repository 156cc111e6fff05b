from __future__ import annotations

from typing import Iterable

from motion_control.geometry import Position

from .linear import LinearTrajectory


def linear_trajectories(
    waypoints: Iterable[Position],
    speed: float,
    tolerance: float,
    angle_tolerance_rad: float,
) -> list[LinearTrajectory]:
    """One :class:`LinearTrajectory` per waypoint, in order."""
    trajectories = [
        LinearTrajectory(waypoint, speed, tolerance, angle_tolerance_rad) for waypoint in waypoints
    ]
    if not trajectories:
        raise ValueError("linear_trajectories needs at least one waypoint.")
    return trajectories
