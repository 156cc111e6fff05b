"""Tick-driven trajectory following for differential, mecanum and swerve robots."""

from .control import (
    AngleDeltaController,
    BangBangController,
    Controller,
    PIDController,
    PIDGains,
    ProportionalController,
)
from .drive import Drive, DriveModifier, MecanumDrive, Motor, Odometry, SwerveDrive, SwerveModule, TankDrive
from .execution import ExecutorManager, FollowerGroup
from .follower import Follower, FollowerError, FollowerException, FollowerState, TickOutcome
from .geometry import PointXY, Position, Translation
from .pathfinder import Pathfinder, PathfinderConfig
from .trajectory import (
    AdvancedSplineTrajectory,
    ArcTrajectory,
    EmptyTrajectory,
    FastTrajectory,
    InterpolationMode,
    LinearTrajectory,
    SpeedRampTrajectory,
    SplineTrajectory,
    TaskTrajectory,
    TimedTrajectory,
    Trajectory,
)

__all__ = [
    "AdvancedSplineTrajectory",
    "AngleDeltaController",
    "ArcTrajectory",
    "BangBangController",
    "Controller",
    "Drive",
    "DriveModifier",
    "EmptyTrajectory",
    "ExecutorManager",
    "FastTrajectory",
    "Follower",
    "FollowerError",
    "FollowerException",
    "FollowerGroup",
    "FollowerState",
    "InterpolationMode",
    "LinearTrajectory",
    "MecanumDrive",
    "Motor",
    "Odometry",
    "PIDController",
    "PIDGains",
    "Pathfinder",
    "PathfinderConfig",
    "PointXY",
    "Position",
    "ProportionalController",
    "SpeedRampTrajectory",
    "SplineTrajectory",
    "SwerveDrive",
    "SwerveModule",
    "TaskTrajectory",
    "TankDrive",
    "TickOutcome",
    "TimedTrajectory",
    "Translation",
    "Trajectory",
]
