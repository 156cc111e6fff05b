from .arc import ArcTrajectory
from .base import Trajectory
from .curves import AngleCurve, ConstantCurve, InterpolatedCurve, InterpolationMode, build_curve
from .factory import linear_trajectories
from .fast import FAST_TRAJECTORY_THRESHOLD, FastTrajectory
from .linear import LinearTrajectory
from .speed_ramp import SpeedRampTrajectory
from .spline import AdvancedSplineTrajectory, SplineTrajectory
from .task import EmptyTrajectory, TaskTrajectory
from .timed import TimedTrajectory

__all__ = [
    "AdvancedSplineTrajectory",
    "AngleCurve",
    "ArcTrajectory",
    "ConstantCurve",
    "EmptyTrajectory",
    "FAST_TRAJECTORY_THRESHOLD",
    "FastTrajectory",
    "InterpolatedCurve",
    "InterpolationMode",
    "LinearTrajectory",
    "SpeedRampTrajectory",
    "SplineTrajectory",
    "TaskTrajectory",
    "TimedTrajectory",
    "Trajectory",
    "build_curve",
    "linear_trajectories",
]
