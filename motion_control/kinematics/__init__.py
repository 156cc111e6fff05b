"""Forward kinematics for the supported drivetrain geometries."""

from .base import Kinematics
from .config import MecanumConfig, SwerveConfig, TankConfig
from .mecanum import MecanumKinematics, MeccanumKinematics
from .states import MecanumState, SwerveModuleState, SwerveState, TankState
from .swerve import SwerveKinematics, default_module_controller
from .tank import TankKinematics

__all__ = [
    "Kinematics",
    "MecanumConfig",
    "MecanumKinematics",
    "MecanumState",
    "MeccanumKinematics",
    "SwerveConfig",
    "SwerveKinematics",
    "SwerveModuleState",
    "SwerveState",
    "TankConfig",
    "TankKinematics",
    "TankState",
    "default_module_controller",
]
