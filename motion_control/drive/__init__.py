from .drives import KinematicDrive, MecanumDrive, SwerveDrive, SwerveModule, TankDrive, clamp_power
from .interfaces import Drive, Motor, Odometry
from .modifier import IDENTITY_MODIFIER, DriveModifier

__all__ = [
    "Drive",
    "DriveModifier",
    "IDENTITY_MODIFIER",
    "KinematicDrive",
    "MecanumDrive",
    "Motor",
    "Odometry",
    "SwerveDrive",
    "SwerveModule",
    "TankDrive",
    "clamp_power",
]
