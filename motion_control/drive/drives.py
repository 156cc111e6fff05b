"""Drivetrains that turn a :class:`Translation` into motor powers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from motion_control.geometry import Translation
from motion_control.kinematics import (
    Kinematics,
    MecanumKinematics,
    MecanumState,
    SwerveKinematics,
    SwerveState,
    TankKinematics,
    TankState,
)

from .interfaces import Motor
from .modifier import IDENTITY_MODIFIER, DriveModifier

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")


def clamp_power(power: float) -> float:
    return max(-1.0, min(1.0, float(power)))


class KinematicDrive(ABC, Generic[StateT]):
    """Base drive: modifier, kinematics, then per-actuator dispatch.

    ``get_translation`` reports the last translation after the modifier was
    applied, which is what the actuators actually received.
    """

    def __init__(
        self,
        kinematics: Kinematics[StateT],
        modifier: DriveModifier | None = None,
    ) -> None:
        self.kinematics = kinematics
        self.modifier = modifier or IDENTITY_MODIFIER
        self._translation = Translation.ZERO
        self._last_state: StateT | None = None

    @property
    def last_state(self) -> StateT | None:
        return self._last_state

    def get_translation(self) -> Translation:
        return self._translation

    def set_translation(self, translation: Translation) -> None:
        modified = self.modifier(translation)
        state = self.kinematics.calculate(modified)
        self._translation = modified
        self._last_state = state
        self._dispatch(state)

    @abstractmethod
    def _dispatch(self, state: StateT) -> None: ...


class TankDrive(KinematicDrive[TankState]):
    def __init__(
        self,
        left: Motor,
        right: Motor,
        kinematics: TankKinematics | None = None,
        modifier: DriveModifier | None = None,
    ) -> None:
        super().__init__(kinematics or TankKinematics(), modifier)
        self.left = left
        self.right = right

    def _dispatch(self, state: TankState) -> None:
        self.left.set_power(clamp_power(state.left))
        self.right.set_power(clamp_power(state.right))


class MecanumDrive(KinematicDrive[MecanumState]):
    def __init__(
        self,
        fr: Motor,
        fl: Motor,
        br: Motor,
        bl: Motor,
        kinematics: MecanumKinematics | None = None,
        modifier: DriveModifier | None = None,
    ) -> None:
        super().__init__(kinematics or MecanumKinematics(), modifier)
        self.motors = (fr, fl, br, bl)

    def _dispatch(self, state: MecanumState) -> None:
        for motor, power in zip(self.motors, (state.fr, state.fl, state.br, state.bl)):
            motor.set_power(clamp_power(power))


@dataclass
class SwerveModule:
    """One steerable wheel: a turn motor, a drive motor and a heading sensor."""

    turn_motor: Motor
    drive_motor: Motor
    heading: Callable[[], float]

    def apply(self, turn: float, drive: float) -> None:
        self.turn_motor.set_power(clamp_power(turn))
        self.drive_motor.set_power(clamp_power(drive))


class SwerveDrive(KinematicDrive[SwerveState]):
    """Swerve drivetrain.

    Modules are ordered front-right, front-left, back-right, back-left. When
    ``kinematics`` is omitted one is built from the modules' heading
    sensors.
    """

    def __init__(
        self,
        fr: SwerveModule,
        fl: SwerveModule,
        br: SwerveModule,
        bl: SwerveModule,
        kinematics: SwerveKinematics | None = None,
        modifier: DriveModifier | None = None,
    ) -> None:
        self.modules = (fr, fl, br, bl)
        if kinematics is None:
            kinematics = SwerveKinematics([module.heading for module in self.modules])
        super().__init__(kinematics, modifier)

    def _dispatch(self, state: SwerveState) -> None:
        for module, module_state in zip(self.modules, state):
            module.apply(module_state.turn, module_state.drive)
        logger.debug("swerve modules dispatched: %s", state)
