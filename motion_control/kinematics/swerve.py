from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

import numpy as np

from motion_control.control import AngleDeltaController, Controller
from motion_control.geometry import Translation
from motion_control.geometry.angles import fix_angle, minimum_delta

from .config import SwerveConfig
from .states import SwerveModuleState, SwerveState

logger = logging.getLogger(__name__)

HeadingSupplier = Callable[[], float]

# Module vectors shorter than this are treated as "no motion requested".
_ZERO_VECTOR_EPSILON = 1e-9


def default_module_controller() -> Controller:
    return AngleDeltaController(1.0 / math.pi, -1.0, 1.0)


class SwerveKinematics:
    """Four-module swerve mapping with per-module heading servoing.

    Each module owns its own heading controller. Passing the same controller
    instance for two modules is rejected because stateful laws would leak
    between modules.
    """

    def __init__(
        self,
        module_headings: Sequence[HeadingSupplier],
        config: SwerveConfig | None = None,
        controllers: Sequence[Controller] | None = None,
        controller_factory: Callable[[], Controller] = default_module_controller,
    ) -> None:
        self.config = config or SwerveConfig()
        module_headings = tuple(module_headings)
        if len(module_headings) != 4:
            raise ValueError(
                f"SwerveKinematics needs four module heading suppliers; received {len(module_headings)}."
            )
        if controllers is None:
            controllers = tuple(controller_factory() for _ in range(4))
        controllers = tuple(controllers)
        if len(controllers) != 4:
            raise ValueError(
                f"SwerveKinematics needs four module controllers; received {len(controllers)}."
            )
        if len({id(controller) for controller in controllers}) != 4:
            raise ValueError("SwerveKinematics module controllers must be distinct instances.")

        self._headings = module_headings
        self._controllers = controllers
        self._offsets = np.array(
            [[offset.x, offset.y] for offset in self.config.module_offsets], dtype=float
        )
        self._last_targets: list[float | None] = [None, None, None, None]

    @property
    def controllers(self) -> tuple[Controller, ...]:
        return self._controllers

    @property
    def last_targets(self) -> tuple[float | None, ...]:
        return tuple(self._last_targets)

    def reset(self) -> None:
        self._last_targets = [None, None, None, None]
        for controller in self._controllers:
            controller.reset()

    def module_vectors(self, translation: Translation) -> np.ndarray:
        """Per-module (forward, left) velocity vectors, shape (4, 2)."""
        omega = translation.vz * self.config.turn_coefficient
        vx = translation.vx - omega * self._offsets[:, 1]
        vy = translation.vy + omega * self._offsets[:, 0]
        return np.column_stack((vx, vy))

    def calculate(self, translation: Translation) -> SwerveState:
        vectors = self.module_vectors(translation)
        magnitudes = np.hypot(vectors[:, 0], vectors[:, 1]) * self.config.speed_coefficient
        drives = magnitudes / max(1.0, float(np.max(magnitudes)))

        modules: list[SwerveModuleState] = []
        for index in range(4):
            current = float(self._headings[index]())
            if magnitudes[index] <= _ZERO_VECTOR_EPSILON:
                modules.append(self._hold(index, current))
                continue

            target = fix_angle(math.atan2(vectors[index, 1], vectors[index, 0]))
            drive = float(drives[index])
            if self.config.optimize and abs(minimum_delta(current, target)) > math.pi / 2.0:
                target = fix_angle(target + math.pi)
                drive = -drive

            self._last_targets[index] = target
            turn = self._controllers[index].calculate(current, target)
            modules.append(SwerveModuleState(turn=turn, drive=drive, heading_rad=target))

        state = SwerveState(*modules)
        logger.debug("swerve %s from %s", state, translation)
        return state

    def _hold(self, index: int, current: float) -> SwerveModuleState:
        target = self._last_targets[index]
        if target is None:
            target = fix_angle(current)
            self._last_targets[index] = target
        turn = self._controllers[index].calculate(current, target)
        return SwerveModuleState(turn=turn, drive=0.0, heading_rad=target)
