from __future__ import annotations

import logging

from motion_control.geometry import Translation

from .config import TankConfig
from .states import TankState

logger = logging.getLogger(__name__)


def _clip_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


class TankKinematics:
    """Differential drive: forward and rotation only, strafe is ignored."""

    def __init__(self, config: TankConfig | None = None) -> None:
        self.config = config or TankConfig()

    def calculate(self, translation: Translation) -> TankState:
        turn = translation.vz * self.config.turn_coefficient
        left = _clip_unit(translation.vx - turn)
        right = _clip_unit(translation.vx + turn)
        logger.debug("tank l=%.3f r=%.3f from %s", left, right, translation)
        return TankState(left=left, right=right)

    def to_translation(self, state: TankState) -> Translation:
        vx = (state.left + state.right) / 2.0
        vz = (state.right - state.left) / (2.0 * self.config.turn_coefficient)
        return Translation(vx, 0.0, vz)

    def to_velocity(self, state: TankState) -> tuple[float, float]:
        """Physical (linear, angular) rates using the configured track width."""
        linear = (state.left + state.right) / 2.0
        angular = (state.right - state.left) / self.config.track_width
        return linear, angular
