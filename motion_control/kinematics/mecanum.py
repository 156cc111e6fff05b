from __future__ import annotations

import logging

import numpy as np

from motion_control.geometry import Translation

from .config import MecanumConfig
from .states import MecanumState

logger = logging.getLogger(__name__)

# Rows: front-right, front-left, back-right, back-left. Columns: vx, vy, vz.
_MIXING_MATRIX = np.array(
    [
        [1.0, 1.0, 1.0],
        [1.0, -1.0, -1.0],
        [1.0, -1.0, 1.0],
        [1.0, 1.0, -1.0],
    ]
)


class MecanumKinematics:
    """Robot-relative mecanum mixing with normalization and magnitude bounds."""

    def __init__(self, config: MecanumConfig | None = None) -> None:
        self.config = config or MecanumConfig()

    def calculate(self, translation: Translation) -> MecanumState:
        config = self.config
        rotated = translation.rotate(config.angle_offset_rad)
        intent = np.array([rotated.vx, rotated.vy, rotated.vz * config.turn_magnitude])
        raw = MecanumState.from_array(_MIXING_MATRIX @ intent)
        state = _apply_magnitude_bounds(raw.normalize_under_one(), config)
        logger.debug("mecanum %s from %s", state, translation)
        return state


class MeccanumKinematics(MecanumKinematics):
    """Alternate spelling retained for callers that construct it by name."""


def _apply_magnitude_bounds(state: MecanumState, config: MecanumConfig) -> MecanumState:
    powers = state.as_array()
    peak = float(np.max(np.abs(powers)))
    if peak > config.max_magnitude:
        powers = powers * (config.max_magnitude / peak)
    if config.min_magnitude > 0.0:
        magnitudes = np.abs(powers)
        lifted = np.where(
            (magnitudes > 0.0) & (magnitudes < config.min_magnitude),
            np.sign(powers) * config.min_magnitude,
            powers,
        )
        powers = lifted
    return MecanumState.from_array(powers)
