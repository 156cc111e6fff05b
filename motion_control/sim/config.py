from __future__ import annotations

import math
from dataclasses import dataclass, field

from motion_control.geometry import Position


@dataclass(frozen=True)
class SimulatorConfig:
    """Configuration for the kinematic robot simulator.

    A translation component of 1.0 moves the robot at ``max_speed`` units per
    second; ``vz`` of 1.0 turns it at ``max_turn_rate_rad_s``.
    """

    dt: float = 0.02
    max_speed: float = 1.0
    max_turn_rate_rad_s: float = math.pi
    initial_position: Position = field(default_factory=lambda: Position(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        if not math.isfinite(self.dt) or self.dt <= 0.0:
            raise ValueError("SimulatorConfig.dt must be positive.")
        if not math.isfinite(self.max_speed) or self.max_speed <= 0.0:
            raise ValueError("SimulatorConfig.max_speed must be positive.")
        if not math.isfinite(self.max_turn_rate_rad_s) or self.max_turn_rate_rad_s <= 0.0:
            raise ValueError("SimulatorConfig.max_turn_rate_rad_s must be positive.")
        if not isinstance(self.initial_position, Position):
            raise ValueError("SimulatorConfig.initial_position must be a Position.")
