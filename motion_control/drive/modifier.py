from __future__ import annotations

from dataclasses import dataclass

from motion_control.geometry import Translation


@dataclass(frozen=True)
class DriveModifier:
    """Remaps a translation before it reaches the kinematics.

    Axis swapping happens before inversion, so ``invert_x`` always refers to
    the component that ends up in ``vx``.
    """

    swap_xy: bool = False
    invert_x: bool = False
    invert_y: bool = False

    def __call__(self, translation: Translation) -> Translation:
        vx, vy = translation.vx, translation.vy
        if self.swap_xy:
            vx, vy = vy, vx
        if self.invert_x:
            vx = -vx
        if self.invert_y:
            vy = -vy
        return Translation(vx, vy, translation.vz)


IDENTITY_MODIFIER = DriveModifier()
