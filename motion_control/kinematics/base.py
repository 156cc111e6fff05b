from __future__ import annotations

from typing import Protocol, TypeVar

from motion_control.geometry import Translation

StateT = TypeVar("StateT", covariant=True)


class Kinematics(Protocol[StateT]):
    def calculate(self, translation: Translation) -> StateT: ...
