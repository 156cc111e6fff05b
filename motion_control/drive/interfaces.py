from __future__ import annotations

from typing import Protocol, runtime_checkable

from motion_control.geometry import Position, Translation


@runtime_checkable
class Motor(Protocol):
    def set_power(self, power: float) -> None: ...

    def get_power(self) -> float: ...


@runtime_checkable
class Odometry(Protocol):
    def get_position(self) -> Position | None: ...


@runtime_checkable
class Drive(Protocol):
    """Anything that accepts a robot-relative :class:`Translation`."""

    def get_translation(self) -> Translation: ...

    def set_translation(self, translation: Translation) -> None: ...
