from __future__ import annotations

from enum import Enum


class FollowerError(Enum):
    INVALID_POSITION = "invalid_position"
    NON_FINITE_TRANSLATION = "non_finite_translation"
    INVALID_SPEED = "invalid_speed"


class FollowerException(RuntimeError):
    def __init__(self, error: FollowerError, message: str):
        super().__init__(message)
        self.error = error
