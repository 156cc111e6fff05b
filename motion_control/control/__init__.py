"""Feedback control laws."""

from .controllers import (
    AngleDeltaController,
    BangBangController,
    Controller,
    ProportionalController,
)
from .pid import PIDController, PIDGains

__all__ = [
    "AngleDeltaController",
    "BangBangController",
    "Controller",
    "PIDController",
    "PIDGains",
    "ProportionalController",
]
