"""Planar geometry primitives shared by every layer of the pipeline."""

from .angles import fix_angle, is_close, minimum_delta, wrap_angle
from .position import PointXY, Position
from .translation import Translation

__all__ = [
    "PointXY",
    "Position",
    "Translation",
    "fix_angle",
    "is_close",
    "minimum_delta",
    "wrap_angle",
]
