from .errors import FollowerError, FollowerException
from .follower import Follower, FollowerState, TickOutcome, relative_translation
from .generator import FollowerGenerator, generic_follower_generator

__all__ = [
    "Follower",
    "FollowerError",
    "FollowerException",
    "FollowerGenerator",
    "FollowerState",
    "TickOutcome",
    "generic_follower_generator",
    "relative_translation",
]
