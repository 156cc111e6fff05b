from .group import FollowerGroup, as_group
from .manager import ExecutorManager

__all__ = ["ExecutorManager", "FollowerGroup", "as_group"]
