"""Simulated demos of the trajectory follower on each drivetrain."""

from .common import analyze_history, build_parser, run_example, setup_logging

__all__ = [
    "analyze_history",
    "build_parser",
    "run_example",
    "setup_logging",
]
