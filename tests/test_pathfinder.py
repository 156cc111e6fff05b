"""Closed-loop tests of the Pathfinder facade against the simulator."""

from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from motion_control import Pathfinder, PathfinderConfig, Position, TickOutcome, Translation
from motion_control.sim import Simulator, SimulatorConfig
from motion_control.trajectory import FastTrajectory, LinearTrajectory


def _pathfinder(tolerance: float = 0.05) -> tuple[Pathfinder, Simulator]:
    sim = Simulator(SimulatorConfig(dt=0.02))
    return Pathfinder(sim, sim, PathfinderConfig(speed=0.5, tolerance=tolerance)), sim


def test_go_to_reaches_target() -> None:
    pathfinder, sim = _pathfinder()
    pathfinder.go_to(Position(1.0, 0.5, 0.0))
    history = sim.run(pathfinder, final_time_s=10.0)

    assert history[-1].outcome is TickOutcome.DONE
    assert sim.get_position().distance_to(Position(1.0, 0.5, 0.0)) <= 0.05
    assert sim.get_translation() == Translation.ZERO
    assert not pathfinder.is_active()


def test_go_to_turns_in_place() -> None:
    pathfinder, sim = _pathfinder()
    pathfinder.go_to(Position(0.0, 0.0, math.pi / 2.0))
    history = sim.run(pathfinder, final_time_s=10.0)

    assert history[-1].outcome is TickOutcome.DONE
    assert abs(sim.get_position().heading_delta_to(Position(0.0, 0.0, math.pi / 2.0))) <= math.radians(5.0)
    assert sim.get_position().distance_to(Position(0.0, 0.0)) < 1e-9


def test_follow_waypoints_queues_one_group_each() -> None:
    pathfinder, sim = _pathfinder()
    waypoints = [Position(1.0, 0.0, 0.0), Position(1.0, 1.0, 0.0), Position(0.0, 1.0, 0.0)]
    pathfinder.follow_waypoints(waypoints)
    assert pathfinder.manager.executor_count == 3

    history = sim.run(pathfinder, final_time_s=20.0)
    assert history[-1].outcome is TickOutcome.DONE
    assert sim.get_position().distance_to(waypoints[-1]) <= 0.05


def test_follow_trajectories_in_order() -> None:
    pathfinder, sim = _pathfinder()
    pathfinder.follow_trajectories(
        [
            FastTrajectory(Position(0.0, 0.0, 0.0), Position(1.0, 0.0, 0.0), 0.5),
            LinearTrajectory(Position(1.0, 1.0, 0.0), 0.5, 0.05, math.radians(5.0)),
        ]
    )
    history = sim.run(pathfinder, final_time_s=15.0)
    assert history[-1].outcome is TickOutcome.DONE
    assert sim.get_position().distance_to(Position(1.0, 1.0)) <= 0.05


def test_spline_to_reaches_final_point() -> None:
    pathfinder, sim = _pathfinder(tolerance=0.5)
    pathfinder.spline_to(Position(2.0, 1.0, 0.0), Position(4.0, 2.0, 0.0))
    history = sim.run(pathfinder, final_time_s=30.0)

    assert history[-1].outcome is TickOutcome.DONE
    assert sim.get_position().distance_to(Position(4.0, 2.0)) <= 0.5


def test_tick_until_drains_queue() -> None:
    pathfinder, sim = _pathfinder()
    pathfinder.go_to(Position(0.5, 0.0, 0.0))
    outcome = pathfinder.tick_until(timeout_s=30.0, on_tick=lambda pf: sim.step())
    assert outcome is TickOutcome.DONE
    assert not pathfinder.is_active()


def test_tick_until_stops_when_told() -> None:
    pathfinder, sim = _pathfinder()
    pathfinder.go_to(Position(5.0, 0.0, 0.0))
    pathfinder.tick_until(should_continue=lambda pf: False)
    assert not pathfinder.is_active()
    assert pathfinder.get_translation() == Translation.ZERO


def test_step_reports_error_and_halts() -> None:
    class BrokenOdometry:
        def get_position(self):
            return None

    sim = Simulator()
    pathfinder = Pathfinder(sim, BrokenOdometry())
    pathfinder.go_to(Position(1.0, 0.0, 0.0))
    assert pathfinder.step() is TickOutcome.ERROR
    assert not pathfinder.is_active()
    assert pathfinder.tick() is False


def test_clear_and_accessors() -> None:
    pathfinder, sim = _pathfinder()
    pathfinder.go_to(Position(5.0, 0.0, 0.0))
    pathfinder.tick()
    assert pathfinder.get_translation().vx == pytest.approx(0.5)
    assert pathfinder.get_position() == sim.get_position()

    pathfinder.clear()
    assert not pathfinder.is_active()
    assert pathfinder.get_translation() == Translation.ZERO


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        PathfinderConfig(speed=2.0)
    with pytest.raises(ValueError):
        PathfinderConfig(tolerance=-1.0)
    with pytest.raises(ValueError):
        PathfinderConfig(spline_step=0.0)
    with pytest.raises(ValueError):
        PathfinderConfig(interpolation="cubic")
