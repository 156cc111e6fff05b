"""Tests for the trajectory strategies and interpolation curves."""

from __future__ import annotations

import math
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from motion_control.control import ProportionalController
from motion_control.follower import Follower, FollowerState, TickOutcome
from motion_control.geometry import PointXY, Position, Translation, minimum_delta
from motion_control.trajectory import (
    FAST_TRAJECTORY_THRESHOLD,
    AdvancedSplineTrajectory,
    AngleCurve,
    ArcTrajectory,
    ConstantCurve,
    EmptyTrajectory,
    FastTrajectory,
    InterpolatedCurve,
    InterpolationMode,
    LinearTrajectory,
    SpeedRampTrajectory,
    SplineTrajectory,
    TaskTrajectory,
    TimedTrajectory,
    build_curve,
    linear_trajectories,
)

FIVE_DEG = math.radians(5.0)


def _scenario_trajectory() -> LinearTrajectory:
    return LinearTrajectory(Position(10.0, 0.0, 0.0), 0.5, 1.0, FIVE_DEG)


def test_linear_marker_is_always_the_target() -> None:
    trajectory = _scenario_trajectory()
    for x in np.linspace(0.0, 12.0, 13):
        assert trajectory.next_marker(Position(float(x), 1.0, 2.0)) == Position(10.0, 0.0, 0.0)


def test_linear_completion_requires_both_tolerances() -> None:
    trajectory = _scenario_trajectory()
    assert not trajectory.is_done(Position(0.0, 0.0, 0.0))
    assert not trajectory.is_done(Position(8.9, 0.0, 0.0))
    assert trajectory.is_done(Position(9.0, 0.0, 0.0))
    assert trajectory.is_done(Position(9.5, 0.0, math.radians(4.0)))
    assert trajectory.is_done(Position(9.5, 0.0, math.radians(-4.0)))
    assert not trajectory.is_done(Position(9.5, 0.0, math.radians(10.0)))


def test_linear_completion_is_monotonic_while_approaching() -> None:
    trajectory = _scenario_trajectory()
    seen_done = False
    for x in np.linspace(0.0, 10.0, 201):
        done = trajectory.is_done(Position(float(x), 0.0, 0.0))
        if seen_done:
            assert done
        seen_done = seen_done or done
    assert seen_done


def test_linear_speed_drops_to_zero_once_done() -> None:
    trajectory = _scenario_trajectory()
    assert trajectory.speed(Position(0.0, 0.0, 0.0)) == pytest.approx(0.5)
    assert trajectory.speed(Position(9.5, 0.0, 0.0)) == 0.0


def test_linear_validation() -> None:
    target = Position(1.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        LinearTrajectory(target, 0.5, -1.0, FIVE_DEG)
    with pytest.raises(ValueError):
        LinearTrajectory(None, 0.5, 1.0, FIVE_DEG)
    with pytest.raises(ValueError):
        LinearTrajectory(target, 1.5, 1.0, FIVE_DEG)
    with pytest.raises(ValueError):
        LinearTrajectory(target, 0.5, float("nan"), FIVE_DEG)
    with pytest.raises(ValueError):
        _scenario_trajectory().is_done(None)


def test_fast_trajectory_marker_and_completion() -> None:
    trajectory = FastTrajectory(Position(0.0, 0.0, 0.0), Position(10.0, 0.0, 0.0), 0.8)
    for x in (0.0, 4.0, 11.0):
        assert trajectory.next_marker(Position(x, 3.0, 1.0)) == Position(10.0, 0.0, 0.0)
    assert trajectory.speed(Position(5.0, 0.0, 0.0)) == pytest.approx(0.8)

    assert not trajectory.is_done(Position(5.0, 0.0, 0.0))
    assert trajectory.is_done(Position(10.0 - FAST_TRAJECTORY_THRESHOLD / 2.0, 0.0, 0.0))
    assert trajectory.is_done(Position(10.5, 0.0, 0.0))


def test_speed_ramp_interpolates_speed() -> None:
    trajectory = SpeedRampTrajectory(
        Position(10.0, 0.0, 0.0),
        0.5,
        FIVE_DEG,
        [(0.0, 0.2), (10.0, 1.0)],
        InterpolationMode.LINEAR,
    )
    assert trajectory.next_marker(Position(0.0, 0.0, 0.0)) == Position(10.0, 0.0, 0.0)
    assert trajectory.speed(Position(5.0, 0.0, 0.0)) == pytest.approx(0.6)
    assert trajectory.speed(Position(-3.0, 0.0, 0.0)) == pytest.approx(0.2)
    assert trajectory.speed(Position(9.8, 0.0, 0.0)) == 0.0

    with pytest.raises(ValueError):
        SpeedRampTrajectory(Position(1.0, 0.0, 0.0), 0.5, FIVE_DEG, [(0.0, 0.2), (1.0, 1.2)])


def test_build_curve_collapses_constant_values() -> None:
    curve = build_curve([0.0, 1.0, 2.0], [0.4, 0.4, 0.4])
    assert isinstance(curve, ConstantCurve)
    assert curve(-10.0) == 0.4
    assert curve(10.0) == 0.4


def test_curve_clamps_and_hits_control_points() -> None:
    for mode in InterpolationMode:
        curve = InterpolatedCurve([0.0, 1.0, 2.0, 3.0], [0.0, 2.0, 3.0, 5.0], mode)
        assert curve(1.0) == pytest.approx(2.0)
        assert curve(2.0) == pytest.approx(3.0)
        assert curve(-5.0) == pytest.approx(0.0)
        assert curve(9.0) == pytest.approx(5.0)


def test_curve_accepts_decreasing_x() -> None:
    curve = InterpolatedCurve([3.0, 2.0, 1.0], [0.0, 1.0, 4.0], InterpolationMode.LINEAR)
    assert curve.start_x == 3.0
    assert curve.end_x == 1.0
    assert curve(1.5) == pytest.approx(2.5)

    with pytest.raises(ValueError):
        InterpolatedCurve([0.0, 2.0, 1.0], [0.0, 1.0, 2.0])
    with pytest.raises(ValueError):
        InterpolatedCurve([0.0], [0.0])


def test_monotone_curve_does_not_overshoot() -> None:
    curve = InterpolatedCurve([0.0, 1.0, 2.0, 3.0], [0.0, 0.1, 0.9, 1.0], InterpolationMode.MONOTONE)
    samples = [curve(x) for x in np.linspace(0.0, 3.0, 301)]
    assert min(samples) >= -1e-12
    assert max(samples) <= 1.0 + 1e-12
    assert all(later >= earlier - 1e-12 for earlier, later in zip(samples, samples[1:]))


def test_angle_curve_takes_the_short_way_round() -> None:
    curve = AngleCurve([0.0, 1.0], [math.radians(350.0), math.radians(10.0)])
    assert abs(minimum_delta(curve(0.5), 0.0)) < 1e-9
    assert curve.end_heading_rad == pytest.approx(math.radians(10.0))


def test_spline_lookahead_and_clamp() -> None:
    points = [PointXY(0.0, 0.0), PointXY(5.0, 5.0), PointXY(10.0, 10.0)]
    trajectory = SplineTrajectory(points, math.pi / 2.0, 0.6, 1.0, 0.2)

    marker = trajectory.next_marker(Position(2.0, 0.0, 0.0))
    assert marker.x == pytest.approx(3.0)
    assert marker.y == pytest.approx(3.0)
    assert marker.heading_rad == pytest.approx(math.pi / 2.0)

    end_marker = trajectory.next_marker(Position(9.8, 9.8, 0.0))
    assert end_marker.x == pytest.approx(10.0)
    assert end_marker.y == pytest.approx(10.0)
    assert trajectory.speed(Position(1.0, 1.0, 0.0)) == pytest.approx(0.6)

    assert trajectory.is_done(Position(10.0, 10.1, math.pi / 2.0))
    assert not trajectory.is_done(Position(10.0, 10.1, 0.0))
    assert not trajectory.is_done(Position(5.0, 5.0, math.pi / 2.0))


def test_spline_step_direction_follows_points() -> None:
    points = [PointXY(10.0, 0.0), PointXY(5.0, 0.0), PointXY(0.0, 0.0)]
    trajectory = SplineTrajectory(points, 0.0, 0.5, 1.0, 0.2)
    assert trajectory.step == pytest.approx(-1.0)
    assert trajectory.next_marker(Position(8.0, 0.0, 0.0)).x == pytest.approx(7.0)

    with pytest.raises(ValueError):
        SplineTrajectory(points, 0.0, 0.5, 0.0, 0.2)
    with pytest.raises(ValueError):
        SplineTrajectory(points[:1], 0.0, 0.5, 1.0, 0.2)


def test_spline_marker_is_continuous() -> None:
    points = [PointXY(0.0, 0.0), PointXY(2.0, 1.0), PointXY(4.0, 3.0), PointXY(6.0, 3.0)]
    trajectory = SplineTrajectory(points, 0.0, 0.5, 0.5, 0.1)
    for x in np.linspace(0.0, 5.0, 11):
        near = trajectory.next_marker(Position(float(x), 0.0, 0.0))
        nudged = trajectory.next_marker(Position(float(x) + 1e-7, 0.0, 0.0))
        assert near.distance_to(nudged) < 1e-5


def _advanced_points() -> list[Position]:
    return [
        Position(0.0, 0.0, 0.0),
        Position(5.0, 2.0, math.pi / 4.0),
        Position(10.0, 4.0, math.pi / 2.0),
    ]


def test_advanced_spline_interpolates_speed_and_heading() -> None:
    trajectory = AdvancedSplineTrajectory(_advanced_points(), [0.2, 0.5, 0.8], 1.0, 0.2)
    assert trajectory.speed(Position(0.0, 0.0, 0.0)) == pytest.approx(0.2)
    assert trajectory.speed(Position(5.0, 0.0, 0.0)) == pytest.approx(0.5)
    assert trajectory.speed(Position(12.0, 0.0, 0.0)) == pytest.approx(0.8)

    marker = trajectory.next_marker(Position(4.0, 0.0, 0.0))
    assert marker.x == pytest.approx(5.0)
    assert marker.y == pytest.approx(2.0)
    assert marker.heading_rad == pytest.approx(math.pi / 4.0)

    assert trajectory.is_done(Position(10.0, 4.0, math.pi / 2.0))
    assert not trajectory.is_done(Position(10.0, 4.0, 0.0))


def test_advanced_spline_constant_speed_and_validation() -> None:
    trajectory = AdvancedSplineTrajectory(_advanced_points(), 0.5, 1.0, 0.2)
    for x in (0.0, 2.5, 7.0, 10.0):
        assert trajectory.speed(Position(x, 0.0, 0.0)) == pytest.approx(0.5)

    with pytest.raises(ValueError):
        AdvancedSplineTrajectory(_advanced_points(), [0.2, 1.5, 0.8], 1.0, 0.2)
    with pytest.raises(ValueError):
        AdvancedSplineTrajectory(_advanced_points(), [0.2, 0.5], 1.0, 0.2)
    with pytest.raises(ValueError):
        AdvancedSplineTrajectory(_advanced_points(), 0.5, 1.0, -0.2)


def test_linear_trajectories_from_waypoints() -> None:
    waypoints = [Position(1.0, 0.0, 0.0), Position(1.0, 1.0, 0.0), Position(0.0, 1.0, 0.0)]
    trajectories = linear_trajectories(waypoints, 0.4, 0.1, FIVE_DEG)
    assert [t.target for t in trajectories] == waypoints
    assert all(t.speed(Position(-5.0, -5.0, 0.0)) == pytest.approx(0.4) for t in trajectories)

    with pytest.raises(ValueError):
        linear_trajectories([], 0.4, 0.1, FIVE_DEG)


def test_spline_without_heading_hooks_cannot_be_built() -> None:
    from motion_control.trajectory.spline import _LookaheadSpline

    class HeadinglessSpline(_LookaheadSpline):
        def speed(self, current: Position) -> float:
            return 0.5

    with pytest.raises(TypeError):
        HeadinglessSpline([PointXY(0.0, 0.0), PointXY(1.0, 1.0)], 0.5, 0.1, FIVE_DEG, InterpolationMode.LINEAR)


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class RecordingDrive:
    def __init__(self) -> None:
        self.commands: list[Translation] = []

    def get_translation(self) -> Translation:
        return self.commands[-1] if self.commands else Translation.ZERO

    def set_translation(self, translation: Translation) -> None:
        self.commands.append(translation)


class FixedOdometry:
    def __init__(self, position: Position) -> None:
        self.position = position

    def get_position(self) -> Position:
        return self.position


def test_timed_trajectory_marker_follows_translation() -> None:
    clock = FakeClock()
    forward = TimedTrajectory(Translation(1.0, 0.0, 0.0), 2.0, 0.5, clock=clock)
    marker = forward.next_marker(Position(1.0, 1.0, math.pi / 2.0))
    assert marker.x == pytest.approx(1.0)
    assert marker.y == pytest.approx(1.5)
    assert marker.heading_rad == pytest.approx(math.pi / 2.0)
    assert forward.speed(Position(0.0, 0.0, 0.0)) == pytest.approx(0.5)

    strafe = TimedTrajectory(Translation(0.0, 1.0, 0.0), 2.0, 0.5, clock=clock)
    marker = strafe.next_marker(Position(0.0, 0.0, 0.0))
    assert marker.x == pytest.approx(0.0, abs=1e-9)
    assert marker.y == pytest.approx(0.5)

    turn = TimedTrajectory(Translation(0.0, 0.0, 0.5), 2.0, 0.5, clock=clock)
    marker = turn.next_marker(Position(2.0, 3.0, 0.0))
    assert (marker.x, marker.y) == (2.0, 3.0)
    assert marker.heading_rad == pytest.approx(0.5)


def test_timed_trajectory_clock_starts_on_first_query() -> None:
    clock = FakeClock(5.0)
    trajectory = TimedTrajectory(Translation(1.0, 0.0, 0.0), 2.0, 0.5, clock=clock)
    clock.now = 100.0
    here = Position(0.0, 0.0, 0.0)

    assert not trajectory.is_done(here)
    clock.now = 101.9
    assert not trajectory.is_done(here)
    clock.now = 102.0
    assert trajectory.is_done(here)


def test_timed_trajectory_validation() -> None:
    with pytest.raises(ValueError):
        TimedTrajectory(None, 1.0, 0.5)
    with pytest.raises(ValueError):
        TimedTrajectory(Translation(1.0, 0.0, 0.0), -1.0, 0.5)
    with pytest.raises(ValueError):
        TimedTrajectory(Translation(1.0, 0.0, 0.0), 1.0, 1.5)


def test_arc_trajectory_marker_leads_around_the_circle() -> None:
    trajectory = ArcTrajectory(PointXY(0.0, 0.0), 2.0, 0.4, math.pi / 2.0, 0.0)
    marker = trajectory.next_marker(Position(2.0, 0.0, 0.0))
    assert marker.x == pytest.approx(0.0, abs=1e-9)
    assert marker.y == pytest.approx(2.0)
    assert marker.heading_rad == 0.0
    assert trajectory.speed(Position(2.0, 0.0, 0.0)) == pytest.approx(0.4)
    assert trajectory.end_point is None
    assert not trajectory.is_done(Position(0.0, 2.0, 0.0))


def test_arc_trajectory_with_end_angle_completes() -> None:
    trajectory = ArcTrajectory(PointXY(0.0, 0.0), 2.0, 0.4, 0.3, 0.0, end_angle_rad=math.pi, tolerance=0.1)
    assert trajectory.is_done(Position(-2.0, 0.05, 0.0))
    assert not trajectory.is_done(Position(2.0, 0.0, 0.0))

    with pytest.raises(ValueError):
        ArcTrajectory(PointXY(0.0, 0.0), 0.0, 0.4, 0.3, 0.0)
    with pytest.raises(ValueError):
        ArcTrajectory(PointXY(0.0, 0.0), 2.0, 0.4, 0.0, 0.0)


def test_empty_trajectory_finishes_on_first_tick() -> None:
    here = Position(1.0, 2.0, 0.5)
    trajectory = EmptyTrajectory()
    assert trajectory.is_done(here)
    assert trajectory.next_marker(here) == here
    assert trajectory.speed(here) == 0.0

    drive = RecordingDrive()
    follower = Follower(trajectory, drive, FixedOdometry(here), ProportionalController(1.0, -1.0, 1.0))
    assert follower.tick() is TickOutcome.DONE
    assert follower.state is FollowerState.DONE
    assert drive.commands == [Translation.ZERO]


def test_task_trajectory_respects_hooks_and_time_limits() -> None:
    clock = FakeClock()
    calls = {"initial": 0, "during": 0, "on_finish": 0}
    finished = {"value": False}

    def hook(name: str):
        def run() -> None:
            calls[name] += 1

        return run

    trajectory = TaskTrajectory(
        lambda: finished["value"],
        initial=hook("initial"),
        during=hook("during"),
        on_finish=hook("on_finish"),
        min_time_s=1.0,
        max_time_s=5.0,
        clock=clock,
    )
    here = Position(0.0, 0.0, 0.0)

    assert not trajectory.is_done(here)
    finished["value"] = True
    clock.now = 0.5
    assert not trajectory.is_done(here)
    clock.now = 1.0
    assert trajectory.is_done(here)
    assert trajectory.is_done(here)
    assert calls == {"initial": 1, "during": 3, "on_finish": 1}
    assert trajectory.next_marker(here) == here
    assert trajectory.speed(here) == 0.0


def test_task_trajectory_times_out_and_holds_still() -> None:
    clock = FakeClock()
    trajectory = TaskTrajectory(lambda: False, max_time_s=2.0, clock=clock)
    here = Position(3.0, 1.0, 0.0)
    drive = RecordingDrive()
    follower = Follower(trajectory, drive, FixedOdometry(here), ProportionalController(1.0, -1.0, 1.0))

    assert follower.tick() is TickOutcome.CONTINUE
    assert drive.commands[-1].is_zero()
    clock.now = 2.0
    assert follower.tick() is TickOutcome.DONE
    assert drive.commands[-1] == Translation.ZERO

    with pytest.raises(ValueError):
        TaskTrajectory(lambda: True, min_time_s=3.0, max_time_s=1.0)
    with pytest.raises(ValueError):
        TaskTrajectory(None)
