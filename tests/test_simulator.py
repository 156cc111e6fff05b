"""Tests for the kinematic simulator and telemetry logging."""

from __future__ import annotations

import csv
import math
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from motion_control.drive import MecanumDrive
from motion_control.execution import ExecutorManager
from motion_control.follower import TickOutcome
from motion_control.geometry import Position, Translation
from motion_control.sim import SimulatedMotor, SimulationStep, Simulator, SimulatorConfig, TelemetryLogger


def test_forward_motion_follows_heading() -> None:
    sim = Simulator(SimulatorConfig(initial_position=Position(0.0, 0.0, math.pi / 2.0)))
    sim.set_translation(Translation(1.0, 0.0, 0.0))
    sim.step(1.0)
    assert sim.get_position().x == pytest.approx(0.0, abs=1e-9)
    assert sim.get_position().y == pytest.approx(1.0)
    assert sim.time_s == pytest.approx(1.0)


def test_rotation_and_clipping() -> None:
    sim = Simulator(SimulatorConfig(max_speed=2.0))
    sim.set_translation(Translation(5.0, 0.0, 0.5))
    sim.step(0.5)
    position = sim.get_position()
    assert position.heading_rad == pytest.approx(0.25 * math.pi)
    assert sim.get_translation() == Translation(5.0, 0.0, 0.5)


def test_response_limits_motion() -> None:
    sim = Simulator(response=lambda t: Translation(t.vx, 0.0, t.vz))
    sim.set_translation(Translation(0.0, 1.0, 0.0))
    sim.step(1.0)
    assert sim.get_position() == Position(0.0, 0.0, 0.0)


def test_forwards_to_inner_drive() -> None:
    motors = [SimulatedMotor(name) for name in ("fr", "fl", "br", "bl")]
    sim = Simulator(drive=MecanumDrive(*motors))
    sim.set_translation(Translation(0.5, 0.0, 0.0))
    assert [motor.get_power() for motor in motors] == pytest.approx([0.5] * 4)
    assert sim.command_count == 1


def test_run_stops_when_idle() -> None:
    sim = Simulator()
    manager = ExecutorManager(sim)
    history = sim.run(manager, final_time_s=5.0)
    assert len(history) == 1
    assert history[0].outcome is TickOutcome.DONE

    sim.reset()
    everything = sim.run(manager, final_time_s=1.0, stop_when_idle=False)
    assert len(everything) > 1
    assert all(step.outcome is TickOutcome.DONE for step in everything)
    assert sim.get_position() == Position(0.0, 0.0, 0.0)


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        SimulatorConfig(dt=0.0)
    with pytest.raises(ValueError):
        SimulatorConfig(max_speed=-1.0)
    with pytest.raises(ValueError):
        Simulator().step(-0.1)


def test_telemetry_logger_writes_rows(tmp_path) -> None:
    log_path = tmp_path / "nested" / "telemetry.csv"
    step = SimulationStep(
        time_s=0.02,
        position=Position(1.0, 2.0, 0.5),
        translation=Translation(0.1, 0.2, 0.3),
        outcome=TickOutcome.CONTINUE,
    )
    with TelemetryLogger(log_path) as telemetry:
        telemetry.log(step, Position(3.0, 4.0, 0.0))
        telemetry.log(step)
        assert telemetry.rows == 2

    with log_path.open(newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 2
    assert float(rows[0]["marker_x"]) == pytest.approx(3.0)
    assert math.isnan(float(rows[1]["marker_x"]))
    assert rows[0]["outcome"] == "continue"
    assert float(rows[0]["cmd_vz"]) == pytest.approx(0.3)
