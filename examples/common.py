from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable

from motion_control import Pathfinder, Position
from motion_control.sim import SimulationStep, Simulator, TelemetryLogger

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser(description: str, default_log: Path, default_duration_s: float) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--log",
        type=Path,
        default=default_log,
        help="CSV telemetry output path.",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=default_duration_s,
        help="Maximum simulated time in seconds.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every tick.")
    return parser


def analyze_history(history: Iterable[SimulationStep], goal: Position) -> None:
    history = list(history)
    if not history:
        print("No simulation history recorded.")
        return

    final = history[-1]
    print(f"Simulated {len(history)} ticks over {final.time_s:.2f} s ({final.outcome.value}).")
    print(f"Final pose: {final.position}")
    print(f"Distance to goal: {final.position.distance_to(goal):.3f}")
    print(f"Heading error: {abs(final.position.heading_delta_to(goal)):.3f} rad")


def run_example(
    pathfinder: Pathfinder,
    simulator: Simulator,
    log_path: Path,
    goal: Position,
    final_time_s: float = 30.0,
    on_step=None,
) -> list[SimulationStep]:
    """Drive ``pathfinder`` against ``simulator`` while logging each tick."""
    log_path.parent.mkdir(parents=True, exist_ok=True)

    history: list[SimulationStep]
    with TelemetryLogger(log_path) as telemetry:

        def log_step(step: SimulationStep) -> None:
            telemetry.log(step, pathfinder.manager.last_marker)
            if on_step is not None:
                on_step(step)

        history = simulator.run(
            pathfinder,
            final_time_s=final_time_s,
            progress_callback=log_step,
        )

    analyze_history(history, goal)
    print(f"Telemetry log written to: {log_path}")
    return history
