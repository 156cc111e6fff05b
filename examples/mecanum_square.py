from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from examples.common import LOG_DIR, build_parser, run_example, setup_logging
from motion_control import MecanumDrive, Pathfinder, PathfinderConfig, Position
from motion_control.sim import SimulatedMotor, SimulationStep, Simulator, SimulatorConfig

LOG_FILE = LOG_DIR / "mecanum_square.csv"
SIM_FINAL_TIME_S = 30.0

SQUARE = (
    Position(2.0, 0.0, 0.0),
    Position(2.0, 2.0, 0.0),
    Position(0.0, 2.0, 0.0),
    Position(0.0, 0.0, 0.0),
)


def run(log_path: Path = LOG_FILE, final_time_s: float = SIM_FINAL_TIME_S) -> list[SimulationStep]:
    motors = [SimulatedMotor(name) for name in ("fr", "fl", "br", "bl")]
    drive = MecanumDrive(*motors)
    simulator = Simulator(SimulatorConfig(dt=0.02), drive=drive)
    pathfinder = Pathfinder(simulator, simulator, PathfinderConfig(speed=0.5, tolerance=0.05))
    pathfinder.follow_waypoints(SQUARE)
    return run_example(pathfinder, simulator, log_path, SQUARE[-1], final_time_s)


def main() -> None:
    args = build_parser("Drive a square on a simulated mecanum base.", LOG_FILE, SIM_FINAL_TIME_S).parse_args()
    setup_logging(args.verbose)
    run(args.log, args.duration)


if __name__ == "__main__":
    main()
