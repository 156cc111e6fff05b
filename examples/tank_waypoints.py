import math
from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from examples.common import LOG_DIR, build_parser, run_example, setup_logging
from motion_control import Pathfinder, PathfinderConfig, Position, TankDrive, Translation
from motion_control.kinematics import TankKinematics
from motion_control.sim import SimulatedMotor, SimulationStep, Simulator, SimulatorConfig

LOG_FILE = LOG_DIR / "tank_waypoints.csv"
SIM_FINAL_TIME_S = 40.0

# A tank base cannot strafe, so turns happen in place between straight legs.
WAYPOINTS = (
    Position(3.0, 0.0, 0.0),
    Position(3.0, 0.0, math.pi / 2.0),
    Position(3.0, 3.0, math.pi / 2.0),
)


def run(log_path: Path = LOG_FILE, final_time_s: float = SIM_FINAL_TIME_S) -> list[SimulationStep]:
    kinematics = TankKinematics()
    drive = TankDrive(SimulatedMotor("left"), SimulatedMotor("right"), kinematics)

    def tank_response(translation: Translation) -> Translation:
        return kinematics.to_translation(kinematics.calculate(translation))

    simulator = Simulator(SimulatorConfig(dt=0.02), drive=drive, response=tank_response)
    pathfinder = Pathfinder(simulator, simulator, PathfinderConfig(speed=0.5, tolerance=0.3))
    pathfinder.follow_waypoints(WAYPOINTS)
    return run_example(pathfinder, simulator, log_path, WAYPOINTS[-1], final_time_s)


def main() -> None:
    args = build_parser("Drive waypoints on a simulated tank base.", LOG_FILE, SIM_FINAL_TIME_S).parse_args()
    setup_logging(args.verbose)
    run(args.log, args.duration)


if __name__ == "__main__":
    main()
