import math
from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from examples.common import LOG_DIR, build_parser, run_example, setup_logging
from motion_control import Pathfinder, PathfinderConfig, Position, SwerveDrive, SwerveModule
from motion_control.geometry import fix_angle
from motion_control.sim import SimulatedMotor, SimulationStep, Simulator, SimulatorConfig

LOG_FILE = LOG_DIR / "swerve_spline.csv"
SIM_FINAL_TIME_S = 40.0
STEERING_RATE_RAD_S = 2.0 * math.pi

CONTROL_POINTS = (
    Position(2.0, 1.0, 0.0),
    Position(4.0, 3.0, math.pi / 4.0),
    Position(6.0, 3.0, math.pi / 2.0),
)


class SteeringSensor:
    """Module heading that follows the steering motor's power."""

    def __init__(self, motor: SimulatedMotor) -> None:
        self.motor = motor
        self.heading_rad = 0.0

    def __call__(self) -> float:
        return self.heading_rad

    def advance(self, dt: float) -> None:
        self.heading_rad = fix_angle(self.heading_rad + self.motor.get_power() * STEERING_RATE_RAD_S * dt)


def run(log_path: Path = LOG_FILE, final_time_s: float = SIM_FINAL_TIME_S) -> list[SimulationStep]:
    modules = []
    sensors = []
    for name in ("fr", "fl", "br", "bl"):
        turn = SimulatedMotor(f"{name}_turn")
        sensor = SteeringSensor(turn)
        sensors.append(sensor)
        modules.append(SwerveModule(turn, SimulatedMotor(f"{name}_drive"), sensor))

    drive = SwerveDrive(*modules)
    config = SimulatorConfig(dt=0.02)
    simulator = Simulator(config, drive=drive)
    pathfinder = Pathfinder(simulator, simulator, PathfinderConfig(speed=0.5, tolerance=0.1, spline_step=0.5))
    pathfinder.spline_to(*CONTROL_POINTS)

    def advance_modules(step: SimulationStep) -> None:
        for sensor in sensors:
            sensor.advance(config.dt)

    return run_example(pathfinder, simulator, log_path, CONTROL_POINTS[-1], final_time_s, advance_modules)


def main() -> None:
    args = build_parser("Follow a spline on a simulated swerve base.", LOG_FILE, SIM_FINAL_TIME_S).parse_args()
    setup_logging(args.verbose)
    run(args.log, args.duration)


if __name__ == "__main__":
    main()
