from .config import SimulatorConfig
from .simulator import SimulatedMotor, SimulationStep, Simulator
from .telemetry import TelemetryLogger

__all__ = [
    "SimulatedMotor",
    "SimulationStep",
    "Simulator",
    "SimulatorConfig",
    "TelemetryLogger",
]
