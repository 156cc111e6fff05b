import csv
from pathlib import Path
from typing import Self

from motion_control.geometry import Position

from .simulator import SimulationStep


class TelemetryLogger:
    """CSV logger for per-tick simulator history."""

    HEADERS = [
        "time_s",
        "pos_x",
        "pos_y",
        "heading_rad",
        "marker_x",
        "marker_y",
        "marker_heading_rad",
        "cmd_vx",
        "cmd_vy",
        "cmd_vz",
        "outcome",
    ]

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.HEADERS)
        self.rows = 0

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, step: SimulationStep, marker: Position | None = None) -> None:
        nan = float("nan")
        marker_values = (
            [nan, nan, nan] if marker is None else [marker.x, marker.y, marker.heading_rad]
        )
        row = [
            step.time_s,
            step.position.x,
            step.position.y,
            step.position.heading_rad,
            *marker_values,
            step.translation.vx,
            step.translation.vy,
            step.translation.vz,
            step.outcome.value,
        ]
        self._writer.writerow(row)
        self._file.flush()
        self.rows += 1
