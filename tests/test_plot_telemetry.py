from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

import matplotlib.pyplot as plt
import pandas as pd

from examples import mecanum_square
from plots.plot_tick_telemetry import plot_tick_telemetry


def test_plot_from_simulated_log(tmp_path) -> None:
    log_path = tmp_path / "mecanum.csv"
    mecanum_square.run(log_path, final_time_s=2.0)
    output = tmp_path / "plots" / "mecanum.png"

    fig = plot_tick_telemetry(pd.read_csv(log_path), output)
    plt.close(fig)

    assert output.exists()
    assert output.stat().st_size > 0
