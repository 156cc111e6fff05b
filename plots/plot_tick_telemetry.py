from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REQUIRED_COLUMNS = ("time_s", "pos_x", "pos_y", "heading_rad", "cmd_vx", "cmd_vy", "cmd_vz")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot per-tick telemetry captured from the simulator."
    )
    parser.add_argument("logfile", type=Path, help="Path to a telemetry CSV log")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Optional path to save the figure instead of displaying it.",
    )
    return parser


def plot_tick_telemetry(df: pd.DataFrame, output: Path | None) -> plt.Figure:
    time = df["time_s"].to_numpy()

    fig, axes = plt.subplots(3, 1, figsize=(10, 12))

    axes[0].plot(df["pos_x"], df["pos_y"], label="Robot")
    if "marker_x" in df.columns and df["marker_x"].notna().any():
        axes[0].plot(
            df["marker_x"],
            df["marker_y"],
            linestyle="--",
            marker=".",
            markersize=2,
            label="Marker",
        )
    axes[0].set_xlabel("X")
    axes[0].set_ylabel("Y")
    axes[0].set_aspect("equal", adjustable="datalim")
    axes[0].legend(loc="upper right", fontsize="small")
    axes[0].grid(True, linestyle=":")

    heading = np.rad2deg(np.unwrap(df["heading_rad"].to_numpy()))
    axes[1].plot(time, heading, label="Heading (deg)")
    if "marker_heading_rad" in df.columns and df["marker_heading_rad"].notna().any():
        marker_heading = np.rad2deg(np.unwrap(df["marker_heading_rad"].ffill().bfill().to_numpy()))
        axes[1].plot(time, marker_heading, linestyle="--", label="Marker heading (deg)")
    axes[1].set_ylabel("Heading (deg)")
    axes[1].legend(loc="upper right", fontsize="small")
    axes[1].grid(True, linestyle=":")

    for column, label in zip(("cmd_vx", "cmd_vy", "cmd_vz"), ("vx", "vy", "vz")):
        axes[2].plot(time, df[column], label=label)
    axes[2].set_ylabel("Command")
    axes[2].set_xlabel("Time (s)")
    axes[2].legend(loc="upper right", fontsize="small")
    axes[2].grid(True, linestyle=":")

    fig.tight_layout()

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=200)
    else:
        plt.show()
    return fig


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if not args.logfile.exists():
        raise SystemExit(f"Telemetry log not found: {args.logfile}")

    df = pd.read_csv(args.logfile)
    missing = [col for col in REQUIRED_COLUMNS if col not in df]
    if missing:
        raise SystemExit(f"Log is missing expected columns: {missing}")

    plot_tick_telemetry(df, args.output)


if __name__ == "__main__":
    main()
