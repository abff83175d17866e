# src/visualization02/trajectory_plots.py

"""
Trajectory Visualization Module
===============================

Plots the simulated stock trajectory.

Plots:
------
1. Stock level area
2. Inbound (receiving) area
3. Outbound (demand) area
4. Safety stock reference line

Design Principles:
------------------
- Pure visualization only
- No business logic
- Config-driven paths and toggles
- Horizon length taken from the data
"""

import os
import matplotlib.pyplot as plt
from typing import Dict, Optional

from utils.helpers import ensure_directory, generate_timestamp
from utils.helpers import validate_dataframe_not_empty


SERIES_STYLES = [
    ("stock_level", "Stock Level", "#3b82f6", "#dbeafe"),
    ("inbound", "Inbound", "#22c55e", "#dcfce7"),
    ("outbound", "Outbound", "#f97316", "#ffedd5"),
]


# ==========================================================
# Trajectory Plot
# ==========================================================

def plot_trajectory(result, inputs, config: Dict, logger) -> Optional[str]:
    """
    Render the trajectory chart to a PNG file.

    Parameters
    ----------
    result : TrajectoryResult
        Output of derive_trajectory().
    inputs : SimulationInputs
        Source of the y-axis settings.
    config : Dict
        Project configuration dictionary.
    logger : logging.Logger
        Project logger.

    Returns
    -------
    str or None
        Path of the saved image, None if visualization is disabled.
    """

    if not config.get("visualization", {}).get("enabled", False):
        logger.info("Visualization disabled via config. Skipping trajectory plot.")
        return None

    df = result.to_dataframe()
    validate_dataframe_not_empty(df, "trajectory")

    output_dir = config["paths"]["output"]["plots"]
    ensure_directory(output_dir)

    figure_size = tuple(config["visualization"].get("figure_size", (12, 6)))
    threshold = result.safety_stock_threshold

    fig, ax = plt.subplots(figsize=figure_size)

    # ------------------------------------------------------
    # Series Areas
    # ------------------------------------------------------
    for column, label, line_color, fill_color in SERIES_STYLES:
        ax.fill_between(df["week"], df[column], color=fill_color, alpha=0.6)
        ax.plot(
            df["week"],
            df[column],
            color=line_color,
            linewidth=2,
            marker="o",
            label=label
        )

    # ------------------------------------------------------
    # Safety Stock Reference Line
    # ------------------------------------------------------
    ax.axhline(
        y=threshold,
        color="#ef4444",
        linestyle=(0, (8, 4)),
        linewidth=2,
        label="Safety Stock"
    )
    ax.annotate(
        f"Safety Stock: {threshold}",
        xy=(1.0, threshold),
        xycoords=("axes fraction", "data"),
        xytext=(4, 0),
        textcoords="offset points",
        va="center",
        color="#ef4444",
        fontsize=9
    )

    # ------------------------------------------------------
    # Y-Axis Scale
    # ------------------------------------------------------
    if inputs.y_axis_fixed:
        ax.set_ylim(0, inputs.y_axis_max)

    ax.set_xticks(df["week"])
    ax.set_xticklabels([f"W{week}" for week in df["week"]])
    ax.grid(linestyle="--", color="#e5e7eb")

    ax.set_title(f"Stock Trajectory ({result.status.value})")
    ax.set_xlabel("Week")
    ax.set_ylabel("Units")
    ax.legend()
    fig.tight_layout()

    output_path = os.path.join(
        output_dir,
        f"stock_trajectory_{generate_timestamp()}.png"
    )

    fig.savefig(output_path)
    plt.close(fig)

    logger.info(f"Trajectory visualization saved: {output_path}")

    return output_path
