# src/visualization02/trajectory_table.py

"""
Trajectory Table Rendering
==========================

Text renderings of the simulator state for the console:

- Per-week breakdown with status badges
- Summary cards
- Editable receiving schedule

All tables are produced with tabulate (grid format).
"""

from typing import Dict

from tabulate import tabulate


STATUS_BADGES = {
    "Stockout": "[!] Stockout",
    "Warning": "[~] Warning",
    "Adequate": "[ok] Adequate",
}


def render_week_table(result) -> str:
    """
    Render the week-by-week breakdown of a TrajectoryResult.
    """

    rows = [
        (
            f"Week {record.week_label}",
            record.inbound,
            record.outbound,
            record.stock_level,
            record.safety_stock_threshold,
            STATUS_BADGES[record.row_status.value],
        )
        for record in result.trajectory
    ]

    return tabulate(
        rows,
        headers=["Week", "Inbound", "Outbound", "Stock", "Safety Stock", "Status"],
        tablefmt="grid"
    )


def render_summary_cards(summary: Dict) -> str:
    """
    Render the output of build_summary() as a two-column grid.
    """

    coverage = summary["coverage_weeks"]
    ratio = summary["safety_zone_ratio"]

    rows = [
        (
            "Safety Stock",
            f"{summary['safety_stock']} {summary['safety_stock_formula']}"
        ),
        ("Initial Stock", summary["initial_stock"]),
        ("Weekly Demand", summary["weekly_demand"]),
        (
            "Stock Status",
            f"{summary['status']} (min stock: {summary['min_stock_level']})"
        ),
        (
            "Weeks Covered Without Inbound",
            "-" if coverage is None else f"~{coverage}"
        ),
        (
            "Safety Zone Share Of Initial Stock",
            "-" if ratio is None else f"{ratio:.0%}"
        ),
    ]

    return tabulate(rows, headers=["Metric", "Value"], tablefmt="grid")


def render_receiving_schedule(inputs) -> str:
    """
    Render the receiving schedule as a single row keyed by week.
    """

    headers = [f"W{i + 1}" for i in range(inputs.horizon_weeks)]

    return tabulate(
        [list(inputs.weekly_receiving)],
        headers=headers,
        tablefmt="grid"
    )
