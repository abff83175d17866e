# src/pipelines/run_simulation.py

"""
Simulation Pipeline Orchestrator
================================

Non-interactive run of the simulator from configured defaults.

Steps:
------
1. Load and validate configuration
2. Build inputs from simulation.defaults
3. Derive the trajectory
4. Log summary cards and weekly table
5. Export the trajectory as a CSV report
6. Save the trajectory chart (if visualization enabled)

Report files are outputs only; the simulator never reads them back.
"""

import os

from utils.config_loader import DEFAULT_CONFIG_PATH, load_config
from utils.logger import get_logger
from utils.helpers import ensure_directory, generate_timestamp

from simulation01.simulation_inputs import SimulationInputs
from simulation01.stock_metrics import build_summary
from simulation01.trajectory_engine import derive_trajectory

from visualization02.trajectory_plots import plot_trajectory
from visualization02.trajectory_table import (
    render_summary_cards,
    render_week_table,
)


# ==========================================================
# Main Simulation Pipeline
# ==========================================================

def run_simulation(config_path: str = DEFAULT_CONFIG_PATH):
    """
    Execute one batch simulation.

    Returns
    -------
    TrajectoryResult
    """

    config = load_config(config_path)
    logger = get_logger(config)

    logger.info("========== SIMULATION PIPELINE STARTED ==========")

    # ------------------------------------------------------
    # 1. Inputs
    # ------------------------------------------------------

    inputs = SimulationInputs.from_config(config)
    logger.info(f"Inputs: {inputs!r}")

    # ------------------------------------------------------
    # 2. Derivation
    # ------------------------------------------------------

    result = derive_trajectory(inputs)
    summary = build_summary(inputs, result)

    logger.info("\n" + render_summary_cards(summary))
    logger.info("\n" + render_week_table(result))

    if result.min_stock_level == 0:
        deepest = min(record.running_balance for record in result.trajectory)
        logger.warning(
            f"Stockout within horizon. Lowest running balance: {deepest}"
        )

    # ------------------------------------------------------
    # 3. CSV Report
    # ------------------------------------------------------

    reports_dir = config["paths"]["output"]["reports"]
    ensure_directory(reports_dir)

    report_path = os.path.join(
        reports_dir,
        f"stock_trajectory_{generate_timestamp()}.csv"
    )

    result.to_dataframe().to_csv(report_path, index=False)
    logger.info(f"Trajectory report saved to: {report_path}")

    # ------------------------------------------------------
    # 4. Chart
    # ------------------------------------------------------

    plot_trajectory(result, inputs, config, logger)

    logger.info("========== SIMULATION PIPELINE COMPLETED ==========")

    return result
