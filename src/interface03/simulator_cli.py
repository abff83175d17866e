# src/interface03/simulator_cli.py

"""
Simulator CLI Interface
=======================

Interactive shell for the safety stock weeks simulator.

Responsibilities:
-----------------
- Own the single SimulationInputs instance for the session
- Parse and apply one command per line
- Re-derive the trajectory after every state change
- Print summary cards and the weekly table
- Save the trajectory chart on request

Design Principles:
------------------
- Each launch starts from configured defaults
- Nothing is persisted between sessions
- Invalid commands never end the session
"""

import argparse
from typing import Dict, Optional

from utils.config_loader import DEFAULT_CONFIG_PATH, load_config
from utils.logger import get_logger

from simulation01.exceptions import SimulationError
from simulation01.simulation_inputs import SimulationInputs
from simulation01.stock_metrics import build_summary
from simulation01.trajectory_engine import derive_trajectory

from interface03.command_parser import parse_command

from visualization02.trajectory_plots import plot_trajectory
from visualization02.trajectory_table import (
    render_receiving_schedule,
    render_summary_cards,
    render_week_table,
)


RELATIVE_ACTIONS = {
    "set_weekly_demand": "adjust_weekly_demand",
    "set_safety_stock_weeks": "adjust_safety_stock_weeks",
    "set_initial_stock": "adjust_initial_stock",
}


# =========================================================
# COMMAND APPLICATION
# =========================================================

def apply_command(inputs: SimulationInputs, command: Dict) -> SimulationInputs:
    """
    Apply one parsed state-changing command to the inputs.

    Parameters
    ----------
    inputs : SimulationInputs
        Session-owned inputs, mutated in place.
    command : Dict
        Output of parse_command().

    Returns
    -------
    SimulationInputs
        The same instance, for chaining.

    Raises
    ------
    ValueError
        If the action does not change simulator state.
    IndexOutOfRange
        If a receiving week lies outside the horizon.
    """

    action = command["action"]
    value = command["value"]

    if action in RELATIVE_ACTIONS:
        if command["relative"]:
            return getattr(inputs, RELATIVE_ACTIONS[action])(value)
        return getattr(inputs, action)(value)

    if action == "set_receiving":
        if command["relative"]:
            return inputs.adjust_receiving(command["week_index"], value)
        return inputs.set_receiving(command["week_index"], value)

    if action == "set_all_receiving":
        return inputs.set_all_receiving(value)

    if action == "match":
        return inputs.match_receiving_to_demand()

    if action == "reset":
        return inputs.reset_receiving()

    if action == "set_y_axis":
        inputs.set_y_axis_fixed(command["fixed"])
        if value is not None:
            inputs.set_y_axis_max(value)
        return inputs

    if action == "set_y_axis_max":
        return inputs.set_y_axis_max(value)

    raise ValueError(f"Action '{action}' does not change simulator state.")


# =========================================================
# CLI ENTRY POINT
# =========================================================

def run_cli(config_path: str = DEFAULT_CONFIG_PATH) -> SimulationInputs:

    config = load_config(config_path)
    logger = get_logger(config)

    inputs = SimulationInputs.from_config(config)
    result = derive_trajectory(inputs)
    derived_version = inputs.version

    logger.info(
        f"Simulator session started with horizon of {inputs.horizon_weeks} weeks."
    )

    print("\nSafety Stock Weeks Simulator")
    print("----------------------------")
    print("Adjust demand, safety stock weeks, initial stock and weekly")
    print("receiving to see how the stock level evolves.\n")
    print("Type 'help' for the list of commands.\n")

    _print_state(inputs, result)

    # =====================================================
    # MAIN LOOP
    # =====================================================

    while True:

        try:
            user_input = input(">> ").strip()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed. Exiting simulator session.")
            print("\nSession closed.")
            break

        if not user_input:
            continue

        try:
            command = parse_command(user_input)
        except ValueError as e:
            logger.warning(f"Invalid command: {str(e)}")
            print(f"Unable to parse: {str(e)}\n")
            continue

        action = command["action"]

        # ---------------- EXIT ----------------
        if action == "exit":
            logger.info("Exiting simulator session.")
            print("\nSession closed.")
            break

        # ---------------- HELP ----------------
        if action == "help":
            _print_help()
            continue

        # ---------------- SHOW / TABLE ----------------
        if action == "show":
            _print_state(inputs, result)
            continue

        if action == "table":
            print(render_week_table(result))
            print()
            continue

        # ---------------- PLOT ----------------
        if action == "plot":
            output_path = plot_trajectory(result, inputs, config, logger)
            if output_path is None:
                print("Visualization is disabled in config.\n")
            else:
                print(f"Chart saved: {output_path}\n")
            continue

        # ---------------- STATE CHANGE ----------------
        try:
            apply_command(inputs, command)
        except (ValueError, SimulationError) as e:
            logger.warning(f"Command rejected: {str(e)}")
            print(f"Unable to apply: {str(e)}\n")
            continue

        if inputs.version != derived_version:
            result = derive_trajectory(inputs)
            derived_version = inputs.version
            _print_state(inputs, result)

    return inputs


# =========================================================
# DISPLAY
# =========================================================

def _print_state(inputs: SimulationInputs, result) -> None:

    print(render_summary_cards(build_summary(inputs, result)))
    print("\nWeekly Receiving")
    print(render_receiving_schedule(inputs))
    print("\nWeekly Data")
    print(render_week_table(result))

    scale = f"fixed 0..{inputs.y_axis_max}" if inputs.y_axis_fixed else "auto"
    print(f"\nChart y-axis: {scale}\n")


def _print_help() -> None:

    print("\nSimulator Help")
    print("--------------\n")
    print("Safety stock = weekly demand x safety stock weeks.")
    print("Week 1 shows the initial stock; each later week adds its")
    print("receiving and subtracts the weekly demand.\n")
    print("Commands:")
    print("---------")
    print("demand <n|+n|-n>        weekly demand")
    print("weeks <n|+n|-n>         safety stock weeks")
    print("stock <n|+n|-n>         initial stock")
    print("recv <week> <n|+n|-n>   receiving for one week")
    print("recv all <n>            same receiving for every week")
    print("match                   receiving = weekly demand")
    print("reset                   receiving = 0")
    print("yaxis fixed [max]       fix chart y-axis")
    print("yaxis auto              auto chart y-axis")
    print("yaxis max <n>           fixed y-axis maximum")
    print("show                    summary and tables")
    print("table                   weekly table only")
    print("plot                    save chart image")
    print("exit\n")


def main(argv: Optional[list] = None) -> None:

    parser = argparse.ArgumentParser(
        description="Interactive safety stock weeks simulator."
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="Path to the YAML configuration file."
    )
    args = parser.parse_args(argv)

    run_cli(args.config)


if __name__ == "__main__":
    main()
