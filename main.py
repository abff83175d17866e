# main.py

"""
Entry point for the safety stock weeks simulator.

    python main.py                  # mode from config.execution.mode
    python main.py --mode batch     # one run, CSV + chart
    python main.py --mode interactive
"""

import argparse
import os
import sys

ROOT = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.join(ROOT, "src")

if SRC not in sys.path:
    sys.path.append(SRC)

from utils.config_loader import DEFAULT_CONFIG_PATH, load_config  # noqa: E402
from interface03.simulator_cli import run_cli  # noqa: E402
from pipelines.run_simulation import run_simulation  # noqa: E402


def main():

    parser = argparse.ArgumentParser(
        description="Safety stock weeks simulator."
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument(
        "--mode",
        choices=["interactive", "batch"],
        default=None,
        help="Overrides execution.mode from the configuration."
    )
    args = parser.parse_args()

    mode = args.mode or load_config(args.config)["execution"]["mode"]

    if mode == "batch":
        run_simulation(args.config)
    else:
        run_cli(args.config)


if __name__ == "__main__":
    main()
