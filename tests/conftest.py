"""
Shared fixtures for the simulator test suite.
"""

import copy

import matplotlib
matplotlib.use("Agg")

import pytest
import yaml

from simulation01.simulation_inputs import SimulationInputs


BASE_CONFIG = {
    "project": {"name": "safety-stock-weeks-simulator", "version": "0.1.0"},
    "paths": {
        "logs": "logs",
        "output": {"plots": "plots", "reports": "reports"},
    },
    "logging": {"level": "INFO", "log_to_file": False, "filename": "simulator.log"},
    "simulation": {
        "horizon_weeks": 12,
        "defaults": {
            "weekly_demand": 100,
            "safety_stock_weeks": 2,
            "initial_stock": 500,
            "weekly_receiving": 100,
        },
        "bounds": {
            "weekly_demand": {"min": 0, "max": 9999},
            "safety_stock_weeks": {"min": 0, "max": 12},
            "initial_stock": {"min": 0, "max": 9999},
            "weekly_receiving": {"min": 0, "max": 9999},
        },
    },
    "visualization": {
        "enabled": True,
        "figure_size": [8, 4],
        "y_axis": {"fixed": False, "max": 1000, "min_limit": 100, "max_limit": 99999},
    },
    "execution": {"mode": "batch"},
}


@pytest.fixture
def config(tmp_path):
    """Valid configuration dictionary writing into tmp_path."""
    cfg = copy.deepcopy(BASE_CONFIG)
    cfg["paths"]["logs"] = str(tmp_path / "logs")
    cfg["paths"]["output"]["plots"] = str(tmp_path / "plots")
    cfg["paths"]["output"]["reports"] = str(tmp_path / "reports")
    return cfg


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration dictionary to a YAML file and return its path."""

    def _write(cfg, name="config.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def config_path(config, write_config):
    return write_config(config)


@pytest.fixture
def inputs():
    """Reference startup inputs."""
    return SimulationInputs()
