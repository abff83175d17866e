"""
Tests for YAML configuration loading and validation.
"""

import copy
import logging
import os

import pytest

from utils.config_loader import ConfigError, load_config
from utils.logger import get_child_logger, get_logger


def test_shipped_config_is_valid():
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    config = load_config(os.path.join(root, "config", "config.yaml"))

    assert config["simulation"]["horizon_weeks"] == 12
    assert config["simulation"]["bounds"]["safety_stock_weeks"]["max"] == 12


def test_loads_valid_config(config_path):
    config = load_config(config_path)

    assert config["simulation"]["defaults"]["initial_stock"] == 500


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "missing.yaml"))


def test_directory_is_rejected(tmp_path):
    folder = tmp_path / "config.yaml"
    folder.mkdir()

    with pytest.raises(ConfigError, match="not a file"):
        load_config(str(folder))


def test_wrong_extension(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(ConfigError, match="Expected a YAML file"):
        load_config(str(path))


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ConfigError, match="empty"):
        load_config(str(path))


def test_unparsable_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("simulation: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError, match="parse"):
        load_config(str(path))


def test_missing_and_unknown_sections(config, write_config):
    missing = copy.deepcopy(config)
    del missing["simulation"]

    with pytest.raises(ConfigError, match="Missing required config sections"):
        load_config(write_config(missing))

    extra = copy.deepcopy(config)
    extra["llm"] = {}

    with pytest.raises(ConfigError, match="Unknown top-level"):
        load_config(write_config(extra))


@pytest.mark.parametrize(
    "mutate, message",
    [
        (lambda c: c["simulation"].update(horizon_weeks=0), "horizon_weeks"),
        (lambda c: c["simulation"]["defaults"].update(weekly_demand=-1), "defaults.weekly_demand"),
        (lambda c: c["simulation"]["defaults"].update(initial_stock="500"), "defaults.initial_stock"),
        (lambda c: c["simulation"]["bounds"].pop("weekly_receiving"), "bounds.weekly_receiving"),
        (lambda c: c["simulation"]["bounds"]["initial_stock"].update(min=10, max=5), "0 <= min <= max"),
        (lambda c: c["visualization"].update(enabled="yes"), "visualization.enabled"),
        (lambda c: c["visualization"]["y_axis"].update(fixed=1), "y_axis.fixed"),
        (lambda c: c["visualization"]["y_axis"].update(min_limit=500, max_limit=100), "min_limit"),
        (lambda c: c["visualization"].update(figure_size=[0, 4]), "figure_size"),
        (lambda c: c["logging"].update(log_to_file="no"), "log_to_file"),
        (lambda c: c["execution"].update(mode="prod"), "Invalid execution mode"),
        (lambda c: c["simulation"]["bounds"].update(lead_time={"min": 0, "max": 4}), "Unknown simulation.bounds"),
        (lambda c: c["paths"]["output"].pop("plots"), "paths.output.plots"),
        (lambda c: c["paths"]["output"].pop("reports"), "paths.output.reports"),
        (lambda c: c["paths"].pop("output"), "paths.output"),
        (lambda c: c["paths"].update(logs=None), "paths.logs"),
    ],
)
def test_invalid_values(config, write_config, mutate, message):
    broken = copy.deepcopy(config)
    mutate(broken)

    with pytest.raises(ConfigError, match=message):
        load_config(write_config(broken))


def test_get_logger_requires_logging_section():
    with pytest.raises(ValueError):
        get_logger({"paths": {"logs": "logs"}})


def test_get_logger_returns_project_logger(config):
    logger = get_logger(config)

    assert logger.name == "SSW"
    assert get_logger(config) is logger
    assert get_child_logger("engine").parent is logger
    assert logger.level in (logging.INFO, logging.DEBUG, logging.WARNING)
