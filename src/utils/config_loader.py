# src/utils/config_loader.py

"""
Centralized configuration loader for the SSW simulator.

Responsibilities:
- Load YAML configuration
- Validate mandatory sections
- Validate simulation defaults and bounds
- Validate chart (y-axis) settings
- Provide a single, safe config object

Design Principles:
------------------
- Fail-fast validation
- Defensive type checking
- No silent defaults
- No implicit assumptions
"""

from pathlib import Path
from typing import Dict, Any
import yaml
from utils.logger import get_child_logger


logger = get_child_logger("config")


DEFAULT_CONFIG_PATH = "config/config.yaml"

QUANTITY_FIELDS = (
    "weekly_demand",
    "safety_stock_weeks",
    "initial_stock",
    "weekly_receiving",
)


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(
            f"Configuration file not found at path: {path.resolve()}"
        )

    if not path.is_file():
        raise ConfigError(
            f"Configuration path is not a file: {path.resolve()}"
        )

    if path.suffix not in {".yaml", ".yml"}:
        raise ConfigError(
            f"Invalid config file format: {path.name}. Expected a YAML file."
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(
            f"Failed to read configuration file: {path.resolve()} ({exc})"
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Failed to parse YAML configuration: {exc}"
        ) from exc

    if config is None:
        raise ConfigError(
            "Configuration file is empty or contains no valid YAML content."
        )

    if not isinstance(config, dict):
        raise ConfigError(
            "Top-level configuration must be a dictionary."
        )

    validate_config(config)

    logger.info("Configuration loaded and validated successfully.")

    return dict(config)


def validate_config(config: Dict[str, Any]) -> None:
    required_sections = {
        "project",
        "paths",
        "logging",
        "simulation",
        "visualization",
        "execution",
    }

    missing = required_sections - config.keys()
    if missing:
        raise ConfigError(
            f"Missing required config sections: {sorted(missing)}"
        )

    extra_sections = set(config.keys()) - required_sections
    if extra_sections:
        raise ConfigError(
            f"Unknown top-level config sections detected: {sorted(extra_sections)}"
        )

    for section in required_sections:
        if not isinstance(config.get(section), dict):
            raise ConfigError(
                f"Config section '{section}' must be a dictionary."
            )

    _validate_paths(config)
    _validate_logging(config)
    _validate_simulation(config)
    _validate_visualization(config)
    _validate_execution(config)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_paths(config: Dict[str, Any]) -> None:
    paths_cfg = config["paths"]

    if not isinstance(paths_cfg.get("logs"), str):
        raise ConfigError("paths.logs must be a string.")

    output_cfg = paths_cfg.get("output")
    if not isinstance(output_cfg, dict):
        raise ConfigError("paths.output must be a dictionary.")

    for key in ("plots", "reports"):
        value = output_cfg.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"paths.output.{key} must be a non-empty string.")


def _validate_logging(config: Dict[str, Any]) -> None:
    logging_cfg = config["logging"]

    required = {"level", "log_to_file", "filename"}
    missing = required - logging_cfg.keys()
    if missing:
        raise ConfigError(
            f"Missing required logging config keys: {sorted(missing)}"
        )

    if not isinstance(logging_cfg["log_to_file"], bool):
        raise ConfigError("logging.log_to_file must be boolean.")


def _validate_simulation(config: Dict[str, Any]) -> None:
    sim_cfg = config["simulation"]

    horizon = sim_cfg.get("horizon_weeks")
    if not _is_int(horizon) or horizon <= 0:
        raise ConfigError("simulation.horizon_weeks must be positive integer.")

    defaults = sim_cfg.get("defaults")
    if not isinstance(defaults, dict):
        raise ConfigError("simulation.defaults must be a dictionary.")

    bounds = sim_cfg.get("bounds")
    if not isinstance(bounds, dict):
        raise ConfigError("simulation.bounds must be a dictionary.")

    unknown_bounds = set(bounds.keys()) - set(QUANTITY_FIELDS)
    if unknown_bounds:
        raise ConfigError(
            f"Unknown simulation.bounds fields: {sorted(unknown_bounds)}"
        )

    for field in QUANTITY_FIELDS:

        value = defaults.get(field)
        if not _is_int(value) or value < 0:
            raise ConfigError(
                f"simulation.defaults.{field} must be a non-negative integer."
            )

        field_bounds = bounds.get(field)
        if not isinstance(field_bounds, dict):
            raise ConfigError(
                f"simulation.bounds.{field} must be a dictionary with min/max."
            )

        low = field_bounds.get("min")
        high = field_bounds.get("max")

        if not _is_int(low) or not _is_int(high):
            raise ConfigError(
                f"simulation.bounds.{field}.min/max must be integers."
            )

        if low < 0 or low > high:
            raise ConfigError(
                f"simulation.bounds.{field} must satisfy 0 <= min <= max."
            )


def _validate_visualization(config: Dict[str, Any]) -> None:
    vis_cfg = config["visualization"]

    if not isinstance(vis_cfg.get("enabled"), bool):
        raise ConfigError("visualization.enabled must be boolean.")

    y_axis = vis_cfg.get("y_axis")
    if not isinstance(y_axis, dict):
        raise ConfigError("visualization.y_axis must be a dictionary.")

    if not isinstance(y_axis.get("fixed"), bool):
        raise ConfigError("visualization.y_axis.fixed must be boolean.")

    for key in ("max", "min_limit", "max_limit"):
        if not _is_int(y_axis.get(key)):
            raise ConfigError(f"visualization.y_axis.{key} must be integer.")

    if y_axis["min_limit"] > y_axis["max_limit"]:
        raise ConfigError(
            "visualization.y_axis.min_limit must not exceed max_limit."
        )

    if "figure_size" in vis_cfg:
        size = vis_cfg["figure_size"]
        if (
            not isinstance(size, (list, tuple))
            or len(size) != 2
            or not all(isinstance(v, (int, float)) and v > 0 for v in size)
        ):
            raise ConfigError(
                "visualization.figure_size must be two positive numbers."
            )


def _validate_execution(config: Dict[str, Any]) -> None:
    execution_cfg = config["execution"]

    mode = execution_cfg.get("mode")
    allowed_modes = {"interactive", "batch"}

    if not isinstance(mode, str):
        raise ConfigError("Execution mode must be a string.")

    if mode not in allowed_modes:
        raise ConfigError(
            f"Invalid execution mode '{mode}'. "
            f"Allowed values are: {sorted(allowed_modes)}"
        )
