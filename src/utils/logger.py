# src/utils/logger.py

"""
Simulator Logging
=================

The shell and the batch pipeline call get_logger(config) once at
startup. Everything else logs through a child of "SSW":

- SSW.config      configuration loading
- SSW.simulation  clamp warnings from SimulationInputs
- SSW.engine      per-derivation debug lines

Console output always; a file under paths.logs when
logging.log_to_file is set.
"""

import os
import logging
from typing import Dict


LOGGER_NAME = "SSW"


def get_logger(config: Dict) -> logging.Logger:
    """
    Create and configure the project-wide logger.
    """

    if not isinstance(config, dict):
        raise ValueError("config must be a dictionary.")

    if "logging" not in config:
        raise ValueError("Missing 'logging' section in configuration.")

    if "paths" not in config or "logs" not in config["paths"]:
        raise ValueError("Missing 'paths.logs' configuration.")

    logger = logging.getLogger(LOGGER_NAME)

    # Prevent reconfiguration if already initialized
    if logger.handlers:
        return logger

    logging_cfg = config["logging"]

    # --------------------------------------------------
    # Validate Log Level
    # --------------------------------------------------

    if "level" not in logging_cfg:
        raise ValueError("Missing 'logging.level' in configuration.")

    log_level_str = str(logging_cfg["level"]).upper()

    valid_levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    if log_level_str not in valid_levels:
        raise ValueError(
            f"Invalid log level '{log_level_str}'. "
            f"Valid options: {list(valid_levels.keys())}"
        )

    logger.setLevel(valid_levels[log_level_str])
    logger.propagate = False

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    # --------------------------------------------------
    # Console Handler
    # --------------------------------------------------

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # --------------------------------------------------
    # File Handler
    # --------------------------------------------------

    if logging_cfg.get("log_to_file", False):

        if "filename" not in logging_cfg:
            raise ValueError("Missing 'logging.filename' in configuration.")

        filename = logging_cfg["filename"]

        if not isinstance(filename, str) or not filename.strip():
            raise ValueError("logging.filename must be a non-empty string.")

        log_dir = config["paths"]["logs"]
        os.makedirs(log_dir, exist_ok=True)

        file_path = os.path.join(log_dir, filename)

        file_handler = logging.FileHandler(
            file_path,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_child_logger(name: str) -> logging.Logger:
    """
    Return a module logger under the project namespace.

    Safe to call at import time: handlers are attached later
    by get_logger() and reached through propagation to "SSW".
    """

    if not isinstance(name, str) or not name.strip():
        raise ValueError("Logger name must be a non-empty string.")

    return logging.getLogger(f"{LOGGER_NAME}.{name}")
