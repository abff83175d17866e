# src/utils/helpers.py

"""
Reusable Helper Utilities
==========================

Small, generic utility functions used across the simulator.

These helpers are intentionally minimal and generic.
"""

import os
import pandas as pd
from datetime import datetime
from typing import Any, Tuple


# ==========================================================
# Filesystem Utilities
# ==========================================================

def ensure_directory(path: str) -> None:
    """
    Ensure that a directory exists.

    Parameters
    ----------
    path : str
        Directory path to create if missing.

    Notes
    -----
    - Safe to call multiple times.
    - Used before writing plots and reports.
    """
    os.makedirs(path, exist_ok=True)


def generate_timestamp(fmt: str = "%Y%m%d_%H%M%S") -> str:
    """
    Generate formatted timestamp string for output filenames.
    """
    return datetime.now().strftime(fmt)


# ==========================================================
# Numeric Utilities
# ==========================================================

def require_int(value: Any, name: str) -> int:
    """
    Return value if it is a plain integer, else raise.

    Floats with an integral value (e.g. 100.0) are accepted and
    converted. Booleans are rejected even though bool subclasses int.

    Raises
    ------
    ValueError
        If value is not an integer quantity.
    """

    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got bool.")

    if isinstance(value, int):
        return value

    if isinstance(value, float) and value.is_integer():
        return int(value)

    raise ValueError(f"{name} must be an integer, got {value!r}.")


def clamp(value: int, bounds: Tuple[int, int]) -> int:
    """
    Clamp value into the closed interval bounds = (low, high).
    """
    low, high = bounds

    if low > high:
        raise ValueError(f"Invalid bounds: min {low} exceeds max {high}.")

    return max(low, min(high, value))


# ==========================================================
# Validation Utilities
# ==========================================================

def validate_dataframe_not_empty(df: pd.DataFrame, name: str) -> None:
    """
    Raise an error if a dataframe is empty.

    Raises
    ------
    ValueError
        If dataframe is empty.
    """
    if df.empty:
        raise ValueError(f"{name} dataframe is empty.")
