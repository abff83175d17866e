# src/simulation01/stock_metrics.py

"""
Stock Metrics Module
====================

Summary figures shown next to the trajectory:

- Safety stock threshold with its formula
- Initial stock and weekly demand
- Overall status with the minimum stock level
- Weeks the initial stock lasts with no inbound
- Share of the initial stock taken up by the safety zone
"""

from typing import Dict, Optional


def coverage_weeks_without_inbound(
    initial_stock: int,
    weekly_demand: int
) -> Optional[float]:
    """
    Weeks the initial stock covers demand if receiving stops.

    Returns
    -------
    float or None
        initial_stock / weekly_demand rounded to one decimal,
        None when weekly demand is zero.
    """

    if initial_stock < 0 or weekly_demand < 0:
        raise ValueError("Stock and demand must be non-negative.")

    if weekly_demand == 0:
        return None

    return round(initial_stock / weekly_demand, 1)


def safety_zone_ratio(threshold: int, initial_stock: int) -> Optional[float]:
    """
    Fraction of the initial stock inside the safety zone, capped at 1.0.
    None when there is no initial stock.
    """

    if threshold < 0 or initial_stock < 0:
        raise ValueError("Threshold and stock must be non-negative.")

    if initial_stock == 0:
        return None

    return min(threshold / initial_stock, 1.0)


def build_summary(inputs, result) -> Dict:
    """
    Collect the summary card values for one derivation.

    Parameters
    ----------
    inputs : SimulationInputs
        Inputs the result was derived from.
    result : TrajectoryResult
        Output of derive_trajectory().

    Returns
    -------
    Dict
        safety_stock, safety_stock_formula, initial_stock,
        weekly_demand, status, min_stock_level,
        coverage_weeks, safety_zone_ratio
    """

    return {
        "safety_stock": result.safety_stock_threshold,
        "safety_stock_formula": (
            f"= {inputs.weekly_demand} x {inputs.safety_stock_weeks} weeks"
        ),
        "initial_stock": inputs.initial_stock,
        "weekly_demand": inputs.weekly_demand,
        "status": result.status.value,
        "min_stock_level": result.min_stock_level,
        "coverage_weeks": coverage_weeks_without_inbound(
            inputs.initial_stock, inputs.weekly_demand
        ),
        "safety_zone_ratio": safety_zone_ratio(
            result.safety_stock_threshold, inputs.initial_stock
        ),
    }
