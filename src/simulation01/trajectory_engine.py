# src/simulation01/trajectory_engine.py

"""
Trajectory Engine
=================

Pure derivation of the week-by-week stock trajectory from a
snapshot of the simulator inputs.

Recurrence:
-----------
threshold = weekly_demand × safety_stock_weeks
balance   = initial_stock

week 0    : balance unchanged (flows recorded, not applied)
week i ≥ 1: balance = balance + receiving[i] - weekly_demand

stock_level[i] = max(0, balance)

Overall status (from the minimum stock level):
----------------------------------------------
min ≤ 0          → Stockout
min ≤ threshold  → Below Safety
otherwise        → Adequate

The engine holds no state. Chart settings on the inputs
are ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import pandas as pd

from utils.logger import get_child_logger
from simulation01.exceptions import MalformedInput


logger = get_child_logger("engine")


# =========================================================
# STATUS ENUMS
# =========================================================

class StockStatus(str, Enum):
    """Overall classification of the horizon."""
    STOCKOUT = "Stockout"
    BELOW_SAFETY = "Below Safety"
    ADEQUATE = "Adequate"


class RowStatus(str, Enum):
    """Per-week display classification."""
    STOCKOUT = "Stockout"
    WARNING = "Warning"
    ADEQUATE = "Adequate"


# =========================================================
# OUTPUT TYPES
# =========================================================

@dataclass(frozen=True)
class WeekRecord:
    """One row of the trajectory."""
    week_index: int
    week_label: int
    stock_level: int
    running_balance: int           # unclamped; negative means backlog
    inbound: int
    outbound: int
    safety_stock_threshold: int

    @property
    def row_status(self) -> RowStatus:
        return classify_week(self.stock_level, self.safety_stock_threshold)


@dataclass(frozen=True)
class TrajectoryResult:
    """Complete derivation output."""
    trajectory: Tuple[WeekRecord, ...]
    safety_stock_threshold: int
    min_stock_level: int
    status: StockStatus

    @property
    def horizon_weeks(self) -> int:
        return len(self.trajectory)

    def to_dataframe(self) -> pd.DataFrame:
        """
        One row per week, in horizon order.

        Columns: week, stock_level, running_balance, inbound,
        outbound, safety_stock, status
        """
        return pd.DataFrame(
            [
                {
                    "week": record.week_label,
                    "stock_level": record.stock_level,
                    "running_balance": record.running_balance,
                    "inbound": record.inbound,
                    "outbound": record.outbound,
                    "safety_stock": record.safety_stock_threshold,
                    "status": record.row_status.value,
                }
                for record in self.trajectory
            ],
            columns=[
                "week",
                "stock_level",
                "running_balance",
                "inbound",
                "outbound",
                "safety_stock",
                "status",
            ],
        )


# =========================================================
# CLASSIFICATION
# =========================================================

def compute_safety_stock_threshold(weekly_demand: int, safety_stock_weeks: int) -> int:
    return weekly_demand * safety_stock_weeks


def classify_stock_status(min_stock_level: int, threshold: int) -> StockStatus:
    # Stockout wins over Below Safety when the minimum is exactly 0.
    if min_stock_level <= 0:
        return StockStatus.STOCKOUT
    if min_stock_level <= threshold:
        return StockStatus.BELOW_SAFETY
    return StockStatus.ADEQUATE


def classify_week(stock_level: int, threshold: int) -> RowStatus:
    if stock_level == 0:
        return RowStatus.STOCKOUT
    if stock_level <= threshold:
        return RowStatus.WARNING
    return RowStatus.ADEQUATE


# =========================================================
# DERIVATION
# =========================================================

def derive_trajectory(inputs) -> TrajectoryResult:
    """
    Derive the full trajectory from the current inputs.

    Parameters
    ----------
    inputs : SimulationInputs
        Any object exposing weekly_demand, safety_stock_weeks,
        initial_stock, weekly_receiving and horizon_weeks.

    Returns
    -------
    TrajectoryResult

    Raises
    ------
    MalformedInput
        If the receiving schedule length differs from the horizon.
    """

    receiving = tuple(inputs.weekly_receiving)
    horizon = inputs.horizon_weeks

    if len(receiving) != horizon:
        raise MalformedInput(
            f"weekly_receiving has {len(receiving)} entries, "
            f"expected {horizon}."
        )

    weekly_demand = inputs.weekly_demand
    threshold = compute_safety_stock_threshold(
        weekly_demand, inputs.safety_stock_weeks
    )

    running_stock = inputs.initial_stock
    records = []

    for i in range(horizon):
        inbound = receiving[i]
        outbound = weekly_demand

        # Week 1 shows the starting balance; its flows are not applied.
        if i > 0:
            running_stock = running_stock + inbound - outbound

        records.append(
            WeekRecord(
                week_index=i,
                week_label=i + 1,
                stock_level=max(0, running_stock),
                running_balance=running_stock,
                inbound=inbound,
                outbound=outbound,
                safety_stock_threshold=threshold,
            )
        )

    min_stock_level = min(record.stock_level for record in records)
    status = classify_stock_status(min_stock_level, threshold)

    logger.debug(
        f"Derived {horizon}-week trajectory: threshold={threshold}, "
        f"min_stock={min_stock_level}, status={status.value}"
    )

    return TrajectoryResult(
        trajectory=tuple(records),
        safety_stock_threshold=threshold,
        min_stock_level=min_stock_level,
        status=status,
    )
