# src/simulation01/simulation_inputs.py

"""
Simulation Inputs (Input State Holder)
======================================

Owns the four user-adjustable parameters of the simulator:

- weekly_demand       : constant outbound quantity per week
- safety_stock_weeks  : coverage horizon in weeks
- initial_stock       : stock at the start of week 1
- weekly_receiving    : inbound quantity per week (fixed length)

plus the chart y-axis settings consumed by the presentation layer.

Behavior:
---------
- Out-of-range quantities are clamped, never rejected.
  Every clamp that changes the requested value is logged as a warning.
- Non-integer quantities raise ValueError.
- A week index outside the horizon raises IndexOutOfRange.
- Every mutation increments `version`, which callers use as the
  signal to re-derive the trajectory.
- The receiving schedule never changes length.
"""

from typing import Dict, Iterable, Optional, Tuple

from utils.helpers import clamp, require_int
from utils.logger import get_child_logger
from simulation01.exceptions import IndexOutOfRange, MalformedInput


logger = get_child_logger("simulation")


DEFAULT_HORIZON_WEEKS = 12
DEFAULT_WEEKLY_DEMAND = 100
DEFAULT_SAFETY_STOCK_WEEKS = 2
DEFAULT_INITIAL_STOCK = 500
DEFAULT_WEEKLY_RECEIVING = 100

DEFAULT_BOUNDS: Dict[str, Tuple[int, int]] = {
    "weekly_demand": (0, 9999),
    "safety_stock_weeks": (0, 12),
    "initial_stock": (0, 9999),
    "weekly_receiving": (0, 9999),
}

DEFAULT_Y_AXIS_MAX = 1000
DEFAULT_Y_AXIS_LIMITS = (100, 99999)


def _checked_bounds(name: str, low, high) -> Tuple[int, int]:
    low = require_int(low, f"{name}.min")
    high = require_int(high, f"{name}.max")

    if low < 0 or low > high:
        raise ValueError(
            f"{name} bounds must satisfy 0 <= min <= max, got ({low}, {high})."
        )

    return low, high


class SimulationInputs:
    """
    Single, explicitly owned holder of the simulator inputs.

    Mutation methods return self so calls can be chained:

        inputs.set_weekly_demand(120).match_receiving_to_demand()
    """

    def __init__(
        self,
        weekly_demand: int = DEFAULT_WEEKLY_DEMAND,
        safety_stock_weeks: int = DEFAULT_SAFETY_STOCK_WEEKS,
        initial_stock: int = DEFAULT_INITIAL_STOCK,
        weekly_receiving: Optional[Iterable[int]] = None,
        horizon_weeks: int = DEFAULT_HORIZON_WEEKS,
        bounds: Optional[Dict[str, Tuple[int, int]]] = None,
        y_axis_fixed: bool = False,
        y_axis_max: int = DEFAULT_Y_AXIS_MAX,
        y_axis_limits: Tuple[int, int] = DEFAULT_Y_AXIS_LIMITS,
    ):

        horizon_weeks = require_int(horizon_weeks, "horizon_weeks")
        if horizon_weeks <= 0:
            raise ValueError("horizon_weeks must be a positive integer.")

        self._horizon_weeks = horizon_weeks
        self._bounds = dict(DEFAULT_BOUNDS)

        if bounds:
            unknown = set(bounds) - set(DEFAULT_BOUNDS)
            if unknown:
                raise ValueError(f"Unknown bound fields: {sorted(unknown)}")
            self._bounds.update(
                {
                    field: _checked_bounds(field, low, high)
                    for field, (low, high) in bounds.items()
                }
            )

        self._y_axis_limits = _checked_bounds("y_axis_limits", *y_axis_limits)

        self._weekly_demand = self._clamp_field("weekly_demand", weekly_demand)
        self._safety_stock_weeks = self._clamp_field(
            "safety_stock_weeks", safety_stock_weeks
        )
        self._initial_stock = self._clamp_field("initial_stock", initial_stock)

        if weekly_receiving is None:
            receiving = [DEFAULT_WEEKLY_RECEIVING] * horizon_weeks
        else:
            receiving = list(weekly_receiving)

        if len(receiving) != horizon_weeks:
            raise MalformedInput(
                f"weekly_receiving has {len(receiving)} entries, "
                f"expected {horizon_weeks}."
            )

        self._weekly_receiving = [
            self._clamp_field("weekly_receiving", v) for v in receiving
        ]

        if not isinstance(y_axis_fixed, bool):
            raise ValueError("y_axis_fixed must be boolean.")

        self._y_axis_fixed = y_axis_fixed
        self._y_axis_max = self._clamp_value(
            "y_axis_max", y_axis_max, self._y_axis_limits
        )

        self._version = 0

    # =========================================================
    # CONSTRUCTION FROM CONFIG
    # =========================================================

    @classmethod
    def from_config(cls, config: Dict) -> "SimulationInputs":
        """
        Build the startup instance from a validated configuration.
        """

        if "simulation" not in config:
            raise ValueError("Missing 'simulation' section in configuration.")

        sim_cfg = config["simulation"]
        defaults = sim_cfg["defaults"]
        horizon = sim_cfg["horizon_weeks"]

        bounds = {
            field: (cfg["min"], cfg["max"])
            for field, cfg in sim_cfg["bounds"].items()
        }

        y_axis = config.get("visualization", {}).get("y_axis", {})

        return cls(
            weekly_demand=defaults["weekly_demand"],
            safety_stock_weeks=defaults["safety_stock_weeks"],
            initial_stock=defaults["initial_stock"],
            weekly_receiving=[defaults["weekly_receiving"]] * horizon,
            horizon_weeks=horizon,
            bounds=bounds,
            y_axis_fixed=y_axis.get("fixed", False),
            y_axis_max=y_axis.get("max", DEFAULT_Y_AXIS_MAX),
            y_axis_limits=(
                y_axis.get("min_limit", DEFAULT_Y_AXIS_LIMITS[0]),
                y_axis.get("max_limit", DEFAULT_Y_AXIS_LIMITS[1]),
            ),
        )

    # =========================================================
    # INTERNAL METHODS
    # =========================================================

    def _clamp_value(self, name: str, value, bounds: Tuple[int, int]) -> int:
        requested = require_int(value, name)
        effective = clamp(requested, bounds)

        if effective != requested:
            logger.warning(
                f"{name}={requested} outside [{bounds[0]}, {bounds[1]}]; "
                f"clamped to {effective}."
            )

        return effective

    def _clamp_field(self, field: str, value) -> int:
        return self._clamp_value(field, value, self._bounds[field])

    def _check_week_index(self, week_index) -> int:
        if isinstance(week_index, bool) or not isinstance(week_index, int):
            raise IndexOutOfRange(
                f"Week index must be an integer, got {week_index!r}."
            )

        if not 0 <= week_index < self._horizon_weeks:
            raise IndexOutOfRange(
                f"Week index {week_index} outside 0..{self._horizon_weeks - 1}."
            )

        return week_index

    def _touch(self) -> "SimulationInputs":
        self._version += 1
        return self

    # =========================================================
    # READ-ONLY VIEW
    # =========================================================

    @property
    def weekly_demand(self) -> int:
        return self._weekly_demand

    @property
    def safety_stock_weeks(self) -> int:
        return self._safety_stock_weeks

    @property
    def initial_stock(self) -> int:
        return self._initial_stock

    @property
    def weekly_receiving(self) -> Tuple[int, ...]:
        return tuple(self._weekly_receiving)

    @property
    def horizon_weeks(self) -> int:
        return self._horizon_weeks

    @property
    def safety_stock_threshold(self) -> int:
        return self._weekly_demand * self._safety_stock_weeks

    @property
    def y_axis_fixed(self) -> bool:
        return self._y_axis_fixed

    @property
    def y_axis_max(self) -> int:
        return self._y_axis_max

    @property
    def version(self) -> int:
        return self._version

    def bounds_for(self, field: str) -> Tuple[int, int]:
        if field not in self._bounds:
            raise ValueError(f"Unknown field '{field}'.")
        return self._bounds[field]

    # =========================================================
    # SCALAR MUTATIONS
    # =========================================================

    def set_weekly_demand(self, value: int) -> "SimulationInputs":
        self._weekly_demand = self._clamp_field("weekly_demand", value)
        return self._touch()

    def set_safety_stock_weeks(self, value: int) -> "SimulationInputs":
        self._safety_stock_weeks = self._clamp_field("safety_stock_weeks", value)
        return self._touch()

    def set_initial_stock(self, value: int) -> "SimulationInputs":
        self._initial_stock = self._clamp_field("initial_stock", value)
        return self._touch()

    def adjust_weekly_demand(self, delta: int) -> "SimulationInputs":
        return self.set_weekly_demand(
            self._weekly_demand + require_int(delta, "delta")
        )

    def adjust_safety_stock_weeks(self, delta: int) -> "SimulationInputs":
        return self.set_safety_stock_weeks(
            self._safety_stock_weeks + require_int(delta, "delta")
        )

    def adjust_initial_stock(self, delta: int) -> "SimulationInputs":
        return self.set_initial_stock(
            self._initial_stock + require_int(delta, "delta")
        )

    # =========================================================
    # RECEIVING SCHEDULE MUTATIONS
    # =========================================================

    def set_receiving(self, week_index: int, value: int) -> "SimulationInputs":
        index = self._check_week_index(week_index)
        self._weekly_receiving[index] = self._clamp_field("weekly_receiving", value)
        return self._touch()

    def adjust_receiving(self, week_index: int, delta: int) -> "SimulationInputs":
        index = self._check_week_index(week_index)
        return self.set_receiving(
            index,
            self._weekly_receiving[index] + require_int(delta, "delta")
        )

    def set_all_receiving(self, value: int) -> "SimulationInputs":
        effective = self._clamp_field("weekly_receiving", value)

        for i in range(self._horizon_weeks):
            self._weekly_receiving[i] = effective

        return self._touch()

    def match_receiving_to_demand(self) -> "SimulationInputs":
        return self.set_all_receiving(self._weekly_demand)

    def reset_receiving(self) -> "SimulationInputs":
        return self.set_all_receiving(0)

    # =========================================================
    # CHART SETTINGS (presentation only)
    # =========================================================

    def set_y_axis_fixed(self, fixed: bool) -> "SimulationInputs":
        if not isinstance(fixed, bool):
            raise ValueError("y_axis_fixed must be boolean.")

        self._y_axis_fixed = fixed
        return self._touch()

    def set_y_axis_max(self, value: int) -> "SimulationInputs":
        self._y_axis_max = self._clamp_value(
            "y_axis_max", value, self._y_axis_limits
        )
        return self._touch()

    def __repr__(self) -> str:
        return (
            f"SimulationInputs(weekly_demand={self._weekly_demand}, "
            f"safety_stock_weeks={self._safety_stock_weeks}, "
            f"initial_stock={self._initial_stock}, "
            f"weekly_receiving={self._weekly_receiving}, "
            f"version={self._version})"
        )
