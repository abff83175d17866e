"""
Tests for summary card metrics.
"""

import pytest

from simulation01.simulation_inputs import SimulationInputs
from simulation01.stock_metrics import (
    build_summary,
    coverage_weeks_without_inbound,
    safety_zone_ratio,
)
from simulation01.trajectory_engine import derive_trajectory


def test_coverage_weeks():
    assert coverage_weeks_without_inbound(500, 100) == 5.0
    assert coverage_weeks_without_inbound(250, 75) == 3.3
    assert coverage_weeks_without_inbound(0, 100) == 0.0


def test_coverage_weeks_without_demand_is_undefined():
    assert coverage_weeks_without_inbound(500, 0) is None


def test_safety_zone_ratio():
    assert safety_zone_ratio(200, 500) == pytest.approx(0.4)
    assert safety_zone_ratio(800, 500) == 1.0
    assert safety_zone_ratio(200, 0) is None


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        coverage_weeks_without_inbound(-1, 10)

    with pytest.raises(ValueError):
        safety_zone_ratio(10, -1)


def test_build_summary(inputs):
    summary = build_summary(inputs, derive_trajectory(inputs))

    assert summary == {
        "safety_stock": 200,
        "safety_stock_formula": "= 100 x 2 weeks",
        "initial_stock": 500,
        "weekly_demand": 100,
        "status": "Adequate",
        "min_stock_level": 500,
        "coverage_weeks": 5.0,
        "safety_zone_ratio": pytest.approx(0.4),
    }


def test_build_summary_reports_stockout():
    inputs = SimulationInputs(initial_stock=150, weekly_receiving=[0] * 12)

    summary = build_summary(inputs, derive_trajectory(inputs))

    assert summary["status"] == "Stockout"
    assert summary["min_stock_level"] == 0
    assert summary["coverage_weeks"] == 1.5
