"""
End-to-end test of the batch simulation pipeline.
"""

import os

import pandas as pd

from pipelines.run_simulation import run_simulation
from simulation01.trajectory_engine import StockStatus


def test_batch_run_writes_report_and_chart(config_path, config):
    result = run_simulation(config_path)

    assert result.status is StockStatus.ADEQUATE

    reports = os.listdir(config["paths"]["output"]["reports"])
    plots = os.listdir(config["paths"]["output"]["plots"])

    assert len(reports) == 1
    assert len(plots) == 1

    df = pd.read_csv(os.path.join(config["paths"]["output"]["reports"], reports[0]))

    assert len(df) == 12
    assert df["stock_level"].tolist() == [500] * 12


def test_batch_run_with_stockout(config, write_config):
    config["simulation"]["defaults"]["initial_stock"] = 150
    config["simulation"]["defaults"]["weekly_receiving"] = 0
    config["visualization"]["enabled"] = False

    result = run_simulation(write_config(config))

    assert result.status is StockStatus.STOCKOUT
    assert result.trajectory[-1].running_balance == -950
    assert not os.path.exists(config["paths"]["output"]["plots"])
