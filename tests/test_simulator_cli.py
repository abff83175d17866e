"""
Tests for command application and the interactive session loop.
"""

import os

import pytest

from interface03.command_parser import parse_command
from interface03.simulator_cli import apply_command, run_cli
from simulation01.exceptions import IndexOutOfRange


def _apply(inputs, line):
    return apply_command(inputs, parse_command(line))


# ═══════════════════════════════════════════════════════════════════════════════
# APPLY COMMAND
# ═══════════════════════════════════════════════════════════════════════════════

def test_absolute_and_relative_scalars(inputs):
    _apply(inputs, "demand 120")
    _apply(inputs, "demand +30")
    _apply(inputs, "weeks -5")
    _apply(inputs, "stock -50")

    assert inputs.weekly_demand == 150
    assert inputs.safety_stock_weeks == 0
    assert inputs.initial_stock == 450


def test_receiving_commands(inputs):
    _apply(inputs, "recv 6 15000")
    _apply(inputs, "recv 2 +10")

    assert inputs.weekly_receiving[5] == 9999
    assert inputs.weekly_receiving[1] == 110

    _apply(inputs, "demand 80")
    _apply(inputs, "match")
    assert inputs.weekly_receiving == (80,) * 12

    _apply(inputs, "reset")
    assert inputs.weekly_receiving == (0,) * 12


def test_receiving_beyond_horizon(inputs):
    with pytest.raises(IndexOutOfRange):
        _apply(inputs, "recv 13 10")


def test_y_axis_commands(inputs):
    _apply(inputs, "yaxis fixed 2500")
    assert inputs.y_axis_fixed is True
    assert inputs.y_axis_max == 2500

    _apply(inputs, "yaxis auto")
    assert inputs.y_axis_fixed is False

    _apply(inputs, "yaxis max 10")
    assert inputs.y_axis_max == 100


def test_view_commands_do_not_apply(inputs):
    with pytest.raises(ValueError):
        _apply(inputs, "table")

    assert inputs.version == 0


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION LOOP
# ═══════════════════════════════════════════════════════════════════════════════

def _feed(monkeypatch, lines):
    queue = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(queue))


def test_session_applies_commands_and_survives_errors(monkeypatch, capsys, config_path):
    _feed(
        monkeypatch,
        [
            "stock 150",
            "reset",
            "recv 40 10",
            "fly away",
            "",
            "table",
            "help",
            "exit",
        ],
    )

    inputs = run_cli(config_path)
    output = capsys.readouterr().out

    assert inputs.initial_stock == 150
    assert inputs.weekly_receiving == (0,) * 12
    assert "Stockout (min stock: 0)" in output
    assert "Unable to apply" in output
    assert "Unable to parse" in output
    assert "Simulator Help" in output
    assert "Session closed." in output


@pytest.mark.parametrize("interrupt", [EOFError, KeyboardInterrupt])
def test_session_closes_when_input_ends(monkeypatch, capsys, config_path, interrupt):
    lines = iter(["demand 120"])

    def _input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise interrupt

    monkeypatch.setattr("builtins.input", _input)

    inputs = run_cli(config_path)

    assert inputs.weekly_demand == 120
    assert "Session closed." in capsys.readouterr().out


def test_session_plot_command(monkeypatch, capsys, config, config_path):
    _feed(monkeypatch, ["yaxis fixed 800", "plot", "exit"])

    run_cli(config_path)
    output = capsys.readouterr().out

    plots_dir = config["paths"]["output"]["plots"]
    saved = [f for f in os.listdir(plots_dir) if f.endswith(".png")]

    assert "Chart saved:" in output
    assert len(saved) == 1
    assert "Chart y-axis: fixed 0..800" in output


def test_session_plot_disabled(monkeypatch, capsys, config, write_config):
    config["visualization"]["enabled"] = False
    _feed(monkeypatch, ["plot", "exit"])

    run_cli(write_config(config))

    assert "Visualization is disabled" in capsys.readouterr().out
