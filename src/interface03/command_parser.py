# src/interface03/command_parser.py

"""
Command Parser
==============

Converts one line typed into the simulator shell into a
structured command dictionary.

Grammar:
--------
demand <n|+n|-n>          weekly demand (absolute or relative)
weeks  <n|+n|-n>          safety stock weeks
stock  <n|+n|-n>          initial stock
recv   <week> <n|+n|-n>   receiving for one week (1-based)
recv   all <n>            same receiving for every week
match                     receiving = weekly demand, every week
reset                     receiving = 0, every week
yaxis  fixed [max]        fix chart scale (optionally set max)
yaxis  auto               auto chart scale
yaxis  max <n>            set fixed-scale maximum
show | table | plot | help | exit

This module does NOT apply commands.
It only parses and structures.
"""

import re
from typing import Dict, Tuple


VALUE_PATTERN = re.compile(r"^([+-])?(\d+)$")

SCALAR_ACTIONS = {
    "demand": "set_weekly_demand",
    "weeks": "set_safety_stock_weeks",
    "stock": "set_initial_stock",
}

BARE_ACTIONS = {"match", "reset", "show", "table", "plot", "help", "exit"}

ALIASES = {
    "quit": "exit",
    "q": "exit",
    "?": "help",
}


def _parse_value(token: str) -> Tuple[int, bool]:
    """
    Parse a quantity token.

    Returns
    -------
    (value, relative)
        "+10" -> (10, True), "-10" -> (-10, True), "10" -> (10, False)
    """

    match = VALUE_PATTERN.match(token)

    if not match:
        raise ValueError(f"Invalid quantity '{token}'. Expected n, +n or -n.")

    sign, digits = match.groups()
    value = int(digits)

    if sign is None:
        return value, False

    return (-value if sign == "-" else value), True


def _parse_absolute(token: str) -> int:
    value, relative = _parse_value(token)

    if relative:
        raise ValueError(f"Relative value '{token}' not allowed here.")

    return value


# =========================================================
# COMMAND PARSER
# =========================================================

def parse_command(text: str) -> Dict:
    """
    Parse a shell line into a command dictionary.

    Keys:
        action      : str
        value       : int or None
        relative    : bool
        week_index  : int or None (0-based)
        fixed       : bool or None

    Raises
    ------
    ValueError
        If the line is empty, unknown or malformed.
    """

    if not isinstance(text, str) or not text.strip():
        raise ValueError("Command must be a non-empty string.")

    parts = text.strip().lower().split()
    keyword = ALIASES.get(parts[0], parts[0])
    args = parts[1:]

    command = {
        "action": None,
        "value": None,
        "relative": False,
        "week_index": None,
        "fixed": None,
    }

    # ---------------- SCALAR FIELDS ----------------
    if keyword in SCALAR_ACTIONS:

        if len(args) != 1:
            raise ValueError(f"Usage: {keyword} <n|+n|-n>")

        command["action"] = SCALAR_ACTIONS[keyword]
        command["value"], command["relative"] = _parse_value(args[0])
        return command

    # ---------------- RECEIVING ----------------
    if keyword == "recv":

        if len(args) != 2:
            raise ValueError("Usage: recv <week> <n|+n|-n>  or  recv all <n>")

        if args[0] == "all":
            command["action"] = "set_all_receiving"
            command["value"] = _parse_absolute(args[1])
            return command

        if not args[0].isdigit():
            raise ValueError(f"Invalid week '{args[0]}'. Expected a week number.")

        week = int(args[0])

        if week < 1:
            raise ValueError("Week numbers start at 1.")

        command["action"] = "set_receiving"
        command["week_index"] = week - 1
        command["value"], command["relative"] = _parse_value(args[1])
        return command

    # ---------------- Y-AXIS ----------------
    if keyword == "yaxis":

        if not args:
            raise ValueError("Usage: yaxis fixed [max] | yaxis auto | yaxis max <n>")

        mode = args[0]

        if mode == "auto" and len(args) == 1:
            command["action"] = "set_y_axis"
            command["fixed"] = False
            return command

        if mode == "fixed" and len(args) in (1, 2):
            command["action"] = "set_y_axis"
            command["fixed"] = True
            if len(args) == 2:
                command["value"] = _parse_absolute(args[1])
            return command

        if mode == "max" and len(args) == 2:
            command["action"] = "set_y_axis_max"
            command["value"] = _parse_absolute(args[1])
            return command

        raise ValueError("Usage: yaxis fixed [max] | yaxis auto | yaxis max <n>")

    # ---------------- BARE COMMANDS ----------------
    if keyword in BARE_ACTIONS:

        if args:
            raise ValueError(f"'{keyword}' takes no arguments.")

        command["action"] = keyword
        return command

    raise ValueError(f"Unknown command '{parts[0]}'. Type 'help' for usage.")
