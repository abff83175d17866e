# src/simulation01/exceptions.py

"""
Simulation error taxonomy.

Out-of-range scalar quantities are never errors: they are clamped
by SimulationInputs. Only caller mistakes surface here.
"""


class SimulationError(Exception):
    """Base class for simulator errors."""
    pass


class IndexOutOfRange(SimulationError, IndexError):
    """Raised when a week index falls outside the planning horizon."""
    pass


class MalformedInput(SimulationError, ValueError):
    """Raised when the receiving schedule does not match the horizon length."""
    pass
