"""
Exception hierarchy for the simulator.

Every error the engine raises on bad input derives from SimulationError,
which is itself a ValueError so callers that only care about "bad value"
can keep catching that.
"""

from typing import Any


class SimulationError(ValueError):
    """Base class for all errors raised by the simulator."""


class InvalidRosterError(SimulationError):
    """Raised when a stat block or roster cannot be simulated."""

    def __init__(self, message: str, record: Any = None) -> None:
        super().__init__(message)
        self.record = record


class UnknownTargetingStrategyError(SimulationError):
    """Raised when a combatant names a targeting strategy that does not exist."""

    def __init__(self, strategy: Any) -> None:
        super().__init__(f"Unknown targeting strategy: {strategy!r}")
        self.strategy = strategy


class ScenarioError(SimulationError):
    """Raised when a scenario or its settings cannot be read or are invalid."""
