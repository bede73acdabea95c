"""
Constants and enumerations for the simulator.

Defines global constants and the enumerations for the two sides of a battle,
the targeting strategies combatants can use, and the possible outcomes of a
simulation run.
"""

from enum import Enum

from battlesim.core.errors import UnknownTargetingStrategyError

# Global verbose level for combat output:
# 0 - Minimal (e.g., only final results)
# 1 - Moderate (e.g., show every round)
# 2 - Full detail (e.g., every attack roll)
GLOBAL_VERBOSE_LEVEL = 0

# Number of faces of the attack die.
D20 = 20

# Rounds after which a battle is declared a stalemate.
DEFAULT_MAX_ROUNDS = 200


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Side(NiceEnum):
    """Defines the side a combatant fights for."""

    PLAYERS = "PLAYERS"
    MONSTERS = "MONSTERS"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this side."""
        return {
            Side.PLAYERS: "👤",
            Side.MONSTERS: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this side."""
        return {
            Side.PLAYERS: "bold blue",
            Side.MONSTERS: "bold red",
        }.get(self, "dim white")


class TargetingStrategy(Enum):
    """
    Defines the rule a combatant uses to pick which living opponent to attack.

    The values are the labels stored in rosters and scenario files.
    """

    HIGHEST_DPR = "enemy with highest DPR"
    MOST_HP = "enemy with most HP"
    LEAST_HP = "enemy with least HP"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | TargetingStrategy") -> "TargetingStrategy":
        """
        Converts a roster label into a strategy.

        Args:
            value (str | TargetingStrategy): The label, or an existing strategy.

        Returns:
            TargetingStrategy: The matching strategy.

        Raises:
            UnknownTargetingStrategyError: If the label is not supported.

        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownTargetingStrategyError(value) from None


class SimulationOutcome(NiceEnum):
    """Defines the state of a simulation run."""

    RUNNING = "RUNNING"
    PLAYERS_WIPED = "PLAYERS_WIPED"
    MONSTERS_WIPED = "MONSTERS_WIPED"
    STALEMATE_ROUND_CAP = "STALEMATE_ROUND_CAP"
    # One of the sides had nobody standing, so no round was fought.
    NOT_FOUGHT = "NOT_FOUGHT"

    @property
    def is_terminal(self) -> bool:
        return self != SimulationOutcome.RUNNING

    @property
    def color(self) -> str:
        """Returns the color string associated with this outcome."""
        return {
            SimulationOutcome.PLAYERS_WIPED: "bold red",
            SimulationOutcome.MONSTERS_WIPED: "bold green",
            SimulationOutcome.STALEMATE_ROUND_CAP: "bold yellow",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return f"[{self.color}]{self.display_name}[/]"
