"""
Dice module for the simulator.

Attack rolls are the only source of randomness in a simulation. They are drawn
from a random source that is always passed in explicitly, so a seeded source
makes a whole run reproducible.
"""

import random
from typing import Protocol

from pydantic import BaseModel, Field

from battlesim.core.constants import D20


class RandomSource(Protocol):
    """Anything that can draw a uniform integer, like random.Random."""

    def randint(self, a: int, b: int) -> int: ...


def make_rng(seed: int | None = None) -> random.Random:
    """
    Creates an independent random source.

    Args:
        seed (int | None): The seed, or None for an unpredictable source.

    Returns:
        random.Random: The random source.

    """
    return random.Random(seed)


class AttackRoll(BaseModel):
    """Class to hold the breakdown of one attack roll."""

    roll: int = Field(
        description="The natural d20 result",
    )
    bonus: int = Field(
        description="The attack bonus added to the roll",
    )

    @property
    def value(self) -> int:
        """The total of the roll plus the bonus."""
        return self.roll + self.bonus

    @property
    def description(self) -> str:
        sign = "+" if self.bonus >= 0 else "-"
        return f"1d{D20}({self.roll}) {sign} {abs(self.bonus)}"

    def is_natural_max(self) -> bool:
        """
        Determines if the die showed its highest face.
        """
        return self.roll == D20

    def is_natural_min(self) -> bool:
        """
        Determines if the die showed its lowest face.
        """
        return self.roll == 1


def roll_d20(rng: RandomSource) -> int:
    """Draws one d20 from the given random source."""
    return rng.randint(1, D20)


def roll_attack(bonus: int, rng: RandomSource) -> AttackRoll:
    """
    Rolls a d20 and adds the attack bonus.

    Args:
        bonus (int): The attack bonus of the attacker.
        rng (RandomSource): The random source to draw from.

    Returns:
        AttackRoll: The breakdown of the roll.

    """
    return AttackRoll(roll=roll_d20(rng), bonus=bonus)
