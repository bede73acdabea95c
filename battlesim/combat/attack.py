"""
Attack resolution module for the simulator.

An attack hits when a d20 plus the attacker's bonus reaches the defender's
armor class. A hit removes the attacker's damage per hit from the defender,
never going below zero hit points.
"""

import math

from catchery import log_debug
from pydantic import BaseModel, Field

from battlesim.core.dice import AttackRoll, RandomSource, roll_attack
from battlesim.roster.combatant import Combatant


class AttackOutcome(BaseModel):
    """Record of one resolved attack, kept for round-by-round display."""

    attacker: str = Field(
        description="Display name of the attacker",
    )
    defender: str = Field(
        description="Display name of the defender",
    )
    roll: AttackRoll = Field(
        description="The attack roll breakdown",
    )
    defender_ac: int = Field(
        description="Armor class the roll was compared against",
    )
    hit: bool = Field(
        description="Whether the roll reached the armor class",
    )
    damage: int = Field(
        default=0,
        description="Hit points actually removed from the defender",
    )
    killed: bool = Field(
        default=False,
        description="Whether this attack brought the defender to zero",
    )

    def describe(self) -> str:
        """Returns a rich markup sentence describing the attack."""
        details = f"rolled ({self.roll.description}) {self.roll.value} vs AC {self.defender_ac}"
        if self.roll.is_natural_max():
            details += " [bold yellow](natural 20)[/]"
        elif self.roll.is_natural_min():
            details += " [dim](natural 1)[/]"
        if not self.hit:
            return f"    ❌ {self.attacker} attacks {self.defender}, {details}, but misses!"
        msg = f"    🎯 {self.attacker} hits {self.defender}, {details}, for {self.damage} damage"
        if self.killed:
            msg += f", [bold red]{self.defender} falls![/]"
        return msg


def damage_per_hit(dpr: float) -> int:
    """
    Converts a damage rating into whole hit points, rounding halves up.

    Args:
        dpr (float): The damage rating of the attacker.

    Returns:
        int: The hit points removed by one hit.

    """
    return max(0, math.floor(dpr + 0.5))


def resolve_attack(
    attacker: Combatant,
    defender: Combatant,
    rng: RandomSource,
) -> AttackOutcome:
    """
    Rolls one attack and applies its damage to the defender.

    Args:
        attacker (Combatant): The combatant attacking.
        defender (Combatant): The combatant being attacked.
        rng (RandomSource): The source of the attack roll.

    Returns:
        AttackOutcome: What happened. The hit point change is applied to the
        defender in place.

    """
    if defender.is_dead():
        raise ValueError(f"{defender.name} is already dead and cannot be attacked.")

    roll = roll_attack(attacker.to_hit, rng)
    outcome = AttackOutcome(
        attacker=attacker.name,
        defender=defender.name,
        roll=roll,
        defender_ac=defender.ac,
        hit=roll.value >= defender.ac,
    )
    if outcome.hit:
        outcome.damage = defender.take_damage(damage_per_hit(attacker.dpr))
        outcome.killed = defender.is_dead()

    log_debug(
        f"{attacker.name} -> {defender.name}: {roll.value} vs AC {defender.ac}, "
        f"{'hit' if outcome.hit else 'miss'} for {outcome.damage} "
        f"(remaining HP: {defender.hp})",
        {"attacker": attacker.name, "defender": defender.name, "context": "resolve_attack"},
    )
    return outcome
