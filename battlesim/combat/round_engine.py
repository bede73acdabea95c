"""
Round engine module for the simulator.

One round lets every living player act once, in roster order, and then every
living monster act once, in roster order, against what is left of the
players. A combatant killed before its turn comes does not act.
"""

from catchery import log_debug
from pydantic import BaseModel, ConfigDict, Field

from battlesim.combat.attack import AttackOutcome, resolve_attack
from battlesim.combat.targeting import choose_target
from battlesim.core.constants import Side
from battlesim.core.dice import RandomSource
from battlesim.roster.combatant import Combatant, Roster
from battlesim.roster.expansion import clone_roster, count_alive


class RoundSnapshot(BaseModel):
    """The state of both rosters right after a round."""

    model_config = ConfigDict(populate_by_name=True)

    round_number: int = Field(
        alias="round",
        ge=1,
        description="Position of the round in the battle, 1-based",
    )
    players: Roster = Field(
        description="The player roster after the round",
    )
    monsters: Roster = Field(
        description="The monster roster after the round",
    )
    attacks: list[AttackOutcome] = Field(
        default_factory=list,
        description="Every attack resolved during the round, in order",
    )

    def get_roster(self, side: Side) -> Roster:
        return self.players if side == Side.PLAYERS else self.monsters

    def alive_count(self, side: Side) -> int:
        return count_alive(self.get_roster(side))


def run_side_phase(
    attackers: Roster,
    defenders: Roster,
    rng: RandomSource,
) -> list[AttackOutcome]:
    """
    Lets every living attacker, in roster order, attack one defender.

    An attacker without a targeting strategy passes its turn.

    Args:
        attackers (Roster): The acting side.
        defenders (Roster): The opposing side, damaged in place.
        rng (RandomSource): The source of attack rolls.

    Returns:
        list[AttackOutcome]: The attacks resolved, in order.

    """
    outcomes: list[AttackOutcome] = []
    for attacker in attackers:
        if attacker.is_dead() or attacker.target is None:
            continue
        target: Combatant | None = choose_target(attacker.target, defenders)
        if target is None:
            # Nobody left to attack.
            continue
        outcomes.append(resolve_attack(attacker, target, rng))
    return outcomes


def run_round(
    players: Roster,
    monsters: Roster,
    rng: RandomSource,
    round_number: int,
) -> RoundSnapshot:
    """
    Executes exactly one round.

    The rosters passed in are updated in place; the returned snapshot holds
    independent copies of them.

    Args:
        players (Roster): The player roster, living and dead.
        monsters (Roster): The monster roster, living and dead.
        rng (RandomSource): The source of attack rolls.
        round_number (int): The 1-based number of this round.

    Returns:
        RoundSnapshot: Both rosters after the round.

    """
    attacks = run_side_phase(players, monsters, rng)
    attacks += run_side_phase(monsters, players, rng)

    log_debug(
        f"Round {round_number}: {count_alive(players)} players and "
        f"{count_alive(monsters)} monsters standing after {len(attacks)} attacks",
        {"round": round_number, "attacks": len(attacks), "context": "run_round"},
    )

    return RoundSnapshot(
        round_number=round_number,
        players=clone_roster(players),
        monsters=clone_roster(monsters),
        attacks=attacks,
    )
