"""
Combatant expansion for the simulator.

Turns a compact team (stat blocks with a count) into the flat list of
individuals the combat engine works on.
"""

from typing import Any, Iterable

from catchery import log_debug

from battlesim.roster.combatant import Combatant, Roster
from battlesim.roster.stat_block import parse_team


def expand_team(team: Iterable[Any] | None) -> Roster:
    """
    Expands a team into one combatant per unit of count.

    The order is stable: groups in team order, then individuals in instance
    order. Every combatant starts at full hit points. Groups with a count of
    zero contribute nobody.

    Args:
        team (Iterable[Any] | None): StatBlocks or plain stat block records.

    Returns:
        Roster: The flat list of combatants.

    Raises:
        InvalidRosterError: If a record is invalid.

    """
    combatants: Roster = []
    for stats in parse_team(team):
        if stats.count <= 0:
            log_debug(
                f"Group {stats.name} has no members, skipping",
                {"group": stats.name, "count": stats.count},
            )
            continue
        combatants.extend(
            Combatant(stats=stats, index=index, hp=stats.hp)
            for index in range(1, stats.count + 1)
        )
    return combatants


def clone_roster(combatants: Iterable[Combatant]) -> Roster:
    """
    Deep-copies a roster so later changes cannot reach the original.

    Args:
        combatants (Iterable[Combatant]): The roster to copy.

    Returns:
        Roster: The independent copy.

    """
    return [combatant.model_copy(deep=True) for combatant in combatants]


def count_alive(combatants: Iterable[Combatant]) -> int:
    """Returns how many combatants of the roster are still standing."""
    return sum(1 for combatant in combatants if combatant.alive)


def hit_points(combatants: Iterable[Combatant]) -> list[int]:
    """Returns the current hit points of every combatant, in roster order."""
    return [combatant.hp for combatant in combatants]
