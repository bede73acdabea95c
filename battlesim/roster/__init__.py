"""
Roster module for the Battle Sim encounter simulator.

Stat blocks describe groups of identical combatants; expansion turns them
into the individual combatants the combat engine works on.
"""

from .combatant import Combatant, Roster
from .expansion import clone_roster, count_alive, expand_team, hit_points
from .stat_block import StatBlock, Team, parse_stat_block, parse_team

__all__ = [
    "Combatant",
    "Roster",
    "StatBlock",
    "Team",
    "clone_roster",
    "count_alive",
    "expand_team",
    "hit_points",
    "parse_stat_block",
    "parse_team",
]
