"""
Battle Sim encounter simulator.

Define a party of player characters and a chain of monster encounters, then
predict how each battle goes, round by round.
"""

from battlesim.combat.attack import AttackOutcome, resolve_attack
from battlesim.combat.encounter import Encounter, run_encounters
from battlesim.combat.round_engine import RoundSnapshot, run_round
from battlesim.combat.simulation import CombatSimulator, SimulationResult, run_simulation
from battlesim.combat.targeting import choose_target
from battlesim.core.config import SimulationSettings
from battlesim.core.constants import SimulationOutcome, TargetingStrategy
from battlesim.core.dice import make_rng
from battlesim.core.errors import (
    InvalidRosterError,
    ScenarioError,
    SimulationError,
    UnknownTargetingStrategyError,
)
from battlesim.roster import Combatant, StatBlock, expand_team

__version__ = "0.1.0"

__all__ = [
    "AttackOutcome",
    "Combatant",
    "CombatSimulator",
    "Encounter",
    "InvalidRosterError",
    "RoundSnapshot",
    "ScenarioError",
    "SimulationError",
    "SimulationOutcome",
    "SimulationResult",
    "SimulationSettings",
    "StatBlock",
    "TargetingStrategy",
    "UnknownTargetingStrategyError",
    "choose_target",
    "expand_team",
    "make_rng",
    "resolve_attack",
    "run_encounters",
    "run_round",
    "run_simulation",
]
