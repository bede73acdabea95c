"""
Encounter module for the simulator.

An adventuring day is a team of players going through a sequence of
encounters. The players who come out of one encounter, wounded or dead, are
the players who enter the next one; monsters never carry over.
"""

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

from battlesim.combat.round_engine import RoundSnapshot
from battlesim.combat.simulation import run_simulation
from battlesim.core.config import SimulationSettings
from battlesim.core.constants import SimulationOutcome
from battlesim.core.dice import RandomSource, make_rng
from battlesim.core.logging import get_logger
from battlesim.roster.combatant import Roster
from battlesim.roster.expansion import clone_roster, expand_team
from battlesim.roster.stat_block import Team, parse_team

logger = get_logger(__name__)


class Encounter(BaseModel):
    """One battle definition and its computed history."""

    model_config = ConfigDict(populate_by_name=True)

    players: Roster = Field(
        default_factory=list,
        description="The player roster entering the encounter",
    )
    monsters: Team = Field(
        default_factory=list,
        description="The monster groups of the encounter",
    )
    simulation_results: list[RoundSnapshot] = Field(
        alias="simulationResults",
        default_factory=list,
        description="The round history, always recomputed from the two sides",
    )
    outcome: SimulationOutcome | None = Field(
        default=None,
        description="How the encounter ended, None until it is simulated",
    )

    def final_players(self) -> Roster:
        """
        Returns a copy of the players as they leave the encounter.

        Returns:
            Roster: The players of the last round, or the players that entered
            when no round was fought.

        """
        if self.simulation_results:
            return clone_roster(self.simulation_results[-1].players)
        return clone_roster(self.players)


def _monsters_of(encounter: Any) -> Team:
    if isinstance(encounter, Encounter):
        return list(encounter.monsters)
    if isinstance(encounter, dict):
        return parse_team(encounter.get("monsters"))
    return parse_team(encounter)


def run_encounters(
    team: Iterable[Any] | None,
    encounters: Iterable[Any],
    rng: RandomSource | None = None,
    settings: SimulationSettings | None = None,
) -> list[Encounter]:
    """
    Recomputes a whole chain of encounters from scratch.

    Args:
        team (Iterable[Any] | None): The player stat blocks or records.
        encounters (Iterable[Any]): Encounter objects, records with a
            "monsters" list, or plain monster lists. Only their monsters are
            read.
        rng (RandomSource | None): The source of attack rolls, shared by the
            whole chain. Defaults to one seeded from the settings.
        settings (SimulationSettings | None): Run parameters.

    Returns:
        list[Encounter]: New encounters holding their starting players and
        their history. The inputs are not modified.

    Raises:
        InvalidRosterError: If a stat block is invalid.
        UnknownTargetingStrategyError: If a combatant able to act uses an
            unsupported strategy.

    """
    settings = settings or SimulationSettings()
    if rng is None:
        rng = make_rng(settings.seed)

    players = expand_team(team)
    results: list[Encounter] = []
    for index, definition in enumerate(encounters, 1):
        monsters = _monsters_of(definition)
        simulation = run_simulation(players, monsters, rng=rng, settings=settings)
        encounter = Encounter(
            players=players,
            monsters=monsters,
            simulation_results=simulation.rounds,
            outcome=simulation.outcome,
        )
        logger.info(
            f"Encounter {index}: {simulation.outcome.display_name} "
            f"after {simulation.round_count} rounds"
        )
        results.append(encounter)
        # The next encounter gets its own copy of the survivors.
        players = encounter.final_players()
    return results
