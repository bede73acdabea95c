"""
Simulation driver for the simulator.

Runs rounds until one side is wiped out or the round cap is reached, and
returns the whole history. A run never touches the rosters it was given: it
expands or copies them first and only ever mutates its own combatants.
"""

from typing import Any, Iterable

from catchery import log_warning
from pydantic import BaseModel, Field

from battlesim.combat.round_engine import RoundSnapshot, run_round
from battlesim.combat.targeting import get_target_selector
from battlesim.core.config import SimulationSettings
from battlesim.core.constants import SimulationOutcome
from battlesim.core.dice import RandomSource, make_rng
from battlesim.core.logging import get_logger
from battlesim.roster.combatant import Combatant, Roster
from battlesim.roster.expansion import clone_roster, count_alive, expand_team

logger = get_logger(__name__)


class SimulationResult(BaseModel):
    """The history of one battle and how it ended."""

    rounds: list[RoundSnapshot] = Field(
        default_factory=list,
        description="One snapshot per round fought, in order",
    )
    outcome: SimulationOutcome = Field(
        description="The terminal state of the battle",
    )

    @property
    def round_count(self) -> int:
        return len(self.rounds)

    @property
    def last_round(self) -> RoundSnapshot | None:
        return self.rounds[-1] if self.rounds else None


def to_roster(side: Iterable[Any] | None) -> Roster:
    """
    Builds a fresh roster from stat blocks or from already expanded combatants.

    Args:
        side (Iterable[Any] | None): StatBlocks, records, or Combatants.

    Returns:
        Roster: Combatants owned by the caller.

    Raises:
        InvalidRosterError: If stat block records are invalid.

    """
    items = list(side or [])
    if items and all(isinstance(item, Combatant) for item in items):
        return clone_roster(items)
    return expand_team(items)


class CombatSimulator:
    """Runs one battle between a player roster and a monster roster.

    The simulator owns copies of both rosters. Each call to step() fights one
    round and records its snapshot until the outcome becomes terminal.
    """

    def __init__(
        self,
        players: Iterable[Any] | None,
        monsters: Iterable[Any] | None,
        rng: RandomSource | None = None,
        max_rounds: int | None = None,
        settings: SimulationSettings | None = None,
    ) -> None:
        """Initialize the simulator with both sides and its random source.

        Args:
            players (Iterable[Any] | None): Player stat blocks or combatants.
            monsters (Iterable[Any] | None): Monster stat blocks or combatants.
            rng (RandomSource | None): The source of attack rolls. Defaults to
                a new source seeded from the settings.
            max_rounds (int | None): Round cap, overriding the settings.
            settings (SimulationSettings | None): Run parameters.

        """
        self.settings: SimulationSettings = (settings or SimulationSettings()).merged(
            max_rounds=max_rounds
        )
        self.rng: RandomSource = rng if rng is not None else make_rng(self.settings.seed)
        self.players: Roster = to_roster(players)
        self.monsters: Roster = to_roster(monsters)
        self.rounds: list[RoundSnapshot] = []
        self.outcome: SimulationOutcome = SimulationOutcome.RUNNING
        self.initialize()

    @property
    def max_rounds(self) -> int:
        return self.settings.max_rounds

    def initialize(self) -> None:
        """Checks both sides can fight before any attack is rolled."""
        if not count_alive(self.players) or not count_alive(self.monsters):
            logger.info(
                f"Nobody to fight: {count_alive(self.players)} players and "
                f"{count_alive(self.monsters)} monsters standing"
            )
            self.outcome = SimulationOutcome.NOT_FOUGHT
            return
        # Fail on an unknown strategy now rather than halfway through a round.
        # A group without any strategy passes its turns, reported once.
        passive: list[str] = []
        for combatant in self.players + self.monsters:
            if not combatant.alive:
                continue
            if combatant.target is None:
                if combatant.stats.name not in passive:
                    passive.append(combatant.stats.name)
                continue
            get_target_selector(combatant.target)
        for name in passive:
            log_warning(
                f"{name} has no targeting strategy and will not attack",
                {"group": name, "context": "simulation_initialize"},
            )

    def get_alive_players(self) -> Roster:
        return [c for c in self.players if c.alive]

    def get_alive_monsters(self) -> Roster:
        return [c for c in self.monsters if c.alive]

    def is_combat_over(self) -> bool:
        return self.outcome.is_terminal

    def _next_outcome(self) -> SimulationOutcome:
        if not self.get_alive_players():
            return SimulationOutcome.PLAYERS_WIPED
        if not self.get_alive_monsters():
            return SimulationOutcome.MONSTERS_WIPED
        if len(self.rounds) >= self.max_rounds:
            return SimulationOutcome.STALEMATE_ROUND_CAP
        return SimulationOutcome.RUNNING

    def step(self) -> RoundSnapshot | None:
        """
        Fights one round, unless the battle is already over.

        Returns:
            RoundSnapshot | None: The snapshot of the round, or None if no
            round was fought.

        """
        if self.is_combat_over():
            return None
        snapshot = run_round(
            self.players,
            self.monsters,
            self.rng,
            round_number=len(self.rounds) + 1,
        )
        self.rounds.append(snapshot)
        self.outcome = self._next_outcome()
        return snapshot

    def run(self) -> SimulationResult:
        """
        Fights rounds until the outcome is terminal.

        Returns:
            SimulationResult: Every round fought and the final outcome.

        """
        while not self.is_combat_over():
            self.step()
        logger.info(
            f"Battle ended after {len(self.rounds)} rounds: {self.outcome.display_name}"
        )
        return SimulationResult(rounds=list(self.rounds), outcome=self.outcome)


def run_simulation(
    players: Iterable[Any] | None,
    monsters: Iterable[Any] | None,
    rng: RandomSource | None = None,
    max_rounds: int | None = None,
    settings: SimulationSettings | None = None,
) -> SimulationResult:
    """
    Simulates a whole battle.

    Args:
        players (Iterable[Any] | None): Player stat blocks, records, or the
            combatants carried over from a previous encounter.
        monsters (Iterable[Any] | None): Monster stat blocks or records.
        rng (RandomSource | None): The source of attack rolls.
        max_rounds (int | None): Round cap, overriding the settings.
        settings (SimulationSettings | None): Run parameters.

    Returns:
        SimulationResult: The round history and the outcome. When either side
        starts with nobody standing, there are no rounds and the outcome is
        NOT_FOUGHT.

    Raises:
        InvalidRosterError: If a stat block is invalid.
        UnknownTargetingStrategyError: If a combatant able to act uses an
            unsupported strategy.

    """
    return CombatSimulator(
        players,
        monsters,
        rng=rng,
        max_rounds=max_rounds,
        settings=settings,
    ).run()
