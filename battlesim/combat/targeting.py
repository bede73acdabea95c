"""
Targeting module for the simulator.

Each targeting strategy is a total ordering over the living opponents with a
first-in-roster-order tie-break. Targets are chosen again every time a
combatant acts, because the set of living opponents changes during a round.
"""

from collections.abc import Callable, Iterable, Sequence

from battlesim.core.constants import TargetingStrategy
from battlesim.core.errors import UnknownTargetingStrategyError
from battlesim.roster.combatant import Combatant

# Receives the living opponents (never empty) and returns the one to attack.
TargetSelector = Callable[[Sequence[Combatant]], Combatant]


def _highest_dpr(candidates: Sequence[Combatant]) -> Combatant:
    # max() keeps the first of equal elements.
    return max(candidates, key=lambda c: c.dpr)


def _most_hp(candidates: Sequence[Combatant]) -> Combatant:
    return max(candidates, key=lambda c: c.hp)


def _least_hp(candidates: Sequence[Combatant]) -> Combatant:
    return min(candidates, key=lambda c: c.hp)


TARGET_SELECTORS: dict[TargetingStrategy, TargetSelector] = {
    TargetingStrategy.HIGHEST_DPR: _highest_dpr,
    TargetingStrategy.MOST_HP: _most_hp,
    TargetingStrategy.LEAST_HP: _least_hp,
}


def get_target_selector(strategy: str | TargetingStrategy | None) -> TargetSelector:
    """
    Returns the selector implementing a strategy.

    Args:
        strategy (str | TargetingStrategy | None): The strategy or its label.

    Returns:
        TargetSelector: The selector function.

    Raises:
        UnknownTargetingStrategyError: If the strategy is not supported.

    """
    parsed = TargetingStrategy.parse(strategy)
    selector = TARGET_SELECTORS.get(parsed)
    if selector is None:
        raise UnknownTargetingStrategyError(strategy)
    return selector


def get_alive_opponents(opponents: Iterable[Combatant]) -> list[Combatant]:
    """Returns the opponents still standing, in roster order."""
    return [opponent for opponent in opponents if opponent.alive]


def choose_target(
    strategy: str | TargetingStrategy | None,
    opponents: Iterable[Combatant],
) -> Combatant | None:
    """
    Picks the opponent to attack.

    Args:
        strategy (str | TargetingStrategy | None): The attacker's strategy.
        opponents (Iterable[Combatant]): The whole opposing roster, dead included.

    Returns:
        Combatant | None: The living opponent to attack, or None when every
        opponent is dead.

    Raises:
        UnknownTargetingStrategyError: If the strategy is not supported, even
        when there is nobody left to target.

    """
    selector = get_target_selector(strategy)
    candidates = get_alive_opponents(opponents)
    if not candidates:
        return None
    return selector(candidates)
