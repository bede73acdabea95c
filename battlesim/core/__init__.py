"""
Core system module for the Battle Sim encounter simulator.

This module contains the fundamental components shared by the rest of the
simulator: constants and enumerations, the error hierarchy, configuration,
the injectable dice, logging setup, and console helpers.
"""

from .config import (
    SimulationSettings,
    load_settings,
)
from .constants import (
    D20,
    DEFAULT_MAX_ROUNDS,
    Side,
    SimulationOutcome,
    TargetingStrategy,
)
from .dice import (
    AttackRoll,
    RandomSource,
    make_rng,
    roll_attack,
    roll_d20,
)
from .errors import (
    InvalidRosterError,
    ScenarioError,
    SimulationError,
    UnknownTargetingStrategyError,
)
from .logging import (
    get_logger,
    setup_logging,
)
from .utils import (
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Import from config.py
    "SimulationSettings",
    "load_settings",
    # Import from constants.py
    "D20",
    "DEFAULT_MAX_ROUNDS",
    "Side",
    "SimulationOutcome",
    "TargetingStrategy",
    # Import from dice.py
    "AttackRoll",
    "RandomSource",
    "make_rng",
    "roll_attack",
    "roll_d20",
    # Import from errors.py
    "InvalidRosterError",
    "ScenarioError",
    "SimulationError",
    "UnknownTargetingStrategyError",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "cprint",
    "crule",
    "make_bar",
]
