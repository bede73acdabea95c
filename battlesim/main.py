"""
Main entry point for the Battle Sim encounter simulator.

Loads a scenario (a player team and a chain of monster encounters), simulates
every encounter in order with the survivors of one encounter entering the
next, and prints the result round by round.

Without a scenario file the bundled example is used: five player characters
against a boss and six minions.
"""

import argparse
import sys
from pathlib import Path

from catchery import log_critical

from battlesim.combat.encounter import run_encounters
from battlesim.core.config import load_settings
from battlesim.core.errors import SimulationError
from battlesim.core.logging import setup_logging, verbosity_to_level
from battlesim.core.utils import cprint, crule
from battlesim.persistence import load_default_scenario, load_scenario, save_scenario
from battlesim.ui.report import print_encounter, print_summary, team_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battlesim",
        description="Predict the outcome of a chain of encounters.",
    )
    parser.add_argument(
        "scenario",
        nargs="?",
        type=Path,
        default=None,
        help="Scenario JSON file (defaults to the bundled example)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic rolls")
    parser.add_argument("--max-rounds", type=int, default=None, help="Round cap per encounter")
    parser.add_argument("--settings", type=Path, default=None, help="Settings JSON file")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=None,
        help="Show every round (-v) and every attack (-vv)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Only print the outcome of each encounter",
    )
    parser.add_argument(
        "--save",
        type=Path,
        default=None,
        help="Write the normalised scenario to this file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Runs the command-line simulator.

    Args:
        argv (list[str] | None): Arguments, defaults to sys.argv.

    Returns:
        int: The process exit status.

    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.settings).merged(
            seed=args.seed,
            max_rounds=args.max_rounds,
            verbose=min(args.verbose, 2) if args.verbose is not None else None,
        )
        setup_logging(verbosity_to_level(settings.verbose))

        scenario = load_scenario(args.scenario) if args.scenario else load_default_scenario()
        encounters = run_encounters(scenario.players, scenario.encounters, settings=settings)

        if args.summary:
            print_summary(scenario.players, encounters)
        else:
            crule("Encounter Simulator", style="bold green")
            cprint(team_table(scenario.players, "Players"))
            for index, encounter in enumerate(encounters, 1):
                print_encounter(encounter, index, verbose=settings.verbose)

        if args.save:
            save_scenario(args.save, scenario.players, scenario.encounters)
            cprint(f"Scenario saved to {args.save}", style="bold green")
    except SimulationError as e:
        log_critical(str(e), {"scenario": str(args.scenario), "error": type(e).__name__})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
