"""
Scenario persistence for the simulator.

A scenario is what a user edits: the player team and the monsters of each
encounter. Simulation results are never stored, they are recomputed from the
scenario. On disk a scenario is a JSON object:

    {
        "players": [{"name": "PC", "count": 5, "hp": 30, ...}],
        "encounters": [{"monsters": [{"name": "Boss", ...}]}]
    }
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, Field

from battlesim.combat.encounter import Encounter
from battlesim.core.errors import InvalidRosterError, ScenarioError
from battlesim.roster.stat_block import Team, parse_team

DEFAULT_SCENARIO = "default_scenario.json"


class Scenario(BaseModel):
    """The player team and the monster groups of every encounter."""

    players: Team = Field(
        default_factory=list,
        description="The player stat blocks",
    )
    encounters: list[Team] = Field(
        default_factory=list,
        description="The monster stat blocks of each encounter, in order",
    )


def scenario_from_dict(data: Any) -> Scenario:
    """
    Validates a scenario record.

    Args:
        data (Any): The decoded JSON object.

    Returns:
        Scenario: The validated scenario.

    Raises:
        ScenarioError: If the record does not have the scenario shape.
        InvalidRosterError: If a stat block is invalid.

    """
    if not isinstance(data, dict):
        raise ScenarioError(f"Expected a scenario object, got {type(data).__name__}")
    encounters = data.get("encounters") or []
    if not isinstance(encounters, list):
        raise ScenarioError("'encounters' must be a list")
    monsters: list[Team] = []
    for index, encounter in enumerate(encounters, 1):
        if not isinstance(encounter, dict):
            raise ScenarioError(f"Encounter {index} must be an object")
        try:
            monsters.append(parse_team(encounter.get("monsters")))
        except InvalidRosterError as e:
            raise InvalidRosterError(f"Encounter {index}: {e}", e.record) from e
    return Scenario(players=parse_team(data.get("players")), encounters=monsters)


def scenario_to_dict(
    team: Iterable[Any],
    encounters: Iterable[Any],
) -> dict[str, Any]:
    """
    Builds the record stored on disk.

    Args:
        team (Iterable[Any]): The player stat blocks or records.
        encounters (Iterable[Any]): Encounter objects or monster lists.

    Returns:
        dict[str, Any]: The JSON-ready record, without simulation results.

    """
    encounter_records = []
    for encounter in encounters:
        monsters = encounter.monsters if isinstance(encounter, Encounter) else encounter
        encounter_records.append(
            {"monsters": [stats.to_record() for stats in parse_team(monsters)]}
        )
    return {
        "players": [stats.to_record() for stats in parse_team(team)],
        "encounters": encounter_records,
    }


def load_scenario(path: Path | str) -> Scenario:
    """
    Reads a scenario file.

    Args:
        path (Path | str): The JSON file to read.

    Returns:
        Scenario: The validated scenario.

    Raises:
        ScenarioError: If the file cannot be read or decoded.
        InvalidRosterError: If a stat block is invalid.

    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ScenarioError(f"File {path} raised an error: {e}") from e
    return scenario_from_dict(data)


def load_default_scenario() -> Scenario:
    """Returns the example scenario bundled with the package."""
    text = resources.files("battlesim.data").joinpath(DEFAULT_SCENARIO).read_text(
        encoding="utf-8"
    )
    return scenario_from_dict(json.loads(text))


def save_scenario(
    path: Path | str,
    team: Iterable[Any],
    encounters: Iterable[Any],
) -> None:
    """
    Writes a scenario file.

    Args:
        path (Path | str): The JSON file to write.
        team (Iterable[Any]): The player stat blocks or records.
        encounters (Iterable[Any]): Encounter objects or monster lists.

    Raises:
        ScenarioError: If the file cannot be written.

    """
    record = scenario_to_dict(team, encounters)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2)
            f.write("\n")
    except OSError as e:
        raise ScenarioError(f"Could not write {path}: {e}") from e
