"""
Configuration module for the simulator.

Settings come from defaults in constants.py, optionally overridden by a JSON
settings file, then by command-line flags.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from battlesim.core.constants import DEFAULT_MAX_ROUNDS, GLOBAL_VERBOSE_LEVEL
from battlesim.core.errors import ScenarioError


class SimulationSettings(BaseModel):
    """Tunable parameters of a simulation run."""

    max_rounds: int = Field(
        default=DEFAULT_MAX_ROUNDS,
        gt=0,
        description="Rounds after which the battle is declared a stalemate",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the attack rolls, None for unpredictable rolls",
    )
    verbose: int = Field(
        default=GLOBAL_VERBOSE_LEVEL,
        ge=0,
        le=2,
        description="Amount of detail printed by the command-line report",
    )

    def merged(self, **overrides: Any) -> "SimulationSettings":
        """
        Returns a copy with the given values replaced, ignoring None values.

        Args:
            **overrides: Field values to replace.

        Returns:
            SimulationSettings: The validated copy.

        Raises:
            ScenarioError: If a value is out of range.

        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return SimulationSettings.model_validate(data)
        except ValidationError as e:
            raise ScenarioError(f"Invalid settings: {e}") from e


def load_settings(path: Path | None = None) -> SimulationSettings:
    """
    Loads settings from a JSON object file.

    Args:
        path (Path | None): The file to read, or None for the defaults.

    Returns:
        SimulationSettings: The loaded settings.

    Raises:
        ScenarioError: If the file is missing or invalid.

    """
    if path is None:
        return SimulationSettings()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object in {path}, got {type(data).__name__}")
        return SimulationSettings.model_validate(data)
    except (OSError, ValueError) as e:
        raise ScenarioError(f"Settings file {path} raised an error: {e}") from e
