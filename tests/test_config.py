"""
Tests for simulation settings.
"""

import json

import pytest

from battlesim.core.config import SimulationSettings, load_settings
from battlesim.core.constants import DEFAULT_MAX_ROUNDS
from battlesim.core.errors import ScenarioError


def test_defaults():
    settings = load_settings()
    assert settings.max_rounds == DEFAULT_MAX_ROUNDS
    assert settings.seed is None
    assert settings.verbose == 0


def test_load_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"max_rounds": 50, "seed": 12}), encoding="utf-8")
    settings = load_settings(path)
    assert settings.max_rounds == 50
    assert settings.seed == 12


@pytest.mark.parametrize(
    "content",
    ["[1, 2]", "{\"max_rounds\": 0}", "{\"verbose\": 5}", "not json"],
)
def test_invalid_file(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ScenarioError):
        load_settings(path)


def test_missing_file(tmp_path):
    with pytest.raises(ScenarioError):
        load_settings(tmp_path / "missing.json")


def test_merged_ignores_none():
    settings = SimulationSettings(max_rounds=10, seed=4)
    merged = settings.merged(max_rounds=None, seed=9)
    assert merged.max_rounds == 10
    assert merged.seed == 9
    # The original is untouched.
    assert settings.seed == 4


def test_merged_validates():
    with pytest.raises(ScenarioError):
        SimulationSettings().merged(max_rounds=-1)
