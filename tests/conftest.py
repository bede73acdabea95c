"""
Shared fixtures for the simulator tests.
"""

import pytest


@pytest.fixture
def pc_record():
    return {
        "name": "PC",
        "count": 5,
        "hp": 30,
        "dpr": 10,
        "toHit": 6,
        "AC": 15,
        "target": "enemy with highest DPR",
    }


@pytest.fixture
def boss_record():
    return {
        "name": "Boss",
        "count": 1,
        "hp": 80,
        "dpr": 15,
        "toHit": 8,
        "AC": 16,
        "target": "enemy with most HP",
    }


@pytest.fixture
def minion_record():
    return {
        "name": "Minion",
        "count": 6,
        "hp": 10,
        "dpr": 5,
        "toHit": 4,
        "AC": 13,
        "target": "enemy with most HP",
    }


@pytest.fixture
def fixed_rolls(mocker):
    """Builds a random source whose d20 always shows the same face."""

    def _make(face: int):
        rng = mocker.Mock()
        rng.randint.return_value = face
        return rng

    return _make


@pytest.fixture
def scripted_rolls(mocker):
    """Builds a random source returning the given d20 faces in order."""

    def _make(*faces: int):
        rng = mocker.Mock()
        rng.randint.side_effect = list(faces)
        return rng

    return _make
