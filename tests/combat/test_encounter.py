"""
Tests for encounter chaining.
"""

import pytest

from battlesim.combat.encounter import Encounter, run_encounters
from battlesim.core.config import SimulationSettings
from battlesim.core.constants import SimulationOutcome
from battlesim.core.dice import make_rng
from battlesim.roster.expansion import hit_points
from battlesim.roster.stat_block import parse_team


@pytest.fixture
def party():
    # Three harmless characters who always miss.
    return [
        {
            "name": "PC",
            "count": 3,
            "hp": 10,
            "dpr": 0,
            "toHit": -99,
            "AC": 10,
            "target": "enemy with most HP",
        }
    ]


def brute(name: str, dpr: int) -> dict:
    return {
        "name": name,
        "count": 1,
        "hp": 100,
        "dpr": dpr,
        "toHit": 99,
        "AC": 10,
        "target": "enemy with most HP",
    }


@pytest.fixture
def wounding_monsters():
    # Each brute hits the healthiest player still standing: 10,10,10 -> 7,0,3.
    return [brute("Brute A", 3), brute("Brute B", 10), brute("Brute C", 7)]


@pytest.fixture
def one_round():
    return SimulationSettings(max_rounds=1)


def test_survivors_enter_the_next_encounter(party, wounding_monsters, one_round):
    encounters = run_encounters(
        party,
        [wounding_monsters, [brute("Harmless", 0)]],
        rng=make_rng(0),
        settings=one_round,
    )

    first, second = encounters
    assert hit_points(first.simulation_results[-1].players) == [7, 0, 3]
    assert hit_points(second.players) == [7, 0, 3]
    assert [c.alive for c in second.players] == [True, False, True]
    assert hit_points(second.simulation_results[-1].players) == [7, 0, 3]


def test_first_encounter_starts_from_the_full_team(party, wounding_monsters, one_round):
    encounters = run_encounters(party, [wounding_monsters], rng=make_rng(0), settings=one_round)
    assert hit_points(encounters[0].players) == [10, 10, 10]


def test_encounter_without_rounds_passes_players_through(party, wounding_monsters, one_round):
    encounters = run_encounters(
        party,
        [wounding_monsters, [], [brute("Harmless", 0)]],
        rng=make_rng(0),
        settings=one_round,
    )
    assert encounters[1].outcome == SimulationOutcome.NOT_FOUGHT
    assert encounters[1].simulation_results == []
    assert hit_points(encounters[2].players) == [7, 0, 3]


def test_hand_off_does_not_alias_history(party, wounding_monsters, one_round):
    first, second = run_encounters(
        party,
        [wounding_monsters, [brute("Harmless", 0)]],
        rng=make_rng(0),
        settings=one_round,
    )
    second.players[0].take_damage(7)
    assert hit_points(first.simulation_results[-1].players) == [7, 0, 3]


def test_monsters_do_not_carry_over(party, wounding_monsters, one_round):
    harmless = [brute("Harmless", 0)]
    encounters = run_encounters(
        party, [wounding_monsters, harmless], rng=make_rng(0), settings=one_round
    )
    assert encounters[1].monsters == parse_team(harmless)
    assert hit_points(encounters[1].simulation_results[0].monsters) == [100]


def test_accepts_records_and_encounter_objects(party, wounding_monsters, one_round):
    previous = Encounter(monsters=parse_team(wounding_monsters))
    encounters = run_encounters(
        party,
        [previous, {"monsters": [brute("Harmless", 0)]}],
        rng=make_rng(0),
        settings=one_round,
    )
    assert hit_points(encounters[1].players) == [7, 0, 3]
    # The encounter given as input is left alone.
    assert previous.simulation_results == []
    assert previous.outcome is None


def test_recomputation_is_deterministic(pc_record, boss_record, minion_record):
    definitions = [[boss_record, minion_record], [minion_record]]
    first = run_encounters([pc_record], definitions, settings=SimulationSettings(seed=3))
    second = run_encounters([pc_record], definitions, settings=SimulationSettings(seed=3))
    assert [e.model_dump_json() for e in first] == [e.model_dump_json() for e in second]


def test_no_encounters(party):
    assert run_encounters(party, []) == []


def test_encounter_serialises_with_results_key(party, wounding_monsters, one_round):
    encounter = run_encounters(party, [wounding_monsters], rng=make_rng(0), settings=one_round)[0]
    record = encounter.model_dump(by_alias=True)
    assert "simulationResults" in record
    assert record["monsters"][0]["toHit"] == 99
    restored = Encounter.model_validate(record)
    assert hit_points(restored.final_players()) == [7, 0, 3]
