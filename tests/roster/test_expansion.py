"""
Tests for combatant expansion and the combatant model.
"""

import pytest

from battlesim.roster.combatant import Combatant
from battlesim.roster.expansion import (
    clone_roster,
    count_alive,
    expand_team,
    hit_points,
)
from battlesim.roster.stat_block import parse_stat_block


@pytest.fixture
def goblin():
    return parse_stat_block(
        {"name": "Goblin", "count": 1, "hp": 7, "dpr": 4, "toHit": 4, "AC": 15}
    )


@pytest.mark.parametrize("hp, dpr", [(1, 0), (7, 4), (80, 15), (200, 2.5)])
def test_empty_group_yields_no_combatants(hp, dpr):
    team = [{"name": "Nobody", "count": 0, "hp": hp, "dpr": dpr, "toHit": 0, "AC": 10}]
    assert expand_team(team) == []


def test_empty_group_is_skipped_among_others(boss_record, minion_record):
    minion_record["count"] = 0
    roster = expand_team([minion_record, boss_record])
    assert [c.name for c in roster] == ["Boss"]


def test_expansion_order_is_group_then_instance(boss_record, minion_record):
    minion_record["count"] = 3
    roster = expand_team([minion_record, boss_record])
    assert [c.name for c in roster] == [
        "Minion (1)",
        "Minion (2)",
        "Minion (3)",
        "Boss",
    ]
    assert [c.index for c in roster] == [1, 2, 3, 1]


def test_expanded_combatants_start_at_full_hp(pc_record):
    roster = expand_team([pc_record])
    assert len(roster) == 5
    assert hit_points(roster) == [30] * 5
    assert count_alive(roster) == 5


def test_expansion_is_idempotent(pc_record, minion_record):
    team = [pc_record, minion_record]
    first = expand_team(team)
    second = expand_team(team)
    assert hit_points(first) == hit_points(second)
    assert first == second
    assert all(a is not b for a, b in zip(first, second))


def test_individuals_are_independently_mutable(minion_record):
    roster = expand_team([minion_record])
    roster[0].take_damage(4)
    assert hit_points(roster) == [6, 10, 10, 10, 10, 10]
    # The shared group definition is not touched.
    assert roster[0].stats.hp == 10
    assert roster[0].stats.count == 6


def test_expansion_does_not_mutate_the_team(minion_record):
    team = [parse_stat_block(minion_record)]
    roster = expand_team(team)
    roster[0].take_damage(10)
    assert team[0].count == 6
    assert team[0].hp == 10


def test_take_damage_clamps_at_zero(goblin):
    combatant = Combatant(stats=goblin, hp=7)
    assert combatant.take_damage(20) == 7
    assert combatant.hp == 0
    assert combatant.is_dead()
    assert not combatant.alive


def test_take_damage_ignores_negative_amounts(goblin):
    combatant = Combatant(stats=goblin, hp=7)
    assert combatant.take_damage(-3) == 0
    assert combatant.hp == 7


def test_single_member_group_has_plain_name(goblin):
    combatant = expand_team([goblin])[0]
    assert combatant.name == "Goblin"
    assert str(combatant) == "Goblin (7/7)"


def test_combatant_exposes_group_statistics(goblin):
    combatant = Combatant(stats=goblin, hp=5)
    assert combatant.max_hp == 7
    assert combatant.dpr == 4
    assert combatant.to_hit == 4
    assert combatant.ac == 15
    assert combatant.target is None


def test_combatant_record_round_trip(goblin):
    combatant = Combatant(stats=goblin, hp=3)
    record = combatant.to_record()
    assert record["currentHp"] == 3
    assert record["stats"]["AC"] == 15
    restored = Combatant.model_validate(record)
    assert restored.hp == 3
    assert restored.stats.model_dump() == goblin.model_dump()


def test_current_hp_cannot_exceed_maximum(goblin):
    with pytest.raises(ValueError):
        Combatant(stats=goblin, hp=8)


def test_clone_roster_is_independent(minion_record):
    roster = expand_team([minion_record])
    copy = clone_roster(roster)
    copy[0].take_damage(10)
    assert roster[0].hp == 10
    assert copy[0].hp == 0


def test_status_line_of_dead_combatant(goblin):
    combatant = Combatant(stats=goblin, hp=0)
    assert "💀" in combatant.get_status_line()
