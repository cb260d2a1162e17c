"""Tests for experience, level-ups and wages."""

import random

from guildsim.catalog import AgentClass, AgentCondition, AgentLevel, AttributeType, MissionOutcome
from guildsim.progression import (
    award_experience,
    award_mission_experience,
    calculate_wage,
    mission_experience_share,
)

from factories import make_agent


def test_below_threshold_is_no_level_up():
    agent = make_agent("alpha", level=AgentLevel.APPRENTICE)
    agent.current_experience = 99

    assert award_experience(0, agent, random.Random(1)) is None
    assert agent.current_experience == 99
    assert agent.level is AgentLevel.APPRENTICE


def test_crossing_threshold_carries_remainder():
    agent = make_agent("alpha", level=AgentLevel.APPRENTICE)
    agent.current_experience = 99

    result = award_experience(50, agent, random.Random(1))

    assert result is not None
    assert result.previous_level is AgentLevel.APPRENTICE
    assert result.new_level is AgentLevel.JOURNEYMAN
    assert agent.level is AgentLevel.JOURNEYMAN
    assert agent.current_experience == 49
    assert agent.lifetime_experience == 50


def test_large_award_chains_level_ups():
    agent = make_agent("alpha", level=AgentLevel.APPRENTICE)

    result = award_experience(100 + 180 + 10, agent, random.Random(2))

    assert result.new_level is AgentLevel.ADEPT
    assert result.levels_gained == 2
    assert agent.current_experience == 10


def test_level_up_raises_wage_and_attributes():
    agent = make_agent("alpha", level=AgentLevel.APPRENTICE, wage=5, agent_class=AgentClass.WIZARD)
    before = dict(agent.attributes.scores)

    result = award_experience(100, agent, random.Random(3))

    assert result.wage_increase > 0
    assert agent.weekly_wage == calculate_wage(agent)
    gained = [attr for attr in AttributeType if agent.attributes[attr] > before[attr]]
    assert 2 <= len(gained) <= 4
    assert any(attr in AgentClass.WIZARD.primary_attributes for attr in gained)
    assert sum(result.attribute_gains.values()) == len(gained)


def test_attribute_gains_respect_cap():
    agent = make_agent("alpha", level=AgentLevel.APPRENTICE, score=20)
    result = award_experience(100, agent, random.Random(4))

    assert result.attribute_gains == {}
    assert all(score == 20 for score in agent.attributes.scores.values())


def test_terminal_level_keeps_accumulating():
    agent = make_agent("alpha", level=AgentLevel.LEGENDARY)
    assert award_experience(50_000, agent, random.Random(5)) is None
    assert agent.level is AgentLevel.LEGENDARY
    assert agent.current_experience == 50_000


def test_wage_grows_with_level():
    agent = make_agent("alpha", level=AgentLevel.APPRENTICE)
    wages = []
    rng = random.Random(6)
    while agent.level.next_level is not None:
        wages.append(calculate_wage(agent))
        award_experience(agent.level.experience_threshold, agent, rng)
    wages.append(calculate_wage(agent))

    assert wages == sorted(wages)
    assert len(set(wages)) == len(wages)


def test_mission_experience_share():
    assert mission_experience_share(MissionOutcome.SUCCESS, 30, 20) == 30
    assert mission_experience_share(MissionOutcome.FAILURE, 0, 20) == 4
    assert mission_experience_share(MissionOutcome.CATASTROPHIC_FAILURE, 0, 20) == 2


def test_award_mission_experience_skips_the_dead():
    living = make_agent("alpha", level=AgentLevel.APPRENTICE)
    fallen = make_agent("beta", level=AgentLevel.APPRENTICE)
    fallen.condition = AgentCondition.DECEASED

    results = award_mission_experience([living, fallen], 100, random.Random(7))

    assert [r.agent_id for r in results] == ["alpha"]
    assert fallen.current_experience == 0
