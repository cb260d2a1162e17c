"""Tests for scenario loading via ScenarioLoader."""

import json
from pathlib import Path

import pytest

from guildsim.catalog import (
    AgentClass,
    AgentLevel,
    DifficultyLevel,
    FacilityRating,
    FacilityType,
    GuildTier,
    MissionStatus,
    Race,
    StaffRole,
)
from guildsim.sampling import make_rng
from guildsim.scenario import ScenarioLoader

SCENARIOS_DIR = Path(__file__).resolve().parent.parent / "examples" / "scenarios"


def test_starter_guild_scenario():
    loader = ScenarioLoader(scenarios_dir=SCENARIOS_DIR)
    state = loader.load("starter_guild", make_rng(42))
    guild = state.guild

    assert state.campaign_name == "Starter Guild"
    assert state.difficulty is DifficultyLevel.NORMAL
    assert guild.name == "The Iron Lanterns"
    assert guild.tier is GuildTier.FLEDGLING
    assert guild.finances.treasury == 5000
    assert guild.facilities[FacilityType.TRAINING_GROUNDS].rating is FacilityRating.POOR
    assert [member.role for member in guild.staff] == [
        StaffRole.COMBAT_INSTRUCTOR,
        StaffRole.HEALER_ON_RETAINER,
        StaffRole.QUARTERMASTER,
    ]
    assert len(guild.council.patrons) == 5

    roster = state.roster_agents()
    assert len(roster) == 6
    veteran = roster[0]
    assert veteran.level is AgentLevel.JOURNEYMAN
    assert veteran.race is Race.DWARF
    assert veteran.agent_class is AgentClass.FIGHTER
    assert roster[3].agent_class is AgentClass.ROGUE
    assert all(agent.hired_week == 0 for agent in roster)

    assert len(state.free_agents) == 30
    assert len(state.missions_with_status(MissionStatus.AVAILABLE)) == 8
    assert len(guild.ledger) == 0


def test_debt_crisis_scenario():
    state = ScenarioLoader(SCENARIOS_DIR).load("debt_crisis", make_rng(1))
    assert state.guild.finances.in_debt
    assert state.settings.permadeath
    assert state.difficulty is DifficultyLevel.HARD
    assert len(state.guild.roster) == 4


def test_available_lists_scenarios():
    assert {"starter_guild", "debt_crisis"} <= set(ScenarioLoader(SCENARIOS_DIR).available())


def test_same_seed_same_start():
    loader = ScenarioLoader(SCENARIOS_DIR)
    assert loader.load("starter_guild", make_rng(5)) == loader.load("starter_guild", make_rng(5))


def test_missing_scenario_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ScenarioLoader(tmp_path).load("nowhere", make_rng(0))


@pytest.mark.parametrize(
    "data",
    [
        {"guild": {"name": "Nameless"}},
        {"name": "No Guild"},
        {"name": "Bad Guild", "guild": {"motto": "no name"}},
        {"name": "Bad Race", "guild": {"name": "G"}, "roster": [{"race": "gnome"}]},
        {"name": "Bad Rating", "guild": {"name": "G", "facilities": {"tavern": 9}}},
        {"name": "Bad Tier", "guild": {"name": "G", "tier": "mythic"}},
        {"name": "Negative", "guild": {"name": "G"}, "missions": -1},
        {"name": "Roster", "guild": {"name": "G"}, "roster": {"level": "adept"}},
    ],
)
def test_malformed_scenarios_raise_value_error(tmp_path, data):
    (tmp_path / "broken.json").write_text(json.dumps(data))
    with pytest.raises(ValueError):
        ScenarioLoader(tmp_path).load("broken", make_rng(0))


def test_invalid_json_raises(tmp_path):
    (tmp_path / "garbled.json").write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        ScenarioLoader(tmp_path).load("garbled", make_rng(0))
