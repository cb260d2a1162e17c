"""Tests for the mission board, status machine and result application."""

import random

from guildsim.catalog import (
    AgentCondition,
    AgentLevel,
    GuildTier,
    InjurySeverity,
    InjuryType,
    MissionOutcome,
    MissionStakes,
    MissionStatus,
    STAKES_DURATION_WEEKS,
)
from guildsim.ledger import TransactionCategory
from guildsim.missions import (
    accept_mission,
    apply_mission_result,
    commit_mission,
    generate_mission,
    generate_missions,
    missions_due,
    post_mission,
    refresh_mission_board,
    unlock_mission,
)
from guildsim.results import FailureReason
from guildsim.schemas import EventType, Injury, SimulationResult

from factories import add_mission, make_agent, make_mission, make_state


def make_roster(count: int = 6, **kwargs):
    return [make_agent(f"agent-{i}", **kwargs) for i in range(count)]


def party_ids(count: int = 4):
    return [f"agent-{i}" for i in range(count)]


def make_result(mission, outcome, *, gold=400, experience=100, injuries=None, deaths=None):
    return SimulationResult(
        mission_id=mission.mission_id,
        outcome=outcome,
        success_chance=0.6,
        roll=0.5,
        party_power=48.0,
        difficulty=50.0,
        gold_reward=gold,
        experience_reward=experience,
        injuries=injuries or {},
        deaths=deaths or [],
        performance_ratings={agent_id: 7.0 for agent_id in mission.party},
        summary=f"{mission.name}: {outcome.value}",
    )


# ============================================================================
# Board generation
# ============================================================================


def test_generated_missions_fit_their_tables():
    rng = random.Random(10)
    missions = generate_missions(GuildTier.FLEDGLING, 200, rng)

    assert len({mission.mission_id for mission in missions}) == 200
    for mission in missions:
        assert mission.stakes is not MissionStakes.CRITICAL
        assert mission.status is MissionStatus.AVAILABLE
        assert (mission.min_party_size, mission.max_party_size) == mission.mission_type.party_size_range
        low, high = STAKES_DURATION_WEEKS[mission.stakes]
        assert low <= mission.duration_weeks <= high
        assert mission.base_gold_reward >= 10
        assert mission.base_experience_reward == mission.base_gold_reward // 10
        assert mission.recommended_level is mission.stakes.recommended_level


def test_generate_mission_is_reproducible():
    assert generate_mission(GuildTier.ELITE, random.Random(3)) == generate_mission(
        GuildTier.ELITE, random.Random(3)
    )


def test_refresh_keeps_oldest_available_and_fills_board():
    state = make_state(make_roster())
    rng = random.Random(4)
    for mission in generate_missions(GuildTier.FLEDGLING, 6, rng):
        add_mission(state, mission)
    busy = add_mission(state, make_mission("busy", status=MissionStatus.IN_PROGRESS))
    oldest = [m.mission_id for m in state.missions_with_status(MissionStatus.AVAILABLE)][:4]

    fresh = refresh_mission_board(state, rng)

    available = [m.mission_id for m in state.missions_with_status(MissionStatus.AVAILABLE)]
    assert len(fresh) == 4
    assert len(available) == 8
    assert available[:4] == oldest
    assert state.missions["busy"] is busy
    assert state.events_of_type(EventType.BOARD_REFRESHED)


# ============================================================================
# Posting and unlocking
# ============================================================================


def test_missions_above_the_guild_tier_are_posted_locked():
    state = make_state(make_roster())
    state.total_weeks = 3
    mission = post_mission(state, make_mission(required_tier=GuildTier.RISING))

    assert mission.status is MissionStatus.LOCKED
    assert mission.posted_week == 3
    assert state.missions[mission.mission_id] is mission
    assert state.events_of_type(EventType.MISSION_POSTED)

    result = accept_mission(state, mission.mission_id, party_ids())
    assert result.reason is FailureReason.MISSION_NOT_AVAILABLE


def test_missions_within_the_guild_tier_are_posted_available():
    state = make_state()
    mission = post_mission(state, make_mission())

    assert mission.status is MissionStatus.AVAILABLE


def test_unlock_mission_waits_for_the_guild_tier():
    state = make_state(make_roster())
    mission = post_mission(state, make_mission(required_tier=GuildTier.RISING))

    result = unlock_mission(state, mission.mission_id)
    assert result.reason is FailureReason.TIER_TOO_LOW
    assert mission.status is MissionStatus.LOCKED

    state.guild.tier = GuildTier.RISING
    result = unlock_mission(state, mission.mission_id)
    assert result.ok
    assert result.value is mission
    assert mission.status is MissionStatus.AVAILABLE
    assert state.events_of_type(EventType.MISSION_UNLOCKED)[-1].related_entity_id == mission.mission_id

    assert accept_mission(state, mission.mission_id, party_ids()).ok


def test_unlock_mission_failure_reasons():
    state = make_state()
    mission = post_mission(state, make_mission())

    assert unlock_mission(state, "missing").reason is FailureReason.MISSION_NOT_FOUND
    assert unlock_mission(state, mission.mission_id).reason is FailureReason.MISSION_NOT_LOCKED
    assert not state.events_of_type(EventType.MISSION_UNLOCKED)


# ============================================================================
# Accepting and committing
# ============================================================================


def test_accept_mission_failure_reasons():
    state = make_state(make_roster())
    mission = add_mission(state, make_mission())
    state.agents["outsider"] = make_agent("outsider")

    assert accept_mission(state, "missing", party_ids()).reason is FailureReason.MISSION_NOT_FOUND
    assert accept_mission(state, mission.mission_id, party_ids(3)).reason is FailureReason.PARTY_TOO_SMALL
    assert (
        accept_mission(state, mission.mission_id, [f"x{i}" for i in range(7)]).reason
        is FailureReason.PARTY_TOO_LARGE
    )
    assert (
        accept_mission(state, mission.mission_id, party_ids(3) + ["ghost"]).reason
        is FailureReason.AGENT_NOT_FOUND
    )
    assert (
        accept_mission(state, mission.mission_id, party_ids(3) + ["outsider"]).reason
        is FailureReason.AGENT_NOT_AVAILABLE
    )
    assert mission.status is MissionStatus.AVAILABLE


def test_accept_mission_commits_party():
    state = make_state(make_roster())
    state.total_weeks = 3
    mission = add_mission(state, make_mission())

    result = accept_mission(state, mission.mission_id, party_ids() + ["agent-0"])

    assert result.ok and result
    assert mission.status is MissionStatus.IN_PROGRESS
    assert mission.party == party_ids()
    assert mission.started_week == 3
    assert state.events_of_type(EventType.MISSION_ACCEPTED)

    again = accept_mission(state, mission.mission_id, party_ids())
    assert again.reason is FailureReason.MISSION_NOT_AVAILABLE

    other = add_mission(state, make_mission("mission-2"))
    busy = accept_mission(state, other.mission_id, ["agent-0", "agent-4", "agent-5", "agent-1"])
    assert busy.reason is FailureReason.AGENT_NOT_AVAILABLE


def test_dead_agents_cannot_be_sent():
    state = make_state(make_roster())
    state.agents["agent-0"].condition = AgentCondition.DECEASED
    mission = add_mission(state, make_mission())
    assert accept_mission(state, mission.mission_id, party_ids()).reason is FailureReason.AGENT_NOT_AVAILABLE


def test_missions_become_due_after_their_duration():
    state = make_state(make_roster())
    mission = add_mission(state, make_mission(duration_weeks=2))
    accept_mission(state, mission.mission_id, party_ids())

    state.total_weeks = 1
    assert missions_due(state) == []
    state.total_weeks = 2
    assert missions_due(state) == [mission]


def test_commit_mission_resolves_immediately():
    state = make_state(make_roster())
    mission = add_mission(state, make_mission())
    rng = random.Random(12)

    assert commit_mission(state, "missing", rng).reason is FailureReason.MISSION_NOT_FOUND
    assert commit_mission(state, mission.mission_id, rng).reason is FailureReason.MISSION_NOT_IN_PROGRESS

    accept_mission(state, mission.mission_id, party_ids())
    result = commit_mission(state, mission.mission_id, rng)

    debrief = result.value
    assert result.ok
    assert mission.status.is_terminal
    assert mission.result is not None and mission.result.outcome is debrief.outcome
    assert state.guild.council.pending_reputation == debrief.outcome.reputation_modifier
    assert commit_mission(state, mission.mission_id, rng).reason is FailureReason.MISSION_NOT_IN_PROGRESS


# ============================================================================
# Result application
# ============================================================================


def test_apply_success_pays_injures_and_levels_up():
    state = make_state(make_roster(4, level=AgentLevel.APPRENTICE))
    mission = add_mission(state, make_mission())
    accept_mission(state, mission.mission_id, party_ids())
    injury = Injury(injury_type=InjuryType.MINOR_WOUND, severity=InjurySeverity.MINOR, weeks_remaining=2)
    result = make_result(mission, MissionOutcome.SUCCESS, injuries={"agent-0": injury})

    debrief = apply_mission_result(state, mission, result, random.Random(5))

    guild = state.guild
    assert guild.finances.treasury == 5400
    assert guild.ledger.transactions[-1].category is TransactionCategory.MISSION_REWARD
    assert guild.statistics.missions_completed == 1
    assert all(state.agents[i].statistics.gold_earned == 100 for i in party_ids())
    assert state.agents["agent-0"].condition is AgentCondition.INJURED
    assert state.agents["agent-0"].injuries == [injury]
    assert len(debrief.level_ups) == 4
    assert all(state.agents[i].level is AgentLevel.JOURNEYMAN for i in party_ids())
    assert debrief.loot and guild.inventory == debrief.loot
    assert mission.status is MissionStatus.COMPLETED

    logged = {event.event_type for event in state.events}
    assert {
        EventType.AGENT_INJURED,
        EventType.LEVEL_UP,
        EventType.LOOT_OBTAINED,
        EventType.MISSION_COMPLETED,
    } <= logged


def test_apply_catastrophe_removes_the_dead():
    state = make_state(make_roster(4, level=AgentLevel.APPRENTICE))
    mission = add_mission(state, make_mission())
    accept_mission(state, mission.mission_id, party_ids())
    result = make_result(
        mission,
        MissionOutcome.CATASTROPHIC_FAILURE,
        gold=0,
        experience=0,
        deaths=["agent-1"],
    )

    debrief = apply_mission_result(state, mission, result, random.Random(5))

    fallen = state.agents["agent-1"]
    assert fallen.condition is AgentCondition.DECEASED
    assert "agent-1" not in state.guild.roster
    assert state.guild.statistics.agents_lost == 1
    assert state.guild.statistics.missions_failed == 1
    assert debrief.loot == []
    assert debrief.experience_share == 2
    assert fallen.current_experience == 0
    assert state.agents["agent-0"].current_experience == 2
    assert mission.status is MissionStatus.FAILED
    assert len(state.guild.ledger) == 0
    assert state.events_of_type(EventType.AGENT_DIED)
    assert state.guild.council.pending_reputation == -10
