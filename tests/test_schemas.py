"""Unit tests for the core schema building blocks."""

import pytest
from pydantic import ValidationError

from guildsim.catalog import (
    AttributeType,
    FacilityRating,
    FacilityType,
    MissionOutcome,
    MissionStatus,
)
from guildsim.ledger import TransactionCategory
from guildsim.schemas import (
    AgentAttributes,
    CampaignState,
    Council,
    EventType,
    Facilities,
    Facility,
    SimulationResult,
)

from factories import make_agent, make_mission, make_state


def make_result(mission_id: str, outcome: MissionOutcome = MissionOutcome.SUCCESS) -> SimulationResult:
    return SimulationResult(
        mission_id=mission_id,
        outcome=outcome,
        success_chance=0.6,
        roll=0.5,
        party_power=40.0,
        difficulty=50.0,
        gold_reward=200,
        experience_reward=20,
    )


def test_attributes_clamp_on_construction_and_write():
    scores = {attr: 10 for attr in AttributeType}
    scores[AttributeType.STRENGTH] = 999
    scores[AttributeType.DEXTERITY] = -50
    attributes = AgentAttributes(scores=scores)

    assert attributes[AttributeType.STRENGTH] == 20
    assert attributes[AttributeType.DEXTERITY] == 1

    attributes[AttributeType.WISDOM] = 999
    assert attributes[AttributeType.WISDOM] == 20
    attributes[AttributeType.WISDOM] = -50
    assert attributes[AttributeType.WISDOM] == 1
    assert attributes.increase(AttributeType.STRENGTH) == 20


def test_attributes_reject_missing_scores():
    with pytest.raises(ValidationError):
        AgentAttributes(scores={AttributeType.STRENGTH: 10})


def test_attribute_scores_are_read_only():
    attributes = AgentAttributes.uniform(10)
    with pytest.raises(TypeError):
        attributes.scores[AttributeType.STRENGTH] = 999
    assert attributes[AttributeType.STRENGTH] == 10


def test_attributes_clamp_when_loaded_from_json():
    payload = {"scores": {attr.value: 999 for attr in AttributeType}}
    attributes = AgentAttributes.model_validate(payload)
    assert set(attributes.scores.values()) == {20}
    assert attributes.model_dump(mode="json") == {"scores": {attr.value: 20 for attr in AttributeType}}

    with pytest.raises(ValidationError):
        AgentAttributes.model_validate({"scores": {"strength": 10, "charm": 5}})


def test_attribute_averages_exclude_charisma_from_physical():
    attributes = AgentAttributes.uniform(10)
    attributes[AttributeType.CHARISMA] = 20
    assert attributes.physical_average == 10
    assert attributes.overall_average == 10


def test_agent_identity_fields_are_frozen():
    agent = make_agent("alpha")
    with pytest.raises(ValidationError):
        agent.agent_id = "beta"


def test_mission_result_requires_terminal_status():
    with pytest.raises(ValidationError):
        make_mission(status=MissionStatus.COMPLETED)

    with pytest.raises(ValidationError):
        make_mission(status=MissionStatus.AVAILABLE, result=make_result("mission-1"))

    resolved = make_mission(
        status=MissionStatus.PARTIAL_SUCCESS,
        result=make_result("mission-1", MissionOutcome.PARTIAL_SUCCESS),
    )
    assert resolved.result is not None


def test_conclude_sets_matching_status_once():
    mission = make_mission(status=MissionStatus.IN_PROGRESS)
    mission.conclude(make_result(mission.mission_id, MissionOutcome.CATASTROPHIC_FAILURE))

    assert mission.status is MissionStatus.FAILED
    with pytest.raises(ValueError):
        mission.conclude(make_result(mission.mission_id))


def test_facility_effective_rating_drops_with_condition():
    facility = Facility(facility_type=FacilityType.TAVERN, rating=FacilityRating.GOOD, condition=40)
    assert facility.effective_rating is FacilityRating.ADEQUATE

    facility.condition = 10
    assert facility.effective_rating is FacilityRating.POOR

    shabby = Facility(facility_type=FacilityType.TAVERN, rating=FacilityRating.RAMSHACKLE, condition=0)
    assert shabby.effective_rating is FacilityRating.RAMSHACKLE


def test_starter_facilities_are_complete():
    facilities = Facilities.starter()
    assert set(facilities.by_type) == set(FacilityType)
    assert facilities.roster_capacity == 16


def test_council_confidence_is_clamped():
    assert Council(overall_confidence=150).overall_confidence == 100.0
    council = Council()
    council.set_confidence(-20)
    assert council.overall_confidence == 0.0


def test_guild_post_keeps_treasury_and_ledger_in_step():
    state = make_state(treasury=100)
    guild = state.guild

    guild.post(week=1, amount=-250, category=TransactionCategory.AGENT_WAGES)
    guild.post(week=1, amount=50, category=TransactionCategory.TAVERN_INCOME)
    assert guild.post(week=1, amount=0, category=TransactionCategory.TAVERN_INCOME) is None

    assert guild.finances.treasury == -100
    assert guild.finances.in_debt
    assert guild.ledger.net_balance == -200
    assert guild.finances.season_expenses == 250
    assert guild.finances.season_income == 50


def test_event_log_uses_sequence_ids():
    state = make_state()
    first = state.log_event(EventType.MONTH_CHANGED, "Month 2 begins")
    second = state.log_event(EventType.BUDGET_REVIEW, "Budget set")

    assert first.event_id == "evt-000001"
    assert second.event_id == "evt-000002"
    assert state.events_of_type(EventType.BUDGET_REVIEW) == [second]


def test_campaign_state_json_round_trip():
    state = make_state([make_agent("alpha"), make_agent("beta")])
    state.missions["mission-1"] = make_mission()
    state.guild.post(week=0, amount=-30, category=TransactionCategory.AGENT_WAGES)

    restored = CampaignState.model_validate(state.model_dump(mode="json"))
    assert restored == state
    assert restored.agents["alpha"].attributes[AttributeType.STRENGTH] == 10
