"""Tests for council confidence, bands and ultimatums."""

import pytest

from guildsim import council
from guildsim.catalog import (
    ConfidenceBand,
    MissionOutcome,
    PatronPersonality,
    PatronType,
    UltimatumType,
)
from guildsim.schemas import EventType, Patron

from factories import make_agent, make_state


@pytest.mark.parametrize(
    "value, band",
    [
        (100.0, ConfidenceBand.SECURE),
        (80.0, ConfidenceBand.SECURE),
        (79.9, ConfidenceBand.STABLE),
        (60.0, ConfidenceBand.STABLE),
        (59.9, ConfidenceBand.CONCERNING),
        (40.0, ConfidenceBand.CONCERNING),
        (39.9, ConfidenceBand.CRITICAL),
        (20.0, ConfidenceBand.CRITICAL),
        (19.9, ConfidenceBand.FAILING),
        (0.0, ConfidenceBand.FAILING),
    ],
)
def test_confidence_band_boundaries(value, band):
    assert council.confidence_band(value) is band


def test_update_confidence_consumes_pending_reputation():
    state = make_state()
    council.record_mission_outcome(state, MissionOutcome.PERFECT_VICTORY)
    council.record_mission_outcome(state, MissionOutcome.FAILURE)

    delta = council.update_confidence(state)

    assert delta == 2.0
    assert state.guild.council.overall_confidence == 62.0
    assert state.guild.council.pending_reputation == 0


def test_debt_costs_confidence_and_hurts_impatient_patrons():
    state = make_state(treasury=-1)
    state.guild.council.patrons = [
        Patron(patron_id="p1", name="Lady Vess", patron_type=PatronType.BENEFACTOR,
               personality=PatronPersonality.VERY_LOW, satisfaction=60.0),
        Patron(patron_id="p2", name="Sage Orrin", patron_type=PatronType.CHRONICLER,
               personality=PatronPersonality.HIGH, satisfaction=60.0),
    ]

    assert council.update_confidence(state) == -2.0
    assert state.guild.council.overall_confidence == 58.0
    assert [p.satisfaction for p in state.guild.council.patrons] == [56.0, 59.0]


def test_confidence_never_leaves_range():
    state = make_state()
    state.guild.council.set_confidence(5.0)
    for _ in range(3):
        council.record_mission_outcome(state, MissionOutcome.CATASTROPHIC_FAILURE)
    council.update_confidence(state)
    assert state.guild.council.overall_confidence == 0.0


def test_band_change_logs_once():
    state = make_state()
    council.apply_band_consequences(state, ConfidenceBand.CONCERNING)
    council.apply_band_consequences(state, ConfidenceBand.CONCERNING)

    assert len(state.events_of_type(EventType.BUDGET_REVIEW)) == 1
    assert len(state.events_of_type(EventType.COUNCIL_WARNING)) == 1
    assert state.guild.finances.season_budget == int(20000 * ConfidenceBand.CONCERNING.budget_multiplier)

    council.apply_band_consequences(state, ConfidenceBand.FAILING)
    assert state.events_of_type(EventType.DISMISSAL_IMMINENT)
    assert state.guild.finances.season_budget == int(20000 * ConfidenceBand.FAILING.budget_multiplier)


def test_critical_band_issues_streak_ultimatum():
    state = make_state()
    council.apply_band_consequences(state, ConfidenceBand.CRITICAL)

    ultimatum = state.guild.council.active_ultimatum
    assert ultimatum.ultimatum_type is UltimatumType.CONSECUTIVE_SUCCESSES
    assert ultimatum.target == 3
    assert ultimatum.deadline_week == 8
    assert state.guild.finances.season_budget == int(20000 * ConfidenceBand.CRITICAL.budget_multiplier)

    council.apply_band_consequences(state, ConfidenceBand.CRITICAL)
    assert len(state.events_of_type(EventType.ULTIMATUM_ISSUED)) == 1


def test_streak_ultimatum_met_after_three_successes():
    state = make_state()
    council.issue_ultimatum(state)

    council.record_mission_outcome(state, MissionOutcome.SUCCESS)
    council.record_mission_outcome(state, MissionOutcome.FAILURE)
    assert state.guild.council.active_ultimatum.progress == 0

    for _ in range(3):
        council.record_mission_outcome(state, MissionOutcome.PARTIAL_SUCCESS)

    assert council.review_ultimatum(state) is True
    assert state.guild.council.active_ultimatum is None
    assert state.guild.council.overall_confidence == 70.0
    assert state.events_of_type(EventType.ULTIMATUM_MET)


def test_ultimatum_expires_after_deadline():
    state = make_state()
    council.issue_ultimatum(state)

    state.total_weeks = 8
    assert council.review_ultimatum(state) is None
    state.total_weeks = 9
    assert council.review_ultimatum(state) is False
    assert state.guild.council.overall_confidence == 45.0
    assert state.events_of_type(EventType.ULTIMATUM_EXPIRED)


def test_guild_in_debt_is_told_to_cut_costs():
    roster = [make_agent(f"agent-{i}", wage=200) for i in range(4)]
    state = make_state(roster, treasury=-500)

    ultimatum = council.issue_ultimatum(state)
    assert ultimatum.ultimatum_type is UltimatumType.REDUCE_EXPENDITURE
    assert ultimatum.baseline == state.weekly_operating_costs

    assert council.review_ultimatum(state) is None
    state.guild.roster.clear()
    assert council.expenditure_reduction(state, ultimatum) >= 20
    assert council.review_ultimatum(state) is True


def test_band_consequences_settle_a_met_ultimatum():
    state = make_state()
    council.issue_ultimatum(state)
    for _ in range(3):
        council.record_mission_outcome(state, MissionOutcome.SUCCESS)

    assert council.apply_band_consequences(state, ConfidenceBand.STABLE) is True
    assert state.guild.council.active_ultimatum is None
    assert state.events_of_type(EventType.ULTIMATUM_MET)


def test_band_consequences_report_an_open_ultimatum_as_none():
    state = make_state()
    council.issue_ultimatum(state)

    assert council.apply_band_consequences(state, ConfidenceBand.CRITICAL) is None
    assert len(state.events_of_type(EventType.ULTIMATUM_ISSUED)) == 1
