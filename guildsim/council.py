"""
Patron council: the confidence scalar, its bands and their consequences.

Mission outcomes accumulate reputation as they are applied; the weekly tick
folds that reputation (and any debt penalty) into the confidence scalar and
reports the resulting band. The caller then applies the band's consequences,
including ultimatum settlement and issuance, with ``apply_band_consequences``.
"""

from __future__ import annotations

from typing import Optional

from .catalog import (
    CONFIDENCE_THRESHOLDS,
    DEBT_CONFIDENCE_PENALTY,
    ULTIMATUM_EXPIRED_PENALTY,
    ULTIMATUM_MET_BONUS,
    ConfidenceBand,
    MissionOutcome,
    UltimatumType,
)
from .schemas import CampaignState, EventType, Ultimatum


def confidence_band(value: float) -> ConfidenceBand:
    for lower_bound, band in CONFIDENCE_THRESHOLDS:
        if value >= lower_bound:
            return band
    return ConfidenceBand.FAILING


def record_mission_outcome(state: CampaignState, outcome: MissionOutcome) -> None:
    """Bank the outcome's reputation and advance a streak ultimatum."""
    council = state.guild.council
    council.pending_reputation += outcome.reputation_modifier

    ultimatum = council.active_ultimatum
    if ultimatum is not None and ultimatum.ultimatum_type is UltimatumType.CONSECUTIVE_SUCCESSES:
        ultimatum.progress = ultimatum.progress + 1 if outcome.is_success else 0


def update_confidence(state: CampaignState) -> float:
    """Apply this week's reputation and debt penalty. Returns the delta applied.

    Patrons share the mood: good weeks lift every patron equally, bad weeks
    hurt impatient patrons more.
    """
    council = state.guild.council
    delta = float(council.pending_reputation)
    council.pending_reputation = 0
    if state.guild.finances.in_debt:
        delta -= DEBT_CONFIDENCE_PENALTY

    council.set_confidence(council.overall_confidence + delta)

    for patron in council.patrons:
        shift = delta * patron.personality.patience_decay if delta < 0 else delta
        patron.satisfaction = max(0.0, min(100.0, patron.satisfaction + shift))

    return delta


def issue_ultimatum(state: CampaignState) -> Ultimatum:
    """Issue the council's demand. A guild in debt is told to cut costs."""
    council = state.guild.council
    if state.guild.finances.in_debt:
        ultimatum_type = UltimatumType.REDUCE_EXPENDITURE
    else:
        ultimatum_type = UltimatumType.CONSECUTIVE_SUCCESSES

    target, weeks, description = ultimatum_type.terms
    ultimatum = Ultimatum(
        ultimatum_type=ultimatum_type,
        description=description,
        target=target,
        issued_week=state.total_weeks,
        deadline_week=state.total_weeks + weeks,
        baseline=(
            state.weekly_operating_costs
            if ultimatum_type is UltimatumType.REDUCE_EXPENDITURE
            else None
        ),
    )
    council.active_ultimatum = ultimatum
    state.log_event(EventType.ULTIMATUM_ISSUED, f"The council demands: {description}")
    return ultimatum


def expenditure_reduction(state: CampaignState, ultimatum: Ultimatum) -> int:
    """Percent drop in weekly operating costs since the ultimatum's baseline."""
    baseline = ultimatum.baseline or 0
    if baseline <= 0:
        return 0
    return int((baseline - state.weekly_operating_costs) * 100 / baseline)


def review_ultimatum(state: CampaignState) -> Optional[bool]:
    """Settle the active ultimatum if it is met or past its deadline.

    Returns:
        True if met, False if expired, None if still open (or none active).
    """
    council = state.guild.council
    ultimatum = council.active_ultimatum
    if ultimatum is None:
        return None

    if ultimatum.ultimatum_type is UltimatumType.REDUCE_EXPENDITURE:
        ultimatum.progress = max(0, expenditure_reduction(state, ultimatum))

    if ultimatum.is_met:
        council.active_ultimatum = None
        council.set_confidence(council.overall_confidence + ULTIMATUM_MET_BONUS)
        state.log_event(EventType.ULTIMATUM_MET, f"Ultimatum satisfied: {ultimatum.description}")
        return True

    if ultimatum.is_expired(state.total_weeks):
        council.active_ultimatum = None
        council.set_confidence(council.overall_confidence - ULTIMATUM_EXPIRED_PENALTY)
        state.log_event(EventType.ULTIMATUM_EXPIRED, f"Ultimatum failed: {ultimatum.description}")
        return False

    return None


def season_budget(state: CampaignState, band: ConfidenceBand) -> int:
    guild = state.guild
    return int(guild.tier.base_season_budget * band.budget_multiplier * guild.council.generosity)


def apply_band_consequences(state: CampaignState, band: ConfidenceBand) -> Optional[bool]:
    """Settle any ultimatum, set the season budget for ``band`` and react to a change of band.

    The budget is recomputed from the tier base every call. Warning and
    dismissal events fire only when the band differs from last week's. A
    settled ultimatum moves confidence, which shows in next week's band.

    Returns:
        The ultimatum settlement, as for ``review_ultimatum``.
    """
    council = state.guild.council
    settled = review_ultimatum(state)
    state.guild.finances.season_budget = season_budget(state, band)

    if band is ConfidenceBand.CRITICAL and council.active_ultimatum is None:
        issue_ultimatum(state)

    if band is council.last_band:
        return settled
    council.last_band = band

    state.log_event(
        EventType.BUDGET_REVIEW,
        f"Council confidence is {band.value}; season budget set to "
        f"{state.guild.finances.season_budget} gold",
    )
    if band is ConfidenceBand.CONCERNING:
        state.log_event(EventType.COUNCIL_WARNING, "The council is growing concerned with the guild's direction")
    elif band is ConfidenceBand.FAILING:
        state.log_event(EventType.DISMISSAL_IMMINENT, "The council is preparing to replace the guild master")
    return settled
