"""
Mission board and the mission status machine.

Board generation draws stakes from the guild tier's weights, then type,
rewards, length and a name. Hand-authored missions posted above the guild's
tier start locked until the tier catches up. Accepting a mission moves it to
in-progress with a committed party; resolution (either when the weekly tick
reaches the due week or on an explicit ``commit_mission``) runs the
resolution engine and applies its result to guild and agent state here,
never inside the engine.
"""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, Field

from . import council
from .catalog import (
    BOARD_RETAINED_MISSIONS,
    BOARD_TARGET_SIZE,
    STAKES_DURATION_WEEKS,
    STAKES_REWARD_STEPS,
    AgentCondition,
    GuildTier,
    MissionOutcome,
    MissionStatus,
    MissionType,
)
from .catalog.names import MISSION_NAME_PREFIXES, MISSION_NAME_SUFFIXES
from .ledger import TransactionCategory
from .loot import generate_loot
from .progression import award_mission_experience, mission_experience_share
from .resolution import resolve
from .results import FailureReason, OperationResult
from .sampling import RandomSource, new_id, weighted_choice
from .schemas import (
    CampaignState,
    EventType,
    GeneratedItem,
    LevelUpResult,
    Mission,
    SimulationResult,
)

REWARD_JITTER = 20
MIN_BASE_REWARD = 10
SEGMENT_RANGE = (3, 8)


class MissionDebrief(BaseModel):
    """What applying one mission result changed."""

    mission_id: str
    mission_name: str
    outcome: MissionOutcome
    gold_reward: int = 0
    experience_share: int = 0
    loot: List[GeneratedItem] = Field(default_factory=list)
    level_ups: List[LevelUpResult] = Field(default_factory=list)
    injured: List[str] = Field(default_factory=list)
    killed: List[str] = Field(default_factory=list)
    summary: str = ""


# ============================================================================
# Board generation
# ============================================================================


def generate_mission(tier: GuildTier, rng: RandomSource, week: int = 0) -> Mission:
    """Generate one available mission suited to ``tier``."""
    mission_id = new_id(rng)
    stakes = weighted_choice(tier.stakes_weights, rng)
    mission_type: MissionType = rng.choice(list(MissionType))

    base_reward = tier.reward_multiplier * STAKES_REWARD_STEPS[stakes]
    base_reward = max(MIN_BASE_REWARD, base_reward + rng.randint(-REWARD_JITTER, REWARD_JITTER))

    min_weeks, max_weeks = STAKES_DURATION_WEEKS[stakes]
    duration = min_weeks if min_weeks == max_weeks else rng.randint(min_weeks, max_weeks)
    min_party, max_party = mission_type.party_size_range

    name = (
        f"{rng.choice(MISSION_NAME_PREFIXES[mission_type])} "
        f"{rng.choice(MISSION_NAME_SUFFIXES[mission_type])}"
    )

    return Mission(
        mission_id=mission_id,
        name=name,
        mission_type=mission_type,
        stakes=stakes,
        recommended_level=stakes.recommended_level,
        min_party_size=min_party,
        max_party_size=max_party,
        base_gold_reward=base_reward,
        base_experience_reward=base_reward // 10,
        segments=rng.randint(*SEGMENT_RANGE),
        duration_weeks=duration,
        posted_week=week,
    )


def generate_missions(tier: GuildTier, count: int, rng: RandomSource, week: int = 0) -> List[Mission]:
    return [generate_mission(tier, rng, week) for _ in range(max(0, count))]


def refresh_mission_board(state: CampaignState, rng: RandomSource) -> List[Mission]:
    """Keep the oldest few available missions and fill the board back up.

    Available missions past the retained count are dropped from the state.
    In-progress and resolved missions are never touched.

    Returns:
        The newly generated missions.
    """
    available = state.missions_with_status(MissionStatus.AVAILABLE)
    for mission in available[BOARD_RETAINED_MISSIONS:]:
        del state.missions[mission.mission_id]

    kept = min(len(available), BOARD_RETAINED_MISSIONS)
    fresh = generate_missions(state.guild.tier, BOARD_TARGET_SIZE - kept, rng, state.total_weeks)
    for mission in fresh:
        state.missions[mission.mission_id] = mission

    state.log_event(
        EventType.BOARD_REFRESHED,
        f"Mission board refreshed: {len(fresh)} new postings",
    )
    return fresh


# ============================================================================
# Status transitions
# ============================================================================


def post_mission(state: CampaignState, mission: Mission) -> Mission:
    """Add a hand-authored mission to the board.

    A mission whose ``required_tier`` is above the guild's tier is posted
    locked; ``unlock_mission`` opens it once the guild has grown into it.
    """
    if mission.status is MissionStatus.AVAILABLE and state.guild.tier.rank < mission.required_tier.rank:
        mission.status = MissionStatus.LOCKED
    mission.posted_week = state.total_weeks
    state.missions[mission.mission_id] = mission

    state.log_event(
        EventType.MISSION_POSTED,
        f"{mission.name} posted ({mission.status.value})",
        related_entity_id=mission.mission_id,
    )
    return mission


def unlock_mission(state: CampaignState, mission_id: str) -> OperationResult:
    """Move a locked mission onto the board as available."""
    mission = state.missions.get(mission_id)
    if mission is None:
        return OperationResult.failure(FailureReason.MISSION_NOT_FOUND)
    if mission.status is not MissionStatus.LOCKED:
        return OperationResult.failure(
            FailureReason.MISSION_NOT_LOCKED,
            f"{mission.name} is {mission.status.value.replace('_', ' ')}",
        )
    if state.guild.tier.rank < mission.required_tier.rank:
        return OperationResult.failure(
            FailureReason.TIER_TOO_LOW,
            f"{mission.name} requires a {mission.required_tier.value} guild",
        )

    mission.status = MissionStatus.AVAILABLE
    state.log_event(
        EventType.MISSION_UNLOCKED,
        f"{mission.name} is now open to the guild",
        related_entity_id=mission_id,
    )
    return OperationResult.success(mission)


def unlock_eligible_missions(state: CampaignState) -> List[str]:
    """Unlock every locked mission the guild's tier now allows."""
    return [
        mission.mission_id
        for mission in state.missions_with_status(MissionStatus.LOCKED)
        if unlock_mission(state, mission.mission_id).ok
    ]


def is_agent_available(state: CampaignState, agent_id: str) -> bool:
    """True when the agent is alive, on the roster and not already deployed."""
    agent = state.agents.get(agent_id)
    if agent is None or not agent.is_alive:
        return False
    if agent_id not in state.guild.roster:
        return False
    return agent_id not in state.assigned_agent_ids()


def accept_mission(state: CampaignState, mission_id: str, party_ids: Sequence[str]) -> OperationResult:
    """Send a party out on an available mission.

    Injured agents may be sent; the resolution engine discounts their power.
    Duplicate ids in ``party_ids`` count once.
    """
    mission = state.missions.get(mission_id)
    if mission is None:
        return OperationResult.failure(FailureReason.MISSION_NOT_FOUND)
    if not mission.is_available:
        return OperationResult.failure(
            FailureReason.MISSION_NOT_AVAILABLE,
            f"{mission.name} is {mission.status.value.replace('_', ' ')}",
        )

    party = list(dict.fromkeys(party_ids))
    if len(party) < mission.min_party_size:
        return OperationResult.failure(
            FailureReason.PARTY_TOO_SMALL,
            f"{mission.name} needs at least {mission.min_party_size} agents",
        )
    if len(party) > mission.max_party_size:
        return OperationResult.failure(
            FailureReason.PARTY_TOO_LARGE,
            f"{mission.name} takes at most {mission.max_party_size} agents",
        )

    for agent_id in party:
        if agent_id not in state.agents:
            return OperationResult.failure(FailureReason.AGENT_NOT_FOUND, f"Unknown agent {agent_id}")
        if not is_agent_available(state, agent_id):
            agent = state.agents[agent_id]
            return OperationResult.failure(
                FailureReason.AGENT_NOT_AVAILABLE,
                f"{agent.full_name} cannot join this mission",
            )

    mission.status = MissionStatus.IN_PROGRESS
    mission.party = party
    mission.started_week = state.total_weeks

    state.log_event(
        EventType.MISSION_ACCEPTED,
        f"Party of {len(party)} departs: {mission.name}",
        related_entity_id=mission.mission_id,
    )
    return OperationResult.success(mission)


def commit_mission(state: CampaignState, mission_id: str, rng: RandomSource) -> OperationResult:
    """Resolve an in-progress mission now rather than at its due week."""
    mission = state.missions.get(mission_id)
    if mission is None:
        return OperationResult.failure(FailureReason.MISSION_NOT_FOUND)
    if not mission.is_in_progress:
        return OperationResult.failure(FailureReason.MISSION_NOT_IN_PROGRESS)

    return OperationResult.success(run_mission(state, mission, rng))


def missions_due(state: CampaignState) -> List[Mission]:
    """In-progress missions whose duration has elapsed by the current week."""
    due = []
    for mission in state.missions_with_status(MissionStatus.IN_PROGRESS):
        due_week = mission.due_week
        if due_week is not None and due_week <= state.total_weeks:
            due.append(mission)
    return due


def run_mission(state: CampaignState, mission: Mission, rng: RandomSource) -> MissionDebrief:
    """Resolve ``mission`` with its committed party and apply the result."""
    party = [state.agents[agent_id] for agent_id in mission.party if agent_id in state.agents]
    result = resolve(
        mission,
        party,
        state.difficulty,
        rng,
        permadeath=state.settings.permadeath,
        week=state.total_weeks,
    )
    return apply_mission_result(state, mission, result, rng)


# ============================================================================
# Result application
# ============================================================================


def apply_mission_result(
    state: CampaignState,
    mission: Mission,
    result: SimulationResult,
    rng: RandomSource,
) -> MissionDebrief:
    """Realize a resolution: gold, casualties, experience, loot and the log.

    Randomness is drawn by the loot engine first, then by level-up attribute
    gains, so the order of effects is fixed for a given seed.
    """
    guild = state.guild
    outcome = result.outcome
    party = [state.agents[agent_id] for agent_id in mission.party if agent_id in state.agents]

    guild.post(
        week=state.total_weeks,
        amount=result.gold_reward,
        category=TransactionCategory.MISSION_REWARD,
        description=f"Reward: {mission.name}",
        related_entity_id=mission.mission_id,
    )

    if outcome.is_success:
        guild.statistics.missions_completed += 1
    else:
        guild.statistics.missions_failed += 1
    guild.statistics.total_gold_earned += result.gold_reward

    gold_share = result.gold_reward // len(party) if party else 0
    for agent in party:
        stats = agent.statistics
        if outcome.is_success:
            stats.missions_completed += 1
        else:
            stats.missions_failed += 1
        if outcome is MissionOutcome.PERFECT_VICTORY:
            stats.perfect_victories += 1
        stats.gold_earned += gold_share
        rating = result.performance_ratings.get(agent.agent_id)
        if rating is not None:
            stats.rating_total += rating
            stats.ratings_count += 1

    for agent_id, injury in result.injuries.items():
        agent = state.agents.get(agent_id)
        if agent is None or not agent.is_alive:
            continue
        agent.injuries.append(injury)
        agent.condition = AgentCondition.INJURED
        agent.statistics.injuries_sustained += 1
        state.log_event(
            EventType.AGENT_INJURED,
            f"{agent.full_name} suffered a {injury.injury_type.value.replace('_', ' ')} "
            f"({injury.weeks_remaining} weeks)",
            related_entity_id=agent_id,
        )

    for agent_id in result.deaths:
        agent = state.agents.get(agent_id)
        if agent is None or not agent.is_alive:
            continue
        agent.condition = AgentCondition.DECEASED
        if agent_id in guild.roster:
            guild.roster.remove(agent_id)
        guild.statistics.agents_lost += 1
        state.log_event(
            EventType.AGENT_DIED,
            f"{agent.full_name} fell during {mission.name}",
            related_entity_id=agent_id,
        )

    loot = generate_loot(mission, outcome, rng, state.difficulty)
    guild.inventory.extend(loot)
    guild.statistics.loot_items_found += len(loot)
    if loot:
        state.log_event(
            EventType.LOOT_OBTAINED,
            f"Recovered {len(loot)} item(s) from {mission.name}",
            related_entity_id=mission.mission_id,
        )

    share = mission_experience_share(outcome, result.experience_reward, mission.base_experience_reward)
    level_ups = award_mission_experience(party, share, rng)
    for level_up in level_ups:
        agent = state.agents[level_up.agent_id]
        state.log_event(
            EventType.LEVEL_UP,
            f"{agent.full_name} advanced to {level_up.new_level.value}",
            related_entity_id=agent.agent_id,
        )

    mission.conclude(result)
    state.log_event(
        EventType.MISSION_COMPLETED if outcome.is_success else EventType.MISSION_FAILED,
        result.summary or f"{mission.name}: {outcome.value}",
        related_entity_id=mission.mission_id,
    )

    council.record_mission_outcome(state, outcome)

    return MissionDebrief(
        mission_id=mission.mission_id,
        mission_name=mission.name,
        outcome=outcome,
        gold_reward=result.gold_reward,
        experience_share=share,
        loot=loot,
        level_ups=level_ups,
        injured=list(result.injuries),
        killed=list(result.deaths),
        summary=result.summary,
    )
