"""
Mission resolution engine.

``resolve(mission, party, difficulty, rng)`` is a pure function of its inputs
and the draws it takes from ``rng``. It never touches guild state; the
caller applies the returned SimulationResult (see missions.apply_mission_result).

Pipeline:
1. Party power: per-agent attribute average × level power × fitness, summed,
   then scaled by party-size synergy
2. Mission difficulty: stakes base × recommended level × enemy strength
3. Success chance: clamp(0.6 + (power / difficulty - 1) × 0.4, 0.05, 0.95)
4. Outcome: one uniform roll split into five ordered bands
5. Rewards: base × stakes × outcome × difficulty-setting reward multipliers
6. Injuries (and deaths under permadeath): independent per-agent draws
7. Performance ratings: outcome base ± uniform(-1, 1), clamped to [1, 10]

Draw order is fixed (outcome roll, then per agent: injury draws, then death
draws, then rating variance) so a seed replays the same resolution.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .catalog import (
    INJURY_TYPE_LADDER,
    UNFIT_POWER_PENALTY,
    DifficultyLevel,
    InjuryType,
    MissionOutcome,
    party_synergy,
)
from .sampling import RandomSource
from .schemas import Agent, Injury, Mission, SimulationResult

MIN_SUCCESS_CHANCE = 0.05
MAX_SUCCESS_CHANCE = 0.95

# Band widths for the single outcome roll. Shares of the success mass p and
# the failure mass (1 - p) respectively.
PERFECT_SHARE_OF_SUCCESS = 0.3
PARTIAL_SHARE_OF_FAILURE = 0.4
FAILURE_SHARE_OF_FAILURE = 0.85

INJURY_RISK_SCALE = 5.0


def agent_power(agent: Agent, mission: Mission) -> float:
    """One agent's contribution before party synergy."""
    attrs = mission.mission_type.primary_attributes
    power = agent.attributes.average(attrs) * agent.level.power_multiplier
    if not agent.is_fit_for_duty:
        power *= UNFIT_POWER_PENALTY
    return power


def calculate_party_power(party: Sequence[Agent], mission: Mission) -> float:
    if not party:
        return 0.0
    total = sum(agent_power(agent, mission) for agent in party)
    return total * party_synergy(len(party))


def calculate_mission_difficulty(mission: Mission, difficulty: DifficultyLevel) -> float:
    return (
        mission.stakes.base_difficulty
        * mission.recommended_level.difficulty_multiplier
        * difficulty.enemy_strength_multiplier
    )


def calculate_success_chance(party_power: float, mission_difficulty: float) -> float:
    """Clamped success probability.

    A party with no power sits on the floor; a non-positive difficulty is a
    sure ceiling.
    """
    if party_power <= 0:
        return MIN_SUCCESS_CHANCE
    if mission_difficulty <= 0:
        return MAX_SUCCESS_CHANCE
    ratio = party_power / mission_difficulty
    chance = 0.6 + (ratio - 1.0) * 0.4
    return max(MIN_SUCCESS_CHANCE, min(MAX_SUCCESS_CHANCE, chance))


def preview_success_chance(
    mission: Mission,
    party: Sequence[Agent],
    difficulty: DifficultyLevel = DifficultyLevel.NORMAL,
) -> float:
    """Success probability for display; draws no randomness."""
    return calculate_success_chance(
        calculate_party_power(party, mission),
        calculate_mission_difficulty(mission, difficulty),
    )


def determine_outcome(roll: float, success_chance: float) -> MissionOutcome:
    """Map a uniform roll in [0, 1) onto the five ordered outcome bands."""
    p = success_chance
    failure_mass = 1.0 - p

    if roll < p * PERFECT_SHARE_OF_SUCCESS:
        return MissionOutcome.PERFECT_VICTORY
    if roll < p:
        return MissionOutcome.SUCCESS
    if roll < p + failure_mass * PARTIAL_SHARE_OF_FAILURE:
        return MissionOutcome.PARTIAL_SUCCESS
    if roll < p + failure_mass * FAILURE_SHARE_OF_FAILURE:
        return MissionOutcome.FAILURE
    return MissionOutcome.CATASTROPHIC_FAILURE


def outcome_band_widths(success_chance: float) -> Dict[MissionOutcome, float]:
    """Probability mass of each outcome for a given success chance."""
    p = success_chance
    q = 1.0 - p
    return {
        MissionOutcome.PERFECT_VICTORY: p * PERFECT_SHARE_OF_SUCCESS,
        MissionOutcome.SUCCESS: p * (1 - PERFECT_SHARE_OF_SUCCESS),
        MissionOutcome.PARTIAL_SUCCESS: q * PARTIAL_SHARE_OF_FAILURE,
        MissionOutcome.FAILURE: q * (FAILURE_SHARE_OF_FAILURE - PARTIAL_SHARE_OF_FAILURE),
        MissionOutcome.CATASTROPHIC_FAILURE: q * (1 - FAILURE_SHARE_OF_FAILURE),
    }


def calculate_rewards(
    mission: Mission,
    outcome: MissionOutcome,
    difficulty: DifficultyLevel,
) -> tuple[int, int]:
    """(gold, experience) earned for ``outcome``. Failures earn nothing."""
    multiplier = (
        mission.stakes.reward_multiplier
        * outcome.reward_multiplier
        * difficulty.reward_multiplier
    )
    return (
        int(mission.base_gold_reward * multiplier),
        int(mission.base_experience_reward * multiplier),
    )


def injury_chance(mission: Mission, outcome: MissionOutcome, difficulty: DifficultyLevel) -> float:
    return (
        outcome.injury_base_chance
        * mission.stakes.risk_multiplier
        * INJURY_RISK_SCALE
        * difficulty.injury_rate_multiplier
    )


def roll_injury(rng: RandomSource, week: int = 0) -> Injury:
    """Pick an injury from the fixed ladder and roll its recovery time."""
    roll = rng.random()
    injury_type = InjuryType.EXHAUSTION
    for upper_bound, candidate in INJURY_TYPE_LADDER:
        if roll < upper_bound:
            injury_type = candidate
            break

    severity = injury_type.severity
    low, high = severity.recovery_weeks_range
    return Injury(
        injury_type=injury_type,
        severity=severity,
        weeks_remaining=rng.randint(low, high),
        week_sustained=week,
    )


def determine_injuries(
    party: Sequence[Agent],
    mission: Mission,
    outcome: MissionOutcome,
    difficulty: DifficultyLevel,
    rng: RandomSource,
    week: int = 0,
) -> Dict[str, Injury]:
    chance = injury_chance(mission, outcome, difficulty)
    injuries: Dict[str, Injury] = {}
    for agent in party:
        if rng.random() < chance:
            injuries[agent.agent_id] = roll_injury(rng, week)
    return injuries


def determine_deaths(
    party: Sequence[Agent],
    mission: Mission,
    outcome: MissionOutcome,
    difficulty: DifficultyLevel,
    rng: RandomSource,
    permadeath: bool,
) -> List[str]:
    """Agents killed outright. Only catastrophic failures under permadeath kill."""
    if not permadeath or outcome is not MissionOutcome.CATASTROPHIC_FAILURE:
        return []

    chance = mission.stakes.risk_multiplier * difficulty.injury_rate_multiplier
    return [agent.agent_id for agent in party if rng.random() < chance]


def calculate_performance_ratings(
    party: Sequence[Agent],
    outcome: MissionOutcome,
    rng: RandomSource,
) -> Dict[str, float]:
    ratings: Dict[str, float] = {}
    for agent in party:
        rating = outcome.performance_base + rng.uniform(-1.0, 1.0)
        ratings[agent.agent_id] = max(1.0, min(10.0, rating))
    return ratings


def resolve(
    mission: Mission,
    party: Sequence[Agent],
    difficulty: DifficultyLevel,
    rng: RandomSource,
    *,
    permadeath: bool = False,
    week: int = 0,
    forced_outcome: Optional[MissionOutcome] = None,
) -> SimulationResult:
    """Resolve one mission attempt for ``party``.

    Total over any well-formed input: an empty party simply has zero power
    and the floor success chance.

    Args:
        mission: Mission being attempted (not mutated)
        party: Agents sent on the mission
        difficulty: Campaign difficulty setting
        rng: Injected random source
        permadeath: Whether catastrophic failures can kill
        week: Campaign week, stamped on any injuries
        forced_outcome: Skip the outcome band lookup and use this outcome.
            The roll is still drawn so the rest of the draw sequence is
            unchanged. Intended for scripted scenarios and tests.
    """
    power = calculate_party_power(party, mission)
    mission_difficulty = calculate_mission_difficulty(mission, difficulty)
    chance = calculate_success_chance(power, mission_difficulty)

    roll = rng.random()
    outcome = forced_outcome or determine_outcome(roll, chance)

    gold, experience = calculate_rewards(mission, outcome, difficulty)
    injuries = determine_injuries(party, mission, outcome, difficulty, rng, week)
    deaths = determine_deaths(
        party, mission, outcome, difficulty, rng, permadeath
    )
    ratings = calculate_performance_ratings(party, outcome, rng)

    summary = (
        f"{mission.name}: {outcome.value.replace('_', ' ')} "
        f"({chance:.0%} chance, {gold} gold, {len(injuries)} injured"
        + (f", {len(deaths)} killed" if deaths else "")
        + ")"
    )

    return SimulationResult(
        mission_id=mission.mission_id,
        outcome=outcome,
        success_chance=chance,
        roll=roll,
        party_power=power,
        difficulty=mission_difficulty,
        gold_reward=gold,
        experience_reward=experience,
        injuries=injuries,
        deaths=deaths,
        performance_ratings=ratings,
        summary=summary,
    )
