"""
Character progression: experience, level-ups, attribute growth and wages.

Key responsibilities:
- Add experience to an agent and detect threshold crossings
- Advance the level, deduct the threshold and grant attribute gains
- Recompute the weekly wage after every level-up
- Chain level-ups when one award crosses several thresholds

Design rationale:
- Level-ups recurse: a single large award can cross several thresholds, and
  the gains and wage increases of every step merge into one LevelUpResult
- The terminal level has no threshold, so experience keeps accumulating
  there without further effect
- Attribute writes go through the clamping accessor, so the 20 cap holds
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .catalog import AttributeType, CONSOLATION_EXPERIENCE, MissionOutcome
from .sampling import RandomSource
from .schemas import Agent, LevelUpResult


def calculate_wage(agent: Agent) -> int:
    """Weekly wage for the agent's current level, ability and track record."""
    return (
        agent.level.base_weekly_wage
        + int(0.5 * agent.overall_average)
        + 2 * agent.statistics.missions_completed
    )


def award_experience(amount: int, agent: Agent, rng: RandomSource) -> Optional[LevelUpResult]:
    """Add experience to ``agent`` and level up as many times as earned.

    Returns:
        A LevelUpResult when at least one level was gained, otherwise None.
        A non-positive amount is a no-op.
    """
    if amount <= 0:
        return None

    agent.current_experience += amount
    agent.lifetime_experience += amount
    return _level_up_while_eligible(agent, rng)


def _can_level_up(agent: Agent) -> bool:
    threshold = agent.level.experience_threshold
    return threshold is not None and agent.current_experience >= threshold


def _level_up_while_eligible(agent: Agent, rng: RandomSource) -> Optional[LevelUpResult]:
    if not _can_level_up(agent):
        return None

    step = _level_up(agent, rng)
    follow_up = _level_up_while_eligible(agent, rng)
    if follow_up is None:
        return step

    merged_gains = dict(step.attribute_gains)
    for attr, gain in follow_up.attribute_gains.items():
        merged_gains[attr] = merged_gains.get(attr, 0) + gain

    return LevelUpResult(
        agent_id=agent.agent_id,
        previous_level=step.previous_level,
        new_level=follow_up.new_level,
        attribute_gains=merged_gains,
        wage_increase=step.wage_increase + follow_up.wage_increase,
    )


def _level_up(agent: Agent, rng: RandomSource) -> LevelUpResult:
    previous_level = agent.level
    next_level = previous_level.next_level
    threshold = previous_level.experience_threshold
    # _can_level_up guarantees a threshold, and every level with one has a successor.
    assert next_level is not None and threshold is not None

    agent.current_experience -= threshold
    agent.level = next_level

    gains = _grant_attribute_gains(agent, rng)

    old_wage = agent.weekly_wage
    agent.weekly_wage = calculate_wage(agent)

    return LevelUpResult(
        agent_id=agent.agent_id,
        previous_level=previous_level,
        new_level=next_level,
        attribute_gains=gains,
        wage_increase=agent.weekly_wage - old_wage,
    )


def _grant_attribute_gains(agent: Agent, rng: RandomSource) -> Dict[AttributeType, int]:
    """+1 to 1-2 class primaries and 1-2 other attributes, capped at 20."""
    primaries = agent.agent_class.primary_attributes
    others = [attr for attr in AttributeType if attr not in primaries]

    chosen: List[AttributeType] = []
    chosen.extend(rng.sample(primaries, rng.randint(1, 2)))
    chosen.extend(rng.sample(others, rng.randint(1, 2)))

    gains: Dict[AttributeType, int] = {}
    for attr in chosen:
        before = agent.attributes[attr]
        after = agent.attributes.increase(attr)
        if after > before:
            gains[attr] = gains.get(attr, 0) + (after - before)
    return gains


def mission_experience_share(
    outcome: MissionOutcome,
    experience_reward: int,
    base_experience: int,
) -> int:
    """Experience each party member earns from one mission.

    Success-family outcomes pay the resolved experience reward. Failures pay
    a consolation share of the mission's base experience.
    """
    if outcome.is_success:
        return experience_reward
    return int(base_experience * CONSOLATION_EXPERIENCE[outcome])


def award_mission_experience(
    agents: Iterable[Agent],
    amount: int,
    rng: RandomSource,
) -> List[LevelUpResult]:
    """Award the same experience to each living agent and collect level-ups."""
    results: List[LevelUpResult] = []
    for agent in agents:
        if not agent.is_alive:
            continue
        result = award_experience(amount, agent, rng)
        if result is not None:
            results.append(result)
    return results
