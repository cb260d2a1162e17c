"""
Recruitment: generators for agents, staff and patrons, plus hire/dismiss.

Generated entities draw every field (including their ids) from the injected
random source, so a seeded campaign always offers the same free agents.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .catalog import (
    FREE_AGENT_POOL_FLOOR,
    PATRON_TITLES,
    STAFF_SALARY_VARIANCE,
    AgentClass,
    AgentLevel,
    AttributeType,
    PatronPersonality,
    PatronType,
    Race,
    StaffRole,
)
from .catalog.names import (
    AGENT_FIRST_NAMES,
    AGENT_LAST_NAMES,
    PATRON_FIRST_NAMES,
    PATRON_LAST_NAMES,
    STAFF_FIRST_NAMES,
    STAFF_LAST_NAMES,
)
from .ledger import TransactionCategory
from .progression import calculate_wage
from .results import FailureReason, OperationResult
from .sampling import RandomSource, new_id, weighted_choice
from .schemas import Agent, AgentAttributes, CampaignState, Council, EventType, Patron, StaffMember

CLASS_PRIMARY_BONUS = 3

# Free-agent markets skew toward unproven talent.
FREE_AGENT_LEVEL_WEIGHTS: Dict[AgentLevel, int] = {
    AgentLevel.APPRENTICE: 35,
    AgentLevel.JOURNEYMAN: 30,
    AgentLevel.ADEPT: 18,
    AgentLevel.EXPERT: 10,
    AgentLevel.MASTER: 5,
    AgentLevel.GRANDMASTER: 2,
    AgentLevel.LEGENDARY: 0,
}

COUNCIL_SIZE = 5


# ============================================================================
# Agents
# ============================================================================


def generate_attributes(
    level: AgentLevel,
    race: Race,
    agent_class: AgentClass,
    rng: RandomSource,
) -> AgentAttributes:
    low, high = level.attribute_range
    scores: Dict[AttributeType, int] = {attr: rng.randint(low, high) for attr in AttributeType}

    for attr in agent_class.primary_attributes:
        scores[attr] += CLASS_PRIMARY_BONUS
    for attr, modifier in race.attribute_modifiers.items():
        scores[attr] += modifier

    # Construction clamps every score into range.
    return AgentAttributes(scores=scores)


def generate_agent(
    rng: RandomSource,
    level: AgentLevel = AgentLevel.APPRENTICE,
    race: Optional[Race] = None,
    agent_class: Optional[AgentClass] = None,
) -> Agent:
    """Generate a free agent of ``level``; race and class are random unless given."""
    agent_id = new_id(rng)
    race = race or rng.choice(list(Race))
    agent_class = agent_class or rng.choice(list(AgentClass))
    attributes = generate_attributes(level, race, agent_class, rng)

    min_age, max_age = race.age_range
    agent = Agent(
        agent_id=agent_id,
        first_name=rng.choice(AGENT_FIRST_NAMES[race]),
        last_name=rng.choice(AGENT_LAST_NAMES[race]),
        age=rng.randint(min_age, max_age),
        race=race,
        agent_class=agent_class,
        level=level,
        attributes=attributes,
        weekly_wage=0,
    )

    base = calculate_wage(agent)
    spread = base // 4
    agent.weekly_wage = max(1, base + rng.randint(-spread, spread))
    return agent


def generate_free_agents(rng: RandomSource, count: int) -> List[Agent]:
    agents = []
    for _ in range(max(0, count)):
        level = weighted_choice(FREE_AGENT_LEVEL_WEIGHTS, rng)
        agents.append(generate_agent(rng, level))
    return agents


def add_free_agents(state: CampaignState, agents: List[Agent]) -> None:
    for agent in agents:
        state.agents[agent.agent_id] = agent
        state.free_agents.append(agent.agent_id)


def replenish_free_agents(state: CampaignState, rng: RandomSource) -> int:
    """Top the free-agent pool back up to its floor. Returns agents added."""
    shortfall = FREE_AGENT_POOL_FLOOR - len(state.free_agents)
    if shortfall <= 0:
        return 0
    add_free_agents(state, generate_free_agents(rng, shortfall))
    return shortfall


def hire_agent(state: CampaignState, agent_id: str) -> OperationResult:
    """Sign a free agent, paying their estimated value as a recruitment fee."""
    agent = state.agents.get(agent_id)
    if agent is None:
        return OperationResult.failure(FailureReason.AGENT_NOT_FOUND)
    if agent_id not in state.free_agents or not agent.is_alive:
        return OperationResult.failure(
            FailureReason.NOT_FREE_AGENT, f"{agent.full_name} is not available for hire"
        )

    guild = state.guild
    if not guild.has_roster_space:
        return OperationResult.failure(
            FailureReason.NO_ROSTER_SPACE,
            f"Roster is full ({guild.roster_capacity} agents)",
        )

    cost = agent.estimated_value
    if guild.finances.treasury < cost:
        return OperationResult.failure(
            FailureReason.INSUFFICIENT_FUNDS,
            f"Hiring {agent.full_name} costs {cost} gold",
        )

    guild.post(
        week=state.total_weeks,
        amount=-cost,
        category=TransactionCategory.RECRUITMENT_FEES,
        description=f"Hired {agent.full_name}",
        related_entity_id=agent_id,
    )
    state.free_agents.remove(agent_id)
    guild.roster.append(agent_id)
    agent.hired_week = state.total_weeks

    state.log_event(
        EventType.AGENT_HIRED,
        f"{agent.full_name} has joined the guild",
        related_entity_id=agent_id,
    )
    return OperationResult.success(agent)


def dismiss_agent(state: CampaignState, agent_id: str) -> OperationResult:
    """Release an agent from the roster back into the free-agent pool."""
    guild = state.guild
    if agent_id not in guild.roster:
        return OperationResult.failure(FailureReason.NOT_IN_ROSTER)

    agent = state.agents.get(agent_id)
    if agent is None:
        return OperationResult.failure(FailureReason.AGENT_NOT_FOUND)

    if agent_id in state.assigned_agent_ids():
        return OperationResult.failure(FailureReason.AGENT_ON_MISSION)

    guild.roster.remove(agent_id)
    agent.hired_week = None
    state.free_agents.append(agent_id)

    state.log_event(
        EventType.AGENT_DISMISSED,
        f"{agent.full_name} has left the guild",
        related_entity_id=agent_id,
    )
    return OperationResult.success(agent)


# ============================================================================
# Staff and patrons
# ============================================================================


def generate_staff_member(role: StaffRole, rng: RandomSource, week: int = 0) -> StaffMember:
    salary = role.base_salary + rng.randint(-STAFF_SALARY_VARIANCE, STAFF_SALARY_VARIANCE)
    return StaffMember(
        staff_id=new_id(rng),
        name=f"{rng.choice(STAFF_FIRST_NAMES)} {rng.choice(STAFF_LAST_NAMES)}",
        role=role,
        skill_level=rng.randint(5, 15),
        weekly_salary=max(1, salary),
        hired_week=week,
    )


def generate_patron(patron_type: PatronType, rng: RandomSource) -> Patron:
    title = rng.choice(PATRON_TITLES[patron_type])
    return Patron(
        patron_id=new_id(rng),
        name=f"{title} {rng.choice(PATRON_FIRST_NAMES)} {rng.choice(PATRON_LAST_NAMES)}",
        patron_type=patron_type,
        personality=rng.choice(list(PatronPersonality)),
        influence=rng.randint(20, 80),
        satisfaction=float(rng.randint(50, 70)),
    )


def generate_council(rng: RandomSource, size: int = COUNCIL_SIZE) -> Council:
    """One patron of each type in order, cycling when ``size`` exceeds the types."""
    types = list(PatronType)
    patrons = [generate_patron(types[i % len(types)], rng) for i in range(size)]
    return Council(patrons=patrons)
