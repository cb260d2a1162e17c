"""Small builders shared by the test modules."""

from typing import Iterable

from guildsim.catalog import AgentClass, AgentLevel, MissionStakes, MissionType, Race
from guildsim.schemas import Agent, AgentAttributes, CampaignState, Finances, Guild, Mission


def make_agent(
    agent_id: str,
    *,
    level: AgentLevel = AgentLevel.JOURNEYMAN,
    score: int = 10,
    agent_class: AgentClass = AgentClass.FIGHTER,
    race: Race = Race.HUMAN,
    wage: int = 25,
) -> Agent:
    return Agent(
        agent_id=agent_id,
        first_name="Test",
        last_name=agent_id.title(),
        age=30,
        race=race,
        agent_class=agent_class,
        level=level,
        attributes=AgentAttributes.uniform(score),
        weekly_wage=wage,
    )


def make_mission(
    mission_id: str = "mission-1",
    *,
    mission_type: MissionType = MissionType.COMBAT,
    stakes: MissionStakes = MissionStakes.MEDIUM,
    **overrides,
) -> Mission:
    min_party, max_party = mission_type.party_size_range
    data = dict(
        mission_id=mission_id,
        name="Clear the Old Mill",
        mission_type=mission_type,
        stakes=stakes,
        recommended_level=stakes.recommended_level,
        min_party_size=min_party,
        max_party_size=max_party,
        base_gold_reward=200,
        base_experience_reward=20,
    )
    data.update(overrides)
    return Mission(**data)


def make_state(roster: Iterable[Agent] = (), *, treasury: int = 5000) -> CampaignState:
    guild = Guild(guild_id="guild-1", name="The Test Company", finances=Finances(treasury=treasury))
    state = CampaignState(campaign_name="Test Campaign", guild=guild)
    for agent in roster:
        state.agents[agent.agent_id] = agent
        guild.roster.append(agent.agent_id)
    return state


def add_mission(state: CampaignState, mission: Mission) -> Mission:
    state.missions[mission.mission_id] = mission
    return mission
