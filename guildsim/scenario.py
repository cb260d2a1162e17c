"""
Scenario loading for JSON-defined campaign starts.

This module provides ScenarioLoader for converting JSON scenario files into a
ready-to-run CampaignState, and ``new_campaign`` for building one in code.

Scenario file structure:
```json
{
  "name": "Starter Guild",
  "description": "...",
  "difficulty": "normal",
  "permadeath": false,
  "guild": {
    "name": "The Iron Lanterns",
    "motto": "...",
    "tier": "fledgling",
    "treasury": 5000,
    "facilities": {"guild_hall": 3, "tavern": 4},
    "staff": ["combat_instructor", "quartermaster"],
    "patrons": 5
  },
  "roster": [{"level": "journeyman", "race": "dwarf", "class": "fighter"}],
  "roster_size": 2,
  "free_agents": 30,
  "missions": 8
}
```

Generated content (agent stats, names, missions) is drawn from the random
source passed to ``load``, so a scenario plus a seed is a reproducible start.

Usage:
    loader = ScenarioLoader()
    state = loader.load("starter_guild", make_rng(42))
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .catalog import (
    BOARD_TARGET_SIZE,
    FREE_AGENT_POOL_FLOOR,
    STARTER_STAFF,
    STARTING_TREASURY,
    AgentClass,
    AgentLevel,
    DifficultyLevel,
    FacilityRating,
    FacilityType,
    GuildTier,
    Race,
    StaffRole,
)
from .config import Config
from .missions import generate_missions
from .recruitment import add_free_agents, generate_agent, generate_council, generate_free_agents, generate_staff_member
from .sampling import RandomSource, new_id
from .schemas import Agent, CampaignSettings, CampaignState, Facilities, Finances, Guild

DEFAULT_ROSTER_SIZE = 4


def new_campaign(
    rng: RandomSource,
    *,
    campaign_name: str = "New Campaign",
    guild_name: str = "The Fledgling Company",
    motto: str = "",
    tier: GuildTier = GuildTier.FLEDGLING,
    difficulty: DifficultyLevel = DifficultyLevel.NORMAL,
    permadeath: bool = False,
    treasury: int = STARTING_TREASURY,
    roster: Optional[List[Agent]] = None,
    roster_size: int = DEFAULT_ROSTER_SIZE,
    staff_roles: Optional[List[StaffRole]] = None,
    facility_ratings: Optional[Dict[FacilityType, FacilityRating]] = None,
    patrons: int = 5,
    free_agents: int = FREE_AGENT_POOL_FLOOR,
    missions: int = BOARD_TARGET_SIZE,
) -> CampaignState:
    """Build a fresh campaign at week 0.

    ``roster`` agents join as given; ``roster_size`` more apprentices are
    generated on top. The starting roster joins without recruitment fees.
    """
    facilities = Facilities.starter()
    for facility_type, rating in (facility_ratings or {}).items():
        facilities[facility_type].rating = rating

    guild = Guild(
        guild_id=new_id(rng),
        name=guild_name,
        motto=motto,
        tier=tier,
        facilities=facilities,
        finances=Finances(treasury=treasury, season_budget=tier.base_season_budget),
        council=generate_council(rng, patrons),
    )
    guild.staff = [
        generate_staff_member(role, rng)
        for role in (STARTER_STAFF if staff_roles is None else staff_roles)
    ]

    state = CampaignState(
        campaign_name=campaign_name,
        settings=CampaignSettings(difficulty=difficulty, permadeath=permadeath),
        guild=guild,
    )

    members = list(roster or [])
    members.extend(generate_agent(rng, AgentLevel.APPRENTICE) for _ in range(max(0, roster_size)))
    for agent in members:
        agent.hired_week = 0
        state.agents[agent.agent_id] = agent
        guild.roster.append(agent.agent_id)

    add_free_agents(state, generate_free_agents(rng, free_agents))

    for mission in generate_missions(tier, missions, rng, week=0):
        state.missions[mission.mission_id] = mission

    return state


class ScenarioLoader:
    """Load and validate campaign scenarios from JSON files.

    Directory structure:
    - Default: {PROJECT_ROOT}/examples/scenarios/
    - Override via constructor: ScenarioLoader(Path("/custom/scenarios"))
    - Scenario files: {scenario_name}.json (e.g., "starter_guild.json")

    Validation:
    - Required fields: name, guild (with a name)
    - Enum tags (tier, difficulty, level, race, class, facility, staff role)
      must be known values
    - Raises ValueError if validation fails
    """

    def __init__(self, scenarios_dir: Optional[Path] = None):
        """Initialize scenario loader.

        Args:
            scenarios_dir: Directory containing scenario files.
                          Defaults to {PROJECT_ROOT}/examples/scenarios
        """
        self.scenarios_dir = scenarios_dir or Config.SCENARIOS_DIR

    def available(self) -> List[str]:
        """Names of the scenarios in the scenarios directory."""
        if not self.scenarios_dir.exists():
            return []
        return sorted(path.stem for path in self.scenarios_dir.glob("*.json"))

    def load(self, scenario_name: str, rng: RandomSource) -> CampaignState:
        """Load a scenario by name and build its starting state.

        Args:
            scenario_name: Name of scenario (without .json extension)
            rng: Random source for generated agents, staff, patrons and missions

        Raises:
            FileNotFoundError: If the scenario file doesn't exist
            ValueError: If the scenario is missing required fields or malformed
            json.JSONDecodeError: If the file contains invalid JSON
        """
        scenario_path = self.scenarios_dir / f"{scenario_name}.json"

        if not scenario_path.exists():
            raise FileNotFoundError(
                f"Scenario '{scenario_name}' not found at {scenario_path}"
            )

        data = json.loads(scenario_path.read_text())
        return self.build(data, rng)

    def build(self, data: Dict[str, Any], rng: RandomSource) -> CampaignState:
        """Build a campaign from already-parsed scenario data."""
        self._validate_scenario(data)
        guild_data = data["guild"]

        tier = self._parse_enum(GuildTier, guild_data.get("tier", "fledgling"), "guild tier")
        difficulty = self._parse_enum(
            DifficultyLevel, data.get("difficulty", Config.DIFFICULTY), "difficulty"
        )

        facility_ratings = {
            self._parse_enum(FacilityType, name, "facility"): self._parse_rating(value)
            for name, value in guild_data.get("facilities", {}).items()
        }
        staff_roles = None
        if "staff" in guild_data:
            staff_roles = [
                self._parse_enum(StaffRole, role, "staff role") for role in guild_data["staff"]
            ]

        roster = [self._parse_roster_entry(entry, rng) for entry in data.get("roster", [])]

        return new_campaign(
            rng,
            campaign_name=data["name"],
            guild_name=guild_data["name"],
            motto=guild_data.get("motto", ""),
            tier=tier,
            difficulty=difficulty,
            permadeath=bool(data.get("permadeath", Config.PERMADEATH)),
            treasury=int(guild_data.get("treasury", STARTING_TREASURY)),
            roster=roster,
            roster_size=int(data.get("roster_size", 0 if roster else DEFAULT_ROSTER_SIZE)),
            staff_roles=staff_roles,
            facility_ratings=facility_ratings,
            patrons=int(guild_data.get("patrons", 5)),
            free_agents=int(data.get("free_agents", FREE_AGENT_POOL_FLOOR)),
            missions=int(data.get("missions", BOARD_TARGET_SIZE)),
        )

    def _validate_scenario(self, data: Dict) -> None:
        """Validate scenario data has required fields.

        Raises:
            ValueError: If required fields are missing
        """
        required = ["name", "guild"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Scenario missing required fields: {missing}")

        if not isinstance(data["guild"], dict) or "name" not in data["guild"]:
            raise ValueError("Scenario 'guild' block must be an object with a 'name'")

        for key in ("roster_size", "free_agents", "missions"):
            if key in data and int(data[key]) < 0:
                raise ValueError(f"Scenario '{key}' cannot be negative")

        if not isinstance(data.get("roster", []), list):
            raise ValueError("Scenario 'roster' must be a list of agent specs")

    def _parse_roster_entry(self, entry: Dict[str, Any], rng: RandomSource) -> Agent:
        if not isinstance(entry, dict):
            raise ValueError(f"Roster entry must be an object, got {entry!r}")
        level = self._parse_enum(AgentLevel, entry.get("level", "apprentice"), "agent level")
        race = self._parse_enum(Race, entry["race"], "race") if "race" in entry else None
        agent_class = (
            self._parse_enum(AgentClass, entry["class"], "agent class") if "class" in entry else None
        )
        return generate_agent(rng, level, race=race, agent_class=agent_class)

    @staticmethod
    def _parse_rating(value: Any) -> FacilityRating:
        try:
            return FacilityRating(int(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Facility rating must be an integer 1-7, got {value!r}") from exc

    @staticmethod
    def _parse_enum(enum_cls, value: Any, label: str):
        try:
            return enum_cls(str(value).strip().lower())
        except ValueError as exc:
            valid = ", ".join(member.value for member in enum_cls)
            raise ValueError(f"Unknown {label} '{value}' (expected one of: {valid})") from exc
