"""
guildsim - deterministic weekly simulation core for a guild-management game.

Turns a roster of agents, a treasury and a board of missions into a weekly
progression of outcomes: who succeeds, who is hurt, what is earned, who
levels up, and whether the council keeps faith in the guild.

All state is explicit and all randomness is injected, so a campaign replays
exactly from its seed.
"""

__version__ = "0.1.0"

# Campaign runner
from .campaign import Campaign, CampaignError, run_seeded

# Core interfaces
from .simulation_rules import GuildRules, SimulationRules, format_week_summary
from .persistence import InMemoryPersistence, JsonPersistence, PersistenceStrategy

# Engines
from .resolution import preview_success_chance, resolve
from .progression import award_experience, calculate_wage
from .loot import generate_item, generate_loot
from .time_controller import WeekReport, advance_week
from .ledger import Ledger, Loan, Transaction, TransactionCategory

# Guild operations
from .missions import (
    MissionDebrief,
    accept_mission,
    apply_mission_result,
    commit_mission,
    generate_missions,
    post_mission,
    refresh_mission_board,
    unlock_mission,
)
from .recruitment import dismiss_agent, generate_agent, generate_free_agents, hire_agent
from .guild_ops import dismiss_staff, hire_staff, take_loan, upgrade_facility
from .council import apply_band_consequences, confidence_band
from .results import FailureReason, OperationResult

# Core schemas
from .schemas import (
    Agent,
    AgentAttributes,
    CampaignRun,
    CampaignSettings,
    CampaignState,
    EventType,
    GameEvent,
    GeneratedItem,
    Guild,
    LevelUpResult,
    Mission,
    SimulationResult,
)

# Scenario loading and randomness
from .scenario import ScenarioLoader, new_campaign
from .sampling import RandomSource, make_rng, weighted_choice

# Configuration
from .config import Config

__all__ = [
    # Version
    "__version__",
    # Campaign
    "Campaign",
    "CampaignError",
    "run_seeded",
    # Interfaces
    "SimulationRules",
    "GuildRules",
    "format_week_summary",
    "PersistenceStrategy",
    "InMemoryPersistence",
    "JsonPersistence",
    # Engines
    "resolve",
    "preview_success_chance",
    "award_experience",
    "calculate_wage",
    "generate_loot",
    "generate_item",
    "advance_week",
    "WeekReport",
    "Ledger",
    "Loan",
    "Transaction",
    "TransactionCategory",
    # Operations
    "MissionDebrief",
    "accept_mission",
    "apply_mission_result",
    "commit_mission",
    "generate_missions",
    "post_mission",
    "refresh_mission_board",
    "unlock_mission",
    "generate_agent",
    "generate_free_agents",
    "hire_agent",
    "dismiss_agent",
    "upgrade_facility",
    "hire_staff",
    "dismiss_staff",
    "take_loan",
    "confidence_band",
    "apply_band_consequences",
    "OperationResult",
    "FailureReason",
    # Schemas
    "Agent",
    "AgentAttributes",
    "CampaignRun",
    "CampaignSettings",
    "CampaignState",
    "EventType",
    "GameEvent",
    "GeneratedItem",
    "Guild",
    "LevelUpResult",
    "Mission",
    "SimulationResult",
    # Scenario / randomness
    "ScenarioLoader",
    "new_campaign",
    "RandomSource",
    "make_rng",
    "weighted_choice",
    # Config
    "Config",
]
