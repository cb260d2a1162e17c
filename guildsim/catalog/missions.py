"""Mission type, stakes, outcome and difficulty-setting tables."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from .attributes import AgentLevel, AttributeType

A = AttributeType


class MissionType(str, Enum):
    INVESTIGATION = "investigation"
    COMBAT = "combat"
    EXPLORATION = "exploration"
    SOCIAL = "social"
    RITUAL = "ritual"
    SIEGE = "siege"
    ESCORT = "escort"
    RETRIEVAL = "retrieval"
    ASSASSINATION = "assassination"
    DEFENSE = "defense"

    @property
    def primary_attributes(self) -> List[AttributeType]:
        return MISSION_PRIMARY_ATTRIBUTES[self]

    @property
    def party_size_range(self) -> Tuple[int, int]:
        return MISSION_PARTY_SIZES[self]


MISSION_PRIMARY_ATTRIBUTES: Dict[MissionType, List[AttributeType]] = {
    MissionType.INVESTIGATION: [A.PERCEPTION, A.WISDOM, A.AWARENESS, A.CUNNING],
    MissionType.COMBAT: [A.MELEE_COMBAT, A.RANGED_COMBAT, A.DEFENSE, A.BATTLE_TACTICS],
    MissionType.EXPLORATION: [A.PERCEPTION, A.ENDURANCE, A.AWARENESS, A.DEXTERITY],
    MissionType.SOCIAL: [A.CHARISMA, A.CUNNING, A.LEADERSHIP, A.WILLPOWER],
    MissionType.RITUAL: [A.ARCANE_POWER, A.CONCENTRATION, A.RITUAL_CASTING, A.MANA_POOL],
    MissionType.SIEGE: [A.BATTLE_TACTICS, A.LEADERSHIP, A.FORTITUDE, A.TEAMWORK],
    MissionType.ESCORT: [A.AWARENESS, A.PERCEPTION, A.SPEED, A.DEFENSE],
    MissionType.RETRIEVAL: [A.DEXTERITY, A.CUNNING, A.PERCEPTION, A.SPEED],
    MissionType.ASSASSINATION: [A.CUNNING, A.DEXTERITY, A.CRITICAL_STRIKES, A.AWARENESS],
    MissionType.DEFENSE: [A.DEFENSE, A.FORTITUDE, A.ENDURANCE, A.MORALE],
}

MISSION_PARTY_SIZES: Dict[MissionType, Tuple[int, int]] = {
    MissionType.INVESTIGATION: (2, 4),
    MissionType.COMBAT: (4, 6),
    MissionType.EXPLORATION: (3, 5),
    MissionType.SOCIAL: (1, 3),
    MissionType.RITUAL: (2, 4),
    MissionType.SIEGE: (5, 6),
    MissionType.ESCORT: (4, 6),
    MissionType.RETRIEVAL: (2, 4),
    MissionType.ASSASSINATION: (1, 3),
    MissionType.DEFENSE: (4, 6),
}


class MissionStakes(str, Enum):
    """Ordered stakes tiers. Use ``rank`` for comparisons."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return list(MissionStakes).index(self)

    @property
    def base_difficulty(self) -> int:
        return STAKES_BASE_DIFFICULTY[self]

    @property
    def risk_multiplier(self) -> float:
        return STAKES_RISK[self]

    @property
    def reward_multiplier(self) -> float:
        return STAKES_REWARD[self]

    @property
    def recommended_level(self) -> AgentLevel:
        return STAKES_RECOMMENDED_LEVEL[self]


STAKES_BASE_DIFFICULTY: Dict[MissionStakes, int] = {
    MissionStakes.LOW: 30,
    MissionStakes.MEDIUM: 50,
    MissionStakes.HIGH: 75,
    MissionStakes.CRITICAL: 100,
}

STAKES_RISK: Dict[MissionStakes, float] = {
    MissionStakes.LOW: 0.02,
    MissionStakes.MEDIUM: 0.05,
    MissionStakes.HIGH: 0.10,
    MissionStakes.CRITICAL: 0.20,
}

STAKES_REWARD: Dict[MissionStakes, float] = {
    MissionStakes.LOW: 0.5,
    MissionStakes.MEDIUM: 1.0,
    MissionStakes.HIGH: 1.5,
    MissionStakes.CRITICAL: 2.5,
}

STAKES_RECOMMENDED_LEVEL: Dict[MissionStakes, AgentLevel] = {
    MissionStakes.LOW: AgentLevel.APPRENTICE,
    MissionStakes.MEDIUM: AgentLevel.JOURNEYMAN,
    MissionStakes.HIGH: AgentLevel.ADEPT,
    MissionStakes.CRITICAL: AgentLevel.EXPERT,
}

# Weeks an accepted mission stays in progress, as an inclusive range.
STAKES_DURATION_WEEKS: Dict[MissionStakes, Tuple[int, int]] = {
    MissionStakes.LOW: (1, 1),
    MissionStakes.MEDIUM: (1, 2),
    MissionStakes.HIGH: (2, 2),
    MissionStakes.CRITICAL: (3, 3),
}


class MissionStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PARTIAL_SUCCESS = "partial_success"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset(
    {MissionStatus.COMPLETED, MissionStatus.PARTIAL_SUCCESS, MissionStatus.FAILED}
)


class MissionOutcome(str, Enum):
    PERFECT_VICTORY = "perfect_victory"
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    FAILURE = "failure"
    CATASTROPHIC_FAILURE = "catastrophic_failure"

    @property
    def is_success(self) -> bool:
        return self in SUCCESS_FAMILY

    @property
    def reward_multiplier(self) -> float:
        return OUTCOME_REWARD[self]

    @property
    def injury_base_chance(self) -> float:
        return OUTCOME_INJURY_CHANCE[self]

    @property
    def performance_base(self) -> float:
        return OUTCOME_PERFORMANCE_BASE[self]

    @property
    def reputation_modifier(self) -> int:
        return OUTCOME_REPUTATION[self]

    @property
    def mission_status(self) -> MissionStatus:
        return OUTCOME_STATUS[self]


SUCCESS_FAMILY = frozenset(
    {MissionOutcome.PERFECT_VICTORY, MissionOutcome.SUCCESS, MissionOutcome.PARTIAL_SUCCESS}
)

OUTCOME_REWARD: Dict[MissionOutcome, float] = {
    MissionOutcome.PERFECT_VICTORY: 1.5,
    MissionOutcome.SUCCESS: 1.0,
    MissionOutcome.PARTIAL_SUCCESS: 0.5,
    MissionOutcome.FAILURE: 0.0,
    MissionOutcome.CATASTROPHIC_FAILURE: 0.0,
}

OUTCOME_INJURY_CHANCE: Dict[MissionOutcome, float] = {
    MissionOutcome.PERFECT_VICTORY: 0.02,
    MissionOutcome.SUCCESS: 0.08,
    MissionOutcome.PARTIAL_SUCCESS: 0.20,
    MissionOutcome.FAILURE: 0.35,
    MissionOutcome.CATASTROPHIC_FAILURE: 0.60,
}

OUTCOME_PERFORMANCE_BASE: Dict[MissionOutcome, float] = {
    MissionOutcome.PERFECT_VICTORY: 9.0,
    MissionOutcome.SUCCESS: 7.0,
    MissionOutcome.PARTIAL_SUCCESS: 5.0,
    MissionOutcome.FAILURE: 3.0,
    MissionOutcome.CATASTROPHIC_FAILURE: 1.0,
}

OUTCOME_REPUTATION: Dict[MissionOutcome, int] = {
    MissionOutcome.PERFECT_VICTORY: 5,
    MissionOutcome.SUCCESS: 2,
    MissionOutcome.PARTIAL_SUCCESS: 0,
    MissionOutcome.FAILURE: -3,
    MissionOutcome.CATASTROPHIC_FAILURE: -10,
}

OUTCOME_STATUS: Dict[MissionOutcome, MissionStatus] = {
    MissionOutcome.PERFECT_VICTORY: MissionStatus.COMPLETED,
    MissionOutcome.SUCCESS: MissionStatus.COMPLETED,
    MissionOutcome.PARTIAL_SUCCESS: MissionStatus.PARTIAL_SUCCESS,
    MissionOutcome.FAILURE: MissionStatus.FAILED,
    MissionOutcome.CATASTROPHIC_FAILURE: MissionStatus.FAILED,
}

# Share of the mission's base experience granted to each party member when
# the outcome earns no experience reward of its own.
CONSOLATION_EXPERIENCE: Dict[MissionOutcome, float] = {
    MissionOutcome.PERFECT_VICTORY: 0.0,
    MissionOutcome.SUCCESS: 0.0,
    MissionOutcome.PARTIAL_SUCCESS: 0.0,
    MissionOutcome.FAILURE: 0.2,
    MissionOutcome.CATASTROPHIC_FAILURE: 0.1,
}

# Party-size synergy, indexed by member count. Six and beyond share the last value.
PARTY_SYNERGY: Dict[int, float] = {
    0: 0.0,
    1: 1.0,
    2: 1.1,
    3: 1.15,
    4: 1.2,
    5: 1.22,
    6: 1.25,
}

UNFIT_POWER_PENALTY = 0.7


def party_synergy(size: int) -> float:
    if size <= 0:
        return 0.0
    return PARTY_SYNERGY[min(size, 6)]


class DifficultyLevel(str, Enum):
    """Campaign difficulty setting: the single externally tunable knob."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    LEGENDARY = "legendary"

    @property
    def enemy_strength_multiplier(self) -> float:
        return DIFFICULTY_ENEMY_STRENGTH[self]

    @property
    def reward_multiplier(self) -> float:
        return DIFFICULTY_REWARD[self]

    @property
    def injury_rate_multiplier(self) -> float:
        return DIFFICULTY_INJURY_RATE[self]


DIFFICULTY_ENEMY_STRENGTH: Dict[DifficultyLevel, float] = {
    DifficultyLevel.EASY: 0.75,
    DifficultyLevel.NORMAL: 1.0,
    DifficultyLevel.HARD: 1.25,
    DifficultyLevel.LEGENDARY: 1.5,
}

DIFFICULTY_REWARD: Dict[DifficultyLevel, float] = {
    DifficultyLevel.EASY: 1.25,
    DifficultyLevel.NORMAL: 1.0,
    DifficultyLevel.HARD: 0.9,
    DifficultyLevel.LEGENDARY: 0.75,
}

DIFFICULTY_INJURY_RATE: Dict[DifficultyLevel, float] = {
    DifficultyLevel.EASY: 0.5,
    DifficultyLevel.NORMAL: 1.0,
    DifficultyLevel.HARD: 1.3,
    DifficultyLevel.LEGENDARY: 1.7,
}
