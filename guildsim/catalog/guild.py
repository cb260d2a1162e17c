"""Guild-side catalogs: tiers, facilities, staff, patrons, loans and confidence bands."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from .missions import MissionStakes


class GuildTier(str, Enum):
    FLEDGLING = "fledgling"
    RISING = "rising"
    ESTABLISHED = "established"
    ELITE = "elite"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return list(GuildTier).index(self)

    @property
    def stakes_weights(self) -> Dict[MissionStakes, int]:
        return TIER_STAKES_WEIGHTS[self]

    @property
    def reward_multiplier(self) -> int:
        return TIER_REWARD_MULTIPLIERS[self]

    @property
    def base_season_budget(self) -> int:
        return TIER_SEASON_BUDGETS[self]


S = MissionStakes

# Zero weights are kept so every tier lists every stakes tier in the same order.
TIER_STAKES_WEIGHTS: Dict[GuildTier, Dict[MissionStakes, int]] = {
    GuildTier.FLEDGLING: {S.LOW: 50, S.MEDIUM: 40, S.HIGH: 10, S.CRITICAL: 0},
    GuildTier.RISING: {S.LOW: 30, S.MEDIUM: 50, S.HIGH: 18, S.CRITICAL: 2},
    GuildTier.ESTABLISHED: {S.LOW: 15, S.MEDIUM: 50, S.HIGH: 30, S.CRITICAL: 5},
    GuildTier.ELITE: {S.LOW: 5, S.MEDIUM: 35, S.HIGH: 45, S.CRITICAL: 15},
    GuildTier.LEGENDARY: {S.LOW: 0, S.MEDIUM: 20, S.HIGH: 50, S.CRITICAL: 30},
}

TIER_REWARD_MULTIPLIERS: Dict[GuildTier, int] = {
    GuildTier.FLEDGLING: 100,
    GuildTier.RISING: 250,
    GuildTier.ESTABLISHED: 500,
    GuildTier.ELITE: 1000,
    GuildTier.LEGENDARY: 2500,
}

STAKES_REWARD_STEPS: Dict[MissionStakes, int] = {
    S.LOW: 1,
    S.MEDIUM: 2,
    S.HIGH: 4,
    S.CRITICAL: 8,
}

TIER_SEASON_BUDGETS: Dict[GuildTier, int] = {
    GuildTier.FLEDGLING: 20000,
    GuildTier.RISING: 40000,
    GuildTier.ESTABLISHED: 80000,
    GuildTier.ELITE: 160000,
    GuildTier.LEGENDARY: 400000,
}


# ============================================================================
# Facilities
# ============================================================================


class FacilityType(str, Enum):
    GUILD_HALL = "guild_hall"
    TRAINING_GROUNDS = "training_grounds"
    APPRENTICE_ACADEMY = "apprentice_academy"
    ARMORY = "armory"
    LIBRARY = "library"
    TEMPLE = "temple"
    TAVERN = "tavern"

    @property
    def base_maintenance(self) -> int:
        return FACILITY_BASE_MAINTENANCE[self]


FACILITY_BASE_MAINTENANCE: Dict[FacilityType, int] = {
    FacilityType.GUILD_HALL: 100,
    FacilityType.TRAINING_GROUNDS: 50,
    FacilityType.APPRENTICE_ACADEMY: 40,
    FacilityType.ARMORY: 30,
    FacilityType.LIBRARY: 25,
    FacilityType.TEMPLE: 60,
    FacilityType.TAVERN: 20,
}


class FacilityRating(int, Enum):
    """Facility quality on the 1-7 ladder."""

    RAMSHACKLE = 1
    POOR = 2
    ADEQUATE = 3
    GOOD = 4
    EXCELLENT = 5
    MASTERWORK = 6
    LEGENDARY = 7

    @property
    def effectiveness(self) -> float:
        return RATING_EFFECTIVENESS[self]

    @property
    def upgrade_cost(self) -> int:
        """Gold needed to reach this rating from the one below."""
        return RATING_UPGRADE_COSTS[self]

    @property
    def roster_capacity(self) -> int:
        return RATING_ROSTER_CAPACITY[self]


MAX_FACILITY_RATING = FacilityRating.LEGENDARY

RATING_EFFECTIVENESS: Dict[FacilityRating, float] = {
    FacilityRating.RAMSHACKLE: 0.5,
    FacilityRating.POOR: 0.7,
    FacilityRating.ADEQUATE: 1.0,
    FacilityRating.GOOD: 1.2,
    FacilityRating.EXCELLENT: 1.4,
    FacilityRating.MASTERWORK: 1.6,
    FacilityRating.LEGENDARY: 2.0,
}

RATING_UPGRADE_COSTS: Dict[FacilityRating, int] = {
    FacilityRating.RAMSHACKLE: 0,
    FacilityRating.POOR: 500,
    FacilityRating.ADEQUATE: 2000,
    FacilityRating.GOOD: 8000,
    FacilityRating.EXCELLENT: 25000,
    FacilityRating.MASTERWORK: 75000,
    FacilityRating.LEGENDARY: 200000,
}

# Guild hall rating bounds how many agents the roster can hold.
RATING_ROSTER_CAPACITY: Dict[FacilityRating, int] = {
    FacilityRating.RAMSHACKLE: 8,
    FacilityRating.POOR: 12,
    FacilityRating.ADEQUATE: 16,
    FacilityRating.GOOD: 22,
    FacilityRating.EXCELLENT: 28,
    FacilityRating.MASTERWORK: 36,
    FacilityRating.LEGENDARY: 50,
}

TAVERN_BASE_INCOME = 50
FACILITY_WEEKLY_WEAR = 1

STARTER_FACILITIES: Dict[FacilityType, Tuple[FacilityRating, int]] = {
    FacilityType.GUILD_HALL: (FacilityRating.ADEQUATE, 100),
    FacilityType.TRAINING_GROUNDS: (FacilityRating.POOR, 80),
    FacilityType.APPRENTICE_ACADEMY: (FacilityRating.POOR, 75),
    FacilityType.ARMORY: (FacilityRating.ADEQUATE, 100),
    FacilityType.LIBRARY: (FacilityRating.POOR, 70),
    FacilityType.TEMPLE: (FacilityRating.ADEQUATE, 100),
    FacilityType.TAVERN: (FacilityRating.ADEQUATE, 100),
}


# ============================================================================
# Staff
# ============================================================================


class StaffRole(str, Enum):
    SECOND_IN_COMMAND = "second_in_command"
    COMBAT_INSTRUCTOR = "combat_instructor"
    MAGIC_INSTRUCTOR = "magic_instructor"
    HEALER_ON_RETAINER = "healer_on_retainer"
    SCOUT_MASTER = "scout_master"
    APPRENTICE_MASTER = "apprentice_master"
    QUARTERMASTER = "quartermaster"
    CHRONICLER = "chronicler"

    @property
    def base_salary(self) -> int:
        return STAFF_BASE_SALARIES[self]

    @property
    def allows_multiple(self) -> bool:
        return self not in UNIQUE_STAFF_ROLES


STAFF_BASE_SALARIES: Dict[StaffRole, int] = {
    StaffRole.SECOND_IN_COMMAND: 200,
    StaffRole.COMBAT_INSTRUCTOR: 100,
    StaffRole.MAGIC_INSTRUCTOR: 120,
    StaffRole.HEALER_ON_RETAINER: 150,
    StaffRole.SCOUT_MASTER: 80,
    StaffRole.APPRENTICE_MASTER: 90,
    StaffRole.QUARTERMASTER: 70,
    StaffRole.CHRONICLER: 60,
}

UNIQUE_STAFF_ROLES = frozenset(
    {StaffRole.SECOND_IN_COMMAND, StaffRole.QUARTERMASTER, StaffRole.CHRONICLER}
)

STAFF_SALARY_VARIANCE = 20
STAFF_HIRE_WEEKS = 4

STARTER_STAFF: List[StaffRole] = [
    StaffRole.COMBAT_INSTRUCTOR,
    StaffRole.HEALER_ON_RETAINER,
    StaffRole.QUARTERMASTER,
]


# ============================================================================
# Patrons and council
# ============================================================================


class PatronType(str, Enum):
    BENEFACTOR = "benefactor"
    VETERAN = "veteran"
    REPRESENTATIVE = "representative"
    CHRONICLER = "chronicler"
    ARBITER = "arbiter"


class PatronPersonality(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"

    @property
    def patience_decay(self) -> float:
        return PATIENCE_DECAY[self]

    @property
    def budget_multiplier(self) -> float:
        return GENEROSITY_BUDGET[self]


PATIENCE_DECAY: Dict[PatronPersonality, float] = {
    PatronPersonality.VERY_LOW: 2.0,
    PatronPersonality.LOW: 1.5,
    PatronPersonality.MEDIUM: 1.0,
    PatronPersonality.HIGH: 0.5,
    PatronPersonality.VERY_HIGH: 0.5,
}

GENEROSITY_BUDGET: Dict[PatronPersonality, float] = {
    PatronPersonality.VERY_LOW: 0.6,
    PatronPersonality.LOW: 0.8,
    PatronPersonality.MEDIUM: 1.0,
    PatronPersonality.HIGH: 1.3,
    PatronPersonality.VERY_HIGH: 1.6,
}

PATRON_TITLES: Dict[PatronType, List[str]] = {
    PatronType.BENEFACTOR: ["Lord", "Lady", "Baron", "Countess", "Duke", "Duchess"],
    PatronType.VETERAN: ["Sir", "Dame", "Captain", "Commander", "Marshal"],
    PatronType.REPRESENTATIVE: ["Elder", "Guildsman", "Veteran", "Speaker"],
    PatronType.CHRONICLER: ["Sage", "Lorekeeper", "Archivist", "Scribe"],
    PatronType.ARBITER: ["Judge", "Magistrate", "Justicar", "Lawkeeper"],
}


class ConfidenceBand(str, Enum):
    SECURE = "secure"
    STABLE = "stable"
    CONCERNING = "concerning"
    CRITICAL = "critical"
    FAILING = "failing"

    @property
    def budget_multiplier(self) -> float:
        return BAND_BUDGET_MULTIPLIERS[self]


# Lower bound of each band, checked top-down.
CONFIDENCE_THRESHOLDS: List[Tuple[float, ConfidenceBand]] = [
    (80.0, ConfidenceBand.SECURE),
    (60.0, ConfidenceBand.STABLE),
    (40.0, ConfidenceBand.CONCERNING),
    (20.0, ConfidenceBand.CRITICAL),
    (0.0, ConfidenceBand.FAILING),
]

BAND_BUDGET_MULTIPLIERS: Dict[ConfidenceBand, float] = {
    ConfidenceBand.SECURE: 1.2,
    ConfidenceBand.STABLE: 1.0,
    ConfidenceBand.CONCERNING: 0.9,
    ConfidenceBand.CRITICAL: 0.8,
    ConfidenceBand.FAILING: 0.7,
}

STARTING_CONFIDENCE = 60.0


class UltimatumType(str, Enum):
    CONSECUTIVE_SUCCESSES = "consecutive_successes"
    REDUCE_EXPENDITURE = "reduce_expenditure"

    @property
    def terms(self) -> Tuple[int, int, str]:
        """(target, deadline in weeks, description)."""
        return ULTIMATUM_TERMS[self]


ULTIMATUM_TERMS: Dict[UltimatumType, Tuple[int, int, str]] = {
    UltimatumType.CONSECUTIVE_SUCCESSES: (3, 8, "Achieve 3 consecutive mission successes"),
    UltimatumType.REDUCE_EXPENDITURE: (20, 4, "Reduce weekly expenditure by 20%"),
}

ULTIMATUM_MET_BONUS = 10.0
ULTIMATUM_EXPIRED_PENALTY = 15.0
DEBT_CONFIDENCE_PENALTY = 2.0


# ============================================================================
# Loans
# ============================================================================


class LoanKind(str, Enum):
    MERCHANT = "merchant"
    TEMPLE = "temple"

    @property
    def terms(self) -> Tuple[float, int, str]:
        """(interest rate, duration in weeks, lender name)."""
        return LOAN_TERMS[self]


LOAN_TERMS: Dict[LoanKind, Tuple[float, int, str]] = {
    LoanKind.MERCHANT: (0.15, 24, "Merchant's Guild"),
    LoanKind.TEMPLE: (0.08, 36, "Temple of Commerce"),
}

STARTING_TREASURY = 5000


# ============================================================================
# Calendar
# ============================================================================


class SeasonPhase(str, Enum):
    SPRING_THAW = "spring_thaw"
    SUMMER_CAMPAIGN = "summer_campaign"
    AUTUMN_HARVEST = "autumn_harvest"
    WINTERS_END = "winters_end"

    @classmethod
    def for_month(cls, month: int) -> "SeasonPhase":
        return list(cls)[(max(1, min(12, month)) - 1) // 3]


WEEKS_PER_MONTH = 4
MONTHS_PER_SEASON = 12
BOARD_REFRESH_WEEKS = 4
BOARD_RETAINED_MISSIONS = 4
BOARD_TARGET_SIZE = 8
FREE_AGENT_POOL_FLOOR = 30
RESERVE_WARNING_WEEKS = 4
