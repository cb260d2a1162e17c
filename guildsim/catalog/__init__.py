"""Static reference catalogs consumed read-only by the simulation core."""

from .attributes import (
    ATTRIBUTE_MAX,
    ATTRIBUTE_MIN,
    AgentClass,
    AgentCondition,
    AgentLevel,
    AttributeCategory,
    AttributeType,
    COMBAT_ATTRIBUTES,
    HIDDEN_ATTRIBUTES,
    INJURY_TYPE_LADDER,
    InjurySeverity,
    InjuryType,
    LEVEL_ORDER,
    MENTAL_ATTRIBUTES,
    PHYSICAL_ATTRIBUTES,
    PHYSICAL_AVERAGE_ATTRIBUTES,
    Race,
    SPELLCASTER_ATTRIBUTES,
    clamp_attribute,
)
from .missions import (
    CONSOLATION_EXPERIENCE,
    DifficultyLevel,
    MissionOutcome,
    MissionStakes,
    MissionStatus,
    MissionType,
    STAKES_DURATION_WEEKS,
    UNFIT_POWER_PENALTY,
    party_synergy,
)
from .items import (
    ACCESSORY_PREFIXES,
    ARMOR_PREFIXES,
    ARMOR_SLOT_NAMES,
    AccessoryType,
    ArmorSlot,
    ArmorType,
    BONUS_CATEGORY_WEIGHTS,
    CATEGORY_BASE_VALUES,
    ConsumableType,
    ItemCategory,
    ItemRarity,
    LootTier,
    MISSION_CATEGORY_WEIGHTS,
    VALUABLE_NAMES,
    WEAPON_PREFIXES,
    WeaponType,
    display_name,
)
from .guild import (
    BOARD_REFRESH_WEEKS,
    BOARD_RETAINED_MISSIONS,
    BOARD_TARGET_SIZE,
    FREE_AGENT_POOL_FLOOR,
    MONTHS_PER_SEASON,
    RESERVE_WARNING_WEEKS,
    WEEKS_PER_MONTH,
    CONFIDENCE_THRESHOLDS,
    ConfidenceBand,
    DEBT_CONFIDENCE_PENALTY,
    FACILITY_WEEKLY_WEAR,
    FacilityRating,
    FacilityType,
    GuildTier,
    LoanKind,
    MAX_FACILITY_RATING,
    PATRON_TITLES,
    PatronPersonality,
    PatronType,
    STAFF_HIRE_WEEKS,
    STAFF_SALARY_VARIANCE,
    STAKES_REWARD_STEPS,
    STARTER_FACILITIES,
    STARTER_STAFF,
    STARTING_CONFIDENCE,
    STARTING_TREASURY,
    SeasonPhase,
    StaffRole,
    TAVERN_BASE_INCOME,
    ULTIMATUM_EXPIRED_PENALTY,
    ULTIMATUM_MET_BONUS,
    UltimatumType,
)

__all__ = [
    "ATTRIBUTE_MAX",
    "ATTRIBUTE_MIN",
    "AgentClass",
    "AgentCondition",
    "AgentLevel",
    "AttributeCategory",
    "AttributeType",
    "COMBAT_ATTRIBUTES",
    "HIDDEN_ATTRIBUTES",
    "INJURY_TYPE_LADDER",
    "InjurySeverity",
    "InjuryType",
    "LEVEL_ORDER",
    "MENTAL_ATTRIBUTES",
    "PHYSICAL_ATTRIBUTES",
    "PHYSICAL_AVERAGE_ATTRIBUTES",
    "Race",
    "SPELLCASTER_ATTRIBUTES",
    "clamp_attribute",
    "CONSOLATION_EXPERIENCE",
    "DifficultyLevel",
    "MissionOutcome",
    "MissionStakes",
    "MissionStatus",
    "MissionType",
    "STAKES_DURATION_WEEKS",
    "UNFIT_POWER_PENALTY",
    "party_synergy",
    "ACCESSORY_PREFIXES",
    "ARMOR_PREFIXES",
    "ARMOR_SLOT_NAMES",
    "AccessoryType",
    "ArmorSlot",
    "ArmorType",
    "BONUS_CATEGORY_WEIGHTS",
    "CATEGORY_BASE_VALUES",
    "ConsumableType",
    "ItemCategory",
    "ItemRarity",
    "LootTier",
    "MISSION_CATEGORY_WEIGHTS",
    "VALUABLE_NAMES",
    "WEAPON_PREFIXES",
    "WeaponType",
    "display_name",
    "BOARD_REFRESH_WEEKS",
    "BOARD_RETAINED_MISSIONS",
    "BOARD_TARGET_SIZE",
    "FREE_AGENT_POOL_FLOOR",
    "MONTHS_PER_SEASON",
    "RESERVE_WARNING_WEEKS",
    "WEEKS_PER_MONTH",
    "CONFIDENCE_THRESHOLDS",
    "ConfidenceBand",
    "DEBT_CONFIDENCE_PENALTY",
    "FACILITY_WEEKLY_WEAR",
    "FacilityRating",
    "FacilityType",
    "GuildTier",
    "LoanKind",
    "MAX_FACILITY_RATING",
    "PATRON_TITLES",
    "PatronPersonality",
    "PatronType",
    "STAFF_HIRE_WEEKS",
    "STAFF_SALARY_VARIANCE",
    "STAKES_REWARD_STEPS",
    "STARTER_FACILITIES",
    "STARTER_STAFF",
    "STARTING_CONFIDENCE",
    "STARTING_TREASURY",
    "SeasonPhase",
    "StaffRole",
    "TAVERN_BASE_INCOME",
    "ULTIMATUM_EXPIRED_PENALTY",
    "ULTIMATUM_MET_BONUS",
    "UltimatumType",
]
