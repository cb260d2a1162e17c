"""Agent attribute, race, class and level tables.

Everything in this module is static reference data addressed by enum tags.
Tables are plain dicts keyed by the enum so lookups stay exhaustive; the
catalog tests assert that every member of each enum has an entry.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple


ATTRIBUTE_MIN = 1
ATTRIBUTE_MAX = 20


class AttributeCategory(str, Enum):
    COMBAT = "combat"
    MENTAL = "mental"
    PHYSICAL = "physical"
    SPELLCASTER = "spellcaster"
    HIDDEN = "hidden"


class AttributeType(str, Enum):
    """The 57 named integer attributes carried by every agent."""

    # Combat
    MELEE_COMBAT = "melee_combat"
    RANGED_COMBAT = "ranged_combat"
    SPELLCASTING = "spellcasting"
    DEFENSE = "defense"
    PARRYING = "parrying"
    CRITICAL_STRIKES = "critical_strikes"
    INITIATIVE = "initiative"
    DUAL_WIELDING = "dual_wielding"
    SHIELD_MASTERY = "shield_mastery"
    ARMOR_PROFICIENCY = "armor_proficiency"
    WEAPON_SPECIALIZATION = "weapon_specialization"
    BATTLE_TACTICS = "battle_tactics"
    MOUNTED_COMBAT = "mounted_combat"
    UNARMED_COMBAT = "unarmed_combat"

    # Mental
    WISDOM = "wisdom"
    PERCEPTION = "perception"
    WILLPOWER = "willpower"
    CREATIVITY = "creativity"
    DECISION_MAKING = "decision_making"
    DETERMINATION = "determination"
    CUNNING = "cunning"
    LEADERSHIP = "leadership"
    AWARENESS = "awareness"
    TACTICAL_SENSE = "tactical_sense"
    TEAMWORK = "teamwork"
    MORALE = "morale"

    # Physical
    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    AGILITY = "agility"
    ENDURANCE = "endurance"
    SPEED = "speed"
    STAMINA = "stamina"
    FORTITUDE = "fortitude"
    CHARISMA = "charisma"

    # Spellcaster
    ARCANE_POWER = "arcane_power"
    DIVINE_CONNECTION = "divine_connection"
    SPELL_RESISTANCE = "spell_resistance"
    MANA_POOL = "mana_pool"
    CHANNELING = "channeling"
    RITUAL_CASTING = "ritual_casting"
    COUNTERSPELLING = "counterspelling"
    SPELL_RECOVERY = "spell_recovery"
    CONCENTRATION = "concentration"
    WILD_MAGIC_AFFINITY = "wild_magic_affinity"

    # Hidden (never shown to the player)
    CONSISTENCY = "consistency"
    CLUTCH_PERFORMANCE = "clutch_performance"
    INJURY_PRONENESS = "injury_proneness"
    CLASS_VERSATILITY = "class_versatility"
    REALM_ADAPTABILITY = "realm_adaptability"
    AMBITION = "ambition"
    GUILD_LOYALTY = "guild_loyalty"
    PRESSURE_HANDLING = "pressure_handling"
    PROFESSIONALISM = "professionalism"
    HONOR_CODE = "honor_code"
    TEMPERAMENT = "temperament"
    GREED_FACTOR = "greed_factor"

    @property
    def category(self) -> AttributeCategory:
        return ATTRIBUTE_CATEGORIES[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


A = AttributeType

COMBAT_ATTRIBUTES: List[AttributeType] = [
    A.MELEE_COMBAT, A.RANGED_COMBAT, A.SPELLCASTING, A.DEFENSE, A.PARRYING,
    A.CRITICAL_STRIKES, A.INITIATIVE, A.DUAL_WIELDING, A.SHIELD_MASTERY,
    A.ARMOR_PROFICIENCY, A.WEAPON_SPECIALIZATION, A.BATTLE_TACTICS,
    A.MOUNTED_COMBAT, A.UNARMED_COMBAT,
]

MENTAL_ATTRIBUTES: List[AttributeType] = [
    A.WISDOM, A.PERCEPTION, A.WILLPOWER, A.CREATIVITY, A.DECISION_MAKING,
    A.DETERMINATION, A.CUNNING, A.LEADERSHIP, A.AWARENESS, A.TACTICAL_SENSE,
    A.TEAMWORK, A.MORALE,
]

PHYSICAL_ATTRIBUTES: List[AttributeType] = [
    A.STRENGTH, A.DEXTERITY, A.CONSTITUTION, A.AGILITY, A.ENDURANCE,
    A.SPEED, A.STAMINA, A.FORTITUDE, A.CHARISMA,
]

# Charisma is filed under physical but does not count toward the physical average.
PHYSICAL_AVERAGE_ATTRIBUTES: List[AttributeType] = [
    attr for attr in PHYSICAL_ATTRIBUTES if attr is not A.CHARISMA
]

SPELLCASTER_ATTRIBUTES: List[AttributeType] = [
    A.ARCANE_POWER, A.DIVINE_CONNECTION, A.SPELL_RESISTANCE, A.MANA_POOL,
    A.CHANNELING, A.RITUAL_CASTING, A.COUNTERSPELLING, A.SPELL_RECOVERY,
    A.CONCENTRATION, A.WILD_MAGIC_AFFINITY,
]

HIDDEN_ATTRIBUTES: List[AttributeType] = [
    A.CONSISTENCY, A.CLUTCH_PERFORMANCE, A.INJURY_PRONENESS,
    A.CLASS_VERSATILITY, A.REALM_ADAPTABILITY, A.AMBITION, A.GUILD_LOYALTY,
    A.PRESSURE_HANDLING, A.PROFESSIONALISM, A.HONOR_CODE, A.TEMPERAMENT,
    A.GREED_FACTOR,
]

ATTRIBUTE_CATEGORIES: Dict[AttributeType, AttributeCategory] = {
    **{attr: AttributeCategory.COMBAT for attr in COMBAT_ATTRIBUTES},
    **{attr: AttributeCategory.MENTAL for attr in MENTAL_ATTRIBUTES},
    **{attr: AttributeCategory.PHYSICAL for attr in PHYSICAL_ATTRIBUTES},
    **{attr: AttributeCategory.SPELLCASTER for attr in SPELLCASTER_ATTRIBUTES},
    **{attr: AttributeCategory.HIDDEN for attr in HIDDEN_ATTRIBUTES},
}


def clamp_attribute(value: int) -> int:
    """Clamp a raw attribute value into the legal [1, 20] range."""
    return max(ATTRIBUTE_MIN, min(ATTRIBUTE_MAX, int(value)))


# ============================================================================
# Races
# ============================================================================


class Race(str, Enum):
    HUMAN = "human"
    ELF = "elf"
    DWARF = "dwarf"
    HALFLING = "halfling"
    HALF_ORC = "half_orc"
    TIEFLING = "tiefling"
    DRAGONBORN = "dragonborn"

    @property
    def attribute_modifiers(self) -> Dict[AttributeType, int]:
        return RACE_MODIFIERS[self]

    @property
    def age_range(self) -> Tuple[int, int]:
        return RACE_AGE_RANGES[self]


def _modifiers(strength: int, dexterity: int, constitution: int, wisdom: int, charisma: int) -> Dict[AttributeType, int]:
    return {
        A.STRENGTH: strength,
        A.DEXTERITY: dexterity,
        A.CONSTITUTION: constitution,
        A.WISDOM: wisdom,
        A.CHARISMA: charisma,
    }


RACE_MODIFIERS: Dict[Race, Dict[AttributeType, int]] = {
    Race.HUMAN: _modifiers(0, 0, 0, 0, 0),
    Race.ELF: _modifiers(-1, 2, -1, 1, 0),
    Race.DWARF: _modifiers(0, -1, 2, 0, -1),
    Race.HALFLING: _modifiers(-2, 2, 0, 0, 1),
    Race.HALF_ORC: _modifiers(2, 0, 1, -1, -2),
    Race.TIEFLING: _modifiers(0, 0, 0, 0, 2),
    Race.DRAGONBORN: _modifiers(2, 0, 0, 0, 1),
}

RACE_AGE_RANGES: Dict[Race, Tuple[int, int]] = {
    Race.HUMAN: (18, 65),
    Race.ELF: (100, 750),
    Race.DWARF: (50, 350),
    Race.HALFLING: (20, 150),
    Race.HALF_ORC: (14, 60),
    Race.TIEFLING: (18, 100),
    Race.DRAGONBORN: (15, 80),
}


# ============================================================================
# Classes
# ============================================================================


class AgentClass(str, Enum):
    FIGHTER = "fighter"
    BARBARIAN = "barbarian"
    PALADIN = "paladin"
    RANGER = "ranger"
    MONK = "monk"
    ROGUE = "rogue"
    WIZARD = "wizard"
    SORCERER = "sorcerer"
    CLERIC = "cleric"
    DRUID = "druid"
    WARLOCK = "warlock"
    BARD = "bard"
    ARTIFICER = "artificer"
    ELDRITCH_KNIGHT = "eldritch_knight"
    ARCANE_TRICKSTER = "arcane_trickster"

    @property
    def primary_attributes(self) -> List[AttributeType]:
        return CLASS_PRIMARY_ATTRIBUTES[self]


CLASS_PRIMARY_ATTRIBUTES: Dict[AgentClass, List[AttributeType]] = {
    AgentClass.FIGHTER: [A.STRENGTH, A.CONSTITUTION, A.MELEE_COMBAT],
    AgentClass.BARBARIAN: [A.STRENGTH, A.CONSTITUTION, A.ENDURANCE],
    AgentClass.PALADIN: [A.STRENGTH, A.CHARISMA, A.DIVINE_CONNECTION],
    AgentClass.RANGER: [A.DEXTERITY, A.WISDOM, A.RANGED_COMBAT],
    AgentClass.MONK: [A.DEXTERITY, A.WISDOM, A.UNARMED_COMBAT],
    AgentClass.ROGUE: [A.DEXTERITY, A.CUNNING, A.PERCEPTION],
    AgentClass.WIZARD: [A.WISDOM, A.ARCANE_POWER, A.MANA_POOL],
    AgentClass.SORCERER: [A.CHARISMA, A.ARCANE_POWER, A.WILD_MAGIC_AFFINITY],
    AgentClass.CLERIC: [A.WISDOM, A.DIVINE_CONNECTION, A.CHANNELING],
    AgentClass.DRUID: [A.WISDOM, A.DIVINE_CONNECTION, A.CONSTITUTION],
    AgentClass.WARLOCK: [A.CHARISMA, A.ARCANE_POWER, A.WILLPOWER],
    AgentClass.BARD: [A.CHARISMA, A.CREATIVITY, A.LEADERSHIP],
    AgentClass.ARTIFICER: [A.WISDOM, A.CREATIVITY, A.ARCANE_POWER],
    AgentClass.ELDRITCH_KNIGHT: [A.STRENGTH, A.WISDOM, A.MELEE_COMBAT],
    AgentClass.ARCANE_TRICKSTER: [A.DEXTERITY, A.WISDOM, A.CUNNING],
}


# ============================================================================
# Levels
# ============================================================================


class AgentLevel(str, Enum):
    """Ordered career ranks. Comparison uses ``rank``, never the string value."""

    APPRENTICE = "apprentice"
    JOURNEYMAN = "journeyman"
    ADEPT = "adept"
    EXPERT = "expert"
    MASTER = "master"
    GRANDMASTER = "grandmaster"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return LEVEL_ORDER.index(self)

    @property
    def next_level(self) -> Optional["AgentLevel"]:
        index = self.rank + 1
        return LEVEL_ORDER[index] if index < len(LEVEL_ORDER) else None

    @property
    def power_multiplier(self) -> float:
        return LEVEL_POWER[self]

    @property
    def difficulty_multiplier(self) -> float:
        return LEVEL_DIFFICULTY[self]

    @property
    def experience_threshold(self) -> Optional[int]:
        return LEVEL_XP_THRESHOLDS[self]

    @property
    def base_weekly_wage(self) -> int:
        return LEVEL_BASE_WAGES[self]

    @property
    def value_multiplier(self) -> float:
        return LEVEL_VALUE_MULTIPLIERS[self]

    @property
    def attribute_range(self) -> Tuple[int, int]:
        return LEVEL_ATTRIBUTE_RANGES[self]


LEVEL_ORDER: List[AgentLevel] = list(AgentLevel)

# Contribution of one agent's attribute average to party power.
LEVEL_POWER: Dict[AgentLevel, float] = {
    AgentLevel.APPRENTICE: 0.6,
    AgentLevel.JOURNEYMAN: 1.0,
    AgentLevel.ADEPT: 1.5,
    AgentLevel.EXPERT: 2.2,
    AgentLevel.MASTER: 3.0,
    AgentLevel.GRANDMASTER: 4.0,
    AgentLevel.LEGENDARY: 5.5,
}

# Recommended-level coefficient applied to mission difficulty.
LEVEL_DIFFICULTY: Dict[AgentLevel, float] = {
    AgentLevel.APPRENTICE: 0.6,
    AgentLevel.JOURNEYMAN: 1.0,
    AgentLevel.ADEPT: 1.4,
    AgentLevel.EXPERT: 1.8,
    AgentLevel.MASTER: 2.5,
    AgentLevel.GRANDMASTER: 3.5,
    AgentLevel.LEGENDARY: 5.0,
}

# 100 at apprentice, x1.8 per rank. Legendary is terminal.
LEVEL_XP_THRESHOLDS: Dict[AgentLevel, Optional[int]] = {
    AgentLevel.APPRENTICE: 100,
    AgentLevel.JOURNEYMAN: 180,
    AgentLevel.ADEPT: 324,
    AgentLevel.EXPERT: 583,
    AgentLevel.MASTER: 1049,
    AgentLevel.GRANDMASTER: 1889,
    AgentLevel.LEGENDARY: None,
}

LEVEL_BASE_WAGES: Dict[AgentLevel, int] = {
    AgentLevel.APPRENTICE: 5,
    AgentLevel.JOURNEYMAN: 25,
    AgentLevel.ADEPT: 75,
    AgentLevel.EXPERT: 200,
    AgentLevel.MASTER: 500,
    AgentLevel.GRANDMASTER: 1500,
    AgentLevel.LEGENDARY: 5000,
}

LEVEL_VALUE_MULTIPLIERS: Dict[AgentLevel, float] = {
    AgentLevel.APPRENTICE: 0.3,
    AgentLevel.JOURNEYMAN: 0.6,
    AgentLevel.ADEPT: 1.0,
    AgentLevel.EXPERT: 1.5,
    AgentLevel.MASTER: 2.5,
    AgentLevel.GRANDMASTER: 4.0,
    AgentLevel.LEGENDARY: 7.0,
}

LEVEL_ATTRIBUTE_RANGES: Dict[AgentLevel, Tuple[int, int]] = {
    AgentLevel.APPRENTICE: (1, 8),
    AgentLevel.JOURNEYMAN: (4, 12),
    AgentLevel.ADEPT: (7, 14),
    AgentLevel.EXPERT: (10, 16),
    AgentLevel.MASTER: (12, 18),
    AgentLevel.GRANDMASTER: (14, 19),
    AgentLevel.LEGENDARY: (16, 20),
}


# ============================================================================
# Condition and injuries
# ============================================================================


class AgentCondition(str, Enum):
    HEALTHY = "healthy"
    FATIGUED = "fatigued"
    INJURED = "injured"
    CURSED = "cursed"
    DECEASED = "deceased"


class InjurySeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"
    PERMANENT = "permanent"

    @property
    def recovery_weeks_range(self) -> Tuple[int, int]:
        return SEVERITY_RECOVERY_WEEKS[self]


SEVERITY_RECOVERY_WEEKS: Dict[InjurySeverity, Tuple[int, int]] = {
    InjurySeverity.MINOR: (1, 2),
    InjurySeverity.MODERATE: (2, 4),
    InjurySeverity.SERIOUS: (3, 6),
    InjurySeverity.CRITICAL: (8, 16),
    InjurySeverity.PERMANENT: (0, 0),
}


class InjuryType(str, Enum):
    MINOR_WOUND = "minor_wound"
    SERIOUS_WOUND = "serious_wound"
    CRITICAL_WOUND = "critical_wound"
    CURSE = "curse"
    EXHAUSTION = "exhaustion"
    POISON = "poison"
    DISEASE = "disease"

    @property
    def severity(self) -> InjurySeverity:
        return INJURY_SEVERITY[self]


INJURY_SEVERITY: Dict[InjuryType, InjurySeverity] = {
    InjuryType.MINOR_WOUND: InjurySeverity.MINOR,
    InjuryType.SERIOUS_WOUND: InjurySeverity.MODERATE,
    InjuryType.CRITICAL_WOUND: InjurySeverity.SERIOUS,
    InjuryType.CURSE: InjurySeverity.SERIOUS,
    InjuryType.EXHAUSTION: InjurySeverity.MINOR,
    InjuryType.POISON: InjurySeverity.MODERATE,
    InjuryType.DISEASE: InjurySeverity.MODERATE,
}

# Second-draw injury ladder: cumulative upper bounds on a uniform roll.
INJURY_TYPE_LADDER: List[Tuple[float, InjuryType]] = [
    (0.50, InjuryType.MINOR_WOUND),
    (0.80, InjuryType.SERIOUS_WOUND),
    (0.95, InjuryType.CRITICAL_WOUND),
    (1.00, InjuryType.EXHAUSTION),
]
