"""
Loot generation engine.

Turns a resolved mission into concrete items through weighted sampling:

1. (stakes, outcome) → loot tier on the poor..legendary ladder
2. Drop count from a stakes range plus an outcome modifier
3. Per drop: category by mission type, rarity by tier, then a concrete item
4. Perfect victories add one bonus weapon or accessory a tier higher

Failure outcomes never produce loot. Every random choice comes from the
injected ``rng``; category and rarity picks use ``weighted_choice`` so a
fixed seed always yields the same items.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .catalog import (
    ACCESSORY_PREFIXES,
    ARMOR_PREFIXES,
    ARMOR_SLOT_NAMES,
    AccessoryType,
    ArmorSlot,
    ArmorType,
    BONUS_CATEGORY_WEIGHTS,
    CATEGORY_BASE_VALUES,
    ConsumableType,
    DifficultyLevel,
    ItemCategory,
    ItemRarity,
    LootTier,
    MISSION_CATEGORY_WEIGHTS,
    MissionOutcome,
    MissionStakes,
    VALUABLE_NAMES,
    WEAPON_PREFIXES,
    WeaponType,
    display_name,
)
from .sampling import RandomSource, new_id, weighted_choice
from .schemas import GeneratedItem, Mission

STAKES_LOOT_TIER: Dict[MissionStakes, LootTier] = {
    MissionStakes.LOW: LootTier.COMMON,
    MissionStakes.MEDIUM: LootTier.UNCOMMON,
    MissionStakes.HIGH: LootTier.RARE,
    MissionStakes.CRITICAL: LootTier.EPIC,
}

OUTCOME_TIER_SHIFT: Dict[MissionOutcome, int] = {
    MissionOutcome.PERFECT_VICTORY: 1,
    MissionOutcome.SUCCESS: 0,
    MissionOutcome.PARTIAL_SUCCESS: -1,
    MissionOutcome.FAILURE: 0,
    MissionOutcome.CATASTROPHIC_FAILURE: 0,
}

# Inclusive drop-count range before the outcome modifier.
STAKES_DROP_RANGE: Dict[MissionStakes, tuple[int, int]] = {
    MissionStakes.LOW: (1, 1),
    MissionStakes.MEDIUM: (1, 2),
    MissionStakes.HIGH: (1, 3),
    MissionStakes.CRITICAL: (2, 4),
}

OUTCOME_DROP_MODIFIER: Dict[MissionOutcome, int] = {
    MissionOutcome.PERFECT_VICTORY: 1,
    MissionOutcome.SUCCESS: 0,
    MissionOutcome.PARTIAL_SUCCESS: -1,
    MissionOutcome.FAILURE: 0,
    MissionOutcome.CATASTROPHIC_FAILURE: 0,
}

VALUE_VARIANCE = (0.8, 1.2)


def loot_tier_for(stakes: MissionStakes, outcome: MissionOutcome) -> LootTier:
    return STAKES_LOOT_TIER[stakes].shifted(OUTCOME_TIER_SHIFT[outcome])


def roll_drop_count(stakes: MissionStakes, outcome: MissionOutcome, rng: RandomSource) -> int:
    low, high = STAKES_DROP_RANGE[stakes]
    base = low if low == high else rng.randint(low, high)
    return max(0, base + OUTCOME_DROP_MODIFIER[outcome])


def generate_loot(
    mission: Mission,
    outcome: MissionOutcome,
    rng: RandomSource,
    difficulty: DifficultyLevel = DifficultyLevel.NORMAL,
) -> List[GeneratedItem]:
    """Generate the items a party brings home from ``mission``.

    Returns an empty list for failure and catastrophic failure. The
    difficulty setting scales item value by its reward multiplier.
    """
    if not outcome.is_success:
        return []

    tier = loot_tier_for(mission.stakes, outcome)
    items: List[GeneratedItem] = []

    for _ in range(roll_drop_count(mission.stakes, outcome, rng)):
        category = weighted_choice(MISSION_CATEGORY_WEIGHTS[mission.mission_type], rng)
        items.append(generate_item(category, tier, rng, difficulty, mission.mission_id))

    if outcome is MissionOutcome.PERFECT_VICTORY:
        bonus_tier = tier.shifted(1)
        category = weighted_choice(BONUS_CATEGORY_WEIGHTS, rng)
        items.append(generate_item(category, bonus_tier, rng, difficulty, mission.mission_id))

    return items


def generate_item(
    category: ItemCategory,
    tier: LootTier,
    rng: RandomSource,
    difficulty: DifficultyLevel = DifficultyLevel.NORMAL,
    source_mission_id: Optional[str] = None,
) -> GeneratedItem:
    """Synthesize one concrete item of ``category`` from ``tier``'s tables.

    Every category draws in the same order: rarity, the concrete pick(s),
    value variance, then the item id.
    """
    rarity = weighted_choice(tier.rarity_weights, rng)
    subtype: Optional[str] = None
    slot: Optional[ArmorSlot] = None

    if category is ItemCategory.WEAPON:
        weapon = rng.choice(list(WeaponType))
        subtype = weapon.value
        name = f"{rng.choice(WEAPON_PREFIXES[rarity])} {display_name(weapon)}"
    elif category is ItemCategory.ARMOR:
        armor = rng.choice(list(ArmorType))
        slot = rng.choice(list(ArmorSlot))
        subtype = armor.value
        name = f"{rng.choice(ARMOR_PREFIXES[rarity])} {display_name(armor)} {ARMOR_SLOT_NAMES[slot]}"
    elif category is ItemCategory.ACCESSORY:
        accessory = rng.choice(list(AccessoryType))
        subtype = accessory.value
        name = f"{rng.choice(ACCESSORY_PREFIXES[rarity])} {display_name(accessory)}"
    elif category is ItemCategory.CONSUMABLE:
        consumable = rng.choice(list(ConsumableType))
        subtype = consumable.value
        quality = "" if rarity is ItemRarity.COMMON else f"{rarity.display_name} "
        name = f"{quality}{display_name(consumable)}"
    else:
        name = rng.choice(VALUABLE_NAMES[tier])

    variance = rng.uniform(*VALUE_VARIANCE)
    value = int(
        CATEGORY_BASE_VALUES[category]
        * rarity.value_multiplier
        * variance
        * difficulty.reward_multiplier
    )

    return GeneratedItem(
        item_id=new_id(rng),
        name=name,
        category=category,
        rarity=rarity,
        tier=tier,
        value=value,
        subtype=subtype,
        slot=slot,
        source_mission_id=source_mission_id,
    )


def total_value(items: List[GeneratedItem]) -> int:
    return sum(item.value for item in items)

