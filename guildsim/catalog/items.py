"""Item, rarity and loot-table catalogs."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from .missions import MissionType


class ItemRarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def value_multiplier(self) -> int:
        return RARITY_VALUE_MULTIPLIERS[self]

    @property
    def display_name(self) -> str:
        return self.value.title()


RARITY_VALUE_MULTIPLIERS: Dict[ItemRarity, int] = {
    ItemRarity.COMMON: 1,
    ItemRarity.UNCOMMON: 2,
    ItemRarity.RARE: 5,
    ItemRarity.EPIC: 15,
    ItemRarity.LEGENDARY: 50,
}


class ItemCategory(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"
    CONSUMABLE = "consumable"
    VALUABLE = "valuable"


# Base gold value before rarity and variance.
CATEGORY_BASE_VALUES: Dict[ItemCategory, int] = {
    ItemCategory.WEAPON: 50,
    ItemCategory.ARMOR: 40,
    ItemCategory.ACCESSORY: 60,
    ItemCategory.CONSUMABLE: 15,
    ItemCategory.VALUABLE: 30,
}


class LootTier(str, Enum):
    """Ordered loot-table ladder from poor to legendary."""

    POOR = "poor"
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return LOOT_TIER_ORDER.index(self)

    def shifted(self, steps: int) -> "LootTier":
        """Move along the ladder, clamped at both ends."""
        index = max(0, min(len(LOOT_TIER_ORDER) - 1, self.rank + steps))
        return LOOT_TIER_ORDER[index]

    @property
    def rarity_weights(self) -> Dict[ItemRarity, int]:
        return TIER_RARITY_WEIGHTS[self]


LOOT_TIER_ORDER: List[LootTier] = list(LootTier)

R = ItemRarity

# Each table sums to 100. Order is the sampler's walk order.
TIER_RARITY_WEIGHTS: Dict[LootTier, Dict[ItemRarity, int]] = {
    LootTier.POOR: {R.COMMON: 95, R.UNCOMMON: 5},
    LootTier.COMMON: {R.COMMON: 70, R.UNCOMMON: 25, R.RARE: 5},
    LootTier.UNCOMMON: {R.COMMON: 40, R.UNCOMMON: 40, R.RARE: 18, R.EPIC: 2},
    LootTier.RARE: {R.COMMON: 20, R.UNCOMMON: 35, R.RARE: 35, R.EPIC: 9, R.LEGENDARY: 1},
    LootTier.EPIC: {R.UNCOMMON: 20, R.RARE: 40, R.EPIC: 35, R.LEGENDARY: 5},
    LootTier.LEGENDARY: {R.RARE: 25, R.EPIC: 50, R.LEGENDARY: 25},
}

C = ItemCategory

_COMBAT_WEIGHTS = {C.WEAPON: 35, C.ARMOR: 30, C.CONSUMABLE: 20, C.VALUABLE: 15}
_SCAVENGE_WEIGHTS = {C.VALUABLE: 40, C.CONSUMABLE: 25, C.WEAPON: 20, C.ARMOR: 15}
_FORTIFY_WEIGHTS = {C.ARMOR: 40, C.WEAPON: 30, C.CONSUMABLE: 20, C.VALUABLE: 10}
_RITUAL_WEIGHTS = {C.ACCESSORY: 35, C.CONSUMABLE: 30, C.VALUABLE: 25, C.WEAPON: 10}
_GENERAL_WEIGHTS = {C.VALUABLE: 30, C.CONSUMABLE: 30, C.WEAPON: 20, C.ARMOR: 20}

MISSION_CATEGORY_WEIGHTS: Dict[MissionType, Dict[ItemCategory, int]] = {
    MissionType.COMBAT: _COMBAT_WEIGHTS,
    MissionType.ASSASSINATION: _COMBAT_WEIGHTS,
    MissionType.EXPLORATION: _SCAVENGE_WEIGHTS,
    MissionType.RETRIEVAL: _SCAVENGE_WEIGHTS,
    MissionType.DEFENSE: _FORTIFY_WEIGHTS,
    MissionType.SIEGE: _FORTIFY_WEIGHTS,
    MissionType.RITUAL: _RITUAL_WEIGHTS,
    MissionType.INVESTIGATION: _GENERAL_WEIGHTS,
    MissionType.SOCIAL: _GENERAL_WEIGHTS,
    MissionType.ESCORT: _GENERAL_WEIGHTS,
}

BONUS_CATEGORY_WEIGHTS: Dict[ItemCategory, int] = {C.WEAPON: 1, C.ACCESSORY: 1}


# ============================================================================
# Concrete item subtypes
# ============================================================================


class WeaponType(str, Enum):
    SWORD = "sword"
    AXE = "axe"
    MACE = "mace"
    DAGGER = "dagger"
    RAPIER = "rapier"
    GREATSWORD = "greatsword"
    GREATAXE = "greataxe"
    WARHAMMER = "warhammer"
    POLEARM = "polearm"
    STAFF = "staff"
    BOW = "bow"
    CROSSBOW = "crossbow"
    THROWING_WEAPON = "throwing_weapon"
    WAND = "wand"
    ORB = "orb"
    SHIELD = "shield"


class ArmorType(str, Enum):
    CLOTH = "cloth"
    LEATHER = "leather"
    CHAINMAIL = "chainmail"
    PLATE = "plate"


class ArmorSlot(str, Enum):
    HEAD = "head"
    CHEST = "chest"
    LEGS = "legs"
    BOOTS = "boots"
    GLOVES = "gloves"


ARMOR_SLOT_NAMES: Dict[ArmorSlot, str] = {
    ArmorSlot.HEAD: "Helm",
    ArmorSlot.CHEST: "Cuirass",
    ArmorSlot.LEGS: "Greaves",
    ArmorSlot.BOOTS: "Boots",
    ArmorSlot.GLOVES: "Gauntlets",
}


class AccessoryType(str, Enum):
    RING = "ring"
    AMULET = "amulet"
    CLOAK = "cloak"
    BRACELET = "bracelet"
    BELT = "belt"
    TRINKET = "trinket"


class ConsumableType(str, Enum):
    HEALTH_POTION = "health_potion"
    MANA_POTION = "mana_potion"
    STAMINA_POTION = "stamina_potion"
    ANTIDOTE = "antidote"
    ELIXIR = "elixir"
    SPELL_SCROLL = "spell_scroll"
    TELEPORT_SCROLL = "teleport_scroll"
    IDENTIFY_SCROLL = "identify_scroll"
    ENCHANT_SCROLL = "enchant_scroll"
    RATIONS = "rations"
    TORCHES = "torches"
    CAMPING_GEAR = "camping_gear"
    REPAIR_KIT = "repair_kit"
    LOCKPICKS = "lockpicks"
    THROWING_KNIFE = "throwing_knife"
    ALCHEMIST_FIRE = "alchemist_fire"
    SMOKE_BOMB = "smoke_bomb"
    FLASH_BOMB = "flash_bomb"


def display_name(tag: Enum) -> str:
    """Human-readable name for any snake_case enum tag."""
    return tag.value.replace("_", " ").title()


WEAPON_PREFIXES: Dict[ItemRarity, List[str]] = {
    R.COMMON: ["Iron", "Steel", "Worn", "Simple"],
    R.UNCOMMON: ["Fine", "Balanced", "Sturdy", "Tempered"],
    R.RARE: ["Masterwork", "Enchanted", "Gleaming", "Pristine"],
    R.EPIC: ["Arcane", "Blessed", "Runic", "Mythril"],
    R.LEGENDARY: ["Ancient", "Divine", "Legendary", "Dragon's"],
}

ARMOR_PREFIXES: Dict[ItemRarity, List[str]] = {
    R.COMMON: ["Worn", "Simple", "Basic"],
    R.UNCOMMON: ["Reinforced", "Sturdy", "Fine"],
    R.RARE: ["Masterwork", "Enchanted", "Gleaming"],
    R.EPIC: ["Arcane", "Blessed", "Runic"],
    R.LEGENDARY: ["Ancient", "Divine", "Legendary"],
}

ACCESSORY_PREFIXES: Dict[ItemRarity, List[str]] = {
    R.COMMON: ["Simple", "Plain", "Modest"],
    R.UNCOMMON: ["Ornate", "Crafted", "Fine"],
    R.RARE: ["Enchanted", "Magical", "Gleaming"],
    R.EPIC: ["Arcane", "Blessed", "Runic"],
    R.LEGENDARY: ["Ancient", "Divine", "Legendary"],
}

VALUABLE_NAMES: Dict[LootTier, List[str]] = {
    LootTier.POOR: ["Copper Coins", "Worn Trinket", "Tarnished Brooch"],
    LootTier.COMMON: ["Silver Coins", "Gem Shard", "Gold Ring"],
    LootTier.UNCOMMON: ["Gold Coins", "Small Ruby", "Silver Goblet"],
    LootTier.RARE: ["Platinum Coins", "Sapphire", "Gold Statuette"],
    LootTier.EPIC: ["Diamond", "Ancient Coin", "Ornate Chalice"],
    LootTier.LEGENDARY: ["Perfect Diamond", "Royal Crown", "Dragon Scale"],
}
