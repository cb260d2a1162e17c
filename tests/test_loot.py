"""Tests for the loot generation engine."""

import random

import pytest

from guildsim.catalog import (
    CATEGORY_BASE_VALUES,
    VALUABLE_NAMES,
    DifficultyLevel,
    ItemCategory,
    LootTier,
    MissionOutcome,
    MissionStakes,
    MissionType,
)
from guildsim.loot import generate_item, generate_loot, loot_tier_for, total_value
from guildsim.sampling import weighted_choice

from factories import make_mission


@pytest.mark.parametrize("outcome", [MissionOutcome.FAILURE, MissionOutcome.CATASTROPHIC_FAILURE])
def test_failures_produce_no_loot(outcome):
    mission = make_mission(stakes=MissionStakes.CRITICAL)
    assert generate_loot(mission, outcome, random.Random(1)) == []


def test_partial_success_on_low_stakes_drops_nothing():
    mission = make_mission(stakes=MissionStakes.LOW)
    assert generate_loot(mission, MissionOutcome.PARTIAL_SUCCESS, random.Random(1)) == []


def test_tier_follows_stakes_and_outcome():
    assert loot_tier_for(MissionStakes.LOW, MissionOutcome.SUCCESS) is LootTier.COMMON
    assert loot_tier_for(MissionStakes.LOW, MissionOutcome.PARTIAL_SUCCESS) is LootTier.POOR
    assert loot_tier_for(MissionStakes.CRITICAL, MissionOutcome.PERFECT_VICTORY) is LootTier.LEGENDARY


def test_perfect_victory_adds_a_higher_tier_bonus_item():
    mission = make_mission(stakes=MissionStakes.LOW)
    items = generate_loot(mission, MissionOutcome.PERFECT_VICTORY, random.Random(5))

    assert len(items) == 3
    bonus = items[-1]
    assert bonus.category in {ItemCategory.WEAPON, ItemCategory.ACCESSORY}
    assert bonus.tier is LootTier.RARE
    assert all(item.tier is LootTier.UNCOMMON for item in items[:-1])
    assert all(item.source_mission_id == mission.mission_id for item in items)


def test_critical_missions_are_worth_more_than_low_ones():
    rng = random.Random(9)
    low = make_mission("low", stakes=MissionStakes.LOW)
    critical = make_mission("critical", stakes=MissionStakes.CRITICAL)

    low_total = sum(total_value(generate_loot(low, MissionOutcome.SUCCESS, rng)) for _ in range(25))
    critical_total = sum(
        total_value(generate_loot(critical, MissionOutcome.SUCCESS, rng)) for _ in range(25)
    )
    assert critical_total > low_total


def test_loot_is_reproducible_from_seed():
    mission = make_mission(mission_type=MissionType.RITUAL, stakes=MissionStakes.HIGH)
    first = generate_loot(mission, MissionOutcome.SUCCESS, random.Random(21))
    second = generate_loot(mission, MissionOutcome.SUCCESS, random.Random(21))
    assert first == second


def test_items_are_concrete():
    rng = random.Random(2)
    for category in ItemCategory:
        item = generate_item(category, LootTier.RARE, rng)
        assert item.category is category
        assert item.name
        assert item.value >= 0
        if category is ItemCategory.ARMOR:
            assert item.slot is not None
        if category is ItemCategory.VALUABLE:
            assert item.subtype is None


def test_easier_difficulty_raises_item_value():
    normal = generate_item(ItemCategory.VALUABLE, LootTier.EPIC, random.Random(4), DifficultyLevel.NORMAL)
    easy = generate_item(ItemCategory.VALUABLE, LootTier.EPIC, random.Random(4), DifficultyLevel.EASY)
    assert easy.name == normal.name
    assert easy.value > normal.value


def test_valuables_roll_rarity_and_variance():
    item = generate_item(ItemCategory.VALUABLE, LootTier.RARE, random.Random(5))

    rng = random.Random(5)
    rarity = weighted_choice(LootTier.RARE.rarity_weights, rng)
    name = rng.choice(VALUABLE_NAMES[LootTier.RARE])
    variance = rng.uniform(0.8, 1.2)

    assert item.rarity is rarity
    assert item.name == name
    assert item.value == int(CATEGORY_BASE_VALUES[ItemCategory.VALUABLE] * rarity.value_multiplier * variance)


def test_valuables_share_the_item_draw_order():
    # Rarity is the first draw for every category.
    valuable = generate_item(ItemCategory.VALUABLE, LootTier.EPIC, random.Random(9))
    consumable = generate_item(ItemCategory.CONSUMABLE, LootTier.EPIC, random.Random(9))
    assert valuable.rarity is consumable.rarity
