"""Tests for the static reference catalogs."""

from guildsim.catalog import (
    CONFIDENCE_THRESHOLDS,
    INJURY_TYPE_LADDER,
    MISSION_CATEGORY_WEIGHTS,
    AgentClass,
    AgentLevel,
    AttributeCategory,
    AttributeType,
    ConfidenceBand,
    FacilityRating,
    FacilityType,
    GuildTier,
    ItemRarity,
    LootTier,
    MissionOutcome,
    MissionStakes,
    MissionStatus,
    MissionType,
    Race,
    SeasonPhase,
    clamp_attribute,
    party_synergy,
)


def test_every_attribute_has_a_category():
    assert len(AttributeType) == 57
    counts = {category: 0 for category in AttributeCategory}
    for attr in AttributeType:
        counts[attr.category] += 1

    assert counts[AttributeCategory.COMBAT] == 14
    assert counts[AttributeCategory.MENTAL] == 12
    assert counts[AttributeCategory.PHYSICAL] == 9
    assert counts[AttributeCategory.SPELLCASTER] == 10
    assert counts[AttributeCategory.HIDDEN] == 12


def test_clamp_attribute_bounds():
    assert clamp_attribute(999) == 20
    assert clamp_attribute(-50) == 1
    assert clamp_attribute(12) == 12


def test_level_ladder_is_ordered_and_terminal():
    levels = list(AgentLevel)
    assert levels[0] is AgentLevel.APPRENTICE
    assert AgentLevel.LEGENDARY.next_level is None
    assert AgentLevel.LEGENDARY.experience_threshold is None
    assert AgentLevel.APPRENTICE.experience_threshold == 100
    assert AgentLevel.JOURNEYMAN.experience_threshold == 180

    for lower, higher in zip(levels, levels[1:]):
        assert lower.next_level is higher
        assert lower.rank < higher.rank
        assert lower.base_weekly_wage < higher.base_weekly_wage
        assert lower.power_multiplier < higher.power_multiplier


def test_races_and_classes_are_fully_tabulated():
    for race in Race:
        low, high = race.age_range
        assert 0 < low < high
        assert set(race.attribute_modifiers) <= set(AttributeType)

    for agent_class in AgentClass:
        assert len(agent_class.primary_attributes) == 3


def test_mission_types_cover_party_sizes_and_loot_tables():
    for mission_type in MissionType:
        low, high = mission_type.party_size_range
        assert 1 <= low <= high <= 6
        assert len(mission_type.primary_attributes) == 4
        assert sum(MISSION_CATEGORY_WEIGHTS[mission_type].values()) == 100


def test_outcomes_map_to_terminal_statuses():
    for outcome in MissionOutcome:
        assert outcome.mission_status.is_terminal
    assert MissionOutcome.PARTIAL_SUCCESS.is_success
    assert not MissionOutcome.FAILURE.is_success
    assert not MissionStatus.IN_PROGRESS.is_terminal
    assert MissionOutcome.FAILURE.reward_multiplier == 0.0


def test_party_synergy_table():
    assert party_synergy(0) == 0.0
    assert party_synergy(1) == 1.0
    assert party_synergy(4) == 1.2
    assert party_synergy(12) == party_synergy(6) == 1.25


def test_tier_stakes_weights_list_every_stakes_tier():
    for tier in GuildTier:
        assert list(tier.stakes_weights) == list(MissionStakes)
        assert sum(tier.stakes_weights.values()) == 100
    assert GuildTier.FLEDGLING.stakes_weights[MissionStakes.CRITICAL] == 0


def test_loot_tiers_and_rarity_tables():
    assert LootTier.POOR.shifted(-1) is LootTier.POOR
    assert LootTier.LEGENDARY.shifted(2) is LootTier.LEGENDARY
    assert LootTier.COMMON.shifted(1) is LootTier.UNCOMMON

    for tier in LootTier:
        assert sum(tier.rarity_weights.values()) == 100
        assert set(tier.rarity_weights) <= set(ItemRarity)


def test_injury_ladder_is_cumulative():
    bounds = [bound for bound, _ in INJURY_TYPE_LADDER]
    assert bounds == sorted(bounds)
    assert bounds[-1] == 1.0


def test_confidence_thresholds_descend():
    bounds = [bound for bound, _ in CONFIDENCE_THRESHOLDS]
    assert bounds == sorted(bounds, reverse=True)
    assert CONFIDENCE_THRESHOLDS[-1] == (0.0, ConfidenceBand.FAILING)


def test_facility_tables():
    assert FacilityRating.ADEQUATE.roster_capacity == 16
    assert FacilityRating.POOR.upgrade_cost == 500
    assert all(facility.base_maintenance > 0 for facility in FacilityType)


def test_season_phase_by_month():
    assert SeasonPhase.for_month(1) is SeasonPhase.SPRING_THAW
    assert SeasonPhase.for_month(6) is SeasonPhase.SUMMER_CAMPAIGN
    assert SeasonPhase.for_month(12) is SeasonPhase.WINTERS_END
