"""Tests for the injectable random source helpers."""

import random
from collections import Counter

import pytest

from guildsim.sampling import make_rng, new_id, weighted_choice


def test_weighted_choice_never_picks_zero_weight():
    rng = random.Random(3)
    table = {"never": 0, "always": 5}
    assert {weighted_choice(table, rng) for _ in range(200)} == {"always"}


def test_weighted_choice_respects_proportions():
    rng = random.Random(11)
    counts = Counter(weighted_choice({"a": 75, "b": 25}, rng) for _ in range(10_000))
    assert 0.72 < counts["a"] / 10_000 < 0.78


def test_weighted_choice_is_reproducible():
    table = {"a": 1, "b": 2, "c": 3}
    first = [weighted_choice(table, random.Random(42)) for _ in range(5)]
    second = [weighted_choice(table, random.Random(42)) for _ in range(5)]
    assert first == second


def test_weighted_choice_rejects_empty_tables():
    with pytest.raises(ValueError):
        weighted_choice({}, random.Random(0))
    with pytest.raises(ValueError):
        weighted_choice({"a": 0}, random.Random(0))


def test_new_id_follows_seed():
    assert new_id(make_rng(7)) == new_id(make_rng(7))
    assert new_id(make_rng(7)) != new_id(make_rng(8))
    assert len(new_id(make_rng(7))) == 36
