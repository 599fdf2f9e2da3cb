"""
tests/test_matchup_service.py - Difficulty helpers and balanced pair selection.

The selector only needs a catalog reader, so these tests use a list-backed
stand-in instead of MongoDB.
"""

import random

import pytest

from superhero_api.exceptions import InsufficientData, InvalidArgument, NoSuitablePair
from superhero_api.models import Hero, User
from superhero_api.services.matchup_service import (
    difficulty_bucket,
    numeric_stat,
    pick_balanced_pair,
    score_pair,
    target_diff_range,
)


def make_hero(hero_id, name, attribute, value):
    return Hero(id=str(hero_id), name=name, powerstats={attribute: str(value)})


class ListHeroStore:
    """Catalog reader over a fixed list, recording the requested limit."""

    def __init__(self, heroes):
        self.heroes = list(heroes)
        self.requested_limit = None

    def list_up_to(self, limit):
        self.requested_limit = limit
        return self.heroes[:limit]


def player(highest_score):
    return User(id="u1", email="p@example.com", username="player",
                higher_lower_game_highest_score=highest_score)


# ======================================================================
# Pure helpers
# ======================================================================


class TestDifficultyBucket:
    @pytest.mark.parametrize("streak", [0, 1, 4])
    def test_easy_below_five(self, streak):
        assert difficulty_bucket(streak) == "easy"

    @pytest.mark.parametrize("streak", [5, 7, 9])
    def test_medium_from_five_to_nine(self, streak):
        assert difficulty_bucket(streak) == "medium"

    @pytest.mark.parametrize("streak", [10, 25, 1000])
    def test_hard_from_ten(self, streak):
        assert difficulty_bucket(streak) == "hard"

    def test_defaults_to_easy(self):
        assert difficulty_bucket() == "easy"
        assert difficulty_bucket(None) == "easy"


class TestTargetDiffRange:
    def test_easy_has_large_gap(self):
        assert target_diff_range("easy") == {"min": 20, "max": 50}

    def test_medium_has_moderate_gap(self):
        assert target_diff_range("medium") == {"min": 10, "max": 25}

    def test_hard_has_small_gap(self):
        assert target_diff_range("hard") == {"min": 3, "max": 15}

    def test_unknown_bucket_falls_back_to_hard(self):
        assert target_diff_range("unknown") == target_diff_range("hard")

    @pytest.mark.parametrize("bucket", ["easy", "medium", "hard", "nightmare"])
    def test_min_below_max(self, bucket):
        r = target_diff_range(bucket)
        assert r["min"] < r["max"]

    def test_returns_a_copy(self):
        target_diff_range("easy")["min"] = 0
        assert target_diff_range("easy")["min"] == 20


class TestNumericStat:
    def test_parses_string_values(self):
        assert numeric_stat(make_hero(1, "A", "strength", "95"), "strength") == 95

    def test_parses_padded_and_fractional_values(self):
        assert numeric_stat(make_hero(1, "A", "strength", " 42 "), "strength") == 42
        assert numeric_stat(make_hero(1, "A", "strength", "12.5"), "strength") == 12.5

    @pytest.mark.parametrize("raw", ["null", "unknown", "", "nan", "inf", "-"])
    def test_non_numeric_values_are_rejected(self, raw):
        assert numeric_stat(make_hero(1, "A", "strength", raw), "strength") is None

    def test_missing_attribute(self):
        assert numeric_stat(Hero(id="1", name="A"), "strength") is None
        assert numeric_stat(make_hero(1, "A", "speed", 50), "strength") is None

    def test_no_hero(self):
        assert numeric_stat(None, "strength") is None


class TestScorePair:
    def test_midpoint_scores_zero(self):
        assert score_pair(35, {"min": 20, "max": 50}) == 0

    def test_in_range_scores_distance_to_midpoint(self):
        assert score_pair(50, {"min": 20, "max": 50}) == 15

    def test_too_close_is_penalized(self):
        assert score_pair(5, {"min": 20, "max": 50}) == 25

    def test_too_far_is_penalized(self):
        assert score_pair(85, {"min": 20, "max": 50}) == 45


# ======================================================================
# pick_balanced_pair
# ======================================================================


class TestPickBalancedPairValidation:
    @pytest.mark.parametrize("attribute", [None, ""])
    def test_missing_attribute(self, attribute):
        store = ListHeroStore([make_hero(1, "A", "strength", 10), make_hero(2, "B", "strength", 40)])
        with pytest.raises(InvalidArgument, match="Attribute is required"):
            pick_balanced_pair(store, attribute)

    def test_unknown_attribute(self):
        store = ListHeroStore([make_hero(1, "A", "strength", 10), make_hero(2, "B", "strength", 40)])
        with pytest.raises(InvalidArgument):
            pick_balanced_pair(store, "charisma")

    def test_fewer_than_two_valid_heroes(self):
        store = ListHeroStore([
            make_hero(1, "HeroOne", "strength", 100),
            Hero(id=None, name="BadHero", powerstats={"strength": "unknown"}),
        ])
        with pytest.raises(InsufficientData, match="Not enough heroes"):
            pick_balanced_pair(store, "strength", player(0))

    def test_empty_catalog(self):
        with pytest.raises(InsufficientData):
            pick_balanced_pair(ListHeroStore([]), "strength")

    def test_identical_values_leave_no_pair(self):
        store = ListHeroStore([make_hero(i, f"Clone{i}", "speed", 50) for i in range(4)])
        with pytest.raises(NoSuitablePair) as exc_info:
            pick_balanced_pair(store, "speed")
        assert isinstance(exc_info.value, InsufficientData)


class TestPickBalancedPair:
    def test_easy_picks_pair_closest_to_window_center(self):
        store = ListHeroStore([
            make_hero(1, "Tank", "strength", 95),
            make_hero(2, "Sidekick", "strength", 60),
            make_hero(3, "Weakling", "strength", 10),
        ])
        for seed in range(10):
            result = pick_balanced_pair(store, "strength", player(2), rng=random.Random(seed))
            assert {result.hero_a.id, result.hero_b.id} == {"1", "2"}
            assert result.diff == 35
            assert result.difficulty == "easy"
            assert result.attribute == "strength"

    def test_medium_prefers_moderate_gap(self):
        store = ListHeroStore([
            make_hero(1, "HeroA", "strength", 50),
            make_hero(2, "HeroB", "strength", 63),
            make_hero(3, "HeroC", "strength", 90),
        ])
        result = pick_balanced_pair(store, "strength", player(7), rng=random.Random(0))
        assert result.difficulty == "medium"
        assert result.diff == 13

    def test_hard_prefers_close_matchups(self):
        store = ListHeroStore([
            make_hero(1, "Edge1", "strength", 80),
            make_hero(2, "Edge2", "strength", 82),
            make_hero(3, "Close1", "strength", 90),
            make_hero(4, "Close2", "strength", 95),
        ])
        result = pick_balanced_pair(store, "strength", player(15), rng=random.Random(3))
        assert result.difficulty == "hard"
        # 80-90 and 82-90 both sit one away from the window center
        assert result.diff in (8, 10)

    def test_no_user_means_easy(self):
        store = ListHeroStore([make_hero(1, "A", "power", 10), make_hero(2, "B", "power", 90)])
        assert pick_balanced_pair(store, "power").difficulty == "easy"

    def test_accepts_user_mapping(self):
        store = ListHeroStore([make_hero(1, "A", "power", 10), make_hero(2, "B", "power", 90)])
        result = pick_balanced_pair(store, "power", {"higherLowerGameHighestScore": 12})
        assert result.difficulty == "hard"

    def test_ignores_heroes_without_numeric_stats(self):
        store = ListHeroStore([
            Hero(id="0", name="NoStats"),
            Hero(id="9", name="NullStats", powerstats={"strength": "null"}),
            make_hero(1, "Strong", "strength", 80),
            make_hero(2, "Stronger", "strength", 90),
        ])
        result = pick_balanced_pair(store, "strength", player(3), rng=random.Random(5))
        assert {result.hero_a.name, result.hero_b.name} == {"Strong", "Stronger"}
        assert result.diff == 10

    def test_zero_gap_pairs_are_never_selected(self):
        store = ListHeroStore([
            make_hero(1, "Twin1", "speed", 35),
            make_hero(2, "Twin2", "speed", 35),
            make_hero(3, "Slow", "speed", 34),
        ])
        for seed in range(10):
            result = pick_balanced_pair(store, "speed", rng=random.Random(seed))
            assert result.diff == 1
            assert "3" in (result.hero_a.id, result.hero_b.id)

    def test_reads_a_bounded_pool(self):
        store = ListHeroStore([make_hero(i, f"H{i}", "speed", i * 7) for i in range(10)])
        pick_balanced_pair(store, "speed", pool_limit=4, rng=random.Random(0))
        assert store.requested_limit == 4

    def test_default_pool_limit(self):
        store = ListHeroStore([make_hero(1, "A", "speed", 10), make_hero(2, "B", "speed", 40)])
        pick_balanced_pair(store, "speed")
        assert store.requested_limit == 150

    def test_same_seed_same_pair(self):
        store = ListHeroStore([make_hero(i, f"H{i}", "combat", v)
                               for i, v in enumerate([0, 35, 70, 105, 140])])
        first = pick_balanced_pair(store, "combat", rng=random.Random(99))
        second = pick_balanced_pair(store, "combat", rng=random.Random(99))
        assert (first.hero_a.id, first.hero_b.id) == (second.hero_a.id, second.hero_b.id)

    def test_ties_are_spread_across_seeds(self):
        # Four pairs share the perfect gap of 35
        store = ListHeroStore([make_hero(i, f"H{i}", "combat", v)
                               for i, v in enumerate([0, 35, 70, 105, 140])])
        chosen = {
            frozenset((r.hero_a.id, r.hero_b.id))
            for r in (pick_balanced_pair(store, "combat", rng=random.Random(seed)) for seed in range(40))
        }
        assert len(chosen) > 1
        assert all(len(pair) == 2 for pair in chosen)

    def test_catalog_is_not_mutated(self):
        heroes = [make_hero(i, f"H{i}", "speed", i * 11) for i in range(6)]
        store = ListHeroStore(heroes)
        pick_balanced_pair(store, "speed", rng=random.Random(1))
        assert [h.id for h in store.heroes] == [str(i) for i in range(6)]

    def test_random_pools_always_yield_distinct_heroes_with_a_gap(self):
        gen = random.Random(7)
        for _ in range(25):
            size = gen.randint(2, 30)
            values = [gen.randint(0, 100) for _ in range(size)]
            if len(set(values)) < 2:
                values[0] = values[1] + 1
            store = ListHeroStore([make_hero(i, f"H{i}", "intelligence", v) for i, v in enumerate(values)])
            result = pick_balanced_pair(store, "intelligence", player(gen.randint(0, 20)),
                                        rng=random.Random(gen.random()))
            assert result.hero_a.id != result.hero_b.id
            assert result.diff > 0
