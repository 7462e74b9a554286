import random
import unittest

from mealselect.domain.GoalWeights import GoalWeights
from mealselect.domain.PlannedMeal import PlannedMeal
from mealselect.domain.PlanProgress import PlanProgress
from mealselect.domain.SlotContext import SlotContext
from mealselect.logic.selection.cultural import cultural_meal_probability, should_use_cultural_meal


class FixedRandom:
    """Random source that always draws the same value."""
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


class ExplodingRandom:
    def random(self):
        raise AssertionError("random source must not be consulted")


def _meal(i, culture=None):
    return PlannedMeal(i, i // 3, "lunch", title=f"meal {i}", cultural_source=culture)


class TestCulturalMealProbability(unittest.TestCase):

    def setUp(self):
        self.progress = PlanProgress(total_meals=20, optimal_cultural_meal_count=4, available_cultural_meals=5)

    def test_empty_pool_is_never_cultural(self):
        self.progress.available_cultural_meals = 0
        for cultural in (0.0, 0.5, 0.9, 1.0):
            weights = GoalWeights(cultural=cultural)
            slot = SlotContext(0, "dinner", 0)
            self.assertEqual(cultural_meal_probability(self.progress, slot, weights), 0.0)
            self.assertFalse(should_use_cultural_meal(self.progress, slot, weights, rng=ExplodingRandom()))

    def test_quota_met_blocks_without_high_weight(self):
        progress = PlanProgress(20, 4, cultural_meals_used=4, available_cultural_meals=5)
        slot = SlotContext(3, "dinner", 10)
        for cultural in (0.0, 0.5, 0.8):
            self.assertFalse(should_use_cultural_meal(progress, slot, GoalWeights(cultural=cultural),
                                                      rng=ExplodingRandom()))

    def test_quota_met_allows_very_high_weight(self):
        progress = PlanProgress(20, 4, cultural_meals_used=6, available_cultural_meals=5)
        slot = SlotContext(3, "breakfast", 10)
        weights = GoalWeights(cultural=0.85)
        self.assertEqual(cultural_meal_probability(progress, slot, weights), 1.0)
        self.assertTrue(should_use_cultural_meal(progress, slot, weights, rng=FixedRandom(0.999)))

    def test_base_probability_is_cultural_weight(self):
        slot = SlotContext(0, "lunch", 0)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, slot, GoalWeights(cultural=0.5)), 0.5)

    def test_pacing_boost_when_behind(self):
        self.progress.cultural_meals_used = 1
        slot = SlotContext(3, "lunch", 10)
        # 1/4 cultural progress is behind 10/20 plan progress
        self.assertAlmostEqual(cultural_meal_probability(self.progress, slot, GoalWeights(cultural=0.5)), 0.7)

    def test_no_pacing_boost_when_on_track(self):
        self.progress.cultural_meals_used = 2
        slot = SlotContext(3, "lunch", 10)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, slot, GoalWeights(cultural=0.5)), 0.5)

    def test_meal_type_bias(self):
        weights = GoalWeights(cultural=0.5)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, SlotContext(0, "dinner", 0), weights), 0.6)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, SlotContext(0, "breakfast", 0), weights), 0.4)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, SlotContext(0, "snack", 0), weights), 0.5)

    def test_anti_clustering_penalty(self):
        self.progress.cultural_meals_used = 2
        previous = [_meal(0), _meal(1, "Japanese"), _meal(2, "Mexican")]
        slot = SlotContext(1, "lunch", 3, previous)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, slot, GoalWeights(cultural=0.5)), 0.2)

    def test_anti_clustering_only_looks_at_last_three(self):
        self.progress.cultural_meals_used = 2
        previous = [_meal(0, "Japanese"), _meal(1, "Mexican"), _meal(2), _meal(3), _meal(4, "Indian")]
        slot = SlotContext(1, "lunch", 5, previous)
        self.assertAlmostEqual(cultural_meal_probability(self.progress, slot, GoalWeights(cultural=0.5)), 0.5)

    def test_probability_is_clamped(self):
        self.progress.cultural_meals_used = 1
        high = cultural_meal_probability(self.progress, SlotContext(3, "dinner", 10), GoalWeights(cultural=1.0))
        self.assertEqual(high, 1.0)
        self.progress.cultural_meals_used = 0
        low = cultural_meal_probability(self.progress, SlotContext(0, "breakfast", 0), GoalWeights(cultural=0.0))
        self.assertEqual(low, 0.0)

    def test_engine_does_not_mutate_progress(self):
        slot = SlotContext(0, "dinner", 0)
        should_use_cultural_meal(self.progress, slot, GoalWeights(cultural=0.7), rng=FixedRandom(0.1))
        self.assertEqual(self.progress.cultural_meals_used, 0)
        self.assertEqual(self.progress.available_cultural_meals, 5)


class TestCulturalMealDecision(unittest.TestCase):

    def setUp(self):
        self.progress = PlanProgress(total_meals=20, optimal_cultural_meal_count=4, available_cultural_meals=5)
        self.slot = SlotContext(0, "lunch", 0)
        self.weights = GoalWeights(cultural=0.7)

    def test_draw_below_probability_uses_cultural(self):
        rng = FixedRandom(0.69)
        self.assertTrue(should_use_cultural_meal(self.progress, self.slot, self.weights, rng=rng))
        self.assertEqual(rng.calls, 1)

    def test_draw_at_probability_does_not(self):
        self.assertFalse(should_use_cultural_meal(self.progress, self.slot, self.weights, rng=FixedRandom(0.7)))

    def test_seeded_frequency_tracks_probability(self):
        rng = random.Random(42)
        hits = sum(should_use_cultural_meal(self.progress, self.slot, self.weights, rng=rng) for _ in range(2000))
        self.assertAlmostEqual(hits / 2000, 0.7, delta=0.05)


if __name__ == '__main__':
    unittest.main()
