import unittest

from mealselect.domain.CandidateMeal import CandidateMeal, Nutrition
from mealselect.logic.selection.compatibility import (
    matches_cultural_background, is_compatible_with_restriction, filter_compatible_meals,
)


def _meal(id, culture="Japanese", ingredients=("tofu", "rice", "ginger"), instructions=("Stir fry",),
          cook_time=20, difficulty=2.0, nutrition=None, compatibility=None):
    return CandidateMeal(id, id.title(), culture, list(ingredients), list(instructions),
                         cook_time, difficulty, nutrition, compatibility)


class TestCulturalBackground(unittest.TestCase):

    def test_empty_background_matches_everything(self):
        self.assertTrue(matches_cultural_background(_meal("a"), []))
        self.assertTrue(matches_cultural_background(_meal("a", culture=""), ["", "  "]))

    def test_background_contained_in_culture(self):
        self.assertTrue(matches_cultural_background(_meal("a", culture="Japanese"), ["japan"]))

    def test_culture_contained_in_background(self):
        self.assertTrue(matches_cultural_background(_meal("a", culture="Indian"), ["South Indian"]))

    def test_accents_are_ignored(self):
        self.assertTrue(matches_cultural_background(_meal("a", culture="Québécois"), ["quebecois"]))

    def test_unrelated_or_missing_culture_fails(self):
        self.assertFalse(matches_cultural_background(_meal("a", culture="Mexican"), ["Italian", "Lebanese"]))
        self.assertFalse(matches_cultural_background(_meal("a", culture=""), ["Italian"]))


class TestDietaryRestrictions(unittest.TestCase):

    def setUp(self):
        self.tofu = _meal("tofu bowl")
        self.chicken = _meal("chicken rice", ingredients=("chicken thighs", "rice"))
        self.omelette = _meal("omelette", ingredients=("eggs", "spinach"))
        self.pasta = _meal("pasta", ingredients=("pasta", "tomatoes"), instructions=("Top with parmesan",))
        self.satay = _meal("satay", ingredients=("tofu", "peanut sauce"))
        self.ramen = _meal("ramen", ingredients=("ramen", "soy sauce", "scallions"))

    def test_plain_meal_passes_known_restrictions(self):
        for restriction in ("vegetarian", "vegan", "gluten-free", "dairy-free", "nut-free", "low-sodium"):
            self.assertTrue(is_compatible_with_restriction(self.tofu, restriction), restriction)

    def test_vegetarian_excludes_meat(self):
        self.assertFalse(is_compatible_with_restriction(self.chicken, "vegetarian"))
        self.assertTrue(is_compatible_with_restriction(self.omelette, "vegetarian"))

    def test_vegan_excludes_eggs_and_dairy(self):
        self.assertFalse(is_compatible_with_restriction(self.omelette, "vegan"))
        self.assertFalse(is_compatible_with_restriction(self.pasta, "vegan"))
        self.assertFalse(is_compatible_with_restriction(self.chicken, "Vegan"))

    def test_gluten_and_dairy_free_read_instructions_too(self):
        self.assertFalse(is_compatible_with_restriction(self.pasta, "gluten-free"))
        self.assertFalse(is_compatible_with_restriction(self.pasta, "dairy-free"))

    def test_nut_free_and_low_sodium(self):
        self.assertFalse(is_compatible_with_restriction(self.satay, "nut-free"))
        self.assertFalse(is_compatible_with_restriction(self.ramen, "low-sodium"))
        self.assertTrue(is_compatible_with_restriction(self.ramen, "nut-free"))

    def test_catalog_compatibility_overrides_keywords(self):
        meal = _meal("toast", ingredients=("vegan butter", "bread"), compatibility=["Dairy-Free"])
        self.assertTrue(is_compatible_with_restriction(meal, "dairy-free"))
        self.assertFalse(is_compatible_with_restriction(meal, "gluten-free"))

    def test_keto_needs_low_carb_nutrition(self):
        self.assertTrue(is_compatible_with_restriction(_meal("a", nutrition=Nutrition(carbs=10)), "keto"))
        self.assertFalse(is_compatible_with_restriction(_meal("b", nutrition=Nutrition(carbs=20)), "keto"))
        self.assertFalse(is_compatible_with_restriction(_meal("c"), "keto"))

    def test_unknown_restriction_is_not_enforced(self):
        self.assertTrue(is_compatible_with_restriction(self.chicken, "halal"))
        self.assertTrue(is_compatible_with_restriction(self.chicken, " "))


class TestFilterCompatibleMeals(unittest.TestCase):

    def setUp(self):
        self.meals = [
            _meal("katsu", culture="Japanese", ingredients=("chicken breast", "panko"), cook_time=45, difficulty=3),
            _meal("bean soup", culture="Mexican", ingredients=("black beans", "onion"), cook_time=30, difficulty=1.5),
            _meal("tamagoyaki", culture="Japanese", ingredients=("eggs", "dashi"), cook_time=15, difficulty=2.5),
            _meal("osso buco", culture="Italian", ingredients=("veal shanks", "wine"), cook_time=150, difficulty=4),
        ]

    def _ids(self, meals):
        return [m.id for m in meals]

    def test_no_filters_keeps_catalog(self):
        self.assertEqual(self._ids(filter_compatible_meals(self.meals)), self._ids(self.meals))

    def test_culture_filter_keeps_catalog_order(self):
        result = filter_compatible_meals(self.meals, ["Japanese"])
        self.assertEqual(self._ids(result), ["katsu", "tamagoyaki"])

    def test_every_restriction_must_hold(self):
        self.assertEqual(self._ids(filter_compatible_meals(self.meals, dietary_restrictions=["vegetarian"])),
                         ["bean soup", "tamagoyaki"])
        self.assertEqual(self._ids(filter_compatible_meals(self.meals, dietary_restrictions=["vegetarian", "vegan"])),
                         ["bean soup"])

    def test_max_cook_time(self):
        self.assertEqual(self._ids(filter_compatible_meals(self.meals, max_cook_time=30)), ["bean soup", "tamagoyaki"])

    def test_max_difficulty(self):
        self.assertEqual(self._ids(filter_compatible_meals(self.meals, max_difficulty=2.5)),
                         ["bean soup", "tamagoyaki"])

    def test_filters_combine(self):
        result = filter_compatible_meals(self.meals, ["Japanese", "Mexican"], ["vegan"], max_cook_time=20)
        self.assertEqual(result, [])

    def test_logs_summary(self):
        with self.assertLogs('mealselect.logic.selection.compatibility', level='INFO') as logs:
            filter_compatible_meals(self.meals, ["Italian"])
        self.assertIn("to 1 compatible", logs.output[0])


if __name__ == '__main__':
    unittest.main()
