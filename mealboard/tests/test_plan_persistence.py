import json
import unittest
from mealboard.domain.Placement import IDLE
from mealboard.domain.Plan import Plan
from mealboard.domain.Recipe import Recipe
from mealboard.domain.RecipeCatalog import RecipeCatalog
from mealboard.utilities.constants import WEEKDAYS


class TestPlanPersistence(unittest.TestCase):

    def setUp(self):
        self.catalog = RecipeCatalog([Recipe("r1", "Chili"), Recipe("r2", "Pasta")])

    def test_to_dict_shape(self):
        plan = Plan(self.catalog).ensure_active_recipe()
        meal = plan.place_block("twoNight", 2)
        plan.place_block("twoNight", 3)
        doc = plan.to_dict()
        self.assertEqual(set(doc), {"days", "meals", "activeRecipeId", "checkedItems"})
        self.assertEqual(len(doc["days"]), 7)
        self.assertEqual(doc["days"][3], {"label": "Wed", "mealId": meal.id, "continuation": True})
        self.assertEqual(doc["meals"][meal.id], {"id": meal.id, "type": "twoNight", "recipeId": "r1"})
        self.assertEqual(doc["activeRecipeId"], "r1")
        json.dumps(doc)

    def test_round_trip_preserves_board(self):
        plan = Plan(self.catalog).ensure_active_recipe()
        plan.place_block("oneNight", 0)
        plan.place_block("mum", 6)
        restored = Plan.from_dict(plan.to_dict(), self.catalog)
        self.assertEqual(restored.to_dict(), plan.to_dict())

    def test_short_days_list_is_padded(self):
        doc = {
            "days": [
                {"label": "Sun", "mealId": "m1", "continuation": False},
                {"label": "Mon", "mealId": None, "continuation": False},
                {"label": "Tue", "mealId": None, "continuation": False},
            ],
            "meals": {"m1": {"id": "m1", "type": "oneNight", "recipeId": "r2"}},
            "activeRecipeId": "r2",
            "checkedItems": [],
        }
        plan = Plan.from_dict(doc, self.catalog)
        self.assertEqual([d.label for d in plan.days], list(WEEKDAYS))
        self.assertEqual(plan.days[0].meal_id, "m1")
        for day in plan.days[3:]:
            self.assertIsNone(day.meal_id)
            self.assertFalse(day.continuation)
        self.assertEqual(plan.active_recipe_id, "r2")

    def test_missing_sections_default_to_empty(self):
        plan = Plan.from_dict({}, self.catalog)
        self.assertEqual(len(plan.days), 7)
        self.assertEqual(plan.meals, {})
        self.assertEqual(plan.checked_items, set())
        self.assertEqual(plan.active_recipe_id, "r1")

    def test_non_dict_document(self):
        plan = Plan.from_dict(None)
        self.assertEqual(len(plan.days), 7)
        self.assertIsNone(plan.active_recipe_id)

    def test_stored_labels_are_ignored(self):
        plan = Plan.from_dict({"days": [{"label": "Monday"}]})
        self.assertEqual(plan.days[0].label, "Sun")

    def test_dangling_references_are_dropped(self):
        doc = {
            "days": [{"mealId": "ghost"}, {"mealId": "m1"}],
            "meals": {
                "m1": {"id": "m1", "type": "takeaway", "recipeId": None},
                "orphan": {"id": "orphan", "type": "mum", "recipeId": None},
                "bad": {"id": "bad", "type": "brunch"},
            },
        }
        with self.assertLogs("mealboard.domain.Plan", level="WARNING"):
            plan = Plan.from_dict(doc, self.catalog)
        self.assertTrue(plan.days[0].is_empty)
        self.assertEqual(list(plan.meals), ["m1"])

    def test_meal_key_wins_over_embedded_id(self):
        doc = {"days": [{"mealId": "k1"}], "meals": {"k1": {"id": "other", "type": "mum"}}}
        plan = Plan.from_dict(doc)
        self.assertEqual(plan.meals["k1"].id, "k1")

    def test_numeric_meal_reference_matches_meal_key(self):
        plan = Plan.from_dict({"days": [{"mealId": 5}], "meals": {"5": {"type": "mum"}}})
        self.assertEqual(plan.days[0].meal_id, "5")
        self.assertEqual(list(plan.meals), ["5"])
        self.assertEqual(plan.to_dict()["days"][0]["mealId"], "5")

    def test_unknown_active_recipe_is_reconciled(self):
        plan = Plan.from_dict({"activeRecipeId": "deleted"}, self.catalog)
        self.assertEqual(plan.active_recipe_id, "r1")

    def test_missing_active_recipe_keeps_current(self):
        plan = Plan(self.catalog)
        plan.select_recipe("r2")
        plan.load_dict({"days": []})
        self.assertEqual(plan.active_recipe_id, "r2")

    def test_load_resets_pending_placement(self):
        plan = Plan(self.catalog).ensure_active_recipe()
        plan.place_block("twoNight", 1)
        plan.load_dict({})
        self.assertIs(plan.placement, IDLE)

    def test_checked_items_sorted_on_save(self):
        plan = Plan.from_dict({"checkedItems": ["rice 1 kg", "beans 2 cans"]})
        self.assertEqual(plan.to_dict()["checkedItems"], ["beans 2 cans", "rice 1 kg"])


if __name__ == '__main__':
    unittest.main()
