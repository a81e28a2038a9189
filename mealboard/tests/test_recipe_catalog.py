import unittest
from mealboard.domain.Ingredient import Ingredient
from mealboard.domain.Plan import Plan
from mealboard.domain.Recipe import Recipe
from mealboard.domain.RecipeCatalog import RecipeCatalog
from mealboard.domain.errors import RecipeNotFound


class TestRecipeCatalog(unittest.TestCase):

    def setUp(self):
        self.catalog = RecipeCatalog([
            Recipe("a", "Tacos", False, [Ingredient("tortilla", 8, "pcs")]),
            Recipe("b", "Risotto", True, []),
            Recipe("c", "Stew", False, []),
        ])
        self.plan = Plan(self.catalog)

    def test_promote_flips_rotation(self):
        recipe = self.catalog.promote("a")
        self.assertTrue(recipe.is_rotation)
        self.assertEqual([r.id for r in self.catalog.rotation()], ["a", "b"])
        self.assertEqual([r.id for r in self.catalog.trial()], ["c"])

    def test_promote_unknown_recipe(self):
        with self.assertRaises(RecipeNotFound):
            self.catalog.promote("zzz")

    def test_ensure_active_picks_first_when_unset(self):
        self.plan.ensure_active_recipe()
        self.assertEqual(self.plan.active_recipe_id, "a")

    def test_ensure_active_keeps_valid_pointer(self):
        self.plan.active_recipe_id = "c"
        self.plan.ensure_active_recipe()
        self.assertEqual(self.plan.active_recipe_id, "c")

    def test_ensure_active_after_deleting_active(self):
        self.plan.select_recipe("b")
        self.catalog.remove("b")
        self.plan.ensure_active_recipe()
        self.assertEqual(self.plan.active_recipe_id, "a")

    def test_ensure_active_with_empty_catalog(self):
        self.plan.select_recipe("b")
        self.catalog.clear()
        self.plan.ensure_active_recipe()
        self.assertIsNone(self.plan.active_recipe_id)

    def test_select_unknown_recipe_keeps_pointer(self):
        self.plan.select_recipe("c")
        with self.assertRaises(RecipeNotFound):
            self.plan.select_recipe("nope")
        self.assertEqual(self.plan.active_recipe_id, "c")

    def test_replace_snapshot(self):
        self.catalog.replace([Recipe("z", "Salad")])
        self.assertEqual(len(self.catalog), 1)
        self.assertIn("z", self.catalog)
        self.assertNotIn("a", self.catalog)

    def test_recipe_from_dict_accepts_both_shapes(self):
        stored = Recipe.from_dict({"id": "1", "name": "Pie", "is_rotation": True,
                                   "ingredients": [{"name": "flour", "quantity": "250", "unit": "g"}]})
        wire = Recipe.from_dict({"id": "2", "name": "Pie", "isRotation": True})
        self.assertTrue(stored.is_rotation)
        self.assertTrue(wire.is_rotation)
        self.assertEqual(stored.ingredients, [Ingredient("flour", 250, "g")])


if __name__ == '__main__':
    unittest.main()
