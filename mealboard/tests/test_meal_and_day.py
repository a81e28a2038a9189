import re
import unittest
from mealboard.domain.Day import Day
from mealboard.domain.Ingredient import Ingredient
from mealboard.domain.Meal import Meal, new_meal_id


class TestMeal(unittest.TestCase):

    def test_new_meal_id_format(self):
        self.assertRegex(new_meal_id(), re.compile(r"^meal_\d+_[0-9a-f]+$"))

    def test_from_dict(self):
        meal = Meal.from_dict({"id": "m1", "type": "twoNight", "recipeId": "r1"})
        self.assertEqual(meal, Meal("m1", "twoNight", "r1"))
        self.assertTrue(meal.is_two_night)
        self.assertTrue(meal.needs_recipe)

    def test_from_dict_rejects_unusable_entries(self):
        self.assertIsNone(Meal.from_dict("m1"))
        self.assertIsNone(Meal.from_dict({"id": "m1", "type": "brunch"}))
        self.assertIsNone(Meal.from_dict({"type": "mum"}))
        self.assertEqual(Meal.from_dict({"type": "mum"}, fallback_id="k").id, "k")

    def test_to_dict(self):
        self.assertEqual(Meal("m2", "takeaway").to_dict(), {"id": "m2", "type": "takeaway", "recipeId": None})
        self.assertFalse(Meal("m2", "takeaway").needs_recipe)


class TestDay(unittest.TestCase):

    def test_assign_and_clear(self):
        day = Day("Fri")
        day.assign("m1", continuation=True)
        self.assertFalse(day.is_empty)
        self.assertEqual(str(day), "Fri: m1 (night 2)")
        day.clear()
        self.assertTrue(day.is_empty)
        self.assertFalse(day.continuation)

    def test_label_is_read_only(self):
        with self.assertRaises(AttributeError):
            Day("Sun").label = "Monday"


class TestIngredient(unittest.TestCase):

    def test_from_dict_coerces_quantity(self):
        self.assertEqual(Ingredient.from_dict({"name": "rice", "quantity": "0.5", "unit": "kg"}).quantity, 0.5)
        self.assertEqual(Ingredient.from_dict({"name": "rice", "quantity": "lots"}).quantity, 0)
        self.assertEqual(Ingredient.from_dict(None), Ingredient("", 0, ""))

    def test_str(self):
        self.assertEqual(str(Ingredient("beef", 500.0, "g")), "beef 500 g")


if __name__ == '__main__':
    unittest.main()
