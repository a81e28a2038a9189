"""Grocery list builder.

Provides build_grocery_list(days, meals, catalog): walks the week in weekday
order and sums recipe ingredients per (name, unit).
"""
from typing import Dict, Iterable, Mapping, Tuple
from mealboard.domain.Day import Day
from mealboard.domain.GroceryList import GroceryLine, GroceryList
from mealboard.domain.Meal import Meal
from mealboard.domain.RecipeCatalog import RecipeCatalog


def build_grocery_list(days: Iterable[Day], meals: Mapping[str, Meal], catalog: RecipeCatalog) -> GroceryList:
    """Aggregate the ingredients of every distinct meal on the board.

    Args:
        days: Day slots in weekday order.
        meals: Meal registry keyed by meal id.
        catalog: Cached recipes used to resolve meal.recipe_id.

    Returns:
        GroceryList whose lines keep first-encountered (name, unit) order.
        A two-night meal counts once; same-named ingredients with different
        units stay on separate lines. Takeaway/mum meals and meals whose
        recipe is no longer cached contribute nothing.
    """
    totals: Dict[Tuple[str, str], GroceryLine] = {}
    seen_meals = set()

    for day in days:
        if not day.meal_id or day.meal_id in seen_meals:
            continue
        seen_meals.add(day.meal_id)
        meal = meals.get(day.meal_id)
        if meal is None or not meal.needs_recipe or not meal.recipe_id:
            continue
        recipe = catalog.get(meal.recipe_id)
        if recipe is None:
            continue
        for ing in recipe.ingredients:
            key = (ing.name, ing.unit)
            if key not in totals:
                totals[key] = GroceryLine(ing.name, ing.unit, 0)
            totals[key].quantity += ing.quantity

    return GroceryList(totals.values())


__all__ = ['build_grocery_list']
