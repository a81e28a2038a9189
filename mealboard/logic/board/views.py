"""Read-only dictionaries describing the board and catalog for the web layer and PDF export."""
from typing import Any, Dict, List

from mealboard.domain.Plan import Plan
from mealboard.domain.RecipeCatalog import RecipeCatalog
from mealboard.utilities.constants import BLOCK_LABELS


def meal_label(plan: Plan, meal) -> str:
    if meal.needs_recipe:
        recipe = plan.catalog.get(meal.recipe_id)
        return recipe.name if recipe else "Unknown recipe"
    return BLOCK_LABELS.get(meal.type, meal.type)


def board_view(plan: Plan) -> Dict[str, Any]:
    days: List[Dict[str, Any]] = []
    for index, day in enumerate(plan.days):
        entry = {"index": index, "label": day.label, "meal": None}
        meal = plan.meals.get(day.meal_id) if day.meal_id else None
        if meal is not None:
            entry["meal"] = {
                "id": meal.id,
                "type": meal.type,
                "recipe_id": meal.recipe_id,
                "title": meal_label(plan, meal),
                "span": "2-night meal" if meal.is_two_night else "1-night meal",
                "continuation": day.continuation,
            }
        days.append(entry)

    planned, total = plan.progress()
    pending_id = plan.pending_two_night_meal_id
    pending = None
    if pending_id and pending_id in plan.meals:
        pending_meal = plan.meals[pending_id]
        pending = {
            "meal_id": pending_id,
            "hint": f"Pick night 2 for {meal_label(plan, pending_meal)}.",
        }
    return {
        "days": days,
        "progress": {"planned": planned, "total": total, "text": f"{planned} of {total} nights planned"},
        "pending": pending,
        "active_recipe_id": plan.active_recipe_id,
    }


def recipe_view(recipe, active_recipe_id=None) -> Dict[str, Any]:
    return dict(
        recipe.to_dict(),
        status="Rotation" if recipe.is_rotation else "Trial",
        active=recipe.id == active_recipe_id,
    )


def catalog_view(catalog: RecipeCatalog, active_recipe_id=None) -> Dict[str, Any]:
    return {
        "rotation": [recipe_view(r, active_recipe_id) for r in catalog.rotation()],
        "trial": [recipe_view(r, active_recipe_id) for r in catalog.trial()],
        "active_recipe_id": active_recipe_id,
        "count": len(catalog),
    }


def grocery_view(plan: Plan) -> Dict[str, Any]:
    grocery = plan.build_grocery_list()
    return {
        "items": grocery.to_dict(plan.checked_items),
        "count": len(grocery),
        "export": grocery.export_text(plan.checked_items),
    }
