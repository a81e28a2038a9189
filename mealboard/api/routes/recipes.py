from fastapi import APIRouter, Depends

from mealboard.api.dependencies import get_planner, unwrap
from mealboard.logic.board.service import PlannerService
from mealboard.logic.board.views import catalog_view, recipe_view
from mealboard.utilities.validators import IngredientInput, RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _catalog(plan):
    return catalog_view(plan.catalog, plan.active_recipe_id)


@router.get("")
def list_recipes(planner: PlannerService = Depends(get_planner)):
    """Cached recipes split into rotation and trial."""
    return planner.read(_catalog)


@router.post("/reload")
def reload_recipes(planner: PlannerService = Depends(get_planner)):
    unwrap(planner.load_recipes())
    return planner.read(_catalog)


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput, planner: PlannerService = Depends(get_planner)):
    ing = payload.ingredient
    recipe = unwrap(planner.add_recipe(payload.name, ing.name, ing.quantity, ing.unit))
    return planner.read(lambda plan: recipe_view(recipe, plan.active_recipe_id))


@router.post("/{recipe_id}/ingredients")
def add_ingredient(recipe_id: str, payload: IngredientInput, planner: PlannerService = Depends(get_planner)):
    recipe = unwrap(planner.add_ingredient(recipe_id, payload.name, payload.quantity, payload.unit))
    return planner.read(lambda plan: recipe_view(recipe, plan.active_recipe_id))


@router.post("/{recipe_id}/promote")
def promote_recipe(recipe_id: str, planner: PlannerService = Depends(get_planner)):
    recipe = unwrap(planner.promote_recipe(recipe_id))
    return planner.read(lambda plan: recipe_view(recipe, plan.active_recipe_id))


@router.post("/{recipe_id}/select")
def select_recipe(recipe_id: str, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.select_recipe(recipe_id))
    return planner.read(_catalog)


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.delete_recipe(recipe_id))
    return planner.read(_catalog)
