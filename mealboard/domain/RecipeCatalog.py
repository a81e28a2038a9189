"""RecipeCatalog: the planner's cached, ordered snapshot of the user's recipes."""
import logging
from typing import Iterable, List, Optional
from mealboard.domain.Recipe import Recipe
from mealboard.domain.errors import RecipeNotFound

logger = logging.getLogger(__name__)


class RecipeCatalog:
    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self.recipes: List[Recipe] = list(recipes) if recipes else []

    def __len__(self) -> int:
        return len(self.recipes)

    def __iter__(self):
        return iter(self.recipes)

    def __contains__(self, recipe_id) -> bool:
        return self.get(recipe_id) is not None

    def get(self, recipe_id) -> Optional[Recipe]:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def require(self, recipe_id) -> Recipe:
        recipe = self.get(recipe_id)
        if recipe is None:
            raise RecipeNotFound(f"Recipe '{recipe_id}' not found.")
        return recipe

    def first_id(self) -> Optional[str]:
        return self.recipes[0].id if self.recipes else None

    def replace(self, recipes: Iterable[Recipe]):
        '''Swaps in a freshly loaded snapshot.'''
        self.recipes = list(recipes)
        return self

    def add(self, recipe: Recipe):
        self.recipes.append(recipe)
        return self

    def remove(self, recipe_id) -> Optional[Recipe]:
        recipe = self.get(recipe_id)
        if recipe is not None:
            self.recipes.remove(recipe)
        return recipe

    def clear(self):
        self.recipes = []
        return self

    def promote(self, recipe_id) -> Recipe:
        '''Marks a trial recipe as part of the rotation.'''
        recipe = self.require(recipe_id)
        recipe.is_rotation = True
        logger.debug("Promoted recipe %s to rotation", recipe_id)
        return recipe

    def rotation(self) -> List[Recipe]:
        return [r for r in self.recipes if r.is_rotation]

    def trial(self) -> List[Recipe]:
        return [r for r in self.recipes if not r.is_rotation]

    def resolve_active(self, active_recipe_id) -> Optional[str]:
        """Return active_recipe_id if it is cached, else the first recipe id (None when empty)."""
        if not self.recipes:
            return None
        if active_recipe_id is not None and active_recipe_id in self:
            return active_recipe_id
        return self.first_id()

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(r) for r in self.recipes)
        return f"Recipes:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
