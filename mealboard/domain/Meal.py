"""Meal domain entity: one placed block on the week board."""
import random
import time
from typing import Optional
from mealboard.utilities.constants import BLOCK_TYPES, RECIPE_BLOCKS, BLOCK_TWO_NIGHT, MEAL_ID_PREFIX


def new_meal_id() -> str:
    '''Time-based id with a random hex suffix, e.g. meal_1718000000000_9f1c2ab3.'''
    return f"{MEAL_ID_PREFIX}{int(time.time() * 1000)}_{random.getrandbits(48):x}"


class Meal:
    def __init__(self, id: str, type: str, recipe_id: Optional[str] = None):
        self.id = id
        self.type = type
        self.recipe_id = recipe_id

    @property
    def needs_recipe(self) -> bool:
        return self.type in RECIPE_BLOCKS

    @property
    def is_two_night(self) -> bool:
        return self.type == BLOCK_TWO_NIGHT

    def __str__(self) -> str:
        return f"Meal {self.id} ({self.type}, recipe={self.recipe_id})"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return (self.id, self.type, self.recipe_id) == (other.id, other.type, other.recipe_id)

    @staticmethod
    def from_dict(data, fallback_id: str = ""):
        '''Builds a Meal from the persisted {id, type, recipeId} shape. Returns None for unusable entries.'''
        if not isinstance(data, dict):
            return None
        meal_type = data.get("type")
        if meal_type not in BLOCK_TYPES:
            return None
        meal_id = data.get("id") or fallback_id
        if not meal_id:
            return None
        recipe_id = data.get("recipeId", data.get("recipe_id"))
        return Meal(str(meal_id), meal_type, str(recipe_id) if recipe_id else None)

    def to_dict(self):
        return {"id": self.id, "type": self.type, "recipeId": self.recipe_id}
