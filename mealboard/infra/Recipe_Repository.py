import logging
import uuid
from datetime import datetime, timezone
from typing import List

from mealboard.domain.Ingredient import Ingredient
from mealboard.domain.Recipe import Recipe
from mealboard.domain.errors import RecipeNotFound, RemoteFailure
from mealboard.infra.json_store import atomic_write, read_json
from mealboard.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Per-user recipe store kept in a single JSON file.

    Each row: {id, user_id, name, is_rotation, created_at, ingredients: [...]}.
    """

    def __init__(self, recipes_file=RECIPES_FILE):
        self.recipes_file = recipes_file

    def _load_rows(self) -> List[dict]:
        rows = read_json(self.recipes_file, [])
        if not isinstance(rows, list):
            logger.error(f"Recipes file has unexpected shape: {type(rows).__name__}")
            raise RemoteFailure("Couldn't load recipes.")
        return rows

    def _find_row(self, rows, recipe_id) -> dict:
        for row in rows:
            if row.get("id") == recipe_id:
                return row
        raise RecipeNotFound(f"Recipe '{recipe_id}' not found.")

    def list_recipes(self, user_id: str) -> List[Recipe]:
        """Recipes owned by user_id, oldest first, each with its ingredients."""
        rows = [r for r in self._load_rows() if r.get("user_id") == user_id]
        rows.sort(key=lambda r: r.get("created_at", ""))
        return [Recipe.from_dict(r) for r in rows]

    def create_recipe(self, user_id: str, name: str, is_rotation: bool = False) -> str:
        rows = self._load_rows()
        recipe_id = str(uuid.uuid4())
        rows.append({
            "id": recipe_id,
            "user_id": user_id,
            "name": name,
            "is_rotation": is_rotation,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "ingredients": [],
        })
        atomic_write(self.recipes_file, rows)
        logger.info("Created recipe %s (%s) for user %s", recipe_id, name, user_id)
        return recipe_id

    def add_ingredient(self, recipe_id: str, name: str, quantity, unit: str) -> Ingredient:
        rows = self._load_rows()
        row = self._find_row(rows, recipe_id)
        ingredient = Ingredient(name, quantity, unit)
        row.setdefault("ingredients", []).append(ingredient.to_dict())
        atomic_write(self.recipes_file, rows)
        return ingredient

    def set_rotation(self, recipe_id: str, is_rotation: bool):
        rows = self._load_rows()
        row = self._find_row(rows, recipe_id)
        row["is_rotation"] = bool(is_rotation)
        atomic_write(self.recipes_file, rows)

    def delete_recipe(self, recipe_id: str):
        rows = self._load_rows()
        row = self._find_row(rows, recipe_id)
        rows.remove(row)
        atomic_write(self.recipes_file, rows)
        logger.info("Deleted recipe %s", recipe_id)
