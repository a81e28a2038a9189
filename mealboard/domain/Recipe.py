"""Recipe domain entity: id, name, rotation flag, ordered ingredients."""
from typing import List, Optional
from mealboard.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, id: str = "", name: str = "", is_rotation: bool = False,
                 ingredients: Optional[List[Ingredient]] = None):
        self.id = id
        self.name = name
        self.is_rotation = is_rotation
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        status = "Rotation" if self.is_rotation else "Trial"
        return f"{self.name} ({status}) - {', '.join(str(i) for i in self.ingredients)}"

    __repr__ = __str__

    def add_ingredient(self, ingredient: Ingredient):
        self.ingredients.append(ingredient)
        return self

    @staticmethod
    def from_dict(data):
        '''Accepts both the stored snake_case shape and the camelCase wire shape.'''
        d = dict(data)
        is_rotation = d.get("is_rotation", d.get("isRotation", False))
        return Recipe(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            is_rotation=bool(is_rotation),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients") or []],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "is_rotation": self.is_rotation,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
