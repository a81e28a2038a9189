"""Plan: the week board state machine.

Owns the seven day slots, the meal registry, the active-recipe pointer, the
checked grocery lines and the two-night placement sub-state. All operations
validate before mutating, so a refused operation leaves the board unchanged.

Invariants kept by every operation:
  - exactly seven days in weekday order;
  - a meal is registered iff at least one day references it;
  - a two-night meal is referenced by at most an anchor and one continuation.
"""
import logging
from typing import Dict, List, Optional

from mealboard.domain.Day import Day
from mealboard.domain.GroceryList import GroceryList
from mealboard.domain.Meal import Meal, new_meal_id
from mealboard.domain.Placement import IDLE, AwaitingSecondNight
from mealboard.domain.RecipeCatalog import RecipeCatalog
from mealboard.domain.errors import (
    InvalidDay, NoActiveRecipe, UnknownBlockType, UnknownGroceryLine
)
from mealboard.logic.shopping.list_builder import build_grocery_list
from mealboard.utilities.constants import (
    BLOCK_TWO_NIGHT, BLOCK_TYPES, DAYS_IN_WEEK, RECIPE_BLOCKS, WEEKDAYS
)

logger = logging.getLogger(__name__)


class Plan:
    def __init__(self, catalog: Optional[RecipeCatalog] = None):
        self.catalog = catalog if catalog is not None else RecipeCatalog()
        self.days: List[Day] = [Day(label) for label in WEEKDAYS]
        self.meals: Dict[str, Meal] = {}
        self.active_recipe_id: Optional[str] = None
        self.checked_items: set = set()
        self.placement = IDLE

    # --- Queries -----------------------------------------------------------
    @property
    def pending_two_night_meal_id(self) -> Optional[str]:
        return self.placement.pending_meal_id

    def day(self, day_index: int) -> Day:
        self._check_day_index(day_index)
        return self.days[day_index]

    def days_for_meal(self, meal_id) -> List[int]:
        return [i for i, d in enumerate(self.days) if d.meal_id == meal_id]

    def progress(self):
        '''Returns (planned_nights, total_nights).'''
        planned = sum(1 for d in self.days if not d.is_empty)
        return planned, DAYS_IN_WEEK

    # --- Recipe pointer ----------------------------------------------------
    def select_recipe(self, recipe_id):
        self.catalog.require(recipe_id)
        self.active_recipe_id = recipe_id
        return self

    def ensure_active_recipe(self):
        '''Re-points active_recipe_id at a cached recipe (first one) or None.'''
        resolved = self.catalog.resolve_active(self.active_recipe_id)
        if resolved != self.active_recipe_id:
            logger.debug("Active recipe %s -> %s", self.active_recipe_id, resolved)
        self.active_recipe_id = resolved
        return self

    # --- Placement ---------------------------------------------------------
    def place_block(self, block_type: str, day_index: int) -> Optional[Meal]:
        """Place a meal block on a day.

        A two-night block placed while another two-night meal awaits its
        second night links that pending meal to the target day instead of
        creating a new meal.

        Returns:
            The meal now on the day, or None when the call was a no-op
            (second-night click on the anchor day itself).
        Raises:
            InvalidDay, UnknownBlockType, NoActiveRecipe. Nothing is changed
            when one of these is raised.
        """
        self._check_day_index(day_index)
        if block_type not in BLOCK_TYPES:
            raise UnknownBlockType(f"Unknown meal block type: {block_type!r}.")
        if block_type in RECIPE_BLOCKS and self.active_recipe_id is None:
            raise NoActiveRecipe()

        pending_id = self.pending_two_night_meal_id
        if block_type == BLOCK_TWO_NIGHT and pending_id is not None:
            pending = self.meals.get(pending_id)
            if pending is None:
                logger.warning("Pending two-night meal %s is not registered; starting a new one", pending_id)
                self.placement = IDLE
            elif self.days[day_index].meal_id == pending_id:
                return None
            else:
                self._clear_day(day_index)
                self.days[day_index].assign(pending_id, continuation=True)
                self.placement = IDLE
                self.prune_checked()
                return pending

        recipe_id = self.active_recipe_id if block_type in RECIPE_BLOCKS else None
        meal = Meal(new_meal_id(), block_type, recipe_id)
        self.meals[meal.id] = meal
        self._clear_day(day_index)
        self.days[day_index].assign(meal.id, continuation=False)
        if block_type == BLOCK_TWO_NIGHT:
            self.placement = AwaitingSecondNight(meal.id)
        self.prune_checked()
        return meal

    def clear_day(self, day_index: int):
        """Empty a day and unlink the other night of its meal, if any."""
        self._check_day_index(day_index)
        self._clear_day(day_index)
        self.prune_checked()
        return self

    def _clear_day(self, day_index: int):
        day = self.days[day_index]
        if day.is_empty:
            return
        meal_id = day.meal_id
        day.clear()

        partners = [i for i, d in enumerate(self.days) if d.meal_id == meal_id]
        if len(partners) > 1:
            # Only the first partner is unlinked; the rest keep a dangling reference.
            logger.warning("Meal %s is referenced by %d other days (expected at most 1)", meal_id, len(partners))
        if partners:
            self.days[partners[0]].clear()

        self.meals.pop(meal_id, None)
        if self.pending_two_night_meal_id == meal_id:
            self.placement = IDLE

    def remove_meal(self, meal_id) -> bool:
        """Clear every day referencing meal_id and unregister it. Returns False if nothing referenced it."""
        touched = False
        for day in self.days:
            if day.meal_id == meal_id:
                day.clear()
                touched = True
        removed = self.meals.pop(meal_id, None) is not None
        if self.pending_two_night_meal_id == meal_id:
            self.placement = IDLE
        self.prune_checked()
        return touched or removed

    def cancel_pending(self):
        '''Stops waiting for a second night; the anchor day keeps its meal.'''
        self.placement = IDLE
        return self

    # --- Grocery list ------------------------------------------------------
    def build_grocery_list(self) -> GroceryList:
        return build_grocery_list(self.days, self.meals, self.catalog)

    def prune_checked(self):
        '''Drops checked texts that are no longer on the grocery list.'''
        texts = set(self.build_grocery_list().texts())
        stale = self.checked_items - texts
        if stale:
            logger.debug("Unchecking %d vanished grocery line(s)", len(stale))
            self.checked_items = self.checked_items & texts
        return self

    def set_checked(self, line_text: str, checked: bool = True) -> GroceryList:
        """Tick or untick one grocery line.

        The checked set is rebuilt from the lines currently on the list, so
        entries for lines that no longer exist are dropped.
        """
        grocery = self.build_grocery_list()
        texts = grocery.texts()
        if line_text not in texts:
            raise UnknownGroceryLine(f"'{line_text}' is not on the grocery list.")
        current = set(self.checked_items)
        if checked:
            current.add(line_text)
        else:
            current.discard(line_text)
        self.checked_items = {t for t in texts if t in current}
        return grocery

    def sync_checked(self, checked_lines) -> GroceryList:
        '''Replaces the checked set with the given lines; texts not on the list are ignored.'''
        grocery = self.build_grocery_list()
        wanted = set(checked_lines)
        self.checked_items = {t for t in grocery.texts() if t in wanted}
        return grocery

    def export_text(self) -> str:
        return self.build_grocery_list().export_text(self.checked_items)

    # --- Persistence -------------------------------------------------------
    def to_dict(self):
        return {
            "days": [d.to_dict() for d in self.days],
            "meals": {meal_id: meal.to_dict() for meal_id, meal in self.meals.items()},
            "activeRecipeId": self.active_recipe_id,
            "checkedItems": sorted(self.checked_items),
        }

    def load_dict(self, data):
        """Replace the board with a persisted document.

        Tolerates a short or missing days list (padded with the fixed weekday
        labels), missing meals/checkedItems (empty), and keeps the current
        active recipe when the document has none. Day references to unknown
        meals are dropped, as are meals no day references.
        """
        d = data if isinstance(data, dict) else {}
        loaded_days = d.get("days") if isinstance(d.get("days"), list) else []
        days = [
            Day.from_dict(label, loaded_days[i] if i < len(loaded_days) else None)
            for i, label in enumerate(WEEKDAYS)
        ]

        meals: Dict[str, Meal] = {}
        raw_meals = d.get("meals") if isinstance(d.get("meals"), dict) else {}
        for key, entry in raw_meals.items():
            meal = Meal.from_dict(entry, fallback_id=str(key))
            if meal is None:
                logger.warning("Skipping malformed meal entry %r", key)
                continue
            meal.id = str(key)
            meals[meal.id] = meal

        for day in days:
            if day.meal_id and day.meal_id not in meals:
                logger.warning("Day %s references unknown meal %s; clearing it", day.label, day.meal_id)
                day.clear()
        referenced = {day.meal_id for day in days if day.meal_id}
        meals = {meal_id: meal for meal_id, meal in meals.items() if meal_id in referenced}

        checked = d.get("checkedItems")
        self.days = days
        self.meals = meals
        self.active_recipe_id = d.get("activeRecipeId") or self.active_recipe_id
        self.checked_items = {str(t) for t in checked} if isinstance(checked, list) else set()
        self.placement = IDLE
        self.ensure_active_recipe()
        return self

    @classmethod
    def from_dict(cls, data, catalog: Optional[RecipeCatalog] = None):
        return cls(catalog).load_dict(data)

    # --- Helpers -----------------------------------------------------------
    @staticmethod
    def _check_day_index(day_index):
        if isinstance(day_index, bool) or not isinstance(day_index, int) or not 0 <= day_index < DAYS_IN_WEEK:
            raise InvalidDay(f"Day index must be between 0 and {DAYS_IN_WEEK - 1}, got {day_index!r}.")

    def __str__(self) -> str:
        days_str = ",\n\t".join(str(d) for d in self.days)
        return f"Week:\n\t{days_str}"

    def __repr__(self) -> str:
        return self.__str__()
