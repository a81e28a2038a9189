"""Planner service: the boundary between the board and everything outside it.

Wires the Plan state machine to the auth, recipe and state collaborators, the
event bus and the debounced auto-saver. Every public method returns an
ActionResult; PlannerError raised underneath is logged, published as
planner.refused and reported in the result, and the board is left as it was.
"""
import logging
import threading
from typing import Any, Callable, Optional

from mealboard.domain.Ingredient import Ingredient
from mealboard.domain.Plan import Plan
from mealboard.domain.Recipe import Recipe
from mealboard.domain.RecipeCatalog import RecipeCatalog
from mealboard.domain.errors import AuthRequired, PlannerError
from mealboard.events.Event_Bus import EventBus
from mealboard.events.event_helpers import (
    publish_changed, publish_loaded, publish_recipes_changed, publish_refused,
    publish_save_result, publish_session
)
from mealboard.logic.board.autosave import AutoSaver
from mealboard.utilities.config import AUTOSAVE_DELAY_MS

logger = logging.getLogger(__name__)


class ActionResult:
    def __init__(self, ok: bool = True, value: Any = None, reason: Optional[str] = None, message: str = "",
                 error: Optional[PlannerError] = None):
        self.ok = ok
        self.value = value
        self.reason = reason
        self.message = message
        self.error = error

    @classmethod
    def succeeded(cls, value: Any = None):
        return cls(True, value)

    @classmethod
    def refused(cls, error: PlannerError):
        return cls(False, None, error.reason, error.message, error)

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"ActionResult(ok, value={self.value!r})"
        return f"ActionResult(refused, reason={self.reason!r}, message={self.message!r})"

    def to_dict(self):
        return {"ok": self.ok, "reason": self.reason, "message": self.message}


class PlannerService:
    def __init__(self, auth, recipe_repo, state_repo, *, bus: Optional[EventBus] = None,
                 catalog: Optional[RecipeCatalog] = None, autosave: bool = True,
                 autosave_delay_ms: int = AUTOSAVE_DELAY_MS):
        self.auth = auth
        self.recipe_repo = recipe_repo
        self.state_repo = state_repo
        self.bus = bus if bus is not None else EventBus()
        self.plan = Plan(catalog if catalog is not None else RecipeCatalog())
        self._lock = threading.RLock()
        self.autosaver = AutoSaver(self._autosave, autosave_delay_ms).attach(self.bus) if autosave else None

    @property
    def catalog(self) -> RecipeCatalog:
        return self.plan.catalog

    # --- Plumbing ----------------------------------------------------------
    def _perform(self, action: str, fn: Callable[[], Any], notify: Optional[Callable[[], None]] = None,
                 *, quiet: bool = False) -> ActionResult:
        with self._lock:
            try:
                value = fn()
            except PlannerError as e:
                logger.info("Refused %s: %s", action, e.message)
                if not quiet:
                    publish_refused(self.bus, action, e)
                return ActionResult.refused(e)
        if notify is not None:
            notify()
        return ActionResult.succeeded(value)

    def _require_user(self):
        user = self.auth.get_current_user()
        if user is None:
            raise AuthRequired()
        return user

    def _board_changed(self, action: str):
        return lambda: publish_changed(self.bus, action)

    def _recipes_changed(self, action: str, recipe_id=None):
        return lambda: publish_recipes_changed(self.bus, action, recipe_id)

    def read(self, fn: Callable[[Plan], Any]) -> Any:
        """Run fn against the board while holding the planner lock."""
        with self._lock:
            return fn(self.plan)

    # --- Session -----------------------------------------------------------
    def current_user(self):
        return self.auth.get_current_user()

    def register(self, email: str, password: str) -> ActionResult:
        return self._perform("register", lambda: self.auth.register(email, password))

    def sign_in(self, email: str, password: str) -> ActionResult:
        result = self._perform("sign_in", lambda: self.auth.sign_in(email, password))
        if result.ok:
            self.refresh_session()
        return result

    def sign_out(self) -> ActionResult:
        if self.autosaver is not None:
            self.autosaver.flush()
        result = self._perform("sign_out", self.auth.sign_out)
        self.refresh_session()
        return result

    def refresh_session(self) -> ActionResult:
        """Reload catalog and board for the signed-in user, or drop the catalog when signed out."""
        user = self.auth.get_current_user()
        if user is not None:
            self.load_recipes()
            self.load_state()
        else:
            with self._lock:
                self.plan.catalog.clear()
                self.plan.active_recipe_id = None
                self.plan.cancel_pending()
                self.plan.prune_checked()
        publish_session(self.bus, user)
        return ActionResult.succeeded(user)

    # --- Recipes -----------------------------------------------------------
    def load_recipes(self) -> ActionResult:
        def _load():
            user = self._require_user()
            recipes = self.recipe_repo.list_recipes(user.id)
            self.plan.catalog.replace(recipes)
            self.plan.ensure_active_recipe()
            self.plan.prune_checked()
            return recipes
        return self._perform("load_recipes", _load)

    def add_recipe(self, name: str, ingredient: str, quantity, unit: str) -> ActionResult:
        """Create a trial recipe with its first ingredient and make it the active recipe."""
        def _add():
            user = self._require_user()
            recipe_id = self.recipe_repo.create_recipe(user.id, name, is_rotation=False)
            self.recipe_repo.add_ingredient(recipe_id, ingredient, quantity, unit)
            recipe = Recipe(recipe_id, name, False, [Ingredient(ingredient, quantity, unit)])
            self.plan.catalog.add(recipe)
            self.plan.active_recipe_id = recipe_id
            return recipe
        result = self._perform("add_recipe", _add)
        if result.ok:
            publish_recipes_changed(self.bus, "add_recipe", result.value.id)
        return result

    def add_ingredient(self, recipe_id: str, name: str, quantity, unit: str) -> ActionResult:
        def _add():
            self._require_user()
            recipe = self.plan.catalog.require(recipe_id)
            ingredient = self.recipe_repo.add_ingredient(recipe_id, name, quantity, unit)
            recipe.add_ingredient(ingredient)
            self.plan.prune_checked()
            return recipe
        return self._perform("add_ingredient", _add, self._recipes_changed("add_ingredient", recipe_id))

    def promote_recipe(self, recipe_id: str) -> ActionResult:
        def _promote():
            self._require_user()
            self.plan.catalog.require(recipe_id)
            self.recipe_repo.set_rotation(recipe_id, True)
            return self.plan.catalog.promote(recipe_id)
        return self._perform("promote_recipe", _promote, self._recipes_changed("promote_recipe", recipe_id))

    def delete_recipe(self, recipe_id: str) -> ActionResult:
        """Delete a recipe; meals still pointing at it stay on the board but add no groceries."""
        def _delete():
            self._require_user()
            self.plan.catalog.require(recipe_id)
            self.recipe_repo.delete_recipe(recipe_id)
            recipe = self.plan.catalog.remove(recipe_id)
            self.plan.ensure_active_recipe()
            self.plan.prune_checked()
            return recipe
        return self._perform("delete_recipe", _delete, self._recipes_changed("delete_recipe", recipe_id))

    def select_recipe(self, recipe_id: str) -> ActionResult:
        return self._perform("select_recipe", lambda: self.plan.select_recipe(recipe_id).active_recipe_id,
                             self._board_changed("select_recipe"))

    # --- Board -------------------------------------------------------------
    def place_block(self, block_type: str, day_index: int) -> ActionResult:
        return self._perform("place_block", lambda: self.plan.place_block(block_type, day_index),
                             self._board_changed("place_block"))

    def clear_day(self, day_index: int) -> ActionResult:
        return self._perform("clear_day", lambda: self.plan.clear_day(day_index),
                             self._board_changed("clear_day"))

    def remove_meal(self, meal_id: str) -> ActionResult:
        return self._perform("remove_meal", lambda: self.plan.remove_meal(meal_id),
                             self._board_changed("remove_meal"))

    def cancel_pending(self) -> ActionResult:
        return self._perform("cancel_pending", self.plan.cancel_pending)

    # --- Grocery list ------------------------------------------------------
    def grocery_list(self):
        with self._lock:
            return self.plan.build_grocery_list()

    def set_checked(self, line_text: str, checked: bool = True) -> ActionResult:
        return self._perform("set_checked", lambda: self.plan.set_checked(line_text, checked),
                             self._board_changed("set_checked"))

    def sync_checked(self, checked_lines) -> ActionResult:
        return self._perform("sync_checked", lambda: self.plan.sync_checked(checked_lines),
                             self._board_changed("sync_checked"))

    def export_text(self) -> str:
        with self._lock:
            return self.plan.export_text()

    # --- Persistence -------------------------------------------------------
    def save_state(self, silent: bool = False) -> ActionResult:
        """Upsert the board document for the signed-in user.

        Silent saves (auto-save) neither publish refusals nor show notices;
        failures are only logged.
        """
        user = self.auth.get_current_user()

        def _save():
            if user is None:
                raise AuthRequired("Sign in to save.")
            self.state_repo.put_state(user.id, self.plan.to_dict())

        result = self._perform("save_state", _save, quiet=True)
        if result.ok:
            publish_save_result(self.bus, user.id, silent=silent)
        elif user is None:
            if not silent:
                publish_refused(self.bus, "save_state", result.error)
        else:
            if silent:
                logger.warning("Auto-save failed for user %s: %s", user.id, result.message)
            publish_save_result(self.bus, user.id, silent=silent, error=result.error)
        return result

    def load_state(self) -> ActionResult:
        """Replace the board with the stored document; on failure keep the current board."""
        def _load():
            user = self._require_user()
            document = self.state_repo.get_state(user.id)
            if document is None:
                publish_loaded(self.bus, user.id, False)
                return False
            self.plan.load_dict(document)
            self.plan.prune_checked()
            publish_loaded(self.bus, user.id, True)
            return True
        return self._perform("load_state", _load)

    def _autosave(self):
        self.save_state(silent=True)

    def close(self):
        """Flush any scheduled save."""
        if self.autosaver is not None:
            self.autosaver.flush()
