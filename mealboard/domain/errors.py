"""Planner error kinds.

Every refusal carries a short machine `reason` code plus a message suitable for
showing to the user. The planner service catches these at its boundary and
turns them into ActionResult values, so nothing here escapes to callers of the
service.
"""


class PlannerError(Exception):
    reason = "planner_error"
    default_message = "The planner refused this action."

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class NoActiveRecipe(PlannerError):
    reason = "no_active_recipe"
    default_message = "Add a recipe before placing meal blocks."


class AuthRequired(PlannerError):
    reason = "auth_required"
    default_message = "Sign in to continue."


class AuthFailed(PlannerError):
    reason = "auth_failed"
    default_message = "Sign in failed. Check the email and password."


class AccountExists(PlannerError):
    reason = "account_exists"
    default_message = "An account with this email already exists."


class RemoteFailure(PlannerError):
    reason = "remote_failure"
    default_message = "Storage is unavailable. Check the data directory."


class InvalidDay(PlannerError):
    reason = "invalid_day"
    default_message = "Day index must be between 0 and 6."


class UnknownBlockType(PlannerError):
    reason = "unknown_block_type"
    default_message = "Unknown meal block type."


class RecipeNotFound(PlannerError):
    reason = "recipe_not_found"
    default_message = "Recipe not found."


class UnknownGroceryLine(PlannerError):
    reason = "unknown_grocery_line"
    default_message = "That item is not on the grocery list."


__all__ = [
    'PlannerError', 'NoActiveRecipe', 'AuthRequired', 'AuthFailed', 'AccountExists', 'RemoteFailure',
    'InvalidDay', 'UnknownBlockType', 'RecipeNotFound', 'UnknownGroceryLine',
]
