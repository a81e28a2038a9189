"""Shared FastAPI dependencies and result-to-HTTP mapping for the routers."""
from fastapi import HTTPException, Request

from mealboard.domain.errors import (
    AccountExists, AuthFailed, AuthRequired, RecipeNotFound, RemoteFailure
)
from mealboard.logic.board.service import ActionResult, PlannerService

STATUS_BY_REASON = {
    AuthRequired.reason: 401,
    AuthFailed.reason: 401,
    AccountExists.reason: 409,
    RecipeNotFound.reason: 404,
    RemoteFailure.reason: 502,
}


def get_planner(request: Request) -> PlannerService:
    return request.app.state.planner


def unwrap(result: ActionResult):
    """Return the result value, or raise HTTPException for a refused action (400 unless mapped above)."""
    if result.ok:
        return result.value
    raise HTTPException(
        status_code=STATUS_BY_REASON.get(result.reason, 400),
        detail={"reason": result.reason, "message": result.message},
    )
