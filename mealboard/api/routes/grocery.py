from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from mealboard.api.dependencies import get_planner, unwrap
from mealboard.logic.board.service import PlannerService
from mealboard.logic.board.views import grocery_view
from mealboard.utilities.validators import CheckLineInput, SyncCheckedInput

router = APIRouter(prefix="/api/grocery", tags=["grocery"])


@router.get("")
def get_grocery_list(planner: PlannerService = Depends(get_planner)):
    return planner.read(grocery_view)


@router.post("/check")
def check_line(payload: CheckLineInput, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.set_checked(payload.line, payload.checked))
    return planner.read(grocery_view)


@router.put("/checked")
def sync_checked(payload: SyncCheckedInput, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.sync_checked(payload.lines))
    return planner.read(grocery_view)


@router.get("/export", response_class=PlainTextResponse)
def export_grocery_list(planner: PlannerService = Depends(get_planner)):
    """Unchecked lines as "- name qty unit", CRLF separated."""
    return PlainTextResponse(planner.export_text())
