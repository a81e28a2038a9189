from fastapi import APIRouter, Depends, Response

from mealboard.api.dependencies import get_planner, unwrap
from mealboard.infra.pdf_utils import generate_pdf_for_week
from mealboard.logic.board.service import PlannerService
from mealboard.logic.board.views import board_view
from mealboard.utilities.validators import PlaceBlockInput

router = APIRouter(prefix="/api/board", tags=["board"])


@router.get("")
def get_board(planner: PlannerService = Depends(get_planner)):
    return planner.read(board_view)


@router.post("/place")
def place_block(payload: PlaceBlockInput, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.place_block(payload.type, payload.day_index))
    return planner.read(board_view)


@router.post("/days/{day_index}/clear")
def clear_day(day_index: int, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.clear_day(day_index))
    return planner.read(board_view)


@router.delete("/meals/{meal_id}")
def remove_meal(meal_id: str, planner: PlannerService = Depends(get_planner)):
    unwrap(planner.remove_meal(meal_id))
    return planner.read(board_view)


@router.post("/pending/cancel")
def cancel_pending(planner: PlannerService = Depends(get_planner)):
    unwrap(planner.cancel_pending())
    return planner.read(board_view)


@router.post("/save")
def save_board(planner: PlannerService = Depends(get_planner)):
    """Explicit save: failures are reported, unlike auto-save."""
    unwrap(planner.save_state())
    return {"ok": True}


@router.post("/load")
def load_board(planner: PlannerService = Depends(get_planner)):
    found = unwrap(planner.load_state())
    return {"found": found, "board": planner.read(board_view)}


@router.get("/pdf")
def export_pdf(planner: PlannerService = Depends(get_planner)):
    pdf_bytes = planner.read(generate_pdf_for_week)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="meal_board.pdf"'},
    )
