from fastapi import APIRouter, Depends

from mealboard.api.dependencies import get_planner, unwrap
from mealboard.logic.board.service import PlannerService
from mealboard.utilities.validators import CredentialsInput

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201)
def register(payload: CredentialsInput, planner: PlannerService = Depends(get_planner)):
    user = unwrap(planner.register(payload.email, payload.password))
    return user.to_dict()


@router.post("/login")
def login(payload: CredentialsInput, planner: PlannerService = Depends(get_planner)):
    session = unwrap(planner.sign_in(payload.email, payload.password))
    return session.to_dict()


@router.post("/logout")
def logout(planner: PlannerService = Depends(get_planner)):
    unwrap(planner.sign_out())
    return {"ok": True}


@router.get("/session")
def current_session(planner: PlannerService = Depends(get_planner)):
    user = planner.current_user()
    return {"user": user.to_dict() if user else None}
