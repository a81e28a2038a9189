from fastapi import FastAPI, Query
from typing import Optional
import logging

from mealboard.api.routes import auth, board, grocery, recipes
from mealboard.events.Event_Bus import EventBus
from mealboard.events.web_observers import NoticeBoard
from mealboard.infra.Auth_Repository import AuthRepository
from mealboard.infra.Recipe_Repository import RecipeRepository
from mealboard.infra.State_Repository import StateRepository
from mealboard.logic.board.service import PlannerService
from mealboard.utilities.config import AUTOSAVE_DELAY_MS, DEBUG, NOTICE_BUFFER_SIZE

# Logging
logger = logging.getLogger("mealboard_app")


def create_planner() -> PlannerService:
    """Planner wired to the JSON-file collaborators under DATA_DIR."""
    return PlannerService(
        AuthRepository(), RecipeRepository(), StateRepository(),
        bus=EventBus(), autosave_delay_ms=AUTOSAVE_DELAY_MS,
    )


def install_planner(target: FastAPI, planner: PlannerService) -> PlannerService:
    """Attach a planner (and a notice board listening to its bus) to the app."""
    target.state.planner = planner
    target.state.notices = NoticeBoard(NOTICE_BUFFER_SIZE).attach(planner.bus)
    return planner


# Initialize FastAPI app
app = FastAPI(title="Weekly Meal Board API", debug=DEBUG)

# Include routers
app.include_router(auth.router)
app.include_router(recipes.router)
app.include_router(board.router)
app.include_router(grocery.router)

install_planner(app, create_planner())


@app.on_event("shutdown")
def _flush_pending_save():
    """Write out a save still waiting for its quiet interval."""
    app.state.planner.close()
    logger.info("Planner closed")


@app.get("/api/notices")
def api_notices(since: Optional[int] = Query(default=None, ge=0)):
    """Refusals and explicit save/load outcomes, newest after `since`."""
    return app.state.notices.get_notices(since)


@app.get("/health")
def health():
    return {"status": "ok"}
