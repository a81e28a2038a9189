import logging
from datetime import datetime, timezone
from typing import Optional

from mealboard.domain.errors import RemoteFailure
from mealboard.infra.json_store import atomic_write, read_json
from mealboard.infra.paths import STATE_FILE

logger = logging.getLogger(__name__)


class StateRepository:
    """One planner document per user: {user_id: {"data": {...}, "updated_at": iso}}."""

    def __init__(self, state_file=STATE_FILE):
        self.state_file = state_file

    def _load_store(self) -> dict:
        store = read_json(self.state_file, {})
        if not isinstance(store, dict):
            logger.error(f"State file has unexpected shape: {type(store).__name__}")
            raise RemoteFailure("Couldn't load the saved planner.")
        return store

    def get_state(self, user_id: str) -> Optional[dict]:
        row = self._load_store().get(user_id)
        if not isinstance(row, dict) or not isinstance(row.get("data"), dict):
            return None
        return row["data"]

    def put_state(self, user_id: str, document: dict) -> None:
        """Upsert keyed by user; last write wins."""
        store = self._load_store()
        store[user_id] = {
            "data": document,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        atomic_write(self.state_file, store)
        logger.debug("Saved planner state for user %s", user_id)
