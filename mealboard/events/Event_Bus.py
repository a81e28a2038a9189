"""Simple Event Bus / Observer implementation for planner notifications.

Event names:
  planner.changed   -> payload {"action": str}
  recipes.changed   -> payload {"action": str, "recipe_id": str | None}
  planner.refused   -> payload {"action": str, "reason": str, "message": str}
  state.saved       -> payload {"user_id": str, "silent": bool}
  state.save_failed -> payload {"user_id": str | None, "reason": str, "message": str, "silent": bool}
  state.loaded      -> payload {"user_id": str, "found": bool}
  session.changed   -> payload {"user": dict | None}

Subscribers are callables taking (event_name, payload). Each service owns its
own bus instance.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLANNER_CHANGED = "planner.changed"
RECIPES_CHANGED = "recipes.changed"
PLANNER_REFUSED = "planner.refused"
STATE_SAVED = "state.saved"
STATE_SAVE_FAILED = "state.save_failed"
STATE_LOADED = "state.loaded"
SESSION_CHANGED = "session.changed"

# Events after which the board should be persisted
PERSIST_EVENTS = (PLANNER_CHANGED, RECIPES_CHANGED)


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        if callback not in self._subscribers[event_name]:
            self._subscribers[event_name].append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        try:
            self._subscribers[event_name].remove(callback)
        except (ValueError, KeyError):
            pass

    def publish(self, event_name: str, payload: Any = None):
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                # subscriber errors never reach the publisher
                logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
    'EventBus', 'PLANNER_CHANGED', 'RECIPES_CHANGED', 'PLANNER_REFUSED', 'STATE_SAVED',
    'STATE_SAVE_FAILED', 'STATE_LOADED', 'SESSION_CHANGED', 'PERSIST_EVENTS'
]
