"""Event helper utilities.

Thin wrappers that give planner events a consistent payload shape.

Quick import:
    from mealboard.events.event_helpers import (
        publish_changed, publish_recipes_changed, publish_refused,
        publish_save_result, publish_loaded, publish_session
    )
"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import (
    EventBus, PLANNER_CHANGED, RECIPES_CHANGED, PLANNER_REFUSED,
    STATE_SAVED, STATE_SAVE_FAILED, STATE_LOADED, SESSION_CHANGED
)

__all__ = [
    'publish_changed', 'publish_recipes_changed', 'publish_refused',
    'publish_save_result', 'publish_loaded', 'publish_session'
]


def publish_changed(bus: EventBus, action: str):
    """Publish a planner.changed event."""
    bus.publish(PLANNER_CHANGED, {'action': action})


def publish_recipes_changed(bus: EventBus, action: str, recipe_id: Optional[str] = None):
    bus.publish(RECIPES_CHANGED, {'action': action, 'recipe_id': recipe_id})


def publish_refused(bus: EventBus, action: str, error: Any):
    """Publish a planner.refused event for a PlannerError."""
    bus.publish(PLANNER_REFUSED, {
        'action': action,
        'reason': getattr(error, 'reason', 'planner_error'),
        'message': getattr(error, 'message', str(error)),
    })


def publish_save_result(bus: EventBus, user_id: Optional[str], *, silent: bool, error: Any = None):
    """Publish state.saved, or state.save_failed when error is given."""
    if error is None:
        bus.publish(STATE_SAVED, {'user_id': user_id, 'silent': silent})
        return
    bus.publish(STATE_SAVE_FAILED, {
        'user_id': user_id,
        'reason': getattr(error, 'reason', 'remote_failure'),
        'message': getattr(error, 'message', str(error)),
        'silent': silent,
    })


def publish_loaded(bus: EventBus, user_id: str, found: bool):
    bus.publish(STATE_LOADED, {'user_id': user_id, 'found': found})


def publish_session(bus: EventBus, user: Any):
    bus.publish(SESSION_CHANGED, {'user': user.to_dict() if user is not None else None})
