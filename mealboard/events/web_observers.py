"""Web-facing observers for planner events.

NoticeBoard subscribes to an EventBus for:
  - planner.refused
  - state.save_failed
  - state.saved (explicit saves only)
  - state.loaded

and keeps a lightweight in-memory ring buffer of recent notices that the web
layer can poll to show messages without a full page reload.

Design:
  * Each notice gets an auto-increment integer id (cursor) so clients can ask
    only for newer notices (since=<last_id_seen>).
  * A Lock guards the buffer; auto-save failures arrive from the timer thread.
  * A max_notices cap bounds memory.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from .Event_Bus import (
    EventBus, PLANNER_REFUSED, STATE_SAVE_FAILED, STATE_SAVED, STATE_LOADED
)

logger = logging.getLogger(__name__)

WATCHED_EVENTS = (PLANNER_REFUSED, STATE_SAVE_FAILED, STATE_SAVED, STATE_LOADED)


class NoticeBoard:
    def __init__(self, max_notices: int = 300):
        self.max_notices = max_notices
        self._lock = Lock()
        self._notices: List[Dict[str, Any]] = []
        self._next_id = 1
        self._buses: List[EventBus] = []

    def attach(self, bus: EventBus):
        """Idempotent: subscribe to a bus once."""
        if bus in self._buses:
            return self
        for name in WATCHED_EVENTS:
            bus.subscribe(name, self.record)
        self._buses.append(bus)
        return self

    def record(self, event_name: str, payload: Any):
        # auto-save outcomes stay out of the UI
        if isinstance(payload, dict) and payload.get('silent'):
            return
        notice = {
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            for k in ('action', 'reason', 'message', 'silent', 'found'):
                if k in payload:
                    notice[k] = payload[k]
        with self._lock:
            notice['id'] = self._next_id
            self._next_id += 1
            self._notices.append(notice)
            if len(self._notices) > self.max_notices:
                del self._notices[: len(self._notices) - self.max_notices]
        logger.debug("Notice %s recorded: %s", notice['id'], event_name)

    def get_notices(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return notices newer than 'since' (exclusive) plus next_cursor for the next poll."""
        with self._lock:
            if since is None:
                data = list(self._notices)
            else:
                data = [n for n in self._notices if n['id'] > since]
            next_cursor = self._notices[-1]['id'] if self._notices else since or 0
        return {'notices': data, 'next_cursor': next_cursor}


__all__ = ['NoticeBoard', 'WATCHED_EVENTS']
