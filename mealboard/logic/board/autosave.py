"""Debounced auto-save.

Every board or catalog change (re)starts a quiet-interval timer; only the last
scheduled save fires. This is a last-write-wins debounce, not a queue, and it
never retries on its own: a failed save is retried only if another change
schedules a new one.
"""
import logging
import threading
from typing import Callable, Optional

from mealboard.events.Event_Bus import EventBus, PERSIST_EVENTS
from mealboard.utilities.config import AUTOSAVE_DELAY_MS

logger = logging.getLogger(__name__)


class AutoSaver:
    def __init__(self, save: Callable[[], object], delay_ms: int = AUTOSAVE_DELAY_MS,
                 timer_factory=threading.Timer):
        self._save = save
        self.delay = max(delay_ms, 0) / 1000.0
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    def attach(self, bus: EventBus):
        for name in PERSIST_EVENTS:
            bus.subscribe(name, self.on_event)
        return self

    def on_event(self, event_name, payload):
        self.schedule()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def schedule(self):
        """Start the quiet interval, superseding any save already scheduled."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = self._timer_factory(self.delay, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def cancel(self) -> bool:
        with self._lock:
            had_timer = self._timer is not None
            if had_timer:
                self._timer.cancel()
                self._timer = None
                self._generation += 1
        return had_timer

    def flush(self) -> bool:
        """Run a scheduled save now instead of waiting. Returns False if none was scheduled."""
        if not self.cancel():
            return False
        self._run()
        return True

    def _fire(self, generation):
        with self._lock:
            # cancelled timers can still fire once on a busy interpreter
            if generation != self._generation:
                return
            self._timer = None
        self._run()

    def _run(self):
        try:
            self._save()
        except Exception:
            logger.exception("Auto-save failed")
