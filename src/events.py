"""Change notification for board state.

Renderers subscribe here instead of polling the board. Dispatch is
synchronous and in registration order.
"""
import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

ALL_EVENTS = "*"

REMINDER_ADDED = "reminder_added"
REMINDERS_DELETED = "reminders_deleted"
SELECTION_CHANGED = "selection_changed"
INPUT_CHANGED = "input_changed"
CATEGORY_RENAMED = "category_renamed"
CATEGORY_EMOJI_CHANGED = "category_emoji_changed"
BACKGROUND_CHANGED = "background_changed"
MODE_CHANGED = "mode_changed"


class ChangeNotifier:
    """Routes board change events to subscribed callbacks."""

    def __init__(self):
        self.subscribers: Dict[str, List[Callable]] = {}  # event_type -> callbacks

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for an event type ("*" for every event)."""
        if event_type not in self.subscribers:
            self.subscribers[event_type] = []
        self.subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        callbacks = self.subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event_type: str, **payload) -> None:
        """Call subscribers for the type, then wildcard subscribers."""
        callbacks = list(self.subscribers.get(event_type, []))
        if event_type != ALL_EVENTS:
            callbacks += self.subscribers.get(ALL_EVENTS, [])
        for callback in callbacks:
            try:
                callback(event_type=event_type, **payload)
            except Exception:
                logger.exception("Error in %s callback %r", event_type, callback)
