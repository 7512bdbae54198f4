"""Board logic: per-category reminder lists, selection, input buffer,
background choice and screen mode.

Lists are keyed by Category identity, never by the (editable) emoji.
Every category has a list at all times, possibly empty.
"""
import logging
from typing import Dict, Iterable, List, Optional

from models import Category, Reminder, BackgroundColor, ScreenMode, DEFAULT_BACKGROUND
from categories import CategoryRegistry
from events import (
    ChangeNotifier,
    REMINDER_ADDED, REMINDERS_DELETED, SELECTION_CHANGED, INPUT_CHANGED,
    BACKGROUND_CHANGED, MODE_CHANGED,
)

logger = logging.getLogger(__name__)


class ReminderBoard:
    def __init__(self, background: BackgroundColor = DEFAULT_BACKGROUND,
                 notifier: Optional[ChangeNotifier] = None):
        self.notifier: ChangeNotifier = notifier or ChangeNotifier()
        self.categories: CategoryRegistry = CategoryRegistry(self.notifier)
        self._lists: Dict[Category, List[Reminder]] = {c: [] for c in Category}
        self.selection: Category = Category.SCHOOL
        self.pending_input: str = ''
        self.background: BackgroundColor = background
        self.mode: ScreenMode = ScreenMode.NORMAL

    def subscribe(self, event_type, callback) -> None:
        self.notifier.subscribe(event_type, callback)

    # -------------------- reminder lists --------------------
    def reminders(self, category: Category) -> List[Reminder]:
        return list(self._lists[category])

    def add_reminder(self, category: Category, title: str) -> Optional[Reminder]:
        """Append a reminder; blank titles are ignored and return None."""
        cleaned = title.strip()
        if not cleaned:
            logger.debug("Ignored blank reminder title for %s", category.name)
            return None
        reminder = Reminder(title=cleaned)
        self._lists[category].append(reminder)
        logger.debug("Added %r to %s", cleaned, category.name)
        self.notifier.emit(REMINDER_ADDED, category=category, reminder=reminder)
        return reminder

    def delete_reminders(self, category: Category, indices: Iterable[int]) -> List[Reminder]:
        """Remove the given positions in one batch.

        Positions refer to the order before deletion. Raises IndexError
        (without modifying the list) if any position is out of range.
        """
        items = self._lists[category]
        doomed = set(indices)
        for idx in doomed:
            if idx < 0 or idx >= len(items):
                raise IndexError(f'No reminder #{idx} in {category.name}.')
        removed = [r for i, r in enumerate(items) if i in doomed]
        items[:] = [r for i, r in enumerate(items) if i not in doomed]
        if removed:
            logger.debug("Deleted %d reminder(s) from %s", len(removed), category.name)
            self.notifier.emit(REMINDERS_DELETED, category=category, reminders=removed)
        return removed

    # -------------------- selection & display --------------------
    def select(self, category: Category) -> None:
        self.selection = category
        self.notifier.emit(SELECTION_CHANGED, category=category)

    def current_list(self) -> List[Reminder]:
        return self.reminders(self.selection)

    def current_emoji(self) -> str:
        return self.categories.emoji_for(self.selection)

    def current_title(self) -> str:
        return self.categories.title_for(self.selection)

    def set_input(self, text: str) -> None:
        self.pending_input = text
        self.notifier.emit(INPUT_CHANGED, text=text)

    def submit_input(self) -> Optional[Reminder]:
        """Add the pending text to the active list; the buffer is always cleared."""
        reminder = self.add_reminder(self.selection, self.pending_input)
        self.set_input('')
        return reminder

    # -------------------- category metadata --------------------
    def rename_category(self, category: Category, new_title: str) -> None:
        self.categories.rename_category(category, new_title)

    def set_emoji(self, category: Category, new_emoji: str) -> None:
        self.categories.set_emoji(category, new_emoji)

    # -------------------- background --------------------
    @staticmethod
    def background_options() -> List[BackgroundColor]:
        return list(BackgroundColor)

    def set_background(self, color: BackgroundColor) -> None:
        self.background = color
        logger.debug("Background set to %s", color.value)
        self.notifier.emit(BACKGROUND_CHANGED, color=color)

    # -------------------- screen mode --------------------
    @property
    def editing(self) -> bool:
        return self.mode is ScreenMode.EDITING_CATEGORIES

    def open_category_editor(self) -> None:
        self._set_mode(ScreenMode.EDITING_CATEGORIES)

    def close_category_editor(self) -> None:
        self._set_mode(ScreenMode.NORMAL)

    def _set_mode(self, mode: ScreenMode) -> None:
        if self.mode is mode:
            return
        self.mode = mode
        self.notifier.emit(MODE_CHANGED, mode=mode)

    def __str__(self) -> str:
        counts = ', '.join(f'{self.categories.title_for(c)}: {len(self._lists[c])}' for c in Category)
        return f'Selected: {self.current_title()} ({counts})'
