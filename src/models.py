"""Data models for the reminder board.

Categories are a closed enumeration; their titles and emoji shown on screen
live in the registry (categories.py) so they can be edited without touching
the identity used as the storage key.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


def _new_id() -> str:
    return str(uuid.uuid4())


class Category(Enum):
    """Fixed reminder groupings, in segmented-control order."""
    SCHOOL = "school"
    WORK = "work"
    HOME = "home"
    MISC = "misc"

    @property
    def default_title(self) -> str:
        return _DEFAULT_TITLES[self]

    @property
    def default_emoji(self) -> str:
        return _DEFAULT_EMOJI[self]

    @classmethod
    def from_str(cls, value: str) -> Optional["Category"]:
        """Resolve by name, value, default title, one-letter alias or 1-based position."""
        key = value.strip().lower()
        if not key:
            return None
        if key.isdigit():
            members = list(cls)
            pos = int(key)
            return members[pos - 1] if 1 <= pos <= len(members) else None
        for member in cls:
            if key in (member.value, member.name.lower(), member.default_title.lower()):
                return member
        return CATEGORY_ALIASES.get(key)


_DEFAULT_TITLES = {
    Category.SCHOOL: "School",
    Category.WORK: "Work",
    Category.HOME: "Home",
    Category.MISC: "Miscellaneous",
}

_DEFAULT_EMOJI = {
    Category.SCHOOL: "\U0001F3EB",  # school
    Category.WORK: "\U0001F4BC",    # briefcase
    Category.HOME: "\U0001F3E0",    # house
    Category.MISC: "\U0001F50D",    # magnifying glass
}

CATEGORY_ALIASES = {
    's': Category.SCHOOL,
    'w': Category.WORK,
    'h': Category.HOME,
    'm': Category.MISC,
}


class BackgroundColor(Enum):
    """Named backdrop colors, in menu order. Value is the display name."""
    WHITE = "White"
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    ORANGE = "Orange"
    PINK = "Pink"
    GRAY = "Gray"

    @property
    def hex(self) -> str:
        return _BACKGROUND_HEX[self]

    @classmethod
    def from_str(cls, value: str) -> Optional["BackgroundColor"]:
        key = value.strip().lower()
        if key.isdigit():
            members = list(cls)
            pos = int(key)
            return members[pos - 1] if 1 <= pos <= len(members) else None
        if key == "grey":
            return cls.GRAY
        for member in cls:
            if key == member.value.lower():
                return member
        return None


_BACKGROUND_HEX = {
    BackgroundColor.WHITE: '#FFFFFF',
    BackgroundColor.RED: '#FF3B30',
    BackgroundColor.BLUE: '#007AFF',
    BackgroundColor.GREEN: '#34C759',
    BackgroundColor.YELLOW: '#FFCC00',
    BackgroundColor.ORANGE: '#FF9500',
    BackgroundColor.PINK: '#FF2D55',
    BackgroundColor.GRAY: '#8E8E93',
}

DEFAULT_BACKGROUND = BackgroundColor.WHITE


class ScreenMode(Enum):
    NORMAL = "normal"
    EDITING_CATEGORIES = "editing-categories"


@dataclass
class CategoryModel:
    """Editable display row for one category.

    Fields:
        category: Fixed identity; never changes.
        title: Label shown in the segmented control (may be empty).
        emoji: Glyph shown above the list (may be empty).
        id: Generated row id.
    """
    category: Category
    title: str
    emoji: str
    id: str = field(default_factory=_new_id)

    @classmethod
    def default_for(cls, category: Category) -> "CategoryModel":
        return cls(category=category, title=category.default_title, emoji=category.default_emoji)


@dataclass
class Reminder:
    """A single reminder; belongs to exactly one category list."""
    title: str
    id: str = field(default_factory=_new_id)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Reminder(id={self.id[:8]}, title={self.title})"
