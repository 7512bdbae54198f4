"""Category registry: editable title/emoji for each fixed category."""
import logging
from typing import Dict, List, Optional

from models import Category, CategoryModel
from events import ChangeNotifier, CATEGORY_RENAMED, CATEGORY_EMOJI_CHANGED

logger = logging.getLogger(__name__)


class CategoryRegistry:
    def __init__(self, notifier: Optional[ChangeNotifier] = None):
        self.notifier: ChangeNotifier = notifier or ChangeNotifier()
        self._rows: Dict[Category, CategoryModel] = {
            category: CategoryModel.default_for(category) for category in Category
        }

    def models(self) -> List[CategoryModel]:
        """Rows in display order."""
        return [self._rows[c] for c in Category]

    def get(self, category: Category) -> Optional[CategoryModel]:
        return self._rows.get(category)

    # Empty and duplicate values are accepted on purpose; see DESIGN.md.
    def rename_category(self, category: Category, new_title: str) -> None:
        row = self._rows[category]
        old = row.title
        row.title = new_title
        logger.debug("Renamed %s: %r -> %r", category.name, old, new_title)
        self.notifier.emit(CATEGORY_RENAMED, category=category, title=new_title)

    def set_emoji(self, category: Category, new_emoji: str) -> None:
        row = self._rows[category]
        row.emoji = new_emoji
        logger.debug("Set emoji for %s: %r", category.name, new_emoji)
        self.notifier.emit(CATEGORY_EMOJI_CHANGED, category=category, emoji=new_emoji)

    def emoji_for(self, category: Category) -> str:
        row = self._rows.get(category)
        return row.emoji if row else ''

    def title_for(self, category: Category) -> str:
        row = self._rows.get(category)
        return row.title if row else ''
