"""Terminal rendering for the reminder board.

The view subscribes to every board event and only marks itself dirty;
the CLI decides when to redraw. Nothing here mutates the board.
"""
import re
import shutil
from typing import List

from board import ReminderBoard
from models import Category
from theme import color, background, enabled, HEADER_COLOR, INDEX_COLOR, SELECTED_COLOR, EMPTY_COLOR, RESET, BOLD
from events import ALL_EVENTS

SEP = " | "
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class BoardView:
    def __init__(self, board: ReminderBoard):
        self.board = board
        self.dirty = True
        board.subscribe(ALL_EVENTS, self._on_change)

    def _on_change(self, event_type: str, **_payload) -> None:
        self.dirty = True

    def display(self) -> None:
        width = shutil.get_terminal_size((80, 24)).columns
        print(self.render(width))
        self.dirty = False

    def render(self, width: int = 80) -> str:
        lines: List[str] = ['', self._emoji_line(), '', self._segment_line(), '']
        if self.board.editing:
            lines.extend(self._editor_lines())
        else:
            lines.extend(self._list_lines())
        lines.append('')
        return '\n'.join(self._fill(lines, width))

    # ---- sections ----
    def _emoji_line(self) -> str:
        emoji = self.board.current_emoji() or ' '
        return f"    {emoji}   " + color(self.board.current_title(), HEADER_COLOR, BOLD)

    def _segment_line(self) -> str:
        cells: List[str] = []
        for pos, row in enumerate(self.board.categories.models(), start=1):
            label = f" {pos}:{row.title} "
            if row.category is self.board.selection:
                cells.append(color(label, SELECTED_COLOR))
            else:
                cells.append(label)
        return SEP.join(cells)

    def _list_lines(self) -> List[str]:
        reminders = self.board.current_list()
        if not reminders:
            return [color('(empty)', EMPTY_COLOR)]
        return [color(f"{idx}.", INDEX_COLOR) + ' ' + r.title for idx, r in enumerate(reminders, start=1)]

    def _editor_lines(self) -> List[str]:
        lines = [color('Edit Lists', HEADER_COLOR, BOLD) + "  (title <list> <name> | emoji <list> <glyph> | done)"]
        for pos, row in enumerate(self.board.categories.models(), start=1):
            title = row.title if row.title else color('<untitled>', EMPTY_COLOR)
            emoji = row.emoji if row.emoji else color('<none>', EMPTY_COLOR)
            lines.append(f"  {pos}. {title}{SEP}{emoji}")
        return lines

    # ---- background fill ----
    def _fill(self, lines: List[str], width: int) -> List[str]:
        if not enabled():
            return lines
        bg = background(self.board.background.hex)
        filled: List[str] = []
        for line in lines:
            pad = width - self._visible_len(line)
            body = line + ' ' * max(pad, 0)
            filled.append(bg + body.replace(RESET, RESET + bg) + RESET)
        return filled

    @staticmethod
    def _visible_len(s: str) -> int:
        return len(ANSI_RE.sub('', s))


def category_label(board: ReminderBoard, category: Category) -> str:
    title = board.categories.title_for(category) or category.default_title
    return f"{board.categories.emoji_for(category)} {title}".strip()
