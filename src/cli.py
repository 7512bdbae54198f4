"""Command-line interface loop for the reminder board.

Positions typed by the user are 1-based; the board works with 0-based
positions. Editing-mode commands are only accepted while the "Edit Lists"
screen is open.
"""
from typing import List, Optional

from board import ReminderBoard
from models import BackgroundColor, Category
from view import BoardView, category_label

# --- terminal control helpers ---
# We aggressively clear: ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home))
# Order (3J first) improves reliability in some terminals.
def _clear_screen() -> None:  # pragma: no cover
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    # Switch to alternate screen buffer
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    # Return to normal screen buffer
    print("\033[?1049l", end="", flush=True)


class CLI:
    def __init__(self, board: ReminderBoard, view: Optional[BoardView] = None, alt_screen: bool = True):
        self.board: ReminderBoard = board
        self.view: BoardView = view or BoardView(board)
        self.alt_screen: bool = alt_screen

    def run(self) -> None:
        """Main REPL loop; the screen is cleared and redrawn only after a change,
        so messages printed by a command stay visible until the next one.
        """
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                if self.view.dirty:
                    _clear_screen()
                    self.view.display()
                line = input("\n: ").strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    self._help()
                    input("\nPress Enter to return to the board...")
                    self.view.dirty = True
                    continue
                if lower == 'exit':
                    exit_message = "Goodbye."
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        cmd = tokens[0].lower()
        if self.board.editing:
            self._handle_edit_command(cmd, tokens, line)
            return
        if cmd == 'add':
            self._cmd_add(line)
        elif cmd in ('sel', 's', 'select'):
            self._cmd_select(tokens)
        elif cmd == 'rm':
            self._cmd_rm(tokens)
        elif cmd == 'bg':
            self._cmd_bg(tokens)
        elif cmd == 'edit':
            self.board.open_category_editor()
        else:
            print("\nUnknown command. Type 'help' for instructions.")

    def _handle_edit_command(self, cmd: str, tokens: List[str], line: str) -> None:
        if cmd == 'done':
            self.board.close_category_editor()
        elif cmd == 'title':
            self._cmd_title(tokens, line)
        elif cmd == 'emoji':
            self._cmd_emoji(tokens, line)
        else:
            print("\nUnknown command. Use title, emoji or done.")

    # ---- individual command helpers ----
    def _cmd_add(self, line: str) -> None:
        parts = line.split(None, 1)
        if len(parts) > 1:  # inline shorthand
            self.board.set_input(parts[1])
        else:
            self.board.set_input(input("Enter reminder title: "))
        # blank titles are ignored by the board; the buffer is cleared either way
        self.board.submit_input()

    def _cmd_select(self, tokens: List[str]) -> None:
        if len(tokens) != 2:
            print("Usage: sel <list>; lists: s/w/h/m or 1-4")
            return
        category = self._resolve_category(tokens[1])
        if category is not None:
            self.board.select(category)

    def _cmd_rm(self, tokens: List[str]) -> None:
        if len(tokens) < 2:
            print("Usage: rm <n> [<n> ...]")
            return
        size = len(self.board.current_list())
        positions: List[int] = []
        for raw in tokens[1:]:
            raw = raw.rstrip('.,')
            if not raw.isdigit() or not 1 <= int(raw) <= size:
                print("Invalid index.")
                return
            positions.append(int(raw) - 1)
        self.board.delete_reminders(self.board.selection, positions)

    def _cmd_bg(self, tokens: List[str]) -> None:
        if len(tokens) > 1:
            choice = ' '.join(tokens[1:])
        else:
            print("Choose Background Color")
            for pos, option in enumerate(self.board.background_options(), start=1):
                print(f"  {pos}. {option.value}")
            print("  c. Cancel")
            choice = input("Color: ").strip()
            if not choice or choice.lower() in ('c', 'cancel'):
                self.view.dirty = True
                return
        selected = BackgroundColor.from_str(choice)
        if selected is None:
            print("Unknown color.")
            return
        self.board.set_background(selected)

    def _cmd_title(self, tokens: List[str], line: str) -> None:
        if len(tokens) < 2:
            print("Usage: title <list> <new title>")
            return
        category = self._resolve_category(tokens[1])
        if category is None:
            return
        parts = line.split(None, 2)
        new_title = parts[2].strip() if len(parts) > 2 else ''
        self.board.rename_category(category, new_title)

    def _cmd_emoji(self, tokens: List[str], line: str) -> None:
        if len(tokens) < 2:
            print("Usage: emoji <list> <emoji>")
            return
        category = self._resolve_category(tokens[1])
        if category is None:
            return
        parts = line.split(None, 2)
        self.board.set_emoji(category, parts[2].strip() if len(parts) > 2 else '')

    def _resolve_category(self, raw: str) -> Optional[Category]:
        # current (possibly renamed) titles win over built-in names and aliases
        for row in self.board.categories.models():
            if row.title and row.title.lower() == raw.lower():
                return row.category
        category = Category.from_str(raw)
        if category is None:
            print("Unknown list.")
        return category

    # -------------------- user-interactive flows --------------------
    def _help(self) -> None:
        print("Commands:")
        print("  add                 Add a reminder to the current list (prompts for title)")
        print("  add <title...>      Shorthand add with inline title (e.g., add buy milk)")
        print("  sel <list>          Switch list; current title first, then s/w/h/m or 1-4")
        print("  rm <n> [<n> ...]    Remove reminders by position (e.g., rm 1 3)")
        print("  bg [<color>]        Choose background color (menu if no color given)")
        print("  edit                Edit list titles and emoji")
        print("    title <list> <t>  Rename a list (edit mode)")
        print("    emoji <list> <e>  Change a list's emoji (edit mode)")
        print("    done              Leave edit mode")
        print("  help                Show this help (press Enter to return)")
        print("  exit                Exit (reminders are not saved)")
        print("Lists:")
        for category in Category:
            print(f"    {category_label(self.board, category)}")
