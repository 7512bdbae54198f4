"""
Tests for the reminder board: lists, selection, input buffer, background, modes.
"""
import pytest

from board import ReminderBoard
from models import Category, BackgroundColor, ScreenMode


def _titles(reminders):
    return [r.title for r in reminders]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Reminder lists
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_fresh_board_has_empty_list_for_every_category(board):
    for category in Category:
        assert board.reminders(category) == []
    assert board.selection == Category.SCHOOL
    assert board.current_list() == []


def test_add_appends_in_insertion_order(board):
    board.add_reminder(Category.HOME, "Water plants")
    board.add_reminder(Category.HOME, "Buy milk")
    assert _titles(board.reminders(Category.HOME)) == ["Water plants", "Buy milk"]


def test_add_sets_exact_title_as_last_element(board):
    board.add_reminder(Category.WORK, "Buy milk")
    board.select(Category.WORK)
    assert board.current_list()[-1].title == "Buy milk"


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_blank_titles_are_ignored(board, title):
    board.add_reminder(Category.WORK, "Existing")
    assert board.add_reminder(Category.WORK, title) is None
    assert len(board.reminders(Category.WORK)) == 1


def test_add_strips_surrounding_whitespace(board):
    reminder = board.add_reminder(Category.MISC, "  call mom  ")
    assert reminder.title == "call mom"


def test_reminder_ids_are_unique(board):
    a = board.add_reminder(Category.SCHOOL, "Same")
    b = board.add_reminder(Category.SCHOOL, "Same")
    assert a.id != b.id


def test_reminders_returns_a_copy(board):
    board.add_reminder(Category.SCHOOL, "Essay")
    board.reminders(Category.SCHOOL).clear()
    assert len(board.reminders(Category.SCHOOL)) == 1


def test_delete_positions_simultaneously(board):
    for title in ("A", "B", "C"):
        board.add_reminder(Category.SCHOOL, title)
    removed = board.delete_reminders(Category.SCHOOL, {0, 2})
    assert _titles(removed) == ["A", "C"]
    assert _titles(board.reminders(Category.SCHOOL)) == ["B"]


def test_delete_unordered_and_duplicate_positions(board):
    for title in ("A", "B", "C", "D"):
        board.add_reminder(Category.HOME, title)
    board.delete_reminders(Category.HOME, [3, 1, 3])
    assert _titles(board.reminders(Category.HOME)) == ["A", "C"]


def test_delete_out_of_range_raises_and_keeps_list(board):
    board.add_reminder(Category.WORK, "A")
    with pytest.raises(IndexError):
        board.delete_reminders(Category.WORK, [0, 5])
    assert _titles(board.reminders(Category.WORK)) == ["A"]


def test_delete_nothing_is_a_noop(board):
    board.add_reminder(Category.WORK, "A")
    assert board.delete_reminders(Category.WORK, []) == []
    assert len(board.reminders(Category.WORK)) == 1


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Selection & display
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_select_switches_current_list_without_leakage(board):
    board.add_reminder(Category.SCHOOL, "Homework")
    board.add_reminder(Category.WORK, "Standup")
    board.select(Category.WORK)
    assert _titles(board.current_list()) == ["Standup"]
    board.select(Category.HOME)
    assert board.current_list() == []
    board.select(Category.WORK)
    assert _titles(board.current_list()) == ["Standup"]
    board.select(Category.SCHOOL)
    assert _titles(board.current_list()) == ["Homework"]


def test_current_emoji_and_title_follow_selection(board):
    board.select(Category.HOME)
    assert board.current_emoji() == Category.HOME.default_emoji
    assert board.current_title() == "Home"
    board.set_emoji(Category.HOME, "H")
    assert board.current_emoji() == "H"


def test_rename_and_emoji_do_not_touch_lists(board):
    board.add_reminder(Category.WORK, "One")
    board.add_reminder(Category.WORK, "Two")
    before = board.reminders(Category.WORK)
    board.rename_category(Category.WORK, "Job")
    board.set_emoji(Category.WORK, "X")
    assert board.reminders(Category.WORK) == before


def test_submit_input_adds_and_clears_buffer(board):
    board.select(Category.MISC)
    board.set_input("Renew passport")
    reminder = board.submit_input()
    assert reminder.title == "Renew passport"
    assert board.pending_input == ''
    assert _titles(board.reminders(Category.MISC)) == ["Renew passport"]


def test_submit_blank_input_still_clears_buffer(board):
    board.set_input("   ")
    assert board.submit_input() is None
    assert board.pending_input == ''
    assert board.current_list() == []


def test_work_scenario(board):
    board.select(Category.WORK)
    board.add_reminder(Category.WORK, "Finish report")
    board.add_reminder(Category.WORK, "")
    board.add_reminder(Category.WORK, "Email client")
    board.delete_reminders(Category.WORK, [0])
    assert _titles(board.current_list()) == ["Email client"]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Background & mode
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_background_defaults_to_white_and_can_change(board):
    assert board.background == BackgroundColor.WHITE
    board.set_background(BackgroundColor.PINK)
    assert board.background == BackgroundColor.PINK


def test_background_from_constructor():
    assert ReminderBoard(background=BackgroundColor.GRAY).background == BackgroundColor.GRAY


def test_background_options_are_the_full_menu(board):
    names = [c.value for c in board.background_options()]
    assert names == ["White", "Red", "Blue", "Green", "Yellow", "Orange", "Pink", "Gray"]


def test_category_editor_state_machine(board):
    assert board.mode == ScreenMode.NORMAL
    board.open_category_editor()
    assert board.editing
    board.open_category_editor()
    assert board.mode == ScreenMode.EDITING_CATEGORIES
    board.close_category_editor()
    assert not board.editing


def test_lists_stay_mutable_while_editing(board):
    board.open_category_editor()
    board.add_reminder(Category.HOME, "Fix sink")
    assert len(board.reminders(Category.HOME)) == 1


def test_str_summarizes_counts(board):
    board.add_reminder(Category.WORK, "A")
    assert str(board) == "Selected: School (School: 0, Work: 1, Home: 0, Miscellaneous: 0)"
