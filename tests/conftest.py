"""Shared fixtures for reminder board tests."""

import sys
from pathlib import Path

import pytest

# Ensure the flat src/ modules are importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import theme  # noqa: E402
from board import ReminderBoard  # noqa: E402


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Render without ANSI codes regardless of FORCE_COLOR or a TTY."""
    monkeypatch.setattr(theme, "_ENABLE", False)


@pytest.fixture
def board():
    return ReminderBoard()
