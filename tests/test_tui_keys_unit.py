#!/usr/bin/env python3
"""Unit tests for prompt_toolkit key press translation."""

import pytest
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from core import KeyEvent
from core.desktop.preferences.interface.tui_keys import key_event_from_key, key_event_from_presses


@pytest.mark.parametrize(
    "key, chord",
    [
        ("a", "A"),
        ("P", "Shift+P"),
        ("1", "1"),
        ("?", "?"),
        (" ", "Space"),
        (Keys.ControlP, "Ctrl+P"),
        (Keys.ControlM, "Enter"),
        (Keys.ControlI, "Tab"),
        (Keys.ControlH, "Backspace"),
        (Keys.BackTab, "Shift+Tab"),
        (Keys.Escape, "Escape"),
        (Keys.Up, "Up"),
        (Keys.PageDown, "PageDown"),
        (Keys.Delete, "Delete"),
        (Keys.F1, "F1"),
        (Keys.F12, "F12"),
        (Keys.ShiftUp, "Shift+Up"),
        (Keys.ControlShiftUp, "Ctrl+Shift+Up"),
        (Keys.ControlF5, "Ctrl+F5"),
        (Keys.ControlAt, "Ctrl+Space"),
    ],
)
def test_key_event_from_key(key, chord):
    assert key_event_from_key(key).chord == chord


@pytest.mark.parametrize("key", [Keys.CPRResponse, Keys.Vt100MouseEvent, Keys.BracketedPaste, Keys.SIGINT, "\x00"])
def test_non_key_input_is_ignored(key):
    assert key_event_from_key(key) is None


class TestPresses:
    def test_escape_prefix_means_alt(self):
        presses = [KeyPress(Keys.Escape, "\x1b"), KeyPress("x", "x")]
        assert key_event_from_presses(presses) == KeyEvent("X", alt=True)

    def test_alt_with_ctrl(self):
        presses = [KeyPress(Keys.Escape, "\x1b"), KeyPress(Keys.ControlP, "\x10")]
        assert key_event_from_presses(presses).chord == "Ctrl+Alt+P"

    def test_single_escape(self):
        assert key_event_from_presses([KeyPress(Keys.Escape, "\x1b")]) == KeyEvent("Escape")

    def test_plain_names(self):
        assert key_event_from_presses(["c-q"]).chord == "Ctrl+Q"

    def test_empty(self):
        assert key_event_from_presses([]) is None
