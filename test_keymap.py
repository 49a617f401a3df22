"""Tests for button and key mapping"""
import pytest

from calculator import Command, Digit, Operator
from keymap import event_for_button, event_for_key


class TestButtons:
    @pytest.mark.parametrize("label, event", [
        ("7", Digit("7")),
        (".", Digit(".")),
        ("+", Operator("+")),
        ("−", Operator("-")),
        ("×", Operator("*")),
        ("÷", Operator("/")),
        ("=", Command.EQUALS),
        ("C", Command.CLEAR),
        ("AC", Command.ALL_CLEAR),
        ("+/-", Command.TOGGLE_SIGN),
        ("%", Command.PERCENT),
        ("M+", Command.MEMORY_ADD),
        ("M-", Command.MEMORY_SUBTRACT),
        ("MR", Command.MEMORY_RECALL),
        ("MC", Command.MEMORY_CLEAR),
        ("⌫", Command.BACKSPACE),
        ("Copy", Command.COPY),
    ])
    def test_known(self, label, event):
        assert event_for_button(label) == event

    @pytest.mark.parametrize("label", ["", "sin", "^", None, 7, "12"])
    def test_unknown(self, label):
        assert event_for_button(label) is None


class TestKeys:
    @pytest.mark.parametrize("char, keysym, event", [
        ("5", "5", Digit("5")),
        (".", "period", Digit(".")),
        ("*", "asterisk", Operator("*")),
        ("/", "slash", Operator("/")),
        ("-", "minus", Operator("-")),
        ("\r", "Return", Command.EQUALS),
        ("=", "equal", Command.EQUALS),
        ("", "KP_Enter", Command.EQUALS),
        ("\x1b", "Escape", Command.CLEAR),
        ("", "Delete", Command.CLEAR),
        ("\x08", "BackSpace", Command.BACKSPACE),
        ("%", "percent", Command.PERCENT),
        ("c", "c", Command.COPY),
    ])
    def test_known(self, char, keysym, event):
        assert event_for_key(char, keysym) == event

    def test_no_key_clears_history(self):
        for keysym in ["Delete", "Escape", "BackSpace"]:
            assert event_for_key("", keysym) != Command.ALL_CLEAR
        assert event_for_button("AC") == Command.ALL_CLEAR

    def test_browser_key_names(self):
        assert event_for_key("Enter", "Enter") == Command.EQUALS
        assert event_for_key("Backspace", "Backspace") == Command.BACKSPACE

    @pytest.mark.parametrize("char, keysym", [("", "Shift_L"), ("x", "x"), ("Tab", "Tab")])
    def test_unknown(self, char, keysym):
        assert event_for_key(char, keysym) is None
