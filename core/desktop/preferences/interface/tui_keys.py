"""Translate prompt_toolkit key presses into canonical KeyEvents."""

import re
from typing import Optional, Sequence

from prompt_toolkit.keys import Keys

from core import KeyEvent

NAMED_KEYS = {
    "enter": "Enter",
    "escape": "Escape",
    "tab": "Tab",
    "backspace": "Backspace",
    "space": "Space",
    "up": "Up",
    "down": "Down",
    "left": "Left",
    "right": "Right",
    "home": "Home",
    "end": "End",
    "pageup": "PageUp",
    "pagedown": "PageDown",
    "insert": "Insert",
    "delete": "Delete",
}

# Control bytes that terminals report under their ctrl-letter names.
ALIASES = {
    "c-i": KeyEvent("Tab"),
    "c-m": KeyEvent("Enter"),
    "c-j": KeyEvent("Enter"),
    "c-h": KeyEvent("Backspace"),
    "c-@": KeyEvent("Space", ctrl=True),
    "s-tab": KeyEvent("Tab", shift=True),
}

_FUNCTION_KEY = re.compile(r"f(\d{1,2})")


def key_name(key) -> str:
    if isinstance(key, Keys):
        return key.value
    return str(key)


def _base_key(name: str, ctrl: bool) -> Optional[KeyEvent]:
    if len(name) == 1:
        if name == " ":
            return KeyEvent("Space", ctrl=ctrl)
        if name.isalpha():
            return KeyEvent(name.upper(), ctrl=ctrl, shift=name.isupper() and not ctrl)
        if name.isprintable():
            return KeyEvent(name, ctrl=ctrl)
        return None
    lowered = name.lower()
    if lowered in NAMED_KEYS:
        return KeyEvent(NAMED_KEYS[lowered], ctrl=ctrl)
    match = _FUNCTION_KEY.fullmatch(lowered)
    if match and 1 <= int(match.group(1)) <= 24:
        return KeyEvent(f"F{int(match.group(1))}", ctrl=ctrl)
    return None


def key_event_from_key(key, alt: bool = False) -> Optional[KeyEvent]:
    """KeyEvent for a single prompt_toolkit key, None for non-key input (mouse, CPR, paste)."""
    name = key_name(key)
    if not name or (name.startswith("<") and name.endswith(">")):
        return None
    if name in ALIASES:
        event = ALIASES[name]
        return KeyEvent(event.key, ctrl=event.ctrl, alt=alt, shift=event.shift)

    ctrl = shift = False
    rest = name
    if len(rest) > 2 and rest.startswith("c-"):
        ctrl, rest = True, rest[2:]
    if len(rest) > 2 and rest.startswith("s-"):
        shift, rest = True, rest[2:]

    event = _base_key(rest, ctrl)
    if event is None:
        return None
    return KeyEvent(event.key, ctrl=event.ctrl, alt=alt, shift=event.shift or shift)


def key_event_from_presses(presses: Sequence) -> Optional[KeyEvent]:
    """Collapse a matched key sequence into one KeyEvent.

    ``escape`` followed by another key is how terminals report Alt+key.
    """
    names = [key_name(getattr(press, "key", press)) for press in presses]
    if not names:
        return None
    if len(names) > 1 and names[0] == Keys.Escape.value:
        return key_event_from_key(names[-1], alt=True)
    return key_event_from_key(names[-1])


__all__ = ["key_event_from_key", "key_event_from_presses", "key_name", "NAMED_KEYS"]
