"""Hotkey chords and their resolution against the settings tree."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .settings_tree import SettingsTree

MODIFIER_ORDER = ("Ctrl", "Alt", "Shift")


@dataclass(frozen=True)
class KeyEvent:
    """A single key press: canonical base key name plus held modifiers."""

    key: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def chord(self) -> str:
        return build_chord(self)


def build_chord(event: KeyEvent) -> str:
    """Canonical chord string, e.g. ``Ctrl+Shift+P``.

    Modifiers always come in Ctrl, Alt, Shift order regardless of how the
    event was produced.
    """
    held = (event.ctrl, event.alt, event.shift)
    parts = [name for name, on in zip(MODIFIER_ORDER, held) if on]
    parts.append(event.key)
    return "+".join(parts)


def find_duplicate_hotkeys(tree: SettingsTree) -> Dict[str, List[str]]:
    """Chords configured on more than one entry -> entry names in scan order."""
    seen: Dict[str, List[str]] = {}
    for _, entry in tree.iter_entries():
        if not entry.value:
            continue
        seen.setdefault(entry.value, []).append(entry.name)
    return {chord: names for chord, names in seen.items() if len(names) > 1}


class HotkeyResolver:
    """Map key presses to the entry whose configured value equals the chord."""

    def resolve(self, event: KeyEvent, tree: Optional[SettingsTree]) -> Optional[str]:
        if tree is None:
            return None
        chord = build_chord(event)
        # first match wins when several entries share a chord
        for _, entry in tree.iter_entries():
            if entry.value and entry.value == chord:
                return entry.name
        return None


__all__ = ["KeyEvent", "MODIFIER_ORDER", "build_chord", "find_duplicate_hotkeys", "HotkeyResolver"]
