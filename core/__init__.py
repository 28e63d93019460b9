from .settings_tree import Entry, Section, SettingsTree
from .errors import (
    PreferencesError,
    IOFailure,
    ParseFailure,
    UnknownActionError,
    PromptFailure,
    InvalidValueError,
)
from .hotkeys import KeyEvent, HotkeyResolver, build_chord, find_duplicate_hotkeys
from .actions import (
    Command,
    ActionDispatcher,
    HOTKEYS_SECTION,
    ACTION_EXIT,
    ACTION_OPEN_PREFERENCES,
    ACTION_SHOW_HOTKEYS,
)

__all__ = [
    "Entry",
    "Section",
    "SettingsTree",
    # Errors
    "PreferencesError",
    "IOFailure",
    "ParseFailure",
    "UnknownActionError",
    "PromptFailure",
    "InvalidValueError",
    # Hotkeys
    "KeyEvent",
    "HotkeyResolver",
    "build_chord",
    "find_duplicate_hotkeys",
    # Actions
    "Command",
    "ActionDispatcher",
    "HOTKEYS_SECTION",
    "ACTION_EXIT",
    "ACTION_OPEN_PREFERENCES",
    "ACTION_SHOW_HOTKEYS",
]
