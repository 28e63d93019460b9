from enum import Enum
from typing import Dict

from .errors import UnknownActionError

HOTKEYS_SECTION = "Preferences.HotKeys"
ACTION_EXIT = "Preferences.HotKeys.Exit"
ACTION_OPEN_PREFERENCES = "Preferences.HotKeys.OpenPreferences"
ACTION_SHOW_HOTKEYS = "Preferences.HotKeys.ShowHotKeys"


class Command(Enum):
    SHUTDOWN = "shutdown"
    OPEN_EDITOR = "open_editor"
    SHOW_HOTKEYS = "show_hotkeys"


class ActionDispatcher:
    """Closed mapping from well-known hotkey entry names to host commands."""

    COMMANDS: Dict[str, Command] = {
        ACTION_EXIT.lower(): Command.SHUTDOWN,
        ACTION_OPEN_PREFERENCES.lower(): Command.OPEN_EDITOR,
        ACTION_SHOW_HOTKEYS.lower(): Command.SHOW_HOTKEYS,
    }

    def dispatch(self, action_name: str) -> Command:
        command = self.COMMANDS.get((action_name or "").lower())
        if command is None:
            raise UnknownActionError(action_name)
        return command


__all__ = [
    "Command",
    "ActionDispatcher",
    "HOTKEYS_SECTION",
    "ACTION_EXIT",
    "ACTION_OPEN_PREFERENCES",
    "ACTION_SHOW_HOTKEYS",
]
