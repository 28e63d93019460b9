"""Host loop: one key event at a time -> hotkey -> command -> handler."""

import logging
from typing import Callable, List, Optional, Tuple

from application.ports import IdentityLocalizer, KeySource, Localizer, Renderer, ThemeApplier
from core import (
    ActionDispatcher,
    Command,
    HotkeyResolver,
    KeyEvent,
    SettingsTree,
    UnknownActionError,
    find_duplicate_hotkeys,
)
from core.desktop.preferences.application.editor_session import (
    THEME_ENTRY,
    PreferencesEditorSession,
    SessionResult,
)

logger = logging.getLogger("prefs_editor.host")

HOTKEY_MARKER = "hotkey"

MESSAGES = {
    "HOTKEYS_TITLE": "Keyboard Shortcuts",
    "HOTKEYS_SHORTCUT": "Shortcut",
    "HOTKEYS_ACTION": "Action",
    "HOTKEYS_NONE": "No hotkey configuration found in preferences",
}


def hotkey_rows(tree: SettingsTree, localizer: Optional[Localizer] = None) -> List[Tuple[str, str]]:
    """(chord, action display name) for every hotkey-like entry with a value.

    A section counts when its name mentions HotKey or when any of its entries
    does; every non-empty entry of such a section is listed.
    """
    localizer = localizer or IdentityLocalizer()
    rows: List[Tuple[str, str]] = []
    for section in tree.sections:
        related = HOTKEY_MARKER in section.name.lower() or any(
            HOTKEY_MARKER in entry.name.lower() for entry in section.entries
        )
        if not related:
            continue
        for entry in section.entries:
            if entry.value:
                rows.append((entry.value, localizer.localize(entry.name)))
    return rows


def theme_value(tree: SettingsTree, theme_entry: str = THEME_ENTRY) -> Optional[str]:
    for _, entry in tree.iter_entries():
        if entry.name.lower() == theme_entry.lower():
            return entry.value or None
    return None


class HostLoop:
    def __init__(
        self,
        tree: SettingsTree,
        key_source: KeySource,
        renderer: Renderer,
        persist: Callable[[SettingsTree], object],
        localizer: Optional[Localizer] = None,
        theme_applier: Optional[ThemeApplier] = None,
        resolver: Optional[HotkeyResolver] = None,
        dispatcher: Optional[ActionDispatcher] = None,
    ):
        self.tree = tree
        self.key_source = key_source
        self.renderer = renderer
        self.persist = persist
        self.localizer = localizer or IdentityLocalizer()
        self.theme_applier = theme_applier
        self.resolver = resolver or HotkeyResolver()
        self.dispatcher = dispatcher or ActionDispatcher()
        self.running = False
        self.last_session: Optional[SessionResult] = None

    def warn_duplicate_hotkeys(self) -> None:
        for chord, names in find_duplicate_hotkeys(self.tree).items():
            logger.warning("Hotkey %s is bound to several entries (%s); %s wins", chord, ", ".join(names), names[0])

    def apply_current_theme(self) -> None:
        if self.theme_applier is None:
            return
        value = theme_value(self.tree)
        if value:
            self.theme_applier.apply_theme(value)

    def run(self) -> int:
        self.running = True
        logger.info("Host loop started")
        self.warn_duplicate_hotkeys()
        self.apply_current_theme()
        while self.running:
            event = self.key_source.read_key()
            if event is None:
                break
            self.handle_key(event)
        self.running = False
        logger.info("Host loop stopped")
        return 0

    def handle_key(self, event: KeyEvent) -> Optional[Command]:
        """Process one key press; returns the executed command, None when unhandled."""
        action = self.resolver.resolve(event, self.tree)
        if action is None:
            logger.debug("No hotkey bound to %s", event.chord)
            return None
        try:
            command = self.dispatcher.dispatch(action)
        except UnknownActionError as exc:
            logger.warning("Ignoring %s: %s", event.chord, exc)
            return None
        self.execute(command)
        return command

    def execute(self, command: Command) -> None:
        if command is Command.SHUTDOWN:
            logger.info("Shutdown requested")
            self.running = False
        elif command is Command.OPEN_EDITOR:
            self.open_editor()
        elif command is Command.SHOW_HOTKEYS:
            self.show_hotkeys()

    def open_editor(self) -> SessionResult:
        session = PreferencesEditorSession(self.tree, self.renderer, self.persist, self.localizer)
        result = session.run()
        self.last_session = result
        if result.reapply_theme:
            self.apply_current_theme()
        return result

    def _t(self, key: str) -> str:
        text = self.localizer.localize(key)
        return MESSAGES.get(key, key) if text == key else text

    def show_hotkeys(self) -> None:
        rows = hotkey_rows(self.tree, self.localizer)
        if not rows:
            self.renderer.warning(self._t("HOTKEYS_NONE"))
            return
        self.renderer.render_table(
            self._t("HOTKEYS_TITLE"),
            (self._t("HOTKEYS_SHORTCUT"), self._t("HOTKEYS_ACTION")),
            rows,
        )
        self.renderer.pause()


__all__ = ["HostLoop", "hotkey_rows", "theme_value"]
