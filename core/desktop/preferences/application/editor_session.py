"""Interactive preferences editor: section -> entry -> value, then save or discard.

The session drives an injected renderer through explicit states. It edits the
live SettingsTree in place, keeps a deep-copy snapshot from the moment it was
created, and touches persistence exactly once per "Save & Exit" choice.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from application.ports import IdentityLocalizer, Localizer, Renderer
from core import Entry, PreferencesError, PromptFailure, Section, SettingsTree

logger = logging.getLogger("prefs_editor.session")

THEME_ENTRY = "Preferences.General.Theme"
MAX_PROMPT_FAILURES = 3

MESSAGES = {
    "EDITOR_TITLE": "Preferences Editor",
    "EDITOR_SECTION_TITLE": "Preferences Editor - {section}",
    "EDITOR_SELECT_SECTION_HINT": "Select a section to configure",
    "EDITOR_SECTION_PROMPT": "Select a preferences section:",
    "EDITOR_SAVE_AND_EXIT": "💾 Save & Exit",
    "EDITOR_CANCEL_DISCARD": "❌ Cancel (Discard Changes)",
    "EDITOR_EXIT": "← Exit",
    "EDITOR_SELECT_ENTRY_HINT": "Select an entry to edit",
    "EDITOR_ENTRY_PROMPT": "Select an entry to edit:",
    "EDITOR_BACK": "← Back to Section Selection",
    "EDITOR_EDITING": "Editing: {entry}",
    "EDITOR_CURRENT_VALUE": "Current value: {value}",
    "EDITOR_AVAILABLE_OPTIONS": "Available options: {options}",
    "EDITOR_SELECT_VALUE": "Select new value for '{entry}':",
    "EDITOR_ENTER_VALUE": "Enter new value for '{entry}':",
    "EDITOR_CANCEL": "← Cancel",
    "EDITOR_UPDATED": "Updated '{entry}' from '{old}' to '{new}'",
    "EDITOR_NO_CHANGES": "No changes made.",
    "EDITOR_SAVED": "All changes have been saved.",
    "EDITOR_SAVE_FAILED": "Failed to save preferences: {error}",
    "EDITOR_DISCARDED": "All changes have been discarded.",
    "EDITOR_NO_SECTIONS": "No preferences sections found.",
    "EDITOR_NO_ENTRIES": "No entries found in this section.",
    "EDITOR_UNSAVED": "You have unsaved changes: choose Save & Exit or Cancel.",
    "EDITOR_PROMPT_FAILED": "Input error: {error}",
    "EDITOR_INPUT_LOST": "Input is not available, leaving the editor without saving.",
    "TABLE_SETTING": "Setting",
    "TABLE_VALUE": "Current Value",
    "TABLE_OPTIONS": "Available Options",
    "TABLE_ANY_VALUE": "[any value]",
}


class SessionState(Enum):
    SECTION_SELECT = "section_select"
    ENTRY_SELECT = "entry_select"
    ENTRY_EDIT = "entry_edit"
    EXITING = "exiting"


class SessionOutcome(Enum):
    SAVED = "saved"
    DISCARDED = "discarded"


class _Choice(Enum):
    SECTION = "section"
    SAVE_AND_EXIT = "save_and_exit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class SessionResult:
    outcome: SessionOutcome
    changed_entries: Tuple[str, ...] = ()
    reapply_theme: bool = False


@dataclass
class _Menu:
    labels: List[str] = field(default_factory=list)
    actions: List[Tuple[_Choice, Optional[Section]]] = field(default_factory=list)

    def add(self, label: str, action: _Choice, section: Optional[Section] = None) -> None:
        self.labels.append(label)
        self.actions.append((action, section))


class PreferencesEditorSession:
    def __init__(
        self,
        tree: SettingsTree,
        renderer: Renderer,
        persist: Callable[[SettingsTree], object],
        localizer: Optional[Localizer] = None,
        theme_entry: str = THEME_ENTRY,
    ):
        self.tree = tree
        self.renderer = renderer
        self.persist = persist
        self.localizer = localizer or IdentityLocalizer()
        self.theme_entry = theme_entry
        self.state = SessionState.SECTION_SELECT
        self.current_section: Optional[Section] = None
        self.current_entry: Optional[Entry] = None
        self.dirty = False
        self.outcome: Optional[SessionOutcome] = None
        self.changed: Tuple[str, ...] = ()
        self._snapshot = tree.clone()
        self._prompt_failures = 0

    # -- helpers ---------------------------------------------------------

    def _t(self, key: str, **kwargs) -> str:
        text = self.localizer.localize(key)
        if text == key:
            text = MESSAGES.get(key, key)
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return text

    def _display(self, name: str) -> str:
        return self.localizer.localize(name) or name

    def _prompt_failed(self, exc: PromptFailure) -> None:
        self._prompt_failures += 1
        logger.error("Prompt failed in %s: %s", self.state.value, exc)
        self.renderer.error(self._t("EDITOR_PROMPT_FAILED", error=exc))
        if self._prompt_failures >= MAX_PROMPT_FAILURES:
            self.renderer.warning(self._t("EDITOR_INPUT_LOST"))
            self._discard()

    def _goto(self, state: SessionState) -> None:
        self._prompt_failures = 0
        self.state = state

    def _discard(self) -> None:
        if self.dirty:
            self.tree.restore(self._snapshot)
            self.dirty = False
        self.current_section = None
        self.current_entry = None
        self.outcome = SessionOutcome.DISCARDED
        self.changed = ()
        self._goto(SessionState.EXITING)

    # -- driver ----------------------------------------------------------

    def run(self) -> SessionResult:
        logger.debug("Opening preferences editor")
        if not self.tree.sections:
            self.renderer.warning(self._t("EDITOR_NO_SECTIONS"))
            self.outcome = SessionOutcome.DISCARDED
            self._goto(SessionState.EXITING)
        while self.state is not SessionState.EXITING:
            self.step()
        return self.result()

    def step(self) -> SessionState:
        """Run one prompt of the current state and return the state it led to."""
        handlers = {
            SessionState.SECTION_SELECT: self._section_select,
            SessionState.ENTRY_SELECT: self._entry_select,
            SessionState.ENTRY_EDIT: self._entry_edit,
        }
        handler = handlers.get(self.state)
        if handler is not None:
            handler()
        return self.state

    def result(self) -> SessionResult:
        outcome = self.outcome or SessionOutcome.DISCARDED
        theme = self.theme_entry.lower()
        reapply = outcome is SessionOutcome.SAVED and any(name.lower() == theme for name in self.changed)
        return SessionResult(outcome=outcome, changed_entries=tuple(self.changed), reapply_theme=reapply)

    # -- states ----------------------------------------------------------

    def _section_menu(self) -> _Menu:
        menu = _Menu()
        for section in self.tree.ordered_sections():
            menu.add(self._display(section.name), _Choice.SECTION, section)
        if self.dirty:
            menu.add(self._t("EDITOR_SAVE_AND_EXIT"), _Choice.SAVE_AND_EXIT)
            menu.add(self._t("EDITOR_CANCEL_DISCARD"), _Choice.CANCEL)
        else:
            menu.add(self._t("EDITOR_EXIT"), _Choice.CANCEL)
        return menu

    def _section_select(self) -> None:
        self.renderer.render_header(self._t("EDITOR_TITLE"), self._t("EDITOR_SELECT_SECTION_HINT"))
        menu = self._section_menu()
        try:
            index = self.renderer.prompt_choice(self._t("EDITOR_SECTION_PROMPT"), menu.labels)
        except PromptFailure as exc:
            self._prompt_failed(exc)
            return
        self._prompt_failures = 0

        if index is None or not 0 <= index < len(menu.actions):
            if self.dirty:
                self.renderer.warning(self._t("EDITOR_UNSAVED"))
                return
            self._discard()
            return

        action, section = menu.actions[index]
        if action is _Choice.SECTION:
            self.current_section = section
            self._goto(SessionState.ENTRY_SELECT)
        elif action is _Choice.SAVE_AND_EXIT:
            self._save_and_exit()
        else:
            was_dirty = self.dirty
            self._discard()
            if was_dirty:
                self.renderer.info(self._t("EDITOR_DISCARDED"))

    def _save_and_exit(self) -> None:
        changed = tuple(self.tree.changed_entries(self._snapshot))
        try:
            self.persist(self.tree)
        except (PreferencesError, OSError) as exc:
            logger.error("Error saving preferences: %s", exc)
            self.renderer.error(self._t("EDITOR_SAVE_FAILED", error=exc))
            return
        self.changed = changed
        self._snapshot = self.tree.clone()
        self.dirty = False
        self.outcome = SessionOutcome.SAVED
        logger.info("Preferences saved (%d changed entries)", len(changed))
        self.renderer.success(self._t("EDITOR_SAVED"))
        self._goto(SessionState.EXITING)

    def render_section_table(self, section: Section) -> None:
        rows = []
        for entry in section.entries:
            options = ", ".join(entry.options) if entry.has_options else self._t("TABLE_ANY_VALUE")
            rows.append((self._display(entry.name), entry.value, options))
        self.renderer.render_table(
            self._display(section.name),
            (self._t("TABLE_SETTING"), self._t("TABLE_VALUE"), self._t("TABLE_OPTIONS")),
            rows,
        )

    def _entry_select(self) -> None:
        section = self.current_section
        if section is None:
            self._goto(SessionState.SECTION_SELECT)
            return
        section_name = self._display(section.name)
        self.renderer.render_header(
            self._t("EDITOR_SECTION_TITLE", section=section_name),
            self._t("EDITOR_SELECT_ENTRY_HINT"),
        )
        if not section.entries:
            self.renderer.warning(self._t("EDITOR_NO_ENTRIES"))
            self.renderer.pause()
            self.current_section = None
            self._goto(SessionState.SECTION_SELECT)
            return

        self.render_section_table(section)
        labels = [self._display(entry.name) for entry in section.entries]
        labels.append(self._t("EDITOR_BACK"))
        try:
            index = self.renderer.prompt_choice(self._t("EDITOR_ENTRY_PROMPT"), labels)
        except PromptFailure as exc:
            self._prompt_failed(exc)
            return

        if index is None or not 0 <= index < len(section.entries):
            self.current_section = None
            self._goto(SessionState.SECTION_SELECT)
            return
        self.current_entry = section.entries[index]
        self._goto(SessionState.ENTRY_EDIT)

    def _entry_edit(self) -> None:
        section, entry = self.current_section, self.current_entry
        if section is None or entry is None:
            self._goto(SessionState.SECTION_SELECT)
            return
        entry_name = self._display(entry.name)
        current = entry.value
        self.renderer.render_header(
            self._t("EDITOR_SECTION_TITLE", section=self._display(section.name)),
            self._t("EDITOR_EDITING", entry=entry_name),
        )
        self.renderer.info(self._t("EDITOR_CURRENT_VALUE", value=current))

        try:
            if entry.has_options:
                self.renderer.info(self._t("EDITOR_AVAILABLE_OPTIONS", options=", ".join(entry.options or [])))
                values = entry.choices()
                index = self.renderer.prompt_choice(
                    self._t("EDITOR_SELECT_VALUE", entry=entry_name),
                    values + [self._t("EDITOR_CANCEL")],
                )
                new_value = values[index] if index is not None and 0 <= index < len(values) else None
            else:
                new_value = self.renderer.prompt_text(self._t("EDITOR_ENTER_VALUE", entry=entry_name), current)
        except PromptFailure as exc:
            self._prompt_failed(exc)
            return

        self.current_entry = None
        self._goto(SessionState.ENTRY_SELECT)
        if new_value is None:
            return
        if new_value == current:
            self.renderer.info(self._t("EDITOR_NO_CHANGES"))
            self.renderer.pause()
            return
        entry.value = new_value
        self.dirty = True
        logger.debug("Entry %s changed from %r to %r", entry.name, current, new_value)
        self.renderer.success(self._t("EDITOR_UPDATED", entry=entry_name, old=current, new=new_value))
        self.renderer.pause()


__all__ = [
    "PreferencesEditorSession",
    "SessionState",
    "SessionOutcome",
    "SessionResult",
    "THEME_ENTRY",
    "MESSAGES",
]
