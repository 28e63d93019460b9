#!/usr/bin/env python3
"""
prefs.py — preferences editor for appsettings.json style documents.

Thin facade: builds the document adapter, the terminal adapters and the
host loop, then dispatches argparse subcommands.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path
from typing import List, Optional, Tuple

from config import get_settings_path, set_user_lang
from core import Entry, InvalidValueError, PreferencesError, SettingsTree, find_duplicate_hotkeys
from core.desktop.preferences.application.editor_session import THEME_ENTRY, PreferencesEditorSession
from core.desktop.preferences.application.host_loop import HostLoop, hotkey_rows, theme_value
from core.desktop.preferences.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.preferences.interface.constants import LANG_PACK
from core.desktop.preferences.interface.i18n import Localizer, effective_lang
from core.desktop.preferences.interface.tui_renderer import PromptToolkitRenderer
from core.desktop.preferences.interface.tui_screen import TerminalKeySource
from core.desktop.preferences.interface.tui_table import plain_text, render_table_text
from core.desktop.preferences.interface.tui_themes import DEFAULT_THEME
from infrastructure.config_document import DEFAULT_SECTION_KEY, ConfigDocumentUpdater
from util.log_setup import setup_logging

logger = logging.getLogger("prefs_editor.cli")


@dataclass
class PreferencesContext:
    updater: ConfigDocumentUpdater
    section_key: str
    tree: SettingsTree

    def persist(self, tree: SettingsTree) -> None:
        self.updater.save(self.section_key, tree)


def settings_path_from_args(args: argparse.Namespace) -> Path:
    if getattr(args, "config", None):
        return Path(args.config).expanduser()
    return get_settings_path()


def open_context(args: argparse.Namespace) -> PreferencesContext:
    updater = ConfigDocumentUpdater(settings_path_from_args(args))
    section_key = args.section if args.section is not None else DEFAULT_SECTION_KEY
    tree = updater.load_tree(section_key)
    logger.info("Loaded %d sections from %s", len(tree.sections), updater.path)
    return PreferencesContext(updater=updater, section_key=section_key, tree=tree)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def find_target(tree: SettingsTree, section_name: str, entry_name: str, localizer: Localizer) -> Entry:
    section = tree.find_section(section_name)
    if section is None:
        raise InvalidValueError(localizer.t("CLI_UNKNOWN_SECTION", section=section_name))
    entry = section.find_entry(entry_name)
    if entry is None:
        raise InvalidValueError(localizer.t("CLI_UNKNOWN_ENTRY", entry=entry_name))
    return entry


def apply_value(entry: Entry, value: str, localizer: Localizer) -> Tuple[str, bool]:
    """Set entry.value when the option set allows it; returns (old value, changed)."""
    if not entry.accepts(value):
        raise InvalidValueError(
            localizer.t("CLI_INVALID_VALUE", value=value, entry=entry.name, options=", ".join(entry.options or []))
        )
    old = entry.value
    if value == old:
        return old, False
    entry.value = value
    return old, True


def section_table(section, localizer: Localizer) -> Tuple[str, Tuple[str, str, str], List[Tuple[str, str, str]]]:
    rows = []
    for entry in section.entries:
        options = ", ".join(entry.options) if entry.has_options else localizer.t("TABLE_ANY_VALUE")
        rows.append((localizer.localize(entry.name), entry.value, options))
    headers = (localizer.t("TABLE_SETTING"), localizer.t("TABLE_VALUE"), localizer.t("TABLE_OPTIONS"))
    return localizer.localize(section.name), headers, rows


def _print_table(title: str, headers, rows) -> None:
    print(plain_text(render_table_text(title, headers, rows)), end="")


# ---- commands -------------------------------------------------------------


def cmd_tui(args: argparse.Namespace) -> int:
    """Sample host screen: hot keys open the editor, list shortcuts or exit."""
    ctx = open_context(args)
    localizer = Localizer()
    renderer = PromptToolkitRenderer(localizer, theme=theme_value(ctx.tree, THEME_ENTRY) or DEFAULT_THEME)
    key_source = TerminalKeySource(
        ctx.tree,
        localizer,
        style_provider=lambda: renderer.style,
        status_provider=lambda: renderer.last_message,
    )
    host = HostLoop(ctx.tree, key_source, renderer, ctx.persist, localizer=localizer, theme_applier=renderer)
    return host.run()


def cmd_edit(args: argparse.Namespace) -> int:
    ctx = open_context(args)
    localizer = Localizer()
    renderer = PromptToolkitRenderer(localizer, theme=theme_value(ctx.tree, THEME_ENTRY) or DEFAULT_THEME)
    result = PreferencesEditorSession(ctx.tree, renderer, ctx.persist, localizer).run()
    logger.info("Editor closed: %s", result.outcome.value)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    ctx = open_context(args)
    localizer = Localizer()
    if args.section_name:
        section = ctx.tree.find_section(args.section_name)
        if section is None:
            return _fail(localizer.t("CLI_UNKNOWN_SECTION", section=args.section_name))
        sections = [section]
    else:
        sections = ctx.tree.ordered_sections()
    if not sections:
        print(localizer.t("EDITOR_NO_SECTIONS"))
        return 0
    for section in sections:
        _print_table(*section_table(section, localizer))
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    ctx = open_context(args)
    try:
        entry = find_target(ctx.tree, args.section_name, args.entry_name, Localizer())
    except InvalidValueError as exc:
        return _fail(str(exc))
    print(entry.value)
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    ctx = open_context(args)
    localizer = Localizer()
    try:
        entry = find_target(ctx.tree, args.section_name, args.entry_name, localizer)
        _, changed = apply_value(entry, args.value, localizer)
    except InvalidValueError as exc:
        return _fail(str(exc))
    if not changed:
        print(localizer.t("CLI_UNCHANGED", entry=entry.name, value=entry.value))
        return 0
    ctx.persist(ctx.tree)
    print(localizer.t("CLI_SAVED", entry=entry.name, value=entry.value, path=ctx.updater.path))
    return 0


def cmd_hotkeys(args: argparse.Namespace) -> int:
    ctx = open_context(args)
    localizer = Localizer()
    rows = hotkey_rows(ctx.tree, localizer)
    if not rows:
        print(localizer.t("HOTKEYS_NONE"))
        return 0
    _print_table(
        localizer.t("HOTKEYS_TITLE"),
        (localizer.t("HOTKEYS_SHORTCUT"), localizer.t("HOTKEYS_ACTION")),
        rows,
    )
    for chord, names in find_duplicate_hotkeys(ctx.tree).items():
        print(localizer.t("HOTKEYS_DUPLICATE", chord=chord, names=", ".join(names)))
    return 0


def cmd_lang(args: argparse.Namespace) -> int:
    if not args.code:
        print(effective_lang())
        return 0
    code = args.code.strip().lower()
    if code not in LANG_PACK:
        return _fail(Localizer().t("CLI_LANG_UNKNOWN", language=args.code, available=", ".join(sorted(LANG_PACK))))
    set_user_lang(code)
    print(Localizer(code).t("CLI_LANG_SET", language=code))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    return build_cli_parser(commands=sys.modules[__name__], default_section=DEFAULT_SECTION_KEY, languages=sorted(LANG_PACK))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("prefs-editor"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    setup_logging("DEBUG" if args.verbose else args.log_level, args.log_file)
    try:
        return args.func(args)
    except PreferencesError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return _fail(str(exc))


if __name__ == "__main__":
    sys.exit(main())
