"""CLI parser construction for the preferences CLI/TUI."""

import argparse
from typing import Any, Iterable


def build_parser(commands: Any, default_section: str, languages: Iterable[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefs",
        description="prefs.py — edit the preferences stored in an appsettings.json document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", metavar="PATH", help="settings document (default: user config, then ./appsettings.json)")
    parser.add_argument(
        "--section",
        "-S",
        default=default_section,
        metavar="KEY",
        help=f"top-level property holding the preferences (default: {default_section}; empty string = document root)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="logging threshold",
    )
    parser.add_argument("--log-file", metavar="FILE", help="write logs to FILE instead of stderr")
    parser.add_argument("--verbose", "-v", action="store_true", help="shortcut for --log-level DEBUG")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    sub = parser.add_subparsers(dest="command", help="Commands")
    parser.set_defaults(command="tui", func=commands.cmd_tui)

    # tui
    tui_p = sub.add_parser("tui", help="Run the sample host screen with hot keys (default)")
    tui_p.set_defaults(func=commands.cmd_tui)

    # edit
    ep = sub.add_parser("edit", help="Open the preferences editor directly")
    ep.set_defaults(func=commands.cmd_edit)

    # show
    sp = sub.add_parser("show", help="Print sections as tables")
    sp.add_argument("section_name", nargs="?", metavar="SECTION")
    sp.set_defaults(func=commands.cmd_show)

    # get
    gp = sub.add_parser("get", help="Print one entry value")
    gp.add_argument("section_name", metavar="SECTION")
    gp.add_argument("entry_name", metavar="ENTRY")
    gp.set_defaults(func=commands.cmd_get)

    # set
    setp = sub.add_parser("set", help="Change one entry value and save the document")
    setp.add_argument("section_name", metavar="SECTION")
    setp.add_argument("entry_name", metavar="ENTRY")
    setp.add_argument("value", metavar="VALUE")
    setp.set_defaults(func=commands.cmd_set)

    # hotkeys
    hp = sub.add_parser("hotkeys", help="List configured hot keys and report duplicate chords")
    hp.set_defaults(func=commands.cmd_hotkeys)

    # lang
    lp = sub.add_parser("lang", help="Show or store the interface language")
    lp.add_argument("code", nargs="?", help=f"one of: {', '.join(languages)}")
    lp.set_defaults(func=commands.cmd_lang)

    return parser


__all__ = ["build_parser"]
