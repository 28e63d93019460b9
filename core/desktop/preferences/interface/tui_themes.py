#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "#ffb347 bold",
        "subheader": "#8ab4f8",
        "border": "#4b525a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "table.name": "#8ab4f8",
        "table.value": "#9ad974",
        "table.options": "#7a7f85",
        "msg.info": "#61afef",
        "msg.success": "#9ad974 bold",
        "msg.warning": "#e5c07b bold",
        "msg.error": "#e06c75 bold",
        "status": "bg:#2c313a #d7dfe6",
        "status.key": "bg:#2c313a #ffb347 bold",
    },
    "light": {
        "": "#24292f",
        "text": "#24292f",
        "text.dim": "#6e7781",
        "header": "#0550ae bold",
        "subheader": "#8250df",
        "border": "#afb8c1",
        "selected": "bg:#ddf4ff #0a3069 bold",
        "table.name": "#0550ae",
        "table.value": "#116329",
        "table.options": "#6e7781",
        "msg.info": "#0969da",
        "msg.success": "#1a7f37 bold",
        "msg.warning": "#9a6700 bold",
        "msg.error": "#cf222e bold",
        "status": "bg:#eaeef2 #24292f",
        "status.key": "bg:#eaeef2 #0550ae bold",
    },
    "system": {
        "": "",
        "text": "",
        "text.dim": "ansibrightblack",
        "header": "ansicyan bold",
        "subheader": "ansiblue",
        "border": "ansibrightblack",
        "selected": "reverse bold",
        "table.name": "ansicyan",
        "table.value": "ansigreen",
        "table.options": "ansibrightblack",
        "msg.info": "ansiblue",
        "msg.success": "ansigreen bold",
        "msg.warning": "ansiyellow bold",
        "msg.error": "ansired bold",
        "status": "reverse",
        "status.key": "reverse bold",
    },
}

DEFAULT_THEME = "system"


def normalize_theme_name(theme: str) -> str:
    """Map a configured theme value (``Dark``, ``LIGHT``...) to a THEMES key."""
    name = (theme or "").strip().lower()
    return name if name in THEMES else DEFAULT_THEME


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    return dict(THEMES[normalize_theme_name(theme)])


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
