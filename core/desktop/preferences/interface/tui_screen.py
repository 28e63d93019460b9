"""Main screen of the sample host application and the terminal key source."""

import os
from typing import Callable, List, Optional, Sequence, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style

from core import ACTION_EXIT, ACTION_OPEN_PREFERENCES, ACTION_SHOW_HOTKEYS, HotkeyResolver, KeyEvent, SettingsTree
from core.desktop.preferences.interface.constants import ENV_TTIMEOUTLEN
from core.desktop.preferences.interface.i18n import Localizer
from core.desktop.preferences.interface.tui_keys import key_event_from_presses
from util.text_width import pad_display

SCREEN_ACTIONS = (ACTION_OPEN_PREFERENCES, ACTION_SHOW_HOTKEYS, ACTION_EXIT)
INTERRUPT_CHORD = "Ctrl+C"


def resolve_ttimeoutlen(default: float = 0.05) -> float:
    """Escape/sequence disambiguation delay, overridable for slow terminals."""
    try:
        return max(0.0, float(os.getenv(ENV_TTIMEOUTLEN, str(default))))
    except ValueError:
        return default


def terminal_width(default: int = 100) -> int:
    try:
        return os.get_terminal_size().columns
    except (AttributeError, ValueError, OSError):
        return default


def screen_hints(tree: SettingsTree, localizer: Localizer) -> List[Tuple[str, str]]:
    """(chord, hint) lines for the well-known actions that have a chord configured."""
    hints: List[Tuple[str, str]] = []
    for action in SCREEN_ACTIONS:
        found = None
        for _, entry in tree.iter_entries():
            if entry.name.lower() == action.lower():
                found = entry
                break
        if found is None or not found.value:
            continue
        label = localizer.localize(found.name)
        hints.append((found.value, localizer.t("SCREEN_HINT", chord=found.value, action=label.lower())))
    return hints


def build_screen_text(
    title: str,
    hints: Sequence[Tuple[str, str]],
    empty_hint: str,
    width: int = 100,
) -> FormattedText:
    lines: List[Tuple[str, str]] = []
    lines.append(("class:header", f"{title}\n"))
    lines.append(("class:border", "-" * max(10, min(width, 80)) + "\n\n"))
    if not hints:
        lines.append(("class:text.dim", f"{empty_hint}\n"))
    for chord, text in hints:
        lines.append(("class:text", "  • "))
        lines.append(("class:status.key", chord))
        lines.append(("class:text", f"  {text}\n"))
    return FormattedText(lines)


def build_status_text(status: str, width: int = 100) -> FormattedText:
    return FormattedText([("class:status", pad_display(f" {status}", max(1, width)))])


def capture_key(
    render: Callable[[], FormattedText],
    style: Optional[Style] = None,
    status: Optional[Callable[[], FormattedText]] = None,
    full_screen: bool = False,
    input=None,
    output=None,
) -> Optional[KeyEvent]:
    """Show render() and return the first key press as a KeyEvent.

    Non-key input (mouse, cursor reports, paste) is ignored. Returns None once
    the input stream is closed.
    """
    kb = KeyBindings()

    @kb.add(Keys.Any)
    @kb.add(Keys.Escape, Keys.Any)
    def _(event):
        key_event = key_event_from_presses(event.key_sequence)
        if key_event is not None:
            event.app.exit(result=key_event)

    body = Window(content=FormattedTextControl(render), always_hide_cursor=True, wrap_lines=True)
    children = [body]
    if status is not None:
        children.append(Window(content=FormattedTextControl(status), height=Dimension.exact(1), always_hide_cursor=True))
    app = Application(
        layout=Layout(HSplit(children)),
        key_bindings=kb,
        style=style,
        full_screen=full_screen,
        mouse_support=False,
        erase_when_done=not full_screen,
        input=input,
        output=output,
    )
    app.ttimeoutlen = resolve_ttimeoutlen()
    app.timeoutlen = max(app.ttimeoutlen, 0.3)
    try:
        return app.run()
    except EOFError:
        return None


class TerminalKeySource:
    """KeySource that shows the host screen and waits for one key at a time."""

    def __init__(
        self,
        tree: SettingsTree,
        localizer: Localizer,
        style_provider: Callable[[], Optional[Style]],
        status_provider: Optional[Callable[[], str]] = None,
        input=None,
        output=None,
    ):
        self.tree = tree
        self.localizer = localizer
        self.style_provider = style_provider
        self.status_provider = status_provider
        self.input = input
        self.output = output
        self.resolver = HotkeyResolver()

    def _status(self) -> str:
        message = self.status_provider() if self.status_provider else ""
        return message or self.localizer.t("SCREEN_STATUS")

    def render(self) -> FormattedText:
        return build_screen_text(
            self.localizer.t("SCREEN_TITLE"),
            screen_hints(self.tree, self.localizer),
            self.localizer.t("SCREEN_NO_HOTKEYS"),
            terminal_width(),
        )

    def read_key(self) -> Optional[KeyEvent]:
        event = capture_key(
            self.render,
            style=self.style_provider(),
            status=lambda: build_status_text(self._status(), terminal_width()),
            full_screen=True,
            input=self.input,
            output=self.output,
        )
        if event is None:
            return None
        # Ctrl+C quits unless the user bound it to something
        if event.chord == INTERRUPT_CHORD and self.resolver.resolve(event, self.tree) is None:
            return None
        return event


__all__ = [
    "TerminalKeySource",
    "capture_key",
    "build_screen_text",
    "build_status_text",
    "screen_hints",
    "resolve_ttimeoutlen",
    "terminal_width",
]
