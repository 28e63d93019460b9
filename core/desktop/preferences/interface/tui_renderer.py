"""prompt_toolkit implementation of the Renderer port."""

import logging
from typing import Optional, Sequence

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from core import PromptFailure
from core.desktop.preferences.interface.i18n import Localizer
from core.desktop.preferences.interface.tui_choice import run_choice_list
from core.desktop.preferences.interface.tui_screen import capture_key, resolve_ttimeoutlen, terminal_width
from core.desktop.preferences.interface.tui_table import render_table_text
from core.desktop.preferences.interface.tui_themes import DEFAULT_THEME, build_style, normalize_theme_name

logger = logging.getLogger("prefs_editor.tui")

# Input layer failures that end a prompt without an answer.
PROMPT_ERRORS = (KeyboardInterrupt, EOFError, OSError)


class PromptToolkitRenderer:
    def __init__(self, localizer: Optional[Localizer] = None, theme: str = DEFAULT_THEME, input=None, output=None):
        self.localizer = localizer or Localizer()
        self.input = input
        self.output = output
        self.theme = normalize_theme_name(theme)
        self.style = build_style(self.theme)
        self.last_message = ""

    # ThemeApplier
    def apply_theme(self, name: str) -> None:
        self.theme = normalize_theme_name(name)
        self.style = build_style(self.theme)
        logger.debug("Theme switched to %s", self.theme)

    def _print(self, fragments) -> None:
        print_formatted_text(FormattedText(fragments), style=self.style, output=self.output)

    def _message(self, style: str, marker: str, message: str) -> None:
        self.last_message = message
        self._print([(style, f"{marker} {message}")])

    def render_header(self, title: str, subtitle: str = "") -> None:
        fragments = [("", "\n"), ("class:header", title)]
        if subtitle:
            fragments.append(("", "\n"))
            fragments.append(("class:text.dim", subtitle))
        self._print(fragments)

    def render_table(self, title: str, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        text = render_table_text(title, headers, rows, terminal_width())
        print_formatted_text(text, style=self.style, output=self.output, end="")

    def prompt_choice(self, title: str, choices: Sequence[str]) -> Optional[int]:
        try:
            return run_choice_list(
                title,
                choices,
                style=self.style,
                hint=self.localizer.t("CHOICE_HINT"),
                ttimeoutlen=resolve_ttimeoutlen(),
                input=self.input,
                output=self.output,
            )
        except PROMPT_ERRORS as exc:
            raise PromptFailure(str(exc) or type(exc).__name__) from exc

    def prompt_text(self, title: str, default: str = "") -> str:
        session = PromptSession(input=self.input, output=self.output)
        try:
            answer = session.prompt(FormattedText([("class:header", f"{title} ")]), default=default or "", style=self.style)
        except PROMPT_ERRORS as exc:
            raise PromptFailure(str(exc) or type(exc).__name__) from exc
        return answer

    def info(self, message: str) -> None:
        self._message("class:msg.info", "ℹ", message)

    def success(self, message: str) -> None:
        self._message("class:msg.success", "✓", message)

    def warning(self, message: str) -> None:
        self._message("class:msg.warning", "!", message)

    def error(self, message: str) -> None:
        self._message("class:msg.error", "✗", message)

    def pause(self) -> None:
        prompt = self.localizer.t("PROMPT_PRESS_ANY_KEY")
        capture_key(
            lambda: FormattedText([("class:text.dim", prompt)]),
            style=self.style,
            input=self.input,
            output=self.output,
        )


__all__ = ["PromptToolkitRenderer"]
