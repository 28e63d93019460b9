"""Inline arrow-key choice list built on a small prompt_toolkit Application."""

from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style


def clamp_index(index: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


def build_choice_text(title: str, choices: Sequence[str], selected: int, hint: str = "") -> FormattedText:
    lines: List[Tuple[str, str]] = []
    if title:
        lines.append(("class:header", f"{title}\n"))
    for idx, label in enumerate(choices):
        if idx == selected:
            lines.append(("class:selected", f"▸ {label}"))
        else:
            lines.append(("class:text", f"  {label}"))
        lines.append(("", "\n"))
    if hint:
        lines.append(("class:text.dim", hint))
    return FormattedText(lines)


def run_choice_list(
    title: str,
    choices: Sequence[str],
    style: Optional[Style] = None,
    selected: int = 0,
    hint: str = "",
    ttimeoutlen: float = 0.05,
    input=None,
    output=None,
) -> Optional[int]:
    """Show choices and block until one is picked.

    Returns the index of the chosen item, or None on Escape. Ctrl+C raises
    KeyboardInterrupt.
    """
    choices = list(choices)
    if not choices:
        return None
    state = {"index": clamp_index(selected, len(choices))}
    kb = KeyBindings()

    @kb.add("up")
    @kb.add("k")
    def _(event):
        state["index"] = (state["index"] - 1) % len(choices)

    @kb.add("down")
    @kb.add("j")
    @kb.add("tab")
    def _(event):
        state["index"] = (state["index"] + 1) % len(choices)

    @kb.add("home")
    def _(event):
        state["index"] = 0

    @kb.add("end")
    def _(event):
        state["index"] = len(choices) - 1

    @kb.add("enter")
    def _(event):
        event.app.exit(result=state["index"])

    @kb.add("escape", eager=True)
    def _(event):
        event.app.exit(result=None)

    @kb.add("c-c")
    def _(event):
        event.app.exit(exception=KeyboardInterrupt())

    for digit in range(1, min(9, len(choices)) + 1):
        @kb.add(str(digit))
        def _(event, _index=digit - 1):
            event.app.exit(result=_index)

    control = FormattedTextControl(
        lambda: build_choice_text(title, choices, state["index"], hint),
        focusable=True,
        show_cursor=False,
    )
    app = Application(
        layout=Layout(HSplit([Window(content=control, always_hide_cursor=True, dont_extend_height=True)])),
        key_bindings=kb,
        style=style,
        full_screen=False,
        mouse_support=False,
        erase_when_done=True,
        input=input,
        output=output,
    )
    app.ttimeoutlen = ttimeoutlen
    return app.run()


__all__ = ["run_choice_list", "build_choice_text", "clamp_index"]
