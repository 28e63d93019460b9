"""Display-width helpers for terminal cells (wide/emoji aware)."""

from typing import List

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Printable width of text, wide characters counting as two cells."""
    text = (text or "").expandtabs(4)
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int) -> str:
    """Cut text so that its visible width does not exceed width."""
    text = (text or "").expandtabs(4)
    acc: List[str] = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def pad_display(text: str, width: int) -> str:
    """Trim and right-pad with spaces to exactly width visible cells."""
    trimmed = trim_display(text, width)
    trimmed_width = display_width(trimmed)
    if trimmed_width < width:
        trimmed += " " * (width - trimmed_width)
    return trimmed


def ellipsize(text: str, width: int) -> str:
    if display_width(text) <= width:
        return text or ""
    if width <= 1:
        return trim_display(text, width)
    return trim_display(text, width - 1) + "…"


__all__ = ["display_width", "trim_display", "pad_display", "ellipsize"]
