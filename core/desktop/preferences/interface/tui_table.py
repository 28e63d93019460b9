"""Boxed table renderer shared by the editor tables and the hotkey overview."""

from typing import List, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from util.text_width import display_width, ellipsize, pad_display

CELL_STYLES = ("class:table.name", "class:table.value", "class:table.options")
MIN_COLUMN = 6


def column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]], width: int) -> List[int]:
    """Natural column widths, the widest columns shrunk until the row fits width."""
    count = len(headers)
    widths = [display_width(h) for h in headers]
    for row in rows:
        for idx in range(count):
            cell = row[idx] if idx < len(row) else ""
            widths[idx] = max(widths[idx], display_width(str(cell)))
    # "| " + cells joined by " | " + " |"
    budget = max(count * MIN_COLUMN, width - 3 * count - 1)
    while sum(widths) > budget:
        widest = max(range(count), key=lambda i: widths[i])
        if widths[widest] <= MIN_COLUMN:
            break
        widths[widest] -= 1
    return widths


def _row(cells: Sequence[str], widths: Sequence[int], styles: Sequence[str]) -> List[Tuple[str, str]]:
    parts: List[Tuple[str, str]] = [("class:border", "| ")]
    for idx, width in enumerate(widths):
        cell = str(cells[idx]) if idx < len(cells) else ""
        parts.append((styles[idx % len(styles)], pad_display(ellipsize(cell, width), width)))
        parts.append(("class:border", " | " if idx < len(widths) - 1 else " |\n"))
    return parts


def render_table_text(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    width: int = 100,
) -> FormattedText:
    if not headers:
        return FormattedText([("class:header", f"{title}\n")])
    widths = column_widths(headers, rows, width)
    inner = sum(widths) + 3 * (len(widths) - 1) + 2
    lines: List[Tuple[str, str]] = []
    lines.append(("class:border", "+" + "=" * inner + "+\n"))
    if title:
        lines.append(("class:border", "|"))
        lines.append(("class:header", pad_display(ellipsize(title, inner).center(inner), inner)))
        lines.append(("class:border", "|\n"))
        lines.append(("class:border", "+" + "-" * inner + "+\n"))
    lines.extend(_row(headers, widths, ("class:subheader",)))
    lines.append(("class:border", "+" + "-" * inner + "+\n"))
    for row in rows:
        lines.extend(_row(row, widths, CELL_STYLES))
    lines.append(("class:border", "+" + "=" * inner + "+\n"))
    return FormattedText(lines)


def plain_text(text: FormattedText) -> str:
    return "".join(fragment[1] for fragment in text)


__all__ = ["render_table_text", "column_widths", "plain_text"]
