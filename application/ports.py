from typing import Optional, Protocol, Sequence

from core import KeyEvent


class Renderer(Protocol):
    def render_header(self, title: str, subtitle: str = "") -> None:
        ...

    def render_table(self, title: str, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        ...

    def prompt_choice(self, title: str, choices: Sequence[str]) -> Optional[int]:
        """Index of the chosen item, or None when the prompt was dismissed."""
        ...

    def prompt_text(self, title: str, default: str = "") -> str:
        ...

    def info(self, message: str) -> None:
        ...

    def success(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def pause(self) -> None:
        ...


class Localizer(Protocol):
    def localize(self, name: str) -> str:
        ...


class KeySource(Protocol):
    def read_key(self) -> Optional[KeyEvent]:
        """Next key press, or None once input is closed."""
        ...


class ThemeApplier(Protocol):
    def apply_theme(self, name: str) -> None:
        ...


class IdentityLocalizer:
    """Localizer that always falls back to the raw name."""

    def localize(self, name: str) -> str:
        return name
