"""Styled console output for Trading Demo Simulator.

The simulator writes through a small ``write(text, style)`` capability so
the report logic does not depend on a terminal library.
"""

from __future__ import annotations

from typing import Literal, Protocol

from rich.console import Console

Style = Literal["security", "price", "profit", "loss"]

STYLE_COLORS: dict[str, str] = {
    "security": "cyan",
    "price": "yellow",
    "profit": "green",
    "loss": "red",
}


class StyledWriter(Protocol):
    """Anything the simulator can print its report to."""

    def write(self, text: str, style: Style | None = None) -> None:
        ...

    def line(self, text: str = "", style: Style | None = None) -> None:
        ...

    def set_title(self, title: str) -> None:
        ...


class ConsoleWriter:
    """Writer backed by a rich Console.

    Markup, highlighting and emoji codes are disabled so report text is
    printed literally; color is only emitted when the console supports it.
    """

    def __init__(self, console: Console | None = None, color: bool = True) -> None:
        self.console = console or Console(
            markup=False, highlight=False, emoji=False, no_color=not color
        )

    def write(self, text: str, style: Style | None = None) -> None:
        self.console.print(
            text,
            style=STYLE_COLORS[style] if style else None,
            end="",
            soft_wrap=True,
            markup=False,
            highlight=False,
            emoji=False,
        )

    def line(self, text: str = "", style: Style | None = None) -> None:
        self.write(text + "\n", style)

    def set_title(self, title: str) -> None:
        """Set the terminal window title, when the terminal supports it."""
        self.console.set_window_title(title)


class PlainWriter:
    """In-memory writer recording text segments and their styles."""

    def __init__(self) -> None:
        self.segments: list[tuple[str, Style | None]] = []
        self.title: str | None = None

    def write(self, text: str, style: Style | None = None) -> None:
        self.segments.append((text, style))

    def line(self, text: str = "", style: Style | None = None) -> None:
        self.write(text + "\n", style)

    def set_title(self, title: str) -> None:
        self.title = title

    def getvalue(self) -> str:
        """Return everything written so far without styling."""
        return "".join(text for text, _ in self.segments)

    def styled(self, style: Style) -> list[str]:
        """Return the text segments written with the given style."""
        return [text for text, s in self.segments if s == style]
