"""Terminal text styles rendered with ANSI escape sequences."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Color(Enum):
    """Named terminal colours."""

    BLACK = "black"
    DARK_GRAY = "dark_gray"
    RED = "red"
    LIGHT_RED = "light_red"
    GREEN = "green"
    LIGHT_GREEN = "light_green"
    YELLOW = "yellow"
    LIGHT_YELLOW = "light_yellow"
    BLUE = "blue"
    LIGHT_BLUE = "light_blue"
    PURPLE = "purple"
    LIGHT_PURPLE = "light_purple"
    MAGENTA = "magenta"
    LIGHT_MAGENTA = "light_magenta"
    CYAN = "cyan"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"
    LIGHT_GRAY = "light_gray"
    DEFAULT = "default"

    @property
    def foreground_code(self) -> str:
        """The SGR parameter selecting this colour as foreground."""
        return _FOREGROUND_CODES[self]


_FOREGROUND_CODES = {
    Color.BLACK: "30",
    Color.DARK_GRAY: "90",
    Color.RED: "31",
    Color.LIGHT_RED: "91",
    Color.GREEN: "32",
    Color.LIGHT_GREEN: "92",
    Color.YELLOW: "33",
    Color.LIGHT_YELLOW: "93",
    Color.BLUE: "34",
    Color.LIGHT_BLUE: "94",
    Color.PURPLE: "35",
    Color.LIGHT_PURPLE: "95",
    Color.MAGENTA: "35",
    Color.LIGHT_MAGENTA: "95",
    Color.CYAN: "36",
    Color.LIGHT_CYAN: "96",
    Color.WHITE: "37",
    Color.LIGHT_GRAY: "97",
    Color.DEFAULT: "39",
}

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Style:
    """Foreground colour and font attributes for a piece of text."""

    foreground: Color | None = None
    bold: bool = False
    italic: bool = False

    @property
    def is_plain(self) -> bool:
        return self.foreground is None and not self.bold and not self.italic

    def with_foreground(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def with_bold(self) -> Style:
        return replace(self, bold=True)

    def with_italic(self) -> Style:
        return replace(self, italic=True)

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape sequences of this style; plain styles add none."""
        if self.is_plain:
            return text
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.foreground is not None:
            codes.append(self.foreground.foreground_code)
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"