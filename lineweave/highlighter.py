"""Syntax highlighters that turn a line of input into styled text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from lineweave.style import Color, Style

StyledText = list[tuple[Style, str]]
"""A line split into pieces, each paired with the style it is shown in."""

DEFAULT_BUFFER_MATCH_COLOR = Color.GREEN
DEFAULT_BUFFER_NEUTRAL_COLOR = Color.WHITE
DEFAULT_BUFFER_NOT_MATCH_COLOR = Color.RED


class Highlighter(ABC):
    """Turns the current line into styled pieces of text."""

    @abstractmethod
    def highlight(self, line: str, cursor: int) -> StyledText:
        """Return ``line`` split into styled pieces; ``cursor`` is the cursor offset."""


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class ExampleHighlighter(Highlighter):
    """Highlights the longest known command found in the line."""

    def __init__(self, external_commands: Iterable[str] = ()) -> None:
        self.external_commands = list(external_commands)
        self.match_color = DEFAULT_BUFFER_MATCH_COLOR
        self.not_match_color = DEFAULT_BUFFER_NOT_MATCH_COLOR
        self.neutral_color = DEFAULT_BUFFER_NEUTRAL_COLOR

    def highlight(self, line: str, cursor: int) -> StyledText:
        matches = [c for c in self.external_commands if c in line]
        if matches:
            longest = ""
            for item in matches:
                if _byte_len(item) > _byte_len(longest):
                    longest = item
            if longest:
                before, after = line.split(longest, 1)
            else:
                before, after = "", line
            return [
                (Style().with_foreground(self.neutral_color), before),
                (Style().with_foreground(self.match_color), longest),
                (Style().with_bold().with_foreground(self.neutral_color), after),
            ]
        if not self.external_commands:
            return [(Style().with_foreground(self.neutral_color), line)]
        return [(Style().with_foreground(self.not_match_color), line)]

    def change_colors(
        self, match_color: Color, notmatch_color: Color, neutral_color: Color
    ) -> None:
        """Use different colours for matches, non-matching lines and the rest."""
        self.match_color = match_color
        self.not_match_color = notmatch_color
        self.neutral_color = neutral_color


class SimpleMatchHighlighter(Highlighter):
    """Styles every exact, non-overlapping occurrence of a query string."""

    def __init__(self, query: str = "") -> None:
        self.query = query
        self.neutral_style = Style()
        self.match_style = Style().with_foreground(Color.GREEN)

    def highlight(self, line: str, cursor: int) -> StyledText:
        if not self.query:
            return [(self.neutral_style, line)]
        styled: StyledText = []
        next_idx = 0
        idx = line.find(self.query)
        while idx != -1:
            if idx != next_idx:
                styled.append((self.neutral_style, line[next_idx:idx]))
            styled.append((self.match_style, self.query))
            next_idx = idx + len(self.query)
            idx = line.find(self.query, next_idx)
        if next_idx != len(line):
            styled.append((self.neutral_style, line[next_idx:]))
        return styled

    def with_query(self, query: str) -> SimpleMatchHighlighter:
        """Set the string to look for."""
        self.query = query
        return self

    def with_match_style(self, match_style: Style) -> SimpleMatchHighlighter:
        """Set the style of the matches."""
        self.match_style = match_style
        return self

    def with_neutral_style(self, neutral_style: Style) -> SimpleMatchHighlighter:
        """Set the style of the text between matches."""
        self.neutral_style = neutral_style
        return self