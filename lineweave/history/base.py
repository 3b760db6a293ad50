"""Queries over a command history and the interface every history implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from lineweave.history.item import HistoryItem, HistoryItemId, HistorySessionId


class NavigationMode(Enum):
    """How up/down browsing through the history selects entries."""

    NORMAL = "normal"
    PREFIX_SEARCH = "prefix_search"
    SUBSTRING_SEARCH = "substring_search"


@dataclass(frozen=True)
class HistoryNavigationQuery:
    """A browsing mode with its argument.

    For ``NORMAL`` the value holds the buffer state entered before browsing;
    for the search modes it holds the text searched for.
    """

    mode: NavigationMode
    value: Any = None


class SearchMatch(Enum):
    """How a command line is compared with the searched text."""

    PREFIX = "prefix"
    SUBSTRING = "substring"
    EXACT = "exact"


@dataclass(frozen=True)
class CommandLineSearch:
    """A condition on the text of a command line."""

    match: SearchMatch
    text: str

    def matches(self, command_line: str) -> bool:
        """Return whether ``command_line`` satisfies this condition (case-sensitive)."""
        if self.match is SearchMatch.PREFIX:
            return command_line.startswith(self.text)
        if self.match is SearchMatch.SUBSTRING:
            return self.text in command_line
        return command_line == self.text


class SearchDirection(Enum):
    """Order in which a query walks the history."""

    BACKWARD = "backward"
    FORWARD = "forward"


@dataclass
class SearchFilter:
    """Extra conditions an entry must meet to be returned by a query."""

    command_line: CommandLineSearch | None = None
    not_command_line: str | None = None
    hostname: str | None = None
    cwd_exact: str | None = None
    cwd_prefix: str | None = None
    exit_successful: bool | None = None
    session: HistorySessionId | None = None

    @classmethod
    def anything(cls, session: HistorySessionId | None) -> SearchFilter:
        """A filter that lets every entry of the session through."""
        return cls(session=session)

    @classmethod
    def from_text_search(
        cls, cmd: CommandLineSearch, session: HistorySessionId | None
    ) -> SearchFilter:
        """A filter on the command line text only."""
        return cls(command_line=cmd, session=session)

    @classmethod
    def from_text_search_cwd(
        cls, cwd: str, cmd: CommandLineSearch, session: HistorySessionId | None
    ) -> SearchFilter:
        """A filter on the command line text and the exact working directory."""
        return cls(command_line=cmd, cwd_exact=cwd, session=session)


@dataclass
class SearchQuery:
    """A search over a history.

    Start and end bounds are exclusive of the start and relative to the direction.
    """

    direction: SearchDirection
    start_time: datetime | None = None
    end_time: datetime | None = None
    start_id: HistoryItemId | None = None
    end_id: HistoryItemId | None = None
    limit: int | None = None
    filter: SearchFilter = field(default_factory=SearchFilter)

    @classmethod
    def all_that_contain_rev(cls, contains: str) -> SearchQuery:
        """All entries containing ``contains``, newest first."""
        return cls(
            direction=SearchDirection.BACKWARD,
            filter=SearchFilter.from_text_search(
                CommandLineSearch(SearchMatch.SUBSTRING, contains), None
            ),
        )

    @classmethod
    def last_with_search(cls, filter: SearchFilter) -> SearchQuery:
        """The most recent entry passing ``filter``."""
        return cls(direction=SearchDirection.BACKWARD, limit=1, filter=filter)

    @classmethod
    def last_with_prefix(
        cls, prefix: str, session: HistorySessionId | None
    ) -> SearchQuery:
        """The most recent entry starting with ``prefix``."""
        return cls.last_with_search(
            SearchFilter.from_text_search(
                CommandLineSearch(SearchMatch.PREFIX, prefix), session
            )
        )

    @classmethod
    def last_with_prefix_and_cwd(
        cls, prefix: str, cwd: str, session: HistorySessionId | None
    ) -> SearchQuery:
        """The most recent entry starting with ``prefix`` run in ``cwd``."""
        return cls.last_with_search(
            SearchFilter.from_text_search_cwd(
                cwd, CommandLineSearch(SearchMatch.PREFIX, prefix), session
            )
        )

    @classmethod
    def everything(
        cls, direction: SearchDirection, session: HistorySessionId | None
    ) -> SearchQuery:
        """Every entry of the session in the given direction."""
        return cls(direction=direction, filter=SearchFilter.anything(session))


class History(ABC):
    """Storage of command history, such as a text file or a database."""

    @abstractmethod
    def save(self, item: HistoryItem) -> HistoryItem:
        """Store ``item``; a new id is assigned when it has none, else it is updated."""

    @abstractmethod
    def load(self, id: HistoryItemId) -> HistoryItem:
        """Return the entry with the given id."""

    @abstractmethod
    def count(self, query: SearchQuery) -> int:
        """Return the number of entries matching ``query``."""

    def count_all(self) -> int:
        """Return the total number of entries."""
        return self.count(SearchQuery.everything(SearchDirection.FORWARD, None))

    @abstractmethod
    def search(self, query: SearchQuery) -> list[HistoryItem]:
        """Return the entries matching ``query``."""

    @abstractmethod
    def update(
        self, id: HistoryItemId, updater: Callable[[HistoryItem], HistoryItem]
    ) -> None:
        """Replace the entry with the given id by ``updater`` applied to it."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every entry."""

    @abstractmethod
    def delete(self, id: HistoryItemId) -> None:
        """Remove one entry."""

    @abstractmethod
    def sync(self) -> None:
        """Make sure the history is written to its storage; raises OSError on failure."""

    @abstractmethod
    def session(self) -> HistorySessionId | None:
        """Return the id of the current session, if any."""