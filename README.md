# lineweave

Building blocks for interactive command-line editors: the data model and
query vocabulary of a command history, simple syntax highlighters, ANSI text
styles, a thread-safe queue for printing from other threads, and the
vocabulary of edit commands and editor events with their undo-grouping rules.

The package has no dependencies outside the standard library.

## Installation

```
pip install lineweave
```

## History entries and queries

`lineweave.history.item` holds `HistoryItem`, `HistoryItemId` and
`HistorySessionId`. `lineweave.history.base` holds the query types and the
abstract `History` interface.

```python
from lineweave.history.item import HistoryItem
from lineweave.history.base import (
    CommandLineSearch, SearchMatch, SearchQuery, SearchDirection, SearchFilter,
)

item = HistoryItem.from_command_line("ls -l")

query = SearchQuery.last_with_prefix("ls", None)   # newest entry starting with "ls", limit 1
query = SearchQuery.everything(SearchDirection.FORWARD, None)
query = SearchQuery.all_that_contain_rev("zip")     # newest first

CommandLineSearch(SearchMatch.PREFIX, "ls").matches("ls -l")  # True, case-sensitive
```

`SearchFilter` adds conditions on host name, working directory (exact or
prefix), exit status and session. `HistoryNavigationQuery` pairs a
`NavigationMode` (`NORMAL`, `PREFIX_SEARCH`, `SUBSTRING_SEARCH`) with its
value.

To store entries, subclass `History` and implement `save`, `load`, `count`,
`search`, `update`, `clear`, `delete`, `sync` and `session`; `count_all` is
provided in terms of `count`.

## Highlighting

```python
from lineweave.highlighter import SimpleMatchHighlighter, ExampleHighlighter

highlighter = SimpleMatchHighlighter().with_query("foo")
for style, text in highlighter.highlight("foo bar foo", 0):
    print(style.paint(text), end="")
```

`ExampleHighlighter(["ls", "cargo build"])` colours the longest known command
found in the line in green, the rest in white (bold after the match), and a
line with no known command in red; `change_colors` swaps the colours.

## Styles

`lineweave.style.Style` is an immutable foreground `Color` plus bold and
italic flags. `Style().with_foreground(Color.GREEN).with_bold().paint("ok")`
returns the text wrapped in ANSI escape sequences; a plain style returns the
text unchanged.

## Edit commands and undo grouping

```python
from lineweave.edit_commands import (
    EditCommand, EditCommandKind, EditKind, UndoBehavior, UndoBehaviorKind,
)

cmd = EditCommand(EditCommandKind.MOVE_LEFT, select=True)
cmd.edit_type()          # EditType(kind=EditKind.MOVE_CURSOR, select=True)
str(EditCommand(EditCommandKind.INSERT_CHAR, char="a"))  # "InsertChar  Value: <char>"

prev = UndoBehavior(UndoBehaviorKind.INSERT_CHARACTER, "a")
UndoBehavior(UndoBehaviorKind.INSERT_CHARACTER, " ").create_undo_point_after(prev)  # True
```

An `EditCommand` accepts only the arguments its kind takes and raises
`ValueError` otherwise.

## Events and signals

`lineweave.events` defines `Signal` (`SUCCESS` with a buffer, `CTRL_C`,
`CTRL_D`), `ReedlineEvent` (engine actions such as `EDIT` with a tuple of
edit commands, `MENU` with a name, `RESIZE` with width and height) and
`EventStatus` (`HANDLED`, `INAPPLICABLE`, or `EXITS` with a signal). Each
validates its arguments on construction.

## Printing from other threads

```python
from lineweave.external_printer import ExternalPrinter

printer = ExternalPrinter(20)
printer.print("build finished")   # blocks while the queue is full
printer.get_line()                # "build finished", or None when empty
```

## What the package does not do

There is no ready-made history storage: neither a file nor a database
backend is included, only the `History` interface to implement. There are
no history hinters, no cursor for up/down navigation through a history, and
no editor engine that reads keys from a terminal; the events and edit
commands here describe actions but nothing in the package carries them out.

## Running the tests

```
pip install lineweave[test]
pytest
```