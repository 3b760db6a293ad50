"""Outcomes of reading a line and the actions the editor engine can perform."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple

from lineweave.edit_commands import EditCommand

_U16_MAX = 0xFFFF


class SignalKind(Enum):
    """Ways in which reading a line can end."""

    SUCCESS = "success"
    CTRL_C = "ctrl_c"
    CTRL_D = "ctrl_d"


@dataclass(frozen=True)
class Signal:
    """How reading a line ended; ``buffer`` holds the entered text on success.

    CTRL_C aborts the current entry; CTRL_D ends the whole session.
    """

    kind: SignalKind
    buffer: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignalKind.SUCCESS:
            if self.buffer is None:
                raise ValueError("a successful signal needs a buffer")
        elif self.buffer is not None:
            raise ValueError(f"{self.kind.name} carries no buffer")


class ReedlineEventKind(Enum):
    """Every action the engine knows how to carry out."""

    NONE = "None"
    HISTORY_HINT_COMPLETE = "HistoryHintComplete"
    HISTORY_HINT_WORD_COMPLETE = "HistoryHintWordComplete"
    CTRL_D = "CtrlD"
    CTRL_C = "CtrlC"
    CLEAR_SCREEN = "ClearScreen"
    CLEAR_SCROLLBACK = "ClearScrollback"
    ENTER = "Enter"
    SUBMIT = "Submit"
    SUBMIT_OR_NEWLINE = "SubmitOrNewline"
    ESC = "Esc"
    MOUSE = "Mouse"
    RESIZE = "Resize"
    EDIT = "Edit"
    REPAINT = "Repaint"
    PREVIOUS_HISTORY = "PreviousHistory"
    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    NEXT_HISTORY = "NextHistory"
    SEARCH_HISTORY = "SearchHistory"
    MULTIPLE = "Multiple"
    UNTIL_FOUND = "UntilFound"
    MENU = "Menu"
    MENU_NEXT = "MenuNext"
    MENU_PREVIOUS = "MenuPrevious"
    MENU_UP = "MenuUp"
    MENU_DOWN = "MenuDown"
    MENU_LEFT = "MenuLeft"
    MENU_RIGHT = "MenuRight"
    MENU_PAGE_NEXT = "MenuPageNext"
    MENU_PAGE_PREVIOUS = "MenuPagePrevious"
    EXECUTE_HOST_COMMAND = "ExecuteHostCommand"
    OPEN_EDITOR = "OpenEditor"
    VI_CHANGE_MODE = "ViChangeMode"


class _EventSpec(NamedTuple):
    display: str
    required: tuple[str, ...] = ()


_E = ReedlineEventKind

_EVENT_SPECS: dict[ReedlineEventKind, _EventSpec] = {
    _E.RESIZE: _EventSpec("Resize <int> <int>", ("width", "height")),
    _E.EDIT: _EventSpec(
        "Edit: <EditCommand> or Edit: <EditCommand> value: <string>", ("commands",)
    ),
    _E.MULTIPLE: _EventSpec("Multiple[ { ReedLineEvents, } ]", ("events",)),
    _E.UNTIL_FOUND: _EventSpec("UntilFound [ { ReedLineEvents, } ]", ("events",)),
    _E.MENU: _EventSpec("Menu Name: <string>", ("name",)),
    _E.EXECUTE_HOST_COMMAND: _EventSpec("ExecuteHostCommand", ("name",)),
    _E.VI_CHANGE_MODE: _EventSpec("ViChangeMode mode: <string>", ("name",)),
}

_PAYLOAD_FIELDS = ("width", "height", "commands", "events", "name")


def _spec(kind: ReedlineEventKind) -> _EventSpec:
    return _EVENT_SPECS.get(kind, _EventSpec(kind.value))


@dataclass(frozen=True)
class ReedlineEvent:
    """An engine action with its arguments.

    ``width``/``height`` belong to RESIZE, ``commands`` to EDIT, ``events``
    to MULTIPLE and UNTIL_FOUND, and ``name`` to MENU (menu name),
    EXECUTE_HOST_COMMAND (the command) and VI_CHANGE_MODE (the mode).
    """

    kind: ReedlineEventKind
    width: int | None = None
    height: int | None = None
    commands: tuple[EditCommand, ...] | None = None
    events: tuple[ReedlineEvent, ...] | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        required = _spec(self.kind).required
        for field_name in _PAYLOAD_FIELDS:
            value = getattr(self, field_name)
            if field_name in required:
                if value is None:
                    raise ValueError(f"{self.kind.value} needs {field_name}")
            elif value is not None:
                raise ValueError(f"{self.kind.value} takes no {field_name}")
        for field_name in ("width", "height"):
            value = getattr(self, field_name)
            if value is not None and not 0 <= value <= _U16_MAX:
                raise ValueError(f"{field_name} must be between 0 and {_U16_MAX}")
        if self.commands is not None:
            object.__setattr__(self, "commands", _typed_tuple(self.commands, EditCommand))
        if self.events is not None:
            object.__setattr__(self, "events", _typed_tuple(self.events, ReedlineEvent))

    def __str__(self) -> str:
        return _spec(self.kind).display


def _typed_tuple(items: Iterable[object], item_type: type) -> tuple:
    result = tuple(items)
    for item in result:
        if not isinstance(item, item_type):
            raise TypeError(f"expected {item_type.__name__}, got {type(item).__name__}")
    return result


class EventStatusKind(Enum):
    """What became of an event sent to the engine."""

    HANDLED = "handled"
    INAPPLICABLE = "inapplicable"
    EXITS = "exits"


@dataclass(frozen=True)
class EventStatus:
    """Result of handling an event; EXITS carries the signal to return with."""

    kind: EventStatusKind
    signal: Signal | None = None

    def __post_init__(self) -> None:
        if self.kind is EventStatusKind.EXITS:
            if self.signal is None:
                raise ValueError("an exiting status needs a signal")
        elif self.signal is not None:
            raise ValueError(f"{self.kind.name} carries no signal")