"""Editing commands that can be bound to keys, and how they group for undo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class EditKind(Enum):
    """Broad class of an edit command, used to group edits for undo."""

    MOVE_CURSOR = "move_cursor"
    UNDO_REDO = "undo_redo"
    EDIT_TEXT = "edit_text"
    NO_OP = "no_op"


@dataclass(frozen=True)
class EditType:
    """The class of an edit; for cursor moves, whether they select text."""

    kind: EditKind
    select: bool = False


class EditCommandKind(Enum):
    """Every editing action the line buffer knows."""

    MOVE_TO_START = "MoveToStart"
    MOVE_TO_LINE_START = "MoveToLineStart"
    MOVE_TO_END = "MoveToEnd"
    MOVE_TO_LINE_END = "MoveToLineEnd"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_WORD_LEFT = "MoveWordLeft"
    MOVE_BIG_WORD_LEFT = "MoveBigWordLeft"
    MOVE_WORD_RIGHT = "MoveWordRight"
    MOVE_WORD_RIGHT_START = "MoveWordRightStart"
    MOVE_BIG_WORD_RIGHT_START = "MoveBigWordRightStart"
    MOVE_WORD_RIGHT_END = "MoveWordRightEnd"
    MOVE_BIG_WORD_RIGHT_END = "MoveBigWordRightEnd"
    MOVE_TO_POSITION = "MoveToPosition"
    INSERT_CHAR = "InsertChar"
    INSERT_STRING = "InsertString"
    INSERT_NEWLINE = "InsertNewline"
    REPLACE_CHAR = "ReplaceChar"
    REPLACE_CHARS = "ReplaceChars"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    CUT_CHAR = "CutChar"
    BACKSPACE_WORD = "BackspaceWord"
    DELETE_WORD = "DeleteWord"
    CLEAR = "Clear"
    CLEAR_TO_LINE_END = "ClearToLineEnd"
    COMPLETE = "Complete"
    CUT_CURRENT_LINE = "CutCurrentLine"
    CUT_FROM_START = "CutFromStart"
    CUT_FROM_LINE_START = "CutFromLineStart"
    CUT_TO_END = "CutToEnd"
    CUT_TO_LINE_END = "CutToLineEnd"
    KILL_LINE = "KillLine"
    CUT_WORD_LEFT = "CutWordLeft"
    CUT_BIG_WORD_LEFT = "CutBigWordLeft"
    CUT_WORD_RIGHT = "CutWordRight"
    CUT_BIG_WORD_RIGHT = "CutBigWordRight"
    CUT_WORD_RIGHT_TO_NEXT = "CutWordRightToNext"
    CUT_BIG_WORD_RIGHT_TO_NEXT = "CutBigWordRightToNext"
    PASTE_CUT_BUFFER_BEFORE = "PasteCutBufferBefore"
    PASTE_CUT_BUFFER_AFTER = "PasteCutBufferAfter"
    UPPERCASE_WORD = "UppercaseWord"
    LOWERCASE_WORD = "LowercaseWord"
    CAPITALIZE_CHAR = "CapitalizeChar"
    SWITCHCASE_CHAR = "SwitchcaseChar"
    SWAP_WORDS = "SwapWords"
    SWAP_GRAPHEMES = "SwapGraphemes"
    UNDO = "Undo"
    REDO = "Redo"
    CUT_RIGHT_UNTIL = "CutRightUntil"
    CUT_RIGHT_BEFORE = "CutRightBefore"
    MOVE_RIGHT_UNTIL = "MoveRightUntil"
    MOVE_RIGHT_BEFORE = "MoveRightBefore"
    CUT_LEFT_UNTIL = "CutLeftUntil"
    CUT_LEFT_BEFORE = "CutLeftBefore"
    MOVE_LEFT_UNTIL = "MoveLeftUntil"
    MOVE_LEFT_BEFORE = "MoveLeftBefore"
    SELECT_ALL = "SelectAll"
    CUT_SELECTION = "CutSelection"
    COPY_SELECTION = "CopySelection"
    PASTE = "Paste"
    COPY_FROM_START = "CopyFromStart"
    COPY_FROM_LINE_START = "CopyFromLineStart"
    COPY_TO_END = "CopyToEnd"
    COPY_TO_LINE_END = "CopyToLineEnd"
    COPY_CURRENT_LINE = "CopyCurrentLine"
    COPY_WORD_LEFT = "CopyWordLeft"
    COPY_BIG_WORD_LEFT = "CopyBigWordLeft"
    COPY_WORD_RIGHT = "CopyWordRight"
    COPY_BIG_WORD_RIGHT = "CopyBigWordRight"
    COPY_WORD_RIGHT_TO_NEXT = "CopyWordRightToNext"
    COPY_BIG_WORD_RIGHT_TO_NEXT = "CopyBigWordRightToNext"
    COPY_LEFT = "CopyLeft"
    COPY_RIGHT = "CopyRight"
    COPY_RIGHT_UNTIL = "CopyRightUntil"
    COPY_RIGHT_BEFORE = "CopyRightBefore"
    COPY_LEFT_UNTIL = "CopyLeftUntil"
    COPY_LEFT_BEFORE = "CopyLeftBefore"
    SWAP_CURSOR_AND_ANCHOR = "SwapCursorAndAnchor"
    CUT_SELECTION_SYSTEM = "CutSelectionSystem"
    COPY_SELECTION_SYSTEM = "CopySelectionSystem"
    PASTE_SYSTEM = "PasteSystem"
    CUT_INSIDE = "CutInside"
    YANK_INSIDE = "YankInside"


class _Spec(NamedTuple):
    display: str
    group: EditKind
    required: tuple[str, ...] = ()
    selectable: bool = False


_SELECT = "Optional[select: <bool>]"


def _move(display: str, *required: str) -> _Spec:
    return _Spec(display, EditKind.MOVE_CURSOR, required, True)


def _text(display: str, *required: str) -> _Spec:
    return _Spec(display, EditKind.EDIT_TEXT, required)


def _noop(display: str, *required: str) -> _Spec:
    return _Spec(display, EditKind.NO_OP, required)


_K = EditCommandKind

_SPECS: dict[EditCommandKind, _Spec] = {
    _K.MOVE_TO_START: _move(f"MoveToStart {_SELECT}"),
    _K.MOVE_TO_LINE_START: _move(f"MoveToLineStart {_SELECT}"),
    _K.MOVE_TO_END: _move(f"MoveToEnd {_SELECT}"),
    _K.MOVE_TO_LINE_END: _move(f"MoveToLineEnd {_SELECT}"),
    _K.MOVE_LEFT: _move(f"MoveLeft {_SELECT}"),
    _K.MOVE_RIGHT: _move(f"MoveRight {_SELECT}"),
    _K.MOVE_WORD_LEFT: _move(f"MoveWordLeft {_SELECT}"),
    _K.MOVE_BIG_WORD_LEFT: _move(f"MoveBigWordLeft {_SELECT}"),
    _K.MOVE_WORD_RIGHT: _move(f"MoveWordRight {_SELECT}"),
    _K.MOVE_WORD_RIGHT_START: _move(f"MoveWordRightStart {_SELECT}"),
    _K.MOVE_BIG_WORD_RIGHT_START: _move(f"MoveBigWordRightStart {_SELECT}"),
    _K.MOVE_WORD_RIGHT_END: _move(f"MoveWordRightEnd {_SELECT}"),
    _K.MOVE_BIG_WORD_RIGHT_END: _move(f"MoveBigWordRightEnd {_SELECT}"),
    _K.MOVE_TO_POSITION: _move(f"MoveToPosition  Value: <int>, {_SELECT}", "position"),
    _K.INSERT_CHAR: _text("InsertChar  Value: <char>", "char"),
    _K.INSERT_STRING: _text("InsertString Value: <string>", "text"),
    _K.INSERT_NEWLINE: _text("InsertNewline"),
    _K.REPLACE_CHAR: _text("ReplaceChar <char>", "char"),
    _K.REPLACE_CHARS: _text("ReplaceChars <int> <string>", "count", "text"),
    _K.BACKSPACE: _text("Backspace"),
    _K.DELETE: _text("Delete"),
    _K.CUT_CHAR: _text("CutChar"),
    _K.BACKSPACE_WORD: _text("BackspaceWord"),
    _K.DELETE_WORD: _text("DeleteWord"),
    _K.CLEAR: _text("Clear"),
    _K.CLEAR_TO_LINE_END: _text("ClearToLineEnd"),
    _K.COMPLETE: _text("Complete"),
    _K.CUT_CURRENT_LINE: _text("CutCurrentLine"),
    _K.CUT_FROM_START: _text("CutFromStart"),
    _K.CUT_FROM_LINE_START: _text("CutFromLineStart"),
    _K.CUT_TO_END: _text("CutToEnd"),
    _K.CUT_TO_LINE_END: _text("CutToLineEnd"),
    _K.KILL_LINE: _text("KillLine"),
    _K.CUT_WORD_LEFT: _text("CutWordLeft"),
    _K.CUT_BIG_WORD_LEFT: _text("CutBigWordLeft"),
    _K.CUT_WORD_RIGHT: _text("CutWordRight"),
    _K.CUT_BIG_WORD_RIGHT: _text("CutBigWordRight"),
    _K.CUT_WORD_RIGHT_TO_NEXT: _text("CutWordRightToNext"),
    _K.CUT_BIG_WORD_RIGHT_TO_NEXT: _text("CutBigWordRightToNext"),
    _K.PASTE_CUT_BUFFER_BEFORE: _text("PasteCutBufferBefore"),
    _K.PASTE_CUT_BUFFER_AFTER: _text("PasteCutBufferAfter"),
    _K.UPPERCASE_WORD: _text("UppercaseWord"),
    _K.LOWERCASE_WORD: _text("LowercaseWord"),
    _K.CAPITALIZE_CHAR: _text("CapitalizeChar"),
    _K.SWITCHCASE_CHAR: _text("SwitchcaseChar"),
    _K.SWAP_WORDS: _text("SwapWords"),
    _K.SWAP_GRAPHEMES: _text("SwapGraphemes"),
    _K.UNDO: _Spec("Undo", EditKind.UNDO_REDO),
    _K.REDO: _Spec("Redo", EditKind.UNDO_REDO),
    _K.CUT_RIGHT_UNTIL: _text("CutRightUntil Value: <char>", "char"),
    _K.CUT_RIGHT_BEFORE: _text("CutRightBefore Value: <char>", "char"),
    _K.MOVE_RIGHT_UNTIL: _move("MoveRightUntil Value: <char>", "char"),
    _K.MOVE_RIGHT_BEFORE: _move("MoveRightBefore Value: <char>", "char"),
    _K.CUT_LEFT_UNTIL: _text("CutLeftUntil Value: <char>", "char"),
    _K.CUT_LEFT_BEFORE: _text("CutLeftBefore Value: <char>", "char"),
    _K.MOVE_LEFT_UNTIL: _move(f"MoveLeftUntil Value: <char>, {_SELECT}", "char"),
    _K.MOVE_LEFT_BEFORE: _move(f"MoveLeftBefore Value: <char>, {_SELECT}", "char"),
    _K.SELECT_ALL: _Spec("SelectAll", EditKind.MOVE_CURSOR),
    _K.CUT_SELECTION: _text("CutSelection"),
    _K.COPY_SELECTION: _noop("CopySelection"),
    _K.PASTE: _text("Paste"),
    _K.COPY_FROM_START: _noop("CopyFromStart"),
    _K.COPY_FROM_LINE_START: _noop("CopyFromLineStart"),
    _K.COPY_TO_END: _noop("CopyToEnd"),
    _K.COPY_TO_LINE_END: _noop("CopyToLineEnd"),
    _K.COPY_CURRENT_LINE: _noop("CopyCurrentLine"),
    _K.COPY_WORD_LEFT: _noop("CopyWordLeft"),
    _K.COPY_BIG_WORD_LEFT: _noop("CopyBigWordLeft"),
    _K.COPY_WORD_RIGHT: _noop("CopyWordRight"),
    _K.COPY_BIG_WORD_RIGHT: _noop("CopyBigWordRight"),
    _K.COPY_WORD_RIGHT_TO_NEXT: _noop("CopyWordRightToNext"),
    _K.COPY_BIG_WORD_RIGHT_TO_NEXT: _noop("CopyBigWordRightToNext"),
    _K.COPY_LEFT: _noop("CopyLeft"),
    _K.COPY_RIGHT: _noop("CopyRight"),
    _K.COPY_RIGHT_UNTIL: _noop("CopyRightUntil Value: <char>", "char"),
    _K.COPY_RIGHT_BEFORE: _noop("CopyRightBefore Value: <char>", "char"),
    _K.COPY_LEFT_UNTIL: _noop("CopyLeftUntil Value: <char>", "char"),
    _K.COPY_LEFT_BEFORE: _noop("CopyLeftBefore Value: <char>", "char"),
    _K.SWAP_CURSOR_AND_ANCHOR: _Spec("SwapCursorAndAnchor", EditKind.MOVE_CURSOR),
    _K.CUT_SELECTION_SYSTEM: _text("CutSelectionSystem"),
    _K.COPY_SELECTION_SYSTEM: _noop("CopySelectionSystem"),
    _K.PASTE_SYSTEM: _text("PasteSystem"),
    _K.CUT_INSIDE: _text("CutInside Value: <char> <char>", "left", "right"),
    _K.YANK_INSIDE: _text("YankInside Value: <char> <char>", "left", "right"),
}

_CHAR_FIELDS = ("char", "left", "right")


@dataclass(frozen=True)
class EditCommand:
    """An editing action with its arguments.

    Only the arguments the kind takes may be given: ``select`` for cursor
    moves, ``position`` for MOVE_TO_POSITION, ``char`` for single-character
    commands, ``text`` (and ``count`` for REPLACE_CHARS) for string commands,
    and ``left``/``right`` for CUT_INSIDE and YANK_INSIDE.
    """

    kind: EditCommandKind
    select: bool = False
    position: int | None = None
    char: str | None = None
    text: str | None = None
    count: int | None = None
    left: str | None = None
    right: str | None = None

    def __post_init__(self) -> None:
        spec = _SPECS[self.kind]
        for name in ("position", "char", "text", "count", "left", "right"):
            value = getattr(self, name)
            if name in spec.required:
                if value is None:
                    raise ValueError(f"{self.kind.value} needs a {name}")
            elif value is not None:
                raise ValueError(f"{self.kind.value} takes no {name}")
        if self.select and not spec.selectable:
            raise ValueError(f"{self.kind.value} takes no select flag")
        for name in _CHAR_FIELDS:
            value = getattr(self, name)
            if value is not None and len(value) != 1:
                raise ValueError(f"{name} must be a single character")
        for name in ("position", "count"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative")

    def __str__(self) -> str:
        return _SPECS[self.kind].display

    def edit_type(self) -> EditType:
        """Classify this command for grouping on the undo stack."""
        spec = _SPECS[self.kind]
        if spec.group is EditKind.MOVE_CURSOR:
            return EditType(EditKind.MOVE_CURSOR, self.select if spec.selectable else True)
        return EditType(spec.group)


class UndoBehaviorKind(Enum):
    """What kind of change was made to the line."""

    INSERT_CHARACTER = "insert_character"
    BACKSPACE = "backspace"
    DELETE = "delete"
    MOVE_CURSOR = "move_cursor"
    HISTORY_NAVIGATION = "history_navigation"
    CREATE_UNDO_POINT = "create_undo_point"
    UNDO_REDO = "undo_redo"


_NON_RUST_SPACE = "\x1c\x1d\x1e\x1f"


def _is_whitespace(c: str) -> bool:
    return c.isspace() and c not in _NON_RUST_SPACE


def _is_line_break(c: str) -> bool:
    return c in ("\n", "\r")


@dataclass(frozen=True)
class UndoBehavior:
    """Tag of a line change, deciding how it lands on the undo stack.

    ``char`` is the inserted character for INSERT_CHARACTER and the removed
    one (if known) for BACKSPACE and DELETE.
    """

    kind: UndoBehaviorKind
    char: str | None = None

    def create_undo_point_after(self, previous: UndoBehavior) -> bool:
        """Return whether this change starts a new undo set after ``previous``."""
        Kind = UndoBehaviorKind
        if self.kind is Kind.MOVE_CURSOR:
            return False
        if previous.kind is not self.kind:
            return True
        if self.kind is Kind.HISTORY_NAVIGATION:
            return False
        if self.kind is Kind.INSERT_CHARACTER:
            prev, new = previous.char or "", self.char or ""
            return _is_line_break(prev) or (
                not _is_whitespace(prev) and _is_whitespace(new)
            )
        if self.kind in (Kind.BACKSPACE, Kind.DELETE):
            if previous.char is None or self.char is None:
                return False
            return _is_line_break(self.char) or (
                _is_whitespace(previous.char) and not _is_whitespace(self.char)
            )
        return True