import pytest

from lineweave.edit_commands import EditCommand, EditCommandKind
from lineweave.events import (
    EventStatus,
    EventStatusKind,
    ReedlineEvent,
    ReedlineEventKind,
    Signal,
    SignalKind,
)


def test_success_signal_keeps_buffer():
    signal = Signal(SignalKind.SUCCESS, "ls -l")
    assert signal.buffer == "ls -l"
    assert signal == Signal(SignalKind.SUCCESS, "ls -l")


def test_success_signal_requires_buffer():
    with pytest.raises(ValueError):
        Signal(SignalKind.SUCCESS)


@pytest.mark.parametrize("kind", [SignalKind.CTRL_C, SignalKind.CTRL_D])
def test_abort_signals_reject_buffer(kind):
    with pytest.raises(ValueError):
        Signal(kind, "text")
    assert Signal(kind).buffer is None


@pytest.mark.parametrize(
    "event, expected",
    [
        (ReedlineEvent(ReedlineEventKind.NONE), "None"),
        (ReedlineEvent(ReedlineEventKind.HISTORY_HINT_COMPLETE), "HistoryHintComplete"),
        (ReedlineEvent(ReedlineEventKind.CTRL_D), "CtrlD"),
        (ReedlineEvent(ReedlineEventKind.MENU_PAGE_PREVIOUS), "MenuPagePrevious"),
        (ReedlineEvent(ReedlineEventKind.RESIZE, width=80, height=24), "Resize <int> <int>"),
        (
            ReedlineEvent(ReedlineEventKind.EDIT, commands=[]),
            "Edit: <EditCommand> or Edit: <EditCommand> value: <string>",
        ),
        (ReedlineEvent(ReedlineEventKind.MULTIPLE, events=[]), "Multiple[ { ReedLineEvents, } ]"),
        (
            ReedlineEvent(ReedlineEventKind.UNTIL_FOUND, events=[]),
            "UntilFound [ { ReedLineEvents, } ]",
        ),
        (ReedlineEvent(ReedlineEventKind.MENU, name="completion_menu"), "Menu Name: <string>"),
        (
            ReedlineEvent(ReedlineEventKind.EXECUTE_HOST_COMMAND, name="clear"),
            "ExecuteHostCommand",
        ),
        (
            ReedlineEvent(ReedlineEventKind.VI_CHANGE_MODE, name="normal"),
            "ViChangeMode mode: <string>",
        ),
    ],
)
def test_event_display(event, expected):
    assert str(event) == expected


def test_plain_events_display_their_name():
    simple = [
        kind
        for kind in ReedlineEventKind
        if kind
        not in {
            ReedlineEventKind.RESIZE,
            ReedlineEventKind.EDIT,
            ReedlineEventKind.MULTIPLE,
            ReedlineEventKind.UNTIL_FOUND,
            ReedlineEventKind.MENU,
            ReedlineEventKind.EXECUTE_HOST_COMMAND,
            ReedlineEventKind.VI_CHANGE_MODE,
        }
    ]
    for kind in simple:
        assert str(ReedlineEvent(kind)) == kind.value


def test_edit_event_stores_commands_as_tuple():
    commands = [EditCommand(EditCommandKind.BACKSPACE_WORD)]
    event = ReedlineEvent(ReedlineEventKind.EDIT, commands=commands)
    assert event.commands == (EditCommand(EditCommandKind.BACKSPACE_WORD),)
    assert event == ReedlineEvent(ReedlineEventKind.EDIT, commands=tuple(commands))


def test_until_found_nests_events():
    inner = [
        ReedlineEvent(ReedlineEventKind.MENU, name="completion_menu"),
        ReedlineEvent(ReedlineEventKind.MENU_NEXT),
    ]
    event = ReedlineEvent(ReedlineEventKind.UNTIL_FOUND, events=inner)
    assert event.events == tuple(inner)
    assert event.events[0].name == "completion_menu"


def test_events_are_hashable_and_comparable():
    a = ReedlineEvent(ReedlineEventKind.MULTIPLE, events=[ReedlineEvent(ReedlineEventKind.ENTER)])
    b = ReedlineEvent(ReedlineEventKind.MULTIPLE, events=[ReedlineEvent(ReedlineEventKind.ENTER)])
    assert a == b
    assert len({a, b}) == 1


def test_missing_payload_is_rejected():
    with pytest.raises(ValueError):
        ReedlineEvent(ReedlineEventKind.MENU)
    with pytest.raises(ValueError):
        ReedlineEvent(ReedlineEventKind.RESIZE, width=80)


def test_unexpected_payload_is_rejected():
    with pytest.raises(ValueError):
        ReedlineEvent(ReedlineEventKind.ENTER, name="x")
    with pytest.raises(ValueError):
        ReedlineEvent(ReedlineEventKind.MENU, name="m", width=3, height=4)


@pytest.mark.parametrize("width", [-1, 65536])
def test_resize_dimensions_fit_sixteen_bits(width):
    with pytest.raises(ValueError):
        ReedlineEvent(ReedlineEventKind.RESIZE, width=width, height=10)
    assert ReedlineEvent(ReedlineEventKind.RESIZE, width=65535, height=0).width == 65535


def test_wrong_item_types_are_rejected():
    with pytest.raises(TypeError):
        ReedlineEvent(ReedlineEventKind.EDIT, commands=["Backspace"])
    with pytest.raises(TypeError):
        ReedlineEvent(ReedlineEventKind.MULTIPLE, events=[EditCommand(EditCommandKind.UNDO)])


def test_exit_status_carries_signal():
    status = EventStatus(EventStatusKind.EXITS, Signal(SignalKind.CTRL_D))
    assert status.signal.kind is SignalKind.CTRL_D


def test_exit_status_requires_signal():
    with pytest.raises(ValueError):
        EventStatus(EventStatusKind.EXITS)


@pytest.mark.parametrize("kind", [EventStatusKind.HANDLED, EventStatusKind.INAPPLICABLE])
def test_non_exit_status_rejects_signal(kind):
    with pytest.raises(ValueError):
        EventStatus(kind, Signal(SignalKind.CTRL_C))
    assert EventStatus(kind).signal is None