from dataclasses import replace
from datetime import timedelta

from lineweave.history.item import HistoryItem, HistoryItemId, HistorySessionId


def test_item_id_displays_its_number():
    assert str(HistoryItemId(12)) == "12"
    assert int(HistoryItemId(12)) == 12


def test_item_ids_order_by_value():
    ids = [HistoryItemId(5), HistoryItemId(1), HistoryItemId(3)]
    assert sorted(ids) == [HistoryItemId(1), HistoryItemId(3), HistoryItemId(5)]
    assert HistoryItemId(2) < HistoryItemId(9)


def test_item_id_can_index_a_sequence():
    entries = ["a", "b", "c"]
    assert entries[HistoryItemId(2)] == "c"


def test_item_id_is_hashable():
    seen = {HistoryItemId(4), HistoryItemId(4), HistoryItemId(7)}
    assert seen == {HistoryItemId(4), HistoryItemId(7)}


def test_session_id_round_trips_to_int():
    session = HistorySessionId(42)
    assert int(session) == 42
    assert str(session) == "42"
    assert session == HistorySessionId(42)


def test_from_command_line_leaves_everything_else_empty():
    item = HistoryItem.from_command_line("ls -alh")
    assert item.command_line == "ls -alh"
    assert item.id is None
    assert item.start_timestamp is None
    assert item.session_id is None
    assert item.hostname is None
    assert item.cwd is None
    assert item.duration is None
    assert item.exit_status is None
    assert item.more_info is None


def test_items_compare_by_all_fields():
    a = HistoryItem(
        command_line="cd ~/Downloads",
        session_id=HistorySessionId(1),
        hostname="foohost",
        cwd="/home/me",
        duration=timedelta(milliseconds=1000),
        exit_status=0,
    )
    b = replace(a)
    assert a == b
    changed = replace(a, exit_status=1)
    assert changed != a
    assert replace(changed, exit_status=a.exit_status) == a


def test_from_command_line_equals_plain_constructor():
    assert HistoryItem.from_command_line("cat x.txt") == HistoryItem("cat x.txt")