import threading

from lineweave.external_printer import (
    EXTERNAL_PRINTER_DEFAULT_CAPACITY,
    ExternalPrinter,
)


def test_empty_printer_returns_none():
    assert ExternalPrinter().get_line() is None


def test_lines_come_back_in_order():
    printer = ExternalPrinter(5)
    for line in ["one", "two", "three"]:
        printer.print(line)
    assert [printer.get_line() for _ in range(4)] == ["one", "two", "three", None]


def test_default_capacity():
    assert ExternalPrinter().max_cap == EXTERNAL_PRINTER_DEFAULT_CAPACITY


def test_print_blocks_when_full():
    printer = ExternalPrinter(1)
    printer.print("first")
    thread = threading.Thread(target=printer.print, args=("second",))
    thread.start()
    thread.join(0.2)
    assert thread.is_alive()
    assert printer.get_line() == "first"
    thread.join(5)
    assert not thread.is_alive()
    assert printer.get_line() == "second"


def test_lines_from_other_threads():
    printer = ExternalPrinter(100)
    threads = [threading.Thread(target=printer.print, args=(i,)) for i in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    received = []
    while (line := printer.get_line()) is not None:
        received.append(line)
    assert sorted(received) == list(range(10))