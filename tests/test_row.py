from __future__ import annotations

from vim_core.buffer import TAB_STOP, Row


def test_render_expands_tabs_to_next_stop() -> None:
    row = Row("a\tb")

    assert row.render == "a" + " " * (TAB_STOP - 1) + "b"
    assert row.cx_to_rx(0) == 0
    assert row.cx_to_rx(1) == 1
    assert row.cx_to_rx(2) == TAB_STOP
    assert row.cx_to_rx(3) == TAB_STOP + 1


def test_render_follows_every_mutation() -> None:
    row = Row("ab")

    row.insert_str(1, "\t")
    assert row.render == "a" + " " * (TAB_STOP - 1) + "b"

    assert row.delete_char(1) == "\t"
    assert row.render == "ab"

    row.append("\tc")
    assert row.render.endswith(" c")


def test_wide_characters_take_two_columns() -> None:
    row = Row("漢x")

    assert row.cx_to_rx(1) == 2
    assert row.cx_to_rx(2) == 3


def test_out_of_range_edits_are_rejected() -> None:
    row = Row("abc")

    assert row.insert_str(4, "x") is False
    assert row.insert_str(-1, "x") is False
    assert row.delete_char(3) is None
    assert row.chars == "abc"


def test_split_off_returns_tail() -> None:
    row = Row("hello")

    assert row.split_off(2) == "llo"
    assert row.chars == "he"
    assert row.render == "he"
