from __future__ import annotations

from vim_core.buffer import Position, Row
from vim_core.viewport import Cursor


def test_file_row_combines_offset_and_screen_row() -> None:
    cursor = Cursor(x=3, y=4, row_offset=10)

    assert cursor.file_row == 13
    assert cursor.col_index == 2
    assert cursor.position() == Position(13, 2)


def test_scroll_down_pins_cursor_to_last_screen_row() -> None:
    cursor = Cursor(y=30)

    cursor.scroll(editor_rows=10, buffer_len=100)

    assert cursor.row_offset == 20
    assert cursor.y == 10
    assert cursor.file_row == 29


def test_scroll_is_idempotent() -> None:
    cursor = Cursor(y=30)
    cursor.scroll(10, 100)
    snapshot = (cursor.x, cursor.y, cursor.row_offset)

    cursor.scroll(10, 100)

    assert (cursor.x, cursor.y, cursor.row_offset) == snapshot


def test_move_up_at_window_top_scrolls_back() -> None:
    cursor = Cursor(y=1, row_offset=5)

    cursor.move_up()
    assert cursor.y == 0
    cursor.scroll(10, 100)

    assert cursor.row_offset == 4
    assert cursor.y == 1


def test_move_up_stops_at_first_row() -> None:
    cursor = Cursor()

    cursor.move_up()

    assert cursor.y == 1


def test_move_down_stops_at_last_row() -> None:
    cursor = Cursor(y=3)

    cursor.move_down(buffer_len=3)

    assert cursor.y == 3


def test_ensure_within_bounds_on_empty_buffer() -> None:
    cursor = Cursor(x=7, y=5, row_offset=3)

    cursor.ensure_within_bounds(buffer_len=0, line_len=0, editor_rows=10)

    assert (cursor.x, cursor.y, cursor.row_offset) == (1, 1, 0)


def test_ensure_within_bounds_after_rows_vanish() -> None:
    cursor = Cursor(x=9, y=8)

    cursor.ensure_within_bounds(buffer_len=3, line_len=4, editor_rows=10)

    assert cursor.file_row == 2
    assert cursor.x == 4


def test_move_to_bottom_of_long_buffer() -> None:
    cursor = Cursor()

    cursor.move_to_bottom(buffer_len=50, editor_rows=10)

    assert cursor.row_offset == 40
    assert cursor.y == 10
    assert cursor.file_row == 49


def test_move_to_line_end_on_empty_line() -> None:
    cursor = Cursor(x=4)

    cursor.move_to_line_end(0)

    assert cursor.x == 1


def test_move_to_scrolls_to_target() -> None:
    cursor = Cursor()

    cursor.move_to(Position(25, 3), editor_rows=10, buffer_len=40)

    assert cursor.position() == Position(25, 3)
    assert cursor.row_offset == 16


def test_horizontal_scroll_follows_render_column() -> None:
    cursor = Cursor()

    cursor.scroll_columns(render_x=100, editor_cols=80)
    assert cursor.col_offset == 20

    cursor.scroll_columns(render_x=5, editor_cols=80)
    assert cursor.col_offset == 4


def test_render_x_accounts_for_tabs() -> None:
    cursor = Cursor(x=2)
    row = Row("\tabc")

    assert cursor.render_x(row) == 9
    assert cursor.screen_x(row) == 9
