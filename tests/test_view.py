from __future__ import annotations

from vim_core.buffer import EditSession, Position, TextBuffer
from vim_core.modes import EditorContext
from vim_core.view import FILLER, build_frame, clip_cells


def make_context(*lines: str, **kwargs) -> EditorContext:
    filename = kwargs.pop("filename", None)
    session = EditSession(TextBuffer(lines), filename=filename)
    return EditorContext(session=session, **kwargs)


def test_empty_buffer_frame() -> None:
    frame = build_frame(make_context(editor_rows=3))

    assert frame.rows == (FILLER, FILLER, FILLER)
    assert frame.status_left == "[No Name] - 0 lines"
    assert frame.status_right == "0/0"
    assert frame.message == ""
    assert (frame.cursor_x, frame.cursor_y) == (1, 1)
    assert frame.mode == "normal"


def test_status_bar_shows_name_and_modified_flag() -> None:
    context = make_context("a", "b", filename="notes.txt", editor_rows=4)
    context.session.insert_char(Position(1, 0), "x")
    context.cursor.y = 2

    frame = build_frame(context)

    assert frame.rows == ("a", "xb", FILLER, FILLER)
    assert frame.status_left == "notes.txt [+] - 2 lines"
    assert frame.status_right == "2/2"
    assert frame.status_bar == "notes.txt [+] - 2 lines 2/2"


def test_message_line_per_mode() -> None:
    context = make_context("a")
    context.set_status("hello")
    assert build_frame(context).message == "hello"

    context.modes.enter_insert()
    assert build_frame(context).message == "-- INSERT --"
    context.modes.enter_normal()

    context.modes.enter_visual(Position(0, 0))
    assert build_frame(context).message == "-- VISUAL --"
    context.modes.enter_normal()

    context.modes.enter_command()
    context.command_text = "wq"
    frame = build_frame(context)
    assert frame.message == ":wq"
    assert frame.cursor_x == 4
    assert frame.cursor_y == context.editor_rows + 2


def test_rows_follow_scroll_offsets() -> None:
    context = make_context(
        *[f"{i:02d}-abcdef" for i in range(10)], editor_rows=3, editor_cols=4
    )
    context.cursor.row_offset = 5
    context.cursor.col_offset = 3

    frame = build_frame(context)

    assert frame.rows == ("abcd", "abcd", "abcd")
    assert frame.row_offset == 5


def test_tabs_render_expanded_and_cursor_uses_display_column() -> None:
    context = make_context("\tx")
    context.cursor.x = 2

    frame = build_frame(context)

    assert frame.rows[0] == " " * 8 + "x"
    assert frame.cursor_x == 9


def test_visual_selection_is_normalized() -> None:
    context = make_context("hello", "world")
    context.cursor.y = 2
    context.cursor.x = 2
    context.modes.enter_visual(Position(0, 3))

    frame = build_frame(context)

    assert frame.selection == (Position(0, 3), Position(1, 1))
    assert frame.is_selected(0, 4)
    assert frame.is_selected(1, 0)
    assert not frame.is_selected(0, 2)
    assert not frame.is_selected(1, 2)


def test_clip_cells_respects_wide_characters() -> None:
    assert clip_cells("漢字ab", 0, 3) == "漢"
    assert clip_cells("漢字ab", 2, 4) == "字ab"
    assert clip_cells("abc", 5, 4) == ""
