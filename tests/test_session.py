from __future__ import annotations

import pytest

from vim_core.buffer import (
    EditOutcome,
    EditSession,
    NoFilenameError,
    NullClipboard,
    PasteDirection,
    PasteResult,
    Position,
    TextBuffer,
    YankKind,
)


def make_session(*lines: str, clipboard=None) -> EditSession:
    return EditSession(TextBuffer(lines), clipboard=clipboard)


def test_delete_char_then_paste_after() -> None:
    session = make_session("hello")

    assert session.delete_char_at_cursor(Position(0, 0))
    assert session.buffer.lines() == ["ello"]
    assert session.register.value is not None
    assert session.register.value.kind is YankKind.INLINE
    assert session.register.text() == "h"

    assert session.paste(Position(0, 0), PasteDirection.BELOW) is PasteResult.INLINE
    assert session.buffer.lines() == ["ehllo"]
    assert session.dirty


def test_inline_paste_above_inserts_at_cursor() -> None:
    session = make_session("abc")
    session.register.yank_inline("XY")

    session.paste(Position(0, 1), PasteDirection.ABOVE)

    assert session.buffer.lines() == ["aXYbc"]


def test_delete_line_fills_register_and_marks_dirty() -> None:
    session = make_session("line1", "line2")

    assert session.delete_line(0)

    assert session.buffer.lines() == ["line2"]
    assert session.register.is_newline_yank()
    assert session.register.content() == ("line1",)
    assert session.dirty


def test_yank_line_then_paste_below_and_above() -> None:
    session = make_session("a", "b")

    assert session.yank_line(0)
    assert not session.dirty
    assert session.paste(Position(0, 0), PasteDirection.BELOW) is PasteResult.BELOW
    assert session.buffer.lines() == ["a", "a", "b"]

    assert session.paste(Position(2, 0), PasteDirection.ABOVE) is PasteResult.ABOVE
    assert session.buffer.lines() == ["a", "a", "a", "b"]


def test_line_paste_into_empty_buffer() -> None:
    session = make_session()
    session.register.yank_line("only")

    session.paste(Position(0, 0), PasteDirection.BELOW)

    assert session.buffer.lines() == ["only"]


def test_paste_with_empty_register_is_noop() -> None:
    session = make_session("a")

    assert session.paste(Position(0, 0), PasteDirection.BELOW) is PasteResult.EMPTY
    assert not session.dirty


def test_extract_range_single_and_multi_row() -> None:
    session = make_session("abc", "def", "ghi")

    assert session.extract_range_text(Position(0, 1), Position(0, 2)) == ["bc"]
    assert session.extract_range_text(Position(0, 1), Position(2, 0)) == [
        "bc",
        "def",
        "g",
    ]
    # Reversed endpoints select the same text.
    assert session.extract_range_text(Position(2, 0), Position(0, 1)) == [
        "bc",
        "def",
        "g",
    ]


def test_delete_range_rebuilds_first_row() -> None:
    session = make_session("abc", "def", "ghi")

    assert session.delete_range(Position(2, 0), Position(0, 1))

    assert session.buffer.lines() == ["ahi"]
    assert session.register.content() == ("bc", "def", "g")
    assert session.dirty


def test_delete_range_within_one_row() -> None:
    session = make_session("hello world")

    assert session.delete_range(Position(0, 0), Position(0, 5))

    assert session.buffer.lines() == ["world"]
    assert session.register.text() == "hello "
    assert not session.register.is_newline_yank()


def test_range_on_empty_row_changes_nothing() -> None:
    session = make_session("", "abc")
    session.register.yank_line("keep")

    assert not session.yank_range(Position(0, 0), Position(0, 0))
    assert not session.delete_range(Position(0, 0), Position(0, 0))

    assert session.buffer.lines() == ["", "abc"]
    assert not session.dirty
    assert session.register.is_newline_yank()
    assert session.register.content() == ("keep",)


def test_out_of_range_edits_leave_session_clean() -> None:
    session = make_session("a")

    assert session.insert_char(Position(3, 0), "x") is EditOutcome.IGNORED
    assert session.delete_char(Position(0, 5)) is EditOutcome.IGNORED
    assert session.join_rows(0) is EditOutcome.IGNORED
    assert not session.delete_line(4)
    assert not session.delete_char_at_cursor(Position(0, 1))
    assert not session.dirty


def test_open_line_returns_new_row_index() -> None:
    session = make_session("a", "b")

    assert session.open_line(0, PasteDirection.BELOW) == 1
    assert session.open_line(0, PasteDirection.ABOVE) == 0
    assert session.buffer.lines() == ["", "a", "", "b"]
    assert make_session().open_line(0, PasteDirection.BELOW) == 0


def test_register_changes_reach_clipboard() -> None:
    clipboard = NullClipboard()
    session = make_session("one", "two", clipboard=clipboard)

    session.yank_range(Position(0, 0), Position(1, 1))

    assert clipboard.last_text == "one\ntw"


def test_clipboard_failure_is_not_fatal() -> None:
    class BrokenClipboard:
        def set_text(self, text: str) -> None:
            raise RuntimeError("no display")

    session = make_session("abc", clipboard=BrokenClipboard())

    assert session.yank_line(0)
    assert session.register.content() == ("abc",)


def test_save_requires_filename() -> None:
    session = make_session("a")

    with pytest.raises(NoFilenameError) as excinfo:
        session.save()

    assert str(excinfo.value) == "No file name"


def test_save_clears_dirty_and_reports(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    session = make_session("hello")
    session.insert_char(Position(0, 5), "!")

    report = session.save(str(path))

    assert not session.dirty
    assert path.read_bytes() == b"hello!\n"
    assert report.message() == f'"{path}" 1L 7B written'


def test_open_file_keeps_register(tmp_path) -> None:
    path = tmp_path / "other.txt"
    path.write_text("x\ny", encoding="utf-8")
    session = make_session("a")
    session.yank_line(0)
    session.insert_char(Position(0, 0), "z")

    session.open_file(str(path))

    assert session.buffer.lines() == ["x", "y"]
    assert session.ends_with_newline is False
    assert not session.dirty
    assert session.register.content() == ("a",)


def test_buffer_info_clamps_row() -> None:
    session = make_session("abc", "de")

    assert session.buffer_info(9) == (2, 2)
    assert make_session().buffer_info(0) == (0, 0)
