"""Cursor motions shared by Normal, Visual, and Insert mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_core.modes.base_mode import EditorContext, ModeResult

if TYPE_CHECKING:
    from vim_core.keymaps import ResolutionMatch


def _line_limit(context: EditorContext, line_len: int) -> int:
    # Insert mode may sit one past the last character.
    if context.modes.is_insert():
        return line_len + 1
    return line_len


def settle(context: EditorContext) -> None:
    """Clamp the cursor to the buffer and scroll it back into view."""

    session, cursor = context.session, context.cursor
    buffer_len, line_len = session.buffer_info(cursor.file_row)
    cursor.ensure_within_bounds(
        buffer_len, _line_limit(context, line_len), context.editor_rows
    )
    cursor.scroll(context.editor_rows, buffer_len)
    row = session.buffer.row(cursor.file_row)
    cursor.scroll_columns(cursor.render_x(row), context.editor_cols)


def move_left(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_left()
    return ModeResult(consumed=True)


def move_right(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    line_len = context.session.current_line_len(context.cursor.file_row)
    context.cursor.move_right(_line_limit(context, line_len))
    return ModeResult(consumed=True)


def move_up(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_up()
    return ModeResult(consumed=True)


def move_down(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_down(len(context.session.buffer))
    return ModeResult(consumed=True)


def line_start(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_to_line_start()
    return ModeResult(consumed=True)


def line_end(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    line_len = context.session.current_line_len(context.cursor.file_row)
    context.cursor.move_to_line_end(line_len)
    return ModeResult(consumed=True)


def buffer_top(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_to_top()
    return ModeResult(consumed=True)


def buffer_bottom(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_to_bottom(len(context.session.buffer), context.editor_rows)
    return ModeResult(consumed=True)


__all__ = [
    "buffer_bottom",
    "buffer_top",
    "line_end",
    "line_start",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "settle",
]
