"""Text-changing actions: deletes, yanks, pastes, and insert-mode typing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_core.buffer import PasteDirection, PasteResult, Position
from vim_core.modes.base_mode import EditorContext, ModeResult

if TYPE_CHECKING:
    from vim_core.keymaps import ResolutionMatch


def _result(applied: bool, message: str) -> ModeResult:
    if not applied:
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, message=message)


def delete_char(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    applied = context.session.delete_char_at_cursor(context.cursor.position())
    return _result(applied, "delete_char")


def delete_line(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    applied = context.session.delete_line(context.cursor.file_row)
    return _result(applied, "delete_line")


def yank_line(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    applied = context.session.yank_line(context.cursor.file_row)
    return _result(applied, "yank_line")


def _paste(context: EditorContext, direction: PasteDirection) -> ModeResult:
    session, cursor = context.session, context.cursor
    pos = cursor.position()
    result = session.paste(pos, direction)
    if result is PasteResult.EMPTY:
        return ModeResult(consumed=True, status="noop")

    if result is PasteResult.INLINE:
        text = session.register.content()[0]
        start = pos.col + 1 if direction is PasteDirection.BELOW else pos.col
        line_len = session.current_line_len(pos.row)
        col = min(start + len(text), line_len) - 1
        target = Position(pos.row, max(col, 0))
    else:
        row = pos.row + 1 if result is PasteResult.BELOW else pos.row
        target = Position(min(row, len(session.buffer) - 1), 0)

    cursor.move_to(target, context.editor_rows, len(session.buffer))
    return ModeResult(consumed=True, message=f"paste_{result.value}")


def paste_after(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _paste(context, PasteDirection.BELOW)


def paste_before(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _paste(context, PasteDirection.ABOVE)


def insert_newline(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    _split_line(context)
    return ModeResult(consumed=True, message="insert_newline")


def backspace(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    """Delete left of the cursor, joining onto the previous row at column 0."""

    del match
    session, cursor = context.session, context.cursor
    pos = cursor.position()
    if pos.col > 0:
        if not session.delete_char(Position(pos.row, pos.col - 1)):
            return ModeResult(consumed=True, status="noop")
        cursor.move_left()
        return ModeResult(consumed=True, message="backspace")

    if pos.row == 0:
        return ModeResult(consumed=True, status="noop")
    previous_len = session.current_line_len(pos.row - 1)
    if not session.join_rows(pos.row):
        return ModeResult(consumed=True, status="noop")
    cursor.move_to(
        Position(pos.row - 1, previous_len),
        context.editor_rows,
        len(session.buffer),
    )
    return ModeResult(consumed=True, message="join_rows")


def insert_text(context: EditorContext, text: str) -> ModeResult:
    """Type ``text`` at the cursor; carriage returns split the line."""

    session, cursor = context.session, context.cursor
    for ch in text:
        if ch in "\r\n":
            _split_line(context)
            continue
        if session.insert_char(cursor.position(), ch):
            cursor.x += 1
    return ModeResult(consumed=True, message="insert_text")


def _split_line(context: EditorContext) -> None:
    session, cursor = context.session, context.cursor
    if session.buffer.is_empty():
        # Materialize the row the cursor stands on before splitting it.
        session.insert_newline(Position(0, 0))
    pos = cursor.position()
    if session.insert_newline(pos):
        cursor.move_to(
            Position(pos.row + 1, 0), context.editor_rows, len(session.buffer)
        )


__all__ = [
    "backspace",
    "delete_char",
    "delete_line",
    "insert_newline",
    "insert_text",
    "paste_after",
    "paste_before",
    "yank_line",
]
