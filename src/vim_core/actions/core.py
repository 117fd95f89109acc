"""Mode-switching actions shared across modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_core.buffer import PasteDirection, Position
from vim_core.modes.base_mode import EditorContext, ModeResult

if TYPE_CHECKING:
    from vim_core.keymaps import ResolutionMatch


def _enter_insert(context: EditorContext, message: str) -> ModeResult:
    if not context.modes.enter_insert():
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, message=message)


def enter_insert_mode(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _enter_insert(context, "enter_insert")


def append_after_cursor(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    cursor = context.cursor
    if context.session.current_line_len(cursor.file_row) > 0:
        cursor.x += 1
    return _enter_insert(context, "append")


def append_at_line_end(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    cursor = context.cursor
    cursor.x = context.session.current_line_len(cursor.file_row) + 1
    return _enter_insert(context, "append_eol")


def insert_at_line_start(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.move_to_line_start()
    return _enter_insert(context, "insert_bol")


def _open_line(context: EditorContext, direction: PasteDirection) -> None:
    cursor = context.cursor
    at = context.session.open_line(cursor.file_row, direction)
    cursor.move_to(
        Position(at, 0), context.editor_rows, len(context.session.buffer)
    )


def open_line_below(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    _open_line(context, PasteDirection.BELOW)
    return _enter_insert(context, "open_below")


def open_line_above(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    _open_line(context, PasteDirection.ABOVE)
    return _enter_insert(context, "open_above")


def exit_to_normal_mode(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    leaving_insert = context.modes.is_insert()
    context.command_text = ""
    context.modes.enter_normal()
    if leaving_insert:
        # Normal mode rests on the last character, not past it.
        context.cursor.move_left()
    return ModeResult(consumed=True, message="exit_to_normal")


def enter_visual_mode(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.modes.enter_visual(context.cursor.position())
    return ModeResult(consumed=True, message="enter_visual")


def enter_command_mode(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.command_text = ""
    context.modes.enter_command()
    return ModeResult(consumed=True, message="enter_command")


__all__ = [
    "append_after_cursor",
    "append_at_line_end",
    "enter_command_mode",
    "enter_insert_mode",
    "enter_visual_mode",
    "exit_to_normal_mode",
    "insert_at_line_start",
    "open_line_above",
    "open_line_below",
]
