"""Snapshot of everything a host needs to paint one screen.

The frame is plain data: no escape codes, no widget types. Screen coordinates
are 1-indexed and cover the whole terminal, so the cursor sits on the message
line while a command is being typed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from wcwidth import wcwidth

from vim_core.buffer import Position, Selection, in_selection, normalize_range
from vim_core.modes.base_mode import STATUS_BAR_HEIGHT, EditorContext

FILLER = "~"
NO_NAME = "[No Name]"

_MODE_INDICATORS = {
    "insert": "-- INSERT --",
    "visual": "-- VISUAL --",
}


@dataclass(frozen=True, slots=True)
class RenderFrame:
    rows: Tuple[str, ...]
    status_left: str
    status_right: str
    message: str
    cursor_x: int
    cursor_y: int
    mode: str
    row_offset: int = 0
    selection: Optional[Selection] = None

    @property
    def status_bar(self) -> str:
        return f"{self.status_left} {self.status_right}"

    def is_selected(self, row: int, col: int) -> bool:
        """``row`` and ``col`` are buffer coordinates."""

        if self.selection is None:
            return False
        return in_selection(Position(row, col), *self.selection)


def clip_cells(text: str, start: int, width: int) -> str:
    """Return the part of ``text`` between display cells ``start`` and ``start + width``."""

    out: list[str] = []
    cell = 0
    end = start + width
    for ch in text:
        w = max(wcwidth(ch), 0)
        if cell >= end:
            break
        if cell >= start and cell + w <= end:
            out.append(ch)
        cell += w
    return "".join(out)


def _status_line(context: EditorContext) -> Tuple[str, str]:
    session = context.session
    total = len(session.buffer)
    name = session.filename or NO_NAME
    modified = " [+]" if session.dirty else ""
    current = min(context.cursor.file_row + 1, total)
    return f"{name}{modified} - {total} lines", f"{current}/{total}"


def _message_line(context: EditorContext) -> str:
    if context.modes.is_command():
        return f":{context.command_text}"
    indicator = _MODE_INDICATORS.get(context.modes.name)
    if indicator is not None:
        return indicator
    return context.status


def build_frame(context: EditorContext) -> RenderFrame:
    session, cursor = context.session, context.cursor
    buffer = session.buffer

    rows = []
    for screen_row in range(context.editor_rows):
        row = buffer.row(cursor.row_offset + screen_row)
        if row is None:
            rows.append(FILLER)
        else:
            rows.append(clip_cells(row.render, cursor.col_offset, context.editor_cols))

    left, right = _status_line(context)
    message = _message_line(context)

    if context.modes.is_command():
        cursor_x = len(message) + 1
        cursor_y = context.editor_rows + STATUS_BAR_HEIGHT + 1
    else:
        cursor_x = cursor.screen_x(buffer.row(cursor.file_row))
        cursor_y = cursor.y

    selection = None
    anchor = context.modes.visual_anchor
    if anchor is not None:
        selection = normalize_range(anchor, cursor.position())

    return RenderFrame(
        rows=tuple(rows),
        status_left=left,
        status_right=right,
        message=message,
        cursor_x=cursor_x,
        cursor_y=cursor_y,
        mode=context.modes.name,
        row_offset=cursor.row_offset,
        selection=selection,
    )


__all__ = ["FILLER", "NO_NAME", "RenderFrame", "build_frame", "clip_cells"]
