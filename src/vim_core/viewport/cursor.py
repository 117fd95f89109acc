"""Screen-space cursor and the scroll math that ties it to the buffer.

Two coordinate systems meet here. ``x``/``y`` are 1-indexed positions inside
the visible editor window; ``row_offset``/``col_offset`` say which buffer
row/display column sits at the window's top-left. Every movement works in
screen space and ``scroll`` afterwards restores the invariant
``1 <= y <= editor_rows`` with ``file_row`` pointing at a real row.

The cursor never holds a buffer reference: callers pass the lengths it needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vim_core.buffer.row import Row
from vim_core.buffer.state import Position


@dataclass(slots=True)
class Cursor:
    x: int = 1
    y: int = 1
    row_offset: int = 0
    col_offset: int = 0

    @property
    def file_row(self) -> int:
        return self.row_offset + self.y - 1

    @property
    def col_index(self) -> int:
        return self.x - 1

    def position(self) -> Position:
        return Position(self.file_row, self.col_index)

    def render_x(self, row: Optional[Row]) -> int:
        """1-indexed display column of the cursor within ``row``."""

        if row is None:
            return self.x
        return row.cx_to_rx(self.col_index) + 1

    # ------------------------------------------------------------------
    # Movement

    def move_left(self) -> None:
        if self.x > 1:
            self.x -= 1

    def move_right(self, max_cols: int) -> None:
        if self.x < max_cols:
            self.x += 1

    def move_up(self) -> None:
        # y may drop to 0 at the top of the window; scroll() pulls it back.
        if self.file_row > 0:
            self.y -= 1

    def move_down(self, buffer_len: int) -> None:
        if self.file_row < buffer_len - 1:
            self.y += 1

    def move_to_line_start(self) -> None:
        self.x = 1

    def move_to_line_end(self, line_len: int) -> None:
        self.x = max(1, line_len)

    def move_to_top(self) -> None:
        self.y = 1
        self.row_offset = 0

    def move_to_bottom(self, buffer_len: int, editor_rows: int) -> None:
        editor_rows = max(editor_rows, 1)
        last_row = max(buffer_len - 1, 0)
        if buffer_len <= editor_rows:
            self.row_offset = 0
            self.y = last_row + 1
        else:
            self.row_offset = last_row - (editor_rows - 1)
            self.y = editor_rows

    def move_to(self, pos: Position, editor_rows: int, buffer_len: int) -> None:
        """Place the cursor on a buffer position, scrolling as needed."""

        self.x = pos.col + 1
        self.y = pos.row - self.row_offset + 1
        self.scroll(editor_rows, buffer_len)

    # ------------------------------------------------------------------
    # Clamping

    def adjust_cursor_x(self, line_len: int) -> None:
        limit = max(1, line_len)
        if self.x > limit:
            self.x = limit

    def ensure_within_bounds(
        self, buffer_len: int, line_len: int, editor_rows: int
    ) -> None:
        """Recover after edits or reloads that may have removed the cursor's row.

        ``line_len`` is the length of the row the cursor lands on, i.e. the
        last row when the current one vanished.
        """

        if buffer_len == 0:
            self.x = 1
            self.y = 1
            self.row_offset = 0
            return
        if self.file_row >= buffer_len:
            self.move_to_bottom(buffer_len, editor_rows)
        self.adjust_cursor_x(line_len)

    # ------------------------------------------------------------------
    # Scrolling

    def scroll(self, editor_rows: int, buffer_len: int) -> None:
        editor_rows = max(editor_rows, 1)
        file_row = self.file_row
        last_row = max(buffer_len - 1, 0)

        if file_row > last_row:
            file_row = last_row
        if file_row < 0:
            file_row = 0

        if file_row < self.row_offset:
            self.row_offset = file_row
        elif file_row >= self.row_offset + editor_rows:
            self.row_offset = file_row - (editor_rows - 1)

        self.y = file_row - self.row_offset + 1

    def scroll_columns(self, render_x: int, editor_cols: int) -> None:
        """Keep the 1-indexed display column ``render_x`` inside the window."""

        editor_cols = max(editor_cols, 1)
        rx = render_x - 1
        if rx < self.col_offset:
            self.col_offset = rx
        elif rx >= self.col_offset + editor_cols:
            self.col_offset = rx - editor_cols + 1

    def screen_x(self, row: Optional[Row]) -> int:
        """1-indexed terminal column after horizontal scrolling."""

        return self.render_x(row) - self.col_offset


__all__ = ["Cursor"]
