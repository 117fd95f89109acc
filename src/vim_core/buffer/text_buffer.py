"""Line-oriented text storage for the editing core."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .row import Row
from .state import Position


class EditOutcome(str, Enum):
    """Whether a buffer request changed anything.

    Out-of-range requests are never errors; they come back ``IGNORED`` so the
    key loop keeps running and tests can still tell the two cases apart.
    """

    APPLIED = "applied"
    IGNORED = "ignored"

    def __bool__(self) -> bool:
        return self is EditOutcome.APPLIED


class TextBuffer:
    """Ordered, densely indexed sequence of rows.

    A buffer with zero rows is a valid state and differs from a buffer holding
    one empty row: the first comes from an empty file, the second from a file
    containing a single newline.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._rows: List[Row] = [Row(text) for text in lines]
        self.version = 0

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    @property
    def rows(self) -> Sequence[Row]:
        return tuple(self._rows)

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def lines(self) -> List[str]:
        return [row.chars for row in self._rows]

    def line_len(self, index: int) -> int:
        row = self.row(index)
        return len(row) if row is not None else 0

    def get_row_content(self, at: int) -> Optional[str]:
        row = self.row(at)
        return row.chars if row is not None else None

    def _touch(self) -> EditOutcome:
        self.version += 1
        return EditOutcome.APPLIED

    def insert_row(self, at: int, text: str) -> EditOutcome:
        if at < 0 or at > len(self._rows):
            return EditOutcome.IGNORED
        self._rows.insert(at, Row(text))
        return self._touch()

    def replace_row(self, at: int, text: str) -> EditOutcome:
        row = self.row(at)
        if row is None:
            return EditOutcome.IGNORED
        row.set_text(text)
        return self._touch()

    def delete_row(self, at: int) -> EditOutcome:
        if self.delete_row_with_content(at) is None:
            return EditOutcome.IGNORED
        return EditOutcome.APPLIED

    def delete_row_with_content(self, at: int) -> Optional[str]:
        if at < 0 or at >= len(self._rows):
            return None
        row = self._rows.pop(at)
        self._touch()
        return row.chars

    def insert_char(self, pos: Position, ch: str) -> EditOutcome:
        # Typing just past the last row starts a new one.
        if pos.row == len(self._rows):
            self.insert_row(len(self._rows), "")
        return self.insert_str(pos, ch)

    def insert_str(self, pos: Position, text: str) -> EditOutcome:
        row = self.row(pos.row)
        if row is None or not row.insert_str(pos.col, text):
            return EditOutcome.IGNORED
        return self._touch()

    def delete_char(self, pos: Position) -> Optional[str]:
        row = self.row(pos.row)
        if row is None:
            return None
        ch = row.delete_char(pos.col)
        if ch is not None:
            self._touch()
        return ch

    def insert_newline(self, pos: Position) -> EditOutcome:
        """Split the row at ``pos.col``; past the end, append an empty row."""

        row = self.row(pos.row)
        if row is None:
            if pos.row < 0:
                return EditOutcome.IGNORED
            return self.insert_row(len(self._rows), "")
        tail = row.split_off(pos.col)
        return self.insert_row(pos.row + 1, tail)

    def join_rows(self, at: int) -> EditOutcome:
        """Append row ``at`` onto row ``at - 1``."""

        if at <= 0 or at >= len(self._rows):
            return EditOutcome.IGNORED
        current = self._rows.pop(at)
        self._rows[at - 1].append(current.chars)
        return self._touch()


__all__ = ["TextBuffer", "EditOutcome"]
