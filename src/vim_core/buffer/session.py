"""Edit session: buffer mutations, dirty tracking, and the yank register."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from vim_core.runtime import telemetry

from .clipboard import Clipboard, NullClipboard
from .persistence import FilePersistence, NoFilenameError, Persistence
from .registers import YankRegister
from .state import Position, normalize_range
from .text_buffer import EditOutcome, TextBuffer


class PasteDirection(str, Enum):
    BELOW = "below"  # p
    ABOVE = "above"  # P


class PasteResult(str, Enum):
    EMPTY = "empty"
    INLINE = "inline"
    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True, slots=True)
class SaveReport:
    filename: str
    lines: int
    bytes: int

    def message(self) -> str:
        return f'"{self.filename}" {self.lines}L {self.bytes}B written'


class EditSession:
    """Owns one ``TextBuffer`` and everything that changes it.

    Persistence and clipboard are collaborators injected at construction; the
    default clipboard is a no-op so the session can run headless.
    """

    def __init__(
        self,
        buffer: Optional[TextBuffer] = None,
        *,
        filename: Optional[str] = None,
        ends_with_newline: bool = True,
        persistence: Optional[Persistence] = None,
        clipboard: Optional[Clipboard] = None,
        register: Optional[YankRegister] = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else TextBuffer()
        self.filename = filename
        self.ends_with_newline = ends_with_newline
        self.dirty = False
        self.persistence: Persistence = persistence or FilePersistence()
        self.clipboard: Clipboard = clipboard or NullClipboard()
        self.register = register or YankRegister()

    @classmethod
    def from_file(
        cls,
        filename: str,
        *,
        persistence: Optional[Persistence] = None,
        clipboard: Optional[Clipboard] = None,
    ) -> "EditSession":
        session = cls(persistence=persistence, clipboard=clipboard)
        session.open_file(filename)
        return session

    # ------------------------------------------------------------------
    # Queries

    def buffer_info(self, row: int) -> Tuple[int, int]:
        """Return ``(buffer_len, line_len)`` with ``row`` clamped to the last row."""

        buffer_len = len(self.buffer)
        if buffer_len == 0:
            return 0, 0
        return buffer_len, self.buffer.line_len(min(max(row, 0), buffer_len - 1))

    def current_line_len(self, row: int) -> int:
        return self.buffer.line_len(row)

    # ------------------------------------------------------------------
    # Plain edits

    def _mark(self, outcome: EditOutcome) -> EditOutcome:
        if outcome is EditOutcome.APPLIED:
            self.dirty = True
        return outcome

    def insert_char(self, pos: Position, ch: str) -> EditOutcome:
        before = len(self.buffer)
        outcome = self.buffer.insert_char(pos, ch)
        if len(self.buffer) != before:
            self.dirty = True
        return self._mark(outcome)

    def delete_char(self, pos: Position) -> EditOutcome:
        if self.buffer.delete_char(pos) is None:
            return EditOutcome.IGNORED
        return self._mark(EditOutcome.APPLIED)

    def insert_newline(self, pos: Position) -> EditOutcome:
        return self._mark(self.buffer.insert_newline(pos))

    def join_rows(self, row: int) -> EditOutcome:
        return self._mark(self.buffer.join_rows(row))

    def open_line(self, row: int, direction: PasteDirection) -> int:
        """Insert an empty row next to ``row`` and return its index."""

        offset = 1 if direction is PasteDirection.BELOW else 0
        at = min(max(row + offset, 0), len(self.buffer))
        self._mark(self.buffer.insert_row(at, ""))
        return at

    # ------------------------------------------------------------------
    # Yank / delete / paste

    def sync_to_clipboard(self) -> None:
        if self.register.is_empty():
            return
        try:
            self.clipboard.set_text(self.register.text())
        except Exception as exc:
            # Clipboard failures never reach the caller.
            telemetry.record_event(
                "clipboard.unavailable",
                level="warning",
                data={"error": str(exc)},
                logger_name="vim_core.session",
            )

    def delete_char_at_cursor(self, pos: Position) -> bool:
        row = self.buffer.row(pos.row)
        if row is None or not 0 <= pos.col < len(row):
            return False
        ch = self.buffer.delete_char(pos)
        if ch is not None:
            self.register.yank_inline(ch)
            self.sync_to_clipboard()
        self.dirty = True
        return True

    def delete_line(self, row: int) -> bool:
        content = self.buffer.delete_row_with_content(row)
        if content is None:
            return False
        self.register.yank_line(content)
        self.sync_to_clipboard()
        self.dirty = True
        return True

    def yank_line(self, row: int) -> bool:
        content = self.buffer.get_row_content(row)
        if content is None:
            return False
        self.register.yank_line(content)
        self.sync_to_clipboard()
        return True

    def extract_range_text(self, start: Position, end: Position) -> List[str]:
        """Return the text covered by an inclusive selection, one entry per row."""

        norm_start, norm_end = normalize_range(start, end)
        result: List[str] = []

        if norm_start.row == norm_end.row:
            text = self.buffer.get_row_content(norm_start.row)
            if text is not None:
                result.append(text[norm_start.col : norm_end.col + 1])
            return result

        for row_idx in range(norm_start.row, norm_end.row + 1):
            text = self.buffer.get_row_content(row_idx)
            if text is None:
                continue
            if row_idx == norm_start.row:
                result.append(text[norm_start.col :])
            elif row_idx == norm_end.row:
                result.append(text[: norm_end.col + 1])
            else:
                result.append(text)
        return result

    def yank_range(self, start: Position, end: Position) -> bool:
        lines = self.extract_range_text(start, end)
        # An empty row selects nothing; the register keeps its content.
        if not lines or lines == [""]:
            return False

        if len(lines) == 1:
            self.register.yank_inline(lines[0])
        else:
            self.register.yank_lines(lines)

        self.sync_to_clipboard()
        return True

    def delete_range(self, start: Position, end: Position) -> bool:
        if not self.yank_range(start, end):
            return False

        norm_start, norm_end = normalize_range(start, end)
        first = self.buffer.get_row_content(norm_start.row)
        if first is None:
            return False

        if norm_start.row == norm_end.row:
            remaining = first[: norm_start.col] + first[norm_end.col + 1 :]
            self.buffer.replace_row(norm_start.row, remaining)
            self.dirty = True
            return True

        last = self.buffer.get_row_content(norm_end.row)
        tail = last[norm_end.col + 1 :] if last is not None else ""
        # Interior rows and the last row collapse onto the first.
        for _ in range(norm_start.row + 1, norm_end.row + 1):
            if not self.buffer.delete_row(norm_start.row + 1):
                break
        self.buffer.replace_row(norm_start.row, first[: norm_start.col] + tail)
        self.dirty = True
        return True

    def paste(self, pos: Position, direction: PasteDirection) -> PasteResult:
        if self.register.is_empty():
            return PasteResult.EMPTY

        if self.register.is_newline_yank():
            offset = 1 if direction is PasteDirection.BELOW else 0
            at = min(pos.row + offset, len(self.buffer))
            for i, line in enumerate(self.register.content()):
                self.buffer.insert_row(at + i, line)
            self.dirty = True
            if direction is PasteDirection.BELOW:
                return PasteResult.BELOW
            return PasteResult.ABOVE

        row = self.buffer.row(pos.row)
        if row is None:
            return PasteResult.EMPTY
        col = pos.col + 1 if direction is PasteDirection.BELOW else pos.col
        safe_col = min(max(col, 0), len(row))
        self.buffer.insert_str(Position(pos.row, safe_col), self.register.content()[0])
        self.dirty = True
        return PasteResult.INLINE

    # ------------------------------------------------------------------
    # Files

    def save(self, filename: Optional[str] = None) -> SaveReport:
        if filename:
            self.filename = filename
        if not self.filename:
            raise NoFilenameError()
        written = self.persistence.save(
            self.filename, self.buffer, self.ends_with_newline
        )
        self.dirty = False
        return SaveReport(filename=self.filename, lines=len(self.buffer), bytes=written)

    def open_file(self, filename: str) -> None:
        loaded = self.persistence.open(filename)
        self.buffer = loaded.buffer
        self.filename = filename
        self.ends_with_newline = loaded.ends_with_newline
        self.dirty = False
        # The register survives switching files.

    def reload(self) -> None:
        if not self.filename:
            raise NoFilenameError()
        self.open_file(self.filename)


__all__ = ["EditSession", "PasteDirection", "PasteResult", "SaveReport"]
