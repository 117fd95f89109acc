"""Single-slot yank register."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class YankKind(str, Enum):
    INLINE = "inline"  # spliced into the current row on paste
    NEWLINE = "newline"  # pasted as whole rows


@dataclass(frozen=True, slots=True)
class RegisterValue:
    lines: Tuple[str, ...]
    kind: YankKind = YankKind.INLINE

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class YankRegister:
    """Holds at most one payload; every yank or delete overwrites it."""

    def __init__(self) -> None:
        self._value: Optional[RegisterValue] = None

    @property
    def value(self) -> Optional[RegisterValue]:
        return self._value

    def yank_inline(self, text: str) -> None:
        self._value = RegisterValue(lines=(text,), kind=YankKind.INLINE)

    def yank_line(self, text: str) -> None:
        self.yank_lines((text,))

    def yank_lines(self, lines: Iterable[str]) -> None:
        self._value = RegisterValue(lines=tuple(lines), kind=YankKind.NEWLINE)

    def is_empty(self) -> bool:
        return self._value is None or not self._value.lines

    def is_newline_yank(self) -> bool:
        return self._value is not None and self._value.kind is YankKind.NEWLINE

    def content(self) -> Tuple[str, ...]:
        return self._value.lines if self._value is not None else ()

    def text(self) -> str:
        return self._value.text if self._value is not None else ""


__all__ = ["YankRegister", "RegisterValue", "YankKind"]
