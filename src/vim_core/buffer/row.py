"""Single buffer line: editable characters plus their rendered form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from wcwidth import wcwidth

TAB_STOP = 8


@dataclass(slots=True)
class Row:
    """One line of text.

    ``chars`` is authoritative (persistence, yanks). ``render`` is derived
    from it after every mutation and is what the screen shows: tabs are
    expanded to the next multiple of ``TAB_STOP``.
    """

    chars: str = ""
    render: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.update_render()

    def __len__(self) -> int:
        return len(self.chars)

    def update_render(self) -> None:
        parts: list[str] = []
        width = 0
        for ch in self.chars:
            if ch == "\t":
                pad = TAB_STOP - (width % TAB_STOP)
                parts.append(" " * pad)
                width += pad
            else:
                parts.append(ch)
                width += 1
        self.render = "".join(parts)

    def cx_to_rx(self, cx: int) -> int:
        """Return the 0-indexed display column of character index ``cx``.

        Tabs advance to the next tab stop and wide characters take their
        ``wcwidth`` cell count; this is the only place where character index
        and display width diverge.
        """

        rx = 0
        for ch in self.chars[: max(cx, 0)]:
            if ch == "\t":
                rx += TAB_STOP - (rx % TAB_STOP)
            else:
                rx += max(wcwidth(ch), 0)
        return rx

    def insert_str(self, at: int, text: str) -> bool:
        if at < 0 or at > len(self.chars):
            return False
        self.chars = self.chars[:at] + text + self.chars[at:]
        self.update_render()
        return True

    def delete_char(self, at: int) -> Optional[str]:
        if at < 0 or at >= len(self.chars):
            return None
        ch = self.chars[at]
        self.chars = self.chars[:at] + self.chars[at + 1 :]
        self.update_render()
        return ch

    def split_off(self, at: int) -> str:
        """Cut ``[at, end)`` off this row and return it."""

        if at < 0 or at > len(self.chars):
            return ""
        tail = self.chars[at:]
        self.chars = self.chars[:at]
        self.update_render()
        return tail

    def append(self, text: str) -> None:
        self.chars += text
        self.update_render()

    def set_text(self, text: str) -> None:
        self.chars = text
        self.update_render()


__all__ = ["Row", "TAB_STOP"]
