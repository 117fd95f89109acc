"""System clipboard binding for the yank register."""

from __future__ import annotations

from typing import Optional, Protocol

import pyperclip


class Clipboard(Protocol):
    def set_text(self, text: str) -> None:
        """Publish ``text``; may raise if the platform clipboard is unusable."""
        ...


class NullClipboard:
    """Clipboard that remembers the last text and talks to nothing."""

    def __init__(self) -> None:
        self.last_text: Optional[str] = None

    def set_text(self, text: str) -> None:
        self.last_text = text


class SystemClipboard:
    """Clipboard backed by ``pyperclip`` (pbcopy, xclip/xsel, wl-copy, ...)."""

    def set_text(self, text: str) -> None:
        pyperclip.copy(text)


def open_clipboard(enabled: bool = True) -> Clipboard:
    if not enabled:
        return NullClipboard()
    return SystemClipboard()


__all__ = ["Clipboard", "NullClipboard", "SystemClipboard", "open_clipboard"]
