"""Key events, action results, and the context every action works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from vim_core.buffer import EditSession
from vim_core.viewport import Cursor

from .mode_manager import ModeManager

STATUS_BAR_HEIGHT = 1
COMMAND_LINE_HEIGHT = 1
UI_HEIGHT = STATUS_BAR_HEIGHT + COMMAND_LINE_HEIGHT


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed to the dispatcher."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """Outcome of handling one key."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus so hosts can observe editor activity."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Everything one key event may read or change.

    Owned by the single input loop; ``editor_rows``/``editor_cols`` describe
    the text area only (status and command lines excluded).
    """

    session: EditSession
    cursor: Cursor = field(default_factory=Cursor)
    modes: ModeManager = field(default_factory=ModeManager)
    bus: ModeBus = field(default_factory=ModeBus)
    editor_rows: int = 24 - UI_HEIGHT
    editor_cols: int = 80
    status: str = ""
    command_text: str = ""
    should_quit: bool = False

    def set_status(self, message: str) -> None:
        self.status = message
        self.bus.emit("status", message)

    def resize(self, rows: int, cols: int) -> None:
        """Adopt a terminal size; the UI lines are subtracted here."""

        self.editor_rows = max(rows - UI_HEIGHT, 1)
        self.editor_cols = max(cols, 1)


__all__ = [
    "COMMAND_LINE_HEIGHT",
    "EditorContext",
    "KeyInput",
    "ModeBus",
    "ModeResult",
    "STATUS_BAR_HEIGHT",
    "UI_HEIGHT",
]
