"""Mode state machine, key events, and the editor context."""

from .base_mode import (
    COMMAND_LINE_HEIGHT,
    STATUS_BAR_HEIGHT,
    UI_HEIGHT,
    EditorContext,
    KeyInput,
    ModeBus,
    ModeResult,
)
from .mode_manager import (
    CommandMode,
    InsertMode,
    Mode,
    ModeKind,
    ModeManager,
    NormalMode,
    VisualMode,
)

__all__ = [
    "COMMAND_LINE_HEIGHT",
    "STATUS_BAR_HEIGHT",
    "UI_HEIGHT",
    "EditorContext",
    "KeyInput",
    "ModeBus",
    "ModeResult",
    "CommandMode",
    "InsertMode",
    "Mode",
    "ModeKind",
    "ModeManager",
    "NormalMode",
    "VisualMode",
]
