"""Text storage, yank register, and the edit session wrapping them."""

from .clipboard import Clipboard, NullClipboard, SystemClipboard, open_clipboard
from .persistence import (
    FilePersistence,
    LoadedFile,
    NoFilenameError,
    Persistence,
    parse_text,
    serialize,
)
from .registers import RegisterValue, YankKind, YankRegister
from .row import TAB_STOP, Row
from .session import EditSession, PasteDirection, PasteResult, SaveReport
from .state import Position, Selection, in_selection, normalize_range
from .text_buffer import EditOutcome, TextBuffer

__all__ = [
    "Clipboard",
    "NullClipboard",
    "SystemClipboard",
    "open_clipboard",
    "FilePersistence",
    "LoadedFile",
    "NoFilenameError",
    "Persistence",
    "parse_text",
    "serialize",
    "RegisterValue",
    "YankKind",
    "YankRegister",
    "Row",
    "TAB_STOP",
    "EditSession",
    "PasteDirection",
    "PasteResult",
    "SaveReport",
    "Position",
    "Selection",
    "in_selection",
    "normalize_range",
    "EditOutcome",
    "TextBuffer",
]
