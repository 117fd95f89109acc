"""File persistence boundary for edit sessions."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from typing import Protocol

from vim_core.runtime import telemetry

from .text_buffer import TextBuffer

ENCODING = "utf-8"


@dataclass(slots=True)
class LoadedFile:
    buffer: TextBuffer
    ends_with_newline: bool


class NoFilenameError(RuntimeError):
    """Raised when a session is asked to save or reload without a filename."""

    def __init__(self, message: str = "No file name") -> None:
        super().__init__(message)


class Persistence(Protocol):
    """How an edit session reads and writes its backing file."""

    def open(self, path: str) -> LoadedFile:
        """Load ``path``; raises ``OSError`` if it cannot be read."""
        ...

    def save(self, path: str, buffer: TextBuffer, ends_with_newline: bool) -> int:
        """Write ``buffer`` to ``path`` and return the number of bytes written."""
        ...


def parse_text(text: str) -> LoadedFile:
    """Split file contents into rows on ``\\n`` only.

    ``""`` gives zero rows, ``"\\n"`` one empty row; a final newline sets the
    flag instead of producing a trailing empty row.
    """

    if not text:
        return LoadedFile(buffer=TextBuffer(), ends_with_newline=False)
    ends_with_newline = text.endswith("\n")
    body = text[:-1] if ends_with_newline else text
    return LoadedFile(
        buffer=TextBuffer(body.split("\n")), ends_with_newline=ends_with_newline
    )


def serialize(buffer: TextBuffer, ends_with_newline: bool) -> str:
    lines = buffer.lines()
    if not lines:
        return ""
    text = "\n".join(lines)
    if ends_with_newline:
        text += "\n"
    return text


class FilePersistence:
    """UTF-8 files on the local filesystem, saved atomically."""

    def open(self, path: str) -> LoadedFile:
        with open(path, "r", encoding=ENCODING, newline="") as handle:
            text = handle.read()
        loaded = parse_text(text)
        telemetry.record_event(
            "file.open",
            data={
                "path": path,
                "rows": len(loaded.buffer),
                "ends_with_newline": loaded.ends_with_newline,
            },
            logger_name="vim_core.persistence",
        )
        return loaded

    def save(self, path: str, buffer: TextBuffer, ends_with_newline: bool) -> int:
        payload = serialize(buffer, ends_with_newline).encode(ENCODING)
        dir_name = os.path.dirname(path) or "."
        suffix = os.path.splitext(path)[1]
        # Same directory as the target so os.replace stays on one filesystem.
        with tempfile.NamedTemporaryFile(
            mode="wb", dir=dir_name, suffix=suffix, delete=False
        ) as temp_file:
            temp_name = temp_file.name
            try:
                temp_file.write(payload)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            except OSError:
                temp_file.close()
                os.unlink(temp_name)
                raise
        try:
            if os.path.exists(path):
                os.chmod(temp_name, os.stat(path).st_mode & 0o7777)
            os.replace(temp_name, path)
        except OSError:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise
        telemetry.record_event(
            "file.save",
            data={"path": path, "rows": len(buffer), "bytes": len(payload)},
            logger_name="vim_core.persistence",
        )
        return len(payload)


__all__ = [
    "FilePersistence",
    "LoadedFile",
    "NoFilenameError",
    "Persistence",
    "parse_text",
    "serialize",
]
