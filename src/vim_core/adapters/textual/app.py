"""Executable Textual app that hosts the editing core."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static
from wcwidth import wcwidth

from vim_core.buffer import EditSession, open_clipboard
from vim_core.modes import EditorContext
from vim_core.modes.dispatcher import KeyDispatcher
from vim_core.runtime import telemetry
from vim_core.view import RenderFrame

from .controller import TextualEditorAdapter, TextualUIHooks

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}


def create_context(
    filename: Optional[str] = None, *, clipboard: bool = True
) -> EditorContext:
    """Build an editor context, opening ``filename`` when it exists."""

    session = EditSession(clipboard=open_clipboard(clipboard))
    context = EditorContext(session=session)
    if filename and os.path.exists(filename):
        try:
            session.open_file(filename)
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "file.open_failed",
                level="error",
                data={"filename": filename, "error": str(exc)},
                logger_name="vim_core.app",
            )
            context.set_status(f"Can't open file: {exc}")
    elif filename:
        session.filename = filename
        context.set_status(f'"{filename}" [New]')
    return context


def _cell_to_offset(line: str, cell: int) -> int:
    width = 0
    for offset, ch in enumerate(line):
        if width >= cell:
            return offset
        width += max(wcwidth(ch), 0)
    return len(line) + max(cell - width, 0)


def render_text(frame: RenderFrame) -> Text:
    """Paint frame rows with the cursor cell in reverse video."""

    text = Text(no_wrap=True, overflow="crop")
    for index, line in enumerate(frame.rows):
        row = Text(line)
        if frame.mode != "command" and index + 1 == frame.cursor_y:
            offset = _cell_to_offset(line, frame.cursor_x - 1)
            if offset >= len(line):
                row.append(" " * (offset - len(line) + 1))
            row.stylize("reverse", offset, offset + 1)
        if index:
            text.append("\n")
        text.append_text(row)
    return text


class VimCoreApp(App[None]):
    """Full-screen Textual host for one editing session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#command-line {
		height: 1;
	}
	"""

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, context: EditorContext) -> None:
        super().__init__()
        self.context = context
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        self.context.resize(self.size.height, self.size.width)
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            show_command=self._show_command,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(KeyDispatcher(self.context), hooks)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height, event.size.width)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        if self.adapter.should_quit:
            self.exit()

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("vim_core.app").debug(line)

    def _update_view(self, frame: RenderFrame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_text(frame))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(Text(status, style="reverse"))

    def _show_command(self, command: str) -> None:
        if self._command_widget:
            self._command_widget.update(Text(command))

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key == "ctrl+q":
            return None
        if key in _NAMED_KEYS:
            return (_NAMED_KEYS[key], None, ())
        if key == "tab":
            return ("TAB", "\t", ())
        if event.is_printable and event.character:
            return (event.character, event.character, ())
        if key.startswith("ctrl+"):
            return (key.split("+")[-1], None, ("CTRL",))
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a file with vim-core.")
    parser.add_argument("file", nargs="?", help="File to open or create")
    parser.add_argument(
        "--log-file",
        default=os.environ.get("VIM_CORE_LOG_FILE"),
        help="Write debug telemetry to this file",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("VIM_CORE_LOG_LEVEL", "INFO"),
        help="Minimum telemetry level (default: INFO)",
    )
    parser.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Do not copy yanks to the system clipboard",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(level=args.log_level, log_file=args.log_file)
    context = create_context(args.file, clipboard=not args.no_clipboard)
    VimCoreApp(context).run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
