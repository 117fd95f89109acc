"""Actions that edit and evaluate the ex-style command line."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Callable, Dict

from vim_core.buffer import NoFilenameError
from vim_core.modes.base_mode import EditorContext, ModeResult
from vim_core.runtime import telemetry

if TYPE_CHECKING:
    from vim_core.keymaps import ResolutionMatch

CommandHandler = Callable[[EditorContext, str], ModeResult]

UNSAVED_CHANGES = "No write since last change (add ! to override)"
NO_FILE_NAME = "No file name"

_logger_name = "vim_core.commands"


def type_text(context: EditorContext, text: str) -> ModeResult:
    context.command_text += text
    return ModeResult(consumed=True)


def backspace(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    if not context.command_text:
        context.modes.enter_normal()
        return ModeResult(consumed=True, status="command_cancel")
    context.command_text = context.command_text[:-1]
    return ModeResult(consumed=True)


def cancel(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.command_text = ""
    context.modes.enter_normal()
    return ModeResult(consumed=True, status="command_cancel")


def submit_command_line(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    text = context.command_text
    context.command_text = ""
    context.modes.enter_normal()
    return execute_command(context, text)


def execute_command(context: EditorContext, text: str) -> ModeResult:
    """Run one command line (without the leading ``:``)."""

    command = text.strip()
    context.bus.emit("command.submit", command)
    if not command:
        return ModeResult(consumed=True, status="command_empty")

    name, _, argument = command.partition(" ")
    handler = _COMMAND_HANDLERS.get(name)
    if handler is None:
        return _report(context, f"Not an editor command: {command}", "command_error")

    telemetry.record_event(
        "command.execute",
        level="debug",
        data={"command": name},
        logger_name=_logger_name,
    )
    return handler(context, argument.strip())


def _report(context: EditorContext, message: str, status: str) -> ModeResult:
    context.set_status(message)
    return ModeResult(consumed=True, status=status, message=message)


def _handle_quit(context: EditorContext, argument: str, *, force: bool) -> ModeResult:
    del argument
    if context.session.dirty and not force:
        return _report(context, UNSAVED_CHANGES, "command_refused")
    context.should_quit = True
    return ModeResult(consumed=True, status="command_quit")


def _save(context: EditorContext, filename: str) -> ModeResult | None:
    """Write the buffer; returns an error result, or ``None`` on success."""

    try:
        report = context.session.save(filename or None)
    except NoFilenameError:
        return _report(context, NO_FILE_NAME, "command_error")
    except OSError as exc:
        telemetry.record_event(
            "file.save_failed",
            level="error",
            data={"error": str(exc)},
            logger_name=_logger_name,
        )
        return _report(context, f"Can't write file: {exc}", "command_error")
    context.set_status(report.message())
    return None


def _handle_write(context: EditorContext, argument: str) -> ModeResult:
    error = _save(context, argument)
    if error is not None:
        return error
    return ModeResult(consumed=True, status="command_write", message=context.status)


def _handle_write_quit(context: EditorContext, argument: str) -> ModeResult:
    error = _save(context, argument)
    if error is not None:
        return error
    context.should_quit = True
    return ModeResult(consumed=True, status="command_quit", message=context.status)


def _handle_edit(context: EditorContext, argument: str, *, force: bool) -> ModeResult:
    session = context.session
    if session.dirty and not force:
        return _report(context, UNSAVED_CHANGES, "command_refused")

    filename = argument or session.filename
    if not filename:
        return _report(context, NO_FILE_NAME, "command_error")
    try:
        session.open_file(filename)
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "file.open_failed",
            level="error",
            data={"filename": filename, "error": str(exc)},
            logger_name=_logger_name,
        )
        return _report(context, f"Can't open file: {exc}", "command_error")

    context.set_status(f'"{filename}" {len(session.buffer)}L')
    return ModeResult(consumed=True, status="command_edit", message=context.status)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "q": partial(_handle_quit, force=False),
    "q!": partial(_handle_quit, force=True),
    "w": _handle_write,
    "wq": _handle_write_quit,
    "e": partial(_handle_edit, force=False),
    "e!": partial(_handle_edit, force=True),
}


__all__ = [
    "NO_FILE_NAME",
    "UNSAVED_CHANGES",
    "backspace",
    "cancel",
    "execute_command",
    "submit_command_line",
    "type_text",
]
