from __future__ import annotations

from typing import List

from vim_core.actions.command import NO_FILE_NAME, execute_command
from vim_core.adapters.textual import TextualEditorAdapter, TextualUIHooks
from vim_core.adapters.textual.app import create_context
from vim_core.buffer import EditSession, TextBuffer
from vim_core.modes import EditorContext
from vim_core.modes.dispatcher import KeyDispatcher
from vim_core.view import RenderFrame


def make_dispatcher(*lines: str) -> KeyDispatcher:
    return KeyDispatcher(EditorContext(session=EditSession(TextBuffer(lines))))


def test_adapter_pushes_frames_and_status() -> None:
    frames: List[RenderFrame] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_view=frames.append,
        update_status=statuses.append,
    )
    adapter = TextualEditorAdapter(make_dispatcher("abc"), hooks)

    adapter.handle_textual_key("i")
    adapter.handle_textual_key("x", text="x")
    adapter.handle_textual_key("ESC")

    assert frames[0].rows[0] == "abc"
    assert frames[-1].rows[0] == "xabc"
    assert frames[-1].mode == "normal"
    assert statuses[-1] == "[No Name] [+] - 1 lines  1/1"


def test_adapter_shows_command_line_and_relays_events() -> None:
    command_lines: List[str] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_view=lambda frame: None,
        show_command=command_lines.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEditorAdapter(make_dispatcher("a"), hooks)

    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("w", text="w")
    assert command_lines[-1] == ":w"

    adapter.handle_textual_key("ENTER")

    assert ("command.submit", "w") in events
    assert ("status", "No file name") in events
    assert command_lines[-1] == "No file name"


def test_adapter_reports_quit() -> None:
    hooks = TextualUIHooks(update_view=lambda frame: None)
    adapter = TextualEditorAdapter(make_dispatcher("a"), hooks)

    for key in (":", "q"):
        adapter.handle_textual_key(key, text=key)
    assert not adapter.should_quit

    adapter.handle_textual_key("ENTER")
    assert adapter.should_quit


def test_adapter_resize_shrinks_text_area() -> None:
    frames: List[RenderFrame] = []
    adapter = TextualEditorAdapter(
        make_dispatcher("a"), TextualUIHooks(update_view=frames.append)
    )

    adapter.resize(12, 40)

    assert adapter.context.editor_rows == 10
    assert adapter.context.editor_cols == 40
    assert len(frames[-1].rows) == 10


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_view=lambda frame: None, log=logs.append)
    adapter = TextualEditorAdapter(make_dispatcher(), hooks)

    adapter.handle_textual_key("i")

    assert any(line.startswith("key ->") for line in logs)
    assert any("mode='insert'" in line for line in logs)


def test_failed_open_leaves_session_unnamed(tmp_path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    context = create_context(str(path), clipboard=False)
    assert context.status.startswith("Can't open file:")
    assert context.session.filename is None

    execute_command(context, "w")

    assert context.status == NO_FILE_NAME
    assert path.read_bytes() == b"caf\xe9\n"


def test_missing_file_is_adopted_as_new(tmp_path) -> None:
    path = tmp_path / "fresh.txt"

    context = create_context(str(path), clipboard=False)

    assert context.session.filename == str(path)
    assert context.status == f'"{path}" [New]'
