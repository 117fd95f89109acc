"""Textual-facing controller that wires the key dispatcher into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from vim_core.modes import EditorContext, KeyInput, ModeResult
from vim_core.modes.dispatcher import KeyDispatcher
from vim_core.view import RenderFrame, build_frame


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[RenderFrame], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges the dispatcher and bus events to a Textual-friendly surface."""

    def __init__(self, dispatcher: KeyDispatcher, hooks: TextualUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    @property
    def context(self) -> EditorContext:
        return self.dispatcher.context

    @property
    def should_quit(self) -> bool:
        return self.context.should_quit

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.dispatcher.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def resize(self, rows: int, cols: int) -> None:
        """Adopt a new terminal size (whole screen, UI lines included)."""

        self.context.resize(rows, cols)
        self.refresh()

    def refresh(self) -> RenderFrame:
        frame = build_frame(self.context)
        self.hooks.update_view(frame)
        self.hooks.update_status(f"{frame.status_left}  {frame.status_right}")
        self.hooks.show_command(frame.message)
        return frame

    def _subscribe_events(self) -> None:
        bus = self.context.bus
        for event in ("status", "command.submit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.context
        return {
            "mode": context.modes.name,
            "cursor": context.cursor.position(),
            "selection": context.modes.visual_anchor,
            "command": context.command_text,
            "pending": self.dispatcher.pending,
            "buffer": context.session.filename,
            "buffer_version": context.session.buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
