"""Body of the input loop: one key event in, one settled editor state out."""

from __future__ import annotations

from typing import List, Optional

from vim_core.actions import command as command_actions
from vim_core.actions import edit as edit_actions
from vim_core.actions.motion import settle
from vim_core.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    ResolutionMatch,
    load_default_keymaps,
    token_for,
)
from vim_core.runtime import telemetry

from .base_mode import EditorContext, KeyInput, ModeResult


class KeyDispatcher:
    """Resolves keys against the active mode's bindings and runs the action.

    Multi-key bindings (``dd``, ``yy``, ``gg``) accumulate in a pending
    buffer; a key that continues no binding discards the whole sequence.
    Unbound printable keys become text in Insert and Command mode.
    """

    def __init__(
        self,
        context: EditorContext,
        *,
        registry: Optional[KeymapRegistry] = None,
        resolver: Optional[KeymapResolver] = None,
    ) -> None:
        self.context = context
        self.registry = registry or load_default_keymaps(KeymapRegistry())
        self.resolver = resolver or KeymapResolver(self.registry)
        self._pending: List[str] = []
        self._pending_mode: Optional[str] = None

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.context.modes.name
        with telemetry.span(
            name=f"mode::{mode}",
            component=True,
            metadata={"key": key.key, "mode": mode},
        ):
            result = self._dispatch(mode, key)
            settle(self.context)
        return result

    def reset(self) -> None:
        self._pending.clear()
        self._pending_mode = None

    def _dispatch(self, mode: str, key: KeyInput) -> ModeResult:
        if self._pending_mode != mode:
            self.reset()
        self._pending.append(token_for(key.key, key.modifiers))
        self._pending_mode = mode

        result = self.resolver.resolve(mode, tuple(self._pending))
        if result.status == "match" and result.match:
            self.reset()
            return self._execute_match(result.match)

        if result.status == "pending":
            return ModeResult(consumed=True, status="pending", message="awaiting_sequence")

        discarded = len(self._pending) > 1
        self.reset()
        if discarded:
            telemetry.record_event(
                "keymaps.sequence_discarded",
                level="debug",
                data={"mode": mode, "key": key.key},
                logger_name="vim_core.dispatch",
            )
            return ModeResult(consumed=True, status="discarded")

        if key.text and not key.modifiers:
            if self.context.modes.is_insert():
                return edit_actions.insert_text(self.context, key.text)
            if self.context.modes.is_command():
                return command_actions.type_text(self.context, key.text)
        return ModeResult(consumed=False, status="unbound")

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["KeyDispatcher"]
