"""Actions applied to the Visual-mode selection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from vim_core.buffer import Position, normalize_range
from vim_core.modes.base_mode import EditorContext, ModeResult

if TYPE_CHECKING:
    from vim_core.keymaps import ResolutionMatch


def _apply_to_selection(
    context: EditorContext,
    operation: Callable[[Position, Position], bool],
    message: str,
) -> ModeResult:
    anchor = context.modes.visual_anchor
    if anchor is None:
        return ModeResult(consumed=True, status="noop")

    head = context.cursor.position()
    applied = operation(anchor, head)
    start, _ = normalize_range(anchor, head)
    context.modes.enter_normal()
    context.cursor.move_to(start, context.editor_rows, len(context.session.buffer))
    if not applied:
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, message=message)


def yank_selection(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _apply_to_selection(context, context.session.yank_range, "yank_selection")


def delete_selection(context: EditorContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _apply_to_selection(
        context, context.session.delete_range, "delete_selection"
    )


__all__ = ["delete_selection", "yank_selection"]
