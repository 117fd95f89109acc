"""Built-in actions and the fixed key bindings of every mode."""

from __future__ import annotations

from typing import Iterable

from vim_core.actions import command as command_actions
from vim_core.actions import core as core_actions
from vim_core.actions import edit as edit_actions
from vim_core.actions import motion as motion_actions
from vim_core.actions import visual as visual_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("core.enter_insert", core_actions.enter_insert_mode, "Insert before cursor"),
    ActionRef("core.append", core_actions.append_after_cursor, "Append after cursor"),
    ActionRef("core.append_eol", core_actions.append_at_line_end, "Append at end of line"),
    ActionRef("core.insert_bol", core_actions.insert_at_line_start, "Insert at line start"),
    ActionRef("core.open_below", core_actions.open_line_below, "Open a line below"),
    ActionRef("core.open_above", core_actions.open_line_above, "Open a line above"),
    ActionRef("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
    ActionRef("core.enter_visual", core_actions.enter_visual_mode, "Enter visual mode"),
    ActionRef("core.enter_command", core_actions.enter_command_mode, "Enter command-line mode"),
    ActionRef("motion.left", motion_actions.move_left, "Cursor left"),
    ActionRef("motion.right", motion_actions.move_right, "Cursor right"),
    ActionRef("motion.up", motion_actions.move_up, "Cursor up"),
    ActionRef("motion.down", motion_actions.move_down, "Cursor down"),
    ActionRef("motion.line_start", motion_actions.line_start, "Start of line"),
    ActionRef("motion.line_end", motion_actions.line_end, "End of line"),
    ActionRef("motion.buffer_top", motion_actions.buffer_top, "First line"),
    ActionRef("motion.buffer_bottom", motion_actions.buffer_bottom, "Last line"),
    ActionRef("edit.delete_char", edit_actions.delete_char, "Delete character under cursor"),
    ActionRef("edit.delete_line", edit_actions.delete_line, "Delete current line"),
    ActionRef("edit.yank_line", edit_actions.yank_line, "Yank current line"),
    ActionRef("edit.paste_after", edit_actions.paste_after, "Paste after cursor"),
    ActionRef("edit.paste_before", edit_actions.paste_before, "Paste before cursor"),
    ActionRef("edit.newline", edit_actions.insert_newline, "Split line at cursor"),
    ActionRef("edit.backspace", edit_actions.backspace, "Delete left of cursor"),
    ActionRef("visual.yank_selection", visual_actions.yank_selection, "Yank selection"),
    ActionRef("visual.delete_selection", visual_actions.delete_selection, "Delete selection"),
    ActionRef("command.backspace", command_actions.backspace, "Erase command character"),
    ActionRef("command.cancel", command_actions.cancel, "Cancel command line"),
    ActionRef("command.submit_line", command_actions.submit_command_line, "Run command line"),
)


def _bindings(mode: str, table: Iterable[tuple[str, str]]) -> tuple[Binding, ...]:
    bindings = []
    for keys, action_id in table:
        sequence = KeySequence.from_strings(*keys.split())
        bindings.append(
            Binding(
                id=f"{mode}.{'_'.join(sequence.tokens)}",
                mode=mode,
                sequence=sequence,
                action_id=action_id,
            )
        )
    return tuple(bindings)


_MOTIONS: tuple[tuple[str, str], ...] = (
    ("h", "motion.left"),
    ("j", "motion.down"),
    ("k", "motion.up"),
    ("l", "motion.right"),
    ("LEFT", "motion.left"),
    ("DOWN", "motion.down"),
    ("UP", "motion.up"),
    ("RIGHT", "motion.right"),
    ("0", "motion.line_start"),
    ("$", "motion.line_end"),
    ("g g", "motion.buffer_top"),
    ("G", "motion.buffer_bottom"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bindings(
        "normal",
        _MOTIONS
        + (
            ("x", "edit.delete_char"),
            ("d d", "edit.delete_line"),
            ("y y", "edit.yank_line"),
            ("p", "edit.paste_after"),
            ("P", "edit.paste_before"),
            ("i", "core.enter_insert"),
            ("a", "core.append"),
            ("A", "core.append_eol"),
            ("I", "core.insert_bol"),
            ("o", "core.open_below"),
            ("O", "core.open_above"),
            ("v", "core.enter_visual"),
            (":", "core.enter_command"),
        ),
    )
    + _bindings(
        "insert",
        (
            ("ESC", "core.exit_to_normal"),
            ("ENTER", "edit.newline"),
            ("BACKSPACE", "edit.backspace"),
            ("LEFT", "motion.left"),
            ("DOWN", "motion.down"),
            ("UP", "motion.up"),
            ("RIGHT", "motion.right"),
        ),
    )
    + _bindings(
        "visual",
        _MOTIONS
        + (
            ("y", "visual.yank_selection"),
            ("d", "visual.delete_selection"),
            ("x", "visual.delete_selection"),
            ("ESC", "core.exit_to_normal"),
        ),
    )
    + _bindings(
        "command",
        (
            ("ESC", "command.cancel"),
            ("ENTER", "command.submit_line"),
            ("BACKSPACE", "command.backspace"),
        ),
    )
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    extra_bindings: Iterable[Binding] | None = None,
) -> KeymapRegistry:
    """Register built-in actions and bindings for every mode."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)
    for binding in extra_bindings or ():
        registry.register_binding(binding)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
