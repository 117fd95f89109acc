"""Editing verbs bound to keys by the default keymaps."""

from . import command, core, edit, motion, visual

__all__ = ["command", "core", "edit", "motion", "visual"]
