"""Editing core of a modal, vim-style terminal text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
    "view",
    "viewport",
]

__version__ = "0.1.0"
