"""Cursor and viewport math."""

from .cursor import Cursor

__all__ = ["Cursor"]
