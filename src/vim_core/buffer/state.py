"""Buffer coordinates and range helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """0-indexed ``(row, col)`` buffer coordinate, ordered row-major."""

    row: int = 0
    col: int = 0


Selection = Tuple[Position, Position]


def normalize_range(start: Position, end: Position) -> Selection:
    """Return ``(start, end)`` swapped if needed so that ``start <= end``."""

    if start <= end:
        return start, end
    return end, start


def in_selection(pos: Position, start: Position, end: Position) -> bool:
    norm_start, norm_end = normalize_range(start, end)
    return norm_start <= pos <= norm_end


__all__ = ["Position", "Selection", "normalize_range", "in_selection"]
