"""Finite-state machine over the editor's modes.

Normal is the hub: Insert, Command, and Visual are entered from Normal only,
and every mode returns to Normal. The Visual variant carries its anchor, so a
selection start cannot outlive Visual mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from vim_core.buffer.state import Position
from vim_core.runtime import telemetry


class ModeKind(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    VISUAL = "visual"


@dataclass(frozen=True, slots=True)
class NormalMode:
    kind: ClassVar[ModeKind] = ModeKind.NORMAL


@dataclass(frozen=True, slots=True)
class InsertMode:
    kind: ClassVar[ModeKind] = ModeKind.INSERT


@dataclass(frozen=True, slots=True)
class CommandMode:
    kind: ClassVar[ModeKind] = ModeKind.COMMAND


@dataclass(frozen=True, slots=True)
class VisualMode:
    anchor: Position
    kind: ClassVar[ModeKind] = ModeKind.VISUAL


Mode = Union[NormalMode, InsertMode, CommandMode, VisualMode]


class ModeManager:
    """Holds the active mode and applies explicit transitions.

    Transition commands are total: a request the state machine does not allow
    (e.g. Insert -> Command) leaves the mode untouched and returns ``False``.
    """

    def __init__(self) -> None:
        self._mode: Mode = NormalMode()

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def kind(self) -> ModeKind:
        return self._mode.kind

    @property
    def name(self) -> str:
        return self._mode.kind.value

    @property
    def visual_anchor(self) -> Optional[Position]:
        if isinstance(self._mode, VisualMode):
            return self._mode.anchor
        return None

    def is_normal(self) -> bool:
        return isinstance(self._mode, NormalMode)

    def is_insert(self) -> bool:
        return isinstance(self._mode, InsertMode)

    def is_command(self) -> bool:
        return isinstance(self._mode, CommandMode)

    def is_visual(self) -> bool:
        return isinstance(self._mode, VisualMode)

    def enter_insert(self) -> bool:
        return self._from_normal(InsertMode())

    def enter_command(self) -> bool:
        return self._from_normal(CommandMode())

    def enter_visual(self, anchor: Position) -> bool:
        return self._from_normal(VisualMode(anchor=anchor))

    def enter_normal(self) -> bool:
        if self.is_normal():
            return False
        self._switch(NormalMode())
        return True

    def _from_normal(self, target: Mode) -> bool:
        if not self.is_normal():
            telemetry.record_event(
                "mode.rejected",
                level="debug",
                data={"from": self.name, "to": target.kind.value},
                logger_name="vim_core.modes",
            )
            return False
        self._switch(target)
        return True

    def _switch(self, target: Mode) -> None:
        previous = self.name
        self._mode = target
        telemetry.record_event(
            "mode.switch",
            data={"from": previous, "mode": self.name},
            logger_name="vim_core.modes",
        )


__all__ = [
    "CommandMode",
    "InsertMode",
    "Mode",
    "ModeKind",
    "ModeManager",
    "NormalMode",
    "VisualMode",
]
