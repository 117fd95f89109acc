"""Registry of editing actions and the key bindings pointing at them."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from vim_core.runtime import telemetry

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when two bindings claim the same keys in the same mode."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and binding metadata.

    Bindings are indexed per mode by key signature; a registry revision is
    bumped on every change so resolvers know when to rebuild their tries.
    """

    def __init__(self, *, logger_name: str | None = "vim_core.keymaps") -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef) -> ActionRef:
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding) -> Binding:
        if binding.action_id not in self._actions:
            raise KeyError(
                f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
            )
        if binding.id in self._bindings:
            raise ValueError(f"Binding id '{binding.id}' already registered")

        existing = self.find(binding.mode, binding.key_signature)
        if existing is not None:
            raise KeymapConflictError(binding, (existing,))

        self._bindings[binding.id] = binding
        self._mode_index.setdefault(binding.mode, {})[binding.key_signature] = (
            binding.id
        )
        self._revision += 1
        telemetry.record_event(
            "keymaps.register",
            level="debug",
            data={"binding_id": binding.id, "mode": binding.mode},
            logger_name=self._logger_name,
        )
        return binding

    def find(self, mode: str, key_signature: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode, {}).get(key_signature)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(self._mode_index))


__all__ = ["KeymapConflictError", "KeymapRegistry"]
