"""Trie-based resolution of pending key tokens to bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class TrieNode:
    binding_id: Optional[str] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)

    def child(self, token: str) -> "TrieNode":
        return self.children.setdefault(token, TrieNode())

    def next_tokens(self) -> tuple[str, ...]:
        return tuple(sorted(self.children))


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef
    tokens: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """``match``: run it. ``pending``: a prefix, wait for more keys. ``miss``: none."""

    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Builds one trie per mode and walks it with the pending tokens.

    A node that both ends a binding and prefixes longer ones resolves to the
    binding immediately; there are no timers to wait out an ambiguity.
    """

    def __init__(self, registry: KeymapRegistry) -> None:
        self._registry = registry
        self._cache: Dict[str, tuple[int, TrieNode]] = {}

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        node = self._ensure_trie(mode)
        for token in tokens:
            child = node.children.get(token)
            if child is None:
                return ResolutionResult(status="miss")
            node = child

        if node.binding_id is not None:
            binding = self._registry.get_binding(node.binding_id)
            action = self._registry.get_action(binding.action_id)
            return ResolutionResult(
                status="match",
                match=ResolutionMatch(
                    binding=binding, action=action, tokens=tuple(tokens)
                ),
            )

        if node.children:
            return ResolutionResult(status="pending", next_expected=node.next_tokens())
        return ResolutionResult(status="miss")

    def reset(self, mode: Optional[str] = None) -> None:
        if mode is None:
            self._cache.clear()
        else:
            self._cache.pop(mode, None)

    def _ensure_trie(self, mode: str) -> TrieNode:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        root = TrieNode()
        for binding in self._registry.iter_bindings(mode):
            node = root
            for token in binding.sequence.tokens:
                node = node.child(token)
            node.binding_id = binding.id
        self._cache[mode] = (revision, root)
        return root


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
