"""A prefix tree of strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A set of words that also answers prefix queries."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None