"""Prefix trie for word completion."""

from __future__ import annotations

from typing import Iterable, Iterator


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class PrefixTree:
    """Prefix trie that stores words and enumerates their completions.

    Words are stored as-is: no case folding, no normalization. The empty
    string is a valid word and marks the root terminal.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> PrefixTree:
        """Build a tree by inserting ``words`` in order."""
        tree = cls()
        tree.extend(words)
        return tree

    # mutation

    def insert(self, word: str) -> bool:
        """Add ``word``.  Returns True if it was not already stored."""
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if node.is_terminal:
            return False
        node.is_terminal = True
        self._size += 1
        return True

    def extend(self, words: Iterable[str]) -> int:
        """Insert every word; returns how many were new."""
        added = 0
        for word in words:
            if self.insert(word):
                added += 1
        return added

    # lookup

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Stored words starting with ``prefix``, in lexicographic order.

        Returns an empty list when no stored word has that prefix.  With
        ``limit`` only the first ``limit`` completions are returned.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        out: list[str] = []
        if limit == 0:
            return out
        for word in self.iter_completions(prefix):
            out.append(word)
            if limit is not None and len(out) >= limit:
                break
        return out

    def iter_completions(self, prefix: str) -> Iterator[str]:
        """Lazily yield completions of ``prefix`` in lexicographic order."""
        start = self._walk(prefix)
        if start is None:
            return
        # Explicit stack; children are pushed in reverse so the smallest
        # edge label is popped first.
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                yield word
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], word + ch))

    def node_count(self) -> int:
        """Number of nodes, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # container protocol

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return self.iter_completions("")

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"PrefixTree(words={self._size})"
