"""Thread-safe wrapper around :class:`PrefixTree`.

The bare trie is not safe to mutate while other threads read it.
``GuardedPrefixTree`` puts a reader/writer lock around the whole tree:
lookups share the lock, inserts take it exclusively.  Waiting writers
block new readers.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterable, Iterator

from autocompleter.trie import PrefixTree


class _ReadWriteLock:
    """Many readers or one writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def writing(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class GuardedPrefixTree:
    """PrefixTree shared between threads."""

    def __init__(self, tree: PrefixTree | None = None):
        self._tree = tree if tree is not None else PrefixTree()
        self._lock = _ReadWriteLock()

    def insert(self, word: str) -> bool:
        with self._lock.writing():
            return self._tree.insert(word)

    def extend(self, words: Iterable[str]) -> int:
        # Consume the iterable outside the lock.
        words = list(words)
        with self._lock.writing():
            return self._tree.extend(words)

    def contains(self, word: str) -> bool:
        with self._lock.reading():
            return self._tree.contains(word)

    def has_prefix(self, prefix: str) -> bool:
        with self._lock.reading():
            return self._tree.has_prefix(prefix)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        with self._lock.reading():
            return self._tree.complete(prefix, limit)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        with self._lock.reading():
            return len(self._tree)
