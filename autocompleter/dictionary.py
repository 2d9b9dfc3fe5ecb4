"""Word list with trie-backed completion."""

from __future__ import annotations

import logging
import string
from typing import Iterable, Iterator

from autocompleter.constants import MIN_PREFIX_LEN
from autocompleter.trie import PrefixTree

log = logging.getLogger("autocompleter")


class DictionaryError(OSError):
    """The word list file could not be read."""

    def __init__(self, path: str, reason: object):
        super().__init__(f"Error opening file `{path}`: {reason}")
        self.path = path
        self.reason = reason


def clean_word(token: str) -> str:
    """Drop trailing ASCII punctuation (``"dog,"`` -> ``"dog"``)."""
    return token.rstrip(string.punctuation)


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield every whitespace-separated word in ``lines``, cleaned."""
    for line in lines:
        for token in line.split():
            word = clean_word(token)
            if word:
                yield word


class Dictionary:
    """Word list loaded from a file (or built up by hand) for completion."""

    def __init__(self, dict_path: str | None = None):
        self.trie = PrefixTree()
        if dict_path:
            self._load(dict_path)

    def _load(self, dict_path: str) -> None:
        try:
            with open(dict_path, "r", encoding="utf-8") as f:
                added = self.trie.extend(iter_words(f))
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryError(dict_path, exc) from exc
        log.info("Loaded %s words from %s", f"{added:,}", dict_path)

    def add(self, word: str) -> bool:
        added = self.trie.insert(word)
        log.debug("add %r (new=%s)", word, added)
        return added

    def predict(self, prefix: str, limit: int | None = None) -> list[str]:
        """Completions for ``prefix``, alphabetical, at most ``limit``."""
        if len(prefix) < MIN_PREFIX_LEN:
            return []
        return self.trie.complete(prefix, limit)

    def is_valid(self, word: str) -> bool:
        return self.trie.contains(word)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
