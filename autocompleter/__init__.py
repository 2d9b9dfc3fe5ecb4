"""Autocompleter — prefix-trie word completion."""

from autocompleter.constants import DEFAULT_LIMIT, MIN_PREFIX_LEN
from autocompleter.trie import PrefixTree, TrieNode
from autocompleter.guarded import GuardedPrefixTree
from autocompleter.dictionary import Dictionary, DictionaryError, clean_word, iter_words

__all__ = [
    "DEFAULT_LIMIT",
    "MIN_PREFIX_LEN",
    "Dictionary",
    "DictionaryError",
    "GuardedPrefixTree",
    "PrefixTree",
    "TrieNode",
    "clean_word",
    "iter_words",
]
