#!/usr/bin/env python3
"""
Autocomplete

Loads a word list into a prefix trie and answers completion queries
from the terminal.

Usage: autocomplete [--dict path/to/words.txt] [--limit N] [-v]
"""

from __future__ import annotations

import argparse
import logging

from autocompleter.cli import run_cli
from autocompleter.constants import DEFAULT_LIMIT
from autocompleter.dictionary import Dictionary, DictionaryError


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("autocompleter")


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Autocomplete -- prefix completion over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file (optional)")
    parser.add_argument("--limit", type=_positive_int, default=DEFAULT_LIMIT,
                        help="Maximum completions shown per prediction")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        dictionary = Dictionary(args.dict)
    except DictionaryError as exc:
        log.error("%s", exc)
        return 1

    run_cli(dictionary, limit=args.limit)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
