"""CLI / terminal mode for the autocompleter."""

from __future__ import annotations

from typing import Callable

from autocompleter.constants import (
    ADD_PROMPT,
    CHECK_PROMPT,
    DEFAULT_LIMIT,
    PREFIX_PROMPT,
    PROMPT,
)
from autocompleter.dictionary import Dictionary


def run_cli(
    dictionary: Dictionary,
    limit: int = DEFAULT_LIMIT,
    input_fn: Callable[[str], str] = input,
) -> None:
    """Interactive predict / check / add loop on the terminal."""
    while True:
        try:
            cmd = input_fn(PROMPT).strip()
            if cmd == "q":
                break
            if cmd == "p":
                prefix = input_fn(PREFIX_PROMPT).strip()
                result = dictionary.predict(prefix, limit)
                print(f"Completions for {prefix}: {result}")
            elif cmd == "c":
                word = input_fn(CHECK_PROMPT).strip()
                if word in dictionary:
                    print(f"'{word}' is in the dictionary.")
                else:
                    print(f"'{word}' is not in the dictionary.")
            elif cmd == "a":
                word = input_fn(ADD_PROMPT).strip()
                dictionary.add(word)
                print("String added!")
            else:
                print(f"Command {cmd} is not valid")
        except (EOFError, KeyboardInterrupt):
            print()
            break
