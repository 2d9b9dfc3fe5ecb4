"""Shared defaults for the autocompleter."""

# Prefixes shorter than this get no predictions.
MIN_PREFIX_LEN = 1

# How many completions the front-end shows per prediction.
DEFAULT_LIMIT = 10

PROMPT = "Enter a command ((p)redict completions, (c)heck word, (a)dd word, (q)uit): "
PREFIX_PROMPT = "Enter prefix to get completions for: "
CHECK_PROMPT = "Enter word to look up: "
ADD_PROMPT = "Enter string to add to completer: "
