"""Split lines of text into normalized word tokens."""

import re
from collections.abc import Iterable, Iterator

# Space plus the punctuation stripped from words
DELIMITERS: frozenset[str] = frozenset(' ,.;:—"“”{}()?!|`')

_SPLIT_RE = re.compile("[" + re.escape("".join(sorted(DELIMITERS))) + "]")


def tokenize(line: str) -> list[str]:
    """Split a line into lowercase word tokens.

    The line is trimmed and lowercased, then split on every delimiter
    character. Runs of delimiters produce empty segments, which are dropped.

    Args:
        line: A single line of text without its line terminator.

    Returns:
        Non-empty tokens in left-to-right order.
    """
    return [word for word in _SPLIT_RE.split(line.strip().lower()) if word]


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield the tokens of each line in turn, ignoring line terminators."""
    for line in lines:
        yield from tokenize(line.rstrip("\r\n"))
