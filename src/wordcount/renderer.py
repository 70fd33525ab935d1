"""Text rendering of ranked word counts as a histogram."""

from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from .table import FrequencyEntry

BAR_CHAR = "="


def render(entry: FrequencyEntry) -> str:
    """Format an entry as ``word | === (count)``.

    The bar holds one ``=`` per occurrence.
    """
    assert entry.count >= 1, f"entry for {entry.word!r} has count {entry.count}"
    return f"{entry.word} | {BAR_CHAR * entry.count} ({entry.count})"


def render_lines(
    ranked: Iterable[FrequencyEntry],
    formatter: Callable[[FrequencyEntry], str] = render,
) -> Iterator[str]:
    """Yield one newline-terminated line per entry, in the given order."""
    for entry in ranked:
        yield formatter(entry) + "\n"


def write_lines(lines: Iterable[str], stream: TextIO) -> None:
    """Write already formatted lines to an open text stream."""
    for line in lines:
        stream.write(line)
