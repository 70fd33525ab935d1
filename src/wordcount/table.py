"""Word frequency accumulation."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class FrequencyEntry:
    """A distinct word and the number of times it was recorded."""

    word: str
    count: int


class FrequencyTable:
    """Accumulates word -> count mappings for a single run.

    Words are expected to come from the tokenizer, so the empty string is
    never recorded.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    @classmethod
    def from_tokens(cls, words: Iterable[str]) -> "FrequencyTable":
        """Create a table holding the counts of the given words."""
        table = cls()
        table.record_all(words)
        return table

    def record(self, word: str) -> None:
        """Count one occurrence of a word."""
        self._counts[word] += 1

    def record_all(self, words: Iterable[str]) -> None:
        """Count one occurrence of each word in order."""
        for word in words:
            self.record(word)

    def count(self, word: str) -> int:
        """Return how many times a word was recorded (0 if never)."""
        return self._counts[word]

    def total(self) -> int:
        """Return the number of recorded occurrences across all words."""
        return self._counts.total()

    def entries(self) -> list[FrequencyEntry]:
        """Return a snapshot of all entries in no particular order."""
        return [FrequencyEntry(word, count) for word, count in self._counts.items()]

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts
