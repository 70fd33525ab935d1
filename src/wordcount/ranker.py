"""Ordering of frequency entries into a ranked list."""

from collections.abc import Callable, Iterable
from typing import Any

from .table import FrequencyEntry


def by_count_desc(entry: FrequencyEntry) -> tuple[int, str]:
    """Sort key: highest count first, then word text ascending."""
    return (-entry.count, entry.word)


def rank(
    entries: Iterable[FrequencyEntry],
    key: Callable[[FrequencyEntry], Any] = by_count_desc,
    limit: int | None = None,
) -> list[FrequencyEntry]:
    """Order entries for reporting.

    Args:
        entries: Entries to rank, in any order.
        key: Sort key applied to each entry. The default ranks by count
            descending and breaks ties by word so the order is reproducible.
        limit: If set, keep only the first ``limit`` ranked entries.

    Returns:
        New list of entries in rank order. Empty when ``entries`` is empty.
    """
    ranked = sorted(entries, key=key)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
