"""Report orchestration: count an input file and write the ranked histogram."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from .config import DEFAULT_ENCODING, ReportConfig
from .ranker import rank
from .renderer import render, render_lines, write_lines
from .table import FrequencyEntry, FrequencyTable
from .tokenizer import iter_tokens

log = logging.getLogger(__name__)


class ReportError(RuntimeError):
    """An input or output file could not be read or written."""

    def __init__(self, operation: str, path: Path, reason: str) -> None:
        self.operation = operation
        self.path = path
        self.reason = reason
        kind = "input" if operation == "read" else "output"
        super().__init__(f"Failed to {operation} {kind} file {path}: {reason}")


def count_file(path: Path, encoding: str = DEFAULT_ENCODING) -> FrequencyTable:
    """Tally the words of a text file.

    Args:
        path: Text file to read line by line.
        encoding: Text encoding of the file.

    Returns:
        A new table with the counts of every token in the file.

    Raises:
        ReportError: If the file cannot be opened, read or decoded, or the
            encoding is unknown. No partial table is returned in that case.
    """
    table = FrequencyTable()
    try:
        with open(path, encoding=encoding) as f:
            table.record_all(iter_tokens(f))
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ReportError("read", path, str(e)) from e

    log.debug("Counted %d words (%d distinct) in %s", table.total(), len(table), path)
    return table


def write_report(
    ranked: Iterable[FrequencyEntry],
    path: Path,
    encoding: str = DEFAULT_ENCODING,
    formatter: Callable[[FrequencyEntry], str] = render,
) -> None:
    """Write ranked entries to a file, replacing any previous contents.

    Raises:
        ReportError: If the file cannot be created or written, or an entry
            cannot be encoded.
    """
    try:
        with open(path, "w", encoding=encoding) as f:
            write_lines(render_lines(ranked, formatter), f)
    except (OSError, UnicodeEncodeError, LookupError) as e:
        raise ReportError("write", path, str(e)) from e

    log.debug("Wrote report to %s", path)


def run(config: ReportConfig) -> list[FrequencyEntry]:
    """Count the configured input, rank it and write the report.

    Returns:
        The ranked entries that were written.
    """
    input_path = config.resolve_input()
    output_path = config.resolve_output()
    log.debug("Reading %s", input_path)

    table = count_file(input_path, encoding=config.encoding)
    ranked = rank(table.entries())
    write_report(ranked, output_path, encoding=config.encoding)
    return ranked
