"""Word frequency counting with a ranked histogram report."""

from .cli import main
from .config import ReportConfig
from .ranker import by_count_desc, rank
from .renderer import render, render_lines, write_lines
from .report import ReportError, count_file, run, write_report
from .table import FrequencyEntry, FrequencyTable
from .tokenizer import DELIMITERS, iter_tokens, tokenize

__all__ = [
    "DELIMITERS",
    "tokenize",
    "iter_tokens",
    "FrequencyEntry",
    "FrequencyTable",
    "rank",
    "by_count_desc",
    "render",
    "render_lines",
    "write_lines",
    "ReportConfig",
    "ReportError",
    "count_file",
    "write_report",
    "run",
    "main",
]
