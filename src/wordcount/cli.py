#!/usr/bin/env python3
"""Word count CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_INPUT, ReportConfig
from .report import ReportError, run


def main() -> int:
    """Count the words of a text file and write a ranked histogram."""
    parser = argparse.ArgumentParser(
        description="Count word frequencies in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                 # Read input.txt, write output.txt
  %(prog)s notes.txt       # Read notes.txt, write output.txt
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_INPUT),
        help=f"Path to the input text file (default: {DEFAULT_INPUT})",
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config = ReportConfig().with_input(args.input)

    try:
        run(config)
    except ReportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Word counts written to {config.output_path}...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
