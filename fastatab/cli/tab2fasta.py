#!/usr/bin/env python3
"""
Convert tab-delimited rows back to FASTA.

The first column is the header and the second the sequence; any further
columns (lengths, content) are ignored, so fasta2tab output can be sorted
or filtered and turned back into FASTA.

Usage:
    fasta2tab seqs.fasta | sort -k2,2 | tab2fasta > sorted.fasta
    tab2fasta --width 0 table.tab > single_line.fasta
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from fastatab.core.transformer import TAB_TOKEN
from fastatab.utils.config import load_settings
from fastatab.utils.fasta import format_fasta_entry, is_stdin
from fastatab.utils.file_io import open_file, read_tab_delimited
from fastatab.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def iter_table_records(
    sources: Optional[Iterable[Union[str, Path]]] = None,
    restore_tabs: bool = True,
    stdin: Optional[TextIO] = None,
) -> Iterator[tuple[str, str]]:
    """
    Yield (header, sequence) pairs from tab-delimited sources, in order.

    Args:
        sources: Paths to read; "-" or no sources means standard input
        restore_tabs: Turn the __tab__ token back into a tab
        stdin: Stream to use for standard input (default: sys.stdin)

    Raises:
        ValueError: If a row has fewer than two columns
        OSError: If a file cannot be read
    """
    for source in list(sources or ["-"]):
        if is_stdin(source):
            yield from _parse_rows(stdin if stdin is not None else sys.stdin, "<stdin>", restore_tabs)
            continue

        with open_file(source) as fh:
            yield from _parse_rows(fh, str(source), restore_tabs)


def _parse_rows(fh: TextIO, name: str, restore_tabs: bool) -> Iterator[tuple[str, str]]:
    for line_number, fields in read_tab_delimited(fh):
        if len(fields) < 2:
            raise ValueError(f"{name}:{line_number}: expected at least 2 tab-separated columns")

        header, sequence = fields[0], fields[1]
        if restore_tabs:
            header = header.replace(TAB_TOKEN, "\t")
        yield header, sequence


def write_fasta_records(
    records: Iterable[tuple[str, str]],
    out: TextIO,
    line_length: int = 60,
) -> int:
    """
    Write records as FASTA entries.

    Returns:
        Number of records written
    """
    count = 0
    for header, sequence in records:
        out.write(format_fasta_entry(header, sequence, line_length))
        out.write("\n")
        count += 1
    return count


def build_parser(default_width: int = 60) -> argparse.ArgumentParser:
    """Create the tab2fasta argument parser."""
    parser = argparse.ArgumentParser(
        prog="tab2fasta",
        description="Convert tab-delimited rows (header, sequence, ...) to FASTA",
        allow_abbrev=False,
    )
    parser.add_argument(
        "input_files",
        type=Path,
        nargs="*",
        help="Input table file(s), optionally gzipped; '-' or none reads stdin",
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        default=default_width,
        help=f"Sequence line width, 0 for one line per sequence (default: {default_width})",
    )
    parser.add_argument(
        "--keep-tab-token",
        action="store_true",
        help=f"Leave {TAB_TOKEN} in headers instead of restoring tabs",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging on stderr",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    settings = load_settings()
    parser = build_parser(settings.line_length)
    args = parser.parse_args(argv)

    setup_logging(args.verbose, settings.log_level)

    if args.width < 0:
        parser.error("--width must not be negative")

    for input_file in args.input_files:
        if not is_stdin(input_file) and not input_file.exists():
            logger.error(f"Input file not found: {input_file}")
            sys.exit(1)

    try:
        records = iter_table_records(args.input_files, restore_tabs=not args.keep_tab_token)
        count = write_fasta_records(records, sys.stdout, args.width)
        sys.stdout.flush()
    except BrokenPipeError:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading input: {e}")
        sys.exit(1)

    logger.info(f"Wrote {count} records")


if __name__ == "__main__":
    main()
