#!/usr/bin/env python3
"""
Convert FASTA records to tab-delimited rows.

Each record becomes one line: header, sequence, then any requested
length and content columns. Sequences can be trimmed, cut down to a
subsequence, reversed, complemented and case-converted on the way.

Usage:
    fasta2tab sequences.fasta > sequences.tab
    fasta2tab -rc -l --gc a.fasta b.fasta.gz | sort -k3,3n
    cat sequences.fasta | fasta2tab -t -sub 2,7 -uc
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from fastatab.core.options import ConfigurationError, TransformOptions
from fastatab.core.transformer import transform_records
from fastatab.utils.config import load_settings
from fastatab.utils.fasta import is_stdin, iter_fasta_records
from fastatab.utils.file_io import write_rows
from fastatab.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

SUBSEQ_FLAGS = ("-sub", "--subseq")


def build_parser() -> argparse.ArgumentParser:
    """Create the fasta2tab argument parser."""
    parser = argparse.ArgumentParser(
        prog="fasta2tab",
        description="Convert FASTA records to tab-delimited rows "
                    "(header, sequence, optional computed columns)",
        allow_abbrev=False,
    )
    parser.add_argument(
        "input_files",
        type=Path,
        nargs="*",
        help="Input FASTA file(s), optionally gzipped; '-' or none reads stdin",
    )
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Reverse the sequence",
    )
    parser.add_argument(
        "-c", "--complement",
        action="store_true",
        help="Complement the sequence",
    )
    parser.add_argument(
        "-rc", "--reversecomplement",
        dest="reverse_complement",
        action="store_true",
        help="Reverse complement the sequence (overrides -r and -c)",
    )
    parser.add_argument(
        *SUBSEQ_FLAGS,
        dest="subseq",
        metavar="START,END",
        help="Keep positions START to END (1-based, inclusive); either may be "
             "empty or negative to count from the end, e.g. 2,7 or -3,",
    )
    parser.add_argument(
        "-t", "--trim",
        action="store_true",
        help="Remove all non-letter characters (gaps, digits, '*') first",
    )
    parser.add_argument(
        "-lc", "--lowercase",
        action="store_true",
        help="Convert the sequence to lowercase",
    )
    parser.add_argument(
        "-uc", "--uppercase",
        action="store_true",
        help="Convert the sequence to uppercase (ignored with -lc)",
    )
    parser.add_argument(
        "-l", "--length",
        action="store_true",
        help="Add a column with the sequence length",
    )
    parser.add_argument(
        "-l2", "--length2",
        action="store_true",
        help="Add a column with the number of letters in the sequence",
    )
    parser.add_argument(
        "--bc",
        dest="base_contents",
        action="append",
        metavar="BASES[,BASES...]",
        help="Add a base content column (percent) per comma-separated base "
             "set, e.g. --bc GC or --bc A,T; may be repeated",
    )
    parser.add_argument(
        "--gc",
        action="store_true",
        help="Add a GC content column (percent); overrides --bc",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging on stderr",
    )
    return parser


def normalize_argv(argv: list[str]) -> list[str]:
    """
    Attach the value of --subseq/-sub to its flag.

    argparse treats a value such as "-3," as an unknown option, so
    "-sub -3," is rewritten to "-sub=-3,".
    """
    normalized = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in SUBSEQ_FLAGS and i + 1 < len(argv):
            normalized.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        normalized.append(arg)
        i += 1
    return normalized


def run(options: TransformOptions, input_files: list[Path]) -> int:
    """
    Stream every input through the transformer to stdout.

    Returns:
        Number of rows written

    Raises:
        OSError: If an input cannot be read
        ValueError: If an input is not valid FASTA
    """
    records = iter_fasta_records(input_files)
    return write_rows(transform_records(records, options), sys.stdout)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(normalize_argv(sys.argv[1:] if argv is None else list(argv)))

    settings = load_settings()
    setup_logging(args.verbose, settings.log_level)

    try:
        options = TransformOptions.from_args(args, content_digits=settings.content_digits)
    except ConfigurationError as e:
        parser.error(str(e))

    logger.debug(f"Options: {options}")

    # Validate input files
    for input_file in args.input_files:
        if not is_stdin(input_file) and not input_file.exists():
            logger.error(f"Input file not found: {input_file}")
            sys.exit(1)

    try:
        count = run(options, args.input_files)
        sys.stdout.flush()
    except BrokenPipeError:
        # Downstream reader went away (e.g. "| head"); stop quietly
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading input: {e}")
        sys.exit(1)

    logger.info(f"Wrote {count} rows")


if __name__ == "__main__":
    main()
