"""
FASTA file reading and writing utilities.

This module provides functions for streaming FASTA records out of files,
gzipped files and standard input, and for formatting FASTA entries.
"""

import gzip
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from Bio.SeqIO.FastaIO import SimpleFastaParser

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


def is_stdin(source: Union[str, Path]) -> bool:
    """Return True if the source names standard input."""
    return str(source) == STDIN_NAME


def open_fasta(filepath: Union[str, Path], gzip_aware: bool = True) -> TextIO:
    """
    Open a FASTA file, automatically handling gzipped files.

    Args:
        filepath: Path to FASTA file
        gzip_aware: Automatically detect and handle gzipped files

    Returns:
        File handle for reading
    """
    filepath_str = str(filepath)

    if gzip_aware and (filepath_str.endswith(".gz") or filepath_str.endswith(".gzip")):
        return gzip.open(filepath, "rt", encoding="utf-8")
    else:
        return open(filepath, "r", encoding="utf-8")


def parse_fasta_stream(fh: TextIO) -> Iterator[tuple[str, str]]:
    """
    Parse FASTA records from a file stream.

    This is a generator function that yields records one at a time,
    suitable for processing large files.

    Args:
        fh: File handle to read from

    Yields:
        Tuples of (header, sequence). The header is the full title line
        without the leading '>' and without trailing whitespace; the
        sequence has all whitespace removed.
    """
    for header, sequence in SimpleFastaParser(fh):
        yield header, "".join(sequence.split())


def iter_fasta_records(
    sources: Optional[Iterable[Union[str, Path]]] = None,
    stdin: Optional[TextIO] = None,
) -> Iterator[tuple[str, str]]:
    """
    Yield FASTA records from every source, in order.

    Each source is read to the end before the next one is opened, so the
    output order is the file order given on the command line followed by
    the record order inside each file.

    Args:
        sources: Paths to read; "-" means standard input. An empty or
            missing list reads standard input.
        stdin: Stream to use for standard input (default: sys.stdin)

    Yields:
        Tuples of (header, sequence)

    Raises:
        OSError: If a file cannot be opened or read
        ValueError: If a file is not valid FASTA
    """
    sources = list(sources or [STDIN_NAME])

    for source in sources:
        if is_stdin(source):
            logger.debug("Reading FASTA from standard input")
            yield from parse_fasta_stream(stdin if stdin is not None else sys.stdin)
            continue

        logger.debug(f"Reading FASTA from {source}")
        with open_fasta(source) as fh:
            yield from parse_fasta_stream(fh)


def format_fasta_entry(
    header: str,
    sequence: str,
    line_length: int = 60,
) -> str:
    """
    Format a single FASTA entry.

    Args:
        header: Full header text (without '>')
        sequence: Sequence string
        line_length: Number of characters per line; 0 or less writes the
            sequence on a single line

    Returns:
        Formatted FASTA entry string (without a trailing newline)

    Example:
        >>> format_fasta_entry("seq1 demo", "ACGTACGT", line_length=4)
        ">seq1 demo\\nACGT\\nACGT"
    """
    lines = [f">{header}"]

    if line_length <= 0:
        if sequence:
            lines.append(sequence)
        return "\n".join(lines)

    for i in range(0, len(sequence), line_length):
        lines.append(sequence[i:i + line_length])

    return "\n".join(lines)
