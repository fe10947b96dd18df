"""
Tab-delimited I/O utilities.

This module provides functions for reading and writing the tab-delimited
rows that fasta2tab and tab2fasta exchange through pipelines.
"""

import gzip
import sys
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, TextIO, Union


def open_file(filepath: Union[str, Path], encoding: str = "utf-8") -> TextIO:
    """
    Open a file for reading, automatically handling gzipped files.

    Args:
        filepath: Path to file
        encoding: Text encoding

    Returns:
        File handle

    Example:
        >>> with open_file(Path("data.tab.gz")) as f:
        ...     content = f.read()
    """
    filepath_str = str(filepath)

    if filepath_str.endswith(".gz") or filepath_str.endswith(".gzip"):
        return gzip.open(filepath, "rt", encoding=encoding)
    else:
        return open(filepath, "r", encoding=encoding)


def format_row(fields: Iterable[Any]) -> str:
    """Join fields with single tabs and terminate the line."""
    return "\t".join(str(field) for field in fields) + "\n"


def write_rows(
    rows: Iterable[Iterable[Any]],
    out: Optional[TextIO] = None,
) -> int:
    """
    Write rows as tab-delimited lines.

    Rows are written one at a time as they are produced, so a generator
    of rows is never materialised.

    Args:
        rows: Iterable of field lists
        out: Output stream (default: sys.stdout)

    Returns:
        Number of rows written
    """
    out = out if out is not None else sys.stdout
    count = 0

    for fields in rows:
        out.write(format_row(fields))
        count += 1

    return count


def read_tab_delimited(
    fh: TextIO,
    comment_char: str = "#",
) -> Iterator[tuple[int, list[str]]]:
    """
    Read tab-delimited rows from a stream.

    Blank lines and lines starting with comment_char are skipped.

    Args:
        fh: File handle to read from
        comment_char: Character indicating comment lines

    Yields:
        Tuples of (line number, list of fields)
    """
    for line_number, line in enumerate(fh, start=1):
        line = line.rstrip("\n\r")

        if line.startswith(comment_char):
            continue

        if not line.strip():
            continue

        yield line_number, line.split("\t")
