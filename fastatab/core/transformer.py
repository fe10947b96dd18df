"""
FASTA record to table row transformation.

transform_record() turns one (header, sequence) pair into the list of
output fields; transform_records() applies it lazily to a record stream.
"""

import logging
from typing import Iterable, Iterator

from fastatab.core.options import (
    CaseMode,
    ExtraColumnMode,
    OrientationMode,
    TransformOptions,
)
from fastatab.utils.sequence import (
    base_content,
    complement,
    count_letters,
    extract_subsequence,
    gc_content,
    reverse,
    reverse_complement,
    trim_non_letters,
)

logger = logging.getLogger(__name__)

TAB_TOKEN = "__tab__"


def sanitize_header(header: str) -> str:
    """Replace embedded tabs so the header stays a single table field."""
    return header.replace("\t", TAB_TOKEN)


def format_content(value: float, digits: int) -> str:
    """Format a percentage with a fixed number of decimals."""
    return f"{value:.{digits}f}"


def transform_sequence(sequence: str, options: TransformOptions) -> str:
    """
    Apply trimming, subsequence, orientation and case changes in that order.

    Args:
        sequence: Raw record sequence
        options: Resolved transformation options

    Returns:
        Transformed sequence
    """
    if options.trim:
        sequence = trim_non_letters(sequence)

    if options.subseq is not None:
        sequence = extract_subsequence(sequence, options.subseq.start, options.subseq.end)

    if options.orientation is OrientationMode.REVERSE_COMPLEMENT:
        sequence = reverse_complement(sequence)
    else:
        if options.complement:
            sequence = complement(sequence)
        if options.reverse:
            sequence = reverse(sequence)

    if options.case is CaseMode.LOWER:
        sequence = sequence.lower()
    elif options.case is CaseMode.UPPER:
        sequence = sequence.upper()

    return sequence


def transform_record(header: str, sequence: str, options: TransformOptions) -> list[str]:
    """
    Convert one FASTA record into table fields.

    Args:
        header: Record header without the leading '>'
        sequence: Record sequence
        options: Resolved transformation options

    Returns:
        [header, sequence, length?, length2?, content columns...]
    """
    sequence = transform_sequence(sequence, options)

    fields = [sanitize_header(header), sequence]

    if options.report_length:
        fields.append(str(len(sequence)))

    if options.report_length2:
        letters = len(sequence) if options.trim else count_letters(sequence)
        fields.append(str(letters))

    if options.extra_columns is ExtraColumnMode.GC:
        fields.append(format_content(gc_content(sequence), options.content_digits))
    elif options.extra_columns is ExtraColumnMode.BASE_CONTENTS:
        for bases in options.base_content_specs:
            fields.append(format_content(base_content(sequence, bases), options.content_digits))

    return fields


def transform_records(
    records: Iterable[tuple[str, str]],
    options: TransformOptions,
) -> Iterator[list[str]]:
    """
    Lazily transform a stream of (header, sequence) records.

    Records are yielded in input order, one at a time.
    """
    for header, sequence in records:
        yield transform_record(header, sequence, options)
