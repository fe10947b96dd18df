"""
Sequence manipulation utilities.

This module provides the per-record string operations used by fasta2tab:
reverse, complement, reverse complement, letter trimming, subsequence
extraction and base content. Every function accepts any string, including
the empty string, and never raises.
"""

import re
from typing import Optional

# IUPAC nucleotide complement mapping
COMPLEMENT_MAP = {
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "t", "t": "a", "g": "c", "c": "g",
    "N": "N", "n": "n",
    "R": "Y", "Y": "R", "r": "y", "y": "r",
    "M": "K", "K": "M", "m": "k", "k": "m",
    "S": "S", "W": "W", "s": "s", "w": "w",
    "B": "V", "V": "B", "b": "v", "v": "b",
    "D": "H", "H": "D", "d": "h", "h": "d",
}

_COMPLEMENT_TABLE = str.maketrans(COMPLEMENT_MAP)

_NON_LETTER_RE = re.compile(r"[^A-Za-z]+")


def reverse(seq: str) -> str:
    """Return the sequence in reverse order."""
    return seq[::-1]


def complement(seq: str) -> str:
    """
    Return the complement of a DNA sequence (without reversing).

    Characters missing from COMPLEMENT_MAP are kept as they are.

    Args:
        seq: DNA sequence string

    Returns:
        Complement sequence
    """
    return seq.translate(_COMPLEMENT_TABLE)


def reverse_complement(seq: str) -> str:
    """
    Return the reverse complement of a DNA sequence.

    Args:
        seq: DNA sequence string

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("ATGC")
        "GCAT"
    """
    return complement(seq)[::-1]


def trim_non_letters(seq: str) -> str:
    """
    Remove every character that is not an ASCII letter.

    Gaps, digits, whitespace and stop symbols are all dropped; the order
    of the remaining letters is preserved.

    Example:
        >>> trim_non_letters("AC-GT123")
        "ACGT"
    """
    return _NON_LETTER_RE.sub("", seq)


def count_letters(seq: str) -> int:
    """Count the ASCII letters in a sequence without modifying it."""
    return len(trim_non_letters(seq))


def resolve_position(position: int, length: int) -> int:
    """
    Convert a 1-based position, possibly negative, to a 1-based position.

    Negative positions count from the end of the sequence: -1 is the last
    character, -3 the third from last.

    Args:
        position: 1-based position, or negative offset from the end
        length: Current sequence length

    Returns:
        Resolved 1-based position (not clamped)
    """
    if position < 0:
        return length + position + 1
    return position


def extract_subsequence(
    seq: str,
    start: Optional[int] = None,
    end: Optional[int] = None,
) -> str:
    """
    Extract a subsequence using 1-based inclusive coordinates.

    A missing start means the first character and a missing end means the
    last one. Negative coordinates are resolved with resolve_position().
    Coordinates falling outside the sequence are clamped to it, and a
    range that ends before it starts gives an empty string.

    Args:
        seq: Full sequence string
        start: Start position (1-based), or None
        end: End position (1-based, inclusive), or None

    Returns:
        Extracted subsequence

    Example:
        >>> extract_subsequence("ACGAGACGTA", 2, 7)
        "CGAGAC"
        >>> extract_subsequence("ACGAGACGTA", -3, -2)
        "GT"
    """
    length = len(seq)

    first = 1 if start is None else resolve_position(start, length)
    last = length if end is None else resolve_position(end, length)

    first = max(first, 1)
    last = min(last, length)

    if last < first:
        return ""

    return seq[first - 1:last]


def base_content(seq: str, bases: str) -> float:
    """
    Calculate the percentage of a sequence made of the given bases.

    Matching is case-insensitive on both sides, so "gc" and "GC" describe
    the same base set and lowercase (soft-masked) sequence is counted.

    Args:
        seq: Sequence string
        bases: Base set, e.g. "GC", "AT" or "N"

    Returns:
        Content as a percentage (0.0 to 100.0); 0.0 for an empty sequence
    """
    if not seq:
        return 0.0

    base_set = set(bases.upper())
    matched = sum(1 for base in seq.upper() if base in base_set)
    return 100.0 * matched / len(seq)


def gc_content(seq: str) -> float:
    """
    Calculate GC content of a DNA sequence.

    Args:
        seq: DNA sequence

    Returns:
        GC content as a percentage (0.0 to 100.0)
    """
    return base_content(seq, "GC")
