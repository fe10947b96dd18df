"""
fastatab utility library.

Modules:
--------
logging_setup
    Logging configuration utilities.
config
    Environment configuration.
fasta
    FASTA reading and formatting.
sequence
    DNA sequence manipulation.
file_io
    Tab-delimited row I/O.
"""

from fastatab.utils.logging_setup import setup_logging
from fastatab.utils.config import load_settings, Settings
from fastatab.utils.fasta import iter_fasta_records, format_fasta_entry
from fastatab.utils.sequence import (
    reverse_complement,
    complement,
    extract_subsequence,
    base_content,
    gc_content,
)
from fastatab.utils.file_io import write_rows, read_tab_delimited

__all__ = [
    # logging_setup
    "setup_logging",
    # config
    "load_settings",
    "Settings",
    # fasta
    "iter_fasta_records",
    "format_fasta_entry",
    # sequence
    "reverse_complement",
    "complement",
    "extract_subsequence",
    "base_content",
    "gc_content",
    # file_io
    "write_rows",
    "read_tab_delimited",
]
