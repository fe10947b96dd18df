"""
fastatab: FASTA to table conversion

Converts FASTA records to tab-delimited rows and back, for use in shell
pipelines with sort, awk and sed.

Packages:
- core: Transformation options and the record transformer
- utils: FASTA, sequence, table I/O, configuration and logging helpers
- cli: Command-line tools (fasta2tab, tab2fasta)

Usage:
    fasta2tab -rc -l --gc sequences.fasta > sequences.tab
    tab2fasta sequences.tab > sequences.fasta

Environment Variables:
    FASTATAB_LOG_LEVEL: Logging level (default: WARNING)
    FASTATAB_CONTENT_DIGITS: Decimals for content columns (default: 2)
    FASTATAB_LINE_LENGTH: tab2fasta line width (default: 60)
"""

__version__ = "1.0.0"
