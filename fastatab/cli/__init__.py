"""
Command-line tools.

Modules:
- fasta2tab: FASTA to tab-delimited rows
- tab2fasta: tab-delimited rows to FASTA
"""
