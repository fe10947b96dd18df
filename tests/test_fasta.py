"""
Tests for FASTA reading and formatting utilities.
"""
import gzip
import io

import pytest

from fastatab.utils.fasta import (
    format_fasta_entry,
    is_stdin,
    iter_fasta_records,
    parse_fasta_stream,
)


class TestParseFastaStream:
    """Tests for parse_fasta_stream."""

    def test_multiline_sequences_joined(self, sample_fasta_content):
        """Should join sequence lines into one string."""
        records = list(parse_fasta_stream(io.StringIO(sample_fasta_content)))
        assert records[0] == ("seq1 Sample sequence 1", "ACGAGACGTA")
        assert records[1] == ("seq2 Sample sequence 2", "GGCC")
        assert records[2] == ("seq3 gapped", "AC-GT123")

    def test_whitespace_removed_from_sequence(self):
        """Should drop spaces and tabs inside sequence lines."""
        records = list(parse_fasta_stream(io.StringIO(">s\nAC GT\nA\tC\r\n")))
        assert records == [("s", "ACGTAC")]

    def test_header_keeps_tabs(self):
        """Should keep tabs inside the header text."""
        records = list(parse_fasta_stream(io.StringIO(">id\tdesc\nACGT\n")))
        assert records == [("id\tdesc", "ACGT")]

    def test_header_trailing_whitespace_dropped(self):
        """Trailing tabs and spaces on the header line are not part of the header."""
        records = list(parse_fasta_stream(io.StringIO(">id\tdesc\t \nACGT\n")))
        assert records == [("id\tdesc", "ACGT")]

    def test_empty_sequence(self):
        """Should yield records with no sequence lines."""
        records = list(parse_fasta_stream(io.StringIO(">empty\n>full\nAC\n")))
        assert records == [("empty", ""), ("full", "AC")]

    def test_empty_input(self):
        """Should yield nothing for empty input."""
        assert list(parse_fasta_stream(io.StringIO(""))) == []


class TestIterFastaRecords:
    """Tests for iter_fasta_records."""

    def test_files_in_order(self, temp_file):
        """Should read files left to right, records in file order."""
        first = temp_file("a.fasta", ">a1\nAA\n>a2\nCC\n")
        second = temp_file("b.fasta", ">b1\nGG\n")

        headers = [h for h, _ in iter_fasta_records([second, first])]
        assert headers == ["b1", "a1", "a2"]

    def test_stdin_dash(self, temp_file):
        """Should read '-' from the given stdin stream in position."""
        path = temp_file("a.fasta", ">file\nAA\n")
        stdin = io.StringIO(">piped\nTT\n")

        records = list(iter_fasta_records([path, "-"], stdin=stdin))
        assert records == [("file", "AA"), ("piped", "TT")]

    def test_no_sources_reads_stdin(self):
        """Should default to stdin."""
        stdin = io.StringIO(">piped\nTT\n")
        assert list(iter_fasta_records([], stdin=stdin)) == [("piped", "TT")]

    def test_gzip(self, temp_dir):
        """Should transparently read gzipped files."""
        path = temp_dir / "seqs.fasta.gz"
        with gzip.open(path, "wt") as fh:
            fh.write(">z\nACGT\nAC\n")

        assert list(iter_fasta_records([path])) == [("z", "ACGTAC")]

    def test_missing_file(self, temp_dir):
        """Should raise OSError for unreadable files."""
        with pytest.raises(OSError):
            list(iter_fasta_records([temp_dir / "missing.fasta"]))

    def test_lazy(self, temp_file, temp_dir):
        """Should not open later files before earlier ones are consumed."""
        path = temp_file("a.fasta", ">a\nAA\n")
        records = iter_fasta_records([path, temp_dir / "missing.fasta"])

        assert next(records) == ("a", "AA")
        with pytest.raises(OSError):
            next(records)


class TestIsStdin:
    """Tests for is_stdin."""

    def test_dash(self):
        """'-' names stdin."""
        assert is_stdin("-")

    def test_path(self, temp_dir):
        """Paths do not name stdin."""
        assert not is_stdin(temp_dir / "x.fasta")


class TestFormatFastaEntry:
    """Tests for format_fasta_entry."""

    def test_wrapping(self):
        """Should wrap at the line length."""
        assert format_fasta_entry("s d", "ACGTACGTAC", 4) == ">s d\nACGT\nACGT\nAC"

    def test_no_wrap(self):
        """Line length 0 writes one sequence line."""
        assert format_fasta_entry("s", "ACGTACGTAC", 0) == ">s\nACGTACGTAC"

    def test_empty_sequence(self):
        """Should write only the header for empty sequences."""
        assert format_fasta_entry("s", "", 60) == ">s"
        assert format_fasta_entry("s", "", 0) == ">s"
