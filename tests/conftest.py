"""
Pytest fixtures for fastatab tests.

Provides temporary directories and files, sample FASTA data, and a
helper for running the command-line entry points.
"""
import io
import logging
import tempfile
from pathlib import Path

import pytest

from fastatab.utils import config


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from FASTATAB_* variables and the cached settings."""
    for key in ("FASTATAB_LOG_LEVEL", "FASTATAB_CONTENT_DIGITS", "FASTATAB_LINE_LENGTH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_file(temp_dir):
    """Create a temporary file."""
    def _create_file(name: str, content: str = "") -> Path:
        file_path = temp_dir / name
        file_path.write_text(content)
        return file_path
    return _create_file


@pytest.fixture
def sample_fasta_content():
    """Sample FASTA content for testing."""
    return """>seq1 Sample sequence 1
ACGAGA
CGTA
>seq2 Sample sequence 2
GGCC
>seq3 gapped
AC-GT123
"""


@pytest.fixture
def sample_fasta(temp_file, sample_fasta_content):
    """Write the sample FASTA content to a file."""
    return temp_file("sample.fasta", sample_fasta_content)


@pytest.fixture
def stdin(monkeypatch):
    """Replace sys.stdin with the given text."""
    def _set_stdin(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _set_stdin


@pytest.fixture
def run_cli(capsys):
    """
    Run a CLI main() and return (exit code, stdout, stderr).

    A main() that returns normally counts as exit code 0.
    """
    def _run(main, argv):
        try:
            main(argv)
            code = 0
        except SystemExit as e:
            code = e.code if e.code is not None else 0
        captured = capsys.readouterr()
        return code, captured.out, captured.err
    return _run


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
