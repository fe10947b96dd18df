"""
fastatab Tests

Test Organization:
- test_sequence.py: Sequence operations
- test_options.py: Flag resolution and --subseq validation
- test_transformer.py: Record transformer
- test_fasta.py: FASTA reading and formatting
- test_fasta2tab.py / test_tab2fasta.py: Command-line tools
- test_config.py: Environment settings and logging setup

Running Tests:
    # Run all tests
    pytest tests/

    # Run a single module
    pytest tests/test_transformer.py
"""
