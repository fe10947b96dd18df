"""
fastatab Core Package

Modules:
- options: Flag resolution into immutable TransformOptions
- transformer: Per-record FASTA to table row transformation
"""
